"""Rich terminal display for swadgics."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from swadgics.colors import COLOR_NAMES

console = Console()
error_console = Console(stderr=True)


def _safe_color(color: str) -> str:
    """Map a shield color name to a Rich color."""
    named = COLOR_NAMES.get(color)
    if named is None:
        return "grey50"
    return f"#{named.hex}"


def shield_preview(label: str, message: str | None, color: str) -> str:
    """Rich markup imitating the shield: [ label | message ]."""
    if message is None:
        return f"[white on {_safe_color(color)}] {escape(label)} [/]"
    return f"[white on {_safe_color('grey')}] {escape(label)} [/][white on {_safe_color(color)}] {escape(message)} [/]"


def print_process_result(result: dict) -> None:
    """Print the outcome of processing one image."""
    lines: list[str] = []
    lines.append("")
    lines.append(f"  Saved to: [bold]{escape(str(result.get('output', '')))}[/]")
    lines.append(f"  Size: {result.get('width', 0)}x{result.get('height', 0)}")
    if result.get("grayscale"):
        lines.append("  Converted to grayscale")
    shield = result.get("shield")
    if shield:
        lines.append(
            "  Shield: "
            + shield_preview(shield.get("label", ""), shield.get("message"), shield.get("color", "grey"))
        )
        left, top = shield.get("position", (0, 0))
        lines.append(
            f"  {shield.get('width', 0)}x{shield.get('height', 0)} at ({left}, {top}),"
            f" gravity {shield.get('gravity', '')}"
        )
    badge = result.get("badge")
    if badge:
        lines.append(f"  Badge: {escape(str(badge))}")
    lines.append("")

    content = "\n".join(lines)
    panel = Panel(
        content,
        title=f"[bold]{escape(str(result.get('input', '')))}[/]",
        box=box.ROUNDED,
        border_style="green",
        width=60,
    )
    console.print(panel)


def print_error(message: str) -> None:
    error_console.print(f"[bold red]error:[/] {escape(message)}")
