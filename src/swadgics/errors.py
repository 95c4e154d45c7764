"""Errors raised while processing images."""

from __future__ import annotations

from pathlib import Path


class SwadgicsError(Exception):
    """Base class for errors reported to the user."""


class CouldNotRead(SwadgicsError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Could not read file {path}")


class CouldNotWrite(SwadgicsError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Could not write file {path}")


class UnknownFileFormat(SwadgicsError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Format of file {path} unknown")


class OutputFileOnlyWhenOneInput(SwadgicsError):
    def __init__(self):
        super().__init__("An output file can only be specified when there is only one input file")
