"""Errors raised when the program cannot start or parse its scene."""

from __future__ import annotations

from typing import Optional


class MiniRTError(Exception):
    """Base error; its text is the message shown to the user."""

    message = "Error\n"
    exit_code = 1

    def __init__(self, detail: Optional[str] = None) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        if self.detail is None:
            return self.message
        return f"Error\n{self.detail}\n"


class EnvironError(MiniRTError):
    """The process environment is empty."""

    message = "Error\nInvalid environement\n"
    exit_code = 1


class UsageError(MiniRTError):
    """The program was given the wrong number of arguments."""

    message = "Error\nUsage: ./minirt <file.rt>\n"
    exit_code = 2


class FilenameError(MiniRTError):
    """The scene file does not end in ``.rt``."""

    message = "Error\nInvalid filename. Format: *.rt\n"
    exit_code = 3


class FilePermissionError(MiniRTError):
    """The scene file could not be opened for reading."""

    message = "Error\nInvalid file permissions\n"
    exit_code = 3


class SceneError(MiniRTError):
    """The scene file content is invalid or incomplete."""

    message = "Error\nInvalid scene\n"
    exit_code = 3