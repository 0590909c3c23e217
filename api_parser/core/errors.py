"""
Parser Errors
=============

Exception hierarchy for executable resolution, invocation and decoding.
Resolution errors are raised at construction time; invocation and decoding
errors are raised for single files and captured as data in batch calls.
"""

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class ApiParserError(Exception):
    """Base class for all API parser errors."""

    pass


class InputNotFoundError(ApiParserError):
    """Raised when an API file does not exist."""

    def __init__(self, path: PathLike):
        self.path = str(path)
        super().__init__(f"API file not found: {self.path}")


class MissingExecutableError(ApiParserError):
    """Raised when an explicitly configured executable does not exist."""

    def __init__(self, path: PathLike):
        self.path = str(path)
        super().__init__(f"API parser executable does not exist: {self.path}")


class NotExecutableError(ApiParserError):
    """Raised when the configured executable lacks execute permission."""

    def __init__(self, path: PathLike):
        self.path = str(path)
        super().__init__(f"API parser file is not executable: {self.path}")


class ToolchainUnavailableError(ApiParserError):
    """Raised when no executable was found and Go is not installed.

    The message carries installation guidance for the current OS.
    """

    pass


class CompileFailedError(ApiParserError):
    """Raised when every lookup step failed and building the parser failed too."""

    def __init__(self, message: str, output: Optional[str] = None):
        self.output = output
        if output:
            message = f"{message}\nBuild output:\n{output}"
        super().__init__(message)


class ExecutionFailedError(ApiParserError):
    """Raised when the parser exits with a non-zero status."""

    def __init__(self, output: str, returncode: Optional[int] = None):
        self.output = output
        self.returncode = returncode
        super().__init__(f"API parse execution failed: {output}")


class DecodeFailedError(ApiParserError):
    """Raised when the parser output is not a JSON object."""

    def __init__(self, reason: str, raw: str):
        self.reason = reason
        self.raw = raw
        super().__init__(f"JSON decode failed: {reason}\nRaw output: {raw}")
