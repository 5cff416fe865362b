"""Error taxonomy shared by the core, the file helpers and the HTTP layer."""

from __future__ import annotations

import enum

from pydantic import BaseModel


class SvgParseError(ValueError):
    """Raised by the parser for empty input, malformed XML, or a non-<svg> root.

    ``line``/``column`` are best effort: they are set only when the XML engine reports them.
    """

    def __init__(self, message: str, line: int | None = None, column: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column


class FileIOError(Exception):
    """Reading an SVG or writing a TSX file failed."""


class ConversionError(Exception):
    """Optimizing or generating code failed after the SVG parsed."""


class ErrorType(str, enum.Enum):
    PARSE_ERROR = "PARSE_ERROR"
    CONVERSION_ERROR = "CONVERSION_ERROR"
    FILE_ERROR = "FILE_ERROR"
    CLIPBOARD_ERROR = "CLIPBOARD_ERROR"


_USER_MESSAGES = {
    ErrorType.PARSE_ERROR: "Could not parse the SVG code. Check that it is valid SVG markup.",
    ErrorType.CONVERSION_ERROR: "An error occurred while converting to TSX.",
    ErrorType.FILE_ERROR: "An error occurred while processing the file.",
    ErrorType.CLIPBOARD_ERROR: "An error occurred while accessing the clipboard.",
}


class AppError(BaseModel):
    type: ErrorType
    message: str
    details: str | None = None
    line: int | None = None
    column: int | None = None


def get_user_friendly_message(error_type: ErrorType) -> str:
    return _USER_MESSAGES.get(error_type, "An unknown error occurred.")


def create_app_error(
    error_type: ErrorType,
    message: str | None = None,
    details: str | None = None,
) -> AppError:
    return AppError(
        type=error_type,
        message=message if message is not None else get_user_friendly_message(error_type),
        details=details,
    )


def app_error_from_parse_error(exc: SvgParseError) -> AppError:
    error = create_app_error(ErrorType.PARSE_ERROR, details=exc.message)
    error.line = exc.line
    error.column = exc.column
    return error
