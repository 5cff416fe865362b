"""Tests for the error taxonomy."""

from svg2tsx.errors import (
    ErrorType,
    SvgParseError,
    app_error_from_parse_error,
    create_app_error,
    get_user_friendly_message,
)


def test_every_error_type_has_message():
    for error_type in ErrorType:
        assert get_user_friendly_message(error_type)


def test_create_app_error_default_message():
    error = create_app_error(ErrorType.FILE_ERROR)
    assert error.message == get_user_friendly_message(ErrorType.FILE_ERROR)
    assert error.details is None


def test_create_app_error_explicit_message():
    error = create_app_error(ErrorType.CONVERSION_ERROR, "boom", "trace")
    assert (error.message, error.details) == ("boom", "trace")


def test_parse_error_position_carried():
    error = app_error_from_parse_error(SvgParseError("bad tag", line=3, column=7))
    assert error.type == ErrorType.PARSE_ERROR
    assert error.details == "bad tag"
    assert (error.line, error.column) == (3, 7)


def test_parse_error_json_shape():
    data = app_error_from_parse_error(SvgParseError("x")).model_dump(mode="json")
    assert data["type"] == "PARSE_ERROR"
    assert data["line"] is None
