"""Tests for validation error formatting."""

import pytest
from fastapi.exceptions import RequestValidationError

from src.taskboard.core.exceptions import (
    ConflictError,
    InvalidReferenceError,
    NotFoundError,
    format_validation_errors,
)

pytestmark = pytest.mark.unit


def test_body_prefix_is_dropped():
    exc = RequestValidationError(
        [{"type": "missing", "loc": ("body", "name"), "msg": "Field required", "input": {}}]
    )

    assert format_validation_errors(exc) == "name: Field required"


def test_multiple_errors_are_joined():
    exc = RequestValidationError(
        [
            {"type": "missing", "loc": ("body", "description"), "msg": "Field required"},
            {"type": "missing", "loc": ("body", "due_date"), "msg": "Field required"},
        ]
    )

    assert format_validation_errors(exc) == (
        "description: Field required; due_date: Field required"
    )


def test_invalid_json_has_readable_message():
    exc = RequestValidationError(
        [{"type": "json_invalid", "loc": ("body", 1), "msg": "JSON decode error"}]
    )

    assert format_validation_errors(exc) == "Request body is not valid JSON"


def test_path_parameter_errors_keep_name():
    exc = RequestValidationError(
        [
            {
                "type": "int_parsing",
                "loc": ("path", "project_id"),
                "msg": "Input should be a valid integer",
            }
        ]
    )

    assert format_validation_errors(exc) == "project_id: Input should be a valid integer"


@pytest.mark.parametrize(
    ("error_cls", "status_code"),
    [(NotFoundError, 404), (InvalidReferenceError, 400), (ConflictError, 409)],
)
def test_service_errors_carry_status(error_cls, status_code):
    error = error_cls("boom")

    assert error.status_code == status_code
    assert error.message == "boom"
