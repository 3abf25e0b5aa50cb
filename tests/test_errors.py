import pytest

from telegraphapi.errors import (
    APIError,
    EmptyAccessTokenError,
    InvalidDataTypeError,
    NoInputDataError,
    TelegraphError,
)


@pytest.mark.parametrize(
    ("error_class", "message"),
    [
        (InvalidDataTypeError, "invalid data type"),
        (NoInputDataError, "no input data"),
        (EmptyAccessTokenError, "empty access_token"),
    ],
)
def test_default_messages(error_class, message):
    assert str(error_class()) == message


@pytest.mark.parametrize(
    ("factory", "message"),
    [
        (InvalidDataTypeError, "invalid data type"),
        (NoInputDataError, "no input data"),
        (EmptyAccessTokenError, "empty access_token"),
        (lambda: APIError("x"), "x"),
    ],
)
def test_all_errors_share_base(factory, message):
    error = factory()
    caught = None
    try:
        raise error
    except TelegraphError as exc:
        caught = exc
    assert caught is error
    assert str(caught) == message


def test_invalid_data_type_is_type_error():
    error = InvalidDataTypeError()
    caught = None
    try:
        raise error
    except TypeError as exc:
        caught = exc
    assert caught is error
    assert str(caught) == "invalid data type"


def test_api_error_keeps_message():
    error = APIError("PAGE_NOT_FOUND")
    assert error.message == "PAGE_NOT_FOUND"
    assert str(error) == "PAGE_NOT_FOUND"