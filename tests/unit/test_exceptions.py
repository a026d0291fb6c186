r"""Unit tests for the error taxonomy."""

from __future__ import annotations

import pytest

from decnet.exceptions import (
    BadRequestError,
    BuildError,
    BuildErrorReason,
    ClientError,
    DecError,
    DecodingFailedError,
    ErrorKind,
    ForbiddenError,
    InvalidRequestError,
    NetworkError,
    NotFoundError,
    ServerError,
    ServiceUnavailableError,
    UnauthorizedError,
    UnknownError,
    classify_status,
)

#####################################
#     Tests for classify_status     #
#####################################


@pytest.mark.parametrize("status_code", [200, 201, 204, 250, 299])
def test_classify_status_success(status_code: int) -> None:
    assert classify_status(status_code, b"{}") is None


@pytest.mark.parametrize(
    ("status_code", "error_class"),
    [
        (400, BadRequestError),
        (401, UnauthorizedError),
        (403, ForbiddenError),
        (404, NotFoundError),
        (500, ServerError),
        (501, ServerError),
        (502, ServerError),
        (503, ServiceUnavailableError),
        (504, ServerError),
        (599, ServerError),
    ],
)
def test_classify_status_dedicated_errors(status_code: int, error_class: type[DecError]) -> None:
    error = classify_status(status_code, b"payload")
    assert type(error) is error_class
    assert error.body == b"payload"
    assert error.status_code == status_code


@pytest.mark.parametrize("status_code", [402, 405, 409, 418, 422, 429, 499])
def test_classify_status_client_error(status_code: int) -> None:
    error = classify_status(status_code, b"payload")
    assert isinstance(error, ClientError)
    assert error.status_code == status_code
    assert error.body == b"payload"


@pytest.mark.parametrize("status_code", [100, 199, 301, 304, 399, 600, 999])
def test_classify_status_unknown(status_code: int) -> None:
    assert isinstance(classify_status(status_code), UnknownError)


def test_classify_status_without_body() -> None:
    assert classify_status(404).body is None


##############################
#     Tests for equality     #
##############################


def test_errors_of_same_kind_ignore_body() -> None:
    assert NotFoundError(body=b"a") == NotFoundError(body=b"b")
    assert ServerError(body=b"a", status_code=500) == ServerError(status_code=502)


def test_errors_of_different_kind_differ() -> None:
    assert NotFoundError() != ForbiddenError()
    assert ServerError() != ServiceUnavailableError()


def test_client_error_compares_status_code() -> None:
    assert ClientError(409, b"a") == ClientError(409, b"b")
    assert ClientError(409) != ClientError(422)


def test_decoding_failed_compares_message() -> None:
    assert DecodingFailedError("missing id") == DecodingFailedError("missing id")
    assert DecodingFailedError("missing id") != DecodingFailedError("bad type")


def test_network_error_compares_cause_text() -> None:
    assert NetworkError(ConnectionError("refused")) == NetworkError(OSError("refused"))
    assert NetworkError(ConnectionError("refused")) != NetworkError(ConnectionError("reset"))


def test_build_error_equals_invalid_request() -> None:
    error = BuildError(BuildErrorReason.INVALID_BASE_URL, "bad url")
    assert error == InvalidRequestError()
    assert isinstance(error, InvalidRequestError)
    assert error.reason is BuildErrorReason.INVALID_BASE_URL


def test_error_not_equal_to_other_objects() -> None:
    assert NotFoundError() != "not found"


def test_errors_are_hashable() -> None:
    assert len({NotFoundError(body=b"a"), NotFoundError(body=b"b"), ClientError(409)}) == 2


############################################
#     Tests for messages and attributes    #
############################################


@pytest.mark.parametrize(
    ("error", "kind", "message"),
    [
        (InvalidRequestError(), ErrorKind.INVALID_REQUEST, "Invalid request"),
        (BadRequestError(), ErrorKind.BAD_REQUEST, "Bad request"),
        (UnauthorizedError(), ErrorKind.UNAUTHORIZED, "Unauthorized"),
        (ForbiddenError(), ErrorKind.FORBIDDEN, "Forbidden"),
        (NotFoundError(), ErrorKind.NOT_FOUND, "Not found"),
        (ClientError(418), ErrorKind.CLIENT_ERROR, "Client error: 418"),
        (ServerError(), ErrorKind.SERVER_ERROR, "Server error"),
        (ServiceUnavailableError(), ErrorKind.SERVICE_UNAVAILABLE, "Service unavailable"),
        (DecodingFailedError("oops"), ErrorKind.DECODING_FAILED, "Decoding failed: oops"),
        (NetworkError(ConnectionError("down")), ErrorKind.NETWORK_ERROR, "Network error: down"),
        (UnknownError(), ErrorKind.UNKNOWN, "Unknown error"),
    ],
)
def test_error_kind_and_message(error: DecError, kind: ErrorKind, message: str) -> None:
    assert error.kind is kind
    assert str(error) == message


def test_network_error_keeps_cause() -> None:
    cause = ConnectionError("down")
    assert NetworkError(cause).cause is cause


def test_errors_can_be_caught_as_dec_error() -> None:
    with pytest.raises(DecError):
        raise NotFoundError
