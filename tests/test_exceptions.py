"""Tests for exception classes."""

import pytest

from gerrit_groups.exceptions import (
    ApiError,
    OperationNotImplementedError,
    BadRequestError,
    MethodNotAllowedError,
    UnprocessableEntityError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    GroupNotFoundError,
    ConflictError,
    GroupExistsError,
    RateLimitError,
    ServerError,
    ServiceUnavailableError,
    NetworkError,
    TimeoutError,
    ConnectionError,
    MalformedResponseError,
    exception_from_response,
)


class TestApiError:
    """Tests for the base ApiError class."""

    def test_basic_creation(self):
        """Test creating a basic exception."""
        error = ApiError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.status_code is None
        assert error.details == {}

    def test_with_status_code(self):
        """Test exception with status code."""
        error = ApiError("Error", status_code=500)
        assert str(error) == "Error (HTTP 500)"

    def test_repr(self):
        """Test exception repr."""
        repr_str = repr(ApiError("Error", status_code=400))
        assert "ApiError" in repr_str
        assert "400" in repr_str


class TestNotFoundErrors:
    """Tests for not-found exceptions."""

    def test_not_found_details(self):
        """Test resource details are recorded."""
        error = NotFoundError(resource_type="group", resource_id="g1")
        assert error.status_code == 404
        assert error.details == {"resource_type": "group", "resource_id": "g1"}

    def test_group_not_found(self):
        """Test the group-specific error."""
        error = GroupNotFoundError("reviewers")
        assert isinstance(error, NotFoundError)
        assert error.resource_id == "reviewers"
        assert "reviewers" in error.message

    def test_group_not_found_without_id(self):
        """Test the default message."""
        assert GroupNotFoundError().message == "Group not found"


class TestConflictErrors:
    """Tests for conflict exceptions."""

    def test_group_exists(self):
        """Test the group-exists error."""
        error = GroupExistsError("reviewers")
        assert isinstance(error, ConflictError)
        assert error.status_code == 409
        assert error.name == "reviewers"


class TestClientSideErrors:
    """Tests for errors raised without a server response."""

    def test_network_errors(self):
        """Test the network error family."""
        assert isinstance(TimeoutError(), NetworkError)
        assert isinstance(ConnectionError(), NetworkError)
        assert NetworkError().status_code is None

    def test_malformed_response(self):
        """Test that malformed payloads are API errors."""
        assert isinstance(MalformedResponseError(), ApiError)

    def test_operation_not_implemented(self):
        """Test that the not-implemented condition is outside ApiError."""
        error = OperationNotImplementedError("list")
        assert isinstance(error, NotImplementedError)
        assert not isinstance(error, ApiError)
        assert error.operation == "list"
        assert "list" in str(error)


class TestExceptionFromResponse:
    """Tests for exception_from_response()."""

    @pytest.mark.parametrize(
        "status_code,exception_class",
        [
            (400, BadRequestError),
            (401, AuthenticationError),
            (403, AuthorizationError),
            (404, NotFoundError),
            (405, MethodNotAllowedError),
            (409, ConflictError),
            (422, UnprocessableEntityError),
            (429, RateLimitError),
            (500, ServerError),
            (502, ServerError),
            (503, ServiceUnavailableError),
            (599, ServerError),
            (418, ApiError),
        ],
    )
    def test_mapping(self, status_code, exception_class):
        """Test status code to exception class mapping."""
        error = exception_from_response(status_code, "message")
        assert type(error) is exception_class
        assert error.status_code == status_code
        assert error.message == "message"
