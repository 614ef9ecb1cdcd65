"""Custom exception hierarchy for the batch-cognito tool."""

from botocore.exceptions import ClientError

# Cognito error codes reported when a caller is being throttled
THROTTLING_ERROR_CODES = frozenset(
    {
        "TooManyRequestsException",
        "ThrottlingException",
        "Throttling",
        "LimitExceededException",
    }
)


class BatchCognitoError(Exception):
    """Base exception for batch-cognito.

    This is the root exception class for all tool-specific errors.
    All other custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, details: str | None = None):
        """Initialize the exception.

        Args:
            message: The main error message
            details: Optional additional details about the error
        """
        self.message = message
        self.details = details
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the complete error message."""
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigError(BatchCognitoError):
    """Configuration errors.

    Raised when the AWS region, profile or credentials needed to reach
    the user pool cannot be resolved.
    """


class ValidationError(BatchCognitoError):
    """Input validation errors.

    Raised when user input fails validation, such as an empty pool ID
    or a non-positive timeout.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: str | None = None,
        details: str | None = None,
    ):
        """Initialize the validation error.

        Args:
            message: The main error message
            field: The field that failed validation
            value: The invalid value
            details: Optional additional details about the error
        """
        self.field = field
        self.value = value
        super().__init__(message, details)

    def _format_message(self) -> str:
        """Format the complete error message with validation context."""
        parts = [self.message]

        if self.field:
            parts.append(f"Field: {self.field}")

        if self.value:
            parts.append(f"Value: {self.value}")

        if self.details:
            parts.append(f"Details: {self.details}")

        return " | ".join(parts)


class FileOperationError(BatchCognitoError):
    """File operation errors.

    Raised when the CSV destination cannot be created, or when writing
    or flushing the output fails.
    """

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        operation: str | None = None,
        details: str | None = None,
    ):
        """Initialize the file operation error.

        Args:
            message: The main error message
            file_path: The file path that caused the error
            operation: The file operation that failed (open, write, flush)
            details: Optional additional details about the error
        """
        self.file_path = file_path
        self.operation = operation
        super().__init__(message, details)

    def _format_message(self) -> str:
        """Format the complete error message with file context."""
        parts = [self.message]

        if self.operation:
            parts.append(f"Operation: {self.operation}")

        if self.file_path:
            parts.append(f"File: {self.file_path}")

        if self.details:
            parts.append(f"Details: {self.details}")

        return " | ".join(parts)


class RemoteCallError(BatchCognitoError):
    """Cognito API call errors.

    Raised when a request to the Cognito Identity Provider API fails,
    whether through network, authorization, throttling or a malformed
    response.
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        error_code: str | None = None,
        page: int | None = None,
        details: str | None = None,
    ):
        """Initialize the remote call error.

        Args:
            message: The main error message
            operation: The API operation that failed (ListUsers, ...)
            error_code: The AWS error code, when one was returned
            page: The 1-based page number being requested
            details: Optional additional details about the error
        """
        self.operation = operation
        self.error_code = error_code
        self.page = page
        super().__init__(message, details)

    def _format_message(self) -> str:
        """Format the complete error message with API context."""
        parts = [self.message]

        if self.operation:
            parts.append(f"Operation: {self.operation}")

        if self.page is not None:
            parts.append(f"Page: {self.page}")

        if self.error_code:
            parts.append(f"Code: {self.error_code}")

        if self.details:
            parts.append(f"Details: {self.details}")

        return " | ".join(parts)


class ThrottlingError(RemoteCallError):
    """Throttling errors from the Cognito API.

    Kept distinct so callers can report them separately; the exporter
    does not retry them.
    """


class ExportTimeoutError(BatchCognitoError):
    """Raised when a run does not finish within its configured deadline."""

    def __init__(self, timeout: float, details: str | None = None):
        """Initialize the timeout error.

        Args:
            timeout: The configured deadline in seconds
            details: Optional additional details
        """
        self.timeout = timeout
        super().__init__(f"sync operation timed out after {timeout:g}s", details)


def wrap_client_error(
    exc: Exception, operation: str, page: int | None = None
) -> RemoteCallError:
    """Wrap boto3/botocore exceptions into the batch-cognito hierarchy.

    Args:
        exc: The original exception raised by the client call
        operation: The API operation being performed
        page: Optional 1-based page number for paginated calls

    Returns:
        RemoteCallError: Wrapped exception
    """
    if isinstance(exc, RemoteCallError):
        return type(exc)(
            message=exc.message,
            operation=exc.operation or operation,
            error_code=exc.error_code,
            page=page if page is not None else exc.page,
            details=exc.details,
        )

    if isinstance(exc, ClientError):
        error = exc.response.get("Error", {})
        error_code = error.get("Code")
        error_msg = error.get("Message") or str(exc)

        if error_code in THROTTLING_ERROR_CODES:
            return ThrottlingError(
                message=f"Request throttled: {error_msg}",
                operation=operation,
                error_code=error_code,
                page=page,
            )

        return RemoteCallError(
            message=f"{operation} failed: {error_msg}",
            operation=operation,
            error_code=error_code,
            page=page,
        )

    return RemoteCallError(
        message=f"{operation} failed: {exc}",
        operation=operation,
        page=page,
        details=f"Type: {type(exc).__name__}",
    )
