from typing import Optional

from botocore.exceptions import ClientError


class TailError(Exception):
    """Base class for all errors that end a tailing run."""

    message: str

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(TailError):
    """Raised for missing or invalid run parameters, before any API call is made."""

    pass


class ProviderError(TailError):
    """
    Raised when a CloudFormation API call fails (network, credentials, stack not found, ...). It is never
    retried by the tailer and ends the run.
    """

    operation: str
    code: Optional[str]

    def __init__(self, message: str, operation: str, code: Optional[str] = None):
        super().__init__(message)
        self.operation = operation
        self.code = code

    @classmethod
    def from_boto_error(cls, operation: str, error: Exception) -> "ProviderError":
        if isinstance(error, ClientError):
            details = error.response.get("Error", {})
            code = details.get("Code")
            message = details.get("Message") or str(error)
            return cls(f"{operation} failed ({code}): {message}", operation=operation, code=code)
        return cls(f"{operation} failed: {error}", operation=operation)

    def __str__(self):
        return self.message
