"""Backend and client-facing error value types."""

from dataclasses import dataclass

from botocore.exceptions import BotoCoreError, ClientError


@dataclass(frozen=True)
class BackendError:
    """Error reported by the identity provider."""

    code: str
    message: str = ""

    @classmethod
    def from_client_error(cls, error: ClientError) -> "BackendError":
        """Build from a botocore ClientError raised by a Cognito call.

        Args:
            error: The ClientError raised by boto3.

        Returns:
            BackendError carrying Cognito's error code and message.
        """
        details = error.response.get("Error", {})
        return cls(code=details.get("Code", ""), message=details.get("Message", ""))

    @classmethod
    def from_botocore_error(cls, error: ClientError | BotoCoreError) -> "BackendError":
        """Build from any botocore failure.

        Errors raised before Cognito answered (bad parameters, no connection,
        missing credentials) carry no error code; the exception class name
        stands in for it.
        """
        if isinstance(error, ClientError):
            return cls.from_client_error(error)
        return cls(code=type(error).__name__, message=str(error))


@dataclass(frozen=True)
class ClassifiedError:
    """The only error shape ever returned to a caller."""

    http_status: int
    message: str

    def to_response_body(self) -> dict:
        """Serialize to the ``{status, data: {message}}`` envelope."""
        return {"status": self.http_status, "data": {"message": self.message}}


class IdentityOperationError(Exception):
    """An identity operation failed with a classified backend error."""

    def __init__(self, operation: str, backend_error: BackendError, classified: ClassifiedError):
        super().__init__(f"{operation} failed with {backend_error.code}: {classified.message}")
        self.operation = operation
        self.backend_error = backend_error
        self.classified = classified
