import enum

from fastapi import status


class ErrorKind(str, enum.Enum):
    MethodNotAllowed = "MethodNotAllowed"
    InvalidInput = "InvalidInput"
    ConfigurationMissing = "ConfigurationMissing"
    InvalidCredential = "InvalidCredential"
    UpstreamFailure = "UpstreamFailure"


class ChatError(Exception):
    """Base for every failure the chat gateway reports to the caller.

    `message` is what the caller sees; `detail` is the underlying cause and
    only ever goes to the log.
    """

    kind: ErrorKind = ErrorKind.UpstreamFailure
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message, detail=None):
        super().__init__(message)

        self.message = message
        self.detail = detail

    def __str__(self):
        if self.detail:
            return f"{self.kind.value} [{self.status_code}]: {self.message} ({self.detail})"
        return f"{self.kind.value} [{self.status_code}]: {self.message}"


class MethodNotAllowedError(ChatError):
    kind = ErrorKind.MethodNotAllowed
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED


class InvalidInputError(ChatError):
    kind = ErrorKind.InvalidInput
    status_code = status.HTTP_400_BAD_REQUEST


class ConfigurationMissingError(ChatError):
    kind = ErrorKind.ConfigurationMissing
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class InvalidCredentialError(ChatError):
    kind = ErrorKind.InvalidCredential
    status_code = status.HTTP_401_UNAUTHORIZED


class UpstreamFailureError(ChatError):
    kind = ErrorKind.UpstreamFailure
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
