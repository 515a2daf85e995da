# server/core/errors.py

from fastapi import status


class FitQuestError(Exception):
    """
    Base class for failures reported to API callers.
    Each subclass fixes the HTTP status its message is returned with.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthenticationError(FitQuestError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ValidationError(FitQuestError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(FitQuestError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(FitQuestError):
    status_code = status.HTTP_409_CONFLICT


class ServerError(FitQuestError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
