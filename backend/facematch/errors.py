from typing import Optional


class FaceMatchError(Exception):
    """Base error carrying a player-facing message and an HTTP status."""

    status_code = 400

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class StorageError(FaceMatchError):
    status_code = 500


class PhotoNotFoundError(FaceMatchError):
    status_code = 404


class InsufficientDataError(FaceMatchError):
    status_code = 200


class DivisionUndefinedError(FaceMatchError):
    status_code = 200


class NoQuestionServedError(FaceMatchError):
    status_code = 409


class AlertDeliveryError(FaceMatchError):
    status_code = 502
