"""
errors.py
---------
Labeled failure signals raised by the model and repository layers.
Each carries an HTTP-equivalent `status` for the presentation layer to surface.
"""


class LunchlyError(Exception):
    """Base class for all application errors."""

    status: int = 500

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class BadRequestError(LunchlyError):
    """Invalid input: raised when a field assignment fails validation."""

    status = 400


class ForbiddenError(LunchlyError):
    """A change that is never allowed, e.g. moving a reservation to another customer."""

    status = 403


class NotFoundError(LunchlyError):
    """No row matches the requested id."""

    status = 404
