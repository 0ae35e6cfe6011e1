"""Domain errors shared by services and the HTTP layer."""


class NotFoundError(LookupError):
    """Raised when a user's record does not exist."""
