"""Root of the postservice exception hierarchy."""


class PostServiceError(Exception):
    """Base for every error raised by the domain and its adapters.

    The API layer maps subclasses to HTTP problem details; anything else
    escaping a handler is a bug and becomes a 500.
    """

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
