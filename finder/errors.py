"""
Fetch error taxonomy.

Connectors raise these; finder.cycle.run_fetch is the only place that catches
them and turns them into a Failure status for display.
"""

from typing import Optional


class RecipeFetchError(Exception):
    """Base class for errors raised while fetching recipes."""

    def __init__(self, message: str, user_message: Optional[str] = None) -> None:
        super().__init__(message)
        self.user_message = user_message or message


class NetworkFailure(RecipeFetchError):
    """The request could not be sent or no response was received."""


class ResponseFailure(RecipeFetchError):
    """The API answered, but with a non-success status or an unusable body."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        user_message: Optional[str] = None,
    ) -> None:
        super().__init__(message, user_message=user_message)
        self.status_code = status_code
