class PitchTrackerException(Exception):
    """Base error for pitch-tracker failures.

    Attributes:
        message: Human-readable error description.
        cause: Optional underlying exception that caused this error.
    """

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class UpstreamUnavailableError(PitchTrackerException):
    """A required Stats API request failed in transport or returned a non-success status."""

    def __init__(
        self,
        message: str,
        *,
        url: str,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause)
        self.url = url
        self.status_code = status_code


class GameFeedUnavailableError(PitchTrackerException):
    """The live feed for one game could not be loaded."""

    def __init__(self, game_id: int, reason: str, cause: Exception | None = None) -> None:
        super().__init__(f"Pitch feed for game {game_id} unavailable ({reason})", cause)
        self.game_id = game_id
        self.reason = reason
