"""Custom exceptions for the stats context."""

from typing import Optional


class StatsLookupError(Exception):
    """
    Exception raised when player stats cannot be fetched or decoded.

    Attributes:
        message: Error description
        player: Normalized player identifier that was looked up
        status_code: HTTP status code, if the server answered
        original_error: The underlying httpx or decoding error
    """

    def __init__(
        self,
        message: str,
        player: Optional[str] = None,
        status_code: Optional[int] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.player = player
        self.status_code = status_code
        self.original_error = original_error

        parts = [message]

        if player:
            parts.append(f"Player: {player}")

        if status_code is not None:
            parts.append(f"Status: {status_code}")

        if original_error:
            parts.append(f"Original error: {original_error!r}")

        super().__init__("\n".join(parts))
