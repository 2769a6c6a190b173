# errors.py
"""Typed errors for the party API.

Every error knows the HTTP status it maps to and renders itself as the
single-field body ``{"error": <message>}``.
"""


class PartyError(Exception):
    """Base exception for all party API errors."""

    def __init__(self, message: str, http_status: int = 500):
        super().__init__(message)
        self.message = message
        self.http_status = http_status

    def to_response(self) -> dict:
        return {"error": self.message}


class IndexParseError(PartyError):
    """The index path segment is not a usable party position."""

    def __init__(self, segment: str, reason: str = "invalid syntax"):
        super().__init__(f'parsing index "{segment}": {reason}', http_status=400)
        self.segment = segment


class UnknownMoveType(PartyError):
    """A move's type has no dynamax counterpart."""

    def __init__(self, move_type: str):
        super().__init__(f"unknown type: {move_type}", http_status=500)
        self.move_type = move_type


class RouteNotFound(PartyError):
    def __init__(self, path: str):
        super().__init__(f"no route for {path}", http_status=404)
        self.path = path
