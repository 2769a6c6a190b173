# party_api.py
import json
import logging
import re
from typing import Any, Tuple, Union

from fastapi import APIRouter, Depends, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send

from errors import IndexParseError
from party import Pokemon

logger = logging.getLogger(__name__)

router = APIRouter()

# same syntax strconv.Atoi accepts: optional sign, decimal digits only
_INDEX_RE = re.compile(r"[+-]?[0-9]+")


# ----- path cleaning -----
def clean_path(path: str) -> str:
    """
    Lexically normalizes a URL path: repeated slashes collapse, "." segments
    drop, ".." removes the previous segment (never above the root) and the
    trailing slash goes away. "//party/../party/" -> "/party".
    """
    parts = []
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if parts:
                parts.pop()
            continue
        parts.append(segment)
    return "/" + "/".join(parts)


class CleanPathMiddleware:
    """Pure ASGI middleware that routes on the cleaned path."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            cleaned = clean_path(scope["path"])
            if cleaned != scope["path"]:
                logger.debug("path %s cleaned to %s", scope["path"], cleaned)
                scope = dict(scope, path=cleaned)
        await self.app(scope, receive, send)


# ----- rendering -----
def render_response(data: Any, status_code: int = 200) -> Response:
    # the status is fixed before encoding; an encode failure only empties the body
    try:
        body = json.dumps(jsonable_encoder(data), ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        logger.error("render error: %s", exc)
        body = ""
    return Response(content=body, status_code=status_code, media_type="application/json")


def render_error(error: Union[Exception, str], status_code: int) -> Response:
    return render_response({"error": str(error)}, status_code)


# ----- index helpers -----
def parse_index(segment: str) -> int:
    if not _INDEX_RE.fullmatch(segment):
        raise IndexParseError(segment)
    try:
        index = int(segment)
    except ValueError:
        # past the interpreter's digit limit
        raise IndexParseError(segment, "value out of range") from None
    if index < 0:
        raise IndexParseError(segment, "index must not be negative")
    return index


def clamp_index(index: int, party: Tuple[Pokemon, ...]) -> int:
    last = len(party) - 1
    if index > last:
        logger.debug("index %d clamped to %d", index, last)
        return last
    return index


def get_party(request: Request) -> Tuple[Pokemon, ...]:
    return request.app.state.party


def _pokemon_at(segment: str, party: Tuple[Pokemon, ...]) -> Pokemon:
    return party[clamp_index(parse_index(segment), party)]


# ----- endpoints (registration order is match order) -----
@router.api_route("", methods=["GET", "HEAD"])
def list_party(party: Tuple[Pokemon, ...] = Depends(get_party)):
    return render_response(party)


@router.api_route("/{index}", methods=["GET", "HEAD"])
def pokemon(index: str, party: Tuple[Pokemon, ...] = Depends(get_party)):
    """
    Returns the party member at `index`. Indices past the end of the party
    are clamped to the last member instead of being rejected.
    """
    return render_response(_pokemon_at(index, party))


@router.api_route("/{index}/move", methods=["GET", "HEAD"])
def moves(index: str, dynamax: bool = False, party: Tuple[Pokemon, ...] = Depends(get_party)):
    """
    Returns the moves of the party member at `index` (same clamping as above).
    With ?dynamax=true every move is swapped for its max move; an unknown
    move type fails the whole request with 500.
    """
    return render_response(_pokemon_at(index, party).get_moves(dynamax))
