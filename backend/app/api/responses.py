"""Handler outcomes and their HTTP rendering.

Handlers never build framework responses themselves. They return one of the
four outcome variants below and the route layer turns it into a response.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union

from fastapi import Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


@dataclass(frozen=True)
class Ok:
    """200 with a JSON body."""
    body: Any


@dataclass(frozen=True)
class Empty:
    """Success without payload; ``resource_id`` marks a newly created record."""
    status_code: int = status.HTTP_200_OK
    resource_id: int | None = None


@dataclass(frozen=True)
class NotFound:
    """404 with no payload."""


@dataclass(frozen=True)
class ServerError:
    """500; the store's error text is sent as a JSON string when present."""
    message: str | None = None


Outcome = Union[Ok, Empty, NotFound, ServerError]


def render(outcome: Outcome, location_for: Callable[[int], str] | None = None) -> Response:
    """Turn a handler outcome into the HTTP response sent to the client."""
    if isinstance(outcome, Ok):
        return JSONResponse(content=jsonable_encoder(outcome.body), status_code=status.HTTP_200_OK)

    if isinstance(outcome, Empty):
        headers = None
        if outcome.resource_id is not None and location_for is not None:
            headers = {"Location": location_for(outcome.resource_id)}
        return Response(status_code=outcome.status_code, headers=headers)

    if isinstance(outcome, NotFound):
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    if isinstance(outcome, ServerError):
        if outcome.message is None:
            return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return JSONResponse(content=outcome.message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    raise TypeError(f"Unknown handler outcome: {outcome!r}")
