"""APIRouter construction for the time server."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter

from timeserver.logic.clock import RFC1123
from timeserver.routes.time import AnyMethodEndpoint, Handler, time_handler

TIME_PATH = "/time"


def build_router(handler: Optional[Handler] = None) -> APIRouter:
    """Build a fresh router with ``/time`` as its only path.

    ``handler`` defaults to the closure returned by ``time_handler(RFC1123)``.
    Every request method is answered the same way.
    """
    router = APIRouter()
    router.add_route(
        TIME_PATH,
        AnyMethodEndpoint(handler or time_handler(RFC1123)),
        name="time",
        include_in_schema=False,
    )
    return router


__all__ = ["TIME_PATH", "build_router"]
