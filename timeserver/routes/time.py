"""Handlers for the ``/time`` endpoint.

The same behaviour is offered in three shapes: a closure capturing the
layout, a callable object, and a plain function. Any of them can be passed
to :func:`timeserver.routes.build_router`; they produce identical
responses. The request itself (method, headers, query, body) is ignored.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse

from timeserver.logic import clock as _clock

BODY_PREFIX = "The time is: "

Clock = Callable[[], datetime]
Handler = Callable[[], PlainTextResponse]


def render_body(layout: str, clock: Optional[Clock] = None) -> str:
    moment = (clock or _clock.now)()
    return BODY_PREFIX + _clock.format_timestamp(moment, layout)


def time_handler(layout: str, clock: Optional[Clock] = None) -> Handler:
    """Return an endpoint function bound to ``layout``."""
    # Fail at registration rather than on the first request
    if layout not in _clock.LAYOUTS:
        raise ValueError(f"unknown timestamp layout: {layout!r}")

    def handle() -> PlainTextResponse:
        return PlainTextResponse(render_body(layout, clock))

    return handle


class TimeHandler:
    """Callable endpoint object carrying its layout and clock."""

    def __init__(self, layout: str = _clock.RFC1123, clock: Optional[Clock] = None) -> None:
        if layout not in _clock.LAYOUTS:
            raise ValueError(f"unknown timestamp layout: {layout!r}")
        self.layout = layout
        self.clock = clock

    def __call__(self) -> PlainTextResponse:
        return PlainTextResponse(render_body(self.layout, self.clock))


def plain_time() -> PlainTextResponse:
    return PlainTextResponse(render_body(_clock.RFC1123))


class AnyMethodEndpoint:
    """ASGI adapter running a zero-argument handler for every HTTP method.

    Registered as a raw ASGI app, so the route applies no method filter
    (TRACE, CONNECT and extension methods included). The sync handler runs
    in the threadpool like a regular FastAPI sync endpoint.
    """

    def __init__(self, handler: Handler) -> None:
        self.handler = handler

    async def __call__(self, scope, receive, send):  # type: ignore[no-untyped-def]
        response = await run_in_threadpool(self.handler)
        await response(scope, receive, send)


__all__ = [
    "BODY_PREFIX",
    "render_body",
    "time_handler",
    "TimeHandler",
    "plain_time",
    "AnyMethodEndpoint",
]
