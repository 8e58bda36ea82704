"""Time server package.

Exposes the FastAPI application factory. The app serves one route,
``/time``, which answers with the current server time in RFC1123 layout.
Handlers live in ``timeserver.routes``, formatting in ``timeserver.logic``.
"""

from __future__ import annotations

from timeserver.main import create_app

__all__ = ["create_app"]
