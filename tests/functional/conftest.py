"""Functional test fixtures.

Every test gets its own application instance from the factory so no route
registration is shared between tests. A fixed clock set to the canonical
RFC1123 example instant makes handler output deterministic.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from timeserver.main import create_app

MST = timezone(timedelta(hours=-7), "MST")
REFERENCE_INSTANT = datetime(2006, 1, 2, 15, 4, 5, tzinfo=MST)


@pytest.fixture()
def client() -> TestClient:
    with TestClient(create_app()) as c:
        yield c


@pytest.fixture()
def fixed_clock():
    return lambda: REFERENCE_INSTANT


@pytest.fixture()
def reference_instant() -> datetime:
    return REFERENCE_INSTANT
