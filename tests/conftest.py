import itertools
from typing import Callable

import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture(autouse=True)
def test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENV", "test")


@pytest.fixture()
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture()
def sequential_ids() -> Callable[[], str]:
    """Deterministic id generator: msg-1, msg-2, ..."""
    counter = itertools.count(1)
    return lambda: f"msg-{next(counter)}"
