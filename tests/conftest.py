from __future__ import annotations

from typing import Dict, List

import pytest
import requests

from pokesearch.api import PokeAPIClient, PokeAPIConfig


BASE = "https://pokeapi.test/api/v2"


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: object = None) -> None:
        self.status_code = status_code
        self._payload = payload

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self) -> object:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    """Serve canned responses by URL; a list is consumed one response per call."""

    def __init__(self, routes: Dict[str, object] | None = None) -> None:
        self.routes = dict(routes or {})
        self.calls: List[str] = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append(url)
        route = self.routes.get(url, FakeResponse(404, {"detail": "Not found."}))
        if isinstance(route, list):
            route = route.pop(0)
        if isinstance(route, Exception):
            raise route
        return route


def pokemon_payload(pid: int, name: str, *types: str) -> dict:
    return {
        "id": pid,
        "name": name,
        "types": [{"slot": slot, "type": {"name": t}} for slot, t in enumerate(types, start=1)],
        "weight": pid * 10,
        "height": pid,
        "sprites": {
            "front_default": f"https://sprites.test/{pid}.png",
            "back_default": None,
        },
    }


def list_payload(names: List[str], offset: int = 0, previous=None, next=None, count=None) -> dict:
    return {
        "count": len(names) if count is None else count,
        "previous": previous,
        "next": next,
        "results": [
            {"name": name, "url": f"{BASE}/pokemon/{offset + index + 1}/"}
            for index, name in enumerate(names)
        ],
    }


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    monkeypatch.setattr("pokesearch.api.time.sleep", lambda _seconds: None)


@pytest.fixture
def make_client():
    def _make(routes: Dict[str, object], **config_overrides) -> PokeAPIClient:
        config = PokeAPIConfig(base_url=BASE, verbose=False, **config_overrides)
        return PokeAPIClient(config, session=FakeSession(routes))

    return _make
