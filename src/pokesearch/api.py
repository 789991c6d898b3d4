"""PokeAPI integration helpers."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass
from typing import Dict, Iterator, List

import requests

from .structures import ListPage, Pokemon


_DEFAULT_BASE_URL = "https://pokeapi.co/api/v2"


class PokeAPIError(RuntimeError):
    """Raised when PokeAPI cannot be reached or returns unusable data."""


class PokemonNotFound(PokeAPIError):
    """Raised when a Pokémon lookup returns 404."""

    def __init__(self, name_or_id: str) -> None:
        super().__init__(f"Pokemon '{name_or_id}' not found")
        self.name_or_id = name_or_id


@dataclass
class PokeAPIConfig:
    """Configuration for talking to PokeAPI."""

    base_url: str = ""
    timeout_seconds: int = 30
    connection_timeout: int = 10
    max_retries: int = 3
    backoff_seconds: float = 1.0
    user_agent: str = "pokesearch/0.1"
    verbose: bool = True

    def __post_init__(self) -> None:
        if not self.base_url:
            self.base_url = os.getenv("POKEAPI_URL", _DEFAULT_BASE_URL)
        self.base_url = self.base_url.rstrip("/")
        if self.max_retries < 1:
            raise ValueError("max_retries must be at least 1")

    def headers(self) -> dict[str, str]:
        return {"Accept": "application/json", "User-Agent": self.user_agent}


class PokeAPIClient:
    """Fetch Pokémon details and list pages from PokeAPI."""

    def __init__(self, config: PokeAPIConfig | None = None, session: requests.Session | None = None) -> None:
        self.config = config or PokeAPIConfig()
        self.session = session or requests.Session()

    def fetch_pokemon(self, name_or_id: str | int) -> Pokemon:
        key = str(name_or_id).strip().lower()
        if not key:
            raise ValueError("A Pokemon name or id is required")
        url = f"{self.config.base_url}/pokemon/{key}"
        payload = self._get_json(url, not_found=key)
        try:
            return Pokemon.from_api(payload)
        except (KeyError, TypeError, ValueError) as exc:
            raise PokeAPIError(f"Malformed Pokemon payload from '{url}': {exc}") from exc

    def fetch_page(self, url: str | None = None, offset: int = 0, limit: int = 20) -> ListPage:
        """Fetch one list page, either by cursor `url` or by `offset`/`limit`."""

        if url is None:
            url = f"{self.config.base_url}/pokemon?offset={offset}&limit={limit}"
        payload = self._get_json(url)
        try:
            return ListPage.from_api(payload)
        except (KeyError, TypeError, ValueError) as exc:
            raise PokeAPIError(f"Malformed list payload from '{url}': {exc}") from exc

    def fetch_all_names(self, limit: int = 1000) -> List[str]:
        page = self.fetch_page(offset=0, limit=limit)
        return [entry.name for entry in page.entries]

    def iter_pages(self, limit: int = 100) -> Iterator[ListPage]:
        """Yield every list page, following `next` cursors from the start."""

        page = self.fetch_page(offset=0, limit=limit)
        yield page
        while page.next:
            page = self.fetch_page(page.next)
            yield page

    def _get_json(self, url: str, not_found: str | None = None) -> Dict[str, object]:
        config = self.config
        timeout_tuple = (config.connection_timeout, config.timeout_seconds)
        last_error: Exception | None = None

        for attempt in range(1, config.max_retries + 1):
            backoff = config.backoff_seconds * 2 ** (attempt - 1)
            retry = attempt < config.max_retries
            try:
                response = self.session.get(url, headers=config.headers(), timeout=timeout_tuple)
                if response.status_code == 404 and not_found is not None:
                    raise PokemonNotFound(not_found)
                response.raise_for_status()
            except PokemonNotFound:
                raise
            except requests.exceptions.HTTPError as exc:
                status = exc.response.status_code if exc.response is not None else 0
                last_error = exc
                if config.verbose:
                    print(f"   PokeAPI HTTP Error on attempt {attempt}/{config.max_retries}: {status} - {exc}")
                if status < 500 or not retry:
                    break
            except (requests.exceptions.Timeout, requests.exceptions.ConnectionError) as exc:
                last_error = exc
                if config.verbose:
                    print(f"   PokeAPI {type(exc).__name__} on attempt {attempt}/{config.max_retries}: {exc}")
                if not retry:
                    break
            except requests.exceptions.RequestException as exc:
                raise PokeAPIError(f"Request to '{url}' failed: {type(exc).__name__}: {exc}") from exc
            else:
                try:
                    return response.json()
                except ValueError as exc:
                    raise PokeAPIError(f"Invalid JSON from '{url}': {exc}") from exc

            if config.verbose:
                print(f"   Retrying in {backoff:g}s...")
            time.sleep(backoff)

        raise PokeAPIError(f"Request to '{url}' failed after {attempt} attempt(s): {last_error}") from last_error


__all__ = ["PokeAPIClient", "PokeAPIConfig", "PokeAPIError", "PokemonNotFound"]
