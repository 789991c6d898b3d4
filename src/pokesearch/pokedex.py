"""Core Pokédex controller: pagination, selection and fuzzy search."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List

from .api import PokeAPIClient, PokeAPIConfig, PokemonNotFound
from .matching import EmptyCandidateSet, closest_match
from .normalization import normalize_query
from .render import render_screen
from .structures import ListEntry, ListPage, Pokemon


ConfirmCallback = Callable[[str], bool]


@dataclass
class PokedexConfig:
    """Configuration parameters for :class:Pokedex."""

    page_size: int = 20
    index_limit: int = 1000
    verbose: bool = True
    use_tqdm: bool | None = None
    api: PokeAPIConfig = field(default_factory=PokeAPIConfig)

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError("page_size must be positive")
        if self.index_limit < 1:
            raise ValueError("index_limit must be positive")


@dataclass
class PokedexState:
    """Everything the screen shows; updated by the controller, drawn by render_screen."""

    previous_url: str | None = None
    next_url: str | None = None
    entries: List[ListEntry] = field(default_factory=list)
    current: Pokemon | None = None
    message: str = ""


@dataclass
class SearchOutcome:
    """Result bundle returned by :meth:Pokedex.search."""

    query: str
    pokemon: Pokemon | None = None
    suggestion: str | None = None
    accepted: bool = False

    @property
    def found(self) -> bool:
        return self.pokemon is not None


class Pokedex:
    """Browse PokeAPI one page at a time and look Pokémon up by name."""

    def __init__(self, config: PokedexConfig | None = None, client: PokeAPIClient | None = None) -> None:
        self.config = config or PokedexConfig()
        self.client = client or PokeAPIClient(self.config.api)
        self.state = PokedexState()

    def start(self) -> ListPage:
        page = self.client.fetch_page(offset=0, limit=self.config.page_size)
        self._apply_page(page)
        return page

    def load_page(self, url: str) -> ListPage:
        page = self.client.fetch_page(url)
        self._apply_page(page)
        return page

    def next_page(self) -> bool:
        if not self.state.next_url:
            return False
        self.load_page(self.state.next_url)
        return True

    def previous_page(self) -> bool:
        if not self.state.previous_url:
            return False
        self.load_page(self.state.previous_url)
        return True

    def select(self, index: int) -> Pokemon:
        """Show the Pokémon in slot `index` (zero-based) of the current page."""

        if not 0 <= index < len(self.state.entries):
            raise ValueError(f"No Pokemon in list slot {index + 1}")
        return self.show(self.state.entries[index].id)

    def show(self, name_or_id: str | int) -> Pokemon:
        pokemon = self.client.fetch_pokemon(name_or_id)
        self.state.current = pokemon
        self.state.message = ""
        return pokemon

    def search(self, term: str, confirm: ConfirmCallback | None = None) -> SearchOutcome:
        """Look `term` up, offering the closest known name when it does not exist."""

        query = normalize_query(term)
        if not query:
            raise ValueError("Search term must not be empty")

        try:
            pokemon = self.show(query)
            return SearchOutcome(query=query, pokemon=pokemon)
        except PokemonNotFound:
            if self.config.verbose:
                print(f"   '{query}' not found, looking for the closest name...")

        names = self.client.fetch_all_names(limit=self.config.index_limit)
        try:
            suggestion = closest_match(query, names)
        except EmptyCandidateSet:
            self.state.message = "Pokemon not found."
            return SearchOutcome(query=query)

        self.state.message = f"Pokemon not found. Did you mean {suggestion}?"
        outcome = SearchOutcome(query=query, suggestion=suggestion)
        if confirm is None or not confirm(suggestion):
            return outcome

        outcome.accepted = True
        outcome.pokemon = self.show(suggestion)
        return outcome

    def render(self) -> str:
        return render_screen(self.state, self.config.page_size)

    def _apply_page(self, page: ListPage) -> None:
        self.state.previous_url = page.previous
        self.state.next_url = page.next
        self.state.entries = list(page.entries[: self.config.page_size])
        if self.config.verbose:
            print(f"   Loaded {len(self.state.entries)} of {page.count} Pokemon.")


__all__ = [
    "Pokedex",
    "PokedexConfig",
    "PokedexState",
    "SearchOutcome",
]
