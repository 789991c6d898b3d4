"""pokesearch library initialization."""

from .api import PokeAPIClient, PokeAPIConfig, PokeAPIError, PokemonNotFound
from .matching import EmptyCandidateSet, closest_match, distance
from .normalization import normalize_query
from .pokedex import Pokedex, PokedexConfig, PokedexState, SearchOutcome
from .render import render_screen
from .runner import export_index, search_pokemon
from .structures import ListEntry, ListPage, Pokemon

__all__ = [
    "EmptyCandidateSet",
    "ListEntry",
    "ListPage",
    "PokeAPIClient",
    "PokeAPIConfig",
    "PokeAPIError",
    "Pokedex",
    "PokedexConfig",
    "PokedexState",
    "Pokemon",
    "PokemonNotFound",
    "SearchOutcome",
    "closest_match",
    "distance",
    "export_index",
    "normalize_query",
    "render_screen",
    "search_pokemon",
]
