"""Plain-text rendering of the Pokédex screen."""

from __future__ import annotations

from typing import List, Sequence, TYPE_CHECKING

from .normalization import capitalize, format_dex_number
from .structures import ListEntry, Pokemon

if TYPE_CHECKING:  # pragma: no cover
    from .pokedex import PokedexState


_RULE = "-" * 32


def render_details(pokemon: Pokemon) -> str:
    """Return the main-screen block for `pokemon`."""

    types = " / ".join(capitalize(name) for name in pokemon.types) or "Unknown"
    lines = [
        f"{capitalize(pokemon.name)} {format_dex_number(pokemon.id)}",
        f"Type: {types}",
        f"Weight: {pokemon.weight}",
        f"Height: {pokemon.height}",
        f"Front: {pokemon.front_sprite or '-'}",
        f"Back: {pokemon.back_sprite or '-'}",
    ]
    if pokemon.theme:
        lines.insert(1, f"[{pokemon.theme}]")
    return "\n".join(lines)


def render_list(entries: Sequence[ListEntry], page_size: int) -> str:
    slots: List[str] = []
    for index in range(page_size):
        label = entries[index].label if index < len(entries) else ""
        slots.append(f"{index + 1:>2} | {label}".rstrip())
    return "\n".join(slots)


def render_screen(state: "PokedexState", page_size: int = 20) -> str:
    """Draw the whole screen from `state`."""

    parts = [render_details(state.current) if state.current else "No Pokemon selected."]
    parts.append(_RULE)
    parts.append(render_list(state.entries, page_size))
    parts.append(_RULE)

    hints = []
    if state.previous_url:
        hints.append("[p] previous")
    if state.next_url:
        hints.append("[n] next")
    if hints:
        parts.append("  ".join(hints))
    if state.message:
        parts.append(state.message)
    return "\n".join(parts)
