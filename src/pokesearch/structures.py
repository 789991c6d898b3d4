"""Basic data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .normalization import capitalize, id_from_url


TYPES: Tuple[str, ...] = (
    "normal", "fighting", "flying",
    "poison", "ground", "rock",
    "bug", "ghost", "steel",
    "fire", "water", "grass",
    "electric", "psychic", "ice",
    "dragon", "dark", "fairy",
)


@dataclass(frozen=True)
class Pokemon:
    """Details shown on the main screen for one Pokémon."""

    id: int
    name: str
    types: Tuple[str, ...] = ()
    weight: int = 0
    height: int = 0
    front_sprite: str = ""
    back_sprite: str = ""

    @classmethod
    def from_api(cls, payload: Dict[str, object]) -> "Pokemon":
        raw_types = sorted(payload.get("types") or [], key=lambda item: item.get("slot", 0))
        sprites = payload.get("sprites") or {}
        return cls(
            id=int(payload["id"]),
            name=str(payload["name"]),
            types=tuple(str(item["type"]["name"]) for item in raw_types),
            weight=int(payload.get("weight") or 0),
            height=int(payload.get("height") or 0),
            front_sprite=sprites.get("front_default") or "",
            back_sprite=sprites.get("back_default") or "",
        )

    @property
    def primary_type(self) -> str | None:
        return self.types[0] if self.types else None

    @property
    def secondary_type(self) -> str | None:
        return self.types[1] if len(self.types) > 1 else None

    @property
    def theme(self) -> str | None:
        """Colour theme for the screen, taken from the primary type."""

        primary = self.primary_type
        return primary if primary in TYPES else None


@dataclass(frozen=True)
class ListEntry:
    id: int
    name: str
    url: str

    @classmethod
    def from_api(cls, result: Dict[str, str]) -> "ListEntry":
        url = str(result["url"])
        return cls(id=id_from_url(url), name=str(result["name"]), url=url)

    @property
    def label(self) -> str:
        return f"{self.id}. {capitalize(self.name)}"


@dataclass
class ListPage:
    """One page of the paginated Pokémon list plus its cursors."""

    entries: List[ListEntry] = field(default_factory=list)
    previous: str | None = None
    next: str | None = None
    count: int = 0

    @classmethod
    def from_api(cls, payload: Dict[str, object]) -> "ListPage":
        results = payload.get("results") or []
        return cls(
            entries=[ListEntry.from_api(result) for result in results],
            previous=payload.get("previous") or None,
            next=payload.get("next") or None,
            count=int(payload.get("count") or 0),
        )

    @property
    def has_previous(self) -> bool:
        return bool(self.previous)

    @property
    def has_next(self) -> bool:
        return bool(self.next)
