"""Convenience helpers for running pokesearch end-to-end."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd
from tqdm import tqdm

from .api import PokeAPIClient, PokeAPIError
from .pokedex import ConfirmCallback, Pokedex, PokedexConfig, SearchOutcome


def search_pokemon(
    term: str,
    config: Optional[PokedexConfig] = None,
    confirm: ConfirmCallback | None = None,
    client: PokeAPIClient | None = None,
) -> SearchOutcome | None:
    """Search for `term`, print the resulting screen and return the outcome."""

    pokedex = Pokedex(config, client)
    try:
        outcome = pokedex.search(term, confirm)
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return None
    except PokeAPIError as exc:
        print(f"ERROR: Could not reach PokeAPI. {exc}")
        return None

    if outcome.found:
        print(pokedex.render())
    elif outcome.suggestion is None:
        print(f"ERROR: Pokemon '{outcome.query}' not found and no suggestion is available.")
    else:
        print(pokedex.state.message)
    return outcome


def export_index(
    output_path: str | Path,
    config: Optional[PokedexConfig] = None,
    client: PokeAPIClient | None = None,
) -> pd.DataFrame | None:
    """Walk every list page and write an id/name/url table to `output_path`."""

    config = config or PokedexConfig()
    client = client or PokeAPIClient(config.api)
    output_path = Path(output_path)
    if output_path.suffix.lower() not in {".csv", ".xls", ".xlsx"}:
        print(f"ERROR: Unsupported output file format for '{output_path}'. Please use CSV or Excel.")
        return None

    rows = []
    progress = None
    try:
        for page in client.iter_pages(limit=config.page_size):
            if progress is None and config.use_tqdm is not False:
                total = -(-page.count // config.page_size) if page.count else None
                progress = tqdm(total=total, desc="   Exporting Pages", unit="page")
            rows.extend({"id": entry.id, "name": entry.name, "url": entry.url} for entry in page.entries)
            if progress is not None:
                progress.update(1)
    except PokeAPIError as exc:
        print(f"ERROR: Could not reach PokeAPI. {exc}")
        return None
    finally:
        if progress is not None:
            progress.close()

    dataframe = pd.DataFrame(rows, columns=["id", "name", "url"])
    try:
        _save_dataframe(dataframe, output_path)
    except ImportError as exc:
        print(f"ERROR: Excel export needs the optional 'excel' extra. {exc}")
        return None
    except OSError as exc:
        print(f"ERROR: Could not write '{output_path}'. {exc}")
        return None
    if config.verbose:
        print(f"   Exported {len(dataframe)} Pokemon to '{output_path}'")
    return dataframe


def _save_dataframe(dataframe: pd.DataFrame, path: Path) -> None:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        dataframe.to_csv(path, index=False)
        return
    if suffix in {".xls", ".xlsx"}:
        dataframe.to_excel(path, index=False)
        return
    raise ValueError(f"Unsupported output file format: '{suffix}'")
