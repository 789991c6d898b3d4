"""Command line entry point for pokesearch."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .api import PokeAPIConfig, PokeAPIError
from .matching import EmptyCandidateSet, closest_match, distance
from .pokedex import Pokedex, PokedexConfig
from .render import render_details, render_list
from .runner import export_index, search_pokemon


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Browse and search Pokemon from PokeAPI.")
    parser.add_argument(
        "--base-url",
        default=os.getenv("POKEAPI_URL", ""),
        help="PokeAPI base URL (default: https://pokeapi.co/api/v2)",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print results and errors")
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Look a Pokemon up by name, suggesting close names on a miss")
    search.add_argument("term", help="Name (or id) to search for")
    search.add_argument("--yes", dest="answer", action="store_const", const=True, help="Accept any suggestion")
    search.add_argument("--no", dest="answer", action="store_const", const=False, help="Never accept a suggestion")
    search.set_defaults(answer=None)

    show = subparsers.add_parser("show", help="Show one Pokemon by exact name or id")
    show.add_argument("name_or_id")

    listing = subparsers.add_parser("list", help="Print one page of the Pokemon list")
    listing.add_argument("--offset", type=int, default=0, help="Index of the first Pokemon (default: 0)")
    listing.add_argument("--limit", type=int, default=20, help="Page size (default: 20)")

    browse = subparsers.add_parser("browse", help="Page through the Pokedex interactively")
    browse.add_argument("--page-size", type=int, default=20, help="Page size (default: 20)")

    export = subparsers.add_parser("export", help="Write every Pokemon id and name to a CSV or Excel file")
    export.add_argument("output", type=Path, help="Path of the .csv/.xlsx file to write")
    export.add_argument("--page-size", type=int, default=100, help="Names fetched per request (default: 100)")

    suggest = subparsers.add_parser("suggest", help="Pick the closest candidate offline")
    suggest.add_argument("term")
    suggest.add_argument("candidates", nargs="*")

    return parser.parse_args(argv)


def _prompt_yes_no(suggestion: str) -> bool:
    try:
        answer = input(f"Pokemon not found. Did you mean {suggestion}? [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in {"y", "yes"}


def _browse(pokedex: Pokedex) -> int:
    pokedex.start()
    print(pokedex.render())
    while True:
        try:
            command = input("\n[n]ext [p]rev <slot> [s]earch <name> [q]uit > ").strip()
        except EOFError:
            return 0
        if not command:
            continue
        try:
            if command in {"q", "quit"}:
                return 0
            if command in {"n", "next"}:
                pokedex.next_page()
            elif command in {"p", "prev"}:
                pokedex.previous_page()
            elif command.isdigit():
                pokedex.select(int(command) - 1)
            elif command.split(maxsplit=1)[0] in {"s", "search"}:
                parts = command.split(maxsplit=1)
                pokedex.search(parts[1] if len(parts) > 1 else "", _prompt_yes_no)
            else:
                pokedex.state.message = f"Unknown command '{command}'"
        except (ValueError, PokeAPIError) as exc:
            pokedex.state.message = f"ERROR: {exc}"
        print(pokedex.render())


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    verbose = not args.quiet

    if args.command == "suggest":
        try:
            match = closest_match(args.term, args.candidates)
        except EmptyCandidateSet as exc:
            print(f"ERROR: {exc}")
            return 1
        print(f"{match} (distance {distance(args.term, match)})")
        return 0

    api_config = PokeAPIConfig(base_url=args.base_url, verbose=verbose)
    config = PokedexConfig(
        page_size=getattr(args, "page_size", 20),
        verbose=verbose,
        use_tqdm=not args.disable_tqdm,
        api=api_config,
    )

    if args.command == "search":
        confirm = _prompt_yes_no if args.answer is None else (lambda _suggestion: args.answer)
        outcome = search_pokemon(args.term, config, confirm)
        return 0 if outcome is not None and outcome.found else 1

    if args.command == "export":
        return 0 if export_index(args.output, config) is not None else 1

    pokedex = Pokedex(config)
    try:
        if args.command == "show":
            print(render_details(pokedex.show(args.name_or_id)))
        elif args.command == "list":
            page = pokedex.client.fetch_page(offset=args.offset, limit=args.limit)
            print(render_list(page.entries, args.limit))
        elif args.command == "browse":
            return _browse(pokedex)
    except (ValueError, PokeAPIError) as exc:
        print(f"ERROR: {exc}")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
