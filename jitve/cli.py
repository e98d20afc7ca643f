"""
jitve — narzędzie CLI estymatora JITVE.

Użycie:
  jitve [--verbose] <komenda> [opcje]

Komendy:
  estimate     Oszacowanie JITVE wzorca względem bazy faktów.
  canonical    Postać kanoniczna wzorca (indeksy pozycyjne) i round-trip.
  partitions   Partycje wzorca i ich zmienne łączne.
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from jitve import __version__
from jitve.commands import estimate as cmd_estimate
from jitve.commands import canonical as cmd_canonical
from jitve.commands import partitions as cmd_partitions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jitve",
        description="JITVE — szacowanie wartości prawdy wzorców przy założeniu niezależności.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"jitve {__version__}"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Logi diagnostyczne (DEBUG) na stderr.",
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_estimate.add_parser(subparsers)
    cmd_canonical.add_parser(subparsers)
    cmd_partitions.add_parser(subparsers)

    return parser


def _setup_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        _setup_logging()
    args.func(args)


if __name__ == "__main__":
    main()
