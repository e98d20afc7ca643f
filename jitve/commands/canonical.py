"""Komenda: jitve canonical — postać kanoniczna wzorca i powrót do nazw."""

from __future__ import annotations

import argparse

from rich.console import Console

from pattern_model import (
    EstimationError,
    format_pattern,
    from_canonical,
    parse_pattern,
    to_canonical,
)

console = Console(width=200)


def run(args: argparse.Namespace) -> None:
    try:
        pattern = parse_pattern(args.pattern)
    except ValueError as e:
        console.print(f"[red]Błąd parsowania wzorca:[/red] {e}")
        raise SystemExit(1)

    canon = to_canonical(pattern, preserve_aliasing=args.aliasing)
    mode  = "po nazwie" if args.aliasing else "po wystąpieniu"
    console.print(f"Wzorzec:      [bold cyan]{format_pattern(pattern)}[/bold cyan]")
    console.print(f"Kanoniczna:   [green]{format_pattern(canon)}[/green]  [dim]({mode})[/dim]")

    try:
        back = from_canonical(canon, preserve_aliasing=args.aliasing)
    except EstimationError as e:
        console.print(f"[red]Powrót niemożliwy:[/red] {e}")
        raise SystemExit(1)
    console.print(f"Round-trip:   [cyan]{format_pattern(back)}[/cyan]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "canonical",
        help="Wyświetla postać kanoniczną wzorca (indeksy pozycyjne).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Zamienia zmienne na indeksy pozycyjne 0, succ(0), succ(succ(0)), ...
(w głąb, od lewej do prawej) i z powrotem na świeże nazwy ?A..?H.

Domyślnie każde WYSTĄPIENIE zmiennej dostaje nowy indeks; --aliasing
mapuje po pierwszym wystąpieniu nazwy.

Przykłady:
  jitve canonical --pattern "Inheritance(?x, ?y, ?z)"
  jitve canonical --pattern "Inheritance(?x, ?x)" --aliasing
        """,
    )
    p.add_argument(
        "--pattern", "-p",
        metavar="WZORZEC",
        required=True,
        help="Wzorzec do kanonizacji.",
    )
    p.add_argument(
        "--aliasing",
        action="store_true",
        help="Zachowaj aliasowanie (ta sama nazwa → ten sam indeks).",
    )
    p.set_defaults(func=run)
