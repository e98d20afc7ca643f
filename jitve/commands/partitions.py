"""Komenda: jitve partitions — partycje wzorca i ich zmienne łączne."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table   import Table
from rich         import box

from pattern_model import (
    EstimationError,
    format_pattern,
    generate_partitions,
    parse_pattern,
    partition_joint_variables,
)

console = Console(width=200)


def run(args: argparse.Namespace) -> None:
    try:
        pattern    = parse_pattern(args.pattern)
        partitions = generate_partitions(pattern, connected_only=args.connected_only)
    except (ValueError, EstimationError) as e:
        console.print(f"[red]Błąd wzorca:[/red] {e}")
        raise SystemExit(1)

    if not partitions:
        console.print("[yellow]Brak partycji (wzorzec jednoklauzulowy?).[/yellow]")
        return

    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("#", style="dim", justify="right")
    table.add_column("BLOKI", style="cyan")
    table.add_column("ZMIENNE ŁĄCZNE", style="yellow")
    for i, partition in enumerate(partitions, start=1):
        table.add_row(
            str(i),
            " | ".join(format_pattern(b) for b in partition),
            ", ".join(partition_joint_variables(partition)) or "—",
        )
    console.print(table)
    console.print(f"  [dim]{len(partitions)} partycji[/dim]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "partitions",
        help="Listuje partycje wzorca (hipotezy niezależności) ze zmiennymi łącznymi.",
    )
    p.add_argument(
        "--pattern", "-p",
        metavar="WZORZEC",
        required=True,
        help="Wzorzec do podziału.",
    )
    p.add_argument(
        "--connected-only",
        action="store_true",
        dest="connected_only",
        help="Tylko partycje, w których każdy blok jest spójny.",
    )
    p.set_defaults(func=run)
