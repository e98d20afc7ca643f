"""Komenda: jitve estimate — oszacowanie JITVE wzorca względem bazy faktów."""

from __future__ import annotations

import argparse
import dataclasses
import pathlib

from rich.console import Console
from rich.table   import Table
from rich         import box

from factstore     import ORACLES
from pattern_model import EstimationError, format_pattern, parse_pattern

console = Console(width=200)


# ---------------------------------------------------------------------------
# Wyświetlanie wyników
# ---------------------------------------------------------------------------

def _show_partitions(estimates: list) -> None:
    """Tabela: bloki, tv bloków, zmienne łączne, zgodność, tv partycji."""
    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("#", style="dim", justify="right")
    table.add_column("BLOKI", style="cyan")
    table.add_column("TV BLOKÓW", no_wrap=False)
    table.add_column("ŁĄCZNE", style="yellow")
    table.add_column("ZGODNOŚĆ", justify="right")
    table.add_column("TV PARTYCJI", style="green")

    for i, e in enumerate(estimates, start=1):
        table.add_row(
            str(i),
            "\n".join(format_pattern(b) for b in e.partition),
            "\n".join(str(tv) for tv in e.block_truth_values),
            ", ".join(e.joint_variables) or "—",
            f"{e.joint_probability:.6g}",
            str(e.truth_value),
        )
    console.print(table)


# ---------------------------------------------------------------------------
# Główna logika
# ---------------------------------------------------------------------------

def _load_store(args: argparse.Namespace, confidence_k: float):
    from factstore import FactStore, load_facts_from_db, load_facts_json

    if args.db:
        from jitve._db import get_connection

        try:
            conn = get_connection()
        except Exception as e:
            console.print(f"[red]Błąd połączenia z bazą:[/red] {e}")
            raise SystemExit(1)
        try:
            facts = load_facts_from_db(conn, domain=args.domain)
        except Exception as e:
            console.print(f"[red]Błąd ładowania faktów z bazy:[/red] {e}")
            raise SystemExit(1)
        finally:
            conn.close()
        source = f"baza (domena={args.domain or '—'})"
    else:
        facts_path = pathlib.Path(args.facts)
        if not facts_path.exists():
            console.print(f"[red]Brak pliku faktów:[/red] {facts_path}")
            raise SystemExit(1)
        try:
            _, _, facts = load_facts_json(facts_path)
        except Exception as e:
            console.print(f"[red]Błąd wczytywania faktów:[/red] {e}")
            raise SystemExit(1)
        source = facts_path.name

    store = FactStore(facts, confidence_k=confidence_k)
    console.print(
        f"Fakty: [bold]{source}[/bold]  "
        f"{store.database_size()} faktów ({len(facts)} predykatów)"
    )
    return store


def run(args: argparse.Namespace) -> None:
    from estimator import JitveEstimator, average_truth_value, load_config, surprisingness

    try:
        pattern = parse_pattern(args.pattern)
    except ValueError as e:
        console.print(f"[red]Błąd parsowania wzorca:[/red] {e}")
        raise SystemExit(1)

    try:
        config = load_config()
        if args.workers is not None:
            config = dataclasses.replace(config, max_workers=args.workers)
        if args.connected_only:
            config = dataclasses.replace(config, connected_only=True)
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)

    store     = _load_store(args, config.confidence_k)
    estimator = JitveEstimator(store, ORACLES[args.oracle](), config=config)

    console.print(f"Wzorzec: [bold cyan]{format_pattern(pattern)}[/bold cyan]")
    try:
        estimates = estimator.estimate_partitions(pattern)
        tv        = average_truth_value(estimates)
    except EstimationError as e:
        console.print(f"[red]Oszacowanie niedostępne:[/red] {e}")
        raise SystemExit(1)

    if args.show_partitions:
        if estimates:
            _show_partitions(estimates)
        else:
            console.print("[yellow]Brak partycji — wynik neutralny.[/yellow]")

    console.print(
        f"JITVE: [green]{tv}[/green]  "
        f"[dim]({len(estimates)} partycji, wyrocznia={args.oracle})[/dim]"
    )

    if args.surprise:
        try:
            s = surprisingness(store, pattern, estimator, normalize=args.normalize)
        except EstimationError as e:
            console.print(f"[red]Zaskoczenie niedostępne:[/red] {e}")
            raise SystemExit(1)
        console.print(
            f"Empiryczna: [cyan]{s.empirical}[/cyan]  "
            f"Zaskoczenie: [bold magenta]{s.value:.6g}[/bold magenta]"
        )


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "estimate",
        help="Oszacowanie JITVE wzorca względem bazy faktów (JSON lub PostgreSQL).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Dzieli wzorzec na partycje (hipotezy niezależności), liczy empiryczne
wartości prawdy bloków, koryguje zgodność zmiennych łącznych i uśrednia
wynik po partycjach.

Format pliku faktów JSON:
  {
    "case_id": "ugly-man",
    "facts": [
      {"pred": "Inheritance", "args": ["allen", "man"]},
      {"pred": "Inheritance", "args": ["allen", "ugly"]}
    ]
  }

Przykłady:
  jitve estimate --facts kb.json --pattern "Inheritance(?x, man), Inheritance(?x, ugly)"
  jitve estimate --facts kb.json --pattern "..." --show-partitions --surprise
  jitve estimate --db --domain generic --pattern "..." --oracle constants
        """,
    )
    p.add_argument(
        "--pattern", "-p",
        metavar="WZORZEC",
        required=True,
        help="Wzorzec, np. 'Inheritance(?x, man), Inheritance(?x, ugly)'.",
    )
    source = p.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--facts", "-f",
        metavar="PLIK",
        help="Plik JSON z faktami.",
    )
    source.add_argument(
        "--db",
        action="store_true",
        help="Wczytaj fakty z tabeli fact w PostgreSQL (PGHOST, PGPORT, ...).",
    )
    p.add_argument(
        "--domain", "-d",
        metavar="DOMAIN",
        help="Filtr domeny faktów przy --db.",
    )
    p.add_argument(
        "--oracle",
        choices=sorted(ORACLES),
        default="subsumption",
        help="Wyrocznia porządku abstrakcji (domyślnie: subsumption).",
    )
    p.add_argument(
        "--connected-only",
        action="store_true",
        dest="connected_only",
        help="Tylko partycje, w których każdy blok jest spójny.",
    )
    p.add_argument(
        "--workers",
        type=int,
        metavar="N",
        help="Liczba wątków do równoległej oceny partycji (nadpisuje JITVE_MAX_WORKERS).",
    )
    p.add_argument(
        "--show-partitions",
        action="store_true",
        dest="show_partitions",
        help="Wyświetl oszacowanie każdej partycji.",
    )
    p.add_argument(
        "--surprise",
        action="store_true",
        help="Porównaj JITVE z empiryczną wartością prawdy całego wzorca.",
    )
    p.add_argument(
        "--normalize",
        action="store_true",
        help="Znormalizuj zaskoczenie przez większą z sił (z --surprise).",
    )
    p.set_defaults(func=run)

