"""
pattern_model/terms.py — termy, klauzule i wzorce.

Konwencja zmiennych jak w Datalogu: zmienna to string z prefiksem '?'
(np. '?x'), każdy inny string jest stałą. Argument klauzuli może być też
zagnieżdżoną klauzulą (term złożony) albo indeksem kanonicznym.

Typy:
  Clause          pred(arg1, arg2, ...) — niemutowalna, haszowalna
  CanonicalIndex  pozycyjny placeholder zmiennej (0, succ(0), ...)
  Pattern         uporządkowana koniunkcja klauzul
  Block, Partition  podział wzorca na rozłączne bloki
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


# ---------------------------------------------------------------------------
# Indeks kanoniczny
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CanonicalIndex:
    """Placeholder zmiennej w postaci kanonicznej; renderowany jako succ(...(0))."""
    n: int

    def __post_init__(self) -> None:
        if self.n < 0:
            raise ValueError(f"Indeks kanoniczny musi być >= 0, otrzymano {self.n}")

    def __str__(self) -> str:
        text = "0"
        for _ in range(self.n):
            text = f"succ({text})"
        return text


# ---------------------------------------------------------------------------
# Klauzula
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Clause:
    """Klauzula (szablon relacji): pred(arg1, arg2, ...)."""
    pred: str
    args: tuple[Term, ...] = ()

    def __str__(self) -> str:
        if not self.args:
            return self.pred
        return f"{self.pred}({', '.join(str(a) for a in self.args)})"


Term: TypeAlias = str | Clause | CanonicalIndex
Pattern: TypeAlias = tuple[Clause, ...]
Block: TypeAlias = tuple[Clause, ...]
Partition: TypeAlias = tuple[Block, ...]


# ---------------------------------------------------------------------------
# Funkcje pomocnicze
# ---------------------------------------------------------------------------

def is_var(term: Term) -> bool:
    return isinstance(term, str) and term.startswith("?")


def _collect_vars(clause: Clause, out: dict[str, None]) -> None:
    for arg in clause.args:
        if isinstance(arg, Clause):
            _collect_vars(arg, out)
        elif is_var(arg):
            out.setdefault(arg, None)


def clause_variables(clause: Clause) -> tuple[str, ...]:
    """Zmienne klauzuli bez powtórzeń, w kolejności pierwszego wystąpienia."""
    seen: dict[str, None] = {}
    _collect_vars(clause, seen)
    return tuple(seen)


def pattern_variables(clauses: tuple[Clause, ...] | list[Clause]) -> tuple[str, ...]:
    """Zmienne całego wzorca (lub bloku) bez powtórzeń, w kolejności wystąpienia."""
    seen: dict[str, None] = {}
    for clause in clauses:
        _collect_vars(clause, seen)
    return tuple(seen)


def constant_count(clause: Clause) -> int:
    """Liczba stałych związanych w klauzuli (rekurencyjnie)."""
    total = 0
    for arg in clause.args:
        if isinstance(arg, Clause):
            total += constant_count(arg)
        elif isinstance(arg, str) and not is_var(arg):
            total += 1
    return total


def format_pattern(clauses: tuple[Clause, ...] | list[Clause]) -> str:
    return ", ".join(str(c) for c in clauses)
