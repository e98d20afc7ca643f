"""
factstore/abstraction.py — wyrocznie porządku abstrakcji klauzul.

Wyrocznia odpowiada tak/nie na pytanie "czy klauzula a jest bardziej
abstrakcyjna niż b". Estymator przyjmuje ją jako wstrzykiwaną strategię,
więc porządki są wymienne i testowalne osobno.

  SubsumptionOracle    a uogólnia b (istnieje podstawienie zmiennych a → b)
  ConstantCountOracle  ten sam predykat i arność, nie więcej stałych
"""

from __future__ import annotations

from pattern_model import Clause, alpha_equivalent, constant_count

from .engine import match_clause


class SubsumptionOracle:
    """
    a jest bardziej abstrakcyjna niż b, gdy a dopasowuje się jednostronnie do b.

    Porządek wstępny: zwrotny (klauzule alfa-równoważne) i przechodni.
    Przykład: Inheritance(?y, ?z) jest bardziej abstrakcyjna niż
    Inheritance(?x, man); Inheritance(?x, man) i Inheritance(?x, ugly) są
    nieporównywalne.
    """

    def is_more_abstract(self, a: Clause, b: Clause) -> bool:
        if alpha_equivalent((a,), (b,)):
            return True
        return match_clause(a, b) is not None


class ConstantCountOracle:
    """Porządek wg liczby związanych stałych (mniej stałych = bardziej abstrakcyjna)."""

    def is_more_abstract(self, a: Clause, b: Clause) -> bool:
        if a.pred != b.pred or len(a.args) != len(b.args):
            return False
        return constant_count(a) <= constant_count(b)


ORACLES: dict[str, type[SubsumptionOracle] | type[ConstantCountOracle]] = {
    "subsumption": SubsumptionOracle,
    "constants":   ConstantCountOracle,
}
