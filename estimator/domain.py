"""
estimator/domain.py — rozmiar dziedziny zmiennej i kandydaci warunkowi.

estimate_domain_size(kb, clause)
    Przybliżona liczba odrębnych wartości zmiennej: sqrt(support(clause)).
    Wykładnik 0.5 jest stały, niezależnie od liczby zmiennych w klauzuli.

resolve_candidates(kb, oracle, clauses, target, lookback)
    Dla klauzuli docelowej przegląda pierwsze `lookback` klauzul i dla
    każdej bardziej abstrakcyjnej od celu zwraca jej rozmiar dziedziny;
    dla pozostałych None ("nie dotyczy").
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from pattern_model import Clause, DegenerateInputError

from .ports import (
    AbstractionOracle,
    KnowledgeBase,
    checked_is_more_abstract,
    checked_support_count,
)


def estimate_domain_size(kb: KnowledgeBase, clause: Clause) -> float:
    """Zwraca support(clause) ** 0.5 (niemalejące względem support)."""
    return math.sqrt(checked_support_count(kb, clause))


def resolve_candidates(
    kb:       KnowledgeBase,
    oracle:   AbstractionOracle,
    clauses:  Sequence[Clause],
    target:   Clause,
    lookback: int,
) -> list[float | None]:
    """
    Kandydaci na rozmiar dziedziny zmiennej w klauzuli target.

    Args:
        kb:       baza faktów (support_count)
        oracle:   wyrocznia porządku abstrakcji
        clauses:  klauzule wzorca w oryginalnej kolejności
        target:   klauzula, dla której szukamy ograniczenia
        lookback: ile początkowych klauzul przejrzeć

    Returns:
        Lista długości lookback, w kolejności przeglądania; None gdy
        klauzula nie jest bardziej abstrakcyjna od target.

    Raises:
        DegenerateInputError: lookback spoza zakresu 0..len(clauses).
    """
    if not 0 <= lookback <= len(clauses):
        raise DegenerateInputError(
            f"lookback={lookback} poza zakresem 0..{len(clauses)}.",
            details={"lookback": lookback, "clauses": len(clauses)},
        )

    candidates: list[float | None] = []
    for clause in clauses[:lookback]:
        if checked_is_more_abstract(oracle, clause, target):
            candidates.append(estimate_domain_size(kb, clause))
        else:
            candidates.append(None)
    return candidates
