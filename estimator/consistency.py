"""
estimator/consistency.py — prawdopodobieństwo zgodności zmiennych łącznych.

chain_probability(kb, oracle, db_size, clauses)
    P(X1 = X2 = ... = Xn) ≈ ∏_{j=2..n} 1 / M(Xj)

    M(Xj) = max z obecnych kandydatów resolve_candidates dla klauzul
    przed j; gdy brak kandydata dodatniego → db_size.

joint_consistency(kb, oracle, db_size, partition, joint_vars)
    Iloczyn chain_probability po wszystkich zmiennych łącznych partycji,
    każda liczona na spłaszczonych blokach, które ją zawierają.

Oba wyniki leżą w (0, 1] dla db_size >= 1. Iloczyn mniejszy niż
PROBABILITY_FLOOR (najmniejszy znormalizowany float) jest do niego podnoszony:
przy D = 10^6 zdarza się to już dla ok. 55 klauzul ze wspólną zmienną.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from pattern_model import Clause, DegenerateInputError, Partition, connected_blocks

from .domain import resolve_candidates
from .ports import AbstractionOracle, KnowledgeBase

logger = logging.getLogger(__name__)

# Dolne ograniczenie iloczynów; długie łańcuchy nie spadają do 0.0
PROBABILITY_FLOOR = sys.float_info.min


def _require_db_size(db_size: int) -> None:
    if db_size < 1:
        raise DegenerateInputError(
            f"Rozmiar bazy faktów musi być >= 1, otrzymano {db_size}.",
            details={"db_size": db_size},
        )


def chain_probability(
    kb:      KnowledgeBase,
    oracle:  AbstractionOracle,
    db_size: int,
    clauses: Sequence[Clause],
) -> float:
    """
    Prawdopodobieństwo, że zmienna przyjmuje tę samą wartość we wszystkich
    klauzulach clauses (przetwarzanych od lewej).

    Pierwsza klauzula nie zmienia iloczynu; sekwencja jednoelementowa daje 1.
    """
    _require_db_size(db_size)

    prob = 1.0
    for j in range(1, len(clauses)):
        candidates = resolve_candidates(kb, oracle, clauses, clauses[j], j)
        present    = [c for c in candidates if c is not None]
        domain     = max(present, default=0.0)
        if domain <= 0.0:
            logger.debug("brak abstrakcji dla %s, M = db_size (%d)", clauses[j], db_size)
            domain = float(db_size)
        prob = max(prob / domain, PROBABILITY_FLOOR)
    return prob


def joint_consistency(
    kb:         KnowledgeBase,
    oracle:     AbstractionOracle,
    db_size:    int,
    partition:  Partition,
    joint_vars: Sequence[str],
) -> float:
    """Iloczyn chain_probability po zmiennych łącznych (kolejność bez znaczenia)."""
    _require_db_size(db_size)

    prob = 1.0
    for var in joint_vars:
        clauses = [c for block in connected_blocks(partition, var) for c in block]
        prob = max(prob * chain_probability(kb, oracle, db_size, clauses), PROBABILITY_FLOOR)
    return prob
