"""
factstore/engine.py — baza faktów w pamięci: dopasowanie wzorców i statystyki.

Obsługuje:
  - dopasowanie jednostronne (zmienne z prefiksem '?' tylko po stronie wzorca)
  - zagnieżdżone klauzule jako argumenty (termy złożone)
  - zliczanie odrębnych dopasowań (support) z cache po postaci kanonicznej
  - empiryczne wartości prawdy bloków: support / D^nvars

Fakty to uziemione krotki argumentów pogrupowane po predykacie
(jak EDB w Datalogu): pred -> set[tuple[Term, ...]].
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

from pattern_model import (
    DEFAULT_CONFIDENCE_K,
    Block,
    Clause,
    Pattern,
    Term,
    TruthValue,
    canonical_key,
    count_to_confidence,
    is_var,
    pattern_variables,
)

logger = logging.getLogger(__name__)

Facts = dict[str, set[tuple[Term, ...]]]


# ---------------------------------------------------------------------------
# Podstawienia (substitutions)
# ---------------------------------------------------------------------------

Substitution = dict[str, Term]


def _match_term(pattern: Term, target: Term, subst: Substitution) -> bool:
    """Dopasowuje term wzorca do termu docelowego, rozszerzając subst w miejscu."""
    if is_var(pattern):
        bound = subst.get(pattern)
        if bound is None:
            subst[pattern] = target
            return True
        return bound == target
    if isinstance(pattern, Clause):
        if not isinstance(target, Clause):
            return False
        return _match_args(pattern.pred, pattern.args, target.pred, target.args, subst)
    return pattern == target


def _match_args(
    pred:        str,
    args:        tuple[Term, ...],
    target_pred: str,
    target_args: tuple[Term, ...],
    subst:       Substitution,
) -> bool:
    if pred != target_pred or len(args) != len(target_args):
        return False
    for p, t in zip(args, target_args):
        if not _match_term(p, t, subst):
            return False
    return True


def match_clause(
    pattern: Clause,
    target:  Clause,
    subst:   Optional[Substitution] = None,
) -> Optional[Substitution]:
    """
    Dopasowanie jednostronne: szuka podstawienia zmiennych pattern,
    po którym pattern == target. Zmienne w target są traktowane jak stałe.

    Returns:
        Nowe podstawienie lub None gdy dopasowanie nie istnieje.
    """
    s = dict(subst or {})
    if _match_args(pattern.pred, pattern.args, target.pred, target.args, s):
        return s
    return None


# ---------------------------------------------------------------------------
# Dopasowanie koniunkcji (backtracking)
# ---------------------------------------------------------------------------

def _match_body(
    body:  Sequence[Clause],
    facts: Facts,
    subst: Substitution,
) -> list[Substitution]:
    """
    Zwraca listę wszystkich podstawień rozszerzających subst,
    przy których koniunkcja body jest prawdziwa w facts.
    """
    if not body:
        return [dict(subst)]

    clause = body[0]
    rest   = body[1:]

    results: list[Substitution] = []
    for fact_args in facts.get(clause.pred, set()):
        s = dict(subst)
        if _match_args(clause.pred, clause.args, clause.pred, fact_args, s):
            results.extend(_match_body(rest, facts, s))
    return results


# ---------------------------------------------------------------------------
# Baza faktów
# ---------------------------------------------------------------------------

class FactStore:
    """
    Baza faktów tylko do odczytu, dostarczająca statystyk estymatorowi.

    Użycie::

        kb = FactStore(facts)
        kb.support_count(Clause("Inheritance", ("?x", "man")))
        kb.empirical_truth_values([(c1,), (c2, c3)])
    """

    def __init__(
        self,
        facts:        Facts,
        confidence_k: float = DEFAULT_CONFIDENCE_K,
    ) -> None:
        self._facts: Facts = {k: set(v) for k, v in facts.items()}
        self._confidence_k = confidence_k
        self._size         = sum(len(v) for v in self._facts.values())
        self._support_cache: dict[Pattern, int] = {}

    # ------------------------------------------------------------------

    def database_size(self) -> int:
        """Liczba uziemionych faktów w bazie."""
        return self._size

    def count_matches(self, clauses: Sequence[Clause]) -> int:
        """
        Liczba odrębnych wartościowań zmiennych koniunkcji clauses.

        Koniunkcja bez zmiennych: 1 gdy prawdziwa, 0 w przeciwnym razie.
        """
        variables = pattern_variables(clauses)
        seen: set[tuple[Term, ...]] = set()
        for subst in _match_body(clauses, self._facts, {}):
            seen.add(tuple(subst[v] for v in variables))
        return len(seen)

    def support_count(self, clause: Clause) -> int:
        """Support pojedynczej klauzuli; cache po klasie alfa-równoważności."""
        key = canonical_key((clause,))
        cached = self._support_cache.get(key)
        if cached is None:
            cached = self.count_matches((clause,))
            self._support_cache[key] = cached
        return cached

    def empirical_truth_values(self, blocks: Sequence[Block]) -> list[TruthValue]:
        """
        Empiryczna wartość prawdy każdego bloku.

        strength   = support(block) / D^nvars   (ucięte do 1)
        confidence = count_to_confidence(D^nvars)
        """
        result: list[TruthValue] = []
        for block in blocks:
            universe = self._size ** len(pattern_variables(block))
            if universe == 0:
                result.append(TruthValue(0.0, 0.0))
                continue
            support = self.count_matches(block)
            result.append(TruthValue(
                strength=min(1.0, support / universe),
                confidence=count_to_confidence(universe, self._confidence_k),
            ))
        logger.debug("empirical tv dla %d bloków: %s", len(blocks), result)
        return result
