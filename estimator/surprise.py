"""
estimator/surprise.py — zaskakujący wzorzec: empiria vs. oszacowanie JITVE.

surprisingness(kb, pattern, estimator=None, *, normalize=False) -> Surprise

  value = |emp.strength - jitve.strength|
  normalize=True → value / max(emp.strength, jitve.strength)  (0 gdy oba 0)

Empiryczna wartość prawdy liczona jest dla całego wzorca jako jednego bloku,
czyli dokładnie tego zapytania łącznego, którego JITVE pozwala uniknąć.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from pattern_model import Clause, DegenerateInputError, TruthValue

from .jitve import JitveEstimator
from .ports import KnowledgeBase, checked_truth_values


@dataclass(frozen=True, slots=True)
class Surprise:
    empirical: TruthValue
    estimate:  TruthValue
    value:     float


def surprisingness(
    kb:        KnowledgeBase,
    pattern:   Sequence[Clause],
    estimator: JitveEstimator | None = None,
    *,
    normalize: bool = False,
) -> Surprise:
    if not pattern:
        raise DegenerateInputError("Pusty wzorzec — brak klauzul do oceny.")

    pattern   = tuple(pattern)
    estimator = estimator if estimator is not None else JitveEstimator(kb)
    empirical = checked_truth_values(kb, [pattern])[0]
    est       = estimator.estimate(pattern)

    value = abs(empirical.strength - est.strength)
    if normalize:
        top = max(empirical.strength, est.strength)
        value = value / top if top > 0.0 else 0.0
    return Surprise(empirical=empirical, estimate=est, value=value)
