"""
estimator/jitve.py — estymacja wartości prawdy wzorca przy założeniu niezależności.

Dla każdej partycji wzorca:
  1. empiryczne wartości prawdy bloków (baza faktów)
  2. siła "niezależna" = średnia sił bloków
  3. korekta zgodności zmiennych łącznych (joint_consistency)
  4. siła partycji = siła niezależna × zgodność
     pewność partycji = pewność PIERWSZEGO bloku × confidence_damping
Wynik końcowy (JITVE) = średnia arytmetyczna (siła, pewność) po partycjach.
Brak partycji → NEUTRAL_TRUTH_VALUE.
"""

from __future__ import annotations

import logging
import statistics
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial

from pattern_model import (
    NEUTRAL_TRUTH_VALUE,
    Clause,
    DegenerateInputError,
    Partition,
    TruthValue,
    format_pattern,
    generate_partitions,
    partition_joint_variables,
)

from factstore import SubsumptionOracle

from .config import EstimatorConfig
from .consistency import joint_consistency
from .ports import (
    AbstractionOracle,
    KnowledgeBase,
    Partitioner,
    checked_database_size,
    checked_partitions,
    checked_truth_values,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PartitionEstimate:
    """
    Oszacowanie dla jednej partycji.

    - partition:            bloki partycji
    - block_truth_values:   empiryczne tv bloków (kolejność bloków)
    - independent_strength: średnia sił bloków
    - joint_variables:      zmienne wspólne dla >= 2 bloków
    - joint_probability:    prawdopodobieństwo zgodności zmiennych łącznych
    - truth_value:          skorygowana wartość prawdy partycji
    """
    partition:            Partition
    block_truth_values:   tuple[TruthValue, ...]
    independent_strength: float
    joint_variables:      tuple[str, ...]
    joint_probability:    float
    truth_value:          TruthValue


class JitveEstimator:
    """
    Estymator JITVE (Joint-Independent Truth-Value Estimate).

    Użycie::

        est = JitveEstimator(kb)
        tv  = est.estimate(parse_pattern("Inheritance(?x, man), Inheritance(?x, ugly)"))
    """

    def __init__(
        self,
        kb:          KnowledgeBase,
        oracle:      AbstractionOracle | None = None,
        partitioner: Partitioner | None = None,
        config:      EstimatorConfig | None = None,
    ) -> None:
        self._kb     = kb
        self._oracle = oracle if oracle is not None else SubsumptionOracle()
        self._config = config if config is not None else EstimatorConfig()
        if partitioner is None:
            partitioner = partial(
                generate_partitions, connected_only=self._config.connected_only
            )
        self._partitioner = partitioner

    @property
    def config(self) -> EstimatorConfig:
        return self._config

    # ------------------------------------------------------------------

    def estimate_partition(self, partition: Partition, db_size: int) -> PartitionEstimate:
        """Wartość prawdy jednej partycji (siła skorygowana, pewność wytłumiona)."""
        if not partition:
            raise DegenerateInputError("Partycja bez bloków.")

        tvs         = checked_truth_values(self._kb, partition)
        independent = statistics.fmean(tv.strength for tv in tvs)
        joint_vars  = partition_joint_variables(partition)
        joint_prob  = joint_consistency(self._kb, self._oracle, db_size, partition, joint_vars)

        tv = TruthValue(
            strength=independent * joint_prob,
            confidence=tvs[0].confidence * self._config.confidence_damping,
        )
        logger.debug(
            "partycja %s: niezależna=%.6g zgodność=%.6g → %s",
            " | ".join(format_pattern(b) for b in partition), independent, joint_prob, tv,
        )
        return PartitionEstimate(
            partition=partition,
            block_truth_values=tuple(tvs),
            independent_strength=independent,
            joint_variables=joint_vars,
            joint_probability=joint_prob,
            truth_value=tv,
        )

    def estimate_partitions(self, pattern: Sequence[Clause]) -> list[PartitionEstimate]:
        """
        Oszacowania wszystkich partycji wzorca (w kolejności partycjonera).

        Raises:
            DegenerateInputError: pusty wzorzec lub zerowy rozmiar bazy.
            CollaboratorError:    błąd bazy faktów / wyroczni / partycjonera.
        """
        if not pattern:
            raise DegenerateInputError("Pusty wzorzec — brak klauzul do oszacowania.")

        pattern    = tuple(pattern)
        partitions = checked_partitions(self._partitioner, pattern)
        if not partitions:
            logger.debug("brak partycji dla %s", format_pattern(pattern))
            return []

        db_size = checked_database_size(self._kb)
        logger.debug("%d partycji, db_size=%d", len(partitions), db_size)

        if self._config.max_workers > 1 and len(partitions) > 1:
            with ThreadPoolExecutor(max_workers=self._config.max_workers) as executor:
                return list(executor.map(
                    lambda p: self.estimate_partition(p, db_size), partitions
                ))
        return [self.estimate_partition(p, db_size) for p in partitions]

    def estimate(self, pattern: Sequence[Clause]) -> TruthValue:
        """
        JITVE wzorca: średnia (siła, pewność) po wszystkich partycjach.

        Returns:
            TruthValue; NEUTRAL_TRUTH_VALUE gdy partycjoner nie zwrócił partycji
            (np. wzorzec jednoklauzulowy).
        """
        return average_truth_value(self.estimate_partitions(pattern))


def average_truth_value(estimates: Sequence[PartitionEstimate]) -> TruthValue:
    """Średnia (siła, pewność) po oszacowaniach partycji; brak → NEUTRAL_TRUTH_VALUE."""
    if not estimates:
        return NEUTRAL_TRUTH_VALUE
    return TruthValue(
        strength=statistics.fmean(e.truth_value.strength for e in estimates),
        confidence=statistics.fmean(e.truth_value.confidence for e in estimates),
    )


def estimate(
    kb:      KnowledgeBase,
    pattern: Sequence[Clause],
    oracle:  AbstractionOracle | None = None,
    config:  EstimatorConfig | None = None,
) -> TruthValue:
    """Skrót: JitveEstimator(kb, oracle, config=config).estimate(pattern)."""
    return JitveEstimator(kb, oracle, config=config).estimate(pattern)
