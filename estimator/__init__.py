"""
estimator — silnik JITVE (Joint-Independent Truth-Value Estimation).

Publiczne API:
  estimate_domain_size(kb, clause)                        -> float
  resolve_candidates(kb, oracle, clauses, target, n)      -> list[float | None]
  chain_probability(kb, oracle, db_size, clauses)         -> float
  joint_consistency(kb, oracle, db_size, partition, vars) -> float
  JitveEstimator(kb, oracle, partitioner, config)         klasa estymatora
  estimate(kb, pattern, oracle, config)                   -> TruthValue
  surprisingness(kb, pattern, estimator, normalize)       -> Surprise
  EstimatorConfig, load_config()                          konfiguracja
  KnowledgeBase, AbstractionOracle, Partitioner           protokoły współpracowników
"""

from .config      import EstimatorConfig, load_config
from .ports       import AbstractionOracle, KnowledgeBase, Partitioner
from .domain      import estimate_domain_size, resolve_candidates
from .consistency import chain_probability, joint_consistency
from .jitve       import JitveEstimator, PartitionEstimate, average_truth_value, estimate
from .surprise    import Surprise, surprisingness

__all__ = [
    "EstimatorConfig",
    "load_config",
    "AbstractionOracle",
    "KnowledgeBase",
    "Partitioner",
    "estimate_domain_size",
    "resolve_candidates",
    "chain_probability",
    "joint_consistency",
    "JitveEstimator",
    "PartitionEstimate",
    "average_truth_value",
    "estimate",
    "Surprise",
    "surprisingness",
]
