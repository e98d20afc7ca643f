"""
pattern_model — struktury danych wzorców koniunkcyjnych.

Użycie:
  from pattern_model import Clause, parse_pattern, to_canonical, ...

Moduły:
  terms      — Clause, CanonicalIndex, Pattern, Block, Partition, is_var, ...
  truth      — TruthValue, count_to_confidence, NEUTRAL_TRUTH_VALUE
  errors     — ErrorCode, EstimationError, DegenerateInputError, ...
  parser     — parse_pattern, parse_clause
  canonical  — to_canonical, from_canonical, alpha_equivalent, NAME_POOL
  partitions — generate_partitions, connected_blocks, joint_variables, ...
"""

from .terms import (
    CanonicalIndex,
    Clause,
    Term,
    Pattern,
    Block,
    Partition,
    is_var,
    clause_variables,
    pattern_variables,
    constant_count,
    format_pattern,
)
from .truth import (
    DEFAULT_CONFIDENCE_K,
    NEUTRAL_TRUTH_VALUE,
    TruthValue,
    count_to_confidence,
)
from .errors import (
    ErrorCode,
    EstimationError,
    DegenerateInputError,
    CapacityExceededError,
    CollaboratorError,
)
from .parser import parse_pattern, parse_clause
from .canonical import (
    NAME_POOL,
    to_canonical,
    from_canonical,
    canonical_key,
    alpha_equivalent,
)
from .partitions import (
    generate_partitions,
    connected_components,
    connected_blocks,
    joint_variables,
    partition_joint_variables,
)

__all__ = [
    # terms
    "CanonicalIndex",
    "Clause",
    "Term",
    "Pattern",
    "Block",
    "Partition",
    "is_var",
    "clause_variables",
    "pattern_variables",
    "constant_count",
    "format_pattern",
    # truth
    "DEFAULT_CONFIDENCE_K",
    "NEUTRAL_TRUTH_VALUE",
    "TruthValue",
    "count_to_confidence",
    # errors
    "ErrorCode",
    "EstimationError",
    "DegenerateInputError",
    "CapacityExceededError",
    "CollaboratorError",
    # parser
    "parse_pattern",
    "parse_clause",
    # canonical
    "NAME_POOL",
    "to_canonical",
    "from_canonical",
    "canonical_key",
    "alpha_equivalent",
    # partitions
    "generate_partitions",
    "connected_components",
    "connected_blocks",
    "joint_variables",
    "partition_joint_variables",
]
