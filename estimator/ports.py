"""
estimator/ports.py — interfejsy współpracowników i ich kontrola kontraktu.

Estymator nie zna implementacji bazy faktów ani wyroczni abstrakcji;
woła je przez poniższe protokoły. Każde wywołanie przechodzi przez
checked_*: wyjątek współpracownika albo wynik spoza kontraktu
(np. ujemna liczność) zamieniany jest na CollaboratorError.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Sequence
from typing import Any, Protocol, TypeAlias, TypeVar

from pattern_model import (
    Block,
    Clause,
    CollaboratorError,
    DegenerateInputError,
    EstimationError,
    Partition,
    Pattern,
    TruthValue,
    format_pattern,
)

T = TypeVar("T")


class KnowledgeBase(Protocol):
    def support_count(self, clause: Clause) -> int:
        ...

    def empirical_truth_values(self, blocks: Sequence[Block]) -> Sequence[TruthValue]:
        ...

    def database_size(self) -> int:
        ...


class AbstractionOracle(Protocol):
    def is_more_abstract(self, a: Clause, b: Clause) -> bool:
        ...


Partitioner: TypeAlias = Callable[[Pattern], Sequence[Partition]]


# ---------------------------------------------------------------------------
# Wywołania z kontrolą kontraktu
# ---------------------------------------------------------------------------

def _call(what: str, fn: Callable[..., T], *args: Any) -> T:
    try:
        return fn(*args)
    except EstimationError:
        raise
    except Exception as exc:
        raise CollaboratorError(f"{what} zakończone błędem: {exc}") from exc


def _is_count(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def checked_support_count(kb: KnowledgeBase, clause: Clause) -> int:
    count = _call("support_count", kb.support_count, clause)
    if not _is_count(count):
        raise CollaboratorError(
            f"support_count({clause}) zwrócił wartość spoza kontraktu: {count!r}",
            details={"clause": str(clause), "value": count},
        )
    return count


def checked_database_size(kb: KnowledgeBase) -> int:
    """
    Rozmiar bazy faktów.

    Raises:
        DegenerateInputError: rozmiar 0 (brak ograniczenia dziedziny).
        CollaboratorError:    wartość ujemna lub nie-całkowita.
    """
    size = _call("database_size", kb.database_size)
    if not _is_count(size):
        raise CollaboratorError(
            f"database_size zwrócił wartość spoza kontraktu: {size!r}",
            details={"value": size},
        )
    if size == 0:
        raise DegenerateInputError("Rozmiar bazy faktów wynosi 0.")
    return size


def checked_truth_values(kb: KnowledgeBase, blocks: Sequence[Block]) -> list[TruthValue]:
    tvs = list(_call("empirical_truth_values", kb.empirical_truth_values, blocks))
    if len(tvs) != len(blocks):
        raise CollaboratorError(
            f"empirical_truth_values zwrócił {len(tvs)} wartości dla {len(blocks)} bloków.",
        )
    for tv in tvs:
        if not isinstance(tv, TruthValue):
            raise CollaboratorError(
                f"empirical_truth_values zwrócił obiekt typu {type(tv).__name__}, "
                f"oczekiwano TruthValue.",
            )
    return tvs


def checked_is_more_abstract(oracle: AbstractionOracle, a: Clause, b: Clause) -> bool:
    answer = _call("is_more_abstract", oracle.is_more_abstract, a, b)
    if not isinstance(answer, bool):
        raise CollaboratorError(
            f"is_more_abstract({a}, {b}) zwrócił {answer!r}, oczekiwano bool.",
        )
    return answer


def _check_partition(partition: Partition, pattern: Pattern) -> None:
    if any(len(block) == 0 for block in partition):
        raise CollaboratorError(
            f"Partycja zawiera pusty blok: {[format_pattern(b) for b in partition]}",
            details={"partition": str(partition)},
        )
    covered = Counter(c for block in partition for c in block)
    if covered != Counter(pattern):
        raise CollaboratorError(
            "Bloki partycji nie pokrywają wzorca dokładnie raz: "
            f"{[format_pattern(b) for b in partition]} wobec {format_pattern(pattern)}",
            details={"partition": str(partition), "pattern": format_pattern(pattern)},
        )


def checked_partitions(partitioner: Partitioner, pattern: Pattern) -> list[Partition]:
    """
    Partycje od partycjonera, każda sprawdzona względem wzorca.

    Raises:
        CollaboratorError: pusty blok albo bloki, których suma (z krotnościami)
                           nie jest dokładnie zbiorem klauzul wzorca.
    """
    partitions = _call(
        "generate_partitions",
        lambda p: [tuple(tuple(b) for b in part) for part in partitioner(p)],
        pattern,
    )
    for partition in partitions:
        _check_partition(partition, pattern)
    return partitions
