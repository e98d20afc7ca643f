"""
pattern_model/partitions.py — partycje wzorca i zmienne łączne.

Publiczne API:
  generate_partitions(pattern, connected_only=False) -> list[Partition]
  connected_components(clauses)                      -> list[Block]
  connected_blocks(partition, var)                   -> list[Block]
  joint_variables(partition, block)                  -> tuple[str, ...]
  partition_joint_variables(partition)               -> tuple[str, ...]

Partycja = hipoteza niezależności: bloki są rozłączne, a ich suma to
dokładnie zbiór klauzul wzorca. Partycja jednoblokowa (pełne zapytanie
łączne) nie jest generowana.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .errors import DegenerateInputError
from .terms import Block, Clause, Partition, clause_variables, pattern_variables


def _set_partitions(items: list[Clause]) -> Iterator[list[list[Clause]]]:
    """
    Wszystkie podziały listy na bloki (liczby Bella).

    Pierwszy element trafia kolejno do każdego bloku podziału reszty,
    a na końcu tworzy własny blok.
    """
    if len(items) == 1:
        yield [items]
        return
    first = items[0]
    for smaller in _set_partitions(items[1:]):
        for n, subset in enumerate(smaller):
            yield smaller[:n] + [[first] + subset] + smaller[n + 1:]
        yield [[first]] + smaller


def connected_components(clauses: Sequence[Clause]) -> list[Block]:
    """
    Grupuje klauzule połączone wspólnymi zmiennymi.

    Klauzule w komponencie zachowują kolejność wejściową; komponenty są
    uporządkowane wg pierwszej klauzuli. Klauzula bez zmiennych tworzy
    osobny komponent.
    """
    parent = list(range(len(clauses)))

    def find(i: int) -> int:
        while parent[i] != i:
            parent[i] = parent[parent[i]]
            i = parent[i]
        return i

    owner: dict[str, int] = {}
    for i, clause in enumerate(clauses):
        for var in clause_variables(clause):
            if var in owner:
                parent[find(i)] = find(owner[var])
            else:
                owner[var] = i

    groups: dict[int, list[Clause]] = {}
    for i, clause in enumerate(clauses):
        groups.setdefault(find(i), []).append(clause)
    return [tuple(g) for g in groups.values()]


def generate_partitions(
    pattern:        Sequence[Clause],
    connected_only: bool = False,
) -> list[Partition]:
    """
    Zwraca wszystkie partycje wzorca na >= 2 bloki.

    Args:
        pattern:        niepusta sekwencja klauzul
        connected_only: zachowaj tylko partycje, w których każdy blok
                        jest spójny (połączony zmiennymi)

    Raises:
        DegenerateInputError: pusty wzorzec.
    """
    if not pattern:
        raise DegenerateInputError("Pusty wzorzec — brak klauzul do podziału.")

    result: list[Partition] = []
    for blocks in _set_partitions(list(pattern)):
        if len(blocks) < 2:
            continue
        if connected_only and any(len(connected_components(b)) != 1 for b in blocks):
            continue
        result.append(tuple(tuple(b) for b in blocks))
    return result


def connected_blocks(partition: Partition, var: str) -> list[Block]:
    """Bloki partycji odwołujące się do zmiennej var (w kolejności partycji)."""
    return [block for block in partition if var in pattern_variables(block)]


def joint_variables(partition: Partition, block: Block) -> tuple[str, ...]:
    """Zmienne bloku występujące także w innym bloku tej samej partycji."""
    own = next((i for i, b in enumerate(partition) if b is block), None)
    if own is None and block in partition:
        own = partition.index(block)
    others: set[str] = set()
    for i, other in enumerate(partition):
        if i != own:
            others.update(pattern_variables(other))
    return tuple(v for v in pattern_variables(block) if v in others)


def partition_joint_variables(partition: Partition) -> tuple[str, ...]:
    """Suma zmiennych łącznych wszystkich bloków, bez powtórzeń."""
    seen: dict[str, None] = {}
    for block in partition:
        for var in joint_variables(partition, block):
            seen.setdefault(var, None)
    return tuple(seen)
