"""
pattern_model/canonical.py — postać kanoniczna wzorca (indeksy pozycyjne).

Publiczne API:
  to_canonical(pattern, *, preserve_aliasing=False)           -> Pattern
  from_canonical(pattern, *, preserve_aliasing=False, pool)  -> Pattern
  alpha_equivalent(a, b)                                  -> bool
  canonical_key(clauses)                                  -> Pattern

Przejście: w głąb, od lewej do prawej, łącznie z zagnieżdżonymi klauzulami.
Jeden bieżący indeks (od zera) dla całego wzorca:
  - zmienna     → CanonicalIndex(indeks), indeks += 1
  - stała       → bez zmian, indeks bez zmian
  - klauzula    → najpierw rekurencja, potem kolejne argumenty

Tryb domyślny (preserve_aliasing=False) nadaje NOWY indeks każdemu
WYSTĄPIENIU zmiennej — Inheritance(?x, ?x) → Inheritance(0, succ(0)).
Konwersja jest spójna (round-trip bez sprzeczności), ale gubi aliasowanie.
preserve_aliasing=True mapuje po pierwszym wystąpieniu nazwy
— Inheritance(?x, ?x) → Inheritance(0, 0).

Odwrotność pobiera nazwy ze skończonej puli NAME_POOL (8 nazw).
"""

from __future__ import annotations

from collections.abc import Sequence

from .errors import CapacityExceededError
from .terms import CanonicalIndex, Clause, Pattern, Term, is_var

# Pula świeżych nazw zmiennych dla from_canonical
NAME_POOL: tuple[str, ...] = tuple(f"?{c}" for c in "ABCDEFGH")


# ---------------------------------------------------------------------------
# Wzorzec → postać kanoniczna
# ---------------------------------------------------------------------------

class _Indexer:
    """Bieżący indeks pozycyjny; w trybie aliasowania pamięta nazwy."""

    def __init__(self, preserve_aliasing: bool) -> None:
        self._next  = 0
        self._names: dict[str, int] | None = {} if preserve_aliasing else None

    def index_for(self, var: str) -> CanonicalIndex:
        if self._names is not None and var in self._names:
            return CanonicalIndex(self._names[var])
        idx = self._next
        self._next += 1
        if self._names is not None:
            self._names[var] = idx
        return CanonicalIndex(idx)


def _canon_clause(clause: Clause, indexer: _Indexer) -> Clause:
    args: list[Term] = []
    for arg in clause.args:
        if isinstance(arg, Clause):
            args.append(_canon_clause(arg, indexer))
        elif is_var(arg):
            args.append(indexer.index_for(arg))
        else:
            args.append(arg)
    return Clause(clause.pred, tuple(args))


def to_canonical(pattern: Sequence[Clause], *, preserve_aliasing: bool = False) -> Pattern:
    """Zamienia zmienne wzorca na indeksy pozycyjne (funkcja czysta)."""
    indexer = _Indexer(preserve_aliasing)
    return tuple(_canon_clause(c, indexer) for c in pattern)


# ---------------------------------------------------------------------------
# Postać kanoniczna → wzorzec
# ---------------------------------------------------------------------------

class _NameSupply:
    """Wydaje nazwy z puli; przekroczenie pojemności → CapacityExceededError."""

    def __init__(self, pool: Sequence[str], preserve_aliasing: bool) -> None:
        self._pool  = tuple(pool)
        self._used  = 0
        self._names: dict[int, str] | None = {} if preserve_aliasing else None

    def name_for(self, index: CanonicalIndex) -> str:
        if self._names is not None and index.n in self._names:
            return self._names[index.n]
        if self._used >= len(self._pool):
            raise CapacityExceededError(
                f"Wzorzec wymaga więcej niż {len(self._pool)} nazw zmiennych "
                f"(pula: {', '.join(self._pool)}).",
                details={"pool_size": len(self._pool)},
            )
        name = self._pool[self._used]
        self._used += 1
        if self._names is not None:
            self._names[index.n] = name
        return name


def _decanon_clause(clause: Clause, supply: _NameSupply) -> Clause:
    args: list[Term] = []
    for arg in clause.args:
        if isinstance(arg, Clause):
            args.append(_decanon_clause(arg, supply))
        elif isinstance(arg, CanonicalIndex):
            args.append(supply.name_for(arg))
        else:
            args.append(arg)
    return Clause(clause.pred, tuple(args))


def from_canonical(
    pattern:           Sequence[Clause],
    *,
    preserve_aliasing: bool = False,
    pool:              Sequence[str] = NAME_POOL,
) -> Pattern:
    """
    Zamienia indeksy pozycyjne na świeże nazwy zmiennych z puli.

    W trybie domyślnym każdy napotkany placeholder zużywa jedno miejsce
    w puli (nie każda odrębna wartość indeksu).

    Raises:
        CapacityExceededError: placeholderów więcej niż nazw w puli.
    """
    supply = _NameSupply(pool, preserve_aliasing)
    return tuple(_decanon_clause(c, supply) for c in pattern)


# ---------------------------------------------------------------------------
# Porównania niezależne od nazw zmiennych
# ---------------------------------------------------------------------------

def canonical_key(clauses: Sequence[Clause]) -> Pattern:
    """Klucz do cache/deduplikacji: postać kanoniczna z zachowaniem aliasowania."""
    return to_canonical(clauses, preserve_aliasing=True)


def alpha_equivalent(a: Sequence[Clause], b: Sequence[Clause]) -> bool:
    """True gdy wzorce różnią się wyłącznie nazwami zmiennych."""
    return canonical_key(a) == canonical_key(b)
