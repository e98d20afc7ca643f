import pytest

from factstore import FactStore
from pattern_model import Clause, TruthValue, parse_clause


class TabulatedKB:
    """Stub bazy faktów: statystyki podane wprost, bez dopasowywania."""

    def __init__(self, db_size, supports, truth_values):
        self._db_size = db_size
        self._supports = supports
        self._tvs = truth_values
        self.support_calls = []

    def support_count(self, clause):
        self.support_calls.append(clause)
        return self._supports[clause]

    def empirical_truth_values(self, blocks):
        return [self._tvs[frozenset(b)] for b in blocks]

    def database_size(self):
        return self._db_size


class AlwaysAbstract:
    def is_more_abstract(self, a, b):
        return True


class NeverAbstract:
    def is_more_abstract(self, a, b):
        return False


MAN = parse_clause("Inheritance(?x, man)")
SODA = parse_clause("Inheritance(?x, sodaDrinker)")
UGLY = parse_clause("Inheritance(?x, ugly)")


def _tv(k, confidence=0.5):
    return TruthValue(k / 61, confidence)


@pytest.fixture
def reference_kb():
    # 61 osobników; każde pojęcie ma support 1, więc przy wyroczni, dla której
    # każda wcześniejsza klauzula jest bardziej abstrakcyjna, M(X) = 1
    return TabulatedKB(
        db_size=61,
        supports={MAN: 1, SODA: 1, UGLY: 1},
        truth_values={
            frozenset({MAN}): _tv(1, 0.7),
            frozenset({SODA}): _tv(50, 0.6),
            frozenset({UGLY}): _tv(61, 0.9),
            frozenset({MAN, SODA}): _tv(48),
            frozenset({MAN, UGLY}): _tv(48),
            frozenset({SODA, UGLY}): _tv(48),
            frozenset({MAN, SODA, UGLY}): _tv(40),
        },
    )


@pytest.fixture
def small_facts():
    # a: man + ugly, b: man, c: ugly → D = 4
    return {
        "Inheritance": {
            ("a", "man"),
            ("a", "ugly"),
            ("b", "man"),
            ("c", "ugly"),
        },
    }


@pytest.fixture
def small_store(small_facts):
    return FactStore(small_facts)
