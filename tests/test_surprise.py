import pytest

from estimator import JitveEstimator, surprisingness
from pattern_model import DegenerateInputError, TruthValue, parse_pattern

from conftest import MAN, UGLY, AlwaysAbstract


PATTERN = "Inheritance(?x, man), Inheritance(?x, ugly)"


def test_surprise_against_fact_store(small_store):
    s = surprisingness(small_store, parse_pattern(PATTERN))
    assert s.empirical.strength == pytest.approx(0.25)
    assert s.estimate.strength == pytest.approx(0.125)
    assert s.value == pytest.approx(0.125)


def test_normalized_surprise(small_store):
    s = surprisingness(small_store, parse_pattern(PATTERN), normalize=True)
    assert s.value == pytest.approx(0.5)


def test_surprise_uses_given_estimator(reference_kb):
    est = JitveEstimator(reference_kb, AlwaysAbstract())
    s = surprisingness(reference_kb, (MAN, UGLY), est)
    # empiryczna siła {man, ugly} = 48/61, JITVE = 31/61
    assert s.empirical == TruthValue(48 / 61, 0.5)
    assert s.value == pytest.approx(17 / 61)


def test_normalized_surprise_of_zero_strengths():
    from factstore import FactStore

    store = FactStore({"Inheritance": {("a", "man"), ("b", "ugly")}})
    s = surprisingness(store, parse_pattern("Inheritance(?x, tall), Inheritance(?x, old)"), normalize=True)
    assert s.value == 0.0


def test_empty_pattern_is_degenerate(small_store):
    with pytest.raises(DegenerateInputError):
        surprisingness(small_store, ())


def test_normalize_is_keyword_only(small_store):
    with pytest.raises(TypeError):
        surprisingness(small_store, parse_pattern(PATTERN), None, True)
