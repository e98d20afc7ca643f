import pytest

from pattern_model import Clause, DegenerateInputError, parse_clause, parse_pattern


def test_parse_single_clause():
    assert parse_pattern("Inheritance(?x, man)") == (Clause("Inheritance", ("?x", "man")),)


def test_parse_braced_conjunction():
    p = parse_pattern("{Inheritance(?x, man), Inheritance(?x, ugly)}")
    assert [str(c) for c in p] == ["Inheritance(?x, man)", "Inheritance(?x, ugly)"]


def test_parse_nested_and_quoted():
    c = parse_clause('Evaluation(likes, List(?x, "soda pop"))')
    assert c == Clause("Evaluation", ("likes", Clause("List", ("?x", "soda pop"))))


def test_parse_zero_arity():
    assert parse_pattern("is_valid") == (Clause("is_valid", ()),)


def test_parse_numbers_are_constants():
    assert parse_clause("age(?p, 42)").args == ("?p", "42")


@pytest.mark.parametrize("text", ["", "   ", "{}", "{ }"])
def test_parse_empty_is_degenerate(text):
    with pytest.raises(DegenerateInputError):
        parse_pattern(text)


@pytest.mark.parametrize("text", ["p(?x", "p(?x))", "p(,)", "(?x)", "p(?x) q(?y)", "p(?x) %"])
def test_parse_malformed(text):
    with pytest.raises(ValueError):
        parse_pattern(text)


def test_parse_clause_rejects_conjunction():
    with pytest.raises(ValueError):
        parse_clause("p(?x), q(?x)")


def test_quoted_constant_cannot_look_like_variable():
    with pytest.raises(ValueError):
        parse_clause("p('?x', a)")
    assert parse_clause('p("what?", a)').args == ("what?", "a")
