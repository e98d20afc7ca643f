import pytest

from pattern_model import (
    NAME_POOL,
    CanonicalIndex,
    CapacityExceededError,
    Clause,
    alpha_equivalent,
    format_pattern,
    from_canonical,
    is_var,
    parse_pattern,
    to_canonical,
)


def _shape(pattern):
    """Kształt wzorca: zmienne zastąpione przez '?', reszta bez zmian."""
    def term(t):
        if isinstance(t, Clause):
            return (t.pred, tuple(term(a) for a in t.args))
        return "?" if is_var(t) else t
    return tuple(term(c) for c in pattern)


def test_positional_successor_encoding():
    canon = to_canonical(parse_pattern("Inheritance(?x, ?y, ?z)"))
    assert format_pattern(canon) == "Inheritance(0, succ(0), succ(succ(0)))"
    assert canon[0].args == (CanonicalIndex(0), CanonicalIndex(1), CanonicalIndex(2))


def test_constants_do_not_advance_index():
    canon = to_canonical(parse_pattern("Inheritance(?x, man), Inheritance(?y, ugly)"))
    assert format_pattern(canon) == "Inheritance(0, man), Inheritance(succ(0), ugly)"


def test_nested_clause_shares_running_index():
    canon = to_canonical(parse_pattern("Evaluation(?p, List(?a, ?b), ?c)"))
    assert str(canon[0]) == "Evaluation(0, List(succ(0), succ(succ(0))), succ(succ(succ(0))))"


def test_repeated_variable_gets_new_index_per_occurrence():
    # zachowanie domyślne: aliasowanie NIE jest zachowane
    canon = to_canonical(parse_pattern("Inheritance(?x, ?x)"))
    assert canon[0].args == (CanonicalIndex(0), CanonicalIndex(1))
    back = from_canonical(canon)
    assert back[0].args == ("?A", "?B")


def test_preserve_aliasing_maps_by_name():
    canon = to_canonical(parse_pattern("Inheritance(?x, ?y), Inheritance(?y, ?x)"), preserve_aliasing=True)
    assert format_pattern(canon) == "Inheritance(0, succ(0)), Inheritance(succ(0), 0)"
    back = from_canonical(canon, preserve_aliasing=True)
    assert format_pattern(back) == "Inheritance(?A, ?B), Inheritance(?B, ?A)"


def test_variable_names_do_not_matter():
    a = parse_pattern("Inheritance(?x, man), Inheritance(?x, ugly)")
    b = parse_pattern("Inheritance(?who, man), Inheritance(?who, ugly)")
    assert to_canonical(a) == to_canonical(b)
    assert hash(to_canonical(a)) == hash(to_canonical(b))
    assert alpha_equivalent(a, b)


def test_alpha_equivalence_respects_aliasing():
    assert not alpha_equivalent(parse_pattern("p(?x, ?x)"), parse_pattern("p(?x, ?y)"))
    # tryb po wystąpieniu nie odróżnia tych wzorców
    assert to_canonical(parse_pattern("p(?x, ?x)")) == to_canonical(parse_pattern("p(?x, ?y)"))


@pytest.mark.parametrize("text", [
    "Inheritance(?x, man), Inheritance(?x, sodaDrinker), Inheritance(?x, ugly)",
    "Evaluation(likes, List(?x, ?y)), Inheritance(?y, soda)",
    "p(?x, ?x, c)",
    "is_valid",
])
def test_round_trip_is_structurally_isomorphic(text):
    p = parse_pattern(text)
    back = from_canonical(to_canonical(p))
    assert _shape(back) == _shape(p)
    # każde wystąpienie dostaje odrębną nazwę
    assert to_canonical(back) == to_canonical(p)


def test_conversion_is_pure():
    p = parse_pattern("p(?x, ?y)")
    assert to_canonical(p) == to_canonical(p)
    assert from_canonical(to_canonical(p)) == from_canonical(to_canonical(p))


def test_pool_capacity_exceeded():
    assert len(NAME_POOL) == 8
    p = parse_pattern("p(?a, ?b, ?c, ?d, ?e, ?f, ?g, ?h, ?i)")
    with pytest.raises(CapacityExceededError) as exc:
        from_canonical(to_canonical(p))
    assert exc.value.code == "E_CAPACITY_EXCEEDED"


def test_pool_counts_occurrences_not_values():
    p = parse_pattern("p(?x, ?x, ?x, ?x, ?x), q(?x, ?x, ?x, ?x)")
    with pytest.raises(CapacityExceededError):
        from_canonical(to_canonical(p))
    # z aliasowaniem wystarcza jedna nazwa
    back = from_canonical(to_canonical(p, preserve_aliasing=True), preserve_aliasing=True)
    assert format_pattern(back) == "p(?A, ?A, ?A, ?A, ?A), q(?A, ?A, ?A, ?A)"


def test_exactly_pool_size_fits():
    p = parse_pattern("p(?a, ?b, ?c, ?d, ?e, ?f, ?g, ?h)")
    back = from_canonical(to_canonical(p))
    assert back[0].args == NAME_POOL


def test_options_are_keyword_only():
    p = parse_pattern("p(?x, ?x)")
    with pytest.raises(TypeError):
        to_canonical(p, True)
    with pytest.raises(TypeError):
        from_canonical(to_canonical(p), True)
