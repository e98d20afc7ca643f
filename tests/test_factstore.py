import json

import pytest

from factstore import FactStore, load_facts_from_db, load_facts_json, match_clause
from pattern_model import Clause, TruthValue, count_to_confidence, parse_clause, parse_pattern


def test_database_size_counts_facts(small_store):
    assert small_store.database_size() == 4


def test_support_count_distinct_bindings(small_store):
    assert small_store.support_count(parse_clause("Inheritance(?x, man)")) == 2
    assert small_store.support_count(parse_clause("Inheritance(?x, ?y)")) == 4
    assert small_store.support_count(parse_clause("Inheritance(?x, tall)")) == 0


def test_support_count_ground_clause(small_store):
    assert small_store.support_count(parse_clause("Inheritance(a, man)")) == 1
    assert small_store.support_count(parse_clause("Inheritance(c, man)")) == 0


def test_count_matches_conjunction(small_store):
    assert small_store.count_matches(parse_pattern("Inheritance(?x, man), Inheritance(?x, ugly)")) == 1
    assert small_store.count_matches(parse_pattern("Inheritance(?x, man), Inheritance(?y, ugly)")) == 4


def test_repeated_variable_must_bind_consistently():
    store = FactStore({"likes": {("a", "a"), ("a", "b")}})
    assert store.support_count(parse_clause("likes(?x, ?x)")) == 1
    assert store.support_count(parse_clause("likes(?x, ?y)")) == 2


def test_support_cache_by_alpha_equivalence(small_facts):
    class Counting(FactStore):
        calls = 0

        def count_matches(self, clauses):
            Counting.calls += 1
            return super().count_matches(clauses)

    store = Counting(small_facts)
    assert store.support_count(parse_clause("Inheritance(?x, man)")) == 2
    assert store.support_count(parse_clause("Inheritance(?who, man)")) == 2
    assert Counting.calls == 1
    # inne aliasowanie → inny klucz cache
    store.support_count(parse_clause("Inheritance(?x, ?x)"))
    store.support_count(parse_clause("Inheritance(?x, ?y)"))
    assert Counting.calls == 3


def test_empirical_truth_values(small_store):
    blocks = [
        (parse_clause("Inheritance(?x, man)"),),
        (parse_clause("Inheritance(?x, ?y)"),),
        (parse_clause("Inheritance(a, man)"),),
    ]
    tvs = small_store.empirical_truth_values(blocks)
    assert tvs[0] == TruthValue(0.5, count_to_confidence(4))
    assert tvs[1] == TruthValue(0.25, count_to_confidence(16))
    assert tvs[2] == TruthValue(1.0, count_to_confidence(1))


def test_empty_store_gives_zero_truth_values():
    store = FactStore({})
    assert store.database_size() == 0
    assert store.empirical_truth_values([(parse_clause("p(?x)"),)]) == [TruthValue(0.0, 0.0)]


def test_nested_terms_match():
    inner = Clause("List", ("allen", "soda"))
    store = FactStore({"Evaluation": {("likes", inner)}})
    assert store.support_count(parse_clause("Evaluation(likes, List(?x, soda))")) == 1
    assert store.support_count(parse_clause("Evaluation(likes, ?pair)")) == 1
    assert store.support_count(parse_clause("Evaluation(likes, List(?x, tea))")) == 0


def test_match_clause_is_one_way():
    general = parse_clause("Inheritance(?a, ?b)")
    specific = parse_clause("Inheritance(?x, man)")
    assert match_clause(general, specific) == {"?a": "?x", "?b": "man"}
    assert match_clause(specific, general) is None


def test_load_facts_json(tmp_path):
    path = tmp_path / "kb.json"
    path.write_text(json.dumps({
        "case_id": "c1",
        "domain": "generic",
        "facts": [
            {"pred": "Inheritance", "args": ["allen", "man"]},
            {"pred": "age", "args": ["allen", 42]},
            {"pred": "Evaluation", "args": ["likes", {"pred": "List", "args": ["allen", "soda"]}]},
        ],
    }), encoding="utf-8")
    case_id, domain, facts = load_facts_json(path)
    assert (case_id, domain) == ("c1", "generic")
    assert facts["age"] == {("allen", "42")}
    assert facts["Evaluation"] == {("likes", Clause("List", ("allen", "soda")))}


def test_load_facts_json_rejects_variables(tmp_path):
    path = tmp_path / "kb.json"
    path.write_text(json.dumps({"facts": [{"pred": "p", "args": ["?x"]}]}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_facts_json(path)


class _FakeCursor:
    def __init__(self, rows):
        self.rows = rows
        self.executed = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params):
        self.executed.append((sql, params))

    def fetchall(self):
        return self.rows


class _FakeConn:
    def __init__(self, rows):
        self.cur = _FakeCursor(rows)

    def cursor(self):
        return self.cur


def test_load_facts_from_db():
    conn = _FakeConn([
        ("Inheritance", ["allen", "man"]),
        ("Inheritance", '["bob", "man"]'),
        ("flag", None),
    ])
    facts = load_facts_from_db(conn, domain="generic")
    assert facts == {
        "Inheritance": {("allen", "man"), ("bob", "man")},
        "flag": {()},
    }
    sql, params = conn.cur.executed[0]
    assert "WHERE domain = %s" in sql and params == ["generic"]


def test_load_facts_from_db_without_domain():
    conn = _FakeConn([])
    assert load_facts_from_db(conn) == {}
    sql, params = conn.cur.executed[0]
    assert "WHERE" not in sql and params == []
