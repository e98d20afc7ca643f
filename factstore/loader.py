"""
factstore/loader.py — ładowanie faktów z JSON i z bazy PostgreSQL.

Publiczne API:
  load_facts_json(path)                 -> (case_id, domain, Facts)
  load_facts_from_db(conn, domain=None) -> Facts
"""

from __future__ import annotations

import json
import pathlib
from typing import Any, Optional

from pattern_model import Clause, Term

from .engine import Facts


# ---------------------------------------------------------------------------
# Argumenty faktów
# ---------------------------------------------------------------------------

def _term_from_json(raw: Any) -> Term:
    """Argument faktu: string/liczba → str, obiekt {"pred", "args"} → Clause."""
    if isinstance(raw, dict):
        return Clause(
            pred=str(raw["pred"]),
            args=tuple(_term_from_json(a) for a in raw.get("args", [])),
        )
    term = str(raw)
    if term.startswith("?"):
        raise ValueError(f"Fakt nie może zawierać zmiennej: '{term}'")
    return term


def _add_fact(facts: Facts, raw: dict) -> None:
    pred = str(raw["pred"])
    args = tuple(_term_from_json(a) for a in raw.get("args", []))
    facts.setdefault(pred, set()).add(args)


# ---------------------------------------------------------------------------
# Fakty z JSON
# ---------------------------------------------------------------------------

def load_facts_json(path: pathlib.Path) -> tuple[str, str, Facts]:
    """
    Wczytuje fakty z pliku JSON.

    Oczekiwany format::

        {
            "case_id": "ugly-man",
            "domain":  "generic",
            "facts": [
                {"pred": "Inheritance", "args": ["allen", "man"]},
                {"pred": "Evaluation",  "args": ["likes", {"pred": "List", "args": ["allen", "soda"]}]}
            ]
        }

    Wartości liczbowe w args są konwertowane na stringi.

    Returns:
        (case_id, domain, facts_dict)
    """
    raw     = json.loads(path.read_text(encoding="utf-8"))
    case_id = raw.get("case_id", "")
    domain  = raw.get("domain", "generic")
    facts: Facts = {}

    for f in raw.get("facts", []):
        _add_fact(facts, f)

    return case_id, domain, facts


# ---------------------------------------------------------------------------
# Fakty z bazy
# ---------------------------------------------------------------------------

def load_facts_from_db(conn, domain: Optional[str] = None) -> Facts:
    """
    Ładuje fakty z tabeli fact (pred, args jsonb, domain).

    Args:
        conn:   otwarte połączenie psycopg2
        domain: opcjonalny filtr po domenie

    Returns:
        Słownik pred -> set[tuple[...]].
    """
    where  = "WHERE domain = %s" if domain else ""
    params = [domain] if domain else []
    sql    = f"SELECT pred, args FROM fact {where} ORDER BY id"

    with conn.cursor() as cur:
        cur.execute(sql, params)
        rows = cur.fetchall()

    facts: Facts = {}
    for pred, args_raw in rows:
        if isinstance(args_raw, str):
            args_list = json.loads(args_raw)
        else:
            args_list = args_raw or []
        _add_fact(facts, {"pred": pred, "args": args_list})

    return facts
