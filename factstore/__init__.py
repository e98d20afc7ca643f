"""
factstore — baza faktów w pamięci dla estymatora JITVE.

Publiczne API:
  FactStore(facts, confidence_k)         baza faktów (support, rozmiar, empiryczne tv)
  load_facts_json(path)                  → (case_id, domain, Facts)
  load_facts_from_db(conn, domain)       → Facts
  match_clause(pattern, target)          → podstawienie lub None
  SubsumptionOracle, ConstantCountOracle wyrocznie porządku abstrakcji
"""

from .engine      import FactStore, Facts, Substitution, match_clause
from .loader      import load_facts_json, load_facts_from_db
from .abstraction import ORACLES, SubsumptionOracle, ConstantCountOracle

__all__ = [
    "FactStore",
    "Facts",
    "Substitution",
    "match_clause",
    "load_facts_json",
    "load_facts_from_db",
    "ORACLES",
    "SubsumptionOracle",
    "ConstantCountOracle",
]
