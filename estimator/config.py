"""
estimator/config.py — konfiguracja estymatora ze zmiennych środowiskowych.

Zmienne środowiskowe (wszystkie opcjonalne):
  JITVE_CONFIDENCE_DAMPING   mnożnik pewności partycji     (domyślnie 0.1)
  JITVE_MAX_WORKERS          liczba wątków dla partycji    (domyślnie 1)
  JITVE_CONFIDENCE_K         stała K liczność → pewność     (domyślnie 800)
  JITVE_CONNECTED_ONLY       tylko partycje o spójnych blokach (0/1)

Opcjonalnie plik .env w katalogu głównym projektu:
  JITVE_MAX_WORKERS=4
"""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv

from pattern_model import DEFAULT_CONFIDENCE_K

load_dotenv(pathlib.Path(__file__).resolve().parent.parent / ".env", override=False)

_ENV_DAMPING   = "JITVE_CONFIDENCE_DAMPING"
_ENV_WORKERS   = "JITVE_MAX_WORKERS"
_ENV_K         = "JITVE_CONFIDENCE_K"
_ENV_CONNECTED = "JITVE_CONNECTED_ONLY"

_TRUE_VALUES  = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True, slots=True)
class EstimatorConfig:
    """
    Parametry estymatora.

    - confidence_damping: mnożnik pewności pierwszego bloku (niezależność
                          wprowadza dodatkową niepewność)
    - max_workers:        > 1 → partycje liczone równolegle w wątkach
    - confidence_k:       stała K dla empirycznej pewności bazy faktów
    - connected_only:     generuj tylko partycje o spójnych blokach
    """
    confidence_damping: float = 0.1
    max_workers:        int   = 1
    confidence_k:       float = DEFAULT_CONFIDENCE_K
    connected_only:     bool  = False

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence_damping <= 1.0:
            raise ValueError(
                f"confidence_damping poza zakresem [0, 1]: {self.confidence_damping}"
            )
        if self.max_workers < 1:
            raise ValueError(f"max_workers musi być >= 1: {self.max_workers}")
        if self.confidence_k <= 0:
            raise ValueError(f"confidence_k musi być dodatnie: {self.confidence_k}")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"Zmienna {name} nie jest liczbą: '{raw}'") from None


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Zmienna {name} nie jest liczbą całkowitą: '{raw}'") from None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Zmienna {name} nie jest wartością logiczną: '{raw}'")


def load_config() -> EstimatorConfig:
    """Buduje EstimatorConfig ze zmiennych środowiskowych (z domyślnymi wartościami)."""
    defaults = EstimatorConfig()
    return EstimatorConfig(
        confidence_damping=_env_float(_ENV_DAMPING, defaults.confidence_damping),
        max_workers=_env_int(_ENV_WORKERS, defaults.max_workers),
        confidence_k=_env_float(_ENV_K, defaults.confidence_k),
        connected_only=_env_bool(_ENV_CONNECTED, defaults.connected_only),
    )
