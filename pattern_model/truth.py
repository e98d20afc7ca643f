"""
pattern_model/truth.py — wartość prawdy (Strength, Confidence).

TruthValue — para liczb z [0, 1]:
  strength:   oszacowane prawdopodobieństwo, że wzorzec zachodzi
  confidence: wiarygodność oszacowania
"""

from __future__ import annotations

from dataclasses import dataclass

# Domyślna stała K w przeliczeniu liczności na pewność (PLN)
DEFAULT_CONFIDENCE_K = 800.0


@dataclass(frozen=True, slots=True)
class TruthValue:
    """Wartość prawdy; obie składowe muszą leżeć w [0, 1]."""
    strength:   float
    confidence: float

    def __post_init__(self) -> None:
        for name in ("strength", "confidence"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"TruthValue.{name} poza zakresem [0, 1]: {value}")

    def __str__(self) -> str:
        return f"(stv {self.strength:.6g} {self.confidence:.6g})"


# Wynik neutralny: brak partycji, brak wiedzy
NEUTRAL_TRUTH_VALUE = TruthValue(0.0, 0.0)


def count_to_confidence(count: float, k: float = DEFAULT_CONFIDENCE_K) -> float:
    """Liczność → pewność: n / (n + k)."""
    if count < 0:
        raise ValueError(f"Liczność nie może być ujemna: {count}")
    if k <= 0:
        raise ValueError(f"Stała K musi być dodatnia: {k}")
    return count / (count + k)
