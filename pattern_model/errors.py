"""
pattern_model/errors.py — kody błędów i wyjątki estymacji.

ErrorCode — stałe identyfikatory klas błędów.
EstimationError i podklasy — zgłaszane do wywołującego bez modyfikacji;
nic nie jest ponawiane wewnętrznie. Dla wywołującego każdy z nich znaczy
"oszacowanie niedostępne dla tego wzorca".
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Stałe kody błędów estymatora."""

    DEGENERATE_INPUT     = "E_DEGENERATE_INPUT"      # pusty wzorzec, zerowy rozmiar bazy
    CAPACITY_EXCEEDED    = "E_CAPACITY_EXCEEDED"     # za mało nazw w puli kanonicznej
    COLLABORATOR_FAILURE = "E_COLLABORATOR_FAILURE"  # baza faktów / wyrocznia zawiodła


class EstimationError(ValueError):
    """
    Bazowy błąd estymacji.

    - code:    stały identyfikator klasy błędu (ErrorCode)
    - details: opcjonalny słownik z dodatkowymi danymi
    """

    code: ErrorCode = ErrorCode.DEGENERATE_INPUT

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details

    def __str__(self) -> str:
        return f"[{self.code}] {super().__str__()}"


class DegenerateInputError(EstimationError):
    code = ErrorCode.DEGENERATE_INPUT


class CapacityExceededError(EstimationError):
    code = ErrorCode.CAPACITY_EXCEEDED


class CollaboratorError(EstimationError):
    code = ErrorCode.COLLABORATOR_FAILURE
