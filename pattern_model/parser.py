"""
pattern_model/parser.py — parsowanie wzorców z tekstu.

Publiczne API:
  parse_pattern(text) -> Pattern
  parse_clause(text)  -> Clause

Przykłady::

    "Inheritance(?x, man)"                      → (Clause("Inheritance", ("?x", "man")),)
    "{Inheritance(?x, man), Inheritance(?x, ugly)}"
                                                → dwie klauzule
    "Evaluation(likes, List(?x, ?y))"           → klauzula z zagnieżdżoną listą
    "is_valid"                                  → (Clause("is_valid", ()),)
"""

from __future__ import annotations

import re

from .errors import DegenerateInputError
from .terms import Clause, Pattern, Term, is_var

_TOKEN_RE = re.compile(
    r"""\s*(?:
        (?P<var>\?[A-Za-z_][A-Za-z0-9_]*)
      | (?P<quoted>"[^"]*"|'[^']*')
      | (?P<name>[A-Za-z0-9_][A-Za-z0-9_\-.]*)
      | (?P<punct>[(),{}])
    )""",
    re.VERBOSE,
)


def _tokenize(text: str) -> list[tuple[str, str, int]]:
    tokens: list[tuple[str, str, int]] = []
    pos = 0
    while pos < len(text):
        if text[pos:].strip() == "":
            break
        m = _TOKEN_RE.match(text, pos)
        if not m or m.end() == pos:
            raise ValueError(f"Nieoczekiwany znak na pozycji {pos}: '{text[pos:pos + 10]}'")
        kind = m.lastgroup or ""
        value = m.group(kind)
        tokens.append((kind, value, m.start(kind)))
        pos = m.end()
    return tokens


class _Parser:
    """Parser zstępujący: wzorzec := klauzula (',' klauzula)*."""

    def __init__(self, text: str) -> None:
        self._text   = text
        self._tokens = _tokenize(text)
        self._i      = 0

    def _peek(self) -> tuple[str, str, int] | None:
        return self._tokens[self._i] if self._i < len(self._tokens) else None

    def _next(self) -> tuple[str, str, int]:
        tok = self._peek()
        if tok is None:
            raise ValueError(f"Nieoczekiwany koniec wzorca: '{self._text}'")
        self._i += 1
        return tok

    def _expect(self, punct: str) -> None:
        kind, value, pos = self._next()
        if kind != "punct" or value != punct:
            raise ValueError(f"Oczekiwano '{punct}' na pozycji {pos}, otrzymano '{value}'")

    def _at(self, punct: str) -> bool:
        tok = self._peek()
        return tok is not None and tok[0] == "punct" and tok[1] == punct

    # ------------------------------------------------------------------

    def pattern(self) -> Pattern:
        braced = self._at("{")
        if braced:
            self._next()
        clauses = [self.clause()]
        while self._at(","):
            self._next()
            clauses.append(self.clause())
        if braced:
            self._expect("}")
        tok = self._peek()
        if tok is not None:
            raise ValueError(f"Nadmiarowy fragment na pozycji {tok[2]}: '{tok[1]}'")
        return tuple(clauses)

    def clause(self) -> Clause:
        kind, value, pos = self._next()
        if kind != "name":
            raise ValueError(f"Oczekiwano nazwy predykatu na pozycji {pos}, otrzymano '{value}'")
        if not self._at("("):
            return Clause(value, ())
        self._next()
        args: list[Term] = []
        if not self._at(")"):
            args.append(self._arg())
            while self._at(","):
                self._next()
                args.append(self._arg())
        self._expect(")")
        return Clause(value, tuple(args))

    def _arg(self) -> Term:
        tok = self._peek()
        if tok is None:
            raise ValueError(f"Nieoczekiwany koniec wzorca: '{self._text}'")
        kind, value, pos = tok
        if kind == "var":
            self._next()
            return value
        if kind == "quoted":
            self._next()
            text = value[1:-1]
            if is_var(text):
                raise ValueError(
                    f"Stała w cudzysłowie nie może zaczynać się od '?' (pozycja {pos}): {value}"
                )
            return text
        if kind == "name":
            after = self._tokens[self._i + 1] if self._i + 1 < len(self._tokens) else None
            if after is not None and after[0] == "punct" and after[1] == "(":
                return self.clause()
            self._next()
            return value
        raise ValueError(f"Oczekiwano argumentu na pozycji {pos}, otrzymano '{value}'")


def parse_pattern(text: str) -> Pattern:
    """
    Parsuje tekst wzorca na krotkę klauzul.

    Raises:
        DegenerateInputError: pusty tekst (pusty wzorzec).
        ValueError:           nieprawidłowa składnia.
    """
    if not text.strip().strip("{}").strip():
        raise DegenerateInputError("Pusty wzorzec — wymagana co najmniej jedna klauzula.")
    return _Parser(text).pattern()


def parse_clause(text: str) -> Clause:
    """Parsuje pojedynczą klauzulę; podnosi ValueError gdy tekst zawiera ich więcej."""
    clauses = parse_pattern(text)
    if len(clauses) != 1:
        raise ValueError(f"Oczekiwano jednej klauzuli, otrzymano {len(clauses)}: '{text}'")
    return clauses[0]
