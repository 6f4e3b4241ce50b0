# mklint/conditional.py
"""
Conditional directive model.

bmake directives start with a dot (``.if``, ``.for``, ``.include``...).
For scoping purposes each keyword falls into one of three groups:

* opens a region  – ``for``, ``if``, ``ifdef``, ``ifndef``, ``ifmake``,
  ``ifnmake``
* closes a region – ``endfor``, ``endif``
* other           – ``else``, the ``elif`` family, includes, messages,
  exports and ``undef``; these never change nesting depth
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet

from mklint.errors import UnknownConditionalError


class ConditionalKind(Enum):
    """One member per directive keyword; the value is the keyword itself."""

    DINCLUDE = "dinclude"
    ELIF = "elif"
    ELIFDEF = "elifdef"
    ELIFMAKE = "elifmake"
    ELIFNDEF = "elifndef"
    ELIFNMAKE = "elifnmake"
    ELSE = "else"
    ENDFOR = "endfor"
    ENDIF = "endif"
    ERROR = "error"
    EXPORT = "export"
    EXPORT_ENV = "export-env"
    EXPORT_LITERAL = "export-literal"
    FOR = "for"
    IF = "if"
    IFDEF = "ifdef"
    IFMAKE = "ifmake"
    IFNDEF = "ifndef"
    IFNMAKE = "ifnmake"
    INCLUDE = "include"
    INFO = "info"
    SINCLUDE = "sinclude"
    UNDEF = "undef"
    UNEXPORT = "unexport"
    UNEXPORT_ENV = "unexport-env"
    WARNING = "warning"

    @classmethod
    def from_keyword(cls, keyword: str) -> "ConditionalKind":
        """Classify a directive keyword (without the leading dot)."""
        try:
            return _BY_KEYWORD[keyword]
        except KeyError:
            raise UnknownConditionalError(keyword) from None

    @property
    def opens_scope(self) -> bool:
        return self in _OPENING

    @property
    def closes_scope(self) -> bool:
        return self in _CLOSING

    @property
    def keyword(self) -> str:
        return self.value


_BY_KEYWORD: Dict[str, ConditionalKind] = {k.value: k for k in ConditionalKind}

_OPENING: FrozenSet[ConditionalKind] = frozenset({
    ConditionalKind.FOR,
    ConditionalKind.IF,
    ConditionalKind.IFDEF,
    ConditionalKind.IFMAKE,
    ConditionalKind.IFNDEF,
    ConditionalKind.IFNMAKE,
})

_CLOSING: FrozenSet[ConditionalKind] = frozenset({
    ConditionalKind.ENDFOR,
    ConditionalKind.ENDIF,
})

# Longest first so that a regex alternation never stops at a prefix
# (``if`` before ``ifdef``, ``export`` before ``export-env``).
KEYWORDS = tuple(sorted(_BY_KEYWORD, key=lambda k: (-len(k), k)))


__all__ = ["ConditionalKind", "KEYWORDS"]
