# mklint/tokens.py
"""
Token variants produced by :mod:`mklint.tokenizer`.

Every logical line of a Makefile becomes exactly one token.  The set of
variants is closed: code that dispatches on tokens should handle the
variants it cares about and fall through explicitly for the rest.

    ConditionalToken   .if / .for / .endif / .include / ...
    AssignmentToken    NAME= value, NAME+= value, ...
    CommentToken       # text
    CommandToken       <tab>recipe line
    TargetToken        anything else (target rules, stray text)
    BlankToken         empty or whitespace-only line
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from mklint.conditional import ConditionalKind
from mklint.variable import Modifier, Variable


@dataclass(frozen=True, slots=True)
class LineRange:
    """Physical, 1-based, inclusive line span of a logical line."""

    start: int = 1
    end: int = 1

    def __str__(self) -> str:
        if self.start == self.end:
            return str(self.start)
        return f"{self.start}-{self.end}"


@dataclass(frozen=True, slots=True)
class ConditionalToken:
    kind: ConditionalKind
    expression: str = ""
    lines: LineRange = field(default_factory=LineRange)


@dataclass(frozen=True, slots=True)
class AssignmentToken:
    variable: Variable
    value: str = ""
    lines: LineRange = field(default_factory=LineRange)

    @property
    def name(self) -> str:
        return self.variable.name

    @property
    def modifier(self) -> Modifier:
        return self.variable.modifier


@dataclass(frozen=True, slots=True)
class CommentToken:
    text: str
    lines: LineRange = field(default_factory=LineRange)


@dataclass(frozen=True, slots=True)
class CommandToken:
    text: str
    lines: LineRange = field(default_factory=LineRange)


@dataclass(frozen=True, slots=True)
class TargetToken:
    text: str
    lines: LineRange = field(default_factory=LineRange)


@dataclass(frozen=True, slots=True)
class BlankToken:
    lines: LineRange = field(default_factory=LineRange)


Token = Union[
    ConditionalToken,
    AssignmentToken,
    CommentToken,
    CommandToken,
    TargetToken,
    BlankToken,
]


__all__ = [
    "LineRange",
    "ConditionalToken",
    "AssignmentToken",
    "CommentToken",
    "CommandToken",
    "TargetToken",
    "BlankToken",
    "Token",
]
