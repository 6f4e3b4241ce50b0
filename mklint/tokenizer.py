# mklint/tokenizer.py
"""
Makefile tokenizer: source text → ordered list of :mod:`mklint.tokens`.

Two stages:

1. **Logical lines** – physical lines ending in an odd number of
   backslashes are joined with the following line, the backslash and the
   surrounding whitespace collapsing into a single space, as bmake does.
   Each logical line remembers the physical line range it came from.
2. **Classification** – each logical line is matched against a small PEG
   grammar (parsimonious) and turned into exactly one token.  Alternatives
   are tried in order, so a tab-indented recipe line is a command even if
   it looks like an assignment, and ``.if`` wins over ``.IMPSRC=``-style
   assignments only when the word after the dot is a known directive.

Usage::

    from mklint.tokenizer import tokenize

    tokens = tokenize("PORTNAME=\\tfoo\\n.if ${FLAVOR} == py\\nPORTNAME=\\tbar\\n.endif\\n")
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator, List, Tuple, Union

from parsimonious.exceptions import ParseError, VisitationError
from parsimonious.grammar import Grammar
from parsimonious.nodes import Node, NodeVisitor

from mklint.conditional import KEYWORDS, ConditionalKind
from mklint.errors import MklintError, TokenizeError
from mklint.tokens import (
    AssignmentToken,
    BlankToken,
    CommandToken,
    CommentToken,
    ConditionalToken,
    LineRange,
    TargetToken,
    Token,
)
from mklint.variable import Modifier, Variable

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
#  GRAMMAR
# ═══════════════════════════════════════════════════════════════════

_KEYWORD_RE = "(?:" + "|".join(re.escape(k) for k in KEYWORDS) + r")(?![\w-])"

LINE_GRAMMAR = Grammar(r'''
    line          = blank / comment / command / conditional / assignment / other

    blank         = ~r"[ \t]*\Z"
    comment       = ws "#" rest
    command       = "\t" rest
    conditional   = "." ws keyword rest
    assignment    = ws varname ws modifier rest
    other         = ~r".*"

    varname       = name_part+
    name_part     = expansion / ~r"[^\s=:!?+#$]+"
    expansion     = brace_expr / paren_expr
    brace_expr    = "${" (expansion / ~r"[^{}$]+" / "$")* "}"
    paren_expr    = "$(" (expansion / ~r"[^()$]+" / "$")* ")"
    modifier      = "+=" / "?=" / ":=" / "!=" / "="

    ws            = ~r"[ \t]*"
    rest          = ~r".*"
''' + f'''
    keyword       = ~r"{_KEYWORD_RE}"
''')

_INLINE_COMMENT_RE = re.compile(r"(?<!\\)#")


# ═══════════════════════════════════════════════════════════════════
#  LOGICAL LINES
# ═══════════════════════════════════════════════════════════════════

def _is_continued(raw: str) -> bool:
    """An odd number of trailing backslashes escapes the newline."""
    count = len(raw) - len(raw.rstrip("\\"))
    return count % 2 == 1


def _physical_lines(text: str) -> List[str]:
    """Split on newlines only; a trailing CR belongs to the line ending."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def logical_lines(text: str) -> Iterator[Tuple[LineRange, str]]:
    """Yield ``(LineRange, text)`` for every logical line of *text*."""
    pieces: List[str] = []
    start = 0
    lineno = 0
    for lineno, raw in enumerate(_physical_lines(text), 1):
        if not pieces:
            start = lineno
        if _is_continued(raw):
            pieces.append(raw[:-1])
            continue
        pieces.append(raw)
        yield LineRange(start, lineno), _join(pieces)
        pieces = []
    if pieces:
        # Continuation on the last line of the file.
        yield LineRange(start, lineno), _join(pieces + [""])


def _join(pieces: List[str]) -> str:
    head = pieces[0] if len(pieces) == 1 else pieces[0].rstrip()
    tail = [p.strip() for p in pieces[1:]]
    return " ".join([head] + [p for p in tail if p])


# ═══════════════════════════════════════════════════════════════════
#  PARSE TREE → TOKEN
# ═══════════════════════════════════════════════════════════════════

class _LineVisitor(NodeVisitor):
    """Turns the parse tree of one logical line into one token."""

    unwrapped_exceptions = (MklintError,)

    def __init__(self, lines: LineRange) -> None:
        self.lines = lines

    def generic_visit(self, node: Node, visited_children: list) -> Union[list, Node]:
        return visited_children or node

    def visit_line(self, node: Node, visited_children: list) -> Token:
        return visited_children[0]

    def visit_blank(self, node: Node, _: list) -> BlankToken:
        return BlankToken(self.lines)

    def visit_comment(self, node: Node, _: list) -> CommentToken:
        return CommentToken(node.text.strip(), self.lines)

    def visit_command(self, node: Node, _: list) -> CommandToken:
        return CommandToken(node.text[1:], self.lines)

    def visit_conditional(self, node: Node, _: list) -> ConditionalToken:
        _dot, _ws, keyword, rest = node.children
        return ConditionalToken(
            kind=ConditionalKind.from_keyword(keyword.text),
            expression=rest.text.strip(),
            lines=self.lines,
        )

    def visit_assignment(self, node: Node, _: list) -> AssignmentToken:
        _ws, name, _ws2, modifier, rest = node.children
        value = _INLINE_COMMENT_RE.split(rest.text, maxsplit=1)[0]
        return AssignmentToken(
            variable=Variable(name.text, Modifier.from_operator(modifier.text)),
            value=value.strip(),
            lines=self.lines,
        )

    def visit_other(self, node: Node, _: list) -> TargetToken:
        return TargetToken(node.text, self.lines)


# ═══════════════════════════════════════════════════════════════════
#  PUBLIC API
# ═══════════════════════════════════════════════════════════════════

def tokenize(text: str, filename: str = "<stdin>") -> List[Token]:
    """Tokenize Makefile source *text*.

    Raises
    ------
    TokenizeError
        If a logical line cannot be matched by the line grammar.
    """
    tokens: List[Token] = []
    for lines, line in logical_lines(text):
        try:
            tree = LINE_GRAMMAR.parse(line)
            tokens.append(_LineVisitor(lines).visit(tree))
        except (ParseError, VisitationError) as exc:
            raise TokenizeError(str(exc), filename, lines.start) from exc
    logger.debug("%s: %d tokens", filename, len(tokens))
    return tokens


def tokenize_file(path: Union[str, Path]) -> List[Token]:
    """Read *path* as UTF-8 and tokenize it."""
    p = Path(path)
    return tokenize(p.read_text(encoding="utf-8"), filename=str(p))


__all__ = ["LINE_GRAMMAR", "logical_lines", "tokenize", "tokenize_file"]
