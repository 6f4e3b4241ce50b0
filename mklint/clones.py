# mklint/clones.py
"""
lint.clones — variables set twice or more.

A variable that receives a plain ``=`` assignment more than once at the
same scope level is almost always a mistake: the later assignment silently
wins.  Scope is tracked through ``.if``/``.for`` nesting:

* two top-level assignments clash immediately;
* an assignment inside a conditional region clashes with a top-level one
  once the outermost region is closed;
* assignments inside one region, or in sibling regions, do not clash,
  since only one branch is expected to take effect.

``+=``, ``?=``, ``:=`` and ``!=`` are never counted.

Example::

    PORTNAME=   foo          # top level
    .if ${FLAVOR} == lite
    PORTNAME=   foo-lite     # clashes with line 1 at .endif
    .endif
"""

from __future__ import annotations

import json
import logging
from typing import Iterable, List, Sequence, Set

from mklint.output import OutputSink, paint
from mklint.rules import Rule, RuleContext, register_rule
from mklint.settings import LintSettings
from mklint.tokens import AssignmentToken, ConditionalToken, Token

logger = logging.getLogger(__name__)

HEADER = "# Variables set twice or more"


def _merge(clones: Set[str], seen: Set[str], seen_in_cond: Set[str]) -> None:
    clones.update(seen_in_cond & seen)
    seen_in_cond.clear()


def find_clones(tokens: Iterable[Token]) -> List[str]:
    """Return the sorted names plain-assigned more than once per scope."""
    seen: Set[str] = set()
    seen_in_cond: Set[str] = set()
    clones: Set[str] = set()
    depth = 0

    for token in tokens:
        if isinstance(token, ConditionalToken):
            if token.kind.opens_scope:
                depth += 1
            elif token.kind.closes_scope:
                depth -= 1
                if depth <= 0:
                    if depth < 0:
                        logger.warning(
                            "line %s: .%s without matching opening directive",
                            token.lines, token.kind.keyword,
                        )
                    _merge(clones, seen, seen_in_cond)
                    depth = 0
        elif isinstance(token, AssignmentToken):
            if not token.variable.is_plain:
                continue
            if depth > 0:
                seen_in_cond.add(token.name)
            elif token.name in seen:
                clones.add(token.name)
            else:
                seen.add(token.name)
        else:
            # Comments, commands, targets and blank lines carry no assignment.
            continue

    if depth > 0 and seen_in_cond:
        logger.warning(
            "input ends inside %d open conditional(s); ignoring %d "
            "variable(s) assigned there", depth, len(seen_in_cond),
        )
    return sorted(clones)


def report_clones(
    names: Sequence[str],
    sink: OutputSink,
    settings: LintSettings,
) -> None:
    """Write the human-readable report for *names*; nothing if empty."""
    if not names:
        return
    sink.write_line(paint(HEADER, "cyan", settings))
    for name in names:
        sink.write_line(name)


@register_rule
class ClonesRule(Rule):
    name = "lint.clones"
    description = "variables set twice or more at the same scope"

    def check(self, tokens: Sequence[Token], ctx: RuleContext) -> List[str]:
        clones = find_clones(tokens)
        logger.debug("%s: %d clone(s)", ctx.filename, len(clones))
        return clones

    def report(self, result: List[str], ctx: RuleContext) -> None:
        if ctx.settings.output_format == "json":
            if result:
                ctx.output.write_line(json.dumps({
                    "file": ctx.filename,
                    "rule": self.name,
                    "variables": result,
                }))
            return
        report_clones(result, ctx.output, ctx.settings)


__all__ = ["HEADER", "ClonesRule", "find_clones", "report_clones"]
