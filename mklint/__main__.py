#!/usr/bin/env python3
"""
mklint command line.

Usage::

    mklint Makefile                    # run every rule
    mklint --rule lint.clones a/Makefile b/Makefile
    cat Makefile | mklint -            # read stdin
    mklint --format json Makefile      # one JSON object per finding
    mklint --list-rules

Exit status
-----------
0  nothing reported
1  at least one rule reported something
2  a file could not be read or tokenized, or a rule name is unknown
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence, TextIO

from mklint import __version__
from mklint.errors import MklintError, UnknownRuleError
from mklint.output import OutputSink
from mklint.rules import DEFAULT_REGISTRY, RuleRunner
from mklint.settings import OUTPUT_FORMATS, LintSettings
from mklint.tokenizer import tokenize, tokenize_file

_log = logging.getLogger("mklint")

EXIT_OK: int = 0
EXIT_FINDINGS: int = 1
EXIT_INFRA: int = 2

STDIN = "-"


def _configure_logging(verbosity: int) -> None:
    """Set up the ``mklint`` logger: 0 → WARNING, 1 → INFO, 2+ → DEBUG."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)-5.5s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    handler.set_name("mklint-cli")
    root = logging.getLogger("mklint")
    for old in [h for h in root.handlers if h.get_name() == "mklint-cli"]:
        root.removeHandler(old)
    root.setLevel(level)
    root.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mklint",
        description="Lint BSD make build configurations.",
    )
    parser.add_argument(
        "files", nargs="*", default=[STDIN],
        help="Makefiles to lint ('-' or nothing reads stdin)",
    )
    parser.add_argument(
        "--rule", dest="rules", action="append", default=None, metavar="NAME",
        help="run only this rule (repeatable; default: all)",
    )
    parser.add_argument(
        "--list-rules", action="store_true",
        help="list available rules and exit",
    )
    parser.add_argument(
        "--no-color", action="store_true", default=None,
        help="disable coloured output",
    )
    parser.add_argument(
        "--format", dest="output_format", choices=OUTPUT_FORMATS, default=None,
        help="output format (default: text)",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="increase log verbosity (-v info, -vv debug)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    return parser


def _list_rules(stream: TextIO) -> None:
    for name in DEFAULT_REGISTRY.names:
        rule_cls = DEFAULT_REGISTRY.get_by_name(name)
        stream.write(f"{name:20s} {rule_cls.description}\n")


def _lint_file(
    path: str,
    runner: RuleRunner,
    stream: TextIO,
    show_header: bool,
) -> bool:
    """Lint one file and write its report; return True if anything was found."""
    if path == STDIN:
        filename = "<stdin>"
        tokens = tokenize(sys.stdin.read(), filename=filename)
    else:
        filename = path
        tokens = tokenize_file(path)

    sink = OutputSink(stream)
    results = runner.run(tokens, sink, filename=filename)
    if sink.has_output:
        if show_header and runner.settings.output_format == "text":
            stream.write(f"==> {filename} <==\n")
        sink.flush()
    _log.info("%s: %d rule(s) run", filename, len(results))
    return runner.has_findings(results)


def main(argv: Optional[Sequence[str]] = None, stream: Optional[TextIO] = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    out = stream if stream is not None else sys.stdout

    if args.list_rules:
        _list_rules(out)
        return EXIT_OK

    settings = LintSettings.from_env(out).with_overrides(
        no_color=args.no_color,
        rules=tuple(args.rules) if args.rules else None,
        output_format=args.output_format,
    )
    runner = RuleRunner(settings=settings)
    try:
        runner.select()
    except UnknownRuleError as exc:
        _log.error("%s (available: %s)", exc, ", ".join(DEFAULT_REGISTRY.names))
        return EXIT_INFRA

    files: List[str] = list(args.files)
    found = False
    failed = False
    for path in files:
        try:
            found = _lint_file(path, runner, out, show_header=len(files) > 1) or found
        except (MklintError, OSError, UnicodeDecodeError) as exc:
            _log.error("%s: %s", path, exc)
            failed = True

    if failed:
        return EXIT_INFRA
    return EXIT_FINDINGS if found else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
