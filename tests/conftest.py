# tests/conftest.py
"""
Shared fixtures, Makefile samples and token builders for mklint tests.
"""

import pytest

from mklint.conditional import ConditionalKind
from mklint.output import OutputSink
from mklint.settings import LintSettings
from mklint.tokens import (
    AssignmentToken,
    BlankToken,
    CommentToken,
    ConditionalToken,
    TargetToken,
)
from mklint.variable import Modifier, Variable


# ═══════════════════════════════════════════════════════════════════
#  Token builders
# ═══════════════════════════════════════════════════════════════════

def cond(keyword, expression=""):
    return ConditionalToken(ConditionalKind.from_keyword(keyword), expression)


def assign(name, op="=", value="1"):
    return AssignmentToken(Variable(name, Modifier.from_operator(op)), value)


def comment(text="# comment"):
    return CommentToken(text)


def target(text="all: build"):
    return TargetToken(text)


def blank():
    return BlankToken()


# ═══════════════════════════════════════════════════════════════════
#  Makefile samples
# ═══════════════════════════════════════════════════════════════════

CLEAN_MAKEFILE = """\
PORTNAME=\tfoo
DISTVERSION=\t1.0
CATEGORIES=\tdevel

.if ${FLAVOR} == lite
COMMENT=\tFoo (lite)
.else
COMMENT=\tFoo
.endif

USES+=\t\tgmake
USES+=\t\tpkgconfig

.include <bsd.port.mk>
"""

CLONES_MAKEFILE = """\
A=\t1
B=\t2
.if defined(COND)
A=\t2
B=\t1
.endif
"""

CONTINUED_MAKEFILE = """\
MAINTAINER=\tports@FreeBSD.org
OPTIONS_DEFINE=\tDOCS \\
\t\tEXAMPLES \\
\t\tNLS
MAINTAINER=\tother@FreeBSD.org

do-install:
\t${INSTALL_PROGRAM} ${WRKSRC}/foo ${STAGEDIR}${PREFIX}/bin
"""


# ═══════════════════════════════════════════════════════════════════
#  Fixtures
# ═══════════════════════════════════════════════════════════════════

@pytest.fixture
def sink():
    return OutputSink.to_string()


@pytest.fixture
def plain_settings():
    return LintSettings(no_color=True)


@pytest.fixture
def color_settings():
    return LintSettings(no_color=False)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    monkeypatch.delenv("MKLINT_RULES", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
