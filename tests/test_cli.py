# tests/test_cli.py
"""
Tests for the ``mklint`` command line.
"""

import io
import json

import pytest

from mklint.__main__ import EXIT_FINDINGS, EXIT_INFRA, EXIT_OK, main
from tests.conftest import CLEAN_MAKEFILE, CLONES_MAKEFILE


@pytest.fixture
def makefiles(tmp_path):
    clean = tmp_path / "clean.mk"
    clean.write_text(CLEAN_MAKEFILE, encoding="utf-8")
    clones = tmp_path / "clones.mk"
    clones.write_text(CLONES_MAKEFILE, encoding="utf-8")
    return clean, clones


def _run(*argv):
    out = io.StringIO()
    code = main(list(argv), stream=out)
    return code, out.getvalue()


class TestExitCodes:

    def test_clean_file(self, makefiles):
        clean, _ = makefiles
        assert _run(str(clean)) == (EXIT_OK, "")

    def test_findings(self, makefiles):
        _, clones = makefiles
        code, out = _run(str(clones), "--no-color")
        assert code == EXIT_FINDINGS
        assert out == "# Variables set twice or more\nA\nB\n"

    def test_missing_file(self, tmp_path):
        code, out = _run(str(tmp_path / "missing.mk"))
        assert code == EXIT_INFRA
        assert out == ""

    def test_missing_file_does_not_stop_others(self, makefiles, tmp_path):
        _, clones = makefiles
        code, out = _run(str(tmp_path / "missing.mk"), str(clones))
        assert code == EXIT_INFRA
        assert "A\nB\n" in out

    def test_unknown_rule(self, makefiles):
        clean, _ = makefiles
        assert _run("--rule", "lint.nope", str(clean))[0] == EXIT_INFRA

    def test_unknown_rule_from_env(self, makefiles, monkeypatch):
        clean, _ = makefiles
        monkeypatch.setenv("MKLINT_RULES", "lint.nope")
        assert _run(str(clean))[0] == EXIT_INFRA


class TestOutput:

    def test_multiple_files_get_headers(self, makefiles):
        clean, clones = makefiles
        code, out = _run(str(clean), str(clones))
        assert code == EXIT_FINDINGS
        assert out == (
            f"==> {clones} <==\n"
            "# Variables set twice or more\nA\nB\n"
        )

    def test_json_format(self, makefiles):
        _, clones = makefiles
        code, out = _run("--format", "json", str(clones))
        assert code == EXIT_FINDINGS
        assert json.loads(out) == {
            "file": str(clones),
            "rule": "lint.clones",
            "variables": ["A", "B"],
        }

    def test_json_has_no_file_headers(self, makefiles):
        clean, clones = makefiles
        _, out = _run("--format", "json", str(clones), str(clones))
        assert "==>" not in out
        assert len(out.splitlines()) == 2

    def test_stdin(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("X=1\nX=2\n"))
        code, out = _run("-")
        assert code == EXIT_FINDINGS
        assert out.splitlines()[-1] == "X"

    def test_stdin_by_default(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("X=1\n"))
        assert _run() == (EXIT_OK, "")

    def test_list_rules(self):
        code, out = _run("--list-rules")
        assert code == EXIT_OK
        assert out.startswith("lint.clones")
        assert "variables set twice or more" in out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert "mklint" in capsys.readouterr().out
