"""Unit tests for the Prettier formatter plugin."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from gitai.core.models import FormatInvocation
from gitai.plugins.formatters.prettier import format as prettier_format
from gitai.plugins.formatters.prettier import prettier_flags

PRETTIER_BIN = Path("/usr/bin/prettier")


def completed(stdout: str, returncode: int = 0, stderr: str = "") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


class TestPrettierFlags:
    """Tests for option translation."""

    def test_translation(self) -> None:
        flags = prettier_flags({
            "singleQuote": True,
            "semi": False,
            "printWidth": 100,
            "tabWidth": None,
            "timeout": 5,
        })
        assert flags == ["--single-quote", "--no-semi", "--print-width=100"]


class TestPrettierFormat:
    """Tests for the format() plugin function."""

    def test_writes_changed_files_only(self, tmp_path: Path) -> None:
        ugly = tmp_path / "ugly.js"
        ugly.write_text("const a  =  1\n")
        pretty = tmp_path / "pretty.js"
        pretty.write_text("const b = 2;\n")

        def fake_run(cmd, cwd, tool_name, timeout, input_text, keep_newlines):
            if "ugly.js" in cmd[2]:
                return completed("const a = 1;\n")
            return completed(input_text)

        invocation = FormatInvocation(
            files=[ugly, pretty],
            config={},
            options={"semi": True},
            root=tmp_path,
        )
        with patch("gitai.plugins.formatters.prettier.find_node_binary", return_value=PRETTIER_BIN):
            with patch("gitai.plugins.formatters.prettier.run_tool", side_effect=fake_run) as mock_run:
                changed = prettier_format(invocation)

        assert changed == [ugly]
        assert ugly.read_text() == "const a = 1;\n"
        assert pretty.read_text() == "const b = 2;\n"
        assert mock_run.call_args_list[0].args[0] == [
            str(PRETTIER_BIN), "--stdin-filepath", str(ugly), "--semi",
        ]

    def test_failure_raises(self, tmp_path: Path) -> None:
        broken = tmp_path / "broken.js"
        broken.write_text("const = ;\n")
        invocation = FormatInvocation(files=[broken], config={}, options={}, root=tmp_path)

        with patch("gitai.plugins.formatters.prettier.find_node_binary", return_value=PRETTIER_BIN):
            with patch(
                "gitai.plugins.formatters.prettier.run_tool",
                return_value=completed("", returncode=2, stderr="SyntaxError: Unexpected token"),
            ):
                with pytest.raises(RuntimeError, match="SyntaxError"):
                    prettier_format(invocation)

        assert broken.read_text() == "const = ;\n"

    def test_no_files(self, tmp_path: Path) -> None:
        invocation = FormatInvocation(files=[], config={}, options={}, root=tmp_path)
        with patch("gitai.plugins.formatters.prettier.find_node_binary") as mock_find:
            assert prettier_format(invocation) == []
        mock_find.assert_not_called()

    def test_crlf_converted_to_lf(self, tmp_path: Path) -> None:
        """Test line-ending-only changes are detected and written byte for byte."""
        crlf = tmp_path / "crlf.js"
        crlf.write_bytes(b"const a = 1;\r\nconst b = 2;\r\n")
        seen = []

        def fake_run(cmd, cwd, tool_name, timeout, input_text, keep_newlines):
            seen.append((input_text, keep_newlines))
            return completed(input_text.replace("\r\n", "\n"))

        invocation = FormatInvocation(files=[crlf], config={}, options={}, root=tmp_path)
        with patch("gitai.plugins.formatters.prettier.find_node_binary", return_value=PRETTIER_BIN):
            with patch("gitai.plugins.formatters.prettier.run_tool", side_effect=fake_run):
                changed = prettier_format(invocation)

        assert seen == [("const a = 1;\r\nconst b = 2;\r\n", True)]
        assert changed == [crlf]
        assert crlf.read_bytes() == b"const a = 1;\nconst b = 2;\n"

    def test_lf_converted_to_crlf(self, tmp_path: Path) -> None:
        """Test an endOfLine: crlf project gets CRLF on disk."""
        lf = tmp_path / "lf.js"
        lf.write_bytes(b"const a = 1;\n")

        invocation = FormatInvocation(
            files=[lf], config={}, options={"endOfLine": "crlf"}, root=tmp_path
        )
        with patch("gitai.plugins.formatters.prettier.find_node_binary", return_value=PRETTIER_BIN):
            with patch(
                "gitai.plugins.formatters.prettier.run_tool",
                return_value=completed("const a = 1;\r\n"),
            ) as mock_run:
                changed = prettier_format(invocation)

        assert changed == [lf]
        assert lf.read_bytes() == b"const a = 1;\r\n"
        assert "--end-of-line=crlf" in mock_run.call_args.args[0]

    def test_non_utf8_file_skipped(self, tmp_path: Path) -> None:
        legacy = tmp_path / "legacy.js"
        legacy.write_bytes(b"// caf\xe9\n")
        invocation = FormatInvocation(files=[legacy], config={}, options={}, root=tmp_path)

        with patch("gitai.plugins.formatters.prettier.find_node_binary", return_value=PRETTIER_BIN):
            with patch("gitai.plugins.formatters.prettier.run_tool") as mock_run:
                assert prettier_format(invocation) == []

        mock_run.assert_not_called()
        assert legacy.read_bytes() == b"// caf\xe9\n"
