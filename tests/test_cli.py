"""Tests for the command-line entry point."""

from hashavatar.cli import main
from tests.conftest import TEST_NAME, XML_HEADER


def test_prints_identicon(capsys):
    assert main([TEST_NAME]) == 0
    out = capsys.readouterr().out
    assert out.startswith(XML_HEADER)


def test_base64_output(capsys):
    assert main([TEST_NAME, "--base64", "--asymmetric", "-g", "6"]) == 0
    assert capsys.readouterr().out.startswith('<img src="data:image/svg+xml;base64,')


def test_writes_file(tmp_path):
    out = tmp_path / "avatar.svg"
    assert main([TEST_NAME, "-k", "initials", "-o", str(out)]) == 0
    assert ">TN</text>" in out.read_text(encoding="utf-8")


def test_invalid_grid_size(capsys):
    assert main([TEST_NAME, "-g", "0"]) == 2
    assert "grid_size" in capsys.readouterr().err


def test_unknown_kind(capsys):
    assert main([TEST_NAME, "-k", "nope"]) == 2
