"""Pytest configuration and shared fixtures."""

import textwrap

import pytest
from click.testing import CliRunner

from stripcov.cli import cli
from stripcov.models import ShieldConfig


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional input.

    Usage:
        result = invoke(["-i", "app.info", "-c", "strip.conf"])
        result = invoke(["-c", "strip.conf", "--dumpconf"])
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def write_file(tmp_path):
    """Write dedented text to a file under tmp_path and return its path."""

    def _write(name, text):
        path = tmp_path / name
        path.write_text(textwrap.dedent(text).lstrip("\n"))
        return path

    return _write


@pytest.fixture
def foo_config():
    """Strip ``bar`` from foo.c under /src/."""
    return ShieldConfig(topdir="/src/", files={"foo.c": frozenset({"bar"})})


@pytest.fixture
def foo_record():
    """A single foo.c record declaring ``bar`` and ``baz``."""
    return textwrap.dedent(
        """\
        SF:/src/foo.c
        FN:10,bar
        FN:20,baz
        FNDA:3,bar
        FNDA:0,baz
        FNF:2
        FNH:1
        DA:10,3
        DA:20,0
        LF:2
        LH:1
        end_of_record
        """
    )


@pytest.fixture
def foo_stripped():
    """``foo_record`` with ``bar`` stripped."""
    return textwrap.dedent(
        """\
        SF:/src/foo.c
        FN:20,baz
        FNDA:0,baz
        FNF:1
        FNH:0
        DA:20,0
        LF:1
        LH:0
        end_of_record
        """
    )
