"""Tests for the stripcov command."""

import json

import pytest

from stripcov import __version__

CONFIG = """
    TOPDIR=/src/
    foo.c:
        bar    # scaffolding
"""


@pytest.fixture
def config_file(write_file):
    return write_file("strip.conf", CONFIG)


@pytest.fixture
def info_file(write_file, foo_record):
    return write_file("app.info", "TN:\n" + foo_record)


def test_strip_to_output_file(invoke, config_file, info_file, tmp_path, foo_stripped):
    out = tmp_path / "out.info"
    res = invoke(["-i", str(info_file), "-c", str(config_file), "-o", str(out)])
    assert res.exit_code == 0, res.output
    assert out.read_text() == "TN:\n" + foo_stripped
    assert "start to processing foo.c" in res.output
    assert "done: 1 of 1 records" in res.output


def test_strip_to_stdout_quiet(invoke, config_file, info_file, foo_stripped):
    res = invoke(["-i", str(info_file), "-c", str(config_file), "-q"])
    assert res.exit_code == 0
    assert res.output == "TN:\n" + foo_stripped


def test_print_uncovered(invoke, config_file, info_file, tmp_path):
    out = tmp_path / "out.info"
    res = invoke(
        ["-i", str(info_file), "-c", str(config_file), "-o", str(out), "-p", "-q"]
    )
    assert res.exit_code == 0
    assert res.output == "\tbaz\n"


def test_revconf(invoke, config_file, info_file, tmp_path):
    out = tmp_path / "out.info"
    res = invoke(
        ["-i", str(info_file), "-c", str(config_file), "-o", str(out), "-r"]
    )
    assert res.exit_code == 0
    lines = out.read_text().splitlines()
    assert "FN:10,bar" in lines
    assert "FN:20,baz" not in lines
    assert "FNF:1" in lines
    assert "FNH:1" in lines


def test_topdir_override(invoke, write_file, info_file, tmp_path):
    config = write_file("strip.conf", "foo.c:\n  bar\n")
    out = tmp_path / "out.info"
    res = invoke(
        ["-i", str(info_file), "-c", str(config), "-o", str(out), "-t", "/src/"]
    )
    assert res.exit_code == 0, res.output
    assert "FN:10,bar" not in out.read_text()


def test_missing_topdir(invoke, write_file, info_file):
    config = write_file("strip.conf", "foo.c:\n  bar\n")
    res = invoke(["-i", str(info_file), "-c", str(config)])
    assert res.exit_code == 1
    assert "TOPDIR=" in res.output


def test_empty_config(invoke, write_file, info_file):
    config = write_file("strip.conf", "\n")
    res = invoke(["-i", str(info_file), "-c", str(config)])
    assert res.exit_code == 1
    assert "Config file is empty" in res.output


def test_missing_config_file(invoke, info_file, tmp_path):
    res = invoke(["-i", str(info_file), "-c", str(tmp_path / "nope.conf")])
    assert res.exit_code == 1
    assert "Fail to open config file" in res.output


def test_missing_info_file(invoke, config_file, tmp_path):
    res = invoke(["-i", str(tmp_path / "nope.info"), "-c", str(config_file)])
    assert res.exit_code == 1
    assert "Fail to open LCOV's info file" in res.output


def test_unwritable_output(invoke, config_file, info_file, tmp_path):
    out = tmp_path / "missing-dir" / "out.info"
    res = invoke(["-i", str(info_file), "-c", str(config_file), "-o", str(out)])
    assert res.exit_code == 1
    assert "Fail to open output file" in res.output


def test_info_required(invoke, config_file):
    res = invoke(["-c", str(config_file)])
    assert res.exit_code == 2
    assert "--info" in res.output


def test_config_required(invoke, info_file):
    res = invoke(["-i", str(info_file)])
    assert res.exit_code == 2


def test_format_error(invoke, config_file, write_file, tmp_path):
    info = write_file("bad.info", "SF:/src/foo.c\nFN:10bar\nend_of_record\n")
    out = tmp_path / "out.info"
    res = invoke(["-i", str(info), "-c", str(config_file), "-o", str(out)])
    assert res.exit_code == 1
    assert "format error" in res.output
    assert "line 2: FN:10bar" in res.output
    assert out.read_text() == "SF:/src/foo.c\n"


def test_dumpconf_text(invoke, config_file):
    res = invoke(["-c", str(config_file), "--dumpconf"])
    assert res.exit_code == 0
    assert "CFILE: (foo.c)" in res.output
    assert " FUNC: (bar)" in res.output


def test_dumpconf_json(invoke, config_file):
    res = invoke(["-c", str(config_file), "-d", "--dump-format", "json"])
    assert res.exit_code == 0
    assert json.loads(res.output)["files"] == {"foo.c": ["bar"]}


def test_version(invoke):
    res = invoke(["--version"])
    assert res.exit_code == 0
    assert __version__ in res.output


def test_help(invoke):
    res = invoke(["-h"])
    assert res.exit_code == 0
    assert "Strip selected functions" in res.output


def test_crlf_passthrough(invoke, config_file, tmp_path, foo_record):
    info = tmp_path / "crlf.info"
    other = "SF:/src/other.c\r\nDA:1,1\r\nLF:1\r\nLH:1\r\nend_of_record\r\n"
    info.write_bytes((other + foo_record.replace("\n", "\r\n")).encode())
    out = tmp_path / "out.info"
    res = invoke(["-i", str(info), "-c", str(config_file), "-o", str(out), "-q"])
    assert res.exit_code == 0, res.output
    data = out.read_bytes().decode()
    assert data.startswith(other)
    assert "FNF:1\r\n" in data
    assert "FN:10,bar" not in data


def test_non_utf8_passthrough_to_stdout(invoke, config_file, tmp_path):
    info = tmp_path / "latin1.info"
    data = b"SF:/src/other.c\nFN:1,caf\xe9\nFNDA:0,caf\xe9\nend_of_record\n"
    info.write_bytes(data)
    res = invoke(["-i", str(info), "-c", str(config_file), "-q"])
    assert res.exit_code == 0, res.output
    assert res.stdout_bytes == data


def test_non_utf8_config(invoke, tmp_path):
    config = tmp_path / "strip.conf"
    config.write_bytes(b"TOPDIR=/src/\nfoo.c:\n  caf\xe9\n")
    info = tmp_path / "latin1.info"
    info.write_bytes(
        b"SF:/src/foo.c\nFN:1,caf\xe9\nFN:9,main\nFNDA:2,caf\xe9\n"
        b"FNDA:1,main\nFNF:2\nFNH:2\nend_of_record\n"
    )
    out = tmp_path / "out.info"
    res = invoke(["-i", str(info), "-c", str(config), "-o", str(out), "-q"])
    assert res.exit_code == 0, res.output
    assert out.read_bytes() == (
        b"SF:/src/foo.c\nFN:9,main\nFNDA:1,main\nFNF:1\nFNH:1\nend_of_record\n"
    )
