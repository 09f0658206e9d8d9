# -*- coding: utf-8 -*-

"""Tests the command line entry points."""

import logging

import pytest
from click.testing import CliRunner

from dosdate2str.DosDateCli import hex2be2dostime2date2str, \
    int2dostime2date2str

EXPECTED_OUTPUT = """{
  "dos_date_components": {
    "year": 2024,
    "month": 5,
    "day": 20,
    "base_year_for_calculation": 1980
  },
  "formatted_date": "2024-05-20"
}
"""


@pytest.fixture
def runner():
    """Click runner invoking the entry points in isolation."""
    return CliRunner()


def test_hex_valid(runner):
    """Verify a hex encoded timestamp is decoded and printed as JSON."""
    result = runner.invoke(hex2be2dostime2date2str,
                           input='{"dostime": "58B40000"}')
    assert result.exit_code == 0
    assert result.stdout == EXPECTED_OUTPUT


def test_hex_zero_timestamp(runner):
    """A zero timestamp fails on the month before reaching the day."""
    result = runner.invoke(hex2be2dostime2date2str,
                           input='{"dostime": "00000000"}')
    assert result.exit_code == 1
    assert "Invalid month: 0" in result.output
    assert "formatted_date" not in result.output


def test_hex_wrong_length(runner):
    """A hex string of the wrong length is reported."""
    result = runner.invoke(hex2be2dostime2date2str,
                           input='{"dostime": "58B4"}')
    assert result.exit_code == 1
    assert "exactly 4 bytes" in result.output


def test_int_valid(runner):
    """Verify an integer timestamp is decoded and printed as JSON."""
    result = runner.invoke(int2dostime2date2str,
                           input='{"dostime": 1488191488}')
    assert result.exit_code == 0
    assert result.stdout == EXPECTED_OUTPUT


def test_int_day_out_of_range(runner):
    """An invalid day is reported without partial output.

    YEAR   | MO | DAY
    -------+----+-----
    0000000|0010|11110
    0      | 2  | 30
    0000000001011110 → 0x005E
    """
    result = runner.invoke(int2dostime2date2str,
                           input='{"dostime": %d}' % (0x005E << 16))
    assert result.exit_code == 1
    assert "Day 30 is out of range for month 2" in result.output
    assert "formatted_date" not in result.output


def test_int_rejects_hex(runner):
    """The integer entry point does not accept hex strings."""
    result = runner.invoke(int2dostime2date2str,
                           input='{"dostime": "58B40000"}')
    assert result.exit_code == 1


def test_max_input_bytes_truncates(runner):
    """Truncated input is no longer valid JSON."""
    result = runner.invoke(int2dostime2date2str,
                           ["--max-input-bytes", "8"],
                           input='{"dostime": 1488191488}')
    assert result.exit_code == 1
    assert "not valid JSON" in result.output


def test_max_input_bytes_envvar(runner):
    """The input limit can be set through the environment."""
    result = runner.invoke(int2dostime2date2str,
                           input='{"dostime": 1488191488}',
                           env={"DOSDATE2STR_MAX_INPUT_BYTES": "8"})
    assert result.exit_code == 1
    assert "not valid JSON" in result.output


def test_input_file(runner, tmp_path):
    """Verify the envelope can be read from a file."""
    stamp = tmp_path / "stamp.json"
    stamp.write_text('{"dostime": "58B40000"}')
    result = runner.invoke(hex2be2dostime2date2str, ["--input", str(stamp)])
    assert result.exit_code == 0
    assert result.stdout == EXPECTED_OUTPUT


def test_input_fs_url(runner, tmp_path):
    """Verify the envelope can be read from a PyFilesystem2 URL."""
    stamp = tmp_path / "stamp.json"
    stamp.write_text('{"dostime": 1488191488}')
    result = runner.invoke(int2dostime2date2str,
                           ["--input", f"osfs://{stamp}"])
    assert result.exit_code == 0
    assert result.stdout == EXPECTED_OUTPUT


def test_input_missing(runner, tmp_path):
    """A missing input file is reported."""
    result = runner.invoke(int2dostime2date2str,
                           ["--input", str(tmp_path / "missing.json")])
    assert result.exit_code == 1
    assert "Unable to read" in result.output


def test_verbose_logs_timestamp(runner, caplog):
    """Debug logging shows the parsed timestamp."""
    caplog.set_level(logging.DEBUG)
    result = runner.invoke(hex2be2dostime2date2str, ["-v"],
                           input='{"dostime": "58B40000"}')
    assert result.exit_code == 0
    assert "Parsed DOS timestamp 0x58B40000" in caplog.text
    assert "Unpacked DOS date 0x58B4" in caplog.text


def test_version(runner):
    """Verify the version option."""
    result = runner.invoke(int2dostime2date2str, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_input_unsupported_protocol(runner):
    """An unknown filesystem URL scheme is reported without a traceback."""
    result = runner.invoke(int2dostime2date2str,
                           ["--input", "bogus://host/stamp.json"])
    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception,
                                                  SystemExit)
    assert "Unable to read 'bogus://host/stamp.json'" in result.output
