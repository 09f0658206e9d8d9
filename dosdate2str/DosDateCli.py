# -*- coding: utf-8 -*-

"""Command line entry points decoding a DOS timestamp from JSON input."""

import logging
import sys

import click
import fs
import fs.errors
import fs.opener.errors
from fs.path import split

from dosdate2str import MAX_INPUT_BYTES, __version__
from dosdate2str._exceptions import DosDateException
from dosdate2str.DosDate import parse_dos_date, dos_date_from_dostime
from dosdate2str.DosDateOutput import format_output
from dosdate2str.DosTimeInput import read_bounded, read_envelope_fs, \
    parse_hex_envelope, parse_int_envelope

logger = logging.getLogger(__name__)


def _common_options(func):
    """Options shared by all entry points."""
    func = click.option("-v", "--verbose", is_flag=True,
                        help="Log debug output to stderr.")(func)
    func = click.option("--input", "input_url", default=None,
                        metavar="URL",
                        help="Read the envelope from a file or "
                             "PyFilesystem2 URL instead of stdin.")(func)
    func = click.option("--max-input-bytes", type=click.IntRange(min=0),
                        default=MAX_INPUT_BYTES, show_default=True,
                        envvar="DOSDATE2STR_MAX_INPUT_BYTES",
                        help="Maximum number of input bytes read.")(func)
    func = click.version_option(version=__version__)(func)
    return func


def _setup_logging(verbose: bool):
    logging.basicConfig(stream=sys.stderr,
                        level=logging.DEBUG if verbose else logging.WARNING,
                        format="%(levelname)s:%(name)s:%(message)s")


def _read_input(input_url: str, limit: int) -> bytes:
    """Read the envelope from `input_url` or stdin."""
    if input_url is None:
        return read_bounded(click.get_binary_stream("stdin"), limit)

    dirname, basename = split(input_url)
    logger.debug("Reading envelope '%s' from '%s'", basename, dirname)
    try:
        with fs.open_fs(dirname or ".") as filesystem:
            return read_envelope_fs(filesystem, basename, limit)
    except (fs.errors.FSError, fs.opener.errors.OpenerError,
            fs.opener.errors.ParseError) as e:
        raise click.ClickException(f"Unable to read '{input_url}': {e}")


def _run(parse_envelope, input_url: str, max_input_bytes: int,
         verbose: bool):
    """Decode the envelope and print the result as JSON."""
    _setup_logging(verbose)
    raw = _read_input(input_url, max_input_bytes)
    try:
        dostime = parse_envelope(raw)
        logger.debug("Parsed DOS timestamp 0x%08X", dostime)
        components = parse_dos_date(dos_date_from_dostime(dostime))
    except DosDateException as e:
        raise click.ClickException(str(e))

    click.echo(format_output(components).to_json())


@click.command()
@_common_options
def hex2be2dostime2date2str(input_url, max_input_bytes, verbose):
    """Decode {"dostime": "<8 hex digits>"}, a big-endian DOS timestamp."""
    _run(parse_hex_envelope, input_url, max_input_bytes, verbose)


@click.command()
@_common_options
def int2dostime2date2str(input_url, max_input_bytes, verbose):
    """Decode {"dostime": <uint32>}, a 32-bit DOS timestamp."""
    _run(parse_int_envelope, input_url, max_input_bytes, verbose)
