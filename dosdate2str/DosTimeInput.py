# -*- coding: utf-8 -*-

"""Reading and parsing of the JSON envelopes carrying a DOS timestamp."""

import binascii
import json
import logging
import warnings
from typing import Union

from fs.base import FS

from dosdate2str import MAX_INPUT_BYTES, INPUT_ENCODING
from dosdate2str._exceptions import EnvelopeError

logger = logging.getLogger(__name__)

#: Size of a DOS timestamp in bytes
DOSTIME_SIZE = 4
#: Largest value a 32-bit DOS timestamp can hold
DOSTIME_MAX = (1 << 32) - 1


def read_bounded(fp, limit: int = MAX_INPUT_BYTES) -> bytes:
    """Read at most `limit` bytes from a stream.

    Input beyond `limit` is dropped with a warning.

    :param fp: Binary or text file object to read from
    :param limit: Maximum number of bytes to return
    """
    if limit < 0:
        raise ValueError(f"Input limit must not be negative: {limit}")

    data = fp.read(limit + 1)
    if isinstance(data, str):
        data = data.encode(INPUT_ENCODING)

    if len(data) > limit:
        warnings.warn(f"Input exceeds {limit} bytes, truncating.")
        data = data[:limit]

    logger.debug("Read %d bytes of input", len(data))
    return data


def read_envelope_fs(filesystem: FS, path: str,
                     limit: int = MAX_INPUT_BYTES) -> bytes:
    """Read a bounded envelope from a PyFilesystem2 filesystem.

    :param filesystem: Filesystem containing the envelope
    :param path: Path to the envelope within `filesystem`
    :param limit: Maximum number of bytes to return
    """
    with filesystem.openbin(path) as fp:
        return read_bounded(fp, limit)


def _load_dostime(raw: Union[bytes, str]):
    """Decode the envelope and return its ``dostime`` member."""
    if isinstance(raw, bytes):
        try:
            raw = raw.decode(INPUT_ENCODING)
        except UnicodeDecodeError as e:
            raise EnvelopeError(f"Input is not valid {INPUT_ENCODING}: {e}")

    try:
        envelope = json.loads(raw)
    except ValueError as e:
        raise EnvelopeError(f"Input is not valid JSON: {e}")

    if not isinstance(envelope, dict) or "dostime" not in envelope:
        raise EnvelopeError("Input must be a JSON object with a "
                            "'dostime' field")
    return envelope["dostime"]


def parse_hex_envelope(raw: Union[bytes, str]) -> int:
    """Parse ``{"dostime": "<hex>"}`` into a 32-bit DOS timestamp.

    The hex string is interpreted as a big-endian 32-bit word.

    :param raw: JSON envelope
    """
    dostime = _load_dostime(raw)
    if not isinstance(dostime, str):
        raise EnvelopeError("'dostime' must be a hex string")

    try:
        data = binascii.unhexlify(dostime)
    except (binascii.Error, ValueError) as e:
        raise EnvelopeError(f"Invalid hex string '{dostime}': {e}")

    if len(data) != DOSTIME_SIZE:
        raise EnvelopeError("Hex string must represent exactly "
                            f"{DOSTIME_SIZE} bytes (32-bit DOSTIME)")

    return int.from_bytes(data, byteorder='big')


def parse_int_envelope(raw: Union[bytes, str]) -> int:
    """Parse ``{"dostime": <uint32>}`` into a 32-bit DOS timestamp.

    :param raw: JSON envelope
    """
    dostime = _load_dostime(raw)
    # bool is a subclass of int but no valid timestamp
    if not isinstance(dostime, int) or isinstance(dostime, bool):
        raise EnvelopeError("'dostime' must be an unsigned 32-bit integer")

    if not 0 <= dostime <= DOSTIME_MAX:
        raise EnvelopeError(f"'dostime' value {dostime} does not fit "
                            f"into 32 bits")

    return dostime
