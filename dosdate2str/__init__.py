# -*- coding: utf-8 -*-

"""
Decode MS-DOS packed dates into human readable calendar dates.

dosdate2str extracts the 16-bit date half of a 32-bit DOS timestamp,
as found in ZIP archives and FAT directory entries, validates it and
renders it as ``YYYY-MM-DD``.
"""

__name__ = 'dosdate2str'
__version__ = '0.1.0'
__author__ = 'dosdate2str developers'
__license__ = 'MIT License'


#: Year that a packed year offset of zero corresponds to
DOS_EPOCH_YEAR = 1980
#: Default cap for the amount of input read from an envelope source
MAX_INPUT_BYTES = 128
#: Encoding of the JSON input envelope
INPUT_ENCODING = 'utf-8'
