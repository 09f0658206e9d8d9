# -*- coding: utf-8 -*-

"""Decoding and validation of the MS-DOS packed date field."""

import logging
from typing import NamedTuple

from dosdate2str import DOS_EPOCH_YEAR
from dosdate2str._exceptions import InvalidMonth, InvalidDay, DayOutOfRange

logger = logging.getLogger(__name__)

#: Months having 30 days; February is handled separately
_SHORT_MONTHS = (4, 6, 9, 11)


class DosDateComponents(NamedTuple):
    """Validated calendar date extracted from a packed DOS date."""

    year: int
    month: int
    day: int
    base_year_for_calculation: int = DOS_EPOCH_YEAR

    def to_dict(self) -> dict:
        """Field name to value mapping, in declaration order."""
        return dict(self._asdict())

    def serialize(self) -> int:
        """Convert the components back to a packed DOS date."""
        return (self.year - self.base_year_for_calculation) << 9 \
            | self.month << 5 | self.day


def days_in_month(month: int) -> int:
    """Last valid day of `month`.

    February always has 29 days, leap years are not distinguished.
    """
    if month == 2:
        return 29
    if month in _SHORT_MONTHS:
        return 30
    return 31


def dos_date_from_dostime(dostime: int) -> int:
    """Extract the date word from a 32-bit DOS timestamp.

    The date occupies the upper 16 bits, the time of day the lower ones.
    """
    return (dostime >> 16) & 0xFFFF


def parse_dos_date(dos_date: int) -> DosDateComponents:
    """Convert a packed DOS date to validated date components.

    YEAR   | MO | DAY
    -------+----+-----
    7 bits |4 b |5 bit

    :param dos_date: 16-bit packed date value
    :raises InvalidMonth: Month field is 0 or above 12
    :raises InvalidDay: Day field is 0
    :raises DayOutOfRange: Day field exceeds `days_in_month`
    """
    dos_date &= 0xFFFF
    year = DOS_EPOCH_YEAR + ((dos_date >> 9) & 0x7F)
    month = (dos_date >> 5) & 0x0F
    day = dos_date & 0x1F
    logger.debug("Unpacked DOS date 0x%04X to year=%d month=%d day=%d",
                 dos_date, year, month, day)

    # Only obviously broken dates are rejected, there is no
    # leap year handling.
    if month == 0 or month > 12:
        raise InvalidMonth(month)
    if day == 0:
        raise InvalidDay(day)

    max_day = days_in_month(month)
    if day > max_day:
        raise DayOutOfRange(day, month, max_day)

    return DosDateComponents(year, month, day, DOS_EPOCH_YEAR)
