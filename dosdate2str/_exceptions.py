# -*- coding: utf-8 -*-

"""Custom Exceptions for dosdate2str."""

import errno as _errno


class DosDateException(Exception):
    """Generic dosdate2str Exceptions."""

    def __init__(self, msg: str, errno=None):
        """Construct base class for dosdate2str exceptions.

        :param msg: Exception message describing what happened
        :param errno: Error number, mostly based on POSIX errno where feasible
        """
        Exception.__init__(self, msg)
        self.errno = errno


class DecodeError(DosDateException):
    """Packed DOS date does not describe a valid calendar date.

    Only the subclasses below are ever raised.
    """


class InvalidMonth(DecodeError):
    """Month field is 0 or larger than 12."""

    def __init__(self, month: int):
        """Raise for an out of range month field.

        :param month: Month value as extracted from the packed date
        """
        super().__init__(f"Invalid month: {month}. "
                         f"Month must be between 1 and 12.",
                         errno=_errno.EINVAL)
        self.month = month


class InvalidDay(DecodeError):
    """Day field is 0."""

    def __init__(self, day: int):
        """Raise for a zero day field.

        :param day: Day value as extracted from the packed date
        """
        super().__init__(f"Invalid day: {day}. "
                         f"Day must be between 1 and 31.",
                         errno=_errno.EINVAL)
        self.day = day


class DayOutOfRange(DecodeError):
    """Day field exceeds the number of days of its month."""

    def __init__(self, day: int, month: int, max_day: int):
        """Raise for a day past the end of the month.

        :param day: Day value as extracted from the packed date
        :param month: Already validated month value
        :param max_day: Last allowed day of `month`
        """
        super().__init__(f"Day {day} is out of range for month {month}. "
                         f"Allowed day range is 1-{max_day}.",
                         errno=_errno.EINVAL)
        self.day = day
        self.month = month
        self.max_day = max_day


class EnvelopeError(DosDateException):
    """Input envelope cannot be turned into a 32-bit DOS timestamp."""

    def __init__(self, msg: str):
        """Raise for malformed input.

        :param msg: Exception message describing what happened
        """
        super().__init__(msg, errno=_errno.EINVAL)
