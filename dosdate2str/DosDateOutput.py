# -*- coding: utf-8 -*-

"""Human readable rendering of decoded DOS dates."""

import json
from typing import NamedTuple

from dosdate2str.DosDate import DosDateComponents


class Output(NamedTuple):
    """Decoded date together with its display string."""

    dos_date_components: DosDateComponents
    formatted_date: str

    def to_dict(self) -> dict:
        """Nested mapping as written by `to_json`."""
        return {"dos_date_components": self.dos_date_components.to_dict(),
                "formatted_date": self.formatted_date}

    def to_json(self) -> str:
        """Serialize to pretty-printed JSON."""
        return json.dumps(self.to_dict(), indent=2)


def format_output(dos_date_components: DosDateComponents) -> Output:
    """Render date components as ``YYYY-MM-DD``.

    The components are expected to come from
    :func:`~dosdate2str.DosDate.parse_dos_date` and are not validated again.
    """
    formatted_date = "{}-{:02}-{:02}".format(dos_date_components.year,
                                             dos_date_components.month,
                                             dos_date_components.day)
    return Output(dos_date_components, formatted_date)
