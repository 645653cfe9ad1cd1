# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Line-protocol data points.

A DataPoint is one measurement event: a measurement name, tags, fields and an
optional timestamp. It renders to a single line of InfluxDB line protocol:

    measurement[,tag=value...] field=value[,field=value...][ timestamp]

Field values are formatted when they are added, so ``fields`` always holds wire
text. Nothing is escaped: measurement names, keys and values containing spaces,
commas or ``=`` must be escaped by the caller.

>>> point = DataPoint("temp").add_tag("loc", "home").add_field("ambient", 22.0)
>>> point.to_line()
'temp,loc=home ambient=22.0'
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Union

FieldValue = Union[str, int, float, bool]


def format_field_value(value: FieldValue) -> str:
    """Render a field value the way line protocol types it."""
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return "t" if value else "f"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, int):
        return f"{value}i"
    if isinstance(value, float):
        return repr(value)
    raise TypeError(f"unsupported field value type: {type(value).__name__}")


@dataclass
class DataPoint:
    """Representation of a single InfluxDB data point."""

    measurement: str = ""
    tags: dict[str, str] = field(default_factory=dict)
    fields: dict[str, str] = field(default_factory=dict)
    timestamp: int = 0

    def add_tag(self, name: str, value: str) -> DataPoint:
        """Add (or replace) a measurement tag."""
        self.tags[name] = value
        return self

    def add_field(self, name: str, value: FieldValue) -> DataPoint:
        """Add (or replace) a measurement field."""
        self.fields[name] = format_field_value(value)
        return self

    def to_line(self) -> str:
        parts = [self.measurement]
        for key, val in self.tags.items():
            parts.append(f",{key}={val}")
        parts.append(" ")
        parts.append(",".join(f"{key}={val}" for key, val in self.fields.items()))
        if self.timestamp != 0:
            parts.append(f" {self.timestamp}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_line()


def encode_point(point: DataPoint) -> str:
    return point.to_line()


def encode_points(points: Iterable[DataPoint]) -> str:
    """Encode several points as newline-separated line protocol."""
    return "\n".join(encode_point(point) for point in points)


__all__ = ["DataPoint", "FieldValue", "encode_point", "encode_points", "format_field_value"]
