# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import unittest

import pytest

from influxwire.point import DataPoint, encode_point, encode_points, format_field_value


class TestDataPointFields(unittest.TestCase):
    def test_add_field_string(self):
        point = DataPoint()
        point.add_field("fieldStr", "hello!")
        self.assertIn("fieldStr", point.fields)
        self.assertEqual(point.fields["fieldStr"], '"hello!"')

    def test_add_field_int(self):
        point = DataPoint()
        point.add_field("fieldInt", 3)
        self.assertEqual(point.fields["fieldInt"], "3i")

    def test_add_field_float(self):
        point = DataPoint()
        point.add_field("fieldFloat", 1.0)
        self.assertEqual(point.fields["fieldFloat"], "1.0")

    def test_add_field_bool(self):
        point = DataPoint()
        point.add_field("fieldTrue", True)
        point.add_field("fieldFalse", False)
        self.assertEqual(point.fields["fieldTrue"], "t")
        self.assertEqual(point.fields["fieldFalse"], "f")

    def test_last_write_wins(self):
        point = DataPoint("m")
        point.add_field("f", 1)
        point.add_field("f", "one")
        point.add_tag("t", "a")
        point.add_tag("t", "b")
        self.assertEqual(point.fields, {"f": '"one"'})
        self.assertEqual(point.tags, {"t": "b"})


def test_format_field_value_kinds():
    assert format_field_value(-42) == "-42i"
    assert format_field_value(0.5) == "0.5"
    assert format_field_value(1e21) == "1e+21"
    assert format_field_value("") == '""'


def test_format_field_value_rejects_other_types():
    with pytest.raises(TypeError):
        format_field_value(None)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        format_field_value([1])  # type: ignore[arg-type]


def test_to_line_full():
    point = DataPoint(measurement="msr", tags={"tag": "tval"}, timestamp=1)
    point.add_field("field", "fval")
    assert point.to_line() == 'msr,tag=tval field="fval" 1'
    assert str(point) == 'msr,tag=tval field="fval" 1'


def test_to_line_without_tags():
    point = DataPoint(measurement="msr", timestamp=1)
    point.add_field("field", "fval")
    assert encode_point(point) == 'msr field="fval" 1'


def test_to_line_without_timestamp():
    point = DataPoint(measurement="msr", tags={"tag": "tval"})
    point.add_field("field", "fval")
    assert point.to_line() == 'msr,tag=tval field="fval"'


def test_add_tag_stores_value_unquoted():
    point = DataPoint("cpu").add_tag("host", "a1").add_tag("region", "eu").add_field("load", 0.25)
    assert point.to_line() == "cpu,host=a1,region=eu load=0.25"


def test_multiple_fields_keep_insertion_order():
    point = DataPoint("m", timestamp=1700000000000000000)
    point.add_field("b", True).add_field("a", 2)
    assert point.to_line() == "m b=t,a=2i 1700000000000000000"


def test_point_without_fields_keeps_trailing_space():
    assert DataPoint("m").to_line() == "m "


def test_encoding_is_idempotent():
    point = DataPoint("msr").add_tag("t", "v").add_field("f", 1.5)
    assert point.to_line() == point.to_line()


def test_encode_points_joins_with_newline():
    first = DataPoint("tm").add_field("tf", 1)
    second = DataPoint("tm").add_field("tf", 2)
    assert encode_points([first, second]) == "tm tf=1i\ntm tf=2i"
    assert encode_points([]) == ""


if __name__ == "__main__":
    unittest.main()
