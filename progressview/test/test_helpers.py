from datetime import datetime, timezone

import pytest

from progressview.helpers._date import convert_timestamp_to_utc, format_local_datetime
from progressview.helpers._format import format_fixed, format_number, format_percentage, percentage
from progressview.helpers._json import load_json, load_pydantic_model, save_json
from progressview.helpers._styles import PlainStyler, RichStyler
from progressview.models import UserState


@pytest.mark.parametrize(
    "value, expected",
    [(0, "0"), (999, "999"), (1000, "1,000"), (1234567, "1,234,567")],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_format_percentage():
    assert format_percentage(1, 4) == "25.0"
    assert format_percentage(1, 3) == "33.3"
    assert format_percentage(2, 2) == "100.0"


def test_percentage_zero_denominator():
    assert format_percentage(0, 0) == "NaN"
    assert format_percentage(3, 0) == "Infinity"
    assert percentage(0, 0) != percentage(0, 0)


def test_format_fixed_digits():
    assert format_fixed(2.0) == "2.0"
    assert format_fixed(2.25, 2) == "2.25"


def test_convert_millisecond_timestamp():
    assert convert_timestamp_to_utc(1700000000000) == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)
    assert convert_timestamp_to_utc("1700000000000") == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)


def test_convert_iso_timestamp():
    assert convert_timestamp_to_utc("2024-01-02T03:04:05Z") == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert convert_timestamp_to_utc("2024-01-02T03:04:05") == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_convert_invalid_timestamp():
    assert convert_timestamp_to_utc(None) is None
    assert convert_timestamp_to_utc("not a date") is None


def test_format_local_datetime():
    assert format_local_datetime(1700000000000, tz=timezone.utc) == "11/14/2023, 10:13:20 PM"
    assert format_local_datetime("2024-01-02T03:04:05Z", tz=timezone.utc) == "01/02/2024, 03:04:05 AM"
    assert format_local_datetime("not a date") == "not a date"
    assert format_local_datetime(None) == "N/A"


def test_plain_styler_is_pass_through():
    styler = PlainStyler()
    assert styler.bold("x") == "x"
    assert styler.blue(4) == "4"
    assert styler.yellow("[y]") == "[y]"


def test_rich_styler_escapes_markup():
    styler = RichStyler()
    assert styler.bold("x") == "[bold]x[/bold]"
    assert styler.yellow("[y]") == "[yellow]\\[y][/yellow]"


def test_json_round_trip(tmp_path):
    path = tmp_path / "nested" / "data.json"
    assert save_json({"a": [1, 2]}, path)
    assert load_json(path) == {"a": [1, 2]}


def test_load_json_missing_or_invalid(tmp_path):
    assert load_json(tmp_path / "missing.json") is None
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    assert load_json(bad) is None
    scalar = tmp_path / "scalar.json"
    scalar.write_text("42", encoding="utf-8")
    assert load_json(scalar) is None


def test_load_pydantic_model_validation_failure(tmp_path):
    path = tmp_path / "user.json"
    path.write_text('{"ens": "no-address"}', encoding="utf-8")
    assert load_pydantic_model(UserState, path) is None
