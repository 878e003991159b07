"""Tests for the Snipe-IT timestamp codec."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import pytest

from snipeit.codecs.common import decode_timestamp
from snipeit.codecs.snipeit_models import Category, Hardware
from snipeit.errors import DecodeError, MalformedTimestampError, TimestampFormatError


def test_decode_timestamp_parses_datetime_as_utc() -> None:
    """Decode the ``datetime`` member and ignore ``formatted``."""

    value = decode_timestamp(
        {"datetime": "2019-05-21 21:37:40", "formatted": "2019-05-21 21:37"}
    )

    assert value == datetime(2019, 5, 21, 21, 37, 40, tzinfo=UTC)
    assert value.tzinfo is UTC


def test_decode_timestamp_ignores_formatted_contents() -> None:
    value = decode_timestamp(
        {"datetime": "2020-01-02 03:04:05", "formatted": "Thu Jan 02, 2020 3:04AM"}
    )

    assert value == datetime(2020, 1, 2, 3, 4, 5, tzinfo=UTC)


def test_decode_timestamp_empty_datetime_is_unset() -> None:
    """An empty ``datetime`` marks an unset field, not an error."""

    assert decode_timestamp({"datetime": "", "formatted": ""}) is None


def test_decode_timestamp_passes_through_none_and_datetimes() -> None:
    moment = datetime(2021, 6, 1, tzinfo=UTC)

    assert decode_timestamp(None) is None
    assert decode_timestamp(moment) is moment


@pytest.mark.parametrize(
    "raw",
    [
        "not-a-date",
        "2019-05-21",
        "2019-05-21T21:37:40",
        "2019-05-21 21:37:40+02:00",
        "2019-5-21 21:37:40",
        "2019-05-21 9:37:40",
        "2019-13-21 21:37:40",
        "2019-02-30 10:00:00",
        "2019-05-21 24:00:00",
        " 2019-05-21 21:37:40",
        "２０１９-05-21 21:37:40",
    ],
)
def test_decode_timestamp_rejects_other_layouts(raw: str) -> None:
    """Only ``YYYY-MM-DD HH:MM:SS`` is accepted."""

    with pytest.raises(TimestampFormatError) as excinfo:
        decode_timestamp({"datetime": raw, "formatted": ""})

    assert excinfo.value.value == raw
    assert repr(raw) in str(excinfo.value)
    assert isinstance(excinfo.value, DecodeError)


@pytest.mark.parametrize(
    "payload",
    [
        "2019-05-21 21:37:40",
        1558474660,
        ["2019-05-21 21:37:40"],
        {"datetime": "2019-05-21 21:37:40"},
        {"formatted": "2019-05-21 21:37"},
        {"datetime": None, "formatted": ""},
        {"datetime": "2019-05-21 21:37:40", "formatted": 5},
        {"date": "2019-05-21", "formatted": "2019-05-21"},
    ],
)
def test_decode_timestamp_rejects_malformed_objects(payload: Any) -> None:
    with pytest.raises(MalformedTimestampError) as excinfo:
        decode_timestamp(payload)

    assert excinfo.value.value == payload


def test_timestamp_fields_decode_inside_records() -> None:
    """Every timestamp-typed field runs through the codec."""

    category = Category.model_validate_json(
        """{
            "id": 1,
            "name": "Laptops",
            "created_at": {"datetime": "2019-05-21 21:37:40", "formatted": "x"},
            "updated_at": {"datetime": "", "formatted": ""}
        }"""
    )

    assert category.created_at == datetime(2019, 5, 21, 21, 37, 40, tzinfo=UTC)
    assert category.updated_at is None


def test_timestamp_errors_propagate_through_record_validation() -> None:
    with pytest.raises(TimestampFormatError) as excinfo:
        Hardware.model_validate(
            {
                "id": 10,
                "name": "hardware",
                "purchase_date": {"datetime": "not-a-date", "formatted": ""},
            }
        )
    assert excinfo.value.value == "not-a-date"

    with pytest.raises(MalformedTimestampError):
        Hardware.model_validate({"id": 10, "expected_checkin": "2019-05-21"})
