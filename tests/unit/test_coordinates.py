from decimal import Decimal

import pytest

from olc_decimal.coordinates import (
    clip_latitude,
    compute_latitude_precision,
    normalize_longitude,
    round_degrees,
    to_decimal,
)


def test_to_decimal():
    # floats are converted using their shortest representation
    assert to_decimal(50.0398061) == Decimal("50.0398061")
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal(-179) == Decimal(-179)
    assert to_decimal("20.375") == Decimal("20.375")

    value = Decimal("1.23")
    assert to_decimal(value) is value


def test_clip_latitude():
    assert clip_latitude(Decimal("45.5")) == Decimal("45.5")
    assert clip_latitude(Decimal(90)) == 90
    assert clip_latitude(Decimal("90.0001")) == 90
    assert clip_latitude(Decimal(-95)) == -90


def test_normalize_longitude():
    assert normalize_longitude(Decimal("179.999")) == Decimal("179.999")
    assert normalize_longitude(Decimal(-180)) == -180
    # the range excludes 180
    assert normalize_longitude(Decimal(180)) == -180
    assert normalize_longitude(Decimal(181)) == -179
    assert normalize_longitude(Decimal(-181)) == 179
    assert normalize_longitude(Decimal(900)) == -180
    assert normalize_longitude(Decimal(-540.5)) == Decimal("179.5")


def test_compute_latitude_precision():
    assert compute_latitude_precision(2) == 20
    assert compute_latitude_precision(3) == 1
    assert compute_latitude_precision(4) == 1
    assert compute_latitude_precision(6) == Decimal("0.05")
    assert compute_latitude_precision(8) == Decimal("0.0025")
    assert compute_latitude_precision(10) == Decimal("0.000125")
    # grid refinement divides latitude into 5 rows
    assert compute_latitude_precision(11) == Decimal("0.000025")
    assert compute_latitude_precision(12) == Decimal("0.000005")


def test_round_degrees():
    assert round_degrees(Decimal("2.782234375")) == Decimal("2.78223437500")
    assert round_degrees(Decimal("1.000000000001")) == Decimal("1")
    # ties are rounded away from zero
    assert round_degrees(Decimal("2.782236328125")) == Decimal("2.78223632813")
    assert round_degrees(Decimal("-2.782236328125")) == Decimal("-2.78223632813")
    assert round_degrees(Decimal("0.000000000015")) == Decimal("0.00000000002")


def test_to_decimal_not_finite():
    for value in [float("inf"), float("-inf"), float("nan"), Decimal("Infinity"), Decimal("NaN"), "-inf"]:
        with pytest.raises(ValueError, match="Coordinate must be a finite number"):
            to_decimal(value)

    with pytest.raises(ValueError, match="Invalid coordinate value: 'north'"):
        to_decimal("north")
