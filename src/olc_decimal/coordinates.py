#
# Copyright 2025 The Superpower Institute Ltd.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from .constants import (
    DECODE_DIGITS_ROUND,
    ENCODING_BASE,
    GRID_ROWS,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    PAIR_CODE_LENGTH,
)

DegreesLike = Decimal | float | int | str

_ROUNDING_QUANTUM = Decimal(1).scaleb(-DECODE_DIGITS_ROUND)


def to_decimal(value: DegreesLike) -> Decimal:
    """Convert a coordinate value to a Decimal. Floats are converted using
    their shortest representation, so 50.0398061 becomes exactly
    Decimal("50.0398061") rather than its binary expansion.

    Raises ValueError for values which aren't finite numbers."""
    if isinstance(value, float):
        value = repr(value)
    if not isinstance(value, Decimal):
        try:
            value = Decimal(value)
        except InvalidOperation as e:
            raise ValueError(f"Invalid coordinate value: {value!r}") from e
    if not value.is_finite():
        raise ValueError(f"Coordinate must be a finite number, got {value}")
    return value


def clip_latitude(latitude: Decimal) -> Decimal:
    """Clamp a latitude into the range [-90, 90]."""
    return min(Decimal(LATITUDE_MAX), max(Decimal(-LATITUDE_MAX), latitude))


def normalize_longitude(longitude: Decimal) -> Decimal:
    """Wrap a longitude into the range [-180, 180)."""
    while longitude < -LONGITUDE_MAX:
        longitude = longitude + 2 * LONGITUDE_MAX
    while longitude >= LONGITUDE_MAX:
        longitude = longitude - 2 * LONGITUDE_MAX
    return longitude


def compute_latitude_precision(code_length: int) -> Decimal:
    """Returns the height in degrees of the area represented by a code of
    the given length."""
    if code_length <= PAIR_CODE_LENGTH:
        return Decimal(ENCODING_BASE) ** math.floor(code_length / -2 + 2)
    return Decimal(ENCODING_BASE) ** -3 / Decimal(GRID_ROWS) ** (code_length - PAIR_CODE_LENGTH)


def round_degrees(value: Decimal) -> Decimal:
    """Round to the precision of decoded areas, away from zero on ties."""
    return value.quantize(_ROUNDING_QUANTUM, rounding=ROUND_HALF_UP)
