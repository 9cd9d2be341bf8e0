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
"""
Encoding and decoding of the significant digits of a code. These functions
work on bare digit strings; separators, padding and prefixes are the
concern of each format in `olc_decimal.formats`.
"""
import math
from decimal import Decimal

from .area import CodeArea
from .constants import (
    CODE_ALPHABET,
    CODE_ALPHABET_INDEX,
    GRID_COLUMNS,
    GRID_ROWS,
    GRID_SIZE_DEGREES,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    PAIR_CODE_LENGTH,
    PAIR_RESOLUTIONS,
)
from .coordinates import (
    clip_latitude,
    compute_latitude_precision,
    normalize_longitude,
    round_degrees,
)


def encode_pairs(latitude: Decimal, longitude: Decimal, code_length: int) -> str:
    """
    Encode a location into a sequence of alternating latitude and longitude
    digits, starting with latitude. If code_length is odd, the final
    longitude digit is left off.
    """
    # shift into positive ranges
    adjusted_latitude = latitude + LATITUDE_MAX
    adjusted_longitude = longitude + LONGITUDE_MAX

    digits = []
    while len(digits) < code_length:
        place_value = PAIR_RESOLUTIONS[len(digits) // 2]

        digit_value = math.floor(adjusted_latitude / place_value)
        adjusted_latitude -= digit_value * place_value
        digits.append(CODE_ALPHABET[digit_value])
        if len(digits) == code_length:
            break

        digit_value = math.floor(adjusted_longitude / place_value)
        adjusted_longitude -= digit_value * place_value
        digits.append(CODE_ALPHABET[digit_value])

    return "".join(digits)


def encode_grid(latitude: Decimal, longitude: Decimal, code_length: int) -> str:
    """
    Encode a location into grid refinement digits. Only the part of the
    location within the smallest pair area is encoded; each digit picks one
    cell of a 4 column by 5 row grid, which is then subdivided again.
    """
    lat_place_value = GRID_SIZE_DEGREES
    lng_place_value = GRID_SIZE_DEGREES
    adjusted_latitude = (latitude + LATITUDE_MAX) % lat_place_value
    adjusted_longitude = (longitude + LONGITUDE_MAX) % lng_place_value

    digits = []
    for _ in range(code_length):
        row = math.floor(adjusted_latitude / (lat_place_value / GRID_ROWS))
        col = math.floor(adjusted_longitude / (lng_place_value / GRID_COLUMNS))
        lat_place_value /= GRID_ROWS
        lng_place_value /= GRID_COLUMNS
        adjusted_latitude -= row * lat_place_value
        adjusted_longitude -= col * lng_place_value
        digits.append(CODE_ALPHABET[row * GRID_COLUMNS + col])

    return "".join(digits)


def _decode_pairs_sequence(digits: str, offset: int) -> tuple[Decimal, Decimal]:
    """Decode every second digit starting at offset, returning the low and
    high edge of the area in the positive (shifted) range."""
    value = Decimal(0)
    i = 0
    while i * 2 + offset < len(digits):
        value += CODE_ALPHABET_INDEX[digits[i * 2 + offset]] * PAIR_RESOLUTIONS[i]
        i += 1
    return value, value + PAIR_RESOLUTIONS[i - 1]


def decode_pairs(digits: str) -> CodeArea:
    latitude_low, latitude_high = _decode_pairs_sequence(digits, 0)
    longitude_low, longitude_high = _decode_pairs_sequence(digits, 1)
    return CodeArea(
        latitude_low=latitude_low - LATITUDE_MAX,
        longitude_low=longitude_low - LONGITUDE_MAX,
        latitude_high=latitude_high - LATITUDE_MAX,
        longitude_high=longitude_high - LONGITUDE_MAX,
        code_length=len(digits),
    )


def decode_grid(digits: str) -> CodeArea:
    """
    Decode grid refinement digits. The resulting area is relative to the
    south west corner of the smallest pair area, not an absolute location.
    """
    latitude_low = Decimal(0)
    longitude_low = Decimal(0)
    lat_place_value = GRID_SIZE_DEGREES
    lng_place_value = GRID_SIZE_DEGREES

    for digit in digits:
        code_index = CODE_ALPHABET_INDEX[digit]
        row = code_index // GRID_COLUMNS
        col = code_index % GRID_COLUMNS
        lat_place_value /= GRID_ROWS
        lng_place_value /= GRID_COLUMNS
        latitude_low += row * lat_place_value
        longitude_low += col * lng_place_value

    return CodeArea(
        latitude_low=latitude_low,
        longitude_low=longitude_low,
        latitude_high=latitude_low + lat_place_value,
        longitude_high=longitude_low + lng_place_value,
        code_length=len(digits),
    )


def encode_digits(latitude: Decimal, longitude: Decimal, code_length: int) -> str:
    """Encode a location into code_length significant digits, using grid
    refinement for any digits beyond the pair section."""
    latitude = clip_latitude(latitude)
    longitude = normalize_longitude(longitude)

    # latitude 90 would need a digit beyond the alphabet, so move it just
    # below the pole where the resulting code can still be decoded
    if latitude == LATITUDE_MAX:
        latitude = latitude - compute_latitude_precision(code_length)

    digits = encode_pairs(latitude, longitude, min(code_length, PAIR_CODE_LENGTH))
    if code_length > PAIR_CODE_LENGTH:
        digits += encode_grid(latitude, longitude, code_length - PAIR_CODE_LENGTH)
    return digits


def decode_digits(digits: str) -> CodeArea:
    """Decode significant digits into the area they represent. Areas which
    include grid refinement are rounded to DECODE_DIGITS_ROUND places."""
    area = decode_pairs(digits[:PAIR_CODE_LENGTH])
    if len(digits) <= PAIR_CODE_LENGTH:
        return area

    grid_area = decode_grid(digits[PAIR_CODE_LENGTH:])
    return CodeArea(
        latitude_low=round_degrees(area.latitude_low + grid_area.latitude_low),
        longitude_low=round_degrees(area.longitude_low + grid_area.longitude_low),
        latitude_high=round_degrees(area.latitude_low + grid_area.latitude_high),
        longitude_high=round_degrees(area.longitude_low + grid_area.longitude_high),
        code_length=area.code_length + grid_area.code_length,
    )
