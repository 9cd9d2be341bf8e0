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
from decimal import Decimal

import olc_decimal.logger as logger

from ..area import CodeArea
from ..codec import decode_digits, encode_digits
from ..constants import (
    CODE_ALPHABET_INDEX,
    ENCODING_BASE,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    PAIR_CODE_LENGTH,
)
from ..coordinates import DegreesLike, clip_latitude, normalize_longitude, to_decimal
from .base import CodeFormat, padding_resolution, round_to_resolution
from .version import FormatVersion

logger = logger.get_logger(__name__)

PREFIX = "+"
"""Helps to disambiguate codes from postcodes."""

SEPARATOR = "."
SEPARATOR_POSITION = 4

MIN_SHORT_CODE_LENGTH = 4
MAX_SHORT_CODE_LENGTH = 7

MIN_TRIMMABLE_CODE_LENGTH = 10
MAX_TRIMMABLE_CODE_LENGTH = 11

SHORTEN_BY_4_RANGE = Decimal("0.25")
SHORTEN_BY_6_RANGE = Decimal("0.0125")


class V1Format(CodeFormat):
    """
    Codes in the format released 4 Nov 2014, like `+8FVC.9G8F6X`.

    Codes may start with a `+` prefix, and have a `.` separator after four
    digits when there are more than four digits. Short codes have had the
    first four or six digits removed, leaving between four and seven.
    """

    version = FormatVersion.V1
    separator = SEPARATOR
    separator_position = SEPARATOR_POSITION

    def is_valid(self, code: str) -> bool:
        """
        To be valid, all characters must be from the code alphabet with at
        most one separator. If the prefix is present, it must be the first
        character. If the separator is present, it must follow four digits.
        """
        if not code or code.isspace():
            return False

        # at most one prefix, and only in the first position
        if code.count(PREFIX) > 1 or code.find(PREFIX) > 0:
            return False
        code = code.replace(PREFIX, "")
        if code == "":
            return False

        if SEPARATOR in code:
            if code.count(SEPARATOR) > 1:
                return False
            if code.index(SEPARATOR) != SEPARATOR_POSITION:
                return False

        return all(
            character == SEPARATOR or character in CODE_ALPHABET_INDEX
            for character in code
        )

    def is_short(self, code: str) -> bool:
        if not self.is_valid(code):
            return False
        if SEPARATOR in code:
            return False
        code = code.replace(PREFIX, "")
        return MIN_SHORT_CODE_LENGTH <= len(code) <= MAX_SHORT_CODE_LENGTH

    def is_full(self, code: str) -> bool:
        """
        Full codes must decode to a location within the valid latitude and
        longitude ranges. Short codes of four to seven digits can also be
        read as full codes of the same length, so both may be true.
        """
        if not self.is_valid(code):
            return False
        code = code.replace(PREFIX, "")

        # a single digit can't be decoded to a longitude
        if len(code) < 2:
            return False

        # the first latitude digit must decode to less than 90 degrees
        first_lat_value = CODE_ALPHABET_INDEX[code[0]] * ENCODING_BASE
        if first_lat_value >= LATITUDE_MAX * 2:
            return False

        # the first longitude digit must decode to less than 180 degrees
        first_lng_value = CODE_ALPHABET_INDEX[code[1]] * ENCODING_BASE
        if first_lng_value >= LONGITUDE_MAX * 2:
            return False

        return True

    def is_valid_code_length(self, code_length: int) -> bool:
        return code_length >= 2

    def encode(
        self,
        latitude: DegreesLike,
        longitude: DegreesLike,
        code_length: int | None = None,
    ) -> str:
        if code_length is None:
            code_length = PAIR_CODE_LENGTH
        if not self.is_valid_code_length(code_length):
            raise ValueError(f"Invalid code length {code_length}, must be at least 2")

        digits = encode_digits(to_decimal(latitude), to_decimal(longitude), code_length)
        if len(digits) > SEPARATOR_POSITION:
            digits = f"{digits[:SEPARATOR_POSITION]}{SEPARATOR}{digits[SEPARATOR_POSITION:]}"
        return f"{PREFIX}{digits}"

    def decode(self, code: str) -> CodeArea:
        if not self.is_full(code):
            raise ValueError(f"Passed code is not a valid full code: {code}")
        return decode_digits(self._digits(code))

    def shorten_by_4(self, code: str, latitude: DegreesLike, longitude: DegreesLike) -> str:
        """
        Remove the first four digits from a full code, if the reference
        location is within 0.25 degrees of the code center. Otherwise the
        code is returned unchanged.
        """
        return self._shorten_by(4, code, latitude, longitude, SHORTEN_BY_4_RANGE)

    def shorten_by_6(self, code: str, latitude: DegreesLike, longitude: DegreesLike) -> str:
        """
        Remove the first six digits from a full code, if the reference
        location is within 0.0125 degrees of the code center. Otherwise the
        code is returned unchanged.
        """
        return self._shorten_by(6, code, latitude, longitude, SHORTEN_BY_6_RANGE)

    def _shorten_by(
        self,
        trim_length: int,
        code: str,
        latitude: DegreesLike,
        longitude: DegreesLike,
        search_range: Decimal,
    ) -> str:
        if not self.is_full(code):
            raise ValueError(f"Passed code is not a valid full code: {code}")

        code_area = self.decode(code)
        if not MIN_TRIMMABLE_CODE_LENGTH <= code_area.code_length <= MAX_TRIMMABLE_CODE_LENGTH:
            raise ValueError(
                f"Only codes of length {MIN_TRIMMABLE_CODE_LENGTH} to "
                f"{MAX_TRIMMABLE_CODE_LENGTH} can be shortened, {code} has {code_area.code_length}"
            )

        latitude = clip_latitude(to_decimal(latitude))
        longitude = normalize_longitude(to_decimal(longitude))

        if (
            abs(code_area.latitude_center - latitude) > search_range
            or abs(code_area.longitude_center - longitude) > search_range
        ):
            logger.debug(f"Not shortening {code}, {latitude},{longitude} is too far from its center")
            return code

        return f"{PREFIX}{self._digits(code)[trim_length:]}"

    def _pad_short_code(
        self,
        short_code: str,
        latitude: Decimal,
        longitude: Decimal,
    ) -> tuple[str, Decimal]:
        short_code = short_code.replace(PREFIX, "")

        # odd length short codes end in a grid digit, so an extra digit of
        # the reference location is needed to complete the last pair
        padding_length = PAIR_CODE_LENGTH - len(short_code)
        if len(short_code) % 2 == 1:
            padding_length += 1

        resolution = padding_resolution(padding_length)
        padding = self.encode(
            round_to_resolution(latitude, resolution),
            round_to_resolution(longitude, resolution),
            padding_length,
        )
        return f"{padding}{short_code}", resolution

    @staticmethod
    def _digits(code: str) -> str:
        """Strip the prefix and separator from a valid code."""
        return code.replace(PREFIX, "").replace(SEPARATOR, "").upper()
