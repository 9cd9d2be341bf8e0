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
import re
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
    PAIR_RESOLUTIONS,
)
from ..coordinates import DegreesLike, clip_latitude, normalize_longitude, to_decimal
from .base import CodeFormat, padding_resolution, round_to_resolution
from .version import FormatVersion

logger = logger.get_logger(__name__)

SEPARATOR = "+"
SEPARATOR_POSITION = 8

PADDING_CHARACTER = "0"
"""Fills the digits before the separator in codes with fewer than eight
digits."""

MIN_TRIMMABLE_CODE_LENGTH = 6

SHORTEN_SAFETY_FACTOR = Decimal("0.3")
"""Shortening is only safe when the reference is within half a cell of the
code center; 0.3 leaves some margin."""

_padding_pattern = re.compile(f"{PADDING_CHARACTER}+")


class VNextFormat(CodeFormat):
    """
    Codes in the revised format, like `8FVC9G8F+6X`.

    The `+` separator is required, and follows the eighth digit of a full
    code. Codes with fewer than eight digits are padded with `0` up to the
    separator, like `8FVC0000+`. Short codes have had an even number of
    digits removed from the start, like `9G8F+6X`.
    """

    version = FormatVersion.VNEXT
    separator = SEPARATOR
    separator_position = SEPARATOR_POSITION

    def is_valid(self, code: str) -> bool:
        """
        Determine if a code is valid.

        The separator is required, and there must be an even number of
        digits before it, no more than eight. Padding may only appear as a
        single run of an even number of characters which ends at the
        separator, and must then be the last thing in the code. A single
        digit after the separator is not allowed.
        """
        if not code or code.isspace():
            return False

        if code.count(SEPARATOR) != 1:
            return False
        if len(code) == 1:
            return False

        separator_index = code.index(SEPARATOR)
        if separator_index > SEPARATOR_POSITION or separator_index % 2 == 1:
            return False

        if PADDING_CHARACTER in code:
            # not allowed to start with padding
            if code.index(PADDING_CHARACTER) == 0:
                return False
            padding = list(_padding_pattern.finditer(code))
            if len(padding) > 1:
                return False
            padding_run = padding[0]
            if (
                len(padding_run.group()) % 2 == 1
                or len(padding_run.group()) > SEPARATOR_POSITION - 2
            ):
                return False
            # padding fills the digits directly before the separator, which
            # must be the final character
            if padding_run.end() != separator_index or code[-1] != SEPARATOR:
                return False

        if len(code) - separator_index - 1 == 1:
            return False

        digits = code.replace(SEPARATOR, "").replace(PADDING_CHARACTER, "")
        return all(character in CODE_ALPHABET_INDEX for character in digits)

    def is_short(self, code: str) -> bool:
        if not self.is_valid(code):
            return False
        return code.index(SEPARATOR) < SEPARATOR_POSITION

    def is_full(self, code: str) -> bool:
        if not self.is_valid(code):
            return False
        if self.is_short(code):
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
        """Codes shorter than the separator position are padded, which is
        only possible for whole pairs of digits."""
        return code_length >= 2 and not (code_length < SEPARATOR_POSITION and code_length % 2 == 1)

    def encode(
        self,
        latitude: DegreesLike,
        longitude: DegreesLike,
        code_length: int | None = None,
    ) -> str:
        if code_length is None:
            code_length = PAIR_CODE_LENGTH
        if not self.is_valid_code_length(code_length):
            raise ValueError(
                f"Invalid code length {code_length}, must be an even number from 2 "
                f"to {SEPARATOR_POSITION}, or greater than {SEPARATOR_POSITION}"
            )
        # the pair section is always written as whole pairs, so a nine digit
        # code gains the final longitude digit
        if code_length < PAIR_CODE_LENGTH and code_length % 2 == 1:
            code_length += 1

        digits = encode_digits(to_decimal(latitude), to_decimal(longitude), code_length)
        if len(digits) < SEPARATOR_POSITION:
            digits = digits.ljust(SEPARATOR_POSITION, PADDING_CHARACTER)
        return f"{digits[:SEPARATOR_POSITION]}{SEPARATOR}{digits[SEPARATOR_POSITION:]}"

    def decode(self, code: str) -> CodeArea:
        if not self.is_full(code):
            raise ValueError(f"Passed code is not a valid full code: {code}")
        return decode_digits(self._digits(code))

    def shorten(self, code: str, latitude: DegreesLike, longitude: DegreesLike) -> str:
        """
        Remove as many leading digits from a full code as the reference
        location allows. The closer the reference is to the code center,
        the more digits are removed: four, six or eight. If the reference
        is too far away the code is returned unchanged.
        """
        if not self.is_full(code):
            raise ValueError(f"Passed code is not a valid full code: {code}")
        if PADDING_CHARACTER in code:
            raise ValueError(f"Cannot shorten padded codes: {code}")

        code = code.upper()
        code_area = self.decode(code)
        if code_area.code_length < MIN_TRIMMABLE_CODE_LENGTH:
            raise ValueError(
                f"Code length must be at least {MIN_TRIMMABLE_CODE_LENGTH} to shorten: {code}"
            )

        latitude = clip_latitude(to_decimal(latitude))
        longitude = normalize_longitude(to_decimal(longitude))

        search_range = max(
            abs(code_area.latitude_center - latitude),
            abs(code_area.longitude_center - longitude),
        )
        # from the finest resolution which can be removed, to the coarsest
        for i in range(len(PAIR_RESOLUTIONS) - 2, 0, -1):
            if search_range < PAIR_RESOLUTIONS[i] * SHORTEN_SAFETY_FACTOR:
                shortened = code[(i + 1) * 2:]
                # a code with no digits after the separator can't lose them all
                if self.is_short(shortened):
                    return shortened

        logger.debug(f"Not shortening {code}, {latitude},{longitude} is too far from its center")
        return code

    def _pad_short_code(
        self,
        short_code: str,
        latitude: Decimal,
        longitude: Decimal,
    ) -> tuple[str, Decimal]:
        short_code = short_code.upper()

        padding_length = SEPARATOR_POSITION - short_code.index(SEPARATOR)
        resolution = padding_resolution(padding_length)
        padding = self.encode(
            round_to_resolution(latitude, resolution),
            round_to_resolution(longitude, resolution),
        )[:padding_length]
        return f"{padding}{short_code}", resolution

    @staticmethod
    def _digits(code: str) -> str:
        """Strip the separator and padding from a valid code."""
        return code.replace(SEPARATOR, "").replace(PADDING_CHARACTER, "").upper()
