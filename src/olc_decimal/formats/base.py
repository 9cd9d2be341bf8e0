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
import abc
import math
from decimal import Decimal

import olc_decimal.logger as logger

from ..area import CodeArea
from ..constants import ENCODING_BASE
from ..coordinates import DegreesLike, clip_latitude, normalize_longitude, to_decimal
from .version import FormatVersion

logger = logger.get_logger(__name__)


class CodeFormat(abc.ABC):
    """
    A textual format for Open Location Codes. Formats agree on how digits
    are calculated, but differ in how the digits are written: which
    separator is used and where, whether codes are padded, and how codes
    may be shortened.
    """

    version: FormatVersion
    """The format version implemented."""

    separator: str
    """Character which splits a code into two parts to aid memorability."""

    separator_position: int
    """Number of digits placed before the separator."""

    @abc.abstractmethod
    def is_valid(self, code: str) -> bool:
        """Determine if a code is a valid full or short code in this format."""

    @abc.abstractmethod
    def is_short(self, code: str) -> bool:
        """Determine if a code is a valid short code, which must be recovered
        using a reference location before it can be decoded."""

    @abc.abstractmethod
    def is_full(self, code: str) -> bool:
        """Determine if a code is a valid full code, representing a location
        without needing a reference location."""

    @abc.abstractmethod
    def is_valid_code_length(self, code_length: int) -> bool:
        """Determine if locations can be encoded with this many digits."""

    @abc.abstractmethod
    def encode(
        self,
        latitude: DegreesLike,
        longitude: DegreesLike,
        code_length: int | None = None,
    ) -> str:
        """Encode a location into a code of the given number of digits."""

    @abc.abstractmethod
    def decode(self, code: str) -> CodeArea:
        """Decode a full code into the area it represents."""

    @abc.abstractmethod
    def _pad_short_code(
        self,
        short_code: str,
        latitude: Decimal,
        longitude: Decimal,
    ) -> tuple[str, Decimal]:
        """Prefix a short code with the digits of the reference location
        needed to make it a full code. Returns the padded code and the
        resolution in degrees of the recovered digits."""

    def shorten(self, code: str, latitude: DegreesLike, longitude: DegreesLike) -> str:
        raise ValueError(f"Format version {self.version.value} does not support shorten")

    def shorten_by_4(self, code: str, latitude: DegreesLike, longitude: DegreesLike) -> str:
        raise ValueError(f"Format version {self.version.value} does not support shorten_by_4")

    def shorten_by_6(self, code: str, latitude: DegreesLike, longitude: DegreesLike) -> str:
        raise ValueError(f"Format version {self.version.value} does not support shorten_by_6")

    def recover_nearest(
        self,
        short_code: str,
        reference_latitude: DegreesLike,
        reference_longitude: DegreesLike,
    ) -> str:
        """
        Recover the nearest matching full code to a reference location.

        The missing leading digits are taken from the reference location,
        and if the resulting area is more than half a cell from the
        reference, the neighbouring cell on the other side is used instead.
        Full codes are returned unchanged.
        """
        if not self.is_short(short_code):
            if self.is_full(short_code):
                return short_code
            raise ValueError(f"Passed short code is not valid: {short_code}")

        reference_latitude = clip_latitude(to_decimal(reference_latitude))
        reference_longitude = normalize_longitude(to_decimal(reference_longitude))

        padded_code, resolution = self._pad_short_code(
            short_code, reference_latitude, reference_longitude,
        )
        code_area = self.decode(padded_code)

        latitude_center, longitude_center = code_area.nearest_center(
            reference_latitude, reference_longitude, resolution,
        )
        if (latitude_center, longitude_center) != (code_area.latitude_center, code_area.longitude_center):
            logger.debug(
                f"Recovered {short_code} in the cell adjacent to the reference, "
                f"moving center to {latitude_center},{longitude_center}"
            )

        return self.encode(latitude_center, longitude_center, code_area.code_length)


def padding_resolution(padding_length: int) -> Decimal:
    """Size in degrees of the area represented by padding_length leading
    digits."""
    return Decimal(ENCODING_BASE) ** (2 - padding_length // 2)


def round_to_resolution(value: Decimal, resolution: Decimal) -> Decimal:
    """Round a coordinate down to a multiple of resolution."""
    return math.floor(value / resolution) * resolution
