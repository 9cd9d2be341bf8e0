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
from functools import cached_property

from .area import CodeArea
from .config import get_config
from .coordinates import DegreesLike, to_decimal
from .formats import CodeFormat, FormatVersion, get_format


class OpenLocationCode:
    """
    An Open Location Code in a particular format version, created either
    from a code string or from a location.

    Fields are calculated the first time they are accessed and then kept,
    so a code created from a location is only encoded when its `code` is
    needed, and a code string is only decoded when its area or location
    is needed.
    """

    format_version: FormatVersion
    """Format used to read and write the code. Never changes; use
    convert_to_format_version to get the same area in another format."""

    def __init__(
        self,
        code: str | None = None,
        format_version: FormatVersion | str | None = None,
        *,
        latitude: DegreesLike | None = None,
        longitude: DegreesLike | None = None,
        code_length: int | None = None,
    ):
        if code is None and (latitude is None or longitude is None):
            raise ValueError("Either a code, or a latitude and longitude, must be provided")

        if format_version is None:
            format_version = get_config().format_version
        self.format_version = FormatVersion.parse(format_version)

        self._code = code
        self._latitude = None if latitude is None else to_decimal(latitude)
        self._longitude = None if longitude is None else to_decimal(longitude)
        self._code_length = code_length

    @classmethod
    def from_coordinates(
        cls,
        latitude: DegreesLike,
        longitude: DegreesLike,
        code_length: int | None = None,
        format_version: FormatVersion | str | None = None,
    ) -> "OpenLocationCode":
        """Create a code for a location. If code_length isn't provided,
        the configured default is used."""
        return cls(
            format_version=format_version,
            latitude=latitude,
            longitude=longitude,
            code_length=code_length,
        )

    @property
    def _format(self) -> CodeFormat:
        return get_format(self.format_version)

    @cached_property
    def code(self) -> str:
        if self._code is not None:
            return self._code
        code_length = self._code_length
        if code_length is None:
            code_length = get_config().code_length
        return self._format.encode(self._latitude, self._longitude, code_length)

    @cached_property
    def is_valid(self) -> bool:
        return self._format.is_valid(self.code)

    @cached_property
    def is_short(self) -> bool:
        return self._format.is_short(self.code)

    @cached_property
    def is_full(self) -> bool:
        return self._format.is_full(self.code)

    @cached_property
    def area(self) -> CodeArea:
        """The area represented by the code. Raises ValueError if the code
        is not a full code."""
        return self._format.decode(self.code)

    @cached_property
    def latitude(self) -> Decimal:
        """The latitude the code was created from, or the latitude of the
        center of its area."""
        if self._latitude is not None:
            return self._latitude
        return self.area.latitude_center

    @cached_property
    def longitude(self) -> Decimal:
        """The longitude the code was created from, or the longitude of the
        center of its area."""
        if self._longitude is not None:
            return self._longitude
        return self.area.longitude_center

    @cached_property
    def code_length(self) -> int:
        if self._code_length is not None:
            return self._code_length
        return self.area.code_length

    def recover_nearest(
        self,
        reference_latitude: DegreesLike | None = None,
        reference_longitude: DegreesLike | None = None,
    ) -> "OpenLocationCode":
        """Recover the nearest full code to the reference location. A full
        code is returned unchanged."""
        return self._derive(self._format.recover_nearest(
            self.code,
            self.latitude if reference_latitude is None else reference_latitude,
            self.longitude if reference_longitude is None else reference_longitude,
        ))

    def shorten(
        self,
        latitude: DegreesLike | None = None,
        longitude: DegreesLike | None = None,
    ) -> "OpenLocationCode":
        """Remove as many digits as a nearby reference location allows.
        Only supported by FormatVersion.VNEXT."""
        return self._derive(self._format.shorten(
            self.code,
            self.latitude if latitude is None else latitude,
            self.longitude if longitude is None else longitude,
        ))

    def shorten_by_4(
        self,
        latitude: DegreesLike | None = None,
        longitude: DegreesLike | None = None,
    ) -> "OpenLocationCode":
        """Only supported by FormatVersion.V1."""
        return self._derive(self._format.shorten_by_4(
            self.code,
            self.latitude if latitude is None else latitude,
            self.longitude if longitude is None else longitude,
        ))

    def shorten_by_6(
        self,
        latitude: DegreesLike | None = None,
        longitude: DegreesLike | None = None,
    ) -> "OpenLocationCode":
        """Only supported by FormatVersion.V1."""
        return self._derive(self._format.shorten_by_6(
            self.code,
            self.latitude if latitude is None else latitude,
            self.longitude if longitude is None else longitude,
        ))

    def convert_to_format_version(self, format_version: FormatVersion | str) -> "OpenLocationCode":
        """
        Write the same area in another format version. The code is decoded
        and its center encoded again with the same number of digits, so the
        area is preserved even though the code string changes.
        """
        return OpenLocationCode.from_coordinates(
            self.area.latitude_center,
            self.area.longitude_center,
            self.area.code_length,
            format_version,
        )

    def _derive(self, code: str) -> "OpenLocationCode":
        return OpenLocationCode(code, self.format_version)

    def __str__(self):
        return self.code

    def __repr__(self):
        return f"OpenLocationCode({self.code!r}, {self.format_version})"

    def __eq__(self, other):
        if not isinstance(other, OpenLocationCode):
            return NotImplemented
        # codes are case insensitive
        return self.code.upper() == other.code.upper() and self.format_version == other.format_version

    def __hash__(self):
        return hash((self.code.upper(), self.format_version))
