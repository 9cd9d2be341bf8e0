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

from attrs import field, frozen

from .constants import LATITUDE_MAX, LONGITUDE_MAX
from .coordinates import DegreesLike, to_decimal


def _nearest(center: Decimal, reference: Decimal, resolution: Decimal) -> Decimal:
    difference = center - reference
    if difference > resolution / 2:
        return center - resolution
    if difference < -resolution / 2:
        return center + resolution
    return center


@frozen
class CodeArea:
    """
    The rectangle of the Earth's surface represented by a decoded code.
    """

    latitude_low: Decimal = field(converter=to_decimal)
    """Latitude of the southern edge in degrees."""
    longitude_low: Decimal = field(converter=to_decimal)
    """Longitude of the western edge in degrees."""
    latitude_high: Decimal = field(converter=to_decimal)
    """Latitude of the northern edge in degrees."""
    longitude_high: Decimal = field(converter=to_decimal)
    """Longitude of the eastern edge in degrees."""
    code_length: int
    """Number of significant digits in the code, excluding the separator,
    prefix and any padding."""

    @property
    def latitude_center(self) -> Decimal:
        """Latitude of the center of the area, which can't exceed 90."""
        return min(
            self.latitude_low + (self.latitude_high - self.latitude_low) / 2,
            Decimal(LATITUDE_MAX),
        )

    @property
    def longitude_center(self) -> Decimal:
        """Longitude of the center of the area, which can't exceed 180."""
        return min(
            self.longitude_low + (self.longitude_high - self.longitude_low) / 2,
            Decimal(LONGITUDE_MAX),
        )

    def contains(self, latitude: DegreesLike, longitude: DegreesLike) -> bool:
        latitude = to_decimal(latitude)
        longitude = to_decimal(longitude)
        return (
            self.latitude_low <= latitude <= self.latitude_high
            and self.longitude_low <= longitude <= self.longitude_high
        )

    def nearest_center(
        self,
        latitude: Decimal,
        longitude: Decimal,
        resolution: Decimal,
    ) -> tuple[Decimal, Decimal]:
        """Return the center of this area, or of a neighbouring area one
        `resolution` step away, whichever is nearest to the reference
        location. Each axis is moved independently, by at most one step.

        An area recovered from a short code is centered within `resolution`
        of the reference, but if it sits more than half a step away then
        the matching area on the other side of the reference is closer."""
        return (
            _nearest(self.latitude_center, latitude, resolution),
            _nearest(self.longitude_center, longitude, resolution),
        )
