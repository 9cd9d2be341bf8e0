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

CODE_ALPHABET = "23456789CFGHJMPQRVWX"
"""The characters used in codes, in order of their digit value. Vowels and
easily confused characters are excluded to avoid spelling words."""

# codes are case-insensitive, so lower case characters map to the same value
CODE_ALPHABET_INDEX = {
    **{character: value for value, character in enumerate(CODE_ALPHABET)},
    **{character.lower(): value for value, character in enumerate(CODE_ALPHABET)},
}

ENCODING_BASE = len(CODE_ALPHABET)

LATITUDE_MAX = 90
LONGITUDE_MAX = 180

PAIR_CODE_LENGTH = 10
"""Maximum number of digits in the pair section of a code."""

PAIR_RESOLUTIONS = (
    Decimal("20.0"),
    Decimal("1.0"),
    Decimal(".05"),
    Decimal(".0025"),
    Decimal(".000125"),
)
"""Size in degrees of the area represented by each pair of digits."""

GRID_COLUMNS = 4
GRID_ROWS = 5

GRID_SIZE_DEGREES = Decimal("0.000125")
"""Size in degrees of the area which is subdivided by grid refinement."""

DECODE_DIGITS_ROUND = 11
"""Decimal places kept in the corners of a decoded grid refined area."""
