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
from functools import cache
from typing import Self

from attrs import field, frozen
from attrs.converters import default_if_none
from environs import Env

from .constants import PAIR_CODE_LENGTH
from .formats import FormatVersion, get_format

DEFAULT_FORMAT_VERSION = FormatVersion.V1


def _parse_format_version(value) -> FormatVersion:
    if value is None:
        return DEFAULT_FORMAT_VERSION
    return FormatVersion.parse(value)


def _check_code_length(instance, attribute, value):
    if value < 2:
        raise ValueError(f"code_length must be at least 2, got {value}")
    # validators run once every field is converted
    if not get_format(instance.format_version).is_valid_code_length(value):
        raise ValueError(
            f"code_length {value} can't be encoded in format version "
            f"{instance.format_version.value}"
        )


@frozen
class CodecConfig:
    """Defaults used when a code is created without specifying them."""

    # from_env passes None for unset variables, so defaults are applied by
    # the converters
    format_version: FormatVersion = field(
        default=None,
        converter=_parse_format_version,
    )
    """Format used to read and write codes."""

    code_length: int = field(
        default=None,
        converter=default_if_none(PAIR_CODE_LENGTH),
        validator=_check_code_length,
    )
    """Number of digits in newly encoded codes."""

    @classmethod
    def from_env(cls) -> Self:
        """Load config from environment variables, or an `.env` file.

        OLC_FORMAT_VERSION - `v1` or `vnext`
        OLC_CODE_LENGTH - number of digits in encoded codes
        """
        env = Env(expand_vars=True)
        env.read_env()

        return cls(
            format_version=env.str("OLC_FORMAT_VERSION", None),
            code_length=env.int("OLC_CODE_LENGTH", None),
        )


@cache
def get_config() -> CodecConfig:
    """Config loaded from the environment the first time it is requested."""
    return CodecConfig.from_env()
