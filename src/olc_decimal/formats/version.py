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
import enum


class FormatVersion(enum.Enum):
    """Versions of the Open Location Code format."""

    V1 = "v1"
    """The format released 4 Nov 2014, with a `+` prefix and a `.`
    separator after four digits."""

    VNEXT = "vnext"
    """The revised format, with a `+` separator after eight digits and
    `0` padding."""

    @classmethod
    def parse(cls, value: "FormatVersion | str") -> "FormatVersion":
        """Find a FormatVersion by its name or value, ignoring case."""
        if isinstance(value, FormatVersion):
            return value
        for version in cls:
            if value.lower() in (version.value, version.name.lower()):
                return version
        valid_versions = ', '.join(version.value for version in cls)
        raise ValueError(f"Unknown format version '{value}', must be one of: {valid_versions}")
