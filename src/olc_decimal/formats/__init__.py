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
from .base import CodeFormat
from .v1 import V1Format
from .version import FormatVersion
from .vnext import VNextFormat

_formats: dict[FormatVersion, CodeFormat] = {
    FormatVersion.V1: V1Format(),
    FormatVersion.VNEXT: VNextFormat(),
}


def get_format(version: FormatVersion | str) -> CodeFormat:
    """Return the CodeFormat which implements a format version."""
    return _formats[FormatVersion.parse(version)]


__all__ = [
    "CodeFormat",
    "FormatVersion",
    "V1Format",
    "VNextFormat",
    "get_format",
]
