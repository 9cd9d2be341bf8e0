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
import logging
import os

PACKAGE_LOGGER_NAME = "olc_decimal"


def _parse_logger_env():
    """
    Parses environment variables that control logging for the package.

    LOG_LEVEL - must be a valid logging level from the builtin logging package.
      Sets the log level of every logger accessed via get_logger.

    LOG_FILE - a filename where log records should also be written.

    :return: (log_level, log_file)
    """
    LOG_LEVEL = os.getenv("LOG_LEVEL", None)

    log_level = logging.INFO
    if LOG_LEVEL is not None:
        log_levels = logging.getLevelNamesMapping()
        if LOG_LEVEL in log_levels.keys():
            log_level = log_levels[LOG_LEVEL]
        else:
            valid_levels = ', '.join(log_levels.keys())
            logging.getLogger(PACKAGE_LOGGER_NAME).warning(
                f"LOG_LEVEL={LOG_LEVEL} is not a valid log level, must be one of: {valid_levels}"
            )

    log_file = os.getenv("LOG_FILE", None)

    return log_level, log_file

# read the environment once, when the package is first imported
log_level, log_file = _parse_logger_env()

_package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
_package_logger.setLevel(log_level)
if log_file is not None:
    _package_logger.addHandler(logging.FileHandler(log_file))


def get_logger(module_name: str) -> logging.Logger:
    """Return a logger which reports through the package logger, so the
    level and file handler configured from the environment apply to it."""
    if module_name == PACKAGE_LOGGER_NAME or module_name.startswith(f"{PACKAGE_LOGGER_NAME}."):
        return logging.getLogger(module_name)
    return _package_logger.getChild(module_name)
