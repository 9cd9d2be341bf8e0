import csv
import os
import pathlib
from decimal import Decimal
from pathlib import Path

import pytest

from olc_decimal.config import get_config


@pytest.fixture(scope="session")
def root_dir() -> pathlib.Path:
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def data_dir(root_dir) -> pathlib.Path:
    return root_dir / "tests" / "data"


# This fixture will be automatically used by all tests so that config from
# the environment running the tests doesn't change codec defaults
@pytest.fixture(autouse=True)
def env(monkeypatch):
    initial_env = dict(os.environ)
    for name in ("OLC_FORMAT_VERSION", "OLC_CODE_LENGTH", "LOG_LEVEL", "LOG_FILE"):
        os.environ.pop(name, None)
    get_config.cache_clear()

    yield

    # Reset environment to initial state
    os.environ.clear()
    os.environ.update(initial_env)
    get_config.cache_clear()


def read_test_data(path: pathlib.Path) -> list[list[str]]:
    """Read a CSV test data file, skipping comment lines."""
    with open(path, newline="") as data_file:
        reader = csv.reader(line for line in data_file if line.strip() and not line.startswith("#"))
        return [row for row in reader]


def _encoding_rows(path: pathlib.Path) -> list[dict]:
    return [
        {
            "code": code,
            "latitude": Decimal(latitude),
            "longitude": Decimal(longitude),
            "latitude_low": Decimal(latitude_low),
            "longitude_low": Decimal(longitude_low),
            "latitude_high": Decimal(latitude_high),
            "longitude_high": Decimal(longitude_high),
        }
        for code, latitude, longitude, latitude_low, longitude_low, latitude_high, longitude_high
        in read_test_data(path)
    ]


def _validity_rows(path: pathlib.Path) -> list[dict]:
    return [
        {
            "code": code,
            "is_valid": is_valid == "true",
            "is_short": is_short == "true",
            "is_full": is_full == "true",
        }
        for code, is_valid, is_short, is_full in read_test_data(path)
    ]


@pytest.fixture(scope="session")
def v1_encoding_data(data_dir) -> list[dict]:
    return _encoding_rows(data_dir / "v1" / "encoding.csv")


@pytest.fixture(scope="session")
def vnext_encoding_data(data_dir) -> list[dict]:
    return _encoding_rows(data_dir / "vnext" / "encoding.csv")


@pytest.fixture(scope="session")
def v1_validity_data(data_dir) -> list[dict]:
    return _validity_rows(data_dir / "v1" / "validity.csv")


@pytest.fixture(scope="session")
def vnext_validity_data(data_dir) -> list[dict]:
    return _validity_rows(data_dir / "vnext" / "validity.csv")


@pytest.fixture(scope="session")
def v1_shortening_data(data_dir) -> list[dict]:
    return [
        {
            "full_code": full_code,
            "latitude": Decimal(latitude),
            "longitude": Decimal(longitude),
            "shortened_by_4": shortened_by_4,
            "shortened_by_6": shortened_by_6,
        }
        for full_code, latitude, longitude, shortened_by_4, shortened_by_6
        in read_test_data(data_dir / "v1" / "shortening.csv")
    ]


@pytest.fixture(scope="session")
def vnext_shortening_data(data_dir) -> list[dict]:
    return [
        {
            "full_code": full_code,
            "latitude": Decimal(latitude),
            "longitude": Decimal(longitude),
            "short_code": short_code,
        }
        for full_code, latitude, longitude, short_code
        in read_test_data(data_dir / "vnext" / "shortening.csv")
    ]
