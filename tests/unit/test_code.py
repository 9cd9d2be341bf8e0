import os
from decimal import Decimal

import pytest

from olc_decimal import FormatVersion, OpenLocationCode


def test_code_from_string():
    olc = OpenLocationCode("9F2P2CQH+WW", FormatVersion.VNEXT)

    assert olc.code == "9F2P2CQH+WW"
    assert olc.is_valid
    assert olc.is_full
    assert not olc.is_short
    assert olc.code_length == 10
    assert olc.latitude == Decimal("50.0398125")
    assert olc.longitude == Decimal("14.4298125")
    assert olc.area.contains(Decimal("50.0398061"), Decimal("14.4298583"))


def test_code_from_coordinates():
    olc = OpenLocationCode.from_coordinates(50.0398061, 14.4298583, 11, "vnext")

    # the location and length are kept as given, without encoding
    assert olc.latitude == Decimal("50.0398061")
    assert olc.longitude == Decimal("14.4298583")
    assert olc.code_length == 11

    assert olc.code.startswith("9F2P2CQH+WW")
    assert len(olc.code) == 12
    assert olc.area.code_length == 11


def test_code_default_config():
    olc = OpenLocationCode.from_coordinates(50.0398061, 14.4298583)

    assert olc.format_version == FormatVersion.V1
    assert olc.code == "+9F2P.2CQHWW"


def test_code_config_from_env():
    os.environ["OLC_FORMAT_VERSION"] = "vnext"
    os.environ["OLC_CODE_LENGTH"] = "8"

    olc = OpenLocationCode.from_coordinates(50.0398061, 14.4298583)

    assert olc.format_version == FormatVersion.VNEXT
    assert olc.code == "9F2P2CQH+"

    # an explicit version overrides the config
    assert OpenLocationCode("+9F2P.2CQHWW", "v1").format_version == FormatVersion.V1


def test_code_invalid():
    with pytest.raises(ValueError, match="Either a code, or a latitude and longitude"):
        OpenLocationCode()

    with pytest.raises(ValueError, match="Either a code, or a latitude and longitude"):
        OpenLocationCode(latitude=1)

    with pytest.raises(ValueError, match="Unknown format version"):
        OpenLocationCode("9F2P2CQH+WW", "v2")

    # invalid codes are only detected when decoded
    olc = OpenLocationCode("9F2P2CQH+W", "vnext")
    assert not olc.is_valid
    with pytest.raises(ValueError, match="not a valid full code"):
        olc.area


def test_code_convert_format_version():
    vnext = OpenLocationCode("9F2P2CQH+WW", "vnext")

    v1 = vnext.convert_to_format_version(FormatVersion.V1)
    assert v1.format_version == FormatVersion.V1
    assert v1.code == "+9F2P.2CQHWW"
    assert v1.area.latitude_center == vnext.area.latitude_center
    assert v1.area.longitude_center == vnext.area.longitude_center

    assert v1.convert_to_format_version("vnext") == vnext


def test_code_convert_padded():
    vnext = OpenLocationCode("9F2P0000+", "vnext")

    v1 = vnext.convert_to_format_version("v1")
    assert v1.code == "+9F2P"
    assert v1.convert_to_format_version("vnext").code == "9F2P0000+"


def test_code_shorten_recover_vnext():
    olc = OpenLocationCode("9C3W9QCJ+2VX", "vnext")

    # the center of the code's own area allows the most digits to be removed
    assert olc.shorten().code == "+2VX"

    short = olc.shorten(51.3861125, -1.217765625)
    assert short.code == "9QCJ+2VX"
    assert short.format_version == FormatVersion.VNEXT
    assert short.is_short

    assert short.recover_nearest(51.3861125, -1.217765625) == olc

    with pytest.raises(ValueError, match="does not support shorten_by_4"):
        olc.shorten_by_4()


def test_code_shorten_recover_v1():
    olc = OpenLocationCode("+9C3W.9QCJ2V", "v1")

    assert olc.shorten_by_4().code == "+9QCJ2V"
    short = olc.shorten_by_6()
    assert short.code == "+CJ2V"

    assert short.recover_nearest(51.3700625, -1.2178125) == olc

    with pytest.raises(ValueError, match="does not support shorten"):
        olc.shorten()


def test_code_equality():
    olc = OpenLocationCode("9F2P2CQH+WW", "vnext")

    assert olc == OpenLocationCode("9F2P2CQH+WW", FormatVersion.VNEXT)
    assert olc != OpenLocationCode("9F2P2CQH+WX", "vnext")
    assert olc != "9F2P2CQH+WW"
    assert len({olc, OpenLocationCode("9F2P2CQH+WW", "vnext")}) == 1

    assert str(olc) == "9F2P2CQH+WW"
    assert repr(olc) == "OpenLocationCode('9F2P2CQH+WW', FormatVersion.VNEXT)"


def test_code_equality_ignores_case():
    olc = OpenLocationCode("9f2p2cqh+ww", "vnext")

    assert olc == OpenLocationCode("9F2P2CQH+WW", "vnext")
    assert hash(olc) == hash(OpenLocationCode("9F2P2CQH+WW", "vnext"))
    # the code is kept as given
    assert str(olc) == "9f2p2cqh+ww"


def test_code_convert_nine_digits():
    v1 = OpenLocationCode.from_coordinates(20.3700625, 2.7821875, 9, "v1")
    assert v1.code == "+7FG4.9QCJ2"

    # the revised format writes whole pairs, so the converted code gains a digit
    vnext = v1.convert_to_format_version("vnext")
    assert vnext.code == "7FG49QCJ+2G"
    assert vnext.area.code_length == 10
    assert vnext.area.contains(v1.area.latitude_center, v1.area.longitude_center)
