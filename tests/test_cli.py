"""Tests for the rjcolor command line front end."""

import fire
import pytest

from rjextensions.cli import ColorCLI
from rjextensions.colors import from_hex, to_delimited_string


@pytest.fixture
def cli():
    return ColorCLI()


class TestParse:
    def test_named(self, cli):
        assert cli.parse("red") == {"string": "1.0||0.0||0.0||1.0", "hex": "FF0000"}

    def test_delimited(self, cli):
        assert cli.parse("1||0.5||0||1") == {
            "string": "1.0||0.5||0.0||1.0",
            "hex": "FF8000",
        }

    def test_clamp(self, cli):
        assert cli.parse("2||0||0||1", clamp=True)["string"] == "1.0||0.0||0.0||1.0"

    def test_reject_exits(self, cli):
        with pytest.raises(SystemExit) as excinfo:
            cli.parse("2||0||0||1", reject=True)
        assert excinfo.value.code == 1

    def test_conflicting_flags(self, cli):
        with pytest.raises(SystemExit) as excinfo:
            cli.parse("red", clamp=True, reject=True)
        assert excinfo.value.code == 2

    def test_invalid_exits(self, cli, log_records):
        with pytest.raises(SystemExit) as excinfo:
            cli.parse("1||2")
        assert excinfo.value.code == 1
        assert any(level == "ERROR" for level, _ in log_records)


class TestHex:
    def test_lenient(self, cli):
        assert cli.hex("#FF0000") == "1.0||0.0||0.0||1.0"

    def test_integer_argument(self, cli):
        assert cli.hex(112233) == to_delimited_string(from_hex("112233"))

    def test_strict_exits(self, cli):
        with pytest.raises(SystemExit):
            cli.hex("FFF", strict=True)


def test_rgba(cli):
    assert cli.rgba(255, 0, 0, 255) == "1.0||0.0||0.0||1.0"
    assert cli.rgba(128, 255, 255, 255, reciprocal=True) == "1.0||1.0||1.0||1.0"


def test_random_seeded(cli):
    assert cli.random(seed=3) == cli.random(seed=3)


def test_channels(cli):
    values = cli.channels("black")
    assert len(values) == 8
    assert values["standard_alpha"] == 255.0
    assert values["normalized_red"] == 0.0


def test_names(cli):
    names = cli.names()
    assert names["orange"] == "FFA500"
    assert list(names) == sorted(names)


def test_fire_dispatch():
    result = fire.Fire(ColorCLI, command=["rgba", "255", "0", "0", "255"])
    assert result == "1.0||0.0||0.0||1.0"


class TestFireArguments:
    """Text arguments reach the codec exactly as typed."""

    @pytest.mark.parametrize(
        "code,expected",
        [
            ("1E0000", "0.11764705882352941||0.0||0.0||1.0"),
            ("000E00", to_delimited_string(from_hex("000E00"))),
            ("0x77AADD", to_delimited_string(from_hex("77AADD"))),
            ("112233", to_delimited_string(from_hex("112233"))),
        ],
    )
    def test_hex_codes_not_coerced(self, code, expected):
        assert fire.Fire(ColorCLI, command=["hex", code]) == expected

    def test_hex_zero_x_strict(self):
        result = fire.Fire(ColorCLI, command=["hex", "0x77AADD", "--strict"])
        assert result == to_delimited_string(from_hex("77AADD"))

    def test_parse_delimited(self):
        result = fire.Fire(ColorCLI, command=["parse", "1||0.5||0||1", "--clamp"])
        assert result == {"string": "1.0||0.5||0.0||1.0", "hex": "FF8000"}

    def test_channels_named(self):
        result = fire.Fire(ColorCLI, command=["channels", "Red"])
        assert result["standard_red"] == 255.0
