"""
Unit tests for parsing, formatting and configuration helpers.
"""

import pytest

from quantity_measurement.config import AppConfig
from quantity_measurement.core.quantity import Quantity
from quantity_measurement.core.units import (
    LengthUnit,
    TemperatureUnit,
    VolumeUnit,
    WeightUnit,
)
from quantity_measurement.utils.formatting import (
    format_in_base,
    format_number,
    format_quantity,
    format_quantity_long,
    format_unit,
)
from quantity_measurement.utils.parsing import try_parse_choice, try_parse_float


class TestParseFloat:

    @pytest.mark.parametrize("text, expected", [
        ("12", 12.0),
        ("12.5", 12.5),
        (" -3.25 ", -3.25),
        ("1e3", 1000.0),
        ("1,250.5", 1250.5),
        ("0", 0.0),
    ])
    def test_valid(self, text, expected):
        assert try_parse_float(text) == expected

    @pytest.mark.parametrize("text", [None, "", "   ", "twelve", "12 ft", "nan", "inf", "-Infinity"])
    def test_invalid_gives_none(self, text):
        assert try_parse_float(text) is None


class TestParseChoice:

    def test_first_and_last(self):
        assert try_parse_choice("1", 4) == 0
        assert try_parse_choice(" 4 ", 4) == 3

    @pytest.mark.parametrize("text", [None, "", "0", "5", "-1", "1.0", "a"])
    def test_out_of_range_or_invalid(self, text):
        assert try_parse_choice(text, 4) is None


class TestFormatNumber:

    def test_rounds_to_precision(self):
        assert format_number(2.0 / 3.0) == "0.6667"

    def test_custom_precision(self):
        assert format_number(2.0 / 3.0, 2) == "0.67"
        assert format_number(3.78541, 0) == "4"

    def test_drops_trailing_zeros(self):
        assert format_number(12.0) == "12"
        assert format_number(1.5) == "1.5"

    def test_negative_zero(self):
        assert format_number(-0.0) == "0"
        assert format_number(-0.00001) == "0"

    def test_negative(self):
        assert format_number(-40.0) == "-40"

    def test_float_noise_hidden(self):
        assert format_number(0.1 + 0.2) == "0.3"


class TestFormatQuantity:

    def test_symbol_form(self):
        assert format_quantity(Quantity(12.0, LengthUnit.INCH)) == "12 in"
        assert format_quantity(Quantity(212.0, TemperatureUnit.FAHRENHEIT)) == "212 °F"

    def test_precision(self):
        assert format_quantity(Quantity(2.0 / 3.0, LengthUnit.YARD), 3) == "0.667 yd"

    def test_long_form(self):
        assert format_quantity_long(Quantity(500.0, WeightUnit.GRAM)) == "500 grams"

    def test_in_base(self):
        assert format_in_base(Quantity(500.0, VolumeUnit.MILLILITRE)) == "0.5 L"
        assert format_in_base(Quantity(36.0, LengthUnit.INCH)) == "3 ft"

    def test_unit(self):
        assert format_unit(LengthUnit.CENTIMETER) == "centimeters (cm)"


class TestAppConfig:

    def test_defaults(self):
        config = AppConfig()
        assert config.precision == 4
        assert config.log_level == "WARNING"
        assert config.log_file is None
        assert config.demo is False

    def test_level_normalised(self):
        assert AppConfig(log_level="debug").log_level == "DEBUG"

    def test_negative_precision_rejected(self):
        with pytest.raises(ValueError, match="precision"):
            AppConfig(precision=-1)

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError, match="log level"):
            AppConfig(log_level="VERBOSE")

    def test_frozen(self):
        with pytest.raises(AttributeError):
            AppConfig().precision = 2
