"""Tests for currency and unit conversion."""

from __future__ import annotations

import pytest

from fincalc.services.conversions import (
    CATEGORIES,
    UNITS,
    convert_currency,
    convert_unit,
    exchange_rate,
    find_unit,
)


class TestCurrency:
    """Fixed-rate currency conversion through USD."""

    def test_to_and_from_usd(self):
        """Rates apply in both directions against USD."""
        assert convert_currency(100, "EUR", "USD") == pytest.approx(108)
        assert convert_currency(100, "USD", "EUR") == pytest.approx(92.59, abs=0.01)

    def test_cross_rate_goes_through_usd(self):
        """Non-USD pairs convert via their USD rates."""
        assert convert_currency(100, "GBP", "EUR") == pytest.approx(100 * 1.27 / 1.08)

    def test_codes_are_case_insensitive(self):
        """Lowercase codes resolve like uppercase ones."""
        assert exchange_rate("usd", "jpy") == pytest.approx(1 / 0.0067)

    def test_same_currency(self):
        """Converting to the same currency is a no-op."""
        assert convert_currency(42, "CAD", "CAD") == pytest.approx(42)

    def test_non_positive_amount(self):
        """Zero and negative amounts convert to zero."""
        assert convert_currency(0, "USD", "EUR") == 0.0
        assert convert_currency(-10, "USD", "EUR") == 0.0

    def test_unknown_currency(self):
        """An unsupported code is a caller error."""
        with pytest.raises(ValueError, match="Unsupported currency"):
            convert_currency(10, "USD", "XYZ")


class TestUnits:
    """Unit conversion through each category's base unit."""

    def test_length(self):
        """Length units accept symbols and names."""
        assert convert_unit(1, "length", "mi", "km") == pytest.approx(1.609344)
        assert convert_unit(12, "length", "Inch", "Foot") == pytest.approx(1.0)

    def test_weight(self):
        """A pound is sixteen ounces."""
        assert convert_unit(1, "weight", "lb", "oz") == pytest.approx(16.0, rel=1e-5)

    def test_volume_and_area(self):
        """Volume and area use their own base units."""
        assert convert_unit(1, "volume", "gal", "L") == pytest.approx(3.78541)
        assert convert_unit(1, "area", "ha", "m²") == pytest.approx(10000)

    def test_speed(self):
        """36 km/h is 10 m/s."""
        assert convert_unit(36, "speed", "km/h", "m/s") == pytest.approx(10)

    @pytest.mark.parametrize(
        "value, source, target, expected",
        [
            (100, "C", "F", 212),
            (32, "F", "C", 0),
            (0, "K", "C", -273.15),
            (25, "Celsius", "kelvin", 298.15),
            (-40, "°F", "°C", -40),
            (212, "FAHRENHEIT", "c", 100),
        ],
    )
    def test_temperature(self, value, source, target, expected):
        """Temperatures convert through kelvin by name or symbol."""
        assert convert_unit(value, "temperature", source, target) == pytest.approx(expected)

    @pytest.mark.parametrize("unit", ["cups", "foo", "kilo", "X", ""])
    def test_temperature_rejects_partial_matches(self, unit):
        """Only full temperature names and symbols are accepted."""
        with pytest.raises(ValueError, match="Unknown temperature unit"):
            convert_unit(1, "temperature", unit, "C")

    def test_find_unit_by_name_or_symbol(self):
        """Unit lookup is case-insensitive on name and symbol."""
        assert find_unit("length", "FT").name == "Foot"
        assert find_unit("length", "foot").symbol == "ft"

    def test_unknown_unit_and_category(self):
        """Unknown units and categories are caller errors."""
        with pytest.raises(ValueError):
            convert_unit(1, "length", "m", "furlong")
        with pytest.raises(ValueError):
            convert_unit(1, "energy", "J", "kJ")
        with pytest.raises(ValueError):
            convert_unit(1, "temperature", "X", "C")

    def test_categories(self):
        """Temperature sits alongside the factor-based categories."""
        assert set(CATEGORIES) == set(UNITS) | {"temperature"}
