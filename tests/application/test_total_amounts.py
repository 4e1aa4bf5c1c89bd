"""Tests for the TotalAmounts use case."""

import pytest

from scm.application.total_amounts import TotalAmountsHandler
from scm.domain.exceptions import ValidationError


class TestTotalAmounts:

    def test_sum(self):
        dto = TotalAmountsHandler().handle(["100", "50", "0.25"])
        assert dto.display == "USD 150.25"
        assert dto.amount == "150.25"
        assert dto.currency == "USD"

    def test_explicit_currency(self):
        assert TotalAmountsHandler().handle(["1"], currency="EUR").display == "EUR 1.00"

    def test_default_currency(self):
        assert TotalAmountsHandler("GBP").handle(["2"]).currency == "GBP"

    def test_with_multiplier(self):
        assert TotalAmountsHandler().handle(["100"], multiplier="2").display == "USD 200.00"

    def test_multiplier_zero(self):
        assert TotalAmountsHandler().handle(["100"], multiplier="0").amount == "0.00"

    def test_negative_multiplier_rejected(self):
        with pytest.raises(ValidationError, match="multiplier must be a positive number"):
            TotalAmountsHandler().handle(["100"], multiplier="-1")

    def test_large_total(self):
        dto = TotalAmountsHandler().handle(["1e30", "0.5"], multiplier="2")
        assert dto.amount == "2" + "0" * 29 + "1.00"

    def test_garbage_multiplier_rejected(self):
        with pytest.raises(ValidationError, match="Invalid multiplier"):
            TotalAmountsHandler().handle(["100"], multiplier="twice")

    def test_empty_rejected(self):
        with pytest.raises(ValidationError, match="At least one amount"):
            TotalAmountsHandler().handle([])

    def test_unknown_currency_rejected(self):
        with pytest.raises(ValidationError, match="Invalid currency code: XXX"):
            TotalAmountsHandler().handle(["1"], currency="XXX")
