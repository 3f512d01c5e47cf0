from decimal import Decimal

from costseg.engine.irr import calculate_irr, calculate_npv


class TestNPV:
    def test_zero_rate(self):
        npv = calculate_npv([Decimal("1000"), Decimal("1000"), Decimal("1000")], Decimal("0"))
        assert npv == Decimal("3000.00")

    def test_first_flow_discounted(self):
        """Index 0 is one year out."""
        assert calculate_npv([Decimal("110")], Decimal("10")) == Decimal("100.00")

    def test_break_even_at_rate(self):
        assert calculate_npv([Decimal("-100"), Decimal("110")], Decimal("10")) == Decimal("0.00")

    def test_empty(self):
        assert calculate_npv([], Decimal("5")) == Decimal("0.00")


class TestIRR:
    def test_simple_irr(self):
        """Invest $100, get $110 a year later = 10% IRR."""
        irr = calculate_irr([Decimal("-100"), Decimal("110")])
        assert irr == Decimal("10.00")

    def test_tolerance_is_in_rate_points(self):
        """A 0.001-point tolerance still lands on 10.00% after rounding."""
        irr = calculate_irr([Decimal("-100"), Decimal("110")], tolerance=1e-3)
        assert irr == Decimal("10.00")

    def test_multi_year(self):
        """Known cash flows with ~15% IRR."""
        cfs = [Decimal("-100000"), Decimal("10000"), Decimal("10000"),
               Decimal("10000"), Decimal("10000"), Decimal("130000")]
        irr = calculate_irr(cfs)
        assert Decimal("10") < irr < Decimal("20")

    def test_npv_zero_at_irr(self):
        cfs = [Decimal("-50000"), Decimal("12000"), Decimal("15000"), Decimal("30000")]
        irr = calculate_irr(cfs)
        assert abs(calculate_npv(cfs, irr)) < Decimal("50")

    def test_all_negative(self):
        assert calculate_irr([Decimal("-100"), Decimal("-10"), Decimal("-10")]) is None

    def test_all_positive(self):
        assert calculate_irr([Decimal("100"), Decimal("100")]) is None

    def test_all_zero(self):
        assert calculate_irr([Decimal("0"), Decimal("0")]) is None

    def test_empty_cash_flows(self):
        assert calculate_irr([]) is None

    def test_root_outside_range(self):
        """Almost nothing comes back: IRR is below -50%."""
        assert calculate_irr([Decimal("-100"), Decimal("1")]) is None

    def test_deterministic(self):
        cfs = [Decimal("-75000"), Decimal("20000"), Decimal("30000"), Decimal("40000")]
        assert calculate_irr(cfs) == calculate_irr(cfs)
