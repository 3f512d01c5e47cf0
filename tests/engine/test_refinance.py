import math
from decimal import Decimal

from costseg.engine.debt import monthly_payment
from costseg.engine.refinance import break_even_months, refinance_analysis


def _refi(**overrides):
    params = dict(
        current_balance=Decimal("300000"),
        current_rate=Decimal("7"),
        remaining_years=Decimal("25"),
        new_rate=Decimal("5.5"),
        new_term_years=Decimal("25"),
        closing_costs=Decimal("6000"),
    )
    params.update(overrides)
    return refinance_analysis(**params)


class TestRefinance:
    def test_payments(self):
        result = _refi()
        assert result.current_monthly_payment == monthly_payment(Decimal("300000"), Decimal("7"), 25)
        assert result.new_monthly_payment == monthly_payment(Decimal("300000"), Decimal("5.5"), 25)
        assert result.monthly_savings == result.current_monthly_payment - result.new_monthly_payment
        assert result.monthly_savings > 0

    def test_break_even(self):
        result = _refi()
        assert result.break_even_months == math.ceil(Decimal("6000") / result.monthly_savings)

    def test_total_savings_net_of_closing(self):
        result = _refi()
        assert result.total_savings_over_term == result.monthly_savings * 300 - Decimal("6000")

    def test_interest_saved(self):
        result = _refi()
        assert result.interest_saved == result.lifetime_interest_current - result.lifetime_interest_new
        assert result.interest_saved > 0

    def test_npv_below_undiscounted(self):
        result = _refi()
        assert 0 < result.npv_savings < result.total_savings_over_term

    def test_points_added_to_closing(self):
        result = _refi(points=Decimal("1"))
        assert result.closing_costs == Decimal("9000.00")
        assert result.break_even_months == math.ceil(Decimal("9000") / result.monthly_savings)

    def test_schedule(self):
        result = _refi()
        schedule = result.savings_schedule
        assert len(schedule) == 25
        assert schedule[0].annual_savings == (
            result.current_monthly_payment * 12 - result.new_monthly_payment * 12
        )
        assert schedule[0].cumulative_savings == schedule[0].annual_savings - Decimal("6000")
        assert schedule[-1].cumulative_savings > schedule[0].cumulative_savings

    def test_horizon_is_shorter_term_rounded_up(self):
        result = _refi(remaining_years=Decimal("22.5"), new_term_years=Decimal("30"))
        assert len(result.savings_schedule) == 23

    def test_higher_rate_never_breaks_even(self):
        result = _refi(new_rate=Decimal("8"))
        assert result.monthly_savings < 0
        assert result.break_even_months is None
        assert result.total_savings_over_term < 0


class TestBreakEvenMonths:
    def test_rounds_up(self):
        assert break_even_months(Decimal("1000"), Decimal("300")) == 4

    def test_exact(self):
        assert break_even_months(Decimal("900"), Decimal("300")) == 3

    def test_no_closing_costs(self):
        assert break_even_months(Decimal("0"), Decimal("300")) == 0

    def test_no_savings(self):
        assert break_even_months(Decimal("1000"), Decimal("0")) is None
