from decimal import Decimal

from costseg.engine.debt import (
    amortize_month,
    amortization_schedule,
    annual_rollup,
    annual_schedule,
    calculate_mortgage,
    monthly_payment,
    term_months,
)


class TestMonthlyPayment:
    def test_standard_mortgage(self):
        """$400K loan at 7% for 30 years."""
        pmt = monthly_payment(Decimal("400000"), Decimal("7"), 30)
        # Expected: ~$2,661.21
        assert pmt == Decimal("2661.21")

    def test_six_percent(self):
        assert monthly_payment(Decimal("300000"), Decimal("6"), 30) == Decimal("1798.65")

    def test_zero_rate(self):
        pmt = monthly_payment(Decimal("360000"), Decimal("0"), 30)
        assert pmt == Decimal("1000.00")

    def test_zero_principal(self):
        pmt = monthly_payment(Decimal("0"), Decimal("7"), 30)
        assert pmt == Decimal("0")

    def test_zero_term(self):
        assert monthly_payment(Decimal("100000"), Decimal("7"), 0) == Decimal("0")

    def test_fractional_term(self):
        assert term_months(Decimal("27.5")) == 330


class TestAmortizationSchedule:
    def test_payment_count(self):
        schedule = amortization_schedule(Decimal("400000"), Decimal("7"), 30)
        assert len(schedule) == 360

    def test_first_payment_mostly_interest(self):
        schedule = amortization_schedule(Decimal("400000"), Decimal("7"), 30)
        first = schedule[0]
        # At 7%, first month interest = 400000 * 0.07/12 = $2,333.33
        assert first.interest == Decimal("2333.33")
        assert first.principal == Decimal("327.88")
        assert first.balance == Decimal("399672.12")

    def test_balance_decreases(self):
        schedule = amortization_schedule(Decimal("400000"), Decimal("7"), 30)
        for i in range(1, len(schedule)):
            assert schedule[i].balance < schedule[i - 1].balance

    def test_final_payment_clears_rounding_residue(self):
        """Payment is rounded to the cent; the last month pays off what is left."""
        schedule = amortization_schedule(Decimal("400000"), Decimal("7"), 30)
        assert schedule[-1].balance == Decimal("0.00")
        assert schedule[-1].payment > Decimal("2661.21")
        assert schedule[-1].cumulative_principal == Decimal("400000.00")

    def test_zero_rate_pays_off_exactly(self):
        schedule = amortization_schedule(Decimal("360000"), Decimal("0"), 30)
        assert all(p.interest == 0 for p in schedule)
        assert schedule[-1].balance == Decimal("0.00")
        assert schedule[-1].cumulative_principal == Decimal("360000.00")

    def test_zero_rate_uneven_principal_pays_off(self):
        """$100,001 / 360 rounds to 277.78, so the last month picks up the difference."""
        schedule = amortization_schedule(Decimal("100001"), Decimal("0"), 30)
        assert schedule[0].payment == Decimal("277.78")
        assert schedule[-1].payment == Decimal("277.98")
        assert schedule[-1].balance == Decimal("0.00")
        assert schedule[-1].cumulative_principal == Decimal("100001.00")

    def test_zero_rate_short_term(self):
        schedule = amortization_schedule(Decimal("100"), Decimal("0"), Decimal("0.25"))
        assert [p.payment for p in schedule] == [
            Decimal("33.33"), Decimal("33.33"), Decimal("33.34"),
        ]
        assert schedule[-1].balance == Decimal("0.00")

    def test_running_totals(self):
        schedule = amortization_schedule(Decimal("400000"), Decimal("7"), 30)
        assert schedule[1].cumulative_interest == schedule[0].interest + schedule[1].interest

    def test_no_payment_no_schedule(self):
        assert amortization_schedule(Decimal("0"), Decimal("7"), 30) == []


class TestAnnualRollup:
    def test_thirty_years(self):
        yearly = annual_schedule(Decimal("400000"), Decimal("7"), 30)
        assert len(yearly) == 30
        assert yearly[0].year == 1

    def test_yearly_totals_match(self):
        monthly = amortization_schedule(Decimal("400000"), Decimal("7"), 30)
        yearly = annual_rollup(monthly)
        assert yearly[0].total_interest == sum(m.interest for m in monthly[:12])
        assert yearly[0].ending_balance == monthly[11].balance
        assert yearly[-1].cumulative_interest == monthly[-1].cumulative_interest

    def test_partial_year_dropped(self):
        """30 months: two full years, the last 6 months are not rolled up."""
        yearly = annual_schedule(Decimal("100000"), Decimal("5"), Decimal("2.5"))
        assert len(yearly) == 2


class TestMortgage:
    def test_totals_with_escrow(self):
        result = calculate_mortgage(
            Decimal("400000"), Decimal("7"), 30, Decimal("6000"), Decimal("1200")
        )
        assert result.monthly_pi == Decimal("2661.21")
        assert result.monthly_total == Decimal("3261.21")
        assert result.total_interest == Decimal("558035.60")
        assert result.total_cost == Decimal("1174035.60")
        assert len(result.monthly_schedule) == 360
        assert len(result.schedule) == 30

    def test_without_escrow(self):
        result = calculate_mortgage(Decimal("400000"), Decimal("7"), 30)
        assert result.monthly_total == result.monthly_pi


class TestAmortizeMonth:
    def test_regular_month(self):
        interest, principal, balance = amortize_month(Decimal("1000"), Decimal("0.01"), Decimal("110"))
        assert interest == Decimal("10.00")
        assert principal == Decimal("100")
        assert balance == Decimal("900")

    def test_final_month_takes_remaining_balance(self):
        interest, principal, balance = amortize_month(
            Decimal("278.00"), Decimal("0"), Decimal("277.78"), final=True
        )
        assert interest == Decimal("0.00")
        assert principal == Decimal("278.00")
        assert balance == Decimal("0")
