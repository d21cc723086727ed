import math

import pytest
from pydantic import ValidationError

from loancalc.loan import (
    Loan,
    SolveStatus,
    Unknown,
    amortization_periods,
    can_amortize,
    compute_loan,
    monthly_payment,
    periodic_rate,
    principal_from_payment,
    rate_feasibility,
    solve_annual_rate,
)
from loancalc.presets import MAX_TERM_PERIODS
from loancalc.rootfind import RootStatus

EXACT_PAYMENT = 898.0893756176412


def test_payment_for_reference_loan():
    assert monthly_payment(200000, 3.5, 360) == pytest.approx(EXACT_PAYMENT, rel=1e-12)


def test_payment_principal_roundtrip():
    pmt = monthly_payment(200000, 3.5, 360)
    back = principal_from_payment(pmt, 3.5, 360)
    assert abs(back - 200000) / 200000 < 1e-6


def test_zero_rate_payment_is_straight_line():
    assert monthly_payment(120000, 0, 120) == 1000.0


def test_zero_term_gives_zero():
    assert monthly_payment(1000, 5, 0) == 0.0
    assert principal_from_payment(100, 5, 0) == 0.0


def test_amortization_periods_reference_loan():
    assert abs(amortization_periods(200000, 3.5, 898.09) - 360) <= 1


def test_amortization_periods_zero_principal():
    assert amortization_periods(0, 5, 100) == 0


def test_can_amortize():
    assert can_amortize(200000, 6.0, 1000.01)
    assert not can_amortize(200000, 6.0, 1000.0)
    assert can_amortize(0, 6.0, 0)


def test_rate_feasibility():
    assert rate_feasibility(200000, 500, 360) is SolveStatus.PAYMENT_TOO_LOW
    assert rate_feasibility(200000, 20000, 360) is SolveStatus.PAYMENT_TOO_HIGH
    assert rate_feasibility(200000, 900, 360) is SolveStatus.OK


def test_solve_annual_rate_recovers_rate():
    res = solve_annual_rate(200000, EXACT_PAYMENT, 360)
    assert res.status is RootStatus.CONVERGED
    assert res.root == pytest.approx(3.5, abs=1e-5)


def test_compute_payment():
    res = compute_loan(Unknown.PAYMENT, principal=200000, annual_rate_pct=3.5, term_years=30)
    assert res.ok
    assert res.value == pytest.approx(EXACT_PAYMENT)
    assert res.display == "898.09"
    assert res.loan.term_periods == 360


def test_compute_principal():
    res = compute_loan(Unknown.PRINCIPAL, annual_rate_pct=3.5, term_years=30, payment=EXACT_PAYMENT)
    assert res.value == pytest.approx(200000, rel=1e-6)
    assert res.display == "200,000.00"


def test_compute_term():
    res = compute_loan(Unknown.TERM, principal=200000, annual_rate_pct=3.5, payment=898.09)
    assert res.ok
    assert abs(res.loan.term_periods - 360) <= 1
    assert res.value == res.loan.term_periods / 12


def test_compute_term_never_amortizes():
    res = compute_loan(Unknown.TERM, principal=200000, annual_rate_pct=6.0, payment=1000)
    assert res.status is SolveStatus.PAYMENT_TOO_LOW
    assert res.loan is None
    assert res.display == "Monthly pmts too low"


def test_compute_rate():
    res = compute_loan(Unknown.RATE, principal=200000, term_years=30, payment=EXACT_PAYMENT)
    assert res.ok
    assert res.value == pytest.approx(3.5, abs=1e-5)
    assert res.display == "3.500"
    assert res.root.ok


def test_compute_rate_zero_interest_boundary():
    res = compute_loan(Unknown.RATE, principal=36000, term_years=30, payment=100)
    assert res.ok
    assert res.value == pytest.approx(0.0, abs=1e-5)


@pytest.mark.parametrize(
    "payment, status, message",
    [
        (500, SolveStatus.PAYMENT_TOO_LOW, "Monthly pmts too low"),
        (20000, SolveStatus.PAYMENT_TOO_HIGH, "Monthly pmts too high"),
    ],
)
def test_compute_rate_out_of_range(payment, status, message):
    res = compute_loan("Interest", principal=200000, term_years=30, payment=payment)
    assert res.status is status
    assert res.message == message
    assert res.value is None
    assert res.root is None


def test_solved_loan_is_consistent():
    pmt = monthly_payment(150000, 5.25, 180)
    for unknown in (Unknown.PAYMENT, Unknown.PRINCIPAL, Unknown.RATE):
        res = compute_loan(
            unknown, principal=150000, annual_rate_pct=5.25, term_years=15, payment=pmt
        )
        loan = res.loan
        assert loan.principal == pytest.approx(loan.payment * loan.annuity_factor, rel=1e-6)


def test_solved_term_is_first_month_covering_principal():
    res = compute_loan(Unknown.TERM, principal=150000, annual_rate_pct=5.25, payment=1300)
    n = res.loan.term_periods
    assert principal_from_payment(1300, 5.25, n - 1) < 150000 <= principal_from_payment(1300, 5.25, n)


def test_loan_is_frozen_and_validated():
    loan = Loan(principal=1000, annual_rate_pct=6, term_periods=12, payment=86.07)
    assert loan.periodic_rate == 0.005
    assert loan.term_years == 1
    with pytest.raises(ValidationError):
        loan.principal = 5
    with pytest.raises(ValidationError):
        Loan(principal=-1, annual_rate_pct=6, term_periods=12, payment=1)


def test_payment_one_ulp_above_interest_does_not_amortize():
    interest = 200000 * periodic_rate(3.5)
    payment = math.nextafter(interest, math.inf)
    assert not can_amortize(200000, 3.5, payment)
    res = compute_loan(Unknown.TERM, principal=200000, annual_rate_pct=3.5, payment=payment)
    assert res.status is SolveStatus.PAYMENT_TOO_LOW
    assert res.loan is None


def test_stalled_balance_raises_instead_of_looping():
    payment = math.nextafter(200000 * periodic_rate(3.5), math.inf)
    with pytest.raises(ValueError):
        amortization_periods(200000, 3.5, payment)


def test_term_solve_stops_at_maximum_term():
    assert amortization_periods(200000, 0, 1, max_periods=MAX_TERM_PERIODS) == MAX_TERM_PERIODS + 1
    res = compute_loan(Unknown.TERM, principal=200000, annual_rate_pct=0, payment=1)
    assert res.status is SolveStatus.PAYMENT_TOO_LOW
    assert res.display == "Monthly pmts too low"
