from __future__ import annotations

import pandas as pd

from loancalc.annuity import round_up_to_cent
from loancalc.geometry import Point, PolyLine
from loancalc.loan import Loan, monthly_payment, periodic_rate
from loancalc.presets import SWEEP_MAX_RATE_PCT, SWEEP_STEP_PCT

SCHEDULE_COLUMNS = ["Period", "Payment", "Interest", "Principal", "Balance"]


def balance_curve(principal, annual_rate_pct, payment, term_periods) -> PolyLine:
    """Remaining balance after each month, starting from ``(0, principal)``.

    Stops after ``term_periods`` months or at the first negative balance,
    whichever comes first, so an overpaying loan does not trail off below the
    axis. That first negative point is kept.
    """

    rate = periodic_rate(annual_rate_pct)
    balance = float(principal)
    points = [Point(0.0, balance)]
    for period in range(1, int(term_periods) + 1):
        balance += balance * rate
        balance -= payment
        points.append(Point(float(period), balance))
        if balance < 0:
            break
    return PolyLine(tuple(points))


def rate_sensitivity_curve(
    principal,
    term_periods,
    max_rate_pct: float = SWEEP_MAX_RATE_PCT,
    step_pct: float = SWEEP_STEP_PCT,
) -> PolyLine:
    """Monthly payment at each rate on the grid ``0, step, 2*step, ... max``."""

    if step_pct <= 0:
        raise ValueError("step_pct must be positive")
    steps = int(round(max_rate_pct / step_pct))
    points = []
    for k in range(steps + 1):
        rate = k * step_pct
        points.append(Point(rate, monthly_payment(principal, rate, term_periods)))
    return PolyLine(tuple(points))


def amortization_schedule(loan: Loan) -> pd.DataFrame:
    """Month-by-month schedule paying ``loan.payment`` rounded up to the cent.

    The last row pays only what is left, so ``Balance`` ends at zero and the
    ``Principal`` column sums to the loan amount.
    """

    rate = loan.periodic_rate
    payment = round_up_to_cent(loan.payment)
    balance = float(loan.principal)
    rows = []
    period = 0
    while balance > 0 and period < loan.term_periods:
        period += 1
        interest = balance * rate
        pay = min(payment, balance + interest)
        principal_paid = pay - interest
        balance -= principal_paid
        if period == loan.term_periods or abs(balance) < 0.005:
            # absorb cent rounding in the last row
            pay += balance
            principal_paid += balance
            balance = 0.0
        rows.append([period, pay, interest, principal_paid, balance])
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)
