from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from loancalc.annuity import pv_ordinary_annuity
from loancalc.presets import (
    MAX_TERM_PERIODS,
    MSG_NO_ROOT,
    MSG_PAYMENT_TOO_HIGH,
    MSG_PAYMENT_TOO_LOW,
    RATE_BRACKET,
    RATE_MAX_ITERATIONS,
    RATE_TOL,
)
from loancalc.rootfind import RootResult, find_root

logger = logging.getLogger(__name__)


class Unknown(str, Enum):
    """The quantity being solved for; values match the selector labels."""

    PRINCIPAL = "Loan"
    RATE = "Interest"
    TERM = "Years"
    PAYMENT = "Payment"


class SolveStatus(str, Enum):
    OK = "ok"
    PAYMENT_TOO_LOW = "payment_too_low"
    PAYMENT_TOO_HIGH = "payment_too_high"
    NO_ROOT = "no_root"


MESSAGES = {
    SolveStatus.PAYMENT_TOO_LOW: MSG_PAYMENT_TOO_LOW,
    SolveStatus.PAYMENT_TOO_HIGH: MSG_PAYMENT_TOO_HIGH,
    SolveStatus.NO_ROOT: MSG_NO_ROOT,
}


class Loan(BaseModel):
    model_config = ConfigDict(frozen=True)

    principal: float = Field(ge=0)
    annual_rate_pct: float = Field(ge=0)
    term_periods: int = Field(ge=0)
    payment: float = Field(ge=0)

    @property
    def periodic_rate(self) -> float:
        return periodic_rate(self.annual_rate_pct)

    @property
    def term_years(self) -> float:
        return self.term_periods / 12

    @property
    def annuity_factor(self) -> float:
        return pv_ordinary_annuity(self.periodic_rate, self.term_periods)


def periodic_rate(annual_rate_pct: float) -> float:
    """Monthly rate as a fraction from a nominal annual percentage."""
    return annual_rate_pct / 1200


def years_to_periods(term_years: float) -> int:
    return int(round(term_years * 12))


def monthly_payment(principal, annual_rate_pct, term_periods):
    """Level payment that retires ``principal`` over ``term_periods`` months."""

    if term_periods <= 0:
        return 0.0
    return principal / pv_ordinary_annuity(periodic_rate(annual_rate_pct), term_periods)


def principal_from_payment(payment, annual_rate_pct, term_periods):
    """Loan amount that ``payment`` per month retires over ``term_periods``."""

    if term_periods <= 0:
        return 0.0
    return payment * pv_ordinary_annuity(periodic_rate(annual_rate_pct), term_periods)


def can_amortize(principal, annual_rate_pct, payment) -> bool:
    """Whether ``payment`` more than covers the first month's interest."""

    if principal <= 0:
        return True
    balance = float(principal)
    # same float steps as amortization_periods; a payment one ulp above the
    # interest can leave the balance unchanged
    return balance + balance * periodic_rate(annual_rate_pct) - payment < balance


def amortization_periods(principal, annual_rate_pct, payment, max_periods: Optional[int] = None) -> int:
    """Count the months until the balance is paid off.

    Each month interest accrues on the balance and then the payment is
    subtracted. Callers must check ``can_amortize`` first. With
    ``max_periods`` the count stops at ``max_periods + 1`` so a payment that
    barely beats the interest cannot run for millions of months.
    """

    rate = periodic_rate(annual_rate_pct)
    balance = float(principal)
    periods = 0
    while balance > 0:
        previous = balance
        balance += balance * rate
        balance -= payment
        periods += 1
        if balance >= previous:
            raise ValueError("payment does not reduce the balance")
        if max_periods is not None and periods > max_periods:
            break
    return periods


def rate_feasibility(
    principal, payment, term_periods, bracket: Tuple[float, float] = RATE_BRACKET
) -> SolveStatus:
    """Screen a payment before searching ``bracket`` for its rate.

    Too low: even at 0% the payments never add up to the principal.
    Too high: the payment exceeds what the loan costs at the top of the
    bracket.
    """

    if term_periods * payment < principal:
        return SolveStatus.PAYMENT_TOO_LOW
    max_payment = monthly_payment(principal, bracket[1], term_periods)
    if payment > max_payment:
        return SolveStatus.PAYMENT_TOO_HIGH
    return SolveStatus.OK


def solve_annual_rate(
    principal,
    payment,
    term_periods,
    bracket: Tuple[float, float] = RATE_BRACKET,
    tol: float = RATE_TOL,
    max_iterations: int = RATE_MAX_ITERATIONS,
) -> RootResult:
    """Bisect for the annual percentage rate that makes ``payment`` retire ``principal``."""

    def shortfall(candidate_pct: float) -> float:
        return principal - principal_from_payment(payment, candidate_pct, term_periods)

    return find_root(shortfall, bracket[0], bracket[1], tol=tol, max_iterations=max_iterations)


@dataclass(frozen=True)
class LoanResult:
    unknown: Unknown
    status: SolveStatus
    loan: Optional[Loan] = None
    root: Optional[RootResult] = None

    @property
    def ok(self) -> bool:
        return self.status is SolveStatus.OK

    @property
    def message(self) -> str:
        return MESSAGES.get(self.status, "")

    @property
    def value(self) -> Optional[float]:
        """The solved quantity in the units its field is entered in."""
        if self.loan is None:
            return None
        if self.unknown is Unknown.PRINCIPAL:
            return self.loan.principal
        if self.unknown is Unknown.RATE:
            return self.loan.annual_rate_pct
        if self.unknown is Unknown.TERM:
            return self.loan.term_years
        return self.loan.payment

    @property
    def display(self) -> str:
        """Formatted value, or the message when the solve failed."""
        if self.value is None:
            return self.message
        return format_value(self.unknown, self.value)


def format_value(unknown: Unknown, value: float) -> str:
    if unknown is Unknown.RATE:
        return f"{value:.3f}"
    if unknown is Unknown.TERM:
        return f"{value:.2f}"
    return f"{value:,.2f}"


def compute_loan(
    unknown: Unknown,
    principal: Optional[float] = None,
    annual_rate_pct: Optional[float] = None,
    term_years: Optional[float] = None,
    payment: Optional[float] = None,
) -> LoanResult:
    """Solve for ``unknown`` from the other three quantities.

    Inputs are expected to be screened already (non-negative numbers, a
    positive term and payment). Infeasible combinations come back as a
    ``LoanResult`` with a non-OK status instead of raising.
    """

    unknown = Unknown(unknown)
    term_periods = years_to_periods(term_years) if term_years is not None else 0
    root = None
    status = SolveStatus.OK

    if unknown is Unknown.PAYMENT:
        payment = monthly_payment(principal, annual_rate_pct, term_periods)
    elif unknown is Unknown.PRINCIPAL:
        principal = principal_from_payment(payment, annual_rate_pct, term_periods)
    elif unknown is Unknown.TERM:
        if can_amortize(principal, annual_rate_pct, payment):
            term_periods = amortization_periods(
                principal, annual_rate_pct, payment, max_periods=MAX_TERM_PERIODS
            )
            if term_periods > MAX_TERM_PERIODS:
                status = SolveStatus.PAYMENT_TOO_LOW
        else:
            status = SolveStatus.PAYMENT_TOO_LOW
    else:
        status = rate_feasibility(principal, payment, term_periods)
        if status is SolveStatus.OK:
            root = solve_annual_rate(principal, payment, term_periods)
            if root.ok:
                annual_rate_pct = root.root
            else:
                status = SolveStatus.NO_ROOT

    loan = None
    if status is SolveStatus.OK:
        loan = Loan(
            principal=principal,
            annual_rate_pct=annual_rate_pct,
            term_periods=term_periods,
            payment=payment,
        )
    logger.info("Solved for %s: %s", unknown.name.lower(), status.value)
    return LoanResult(unknown=unknown, status=status, loan=loan, root=root)
