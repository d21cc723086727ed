from __future__ import annotations

from decimal import Decimal, ROUND_CEILING

CENT = Decimal("0.01")


def pv_ordinary_annuity(rate: float, periods: float) -> float:
    """Present value of ``periods`` unit payments made at the end of each period.

    ``rate`` is the periodic rate as a fraction (``0.01`` for 1% per month).
    This is the annuity-immediate factor ``(1 - v**n) / i`` with ``v = 1/(1+i)``.

    A negative rate is outside the domain and yields ``0.0`` rather than an
    error; a zero rate means no discounting, so the value is simply
    ``periods``.
    """

    if rate < 0.0:
        return 0.0
    if rate == 0.0:
        return float(periods)
    v = 1.0 / (1.0 + rate)
    return (1.0 - v ** periods) / rate


def round_up_to_cent(x: float) -> float:
    """Round ``x`` up to the next multiple of ``0.01``.

    ``math.ceil(100 * x)`` is off by a cent for values like ``1.1`` whose
    scaled product lands just above an integer, so the ceiling is taken on the
    decimal form of ``x`` instead.
    """

    return float(Decimal(repr(float(x))).quantize(CENT, rounding=ROUND_CEILING))
