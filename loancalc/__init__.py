"""Fixed-rate loan solver.

Solve for any one of principal, rate, term or payment from the other three,
and project balance and rate-sensitivity curves for plotting."""

from loancalc.annuity import pv_ordinary_annuity, round_up_to_cent
from loancalc.loan import Loan, LoanResult, SolveStatus, Unknown, compute_loan
from loancalc.rootfind import RootResult, RootStatus, find_root, sign

__all__ = [
    "__version__",
    "Loan",
    "LoanResult",
    "RootResult",
    "RootStatus",
    "SolveStatus",
    "Unknown",
    "compute_loan",
    "find_root",
    "pv_ordinary_annuity",
    "round_up_to_cent",
    "sign",
]

# Keep in sync with the version declared in ``pyproject.toml``
__version__ = "0.1.0"
