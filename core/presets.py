from loancalc.presets import MAX_TERM_PERIODS

DISCLAIMER = (
    "Figures assume a fixed rate, level monthly payments made at the end of each month, "
    "and no fees, taxes or insurance. Results are estimates only."
)

# Field order matches the selector; values are the starting text of each input.
FIELD_DEFAULTS = {"Loan": "200000", "Interest": "3.5", "Years": "30", "Payment": "898.09"}

FIELD_LABELS = {
    "Loan": "Loan Amount",
    "Interest": "Interest Rate %",
    "Years": "Term (years)",
    "Payment": "Monthly Payment",
}

# Fields that must be strictly positive; the rest only non-negative.
POSITIVE_FIELDS = {"Years", "Payment"}

CURVES = {
    "balance": "Remaining balance by month",
    "sensitivity": "Monthly payment by interest rate",
}

# Longest term the Years field accepts.
MAX_TERM_YEARS = MAX_TERM_PERIODS // 12
