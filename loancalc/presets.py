# Annual-percentage bracket searched when solving for the rate.
RATE_BRACKET = (0.0, 100.0)
RATE_TOL = 1e-6
RATE_MAX_ITERATIONS = 100

# Rate-sensitivity sweep, annual percent.
SWEEP_MAX_RATE_PCT = 24.0
SWEEP_STEP_PCT = 0.125

MSG_PAYMENT_TOO_LOW = "Monthly pmts too low"
MSG_PAYMENT_TOO_HIGH = "Monthly pmts too high"
MSG_NO_ROOT = "No rate in range produces this payment"

# Longest term accepted as input or produced by the term solve: 100 years.
MAX_TERM_PERIODS = 1200
