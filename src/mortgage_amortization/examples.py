"""
Mortgage Amortization - Reference Loan Scenarios

Worked loans with known results, used to verify the payment calculator and
the amortization engine end to end.

Structure:
  (1) LoanParameters - engine inputs for the loan
  (2) ExpectedResults - known outputs (None where the scenario does not pin a value)
  (3) ReferenceScenario - combines both with an id and description

Currency values in ExpectedResults are to the cent; compare with a tolerance
of ~$0.01 for payments and ~$1 for terminal balances (floating-point
accumulation over 360 periods).
"""

from dataclasses import dataclass
from typing import Optional

from .schedule import LoanParameters


# =============================================================================
# EXPECTED RESULTS
# =============================================================================

@dataclass(frozen=True)
class ExpectedResults:
    """Known outputs for a reference scenario."""
    monthly_payment: Optional[float] = None        # Level P&I payment ($)
    schedule_length: Optional[int] = None          # Exact number of periods
    max_schedule_length: Optional[int] = None      # Upper bound on periods (early payoff)
    first_interest_due: Optional[float] = None     # Interest in period 1 ($)
    final_balance: Optional[float] = None          # remaining_balance of the last period ($)
    tax_returned: Optional[float] = None           # Per-period tax return ($)
    january_additional_payment: Optional[float] = None  # additional_payment in January periods ($)


# =============================================================================
# REFERENCE SCENARIO
# =============================================================================

@dataclass(frozen=True)
class ReferenceScenario:
    """Loan inputs with expected outputs."""
    id: str
    description: str
    params: LoanParameters
    expected: ExpectedResults

    @property
    def months(self) -> int:
        """Scheduled term in months."""
        return self.params.total_periods


# =============================================================================
# SCENARIOS
# =============================================================================

STANDARD_30Y = ReferenceScenario(
    id="standard-30y",
    description="$400,000 at 7% for 30 years, first payment 2024-01-01, no extras.",
    params=LoanParameters(
        loan_amount=400_000,
        annual_rate_pct=7.0,
        term_years=30,
        start_date="2024-01-01",
        home_value=500_000,
    ),
    expected=ExpectedResults(
        monthly_payment=2661.21,
        schedule_length=360,
        first_interest_due=2333.33,                 # = 400,000 × 0.07 / 12
        final_balance=0.0,
    ),
)

ZERO_RATE_10Y = ReferenceScenario(
    id="zero-rate-10y",
    description="$120,000 at 0% for 10 years: straight-line $1,000 per month.",
    params=LoanParameters(
        loan_amount=120_000,
        annual_rate_pct=0.0,
        term_years=10,
        start_date="2024-01-01",
        home_value=150_000,
    ),
    expected=ExpectedResults(
        monthly_payment=1000.0,                     # = 120,000 / 120
        schedule_length=120,
        first_interest_due=0.0,
        final_balance=0.0,
    ),
)

ANNUAL_EXTRA_30Y = ReferenceScenario(
    id="annual-extra-30y",
    description="$400,000 at 7% for 30 years with a $5,000 lump sum every January, mid-month start.",
    params=LoanParameters(
        loan_amount=400_000,
        annual_rate_pct=7.0,
        term_years=30,
        start_date="2024-06-15",
        extra_annual_payment=5_000,
        home_value=500_000,
    ),
    expected=ExpectedResults(
        monthly_payment=2661.21,
        max_schedule_length=359,                    # lump sums shorten the loan
        first_interest_due=2333.33,
        final_balance=0.0,
        january_additional_payment=5_000.0,
    ),
)

LARGE_EXTRA_PAYOFF = ReferenceScenario(
    id="large-extra-payoff",
    description="$100,000 at 5% for 30 years with $10,000 extra every month: paid off within 19 months.",
    params=LoanParameters(
        loan_amount=100_000,
        annual_rate_pct=5.0,
        term_years=30,
        start_date="2024-01-01",
        extra_payment=10_000,
        home_value=125_000,
    ),
    expected=ExpectedResults(
        monthly_payment=536.82,
        max_schedule_length=19,
        first_interest_due=416.67,                  # = 100,000 × 0.05 / 12
        final_balance=0.0,
    ),
)

STANDARD_15Y = ReferenceScenario(
    id="standard-15y",
    description="$300,000 at 6% for 15 years.",
    params=LoanParameters(
        loan_amount=300_000,
        annual_rate_pct=6.0,
        term_years=15,
        start_date="2024-01-01",
        home_value=375_000,
    ),
    expected=ExpectedResults(
        monthly_payment=2531.57,
        schedule_length=180,
        first_interest_due=1500.0,                  # = 300,000 × 0.06 / 12
        final_balance=0.0,
    ),
)

HIGH_RATE_30Y = ReferenceScenario(
    id="high-rate-30y",
    description="$100,000 at 15% (top of the published rate range) for 30 years.",
    params=LoanParameters(
        loan_amount=100_000,
        annual_rate_pct=15.0,
        term_years=30,
        start_date="2024-01-01",
        home_value=125_000,
    ),
    expected=ExpectedResults(
        monthly_payment=1264.44,
        schedule_length=360,
        first_interest_due=1250.0,                  # = 100,000 × 0.15 / 12
        final_balance=0.0,
    ),
)

ONE_YEAR_TERM = ReferenceScenario(
    id="one-year-term",
    description="$12,000 at 6% for 1 year.",
    params=LoanParameters(
        loan_amount=12_000,
        annual_rate_pct=6.0,
        term_years=1,
        start_date="2024-01-01",
        home_value=15_000,
    ),
    expected=ExpectedResults(
        monthly_payment=1032.80,
        schedule_length=12,
        first_interest_due=60.0,                    # = 12,000 × 0.06 / 12
        final_balance=0.0,
    ),
)

TAX_RETURN_30Y = ReferenceScenario(
    id="tax-return-30y",
    description="$400,000 at 7% for 30 years accruing a $1,200 yearly tax return ($100 per period).",
    params=LoanParameters(
        loan_amount=400_000,
        annual_rate_pct=7.0,
        term_years=30,
        start_date="2024-01-01",
        yearly_tax_return=1_200,
        home_value=500_000,
    ),
    expected=ExpectedResults(
        monthly_payment=2661.21,
        schedule_length=360,
        first_interest_due=2333.33,
        final_balance=0.0,
        tax_returned=100.0,
    ),
)


REFERENCE_SCENARIOS: list[ReferenceScenario] = [
    STANDARD_30Y,
    ZERO_RATE_10Y,
    ANNUAL_EXTRA_30Y,
    LARGE_EXTRA_PAYOFF,
    STANDARD_15Y,
    HIGH_RATE_30Y,
    ONE_YEAR_TERM,
    TAX_RETURN_30Y,
]
