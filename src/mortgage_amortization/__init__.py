# Requires Python 3.12+
"""
Mortgage Amortization: payment, escrow, and amortization schedule calculations.

Computes the level P&I payment for a fixed-rate mortgage and the full
period-by-period schedule, including extra payments, annual lump sums,
tax-return accrual, and LTV-based PMI status.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Rate/Payment Calculator
from mortgage_amortization.payments import (
    MONTHS_PER_YEAR,
    annuity_factor,
    monthly_payment,
    bi_weekly_payment,
    monthly_payment_vector,
    round_currency,
)

# Escrow Calculator
from mortgage_amortization.escrow import (
    MonthlyEscrows,
    monthly_escrows,
    total_monthly_payment,
)

# Amortization Engine
from mortgage_amortization.schedule import (
    PMI_REMOVAL_LTV,
    DEFAULT_ORIGINATION_LTV,
    calculate_ltv,
    should_pmi_be_active,
    LoanParameters,
    AmortizationPayment,
    generate_schedule,
    AmortizationSchedule,
    schedule_arrays,
    ScheduleSummary,
    summarize_schedule,
    YearlyTotals,
    yearly_totals,
)

# Calculator inputs
from mortgage_amortization.inputs import (
    PaymentFrequency,
    InputConstraints,
    INPUT_CONSTRAINTS,
    clamp_value,
    validate_input,
    MortgageInputs,
)

# Reference scenarios
from mortgage_amortization.examples import (
    ExpectedResults,
    ReferenceScenario,
    REFERENCE_SCENARIOS,
)

__all__ = [
    "__version__",
    # Rate/Payment Calculator
    "MONTHS_PER_YEAR",
    "annuity_factor",
    "monthly_payment",
    "bi_weekly_payment",
    "monthly_payment_vector",
    "round_currency",
    # Escrow Calculator
    "MonthlyEscrows",
    "monthly_escrows",
    "total_monthly_payment",
    # Amortization Engine
    "PMI_REMOVAL_LTV",
    "DEFAULT_ORIGINATION_LTV",
    "calculate_ltv",
    "should_pmi_be_active",
    "LoanParameters",
    "AmortizationPayment",
    "generate_schedule",
    "AmortizationSchedule",
    "schedule_arrays",
    "ScheduleSummary",
    "summarize_schedule",
    "YearlyTotals",
    "yearly_totals",
    # Calculator inputs
    "PaymentFrequency",
    "InputConstraints",
    "INPUT_CONSTRAINTS",
    "clamp_value",
    "validate_input",
    "MortgageInputs",
    # Reference scenarios
    "ExpectedResults",
    "ReferenceScenario",
    "REFERENCE_SCENARIOS",
]
