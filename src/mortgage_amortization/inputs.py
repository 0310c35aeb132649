"""
Mortgage Calculator Inputs

User-facing calculator fields, their published ranges, and the conversion
from calculator inputs to LoanParameters for the amortization engine.

Values arriving from sliders and text fields are clamped to INPUT_CONSTRAINTS
before a schedule is generated; the engine itself does not re-check ranges.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field, fields, replace
from enum import Enum

from .escrow import MonthlyEscrows, monthly_escrows
from .payments import bi_weekly_payment, monthly_payment
from .schedule import LoanParameters


# =============================================================================
# ENUMS
# =============================================================================

class PaymentFrequency(Enum):
    """How often the borrower pays P&I."""
    MONTHLY = "monthly"
    BIWEEKLY = "biweekly"


# =============================================================================
# INPUT CONSTRAINTS - published min/max/step for each numeric field
# =============================================================================

@dataclass(frozen=True)
class InputConstraints:
    """Allowed range and slider step for one input field."""
    min: float
    max: float
    step: float


INPUT_CONSTRAINTS: dict[str, InputConstraints] = {
    "home_value":           InputConstraints(min=50_000, max=2_000_000, step=1_000),
    "down_pct":             InputConstraints(min=0, max=100, step=1),
    "rate":                 InputConstraints(min=0, max=15, step=0.01),
    "term":                 InputConstraints(min=1, max=30, step=1),
    "tax_yr":               InputConstraints(min=0, max=50_000, step=100),
    "ins_yr":               InputConstraints(min=0, max=20_000, step=100),
    "hoa_mo":               InputConstraints(min=0, max=2_000, step=10),
    "pmi_mo":               InputConstraints(min=0, max=500, step=5),
    "extra_payment":        InputConstraints(min=0, max=10_000, step=50),
    "payment_interval":     InputConstraints(min=1, max=12, step=1),
    "extra_annual_payment": InputConstraints(min=0, max=50_000, step=100),
    "start_payment_number": InputConstraints(min=1, max=360, step=1),
}


def clamp_value(key: str, value: float) -> float:
    """
    Clamp value into the published range for key.

    Raises:
        KeyError: If key has no published constraints
    """
    constraints = INPUT_CONSTRAINTS[key]
    return min(max(value, constraints.min), constraints.max)


def validate_input(key: str, value: float) -> bool:
    """
    True if value lies within the published range for key (inclusive).

    Raises:
        KeyError: If key has no published constraints
    """
    constraints = INPUT_CONSTRAINTS[key]
    return constraints.min <= value <= constraints.max


# =============================================================================
# CALCULATOR INPUTS
# =============================================================================

@dataclass
class MortgageInputs:
    """
    Calculator inputs as the user enters them.

    The loan amount is derived: home_value × (1 - down_pct / 100).
    rate is the annual rate as percentage (7.0 = 7%); term is in years.
    tax_yr and ins_yr are annual; hoa_mo and pmi_mo are monthly.
    """
    home_value: float = 500_000
    down_pct: float = 20
    rate: float = 7.0
    term: int = 30
    tax_yr: float = 2_700
    ins_yr: float = 1_500
    hoa_mo: float = 0
    pmi_mo: float = 0
    extra_payment: float = 0
    payment_interval: int = 1
    extra_annual_payment: float = 0
    start_payment_number: int = 1
    first_payment_date: dt.date = field(default_factory=dt.date.today)
    payment_frequency: PaymentFrequency = PaymentFrequency.MONTHLY

    @property
    def loan_amount(self) -> float:
        """Amount financed after the down payment."""
        return self.home_value * (1 - self.down_pct / 100)

    def clamped(self) -> MortgageInputs:
        """Copy with every constrained field clamped to its published range."""
        changes = {
            f.name: clamp_value(f.name, getattr(self, f.name))
            for f in fields(self)
            if f.name in INPUT_CONSTRAINTS
        }
        for name in ("term", "payment_interval", "start_payment_number"):
            changes[name] = int(changes[name])
        return replace(self, **changes)

    def escrows(self) -> MonthlyEscrows:
        """Monthly escrow amounts for these inputs."""
        return monthly_escrows(self.tax_yr, self.ins_yr, self.hoa_mo, self.pmi_mo)

    def scheduled_payment(self) -> float:
        """P&I payment per period for the selected payment frequency."""
        if self.payment_frequency is PaymentFrequency.BIWEEKLY:
            return bi_weekly_payment(self.loan_amount, self.rate, self.term)
        return monthly_payment(self.loan_amount, self.rate, self.term)

    def to_loan_parameters(self, yearly_tax_return: float | None = None) -> LoanParameters:
        """
        Build LoanParameters for the amortization engine.

        yearly_tax_return defaults to tax_yr. home_value is passed through so
        LTV is measured against the actual property value.
        """
        if yearly_tax_return is None:
            yearly_tax_return = self.tax_yr
        return LoanParameters(
            loan_amount=self.loan_amount,
            annual_rate_pct=self.rate,
            term_years=self.term,
            start_date=self.first_payment_date,
            extra_payment=self.extra_payment,
            payment_interval=self.payment_interval,
            extra_annual_payment=self.extra_annual_payment,
            start_payment_number=self.start_payment_number,
            yearly_tax_return=yearly_tax_return,
            home_value=self.home_value,
        )
