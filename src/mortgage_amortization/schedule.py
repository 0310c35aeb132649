# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import datetime as dt
import warnings
import numpy as np
from dataclasses import dataclass
from dateutil.relativedelta import relativedelta

from .payments import MONTHS_PER_YEAR, annuity_factor

__version__ = "0.1.0"


# =============================================================================
# Loan-to-Value and PMI Policy
# =============================================================================
#
# PMI is removed automatically once the loan balance falls to 78% of the
# home value (borrowers may request removal at 80%, which is not modelled).
#
# When no home value is supplied, the loan is assumed to have been originated
# at 80% LTV (20% down), i.e. home value = loan amount / 0.8. This is a
# fallback estimate, not a derived value.
# =============================================================================

PMI_REMOVAL_LTV = 0.78
DEFAULT_ORIGINATION_LTV = 0.8


def calculate_ltv(remaining_balance: float, home_value: float) -> float:
    """
    Loan-to-value ratio: remaining_balance / home_value.

    Returns 0.0 when home_value is not positive, so PMI never activates for
    a loan with no usable valuation.
    """
    if home_value <= 0:
        return 0.0
    return remaining_balance / home_value


def should_pmi_be_active(ltv: float) -> bool:
    """True while LTV is above the automatic PMI removal threshold."""
    return ltv > PMI_REMOVAL_LTV


# =============================================================================
# Loan Parameters
# =============================================================================

def _to_date(value: dt.date | str) -> dt.date:
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        return dt.date.fromisoformat(value)
    raise ValueError(f"start_date must be a date or ISO 'YYYY-MM-DD' string, got {value!r}")


@dataclass(frozen=True)
class LoanParameters:
    """
    Inputs for one amortization schedule. Immutable per calculation.

    Required fields:
        loan_amount, annual_rate_pct, term_years, start_date.

    Optional fields (defaults give a plain level-payment schedule):
        extra_payment: periodic extra principal ($)
        payment_interval: extra_payment applies every N periods
        extra_annual_payment: lump sum applied in every January period ($)
        start_payment_number: first period eligible for extra_payment (1-based)
        yearly_tax_return: tax benefit accrued evenly over 12 periods ($/yr)
        home_value: property value for LTV; 0 means "estimate from loan"

    Rate convention:
        annual_rate_pct is a percentage (7.0 for 7%), as entered by the user.
        monthly_rate converts it to a decimal monthly rate.

    start_date may be given as a datetime.date or an ISO 'YYYY-MM-DD' string;
    it is stored as a datetime.date.
    """
    loan_amount: float
    annual_rate_pct: float
    term_years: int
    start_date: dt.date | str
    extra_payment: float = 0.0
    payment_interval: int = 1
    extra_annual_payment: float = 0.0
    start_payment_number: int = 1
    yearly_tax_return: float = 0.0
    home_value: float = 0.0

    def __post_init__(self) -> None:
        """Validate parameters and normalise start_date."""
        object.__setattr__(self, "start_date", _to_date(self.start_date))

        if self.loan_amount < 0:
            raise ValueError(f"loan_amount must be non-negative, got {self.loan_amount}")
        if self.annual_rate_pct < 0:
            raise ValueError(f"annual_rate_pct must be non-negative, got {self.annual_rate_pct}")
        if int(self.term_years) != self.term_years or self.term_years <= 0:
            raise ValueError(f"term_years must be a positive integer, got {self.term_years}")
        if int(self.payment_interval) != self.payment_interval or self.payment_interval < 1:
            raise ValueError(f"payment_interval must be an integer >= 1, got {self.payment_interval}")
        if int(self.start_payment_number) != self.start_payment_number or self.start_payment_number < 1:
            raise ValueError(
                f"start_payment_number must be an integer >= 1, got {self.start_payment_number}"
            )
        if self.extra_payment < 0:
            raise ValueError(f"extra_payment must be non-negative, got {self.extra_payment}")
        if self.extra_annual_payment < 0:
            raise ValueError(
                f"extra_annual_payment must be non-negative, got {self.extra_annual_payment}"
            )
        if self.home_value < 0:
            raise ValueError(f"home_value must be non-negative, got {self.home_value}")

        if self.home_value == 0:
            warnings.warn(
                f"home_value not provided, estimating from {DEFAULT_ORIGINATION_LTV:.0%} "
                f"loan-to-value at origination"
            )

    @property
    def effective_home_value(self) -> float:
        """Home value used for LTV: home_value, or loan_amount / 0.8 if unset."""
        if self.home_value > 0:
            return self.home_value
        return self.loan_amount / DEFAULT_ORIGINATION_LTV

    @property
    def monthly_rate(self) -> float:
        """Monthly rate as decimal (annual_rate_pct / 1200)."""
        return self.annual_rate_pct / 100.0 / MONTHS_PER_YEAR

    @property
    def total_periods(self) -> int:
        """Scheduled number of monthly payments (term_years × 12)."""
        return int(self.term_years) * MONTHS_PER_YEAR


# =============================================================================
# Amortization Engine
# =============================================================================

@dataclass(frozen=True)
class AmortizationPayment:
    """
    One period of an amortization schedule.

    Balance fields are AFTER this period's payment:
        remaining_balance = prior balance - principal_paid - extra_payments
                            - additional_payment, floored at 0
        ltv = remaining_balance / effective home value

    payment_amount is the level P&I payment and is the same on every record;
    principal_paid = payment_amount - interest_due.
    """
    payment_number: int
    payment_date: dt.date
    interest_rate: float
    interest_due: float
    payment_amount: float
    extra_payments: float
    additional_payment: float
    principal_paid: float
    remaining_balance: float
    year: int
    tax_returned: float
    cumulative_tax_returned: float
    pmi_active: bool
    ltv: float

    @property
    def payment_date_iso(self) -> str:
        """payment_date as 'YYYY-MM-DD'."""
        return self.payment_date.isoformat()

    @property
    def total_principal(self) -> float:
        """All principal reduction this period (scheduled + extra + annual)."""
        return self.principal_paid + self.extra_payments + self.additional_payment


def generate_schedule(params: LoanParameters) -> list[AmortizationPayment]:
    """
    Generate the period-by-period amortization schedule for a loan.

    ALGORITHM:
    ----------
    With r = monthly rate and N = term_years × 12:

        payment = loan_amount × r / [1 - (1 + r)^-N]     (loan_amount / N if r = 0)

    For period i = 1..N, while the balance is positive:

        interest       = balance × r
        principal      = payment - interest
        extra          = extra_payment        if i >= k and (i - k) % interval == 0
                                              (k = start_payment_number)
        additional     = extra_annual_payment if the period falls in January
        balance        = max(0, balance - principal - extra - additional)
        ltv            = balance / home value
        pmi_active     = ltv > 0.78
        tax_returned   = yearly_tax_return / 12
        cumulative_tax = cumulative_tax + tax_returned

    The schedule ends with the period in which the balance first reaches
    zero, so extra payments show up as a shorter schedule.

    DATES:
    ------
    Period i is dated start_date + (i - 1) calendar months. The start day of
    month is kept wherever the month has it; otherwise the month's last day
    is used (a 31st start gives ..., Feb 29, Mar 31, Apr 30, ...).
    Consecutive dates are therefore one calendar month apart only for start
    days up to 28. After a clamped month the date returns to the start day
    (Feb 29 is followed by Mar 31, not by Feb 29 + 1 month = Mar 29).

    ROUNDING:
    ---------
    Nothing is rounded. Use payments.round_currency when displaying values.

    Args:
        params: Validated LoanParameters

    Returns:
        List of AmortizationPayment in payment_number order; length is at
        most term_years × 12, and empty when loan_amount is zero.

    Example:
        >>> schedule = generate_schedule(LoanParameters(400_000, 7.0, 30, "2024-01-01"))
        >>> len(schedule), round(schedule[0].interest_due, 2)
        (360, 2333.33)
    """
    monthly_rate = params.monthly_rate
    total_periods = params.total_periods
    home_value = params.effective_home_value
    payment_amount = params.loan_amount * annuity_factor(params.annual_rate_pct, total_periods)
    tax_returned = params.yearly_tax_return / MONTHS_PER_YEAR

    schedule: list[AmortizationPayment] = []
    balance = float(params.loan_amount)
    cumulative_tax = 0.0

    for i in range(1, total_periods + 1):
        if balance <= 0:
            break

        payment_date = params.start_date + relativedelta(months=i - 1)

        interest = balance * monthly_rate
        principal = payment_amount - interest

        apply_extra = (
                i >= params.start_payment_number
                and (i - params.start_payment_number) % params.payment_interval == 0
        )
        extra_payments = params.extra_payment if apply_extra else 0.0
        additional_payment = params.extra_annual_payment if payment_date.month == 1 else 0.0

        balance = max(0.0, balance - (principal + extra_payments + additional_payment))

        cumulative_tax += tax_returned
        ltv = calculate_ltv(balance, home_value)

        schedule.append(AmortizationPayment(
            payment_number=i,
            payment_date=payment_date,
            interest_rate=params.annual_rate_pct,
            interest_due=interest,
            payment_amount=payment_amount,
            extra_payments=extra_payments,
            additional_payment=additional_payment,
            principal_paid=principal,
            remaining_balance=balance,
            year=payment_date.year,
            tax_returned=tax_returned,
            cumulative_tax_returned=cumulative_tax,
            pmi_active=should_pmi_be_active(ltv),
            ltv=ltv,
        ))

    return schedule


# =============================================================================
# Columnar view and summary metrics
# =============================================================================
#
# Charting and comparison code works on whole columns (total interest,
# balance curves), so the record list is also offered as numpy arrays.
# yearly_totals rolls the columns up by calendar year.
# =============================================================================

@dataclass
class AmortizationSchedule:
    """
    Container for an amortization schedule as numpy column arrays.

    Index k holds the values of payment number k + 1. Field meanings match
    AmortizationPayment.
    """
    payment_number: np.ndarray
    payment_date: np.ndarray  # datetime64[D]
    interest_due: np.ndarray
    payment_amount: np.ndarray
    extra_payments: np.ndarray
    additional_payment: np.ndarray
    principal_paid: np.ndarray
    remaining_balance: np.ndarray
    tax_returned: np.ndarray
    cumulative_tax_returned: np.ndarray
    ltv: np.ndarray
    pmi_active: np.ndarray

    def __len__(self) -> int:
        return len(self.payment_number)


def schedule_arrays(schedule: list[AmortizationPayment]) -> AmortizationSchedule:
    """
    Convert a list of AmortizationPayment records to column arrays.

    Args:
        schedule: Output of generate_schedule

    Returns:
        AmortizationSchedule (all arrays have length len(schedule))
    """
    def column(name: str, dtype) -> np.ndarray:
        return np.array([getattr(p, name) for p in schedule], dtype=dtype)

    return AmortizationSchedule(
        payment_number=column("payment_number", int),
        payment_date=np.array([p.payment_date for p in schedule], dtype="datetime64[D]"),
        interest_due=column("interest_due", float),
        payment_amount=column("payment_amount", float),
        extra_payments=column("extra_payments", float),
        additional_payment=column("additional_payment", float),
        principal_paid=column("principal_paid", float),
        remaining_balance=column("remaining_balance", float),
        tax_returned=column("tax_returned", float),
        cumulative_tax_returned=column("cumulative_tax_returned", float),
        ltv=column("ltv", float),
        pmi_active=column("pmi_active", bool),
    )


@dataclass(frozen=True)
class ScheduleSummary:
    """Aggregate metrics used to compare schedules."""
    total_interest: float
    total_payments: int
    years_to_payoff: float
    payoff_date: dt.date | None
    pmi_removal_payment_number: int | None
    total_extra_paid: float


def summarize_schedule(schedule: list[AmortizationPayment]) -> ScheduleSummary:
    """
    Summarize a schedule.

    Metrics:
        total_interest = Σ interest_due
        total_payments = number of periods
        years_to_payoff = total_payments / 12
        payoff_date = date of the last period (None for an empty schedule)
        pmi_removal_payment_number = first period with pmi_active False
                                     (None if PMI never drops off)
        total_extra_paid = Σ (extra_payments + additional_payment)
    """
    arrays = schedule_arrays(schedule)
    pmi_off = np.flatnonzero(~arrays.pmi_active)
    return ScheduleSummary(
        total_interest=float(np.sum(arrays.interest_due)),
        total_payments=len(schedule),
        years_to_payoff=len(schedule) / MONTHS_PER_YEAR,
        payoff_date=schedule[-1].payment_date if schedule else None,
        pmi_removal_payment_number=int(arrays.payment_number[pmi_off[0]]) if len(pmi_off) else None,
        total_extra_paid=float(np.sum(arrays.extra_payments) + np.sum(arrays.additional_payment)),
    )


@dataclass
class YearlyTotals:
    """
    Schedule rolled up by calendar year of payment_date, one row per year.

    principal_paid and interest_paid are yearly sums of the scheduled split;
    extra_paid sums extra_payments + additional_payment; ending_balance is
    the remaining balance after the year's last payment.
    """
    year: np.ndarray
    principal_paid: np.ndarray
    interest_paid: np.ndarray
    extra_paid: np.ndarray
    ending_balance: np.ndarray

    def __len__(self) -> int:
        return len(self.year)


def yearly_totals(schedule: list[AmortizationPayment]) -> YearlyTotals:
    """
    Aggregate a schedule by calendar year, for balance and interest charts.

    A schedule starting mid-year has a short first (and usually last) year.

    Args:
        schedule: Output of generate_schedule

    Returns:
        YearlyTotals with years in ascending order (empty for an empty schedule)

    Example:
        >>> totals = yearly_totals(generate_schedule(LoanParameters(400_000, 7.0, 30, "2024-06-15")))
        >>> int(totals.year[0]), len(totals)
        (2024, 31)
    """
    arrays = schedule_arrays(schedule)
    years = arrays.payment_date.astype("datetime64[Y]").astype(int) + 1970
    unique_years, inverse = np.unique(years, return_inverse=True)
    # Years are non-decreasing, so the first hit in the reversed array is the year's last payment
    _, last_from_end = np.unique(years[::-1], return_index=True)
    last = len(years) - 1 - last_from_end

    def per_year(values: np.ndarray) -> np.ndarray:
        return np.bincount(inverse, weights=values, minlength=len(unique_years))

    return YearlyTotals(
        year=unique_years,
        principal_paid=per_year(arrays.principal_paid),
        interest_paid=per_year(arrays.interest_due),
        extra_paid=per_year(arrays.extra_payments + arrays.additional_payment),
        ending_balance=arrays.remaining_balance[last],
    )
