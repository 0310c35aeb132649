# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import warnings
import numpy as np
from decimal import ROUND_HALF_UP, Decimal

__version__ = "0.1.0"

MONTHS_PER_YEAR = 12
CENT = Decimal("0.01")


# =============================================================================
# Rate/Payment Calculator: level principal-and-interest payment
# =============================================================================

def _check_payment_inputs(principal: float, annual_rate_pct: float, term_years: float) -> None:
    if principal < 0:
        raise ValueError(f"principal must be non-negative, got {principal}")
    if annual_rate_pct < 0:
        raise ValueError(f"annual_rate_pct must be non-negative, got {annual_rate_pct}")
    if term_years <= 0:
        raise ValueError(f"term_years must be positive, got {term_years}")


def annuity_factor(
        annual_rate_pct: float,
        num_periods: int
) -> float:
    """
    Payment per dollar of balance that amortizes the balance to zero over
    num_periods equal monthly installments.

    Formula:
        AF(n) = r / [1 - (1 + r)^-n]

    Where:
        r = Monthly rate (annual_rate_pct / 1200)
        n = Number of monthly periods

    Edge cases:
        - n == 0: nothing left to amortize, returns 0.0
        - r == 0: straight-line amortization, returns 1/n

    Args:
        annual_rate_pct: Annual interest rate as percentage (e.g., 7.0 for 7%)
        num_periods: Number of monthly periods

    Returns:
        Annuity factor (payment as fraction of balance)

    Raises:
        ValueError: If num_periods is negative
        ValueError: If annual_rate_pct is negative
        Warning: If annual_rate_pct is zero

    Example:
        >>> annuity_factor(7.0, 360)
        0.006653...  # $6.65 per $1000 of balance per month
    """
    if num_periods < 0:
        raise ValueError(f"num_periods must be non-negative, got {num_periods}")
    if annual_rate_pct < 0:
        raise ValueError(f"annual_rate_pct must be non-negative, got {annual_rate_pct}")
    if num_periods == 0:
        return 0.0
    if annual_rate_pct == 0.0:
        warnings.warn("annual rate is zero, returning straight-line amortization")
        return 1.0 / num_periods
    r = annual_rate_pct / 100.0 / MONTHS_PER_YEAR
    return r / (1.0 - (1.0 + r) ** (-num_periods))


def monthly_payment(
        principal: float,
        annual_rate_pct: float,
        term_years: int
) -> float:
    """
    Calculate the fixed monthly principal-and-interest payment for a fully
    amortizing, level-payment loan.

    Formula:
        r = annual_rate_pct / 100 / 12
        n = term_years × 12

        PMT = P × r × (1 + r)^n / [(1 + r)^n - 1]     (r > 0)
        PMT = P / n                                   (r = 0)

    Author's Note:
    --------------
    Dividing numerator and denominator by (1 + r)^n gives the annuity factor
    form used by the amortization engine:

        PMT = P × r / [1 - (1 + r)^-n] = P × AF(n)

    The two forms are algebraically identical. The negative exponent is the
    one evaluated: (1 + r)^-n underflows harmlessly to 0 for long terms at
    high rates, where (1 + r)^n would overflow. The payment then tends to
    P × r, interest only.

    Args:
        principal: Amount financed ($)
        annual_rate_pct: Annual interest rate as percentage (e.g., 7.0 for 7%)
        term_years: Loan term in years

    Returns:
        Monthly P&I payment ($), non-negative and finite

    Raises:
        ValueError: If principal is negative
        ValueError: If annual_rate_pct is negative
        ValueError: If term_years is not positive
        Warning: If annual_rate_pct is zero

    Example:
        >>> monthly_payment(400_000, 7.0, 30)
        2661.21...
        >>> monthly_payment(120_000, 0.0, 10)
        1000.0
    """
    _check_payment_inputs(principal, annual_rate_pct, term_years)
    r = annual_rate_pct / 100.0 / MONTHS_PER_YEAR
    n = term_years * MONTHS_PER_YEAR
    if r == 0.0:
        warnings.warn("annual rate is zero, returning straight-line amortization")
        return principal / n
    return principal * r / (1.0 - (1.0 + r) ** (-n))


def bi_weekly_payment(
        principal: float,
        annual_rate_pct: float,
        term_years: int
) -> float:
    """
    Bi-weekly payment: exactly half of the monthly P&I payment.

    Only the payment size is halved. The amortization engine still steps
    monthly, so the faster payoff of 26 half-payments a year (13 monthly
    payments) is not reflected in generated schedules.
    """
    return monthly_payment(principal, annual_rate_pct, term_years) / 2.0


def monthly_payment_vector(
        principal: float | np.ndarray,
        annual_rate_pct: float | np.ndarray,
        term_years: int | np.ndarray
) -> np.ndarray:
    """
    Vectorized monthly payment. See monthly_payment for details.

    Inputs broadcast against each other under numpy rules, so a rate vector
    against a term column yields a full rate × term payment grid.

    Args:
        principal: Amount(s) financed ($)
        annual_rate_pct: Annual rate(s) as percentage
        term_years: Term(s) in years

    Returns:
        Array of monthly payments, broadcast shape of the inputs.
        Zero-rate cells use straight-line amortization (no warning).

    Raises:
        ValueError: If any principal or rate is negative, or any term is not positive
    """
    principal = np.asarray(principal, dtype=float)
    annual_rate_pct = np.asarray(annual_rate_pct, dtype=float)
    term_years = np.asarray(term_years, dtype=float)

    if np.any(principal < 0):
        raise ValueError("principal must be non-negative")
    if np.any(annual_rate_pct < 0):
        raise ValueError("annual_rate_pct must be non-negative")
    if np.any(term_years <= 0):
        raise ValueError("term_years must be positive")

    r = annual_rate_pct / 100.0 / MONTHS_PER_YEAR
    n = term_years * MONTHS_PER_YEAR
    # np.where evaluates both branches; mask the zero-rate denominator first
    with np.errstate(divide='ignore', invalid='ignore'):
        annuity = principal * r / (1.0 - np.power(1.0 + r, -n))
    return np.where(r == 0.0, principal / n, annuity)


def round_currency(amount: float) -> float:
    """
    Round a currency amount to cents, halves away from zero.

    Engine values are never rounded; this is for presentation only.

    Example:
        >>> round_currency(123.455)
        123.46
    """
    # Shortest repr of the float, so 123.455 rounds as written
    cents = Decimal(str(amount)).quantize(CENT, rounding=ROUND_HALF_UP)
    return float(cents) + 0.0  # -0.0 -> 0.0
