# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

from dataclasses import dataclass

from .payments import MONTHS_PER_YEAR

__version__ = "0.1.0"


# =============================================================================
# Escrow Calculator: annual and monthly escrow items as monthly amounts
# =============================================================================

@dataclass(frozen=True)
class MonthlyEscrows:
    """
    Escrow items expressed per month.

    Property tax and homeowner's insurance are quoted annually and divided
    by 12; HOA dues and PMI are already monthly and pass through unchanged.
    """
    tax_mo: float
    ins_mo: float
    hoa_mo: float
    pmi_mo: float

    @property
    def total(self) -> float:
        """Sum of all monthly escrow items."""
        return self.tax_mo + self.ins_mo + self.hoa_mo + self.pmi_mo


def monthly_escrows(
        tax_yr: float,
        insurance_yr: float,
        hoa_mo: float,
        pmi_mo: float
) -> MonthlyEscrows:
    """
    Convert escrow figures to monthly amounts.

    Formula:
        tax_mo = tax_yr / 12
        ins_mo = insurance_yr / 12
        hoa_mo, pmi_mo unchanged

    Args:
        tax_yr: Annual property tax ($)
        insurance_yr: Annual homeowner's insurance ($)
        hoa_mo: Monthly HOA dues ($)
        pmi_mo: Monthly private mortgage insurance ($)

    Returns:
        MonthlyEscrows

    Raises:
        ValueError: If any input is negative

    Example:
        >>> monthly_escrows(3600, 1200, 150, 100)
        MonthlyEscrows(tax_mo=300.0, ins_mo=100.0, hoa_mo=150, pmi_mo=100)
    """
    for name, value in (("tax_yr", tax_yr), ("insurance_yr", insurance_yr),
                        ("hoa_mo", hoa_mo), ("pmi_mo", pmi_mo)):
        if value < 0:
            raise ValueError(f"{name} must be non-negative, got {value}")
    return MonthlyEscrows(
        tax_mo=tax_yr / MONTHS_PER_YEAR,
        ins_mo=insurance_yr / MONTHS_PER_YEAR,
        hoa_mo=hoa_mo,
        pmi_mo=pmi_mo,
    )


def total_monthly_payment(
        principal_and_interest: float,
        escrows: MonthlyEscrows,
        include_tax: bool = True,
        include_insurance: bool = True,
        include_pmi: bool = True,
        include_hoa: bool = True,
) -> float:
    """
    Full monthly housing payment: P&I plus the escrow items switched on.

    Args:
        principal_and_interest: Monthly P&I payment ($)
        escrows: Monthly escrow amounts
        include_tax: Add monthly property tax
        include_insurance: Add monthly insurance
        include_pmi: Add monthly PMI
        include_hoa: Add monthly HOA dues

    Returns:
        Total monthly payment ($)
    """
    total = principal_and_interest
    if include_tax:
        total += escrows.tax_mo
    if include_insurance:
        total += escrows.ins_mo
    if include_pmi:
        total += escrows.pmi_mo
    if include_hoa:
        total += escrows.hoa_mo
    return total
