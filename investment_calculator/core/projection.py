"""Year-by-year compound growth projection."""

from __future__ import annotations

import math
from typing import List, Union

from investment_calculator.schemas.projection import InputParameters, YearlyResult
from investment_calculator.utils.logging import get_logger

logger = get_logger(__name__)

MAX_INITIAL_INVESTMENT = 100_000_000
MAX_ANNUAL_CONTRIBUTION = 10_000_000
MAX_RETURN_PERCENT = 100
MIN_PERIOD_YEARS = 1
MAX_PERIOD_YEARS = 100

Number = Union[int, float]


class InvalidInputError(ValueError):
    """Raised when a projection input falls outside its allowed range."""

    def __init__(self, field: str, reason: str, bound: Number):
        super().__init__(f"{field} {reason} {bound:,}")
        self.field = field
        self.reason = reason
        self.bound = bound

    def to_dict(self) -> dict:
        return {
            "field": self.field,
            "reason": self.reason,
            "bound": self.bound,
            "message": str(self),
        }


def round2(value: float) -> float:
    """Round half-up to the cent: scale by 100, round to nearest, scale back."""
    return math.floor(value * 100 + 0.5) / 100


def _check_range(field: str, value: Number, low: Number, high: Number) -> None:
    # written so NaN fails both comparisons
    if not value >= low:
        raise InvalidInputError(field, "must be at least", low)
    if not value <= high:
        raise InvalidInputError(field, "must be at most", high)


def validate_input(params: InputParameters) -> None:
    """Raise ``InvalidInputError`` for the first out-of-range field.

    Fields are checked in a fixed order: initial investment, contribution,
    return rate, period.
    """
    _check_range("initialInvestment", params.initialInvestment, 0, MAX_INITIAL_INVESTMENT)
    _check_range("annualContribution", params.annualContribution, 0, MAX_ANNUAL_CONTRIBUTION)
    _check_range("expectedReturnPercent", params.expectedReturnPercent, 0, MAX_RETURN_PERCENT)
    _check_range(
        "investmentPeriodYears",
        params.investmentPeriodYears,
        MIN_PERIOD_YEARS,
        MAX_PERIOD_YEARS,
    )


def project(params: InputParameters) -> List[YearlyResult]:
    """
    Build the yearly projection for ``params``.

    Order of operations (per year):
      1) Interest on the previous year's total value (year 1: on the initial investment).
      2) Add the year's contribution to capital.
      3) Value = capital + cumulative interest.

    Every figure is rounded to the cent as soon as it is computed and the
    rounded figure feeds the next year, so rounding drift carries forward.
    """
    validate_input(params)

    rate = params.expectedReturnPercent / 100
    contribution = params.annualContribution
    logger.debug(
        "projecting %d years at %s%% (initial=%s, contribution=%s)",
        params.investmentPeriodYears,
        params.expectedReturnPercent,
        params.initialInvestment,
        contribution,
    )

    interest = round2(rate * params.initialInvestment)
    capital = round2(params.initialInvestment + contribution)
    cumulative = interest
    results: List[YearlyResult] = [
        YearlyResult(
            year=1,
            investmentValue=round2(capital + cumulative),
            interest=interest,
            cumulativeInterest=cumulative,
            capitalContributed=capital,
        )
    ]

    for year in range(2, params.investmentPeriodYears + 1):
        previous = results[-1]
        interest = round2(rate * previous.investmentValue)
        cumulative = round2(previous.cumulativeInterest + interest)
        capital = round2(previous.capitalContributed + contribution)
        results.append(
            YearlyResult(
                year=year,
                investmentValue=round2(capital + cumulative),
                interest=interest,
                cumulativeInterest=cumulative,
                capitalContributed=capital,
            )
        )

    return results


def total_return_percent(total_investment: float, total_interest: float) -> float:
    """Interest as a percentage of capital; 0 when nothing was invested."""
    if total_investment == 0:
        return 0.0
    return round2((total_interest / total_investment) * 100)


def compound_interest(principal: float, rate: float, years: float) -> float:
    """Interest earned by ``principal`` compounding annually at ``rate`` (decimal)."""
    return principal * (1 + rate) ** years - principal


__all__ = [
    "InvalidInputError",
    "MAX_INITIAL_INVESTMENT",
    "MAX_ANNUAL_CONTRIBUTION",
    "MAX_RETURN_PERCENT",
    "MIN_PERIOD_YEARS",
    "MAX_PERIOD_YEARS",
    "round2",
    "validate_input",
    "project",
    "total_return_percent",
    "compound_interest",
]
