from __future__ import annotations

from investment_calculator.schemas.projection import InputParameters


def payload(**overrides) -> dict:
    values = {
        "initialInvestment": 1000.0,
        "annualContribution": 100.0,
        "expectedReturnPercent": 5.0,
        "investmentPeriodYears": 3,
    }
    values.update(overrides)
    return values


def make_params(**overrides) -> InputParameters:
    return InputParameters(**payload(**overrides))
