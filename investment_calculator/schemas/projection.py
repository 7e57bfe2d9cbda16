"""Data contracts for investment projections."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class InputParameters(BaseModel):
    """Inputs required to project an investment plan.

    Only types are enforced here; range checks happen in the engine so callers
    get a single ``InvalidInputError`` naming the offending field.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    initialInvestment: float = Field(..., description="Capital invested at the start of year 1.")
    annualContribution: float = Field(..., description="Amount added every year.")
    expectedReturnPercent: float = Field(
        ...,
        description="Annual return expressed as a percentage (e.g. 5 for 5%).",
    )
    investmentPeriodYears: int = Field(..., description="Number of years to project.")


class YearlyResult(BaseModel):
    """Single row of a projection."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(..., ge=1)
    investmentValue: float
    interest: float
    cumulativeInterest: float
    capitalContributed: float


class ReportSummary(BaseModel):
    model_config = ConfigDict(extra="forbid")

    totalInvestment: float
    totalInterest: float
    finalValue: float
    totalReturnPercent: float


class ChartSeries(BaseModel):
    """Line-chart data, one point per projected year."""

    model_config = ConfigDict(extra="forbid")

    labels: List[str]
    investmentValues: List[float]
    totalInterest: List[float]
    investmentCapital: List[float]


class BreakdownSlice(BaseModel):
    model_config = ConfigDict(extra="forbid")

    label: str
    amount: float
    percent: float


class InvestmentReport(BaseModel):
    """Everything the frontend needs to render the report view."""

    model_config = ConfigDict(extra="forbid")

    summary: ReportSummary
    chart: ChartSeries
    breakdown: List[BreakdownSlice] = Field(default_factory=list)


class ReportResponse(BaseModel):
    results: List[YearlyResult]
    report: InvestmentReport


class CompoundInterestRequest(BaseModel):
    """Ad-hoc compound interest query."""

    model_config = ConfigDict(extra="forbid")

    principal: float = Field(..., ge=0, description="Amount invested once at period 0.")
    rate: float = Field(
        ...,
        ge=0,
        le=1,
        description="Annual rate expressed as a decimal (e.g. 0.05 for 5%).",
    )
    years: float = Field(..., ge=0, le=100, description="Number of years the principal compounds.")


class CompoundInterestResponse(CompoundInterestRequest):
    interest: float
