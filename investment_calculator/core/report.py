"""Presentation model for a finished projection: summary, chart series, breakdown."""

from __future__ import annotations

from typing import List, Sequence

from investment_calculator.core.projection import total_return_percent
from investment_calculator.schemas.projection import (
    BreakdownSlice,
    ChartSeries,
    InvestmentReport,
    ReportSummary,
    YearlyResult,
)


def summarize(results: Sequence[YearlyResult]) -> ReportSummary:
    """Final-year totals; all zero when there is nothing to summarize."""
    if not results:
        return ReportSummary(
            totalInvestment=0.0,
            totalInterest=0.0,
            finalValue=0.0,
            totalReturnPercent=0.0,
        )

    last = results[-1]
    return ReportSummary(
        totalInvestment=last.capitalContributed,
        totalInterest=last.cumulativeInterest,
        finalValue=last.investmentValue,
        totalReturnPercent=total_return_percent(last.capitalContributed, last.cumulativeInterest),
    )


def chart_series(results: Sequence[YearlyResult]) -> ChartSeries:
    return ChartSeries(
        labels=[f"Year {row.year}" for row in results],
        investmentValues=[row.investmentValue for row in results],
        totalInterest=[row.cumulativeInterest for row in results],
        investmentCapital=[row.capitalContributed for row in results],
    )


def final_breakdown(results: Sequence[YearlyResult]) -> List[BreakdownSlice]:
    """Split the final value into capital and interest, with each share in percent."""
    if not results:
        return []

    last = results[-1]
    total = last.capitalContributed + last.cumulativeInterest
    if total <= 0:
        return []

    return [
        BreakdownSlice(
            label=label,
            amount=amount,
            percent=round(amount / total * 100, 1),
        )
        for label, amount in (
            ("Investment Capital", last.capitalContributed),
            ("Total Interest", last.cumulativeInterest),
        )
    ]


def build_report(results: Sequence[YearlyResult]) -> InvestmentReport:
    return InvestmentReport(
        summary=summarize(results),
        chart=chart_series(results),
        breakdown=final_breakdown(results),
    )
