from __future__ import annotations

from investment_calculator.core.projection import project
from investment_calculator.core.report import build_report, final_breakdown, summarize
from investment_calculator.tests.helpers import make_params


def test_summary_reflects_final_year():
    rows = project(make_params())
    report = build_report(rows)

    assert report.summary.model_dump() == {
        "totalInvestment": 1300.0,
        "totalInterest": 172.88,
        "finalValue": 1472.88,
        "totalReturnPercent": 13.3,
    }


def test_chart_series_follow_year_order():
    rows = project(make_params())
    chart = build_report(rows).chart

    assert chart.labels == ["Year 1", "Year 2", "Year 3"]
    assert chart.investmentValues == [1150.0, 1307.5, 1472.88]
    assert chart.totalInterest == [50.0, 107.5, 172.88]
    assert chart.investmentCapital == [1100.0, 1200.0, 1300.0]


def test_breakdown_splits_final_value():
    rows = project(make_params())
    breakdown = final_breakdown(rows)

    assert [(item.label, item.amount, item.percent) for item in breakdown] == [
        ("Investment Capital", 1300.0, 88.3),
        ("Total Interest", 172.88, 11.7),
    ]


def test_empty_projection_reports_zeros():
    report = build_report([])

    assert report.summary.totalInvestment == 0.0
    assert report.summary.totalReturnPercent == 0.0
    assert report.chart.labels == []
    assert report.breakdown == []


def test_zero_value_has_no_breakdown():
    rows = project(
        make_params(
            initialInvestment=0,
            annualContribution=0,
            expectedReturnPercent=10,
            investmentPeriodYears=2,
        )
    )

    assert summarize(rows).totalReturnPercent == 0.0
    assert final_breakdown(rows) == []
