"""
Reporting module for the property valuation engine.

Renders a valuation and its projected series as a printable memo PDF.

Usage:
    from reporting import generate_report
    from reporting.schemas import create_sample_memo

    result = generate_report(create_sample_memo())
"""

from .pdf_generator import (
    ProjectionReportGenerator,
    ReportResult,
    ReportSuccess,
    ReportValuationFailed,
    generate_report,
    report_filename,
)
from .schemas import (
    ValuationMemo,
    create_sample_cost_curve_parameters,
    create_sample_memo,
    create_sample_parameters,
    memo_from_dict,
    parameters_from_dict,
)

__all__ = [
    # Generator
    "ProjectionReportGenerator",
    "ReportResult",
    "ReportSuccess",
    "ReportValuationFailed",
    "generate_report",
    "report_filename",
    # Schemas
    "ValuationMemo",
    "create_sample_cost_curve_parameters",
    "create_sample_memo",
    "create_sample_parameters",
    "memo_from_dict",
    "parameters_from_dict",
]
