"""
Valuation Memo PDF

Renders one land + building valuation and its projected series as a
printable memo. Uses ReportLab for deterministic PDF generation (same
memo, same PDF apart from the embedded creation timestamp).

Output Structure:
1. Header (reference, prepared for, property, date)
2. Inputs
3. Current Valuation (land, building, total, per-area figures)
4. Listed Value Comparison (cost-curve policy only)
5. Projection Table (Current, Year 1 .. Year N)
6. Method & Disclaimer
"""

import logging
import re
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import List, Optional, Union

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY, TA_LEFT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas
from reportlab.platypus import (
    HRFlowable,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from core.valuation_engine import (
    BuildingPolicy,
    ErrorKind,
    PropertyValuationEngine,
    ProjectionPoint,
    ValuationError,
    ValuationResult,
)
from utils.formatting import format_currency, format_lakh, format_percent

from .schemas import ValuationMemo


logger = logging.getLogger(__name__)


# =============================================================================
# Report Generation Result Types
# =============================================================================

@dataclass
class ReportSuccess:
    """Returned when PDF generation succeeds."""
    path: Path
    years_projected: int


@dataclass
class ReportValuationFailed:
    """Returned when the memo's parameters cannot be valued."""
    kind: ErrorKind
    parameter: str
    message: str


ReportResult = Union[ReportSuccess, ReportValuationFailed]

# Standard PDF fonts carry no rupee glyph
PDF_SYMBOLS = {
    "INR": "Rs. ",
}

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def report_filename(reference_id: str) -> str:
    """PDF filename for a memo; path separators and leading dots are dropped."""
    slug = _UNSAFE_FILENAME_CHARS.sub("-", reference_id).strip(".-")
    return f"valuation-{slug or 'memo'}.pdf"


POLICY_LABELS = {
    BuildingPolicy.YIELD_BACKED: "Yield-backed (straight-line depreciation)",
    BuildingPolicy.COST_CURVE: "Construction cost curve",
}


# =============================================================================
# Color Palette
# =============================================================================

class Palette:
    """Print-friendly palette: charcoal text on white, navy accent."""
    BLACK = colors.Color(0.1, 0.1, 0.1)
    CHARCOAL = colors.Color(0.2, 0.2, 0.22)
    SLATE = colors.Color(0.35, 0.38, 0.42)
    GRAY = colors.Color(0.5, 0.5, 0.5)
    LIGHT_GRAY = colors.Color(0.85, 0.85, 0.85)
    PALE_GRAY = colors.Color(0.95, 0.95, 0.95)
    WHITE = colors.white

    ACCENT = colors.Color(0.15, 0.25, 0.4)
    ACCENT_LIGHT = colors.Color(0.92, 0.94, 0.97)


# =============================================================================
# Style Configuration
# =============================================================================

def get_report_styles() -> dict:
    """Create paragraph styles for the valuation memo."""
    styles = getSampleStyleSheet()

    styles.add(ParagraphStyle(
        name='MemoBrand',
        parent=styles['Normal'],
        fontSize=10,
        leading=13,
        textColor=Palette.SLATE,
        alignment=TA_LEFT,
        fontName='Helvetica',
        letterSpacing=1.5,
    ))

    styles.add(ParagraphStyle(
        name='MemoTitle',
        parent=styles['Normal'],
        fontSize=20,
        leading=26,
        textColor=Palette.CHARCOAL,
        alignment=TA_LEFT,
        fontName='Helvetica-Bold',
        spaceAfter=6*mm,
    ))

    styles.add(ParagraphStyle(
        name='SectionTitle',
        parent=styles['Normal'],
        fontSize=13,
        leading=17,
        textColor=Palette.CHARCOAL,
        fontName='Helvetica-Bold',
        spaceBefore=18,
        spaceAfter=10,
    ))

    styles['BodyText'].fontSize = 9.5
    styles['BodyText'].leading = 14.25
    styles['BodyText'].textColor = Palette.CHARCOAL
    styles['BodyText'].spaceAfter = 6
    styles['BodyText'].alignment = TA_JUSTIFY
    styles['BodyText'].fontName = 'Helvetica'

    styles.add(ParagraphStyle(
        name='SmallText',
        parent=styles['Normal'],
        fontSize=8,
        leading=12,
        textColor=Palette.GRAY,
        fontName='Helvetica',
        spaceAfter=4,
    ))

    styles.add(ParagraphStyle(
        name='Disclaimer',
        parent=styles['Normal'],
        fontSize=7.5,
        leading=11.25,
        textColor=Palette.GRAY,
        alignment=TA_JUSTIFY,
        fontName='Helvetica',
        spaceBefore=14,
        spaceAfter=6,
    ))

    styles.add(ParagraphStyle(
        name='MetricValue',
        parent=styles['Normal'],
        fontSize=15,
        leading=19,
        textColor=Palette.ACCENT,
        alignment=TA_CENTER,
        fontName='Helvetica-Bold',
    ))

    styles.add(ParagraphStyle(
        name='MetricLabel',
        parent=styles['Normal'],
        fontSize=8,
        leading=10,
        textColor=Palette.SLATE,
        alignment=TA_CENTER,
        fontName='Helvetica',
    ))

    return styles


def _grid_style(header_rows: int = 1) -> TableStyle:
    return TableStyle([
        ('FONTNAME', (0, 0), (-1, header_rows - 1), 'Helvetica-Bold'),
        ('FONTNAME', (0, header_rows), (-1, -1), 'Helvetica'),
        ('FONTSIZE', (0, 0), (-1, -1), 8.5),
        ('BACKGROUND', (0, 0), (-1, header_rows - 1), Palette.CHARCOAL),
        ('TEXTCOLOR', (0, 0), (-1, header_rows - 1), Palette.WHITE),
        ('TEXTCOLOR', (0, header_rows), (-1, -1), Palette.CHARCOAL),
        ('ALIGN', (1, 0), (-1, -1), 'RIGHT'),
        ('ALIGN', (0, 0), (0, -1), 'LEFT'),
        ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
        ('GRID', (0, 0), (-1, -1), 0.5, Palette.LIGHT_GRAY),
        ('TOPPADDING', (0, 0), (-1, -1), 2*mm),
        ('BOTTOMPADDING', (0, 0), (-1, -1), 2*mm),
        ('LEFTPADDING', (0, 0), (-1, -1), 2*mm),
        ('RIGHTPADDING', (0, 0), (-1, -1), 2*mm),
        ('ROWBACKGROUNDS', (0, header_rows), (-1, -1), [Palette.WHITE, Palette.PALE_GRAY]),
    ])


# =============================================================================
# Report Generator Class
# =============================================================================

class ProjectionReportGenerator:
    """
    Generates valuation memo PDFs.

    Usage:
        generator = ProjectionReportGenerator()
        result = generator.generate_report(memo)
    """

    PAGE_WIDTH, PAGE_HEIGHT = A4
    MARGIN_LEFT = 18*mm
    MARGIN_RIGHT = 18*mm
    MARGIN_TOP = 18*mm
    MARGIN_BOTTOM = 22*mm

    # Output directory
    OUTPUT_DIR = Path("reports")

    def __init__(self, output_dir: Optional[Path] = None):
        """Initialize the report generator with styles."""
        self.styles = get_report_styles()
        self.output_dir = Path(output_dir) if output_dir else self.OUTPUT_DIR

    def generate_report(self, memo: ValuationMemo) -> ReportResult:
        """
        Value the memo's parameters and write the memo PDF.

        Args:
            memo: Parameters plus presentation details

        Returns:
            ReportSuccess with path if the PDF was written
            ReportValuationFailed if the parameters cannot be valued
        """
        try:
            pdf_bytes, years_projected = self._render(memo)
        except ValuationError as e:
            logger.warning("Valuation memo %s not generated: %s", memo.reference_id, e)
            return ReportValuationFailed(kind=e.kind, parameter=e.parameter, message=e.message)

        self.output_dir.mkdir(parents=True, exist_ok=True)
        output_path = self.output_dir / report_filename(memo.reference_id)
        output_path.write_bytes(pdf_bytes)

        return ReportSuccess(path=output_path, years_projected=years_projected)

    def generate_to_buffer(self, memo: ValuationMemo) -> bytes:
        """
        Generate PDF and return as bytes (for testing or streaming).

        Raises:
            ValuationError: If the parameters cannot be valued
        """
        pdf_bytes, _ = self._render(memo)
        return pdf_bytes

    def _render(self, memo: ValuationMemo):
        engine = PropertyValuationEngine(memo.policy, memo.years_to_project)
        result, projection = engine.valuate(memo.parameters)

        buffer = BytesIO()
        self._build_document(memo, result, projection, buffer)
        return buffer.getvalue(), len(projection) - 1

    def _money(self, memo: ValuationMemo, amount: int) -> str:
        return format_currency(amount, memo.currency, PDF_SYMBOLS.get(memo.currency))

    def _build_document(
        self,
        memo: ValuationMemo,
        result: ValuationResult,
        projection: List[ProjectionPoint],
        buffer: BytesIO,
    ):
        """Build the complete PDF document."""
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            leftMargin=self.MARGIN_LEFT,
            rightMargin=self.MARGIN_RIGHT,
            topMargin=self.MARGIN_TOP,
            bottomMargin=self.MARGIN_BOTTOM,
            title=f"Valuation Memo - {memo.reference_id}",
            subject="Land and building valuation with projection",
        )

        story = []
        story.extend(self._build_header(memo))
        story.extend(self._build_inputs(memo))
        story.extend(self._build_current_valuation(memo, result))
        if result.listed_property_value is not None:
            story.extend(self._build_listed_comparison(memo, result))
        story.extend(self._build_projection_table(memo, projection))
        story.extend(self._build_method_disclaimer(memo))

        doc.build(
            story,
            onFirstPage=self._draw_page_frame,
            onLaterPages=self._draw_page_frame,
        )

    # =========================================================================
    # Page Drawing
    # =========================================================================

    def _draw_page_frame(self, canvas_obj: canvas.Canvas, doc):
        """Draw footer: reference left, page number right."""
        canvas_obj.saveState()
        canvas_obj.setFont('Helvetica', 7)
        canvas_obj.setFillColor(Palette.GRAY)

        canvas_obj.drawString(
            self.MARGIN_LEFT,
            self.MARGIN_BOTTOM - 10*mm,
            "VALUATION MEMO",
        )
        canvas_obj.drawRightString(
            self.PAGE_WIDTH - self.MARGIN_RIGHT,
            self.MARGIN_BOTTOM - 10*mm,
            f"{doc.page}",
        )
        canvas_obj.restoreState()

    # =========================================================================
    # Sections
    # =========================================================================

    def _build_header(self, memo: ValuationMemo) -> list:
        elements = [
            Paragraph("PROPERTY VALUATION", self.styles['MemoBrand']),
            Spacer(1, 4*mm),
            Paragraph("Land &amp; Building Valuation Memo", self.styles['MemoTitle']),
        ]

        details = [
            ["Reference", memo.reference_id],
            ["Prepared for", memo.prepared_for or "-"],
            ["Property", memo.property_label or "-"],
            ["City", memo.city or "-"],
            ["Date", memo.report_date],
            ["Building policy", POLICY_LABELS[memo.policy]],
        ]
        table = Table(details, colWidths=[40*mm, 134*mm])
        table.setStyle(TableStyle([
            ('FONTNAME', (0, 0), (0, -1), 'Helvetica-Bold'),
            ('FONTNAME', (1, 0), (1, -1), 'Helvetica'),
            ('FONTSIZE', (0, 0), (-1, -1), 9),
            ('TEXTCOLOR', (0, 0), (0, -1), Palette.SLATE),
            ('TEXTCOLOR', (1, 0), (1, -1), Palette.CHARCOAL),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 1.5*mm),
        ]))
        elements.append(table)
        elements.append(Spacer(1, 4*mm))
        elements.append(HRFlowable(width="100%", thickness=0.5, color=Palette.LIGHT_GRAY))
        return elements

    def _build_inputs(self, memo: ValuationMemo) -> list:
        params = memo.parameters
        unit = memo.area_unit
        rows = [
            ["Input", "Value"],
            ["Monthly rent", self._money(memo, params.monthly_rent)],
            [f"Land price (per {unit})", self._money(memo, params.land_unit_price)],
            [f"Built-up area ({unit})", f"{params.built_up_area:,g}"],
            ["Current FSI", f"{params.density_ratio:g}"],
            ["Expected future FSI", f"{params.future_density_ratio:g}"],
            ["Rental yield", format_percent(params.current_yield)],
            ["Building age (years)", f"{params.building_age:g}"],
            ["Land price inflation", format_percent(params.land_inflation_rate)],
        ]
        if memo.policy is BuildingPolicy.COST_CURVE:
            rows.append([
                f"New construction cost (per {unit})",
                self._money(memo, params.new_construction_cost),
            ])
            rows.append([
                "Construction cost inflation",
                format_percent(params.construction_inflation_rate),
            ])

        table = Table(rows, colWidths=[100*mm, 74*mm])
        table.setStyle(_grid_style())
        return [
            Paragraph("Inputs", self.styles['SectionTitle']),
            table,
        ]

    def _build_current_valuation(self, memo: ValuationMemo, result: ValuationResult) -> list:
        elements = [Paragraph("Current Valuation", self.styles['SectionTitle'])]

        metrics = [
            [
                Paragraph(self._money(memo, result.land_value), self.styles['MetricValue']),
                Paragraph(self._money(memo, result.building_value), self.styles['MetricValue']),
                Paragraph(self._money(memo, result.total_value), self.styles['MetricValue']),
            ],
            [
                Paragraph("Land Value", self.styles['MetricLabel']),
                Paragraph("Building Value", self.styles['MetricLabel']),
                Paragraph("Total Property Value", self.styles['MetricLabel']),
            ],
            [
                Paragraph(
                    f"{self._money(memo, result.land_value_per_area)}/{memo.area_unit}",
                    self.styles['MetricLabel'],
                ),
                Paragraph(
                    f"{self._money(memo, result.building_value_per_area)}/{memo.area_unit}",
                    self.styles['MetricLabel'],
                ),
                Paragraph(
                    f"{self._money(memo, result.total_value_per_area)}/{memo.area_unit}",
                    self.styles['MetricLabel'],
                ),
            ],
        ]
        table = Table(metrics, colWidths=[58*mm, 58*mm, 58*mm])
        table.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, -1), Palette.ACCENT_LIGHT),
            ('BOX', (0, 0), (-1, -1), 0.5, Palette.LIGHT_GRAY),
            ('TOPPADDING', (0, 0), (-1, 0), 4*mm),
            ('BOTTOMPADDING', (0, -1), (-1, -1), 4*mm),
        ]))
        elements.append(table)
        elements.append(Spacer(1, 3*mm))
        elements.append(Paragraph(
            f"Land area: {result.land_area:,} {memo.area_unit} "
            f"(built-up area divided by FSI, rounded up).",
            self.styles['SmallText'],
        ))
        return elements

    def _build_listed_comparison(self, memo: ValuationMemo, result: ValuationResult) -> list:
        premium = result.premium_or_discount
        verdict = "premium to" if premium >= 0 else "discount to"
        rows = [
            ["Comparison", "Value"],
            ["Land + building (cost basis)", self._money(memo, result.total_value)],
            ["Listed value (rent / yield)", self._money(memo, result.listed_property_value)],
            ["Premium / (discount)", self._money(memo, premium)],
        ]
        table = Table(rows, colWidths=[100*mm, 74*mm])
        table.setStyle(_grid_style())
        return [
            Paragraph("Listed Value Comparison", self.styles['SectionTitle']),
            table,
            Spacer(1, 3*mm),
            Paragraph(
                f"The cost-basis valuation stands at a {verdict} the value implied "
                f"by capitalising current rent at "
                f"{format_percent(memo.parameters.current_yield)}.",
                self.styles['BodyText'],
            ),
        ]

    def _build_projection_table(self, memo: ValuationMemo, projection: List[ProjectionPoint]) -> list:
        rows = [["Year", "Land", "Building", "Total", "Annual Rent"]]
        for point in projection:
            rows.append([
                point.label,
                self._money(memo, point.land_value),
                self._money(memo, point.building_value),
                self._money(memo, point.total_value),
                self._money(memo, point.rental_value),
            ])

        table = Table(
            rows,
            colWidths=[24*mm, 38*mm, 38*mm, 40*mm, 34*mm],
            repeatRows=1,
        )
        table.setStyle(_grid_style())

        final = projection[-1]
        symbol = PDF_SYMBOLS.get(memo.currency, "")
        return [
            Paragraph("Projection", self.styles['SectionTitle']),
            Paragraph(
                f"Total value reaches {format_lakh(final.total_value, symbol=symbol)} "
                f"by {final.label.lower()}.",
                self.styles['BodyText'],
            ),
            Spacer(1, 2*mm),
            table,
        ]

    def _build_method_disclaimer(self, memo: ValuationMemo) -> list:
        if memo.policy is BuildingPolicy.COST_CURVE:
            building_method = (
                "Building value follows the construction cost curve: the cost of "
                "building new halves over the first 15 years, halves again by year 40 "
                "and reaches zero at 60 years, compounded by construction cost "
                "inflation. Rent moves with the ratio of future to current "
                "construction cost, grown at the land inflation rate."
            )
        else:
            building_method = (
                "Building value is the rent capitalised at the current yield, "
                "depreciated in a straight line over a 60-year lifespan and never "
                "below zero. Rent is held flat."
            )

        return [
            Paragraph("Method", self.styles['SectionTitle']),
            Paragraph(
                "Land value compounds at the land inflation rate. Any expected "
                "FSI increase adds a bonus that grows linearly at one tenth of the "
                "additional buildable value per year.",
                self.styles['BodyText'],
            ),
            Paragraph(building_method, self.styles['BodyText']),
            Paragraph(
                "This memo is produced by a fixed formula model for illustration. "
                "It is not a market appraisal and all figures are indicative.",
                self.styles['Disclaimer'],
            ),
        ]


# =============================================================================
# Convenience Function
# =============================================================================

def generate_report(memo: ValuationMemo, output_dir: Optional[Path] = None) -> ReportResult:
    """
    Generate a valuation memo PDF.

    Example:
        from reporting import generate_report
        from reporting.schemas import create_sample_memo

        result = generate_report(create_sample_memo())

        if isinstance(result, ReportSuccess):
            print(f"Report generated: {result.path}")
        else:
            print(result.message)
    """
    generator = ProjectionReportGenerator(output_dir)
    return generator.generate_report(memo)
