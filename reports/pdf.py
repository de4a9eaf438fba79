from datetime import datetime
from pathlib import Path

from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import (
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from dashboard.builder import Dashboard

OUTPUT_DIR = Path(__file__).parent.parent / "output" / "reports"

HEADER_BACKGROUND = colors.Color(0.9, 0.9, 0.95)
STATUS_COLORS = {
    "Paid": colors.Color(0.1, 0.5, 0.2),
    "Denied": colors.Color(0.8, 0.2, 0.2),
}


def _grid_style(header: bool = True, font_size: int = 9) -> TableStyle:
    commands = [
        ("FONTSIZE", (0, 0), (-1, -1), font_size),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.lightgrey),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
        ("TOPPADDING", (0, 0), (-1, -1), 4),
    ]
    if header:
        commands += [
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("BACKGROUND", (0, 0), (-1, 0), HEADER_BACKGROUND),
        ]
    return TableStyle(commands)


def generate_dashboard_pdf(dashboard: Dashboard, output_dir: Path | None = None) -> Path:
    """Render the dashboard views into a single PDF report."""
    if output_dir is None:
        output_dir = OUTPUT_DIR
    output_dir.mkdir(parents=True, exist_ok=True)

    filename = f"dashboard_{dashboard.variant}_{datetime.now().strftime('%Y%m%d_%H%M%S')}.pdf"
    output_path = output_dir / filename

    doc = SimpleDocTemplate(str(output_path), pagesize=letter,
                            leftMargin=0.75 * inch, rightMargin=0.75 * inch,
                            topMargin=0.75 * inch, bottomMargin=0.75 * inch)

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle("CustomTitle", parent=styles["Title"], fontSize=18, spaceAfter=6)
    heading_style = ParagraphStyle("CustomHeading", parent=styles["Heading2"], fontSize=14,
                                   spaceBefore=16, spaceAfter=8,
                                   textColor=colors.Color(0.2, 0.2, 0.4))
    body_style = styles["BodyText"]
    small_style = ParagraphStyle("Small", parent=body_style, fontSize=8, textColor=colors.grey)

    elements = []

    # --- Title ---
    elements.append(Paragraph("Radiology Analytics Suite", title_style))
    elements.append(Paragraph("Operational, Financial &amp; Regulatory Performance", body_style))
    elements.append(Paragraph(
        f"Variant: {dashboard.variant} | {len(dashboard.records)} studies | "
        f"Generated: {datetime.now().strftime('%B %d, %Y %I:%M %p')}",
        small_style,
    ))
    elements.append(Spacer(1, 12))

    # --- KPI Cards ---
    elements.append(Paragraph("Key Performance Indicators", heading_style))
    kpi_rows = [["Metric", "Value", "Benchmark"]] + [
        [card.title, card.value, card.sub] for card in dashboard.kpi_cards
    ]
    kpi_table = Table(kpi_rows, colWidths=[2.3 * inch, 1.7 * inch, 2.5 * inch])
    kpi_table.setStyle(_grid_style(font_size=10))
    elements.append(kpi_table)

    # --- Modality Volume ---
    if dashboard.modality_chart:
        elements.append(Paragraph("Procedure Volume by Modality", heading_style))
        total = len(dashboard.records)
        modality_rows = [["Modality", "Studies", "Share"]] + [
            [row["name"], str(row["value"]), f"{row['value'] / total:.1%}"]
            for row in dashboard.modality_chart
        ]
        modality_table = Table(modality_rows, colWidths=[2.5 * inch, 1.5 * inch, 2.5 * inch])
        modality_table.setStyle(_grid_style())
        elements.append(modality_table)

    # --- TAT vs Wait Trend ---
    if dashboard.trend:
        elements.append(Paragraph("Operational Efficiency (TAT vs Wait Time)", heading_style))
        trend_rows = [["Point", "Report TAT (min)", "Patient Wait (min)"]] + [
            [p.label, str(p.report_tat), str(p.wait_time)] for p in dashboard.trend
        ]
        trend_table = Table(trend_rows, colWidths=[2 * inch, 2.25 * inch, 2.25 * inch])
        trend_table.setStyle(_grid_style())
        elements.append(trend_table)

    # --- Radiologist Productivity ---
    if dashboard.radiologists:
        elements.append(Paragraph("Radiologist Productivity", heading_style))
        rad_rows = [["Radiologist", "Studies", "Total RVUs", "Avg TAT (min)", "Denials"]] + [
            [r["radiologist"], str(r["studies"]), f"{r['total_rvu']:,.2f}",
             f"{r['avg_report_tat']:.1f}", str(r["denials"])]
            for r in dashboard.radiologists
        ]
        rad_table = Table(rad_rows, colWidths=[1.7 * inch, 1 * inch, 1.3 * inch, 1.3 * inch, 1.2 * inch])
        rad_table.setStyle(_grid_style())
        elements.append(rad_table)

    # --- Monthly Volume ---
    if dashboard.monthly_volume:
        elements.append(Paragraph("Monthly Study Volume", heading_style))
        month_rows = [["Month", "Studies", "Avg TAT (min)"]] + [
            [m["month"], str(m["studies"]), f"{m['avg_report_tat']:.1f}"]
            for m in dashboard.monthly_volume
        ]
        month_table = Table(month_rows, colWidths=[2.5 * inch, 1.5 * inch, 2.5 * inch])
        month_table.setStyle(_grid_style())
        elements.append(month_table)

    # --- Study Log ---
    if dashboard.study_log:
        elements.append(Paragraph("Regulatory Compliance &amp; Quality Logs", heading_style))
        log_rows = [["Study ID", "Modality", "Radiologist", "RVUs", "Status", "Regulatory"]] + [
            [row["study_id"], row["modality"], row["radiologist"], row["rvu"],
             row["status"], row["regulatory"]]
            for row in dashboard.study_log
        ]
        log_table = Table(log_rows, colWidths=[1 * inch, 1 * inch, 1.1 * inch, 0.7 * inch,
                                               0.8 * inch, 1.9 * inch])
        log_style = _grid_style()
        for i, row in enumerate(dashboard.study_log, 1):
            log_style.add("TEXTCOLOR", (4, i), (4, i), STATUS_COLORS[row["status"]])
        log_table.setStyle(log_style)
        elements.append(log_table)

    # --- Disclaimer ---
    elements.append(Spacer(1, 24))
    elements.append(Paragraph(
        "All figures in this report are computed from randomly generated mock study records "
        "and do not describe any real patients, radiologists or claims.",
        ParagraphStyle("Disclaimer", parent=small_style, fontSize=7, textColor=colors.grey)
    ))

    doc.build(elements)
    return output_path
