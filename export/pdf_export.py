"""Amortization schedule PDF."""
from __future__ import annotations

import io

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from core.presets import DISCLAIMER
from loancalc.loan import Loan

GRID_STYLE = TableStyle(
    [
        ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
        ("BOX", (0, 0), (-1, -1), 1, colors.black),
        ("INNERGRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
    ]
)


def build_schedule_pdf(loan: Loan, schedule: pd.DataFrame, title: str = "Amortization Schedule") -> bytes:
    """Render the loan summary and its month-by-month schedule as PDF bytes."""

    styles = getSampleStyleSheet()
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=LETTER, leftMargin=36, rightMargin=36, topMargin=36, bottomMargin=36)
    story = [Paragraph(f"<b>{title}</b>", styles["Title"]), Spacer(1, 6)]

    summary = [
        ["Loan Summary", ""],
        ["Loan Amount", f"${loan.principal:,.2f}"],
        ["Interest Rate", f"{loan.annual_rate_pct:.3f}%"],
        ["Term", f"{loan.term_periods} months ({loan.term_years:.2f} yrs)"],
        ["Monthly Payment", f"${loan.payment:,.2f}"],
    ]
    if not schedule.empty:
        summary.append(["Total Interest", f"${schedule['Interest'].sum():,.2f}"])
        summary.append(["Total Paid", f"${schedule['Payment'].sum():,.2f}"])
    t = Table(summary, hAlign="LEFT", colWidths=[200, 320])
    t.setStyle(GRID_STYLE)
    story += [t, Spacer(1, 12)]

    if not schedule.empty:
        rows = [list(schedule.columns)]
        for r in schedule.itertuples(index=False):
            rows.append(
                [
                    str(int(r.Period)),
                    f"${r.Payment:,.2f}",
                    f"${r.Interest:,.2f}",
                    f"${r.Principal:,.2f}",
                    f"${r.Balance:,.2f}",
                ]
            )
        t = Table(rows, hAlign="LEFT", repeatRows=1)
        t.setStyle(GRID_STYLE)
        story += [Paragraph("<b>Schedule</b>", styles["Heading3"]), Spacer(1, 6), t]

    story += [Spacer(1, 12), Paragraph(f"<font size=8>{DISCLAIMER}</font>", styles["Normal"])]
    doc.build(story)
    return buf.getvalue()
