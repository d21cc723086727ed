import streamlit as st
from streamlit.components.v1 import html

from core.presets import CURVES
from core.settings import settings
from loancalc.plot import axes_segments, graph_segments
from loancalc.projection import balance_curve, rate_sensitivity_curve


def svg_markup(segments, width, height, axes=None, stroke="#1f77b4"):
    """SVG document stroking device-space ``segments`` on a ``width`` x ``height`` canvas."""
    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">'
    ]
    for seg in axes or []:
        parts.append(
            f'<line x1="{seg.start.x:.2f}" y1="{seg.start.y:.2f}" '
            f'x2="{seg.end.x:.2f}" y2="{seg.end.y:.2f}" stroke="#888" stroke-width="1"/>'
        )
    for seg in segments:
        parts.append(
            f'<line x1="{seg.start.x:.2f}" y1="{seg.start.y:.2f}" '
            f'x2="{seg.end.x:.2f}" y2="{seg.end.y:.2f}" stroke="{stroke}" stroke-width="2"/>'
        )
    parts.append("</svg>")
    return "".join(parts)


def curve_for(kind, loan):
    if kind == "sensitivity":
        return rate_sensitivity_curve(loan.principal, loan.term_periods)
    return balance_curve(loan.principal, loan.annual_rate_pct, loan.payment, loan.term_periods)


def render_graph(result):
    """Plot the balance or rate-sensitivity curve for a solved loan."""
    st.subheader("Graph")
    if result is None or not result.ok:
        st.info("Solve the loan to see its curves.")
        return
    kind = st.radio("Curve", list(CURVES), format_func=CURVES.get, horizontal=True)
    curve = curve_for(kind, result.loan)
    w, h = settings.canvas_width, settings.canvas_height
    segments = graph_segments(curve, w, h)
    if kind == "sensitivity":
        st.caption(f"0% to {curve.max_x():g}% • ${curve.points[0].y:,.2f} to ${curve.max_y():,.2f} per month")
    else:
        st.caption(f"{len(curve) - 1} months • ${result.loan.principal:,.2f} to $0")
    html(svg_markup(segments, w, h, axes=axes_segments(w, h)), height=h + 10)
