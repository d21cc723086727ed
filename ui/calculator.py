import logging

import streamlit as st

from core.presets import FIELD_DEFAULTS, FIELD_LABELS
from core.validation import has_blocking, validate_fields
from loancalc.loan import Unknown, compute_loan

logger = logging.getLogger(__name__)

SELECTOR = [u.value for u in Unknown]


def solve_fields(fields, unknown):
    """Validate raw field text and solve; returns ``(issues, result)``.

    ``result`` is ``None`` when a field blocks the solve.
    """
    values, issues = validate_fields(fields, unknown.value)
    if has_blocking(issues):
        logger.info("Inputs rejected: %s", ", ".join(i.code for i in issues))
        return issues, None
    result = compute_loan(
        unknown,
        principal=values.get("Loan"),
        annual_rate_pct=values.get("Interest"),
        term_years=values.get("Years"),
        payment=values.get("Payment"),
    )
    return issues, result


def render_calculator():
    """Four loan fields; the one selected as unknown is solved and filled in."""
    st.session_state.setdefault("loan_fields", dict(FIELD_DEFAULTS))
    fields = st.session_state.loan_fields
    choice = st.radio(
        "Solve for",
        SELECTOR,
        index=SELECTOR.index(Unknown.PAYMENT.value),
        horizontal=True,
    )
    unknown = Unknown(choice)

    slots = {name: st.empty() for name in FIELD_LABELS}
    for name, label in FIELD_LABELS.items():
        if name != unknown.value:
            fields[name] = slots[name].text_input(label, value=str(fields.get(name, "")))
    st.session_state.loan_fields = fields

    issues, result = solve_fields(fields, unknown)
    st.session_state["loan_result"] = result
    label = FIELD_LABELS[unknown.value]
    for issue in issues:
        if issue.severity == "critical":
            st.error(issue.message)
        else:
            st.info(issue.message)

    if result is None:
        slots[unknown.value].text_input(label, value="", disabled=True)
        return None
    slots[unknown.value].text_input(label, value=result.display, disabled=True)
    if not result.ok:
        st.error(result.message)
        return result

    # switching the selector starts from the solved value
    fields[unknown.value] = result.display.replace(",", "")
    st.caption(f"{label}: {result.display}")
    if unknown is Unknown.TERM:
        st.caption(f"Months: {result.loan.term_periods}")
    if unknown is Unknown.RATE:
        st.caption(f"Search: {result.root.status.value} after {result.root.iterations} iterations")
    return result
