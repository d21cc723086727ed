import streamlit as st

from export.pdf_export import build_schedule_pdf
from loancalc.projection import amortization_schedule


def render_schedule(result):
    """Month-by-month schedule with CSV and PDF downloads."""
    st.subheader("Amortization Schedule")
    if result is None or not result.ok:
        st.info("Solve the loan to see its schedule.")
        return None
    loan = result.loan
    df = amortization_schedule(loan)
    if df.empty:
        st.caption("Nothing to repay.")
        return df
    st.caption(
        f"Total Interest: ${df['Interest'].sum():,.2f} • Total Paid: ${df['Payment'].sum():,.2f}"
    )
    st.dataframe(df, hide_index=True)
    c1, c2 = st.columns(2)
    c1.download_button(
        "Download CSV",
        data=df.to_csv(index=False).encode("utf-8"),
        file_name="amortization_schedule.csv",
        mime="text/csv",
    )
    c2.download_button(
        "Download PDF",
        data=build_schedule_pdf(loan, df),
        file_name="amortization_schedule.pdf",
        mime="application/pdf",
    )
    return df
