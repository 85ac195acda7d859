import streamlit as st
from timecard.api.schemas.payroll import PayRequest
from timecard.config import settings
from timecard.payroll.models import OvertimePolicy
from timecard.ui.api_client import get_client, APIError
from timecard.ui.editing import add_row, review_warnings, set_hour
from timecard.ui.state import (
    get_hours, init_session, reset_hours, set_extraction, set_hours,
)

POLICY_LABELS = {
    OvertimePolicy.STANDARD: "Standard (1.5×)",
    OvertimePolicy.EXTENDED: "Extended (2.5×)",
}

st.set_page_config(page_title="Timecard Pay")
st.title("Timecard Pay")
init_session()
client = get_client()

# --- Settings ---
user_id = st.text_input("User ID")
cols = st.columns(3)
pay_rate = cols[0].number_input("Pay rate", min_value=0.0, value=settings.DEFAULT_PAY_RATE, step=0.01)
tax_percent = cols[1].number_input("Tax %", min_value=0.0, value=0.0, step=0.5)
policy = cols[2].radio(
    "Pay mode", list(OvertimePolicy), format_func=lambda p: POLICY_LABELS[p], horizontal=True,
)

# --- Upload ---
st.subheader("Timecard Screenshot")
upload = st.file_uploader("Screenshot", type=["png", "jpg", "jpeg", "webp"])
if upload is not None:
    st.image(upload)

if st.button("Extract hours", disabled=upload is None):
    if not user_id.strip():
        st.error("User ID is required.")
    else:
        with st.spinner("Reading timecard..."):
            try:
                result = client.parse_timecard(
                    user_id, upload.name, upload.getvalue(), upload.type or "image/jpeg",
                )
            except APIError as e:
                st.error(e.detail)
                if e.raw:
                    st.caption("The model's response could not be read; enter hours manually below.")
                    st.code(e.raw)
            else:
                set_extraction(
                    result.hours,
                    review_warnings(result.hours, result.warnings),
                    result.confidence,
                )

if st.session_state["confidence"] is not None:
    st.caption(f"Extraction confidence: {st.session_state['confidence']:.0%}")
for w in st.session_state["warnings"]:
    st.warning(w)

st.divider()

# --- Hours ---
st.subheader("Hours")
hours = get_hours()
for i, h in enumerate(hours):
    value = st.number_input(f"Day {i + 1}", value=float(h), min_value=0.0, step=0.25, key=f"day_{i}")
    if value != h:
        hours = set_hour(hours, i, value)
set_hours(hours)

cols = st.columns(2)
if cols[0].button("Add row"):
    set_hours(add_row(hours))
    st.rerun()
if cols[1].button("Reset to extracted"):
    reset_hours()
    st.rerun()

st.divider()

# --- Pay ---
st.subheader("Pay")
try:
    pay = client.compute_pay(PayRequest(
        hours=hours,
        pay_rate=pay_rate,
        tax_percent=tax_percent,
        overtime_policy=policy,
        period_threshold_hours=settings.PAYROLL_PERIOD_THRESHOLD,
    ))
except APIError as e:
    st.error(f"Failed to compute pay: {e.detail}")
    st.stop()

st.caption(f"{POLICY_LABELS[policy]} • Threshold {pay.threshold:.1f}h → regular vs overtime")
if pay.rows:
    st.table([
        {"Day": i, "Hours": f"{r.hours:.2f}", "Regular": f"{r.regular_hours:.2f}", "Overtime": f"{r.overtime_hours:.2f}"}
        for i, r in enumerate(pay.rows, 1)
    ])

t = pay.totals
cols = st.columns(3)
cols[0].metric("Regular pay", f"{t.regular_pay:.2f}")
cols[1].metric("Overtime pay", f"{t.overtime_pay:.2f}")
cols[2].metric("Net total", f"{t.net_total:.2f}")
cols = st.columns(3)
cols[0].metric("Regular tax", f"{t.regular_tax:.2f}")
cols[1].metric("Overtime tax", f"{t.overtime_tax:.2f}")
cols[2].metric("Gross", f"{t.gross_subtotal:.2f}")
