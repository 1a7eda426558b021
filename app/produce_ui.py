"""
produce_ui.py — Produce Batch Tracking
---------------------------------------

This Streamlit module registers harvested produce lots and tracks them through
storage with a generated traceability code.

- Register a batch against an active storage unit
- Batch cards with type / status badges and a shelf-life countdown
- Traceability dialog with the batch QR code and a status selector

Dependencies:
- Streamlit for UI
- SQLAlchemy session via db.db
- qrcode (via core.produce) for the traceability QR image

"""

from datetime import date

import streamlit as st

from core.produce import (
    EXPIRED,
    EXPIRING_SOON,
    add_batch,
    batch_qr_png,
    days_remaining,
    expiry_label,
    expiry_status,
    list_batches,
    set_batch_status,
)
from core.schemas import NewProduceBatch
from core.storage import list_storage_units
from db.db import SessionLocal
from db.produce_model import BATCH_STATUSES, PRODUCE_TYPES
from tools.ui_tools import (
    produce_type_badge,
    read_only_notice,
    run_mutation,
    show_page_error,
    show_pending_toast,
    status_badge,
)

show_pending_toast()

st.subheader("Produce Tracking")
st.caption("QR-based traceability system")


@st.dialog("Batch Traceability")
def show_traceability(batch):
    st.image(batch_qr_png(batch.qr_code), width=200)
    st.markdown(f"**{batch.produce_name}**")
    st.code(batch.qr_code, language=None)

    unit = batch.storage_unit
    st.markdown(
        f"**Quantity:** {batch.quantity_kg} kg  \n"
        f"**Harvest Date:** {batch.harvest_date:%Y-%m-%d}  \n"
        f"**Storage:** {unit.name if unit else '—'}  \n"
        f"**Location:** {unit.location if unit else '—'}  \n"
        f"**Farmer:** {batch.farmer_name}  \n"
        f"**Contact:** {batch.farmer_contact}"
    )

    if read_only_notice():
        return
    new_status = st.selectbox(
        "Batch Status", BATCH_STATUSES,
        index=BATCH_STATUSES.index(batch.status) if batch.status in BATCH_STATUSES else 0,
        format_func=lambda s: s.replace("_", " ").title(),
    )
    if st.button("Update Status", disabled=new_status == batch.status, use_container_width=True):
        run_mutation(
            lambda db: set_batch_status(db, batch.id, new_status),
            success=f"Batch marked {new_status.replace('_', ' ')}",
            failure="Failed to update batch status",
            rerun=True,
        )


# --- Register Produce Batch ---
with st.expander("➕ Register Produce Batch", expanded=False):
    if not read_only_notice():
        with SessionLocal() as db:
            active_units = list_storage_units(db, status="active")

        if not active_units:
            st.warning("Add an active storage unit before registering produce.")
        else:
            with st.form("register_batch", clear_on_submit=True):
                unit_labels = {u.id: f"{u.name} - {u.location}" for u in active_units}
                storage_unit_id = st.selectbox("Storage Unit", list(unit_labels), format_func=unit_labels.get)
                c1, c2 = st.columns(2)
                produce_name = c1.text_input("Produce Name", placeholder="e.g., Tomatoes")
                produce_type = c2.selectbox("Produce Type", PRODUCE_TYPES, format_func=str.title)
                quantity_kg = c1.number_input("Quantity (kg)", min_value=0.0, step=10.0)
                harvest_date = c2.date_input("Harvest Date", value=date.today(), max_value=date.today())
                shelf_life = st.number_input("Expected Shelf Life (days)", min_value=1, step=1, value=14)
                c3, c4 = st.columns(2)
                farmer_name = c3.text_input("Farmer Name", placeholder="e.g., Rajesh Kumar")
                farmer_contact = c4.text_input("Farmer Contact", placeholder="e.g., +91 98765 43210")

                if st.form_submit_button("Register Batch", use_container_width=True):
                    run_mutation(
                        lambda db: add_batch(db, NewProduceBatch(
                            storage_unit_id=storage_unit_id,
                            produce_name=produce_name,
                            produce_type=produce_type,
                            quantity_kg=quantity_kg,
                            harvest_date=harvest_date,
                            expected_shelf_life_days=shelf_life,
                            farmer_name=farmer_name,
                            farmer_contact=farmer_contact,
                        )),
                        success="Produce batch registered successfully",
                        failure="Failed to add produce batch",
                    )


def render_expiry(batch):
    days = days_remaining(batch.harvest_date, batch.expected_shelf_life_days)
    status = expiry_status(days)
    label = expiry_label(days)
    if status == EXPIRED:
        st.error(label)
    elif status == EXPIRING_SOON:
        st.warning(label)
    else:
        st.success(label)


try:
    with SessionLocal() as db:
        batches = list_batches(db)

    if not batches:
        st.info("No produce batches registered. Register your first batch above.")
        st.stop()

    cols = st.columns(3)
    for i, batch in enumerate(batches):
        with cols[i % 3]:
            with st.container(border=True):
                head, badge = st.columns([3, 2])
                with head:
                    st.markdown(f"#### {batch.produce_name}")
                    st.caption(batch.storage_unit.name if batch.storage_unit else "Unassigned")
                with badge:
                    status_badge(batch.status)

                kind, qty = st.columns([3, 2])
                with kind:
                    produce_type_badge(batch.produce_type)
                qty.markdown(f"**{batch.quantity_kg} kg**")

                st.markdown(
                    f"📅 Harvested: **{batch.harvest_date:%Y-%m-%d}**  \n"
                    f"🔳 QR Code: `{batch.qr_code}`"
                )
                st.divider()
                st.markdown(f"**Farmer:** {batch.farmer_name}  \n**Contact:** {batch.farmer_contact}")

                render_expiry(batch)

                if st.button("View Traceability", key=f"trace_{batch.id}", use_container_width=True):
                    show_traceability(batch)

except Exception as e:
    show_page_error(e)
