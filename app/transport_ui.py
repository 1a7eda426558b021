"""
transport_ui.py — Transport & Logistics
----------------------------------------

This Streamlit module coordinates produce delivery:

- Request transport for a batch that is still in storage
- Request cards with route, scheduled date, vehicle and driver
- Move a request through pending → confirmed → in progress → completed

Dependencies:
- Streamlit for UI
- SQLAlchemy session via db.db

"""

from datetime import date

import streamlit as st

from core.schemas import NewTransportRequest
from core.transport import add_request, list_requests, set_request_status, transportable_batches
from db.db import SessionLocal
from db.transport_model import TRANSPORT_STATUSES
from tools.ui_tools import (
    format_timestamp,
    read_only_notice,
    run_mutation,
    show_page_error,
    show_pending_toast,
    status_badge,
)

show_pending_toast()

st.subheader("Transport & Logistics")
st.caption("Coordinate produce delivery")


# --- Request Transport ---
with st.expander("➕ Request Transport", expanded=False):
    if not read_only_notice():
        with SessionLocal() as db:
            batches = transportable_batches(db)

        if not batches:
            st.warning("No produce batches are currently in storage.")
        else:
            with st.form("request_transport", clear_on_submit=True):
                batch_labels = {b.id: f"{b.produce_name} - {b.quantity_kg} kg" for b in batches}
                batch_id = st.selectbox("Produce Batch", list(batch_labels), format_func=batch_labels.get)
                c1, c2 = st.columns(2)
                from_location = c1.text_input("From Location", placeholder="e.g., Warehouse Delhi")
                to_location = c2.text_input("To Location", placeholder="e.g., Market Mumbai")
                transport_date = st.date_input("Transport Date", value=date.today())
                vehicle_type = st.text_input("Vehicle Type", placeholder="e.g., Refrigerated Truck")
                c3, c4 = st.columns(2)
                driver_name = c3.text_input("Driver Name", placeholder="e.g., Amit Singh")
                driver_contact = c4.text_input("Driver Contact", placeholder="e.g., +91 98765 43210")

                if st.form_submit_button("Create Request", use_container_width=True):
                    run_mutation(
                        lambda db: add_request(db, NewTransportRequest(
                            batch_id=batch_id,
                            from_location=from_location,
                            to_location=to_location,
                            transport_date=transport_date,
                            vehicle_type=vehicle_type,
                            driver_name=driver_name,
                            driver_contact=driver_contact,
                        )),
                        success="Transport request created successfully",
                        failure="Failed to create transport request",
                    )


def render_status_control(request):
    if read_only_notice():
        return
    current = TRANSPORT_STATUSES.index(request.status) if request.status in TRANSPORT_STATUSES else 0
    c1, c2 = st.columns([3, 1], vertical_alignment="bottom")
    new_status = c1.selectbox("Status", TRANSPORT_STATUSES, index=current, key=f"status_{request.id}",
                              format_func=lambda s: s.replace("_", " ").title())
    if c2.button("Save", key=f"save_{request.id}", disabled=new_status == request.status):
        run_mutation(
            lambda db: set_request_status(db, request.id, new_status),
            success="Transport request updated",
            failure="Failed to update transport request",
            rerun=True,
        )


try:
    with SessionLocal() as db:
        requests = list_requests(db)

    if not requests:
        st.info("No transport requests found. Create the first request above.")
        st.stop()

    cols = st.columns(2)
    for i, request in enumerate(requests):
        with cols[i % 2]:
            with st.container(border=True):
                head, badge = st.columns([4, 1])
                with head:
                    batch = request.batch
                    st.markdown(f"#### {batch.produce_name if batch else 'Unlinked batch'}")
                    if batch:
                        st.caption(f"{batch.quantity_kg} kg")
                with badge:
                    status_badge(request.status)

                lines = [
                    f"📍 **Route:** {request.from_location} → {request.to_location}",
                    f"📅 **Scheduled Date:** {request.transport_date:%Y-%m-%d}",
                ]
                if request.vehicle_type:
                    lines.append(f"🚚 **Vehicle Type:** {request.vehicle_type}")
                st.markdown("  \n".join(lines))

                if request.driver_name:
                    st.divider()
                    driver = f"**Driver:** {request.driver_name}"
                    if request.driver_contact:
                        driver += f"  \n**Contact:** {request.driver_contact}"
                    st.markdown(driver)

                render_status_control(request)
                if request.created_at:
                    st.caption(f"Created: {format_timestamp(request.created_at)}")

except Exception as e:
    show_page_error(e)
