"""
storage_ui.py — Cold Storage Monitoring
----------------------------------------

This Streamlit module shows every cold-storage unit as a card with its latest
IoT sensor sample and lets operators register units and log readings.

- Register a storage unit (name, location, capacity, status)
- Latest temperature / humidity / weight per unit, flagged against the
  cold-chain window
- Log a manual sensor reading for a unit
- Reading history chart per unit

Dependencies:
- Streamlit for UI
- SQLAlchemy session via db.db
- plotly / pandas for the history chart

"""

import pandas as pd
import plotly.express as px
import streamlit as st

from core.schemas import NewSensorReading, NewStorageUnit
from core.storage import (
    OPTIMAL,
    add_sensor_reading,
    add_storage_unit,
    humidity_status,
    latest_readings,
    list_storage_units,
    reading_history,
    temperature_status,
)
from db.db import SessionLocal
from db.storage_model import STORAGE_STATUSES
from tools.ui_tools import (
    format_timestamp,
    read_only_notice,
    run_mutation,
    show_page_error,
    show_pending_toast,
    status_badge,
)

show_pending_toast()

st.subheader("Cold Storage Monitoring")
st.caption("Real-time IoT sensor data")


# --- Add Storage Unit ---
with st.expander("➕ Add Storage Unit", expanded=False):
    if not read_only_notice():
        with st.form("add_storage_unit", clear_on_submit=True):
            name = st.text_input("Unit Name", placeholder="e.g., Cold Storage A")
            location = st.text_input("Location", placeholder="e.g., Warehouse 1, Delhi")
            capacity_kg = st.number_input("Capacity (kg)", min_value=0.0, step=100.0)
            status = st.selectbox("Status", STORAGE_STATUSES, format_func=str.title)
            if st.form_submit_button("Add Storage Unit", use_container_width=True):
                run_mutation(
                    lambda db: add_storage_unit(db, NewStorageUnit(
                        name=name, location=location, capacity_kg=capacity_kg, status=status,
                    )),
                    success="Storage unit added successfully",
                    failure="Failed to add storage unit",
                )


def render_reading(reading):
    if reading is None:
        st.markdown("📡 *No sensor data available*")
        return

    temp_label = temperature_status(reading.temperature_celsius)
    humidity_label = humidity_status(reading.humidity_percent)

    c1, c2, c3 = st.columns(3)
    c1.metric("🌡️ Temperature", f"{reading.temperature_celsius}°C", temp_label,
              delta_color="off" if temp_label == OPTIMAL else "inverse")
    c2.metric("💧 Humidity", f"{reading.humidity_percent}%", humidity_label,
              delta_color="off" if humidity_label == OPTIMAL else "inverse")
    c3.metric("⚖️ Weight", f"{reading.weight_kg if reading.weight_kg is not None else '—'} kg")
    if reading.recorded_at:
        st.caption(f"Last updated: {format_timestamp(reading.recorded_at, '%Y-%m-%d %H:%M:%S')}")


def render_history(unit_id):
    with SessionLocal() as db:
        rows = reading_history(db, unit_id)
    if len(rows) < 2:
        st.caption("Not enough readings to chart yet.")
        return
    df = pd.DataFrame(
        [{"Recorded": r.recorded_at, "Temperature (°C)": r.temperature_celsius,
          "Humidity (%)": r.humidity_percent} for r in rows]
    )
    fig = px.line(df, x="Recorded", y=["Temperature (°C)", "Humidity (%)"], markers=True)
    fig.update_layout(height=260, margin=dict(l=0, r=0, t=10, b=0), legend_title_text="")
    st.plotly_chart(fig, use_container_width=True)


def render_add_reading(unit):
    if read_only_notice():
        return
    with st.form(f"add_reading_{unit.id}", clear_on_submit=True):
        temperature = st.number_input("Temperature (°C)", value=None, step=0.1, format="%.1f",
                                      key=f"temp_{unit.id}")
        humidity = st.number_input("Humidity (%)", value=None, min_value=0.0, max_value=100.0, step=0.1,
                                   format="%.1f", key=f"hum_{unit.id}")
        weight = st.number_input("Weight (kg)", value=None, min_value=0.0, step=0.1, format="%.1f",
                                 key=f"wt_{unit.id}", placeholder="Optional")
        if st.form_submit_button("Add Reading", use_container_width=True):
            run_mutation(
                lambda db: add_sensor_reading(db, NewSensorReading(
                    storage_unit_id=unit.id,
                    temperature_celsius=temperature,
                    humidity_percent=humidity,
                    weight_kg=weight,
                )),
                success="Sensor reading added successfully",
                failure="Failed to add sensor reading",
                rerun=True,
            )


try:
    with SessionLocal() as db:
        units = list_storage_units(db)
        readings = latest_readings(db, [u.id for u in units])

    if not units:
        st.info("No storage units found. Add your first storage unit above.")
        st.stop()

    cols = st.columns(2)
    for i, unit in enumerate(units):
        with cols[i % 2]:
            with st.container(border=True):
                head, badge = st.columns([4, 1])
                with head:
                    st.markdown(f"#### {unit.name}")
                    st.caption(unit.location)
                with badge:
                    status_badge(unit.status)

                load = f"{unit.current_load_kg} / " if unit.current_load_kg is not None else ""
                st.markdown(f"**Capacity:** {load}{unit.capacity_kg} kg")

                render_reading(readings.get(unit.id))

                with st.expander("📈 Reading History"):
                    render_history(unit.id)
                with st.expander("➕ Add Sensor Reading"):
                    render_add_reading(unit)

except Exception as e:
    show_page_error(e)
