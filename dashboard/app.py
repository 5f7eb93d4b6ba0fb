"""Snow Day Calculator — Streamlit front end for the snowday client."""

from __future__ import annotations

import streamlit as st

from snowday import (
    Country,
    DisplayReport,
    NetworkError,
    SchoolType,
    SnowDayClient,
    SnowDayError,
    ValidationError,
)

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Snow Day Calculator",
    page_icon="❄️",
    layout="centered",
)

COUNTRY_LABELS = {
    Country.US: "\U0001f1fa\U0001f1f8 United States",
    Country.CA: "\U0001f1e8\U0001f1e6 Canada",
}
SCHOOL_LABELS = {
    SchoolType.PUBLIC: "Public School",
    SchoolType.PRIVATE: "Private School",
    SchoolType.COLLEGE: "College/University",
}
RISK_COLORS = {"High": "red", "Medium": "orange", "Low": "green"}


# One client per browser session so request sequence numbers are per user
if "client" not in st.session_state:
    st.session_state["client"] = SnowDayClient()
client: SnowDayClient = st.session_state["client"]


# ── Inputs ───────────────────────────────────────────────────────────────────

st.title("❄️ Snow Day Calculator")

col_country, col_code = st.columns(2)
country = col_country.selectbox(
    "Country", list(COUNTRY_LABELS), format_func=COUNTRY_LABELS.get,
)
postal_code = col_code.text_input(
    "ZIP Code" if country is Country.US else "Postal Code",
    placeholder="90210" if country is Country.US else "M5V 3L9",
    max_chars=10 if country is Country.US else 7,
)
school_type = st.selectbox("School Type", list(SCHOOL_LABELS), format_func=SCHOOL_LABELS.get)
allow_sample = st.checkbox("Fall back to sample data if live data is unavailable")


# ── Calculate ────────────────────────────────────────────────────────────────

if st.button("Calculate Snow Day Probability", type="primary", disabled=not postal_code.strip()):
    with st.spinner("Fetching location and weather..."):
        try:
            estimate = client.estimate(postal_code, country, school_type)
        except ValidationError as exc:
            st.error(str(exc))
            st.stop()
        except NetworkError as exc:
            if not allow_sample:
                st.error(f"Unable to get weather data: {exc}")
                st.stop()
            st.warning("Live data unavailable, showing sample data.")
            estimate = client.sample_estimate(postal_code, country, school_type)
        except SnowDayError as exc:
            st.error(str(exc))
            st.stop()
    if client.is_current(estimate.sequence):
        st.session_state["report"] = DisplayReport.from_estimate(estimate)


# ── Result ───────────────────────────────────────────────────────────────────

report: DisplayReport | None = st.session_state.get("report")
if report is None:
    st.stop()

st.markdown(f"# {report.probability}%")
st.markdown(f":{RISK_COLORS[report.risk_level]}[**{report.risk_level} Risk**]")
st.subheader(report.location)
st.caption(f"Coordinates: {report.coordinates}")

cols = st.columns(4)
cols[0].metric("Expected Snowfall", report.snowfall)
cols[1].metric("Current Temp", report.temperature)
cols[2].metric("Low", report.temp_min)
cols[3].metric("High", report.temp_max)

st.info(report.alert)
if report.is_sample:
    st.caption("Sample data: not a real measurement.")
