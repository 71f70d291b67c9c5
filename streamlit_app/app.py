"""Carb Coach — Streamlit dashboard for the fuel engine.

Run with:
    streamlit run streamlit_app/app.py

Data lives in the JSON file named by FUEL_ATHLETE_FILE (see athlete_store.config).
"""

from __future__ import annotations

import logging
from datetime import date

import streamlit as st

from athlete_store import AthleteRepository
from athlete_store.config import (
    ATHLETE_FILE,
    DATA_DIR,
    LOG_FORMAT,
    LOG_LEVEL,
    RECENT_SESSIONS,
)
from fuel_engine.engine import FuelEngine
from fuel_engine.exceptions import InvalidInputError, SaveFailedError
from fuel_engine.models.enums import (
    ExperienceLevel,
    Gender,
    GISensitivity,
    Humidity,
    Intensity,
    Symptom,
    Temperature,
)
from fuel_engine.models.readiness import RuleStatus
from fuel_engine.roster import summarize_roster
from fuel_engine.serialization import race_plan_to_csv

from helpers import (
    STATUS_COLORS,
    STATUS_ICONS,
    build_profile,
    build_session,
    daily_carb_rate_series,
    format_days_until,
    format_duration,
    format_rate,
    load_roster_records,
    option_label,
    parse_symptoms,
    plan_dataframe,
    roster_dataframe,
    sessions_dataframe,
)

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Carb Coach",
    page_icon="🍌",
    layout="wide",
)


# ---------------------------------------------------------------------------
# Cached engine
# ---------------------------------------------------------------------------


@st.cache_resource
def get_engine() -> FuelEngine:
    logger.info("Using athlete file %s", ATHLETE_FILE)
    return FuelEngine(AthleteRepository.from_path(ATHLETE_FILE), recent_sessions=RECENT_SESSIONS)


def _labels(enum_cls) -> list[str]:
    return [m.label for m in enum_cls]


def _render_trace(trace) -> None:
    """Render a ReadinessTrace with one line per rule."""
    icons = {
        RuleStatus.FIRED: "🟢",
        RuleStatus.SKIPPED: "🟠",
        RuleStatus.NOT_APPLICABLE: "⚪",
    }
    for rr in trace.rule_results:
        st.markdown(f"{icons.get(rr.status, '⚪')} **{rr.rule_id}** — _{rr.status.name}_: {rr.explanation}")


engine = get_engine()
st.title("Carb Coach")

tab_dash, tab_assess, tab_log, tab_plan, tab_roster = st.tabs(
    ["Dashboard", "Assessment", "Log Session", "Event Planner", "Coach Roster"]
)

# ---------------------------------------------------------------------------
# Dashboard
# ---------------------------------------------------------------------------

with tab_dash:
    summary = engine.dashboard(date.today())
    report = summary.readiness

    st.subheader(summary.athlete_name or "Welcome")
    st.markdown(
        f'<div style="background:{STATUS_COLORS[report.status]};padding:10px 16px;'
        f'border-radius:6px;font-size:1.2em;">'
        f"{STATUS_ICONS[report.status]} <strong>{report.status_label}</strong></div>",
        unsafe_allow_html=True,
        help=report.explanation,
    )
    st.caption(report.explanation)

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Target", format_rate(summary.target_carb_rate))
    c2.metric("Avg intake", format_rate(report.avg_carb_rate))
    c3.metric("Consistency (7d)", f"{report.consistency_pct}%")
    c4.metric("Event in", format_days_until(summary.days_until_event))

    st.metric("Avg symptom severity", f"{report.avg_symptom_severity:.1f} / 10")

    if summary.session_count:
        st.markdown("**Carb rate progress**")
        sessions = engine.repository.load_sessions()
        st.line_chart(daily_carb_rate_series(sessions))
        st.markdown("**Recent sessions**")
        st.dataframe(sessions_dataframe(summary.recent_sessions), use_container_width=True)

    if summary.latest_plan is not None:
        plan = summary.latest_plan.plan
        st.markdown(f"**Latest race plan:** {plan.race_name} ({format_duration(plan.duration_min)})")

    with st.expander("Why this status?"):
        _render_trace(report.trace)

    st.divider()
    if st.button("Reset all data", type="secondary"):
        try:
            engine.reset()
            st.success("All athlete data cleared.")
            st.rerun()
        except Exception as e:
            logger.error("Reset failed: %s", e)
            st.error(f"Reset failed: {e}")

# ---------------------------------------------------------------------------
# Assessment
# ---------------------------------------------------------------------------

with tab_assess:
    current = engine.repository.load_assessment()
    if current is not None:
        st.info(
            f"Current target: {current.target_carbs_g:.1f} g over "
            f"{format_duration(current.duration_min)} ({format_rate(current.target_carb_rate)}). "
            "Submitting again replaces it."
        )

    with st.form("assessment_form"):
        st.markdown("**Profile**")
        p1, p2 = st.columns(2)
        name = p1.text_input("Name")
        email = p2.text_input("Email")
        age = p1.number_input("Age", min_value=10, max_value=100, value=35)
        weight = p2.number_input("Weight (kg)", min_value=30.0, max_value=200.0, value=70.0)
        height = p1.number_input("Height (cm)", min_value=120.0, max_value=230.0, value=175.0)
        gender = p2.selectbox("Gender", _labels(Gender), index=3, format_func=option_label)
        sport = p1.text_input("Primary sport", value="Running")
        experience = p2.selectbox("Experience", _labels(ExperienceLevel), format_func=option_label)
        events = st.text_input("Target events (comma separated)")

        st.markdown("**Fueling inputs**")
        f1, f2 = st.columns(2)
        duration = f1.number_input("Typical long-session duration (min)", min_value=1, value=120)
        intensity = f2.selectbox("Intensity", _labels(Intensity), index=1, format_func=option_label)
        gi = f1.selectbox("GI issues history", _labels(GISensitivity), format_func=option_label)
        event_date = f2.date_input("Event date", value=None)
        symptoms = st.multiselect("Symptoms experienced", _labels(Symptom), format_func=option_label)

        submitted = st.form_submit_button("Calculate my target", type="primary")

    if submitted:
        profile = build_profile(
            {
                "name": name,
                "email": email,
                "age": age,
                "weight_kg": weight,
                "height_cm": height,
                "gender": gender,
                "primary_sport": sport,
                "experience": experience,
                "target_events": events,
            }
        )
        assessment = None
        try:
            assessment = engine.complete_assessment(
                profile,
                float(duration),
                Intensity.from_label(intensity),
                GISensitivity.from_label(gi),
                parse_symptoms(symptoms),
                event_date,
            )
            st.success("Assessment saved.")
        except InvalidInputError as e:
            st.error(str(e))
        except SaveFailedError as e:
            assessment = e.result
            st.error(f"Your target was calculated but could not be saved: {e}")

        if assessment is not None:
            st.metric("Target carbs", f"{assessment.target_carbs_g:.1f} g")
            for rec in assessment.recommendations:
                st.markdown(f"- {rec}")

# ---------------------------------------------------------------------------
# Session logger
# ---------------------------------------------------------------------------

with tab_log:
    with st.form("session_form", clear_on_submit=True):
        s1, s2 = st.columns(2)
        s_date = s1.date_input("Date", value=date.today())
        s_sport = s2.text_input("Sport", value="Running")
        s_duration = s1.number_input("Duration (min)", min_value=0, value=60)
        s_carbs = s2.number_input("Carbs consumed (g)", min_value=0, value=40)
        s_fluids = s1.number_input("Fluids consumed (ml)", min_value=0, value=500)
        s_symptoms = s2.slider("Symptom severity", 0, 10, 0)
        s_rpe = s1.slider("Perceived exertion", 1, 10, 5)
        s_notes = st.text_area("Notes")
        logged = st.form_submit_button("Log session", type="primary")

    if logged:
        try:
            session = build_session(
                {
                    "date": s_date,
                    "sport": s_sport,
                    "duration_min": s_duration,
                    "carbs_g": s_carbs,
                    "fluids_ml": s_fluids,
                    "symptom_severity": s_symptoms,
                    "perceived_exertion": s_rpe,
                    "notes": s_notes,
                }
            )
            engine.log_session(session)
            st.success(f"Logged {format_duration(session.duration_min)} at {format_rate(session.carb_rate)}.")
        except InvalidInputError as e:
            st.error(str(e))
        except SaveFailedError as e:
            st.error(f"Session could not be saved: {e}")

# ---------------------------------------------------------------------------
# Event planner
# ---------------------------------------------------------------------------

with tab_plan:
    stored = engine.repository.load_assessment()
    default_intensity = stored.intensity.label if stored else Intensity.MODERATE.label

    e1, e2 = st.columns(2)
    race_name = e1.text_input("Race name", value="Goal race")
    race_duration = e2.number_input("Expected duration (min)", min_value=30, value=180)
    aid_km = e1.number_input("Aid station interval (km)", min_value=0.0, value=5.0)
    race_intensity = e2.selectbox(
        "Intensity",
        _labels(Intensity),
        index=_labels(Intensity).index(default_intensity),
        format_func=option_label,
    )
    temperature = e1.selectbox("Temperature", _labels(Temperature), index=1, format_func=option_label)
    humidity = e2.selectbox("Humidity", _labels(Humidity), format_func=option_label)

    if st.button("Generate plan", type="primary"):
        try:
            st.session_state["race_plan"] = engine.plan_race(
                race_name,
                float(race_duration),
                Temperature.from_label(temperature),
                Humidity.from_label(humidity),
                Intensity.from_label(race_intensity),
                aid_km or None,
            )
        except InvalidInputError as e:
            st.error(str(e))

    plan = st.session_state.get("race_plan")
    if plan is not None:
        st.markdown(
            f"**{plan.race_name}** — {format_rate(plan.hourly_carbs_g)}, "
            f"{plan.hourly_fluids_ml:.0f} ml/hr"
        )
        if plan.gi_sensitivity is not None:
            st.caption(f"GI sensitivity: {option_label(plan.gi_sensitivity.label)}")
        st.table(plan_dataframe(plan))

        d1, d2 = st.columns(2)
        d1.download_button(
            "Download CSV",
            data=race_plan_to_csv(plan),
            file_name=f"{plan.race_name.replace(' ', '_')}_fueling.csv",
            mime="text/csv",
        )
        if d2.button("Save plan"):
            try:
                engine.save_race_plan(plan)
                st.success("Plan saved to history.")
            except SaveFailedError as e:
                st.error(f"Plan could not be saved: {e}")

    history = engine.plan_history()
    if history:
        with st.expander(f"Saved plans ({len(history)})"):
            for rec in reversed(history):
                st.markdown(
                    f"- {rec.created_at:%Y-%m-%d} **{rec.plan.race_name}** "
                    f"({format_duration(rec.plan.duration_min)}, {len(rec.plan.blocks)} blocks)"
                )

# ---------------------------------------------------------------------------
# Coach roster
# ---------------------------------------------------------------------------

with tab_roster:
    st.caption(f"Athlete files in {DATA_DIR}")
    entries = summarize_roster(load_roster_records(DATA_DIR), date.today())
    if entries:
        st.dataframe(roster_dataframe(entries), use_container_width=True)
    else:
        st.info("No athlete files found.")
