import streamlit as st

from config import APP_ICON, APP_TITLE, DEMO_MODE
from disease_catalog import (
    DISCLAIMER,
    DISEASES,
    FIELD_LABELS,
    FIELD_OPTIONS,
    FORM_FIELDS,
    IMPACT_BADGES,
    RISK_LEVEL_MESSAGES,
    get_recommendations,
)
from health_input import NUMERIC_RANGES, HealthInputError
from logger import info, warn
from report import factors_frame, score_chart, summary_frame, to_csv_bytes
from rules_engine import calculate_risk

# ----------------------
# App Config
# ----------------------
st.set_page_config(
    page_title=f"{APP_TITLE} · Disease Risk Analytics",
    page_icon=APP_ICON,
    layout="wide",
)

DEMO_VALUES = dict(
    age=58,
    gender="male",
    height=178,
    weight=98,
    blood_pressure_systolic=142,
    blood_pressure_diastolic=92,
    cholesterol=245,
    heart_rate=104,
    smoking_status="current",
    physical_activity="low",
    family_history="strong",
    diabetes_status="prediabetes",
)

DEFAULT_VALUES = dict(
    age=30,
    gender="female",
    height=165,
    weight=65,
    blood_pressure_systolic=120,
    blood_pressure_diastolic=80,
    cholesterol=180,
    heart_rate=70,
    smoking_status="never",
    physical_activity="moderate",
    family_history="none",
    diabetes_status="none",
)

# ----------------------
# Step state
# ----------------------
if "step" not in st.session_state:
    st.session_state.step = "selection"
    st.session_state.disease = None
    st.session_state.assessment = None


def select_disease(disease_id):
    st.session_state.disease = disease_id
    st.session_state.assessment = None
    st.session_state.step = "form"


def go_back():
    if st.session_state.step == "form":
        st.session_state.step = "selection"
    elif st.session_state.step == "results":
        st.session_state.step = "form"


def restart():
    st.session_state.step = "selection"
    st.session_state.disease = None
    st.session_state.assessment = None


# ----------------------
# Sidebar
# ----------------------
with st.sidebar:
    st.title(f"{APP_ICON} {APP_TITLE}")
    st.caption("Disease Risk Analytics")
    demo_mode = st.toggle("Use Demo Data", value=DEMO_MODE, help="Prefill the form with a high-risk example")
    st.divider()
    st.info(
        "All information is processed locally and not stored anywhere. Not a medical device.",
        icon="⚠️",
    )

step = st.session_state.step
disease = st.session_state.disease

# ----------------------
# Disease Selection
# ----------------------
if step == "selection":
    st.markdown("## Choose Disease to Analyze")
    st.caption("Select a condition to assess your risk factors and get personalized recommendations")

    cols = st.columns(len(DISEASES))
    for col, (disease_id, meta) in zip(cols, DISEASES.items()):
        with col:
            with st.container(border=True):
                st.markdown(f"### {meta['icon']} {meta['card_title']}")
                st.write(meta["card_text"])
                st.button(
                    "Start Assessment",
                    key=f"start_{disease_id}",
                    on_click=select_disease,
                    args=(disease_id,),
                    use_container_width=True,
                )

# ----------------------
# Health Form
# ----------------------
elif step == "form":
    meta = DISEASES[disease]
    st.button("← Back", on_click=go_back)
    st.markdown(f"## {meta['title']}")
    st.caption(meta["description"])

    default = DEMO_VALUES if demo_mode else DEFAULT_VALUES

    with st.form("health_form"):
        st.markdown("**Health Information**")
        values = {}
        c1, c2 = st.columns(2)
        numeric = [f for f in FORM_FIELDS[disease] if f in NUMERIC_RANGES]
        choices = [f for f in FORM_FIELDS[disease] if f in FIELD_OPTIONS]

        for i, field in enumerate(numeric):
            low, high = NUMERIC_RANGES[field]
            col = c1 if i % 2 == 0 else c2
            values[field] = col.number_input(FIELD_LABELS[field], low, high, int(default[field]))

        for i, field in enumerate(choices):
            options = FIELD_OPTIONS[field]
            keys = list(options)
            col = c1 if i % 2 == 0 else c2
            widget = col.selectbox if field == "gender" else col.radio
            values[field] = widget(
                FIELD_LABELS[field],
                keys,
                index=keys.index(default[field]),
                format_func=options.get,
            )

        submitted = st.form_submit_button("Calculate Risk Assessment", use_container_width=True)

    if submitted:
        try:
            assessment = calculate_risk(disease, values)
        except HealthInputError as exc:
            warn(f"[app] rejected {disease} form: {exc}")
            for name, message in exc.errors:
                st.error(f"{FIELD_LABELS.get(name, name)}: {message}")
            st.stop()

        info(f"[app] {disease} assessment: {assessment.risk_score} ({assessment.risk_level})")
        st.session_state.assessment = assessment
        st.session_state.step = "results"
        st.rerun()

# ----------------------
# Results
# ----------------------
elif step == "results":
    meta = DISEASES[disease]
    assessment = st.session_state.assessment

    st.button("← Back", on_click=go_back)
    st.markdown(f"## {meta['name']} Risk Assessment")
    st.caption("Your personalized risk analysis and recommendations")

    level = assessment.risk_level
    c1, c2 = st.columns([1, 2])
    c1.metric("Risk Score", f"{assessment.risk_score}%")
    c1.markdown(f"**{level.upper()} RISK**")
    with c2:
        notice = {"low": st.success, "medium": st.warning, "high": st.error}[level]
        notice(RISK_LEVEL_MESSAGES[level])
        st.altair_chart(score_chart(assessment, disease), use_container_width=True)

    left, right = st.columns(2)
    with left:
        st.markdown("#### Risk Factors Analysis")
        st.caption("Key factors contributing to your risk assessment")
        if not assessment.risk_factors:
            st.write("No notable risk factors found.")
        for factor in assessment.risk_factors:
            with st.container(border=True):
                st.markdown(f"**{factor.name}** · {IMPACT_BADGES[factor.impact]}")
                st.write(f"Current value: {factor.value}")
                st.caption(factor.recommendation)

    with right:
        st.markdown("#### Recommendations")
        st.caption("Lifestyle changes to reduce your risk")
        st.markdown("\n".join(f"- {rec}" for rec in get_recommendations(disease)))

    st.info(f"**Important Disclaimer**  \n{DISCLAIMER}", icon="ℹ️")

    b1, b2, b3 = st.columns(3)
    b1.button("Try Another Assessment", on_click=restart, use_container_width=True)
    b2.download_button(
        "Download Risk Factors (CSV)",
        data=to_csv_bytes(factors_frame(assessment)),
        file_name=f"{disease}_risk_factors.csv",
        mime="text/csv",
        use_container_width=True,
    )
    b3.download_button(
        "Download Summary (CSV)",
        data=to_csv_bytes(summary_frame(disease, assessment)),
        file_name=f"{disease}_risk_summary.csv",
        mime="text/csv",
        use_container_width=True,
    )

st.markdown("---")
st.caption(f"{APP_TITLE} • Built with Streamlit • For educational purposes only. Not medical advice.")
