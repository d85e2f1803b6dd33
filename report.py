# report.py
import io

import altair as alt
import pandas as pd

from health_input import check_disease_type
from rules_engine import LEVEL_THRESHOLDS, MAX_SCORE, RiskAssessment

FACTOR_COLUMNS = ["name", "impact", "value", "recommendation"]

LEVEL_COLORS = {
    "low": "#22c55e",
    "medium": "#f59e0b",
    "high": "#ef4444",
}


def factors_frame(assessment: RiskAssessment) -> pd.DataFrame:
    """One row per risk factor, in the order the rules fired."""
    rows = [factor.model_dump() for factor in assessment.risk_factors]
    return pd.DataFrame(rows, columns=FACTOR_COLUMNS)


def summary_frame(disease_type: str, assessment: RiskAssessment) -> pd.DataFrame:
    check_disease_type(disease_type)
    return pd.DataFrame([{
        "disease": disease_type,
        "risk_score": assessment.risk_score,
        "risk_level": assessment.risk_level,
        "factor_count": len(assessment.risk_factors),
    }])


def to_csv_bytes(df: pd.DataFrame) -> bytes:
    """Return DataFrame as downloadable CSV (bytes)."""
    with io.StringIO() as buf:
        df.to_csv(buf, index=False)
        return buf.getvalue().encode("utf-8")


def level_bands(disease_type: str) -> pd.DataFrame:
    """Score ranges of the low, medium and high levels for a disease."""
    check_disease_type(disease_type)
    medium_from, high_from = LEVEL_THRESHOLDS[disease_type]
    return pd.DataFrame([
        {"level": "low", "start": 0, "end": medium_from},
        {"level": "medium", "start": medium_from, "end": high_from},
        {"level": "high", "start": high_from, "end": MAX_SCORE},
    ])


def score_chart(assessment: RiskAssessment, disease_type: str) -> alt.LayerChart:
    """Score marker drawn over the disease's level bands."""
    levels = list(LEVEL_COLORS)
    bands = (
        alt.Chart(level_bands(disease_type)).mark_rect(opacity=0.3).encode(
            x=alt.X("start:Q", title="Risk score", scale=alt.Scale(domain=[0, MAX_SCORE])),
            x2="end:Q",
            color=alt.Color(
                "level:N",
                scale=alt.Scale(domain=levels, range=[LEVEL_COLORS[lvl] for lvl in levels]),
                legend=alt.Legend(title="Risk level"),
            ),
            tooltip=["level:N", "start:Q", "end:Q"],
        )
    )
    marker_df = pd.DataFrame([{"score": assessment.risk_score, "level": assessment.risk_level}])
    marker = (
        alt.Chart(marker_df).mark_rule(size=4, color="#071033").encode(
            x="score:Q",
            tooltip=["score:Q", "level:N"],
        )
    )
    return (bands + marker).properties(height=80)
