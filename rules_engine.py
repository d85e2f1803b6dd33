# rules_engine.py
"""
Additive rule tables for diabetes, heart disease and stroke risk.

Each scorer walks its rules in a fixed order, adds the points of every rule
that fires and records a RiskFactor for the ones shown to the user. The
risk level is read from the raw total; only the reported score is capped
at 100.
"""
from typing import Literal, Tuple

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from health_input import (
    HealthInput,
    UnknownDiseaseError,
    check_disease_type,
    parse_health_input,
    require_fields,
)
from logger import debug

Impact = Literal["low", "medium", "high"]
RiskLevel = Literal["low", "medium", "high"]

MAX_SCORE = 100
DEFAULT_HEART_RATE = 70

# (medium from, high from), compared against the uncapped total
LEVEL_THRESHOLDS = {
    "diabetes": (20, 40),
    "heart": (25, 50),
    "stroke": (20, 45),
}


class RiskFactor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    impact: Impact
    value: str
    recommendation: str


class RiskAssessment(BaseModel):
    model_config = ConfigDict(frozen=True)

    risk_score: int = Field(ge=0, le=MAX_SCORE)
    risk_level: RiskLevel
    risk_factors: Tuple[RiskFactor, ...] = ()


def compute_bmi(height_cm, weight_kg):
    """Compute BMI = weight (kg) / height (m^2). A zero height gives inf or nan."""
    h_m = np.float64(height_cm) / 100
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(weight_kg) / (h_m * h_m))


def risk_level(disease_type, score) -> str:
    """Bucket an uncapped score with the disease's thresholds."""
    check_disease_type(disease_type)
    medium_from, high_from = LEVEL_THRESHOLDS[disease_type]
    if score < medium_from:
        return "low"
    if score < high_from:
        return "medium"
    return "high"


def _assessment(disease_type, score, factors) -> RiskAssessment:
    level = risk_level(disease_type, score)
    capped = min(score, MAX_SCORE)
    debug(f"[{disease_type}] raw={score} score={capped} level={level} factors={len(factors)}")
    return RiskAssessment(risk_score=capped, risk_level=level, risk_factors=tuple(factors))


def _bmi_value(bmi):
    return f"{bmi:.1f} kg/m²"


def _bp_value(data: HealthInput):
    return f"{data.blood_pressure_systolic}/{data.blood_pressure_diastolic} mmHg"


def _hypertensive(data: HealthInput):
    return data.blood_pressure_systolic >= 140 or data.blood_pressure_diastolic >= 90


def calculate_diabetes_risk(data: HealthInput) -> RiskAssessment:
    require_fields(data, "diabetes")
    score = 0
    factors = []
    age = data.age
    bmi = compute_bmi(data.height, data.weight)

    # Age
    if age >= 45:
        score += 15
        factors.append(RiskFactor(
            name="Age",
            impact="high" if age >= 65 else "medium",
            value=f"{age} years",
            recommendation="Regular health monitoring becomes more important with age",
        ))

    # BMI
    if bmi >= 25:
        score += 20 if bmi >= 30 else 10
        factors.append(RiskFactor(
            name="Body Mass Index",
            impact="high" if bmi >= 30 else "medium",
            value=_bmi_value(bmi),
            recommendation="Maintain a healthy weight through diet and exercise",
        ))

    # Blood pressure, stage 2 checked before elevated
    if _hypertensive(data):
        score += 15
        factors.append(RiskFactor(
            name="Blood Pressure",
            impact="high",
            value=_bp_value(data),
            recommendation="Monitor blood pressure regularly and consider medication if needed",
        ))
    elif data.blood_pressure_systolic >= 130 or data.blood_pressure_diastolic >= 80:
        score += 8
        factors.append(RiskFactor(
            name="Blood Pressure",
            impact="medium",
            value=_bp_value(data),
            recommendation="Lifestyle changes to reduce blood pressure",
        ))

    # Physical activity
    if data.physical_activity == "low":
        score += 12
        factors.append(RiskFactor(
            name="Physical Activity",
            impact="medium",
            value="Low activity level",
            recommendation="Increase physical activity to at least 150 minutes per week",
        ))

    # Family history
    if data.family_history == "strong":
        score += 18
        factors.append(RiskFactor(
            name="Family History",
            impact="high",
            value="Strong family history",
            recommendation="Regular screening due to genetic predisposition",
        ))
    elif data.family_history == "some":
        score += 8
        factors.append(RiskFactor(
            name="Family History",
            impact="medium",
            value="Some family history",
            recommendation="Monitor health markers regularly",
        ))

    # Men score slightly higher; not listed as a factor
    if data.gender == "male":
        score += 5

    return _assessment("diabetes", score, factors)


def calculate_heart_disease_risk(data: HealthInput) -> RiskAssessment:
    require_fields(data, "heart")
    score = 0
    factors = []
    age = data.age
    bmi = compute_bmi(data.height, data.weight)
    heart_rate = data.heart_rate if data.heart_rate is not None else DEFAULT_HEART_RATE

    # Age
    if age >= 55:
        score += 20
        factors.append(RiskFactor(
            name="Age",
            impact="high" if age >= 70 else "medium",
            value=f"{age} years",
            recommendation="Regular cardiovascular monitoring recommended",
        ))

    # Male sex weighs more at younger ages; not listed as a factor
    if data.gender == "male":
        score += 10 if age < 55 else 5

    # Cholesterol
    if data.cholesterol >= 240:
        score += 15
        factors.append(RiskFactor(
            name="Total Cholesterol",
            impact="high",
            value=f"{data.cholesterol} mg/dL",
            recommendation="Dietary changes and possible medication to lower cholesterol",
        ))
    elif data.cholesterol >= 200:
        score += 8
        factors.append(RiskFactor(
            name="Total Cholesterol",
            impact="medium",
            value=f"{data.cholesterol} mg/dL",
            recommendation="Monitor cholesterol levels and consider dietary changes",
        ))

    # Blood pressure, high tier only
    if _hypertensive(data):
        score += 18
        factors.append(RiskFactor(
            name="Blood Pressure",
            impact="high",
            value=_bp_value(data),
            recommendation="Blood pressure management is crucial for heart health",
        ))

    # Smoking
    if data.smoking_status == "current":
        score += 20
        factors.append(RiskFactor(
            name="Smoking Status",
            impact="high",
            value="Current smoker",
            recommendation="Quitting smoking is the single best thing you can do for your heart",
        ))
    elif data.smoking_status == "former":
        score += 5
        factors.append(RiskFactor(
            name="Smoking History",
            impact="low",
            value="Former smoker",
            recommendation="Continue avoiding tobacco products",
        ))

    # BMI, obese only
    if bmi >= 30:
        score += 12
        factors.append(RiskFactor(
            name="Body Mass Index",
            impact="medium",
            value=_bmi_value(bmi),
            recommendation="Weight management can significantly reduce heart disease risk",
        ))

    # Resting heart rate
    if heart_rate > 100:
        score += 8
        factors.append(RiskFactor(
            name="Resting Heart Rate",
            impact="medium",
            value=f"{heart_rate} bpm",
            recommendation="High resting heart rate may indicate fitness issues",
        ))

    # Physical activity
    if data.physical_activity == "low":
        score += 15
        factors.append(RiskFactor(
            name="Physical Activity",
            impact="medium",
            value="Low activity level",
            recommendation="Regular cardio exercise is essential for heart health",
        ))

    # Family history, strong only
    if data.family_history == "strong":
        score += 15
        factors.append(RiskFactor(
            name="Family History",
            impact="high",
            value="Strong family history",
            recommendation="Genetic factors require more aggressive prevention",
        ))

    return _assessment("heart", score, factors)


def calculate_stroke_risk(data: HealthInput) -> RiskAssessment:
    require_fields(data, "stroke")
    score = 0
    factors = []
    age = data.age
    bmi = compute_bmi(data.height, data.weight)

    # Age
    if age >= 65:
        score += 25
        factors.append(RiskFactor(
            name="Age",
            impact="high",
            value=f"{age} years",
            recommendation="Age is a major stroke risk factor - regular monitoring essential",
        ))
    elif age >= 55:
        score += 15
        factors.append(RiskFactor(
            name="Age",
            impact="medium",
            value=f"{age} years",
            recommendation="Stroke risk increases with age",
        ))

    # Blood pressure, high tier only
    if _hypertensive(data):
        score += 22
        factors.append(RiskFactor(
            name="Blood Pressure",
            impact="high",
            value=_bp_value(data),
            recommendation="High blood pressure is the #1 controllable stroke risk factor",
        ))

    # Diabetes status
    if data.diabetes_status == "diabetes":
        score += 18
        factors.append(RiskFactor(
            name="Diabetes",
            impact="high",
            value="Type 2 diabetes",
            recommendation="Diabetes management is crucial for stroke prevention",
        ))
    elif data.diabetes_status == "prediabetes":
        score += 8
        factors.append(RiskFactor(
            name="Prediabetes",
            impact="medium",
            value="Prediabetes",
            recommendation="Prevent progression to diabetes through lifestyle changes",
        ))

    # Smoking, current only
    if data.smoking_status == "current":
        score += 18
        factors.append(RiskFactor(
            name="Smoking Status",
            impact="high",
            value="Current smoker",
            recommendation="Smoking doubles stroke risk - quitting has immediate benefits",
        ))

    # Family history, strong only and rated medium
    if data.family_history == "strong":
        score += 12
        factors.append(RiskFactor(
            name="Family History",
            impact="medium",
            value="Strong family history",
            recommendation="Genetic predisposition requires preventive measures",
        ))

    # BMI, obese only
    if bmi >= 30:
        score += 10
        factors.append(RiskFactor(
            name="Body Mass Index",
            impact="medium",
            value=_bmi_value(bmi),
            recommendation="Obesity increases stroke risk through multiple mechanisms",
        ))

    return _assessment("stroke", score, factors)


SCORERS = {
    "diabetes": calculate_diabetes_risk,
    "heart": calculate_heart_disease_risk,
    "stroke": calculate_stroke_risk,
}


def calculate_risk(disease_type, data) -> RiskAssessment:
    """
    Score data for one disease.

    disease_type: "diabetes", "heart" or "stroke"; anything else raises
    UnknownDiseaseError before data is looked at.
    data: a HealthInput, or a mapping of form values which is parsed first
    (HealthInputError on bad values).
    """
    check_disease_type(disease_type)
    if not isinstance(data, HealthInput):
        data = parse_health_input(data, disease_type)
    return SCORERS[disease_type](data)
