# disease_catalog.py
"""Static text and form layout for each disease the app can assess."""

from health_input import check_disease_type

DISEASES = {
    "diabetes": {
        "name": "Diabetes",
        "icon": "💧",
        "card_title": "Diabetes Risk",
        "card_text": "Predict Type 2 diabetes risk based on lifestyle and health factors",
        "title": "Diabetes Risk Assessment",
        "description": "Please provide your health information for diabetes risk prediction",
    },
    "heart": {
        "name": "Heart Disease",
        "icon": "❤️",
        "card_title": "Heart Disease Risk",
        "card_text": "Assess cardiovascular disease risk using health metrics",
        "title": "Heart Disease Risk Assessment",
        "description": "Please provide your health information for cardiovascular risk prediction",
    },
    "stroke": {
        "name": "Stroke",
        "icon": "🧠",
        "card_title": "Stroke Risk",
        "card_text": "Evaluate stroke probability based on medical indicators",
        "title": "Stroke Risk Assessment",
        "description": "Please provide your health information for stroke risk prediction",
    },
}

# Fields shown on each form, in display order
FORM_FIELDS = {
    "diabetes": [
        "age", "gender", "height", "weight",
        "blood_pressure_systolic", "blood_pressure_diastolic",
        "family_history", "physical_activity",
    ],
    "heart": [
        "age", "gender", "height", "weight",
        "blood_pressure_systolic", "blood_pressure_diastolic",
        "cholesterol", "heart_rate",
        "smoking_status", "physical_activity", "family_history",
    ],
    "stroke": [
        "age", "gender", "height", "weight",
        "blood_pressure_systolic", "blood_pressure_diastolic",
        "smoking_status", "diabetes_status", "family_history",
    ],
}

FIELD_LABELS = {
    "age": "Age (years)",
    "gender": "Gender",
    "height": "Height (cm)",
    "weight": "Weight (kg)",
    "blood_pressure_systolic": "Systolic BP (mmHg)",
    "blood_pressure_diastolic": "Diastolic BP (mmHg)",
    "cholesterol": "Total Cholesterol (mg/dL)",
    "heart_rate": "Resting Heart Rate (bpm)",
    "smoking_status": "Smoking Status",
    "physical_activity": "Physical Activity Level",
    "family_history": "Family History",
    "diabetes_status": "Diabetes Status",
}

# value -> label, in display order
FIELD_OPTIONS = {
    "gender": {"male": "Male", "female": "Female"},
    "smoking_status": {
        "never": "Never smoked",
        "former": "Former smoker",
        "current": "Current smoker",
    },
    "physical_activity": {
        "low": "Low (less than 30 min/week)",
        "moderate": "Moderate (30-150 min/week)",
        "high": "High (more than 150 min/week)",
    },
    "family_history": {
        "none": "No family history",
        "some": "Some family history",
        "strong": "Strong family history",
    },
    "diabetes_status": {
        "none": "No diabetes",
        "prediabetes": "Prediabetes",
        "diabetes": "Type 2 diabetes",
    },
}

GENERAL_RECOMMENDATIONS = [
    "Maintain a balanced diet rich in fruits and vegetables",
    "Exercise regularly (at least 150 minutes per week)",
    "Get adequate sleep (7-9 hours per night)",
    "Manage stress through relaxation techniques",
    "Regular health check-ups with your healthcare provider",
]

DISEASE_RECOMMENDATIONS = {
    "diabetes": [
        "Monitor blood sugar levels regularly",
        "Limit refined carbohydrates and sugary foods",
        "Maintain a healthy weight",
        "Stay hydrated",
    ],
    "heart": [
        "Monitor blood pressure regularly",
        "Limit sodium intake",
        "Include omega-3 rich foods in your diet",
        "Quit smoking if applicable",
    ],
    "stroke": [
        "Control blood pressure",
        "Manage cholesterol levels",
        "Limit alcohol consumption",
        "Take prescribed medications as directed",
    ],
}

RISK_LEVEL_MESSAGES = {
    "low": "Your risk is relatively low. Keep up the healthy lifestyle!",
    "medium": "You have moderate risk. Consider lifestyle improvements.",
    "high": "Higher risk detected. Consult with a healthcare provider.",
}

IMPACT_BADGES = {
    "high": "🔴 High impact",
    "medium": "🟠 Medium impact",
    "low": "🟢 Low impact",
}

DISCLAIMER = (
    "This risk assessment is for educational purposes only and should not replace "
    "professional medical advice. Please consult with a qualified healthcare provider "
    "for proper diagnosis and treatment recommendations."
)


def get_recommendations(disease_type):
    """General lifestyle advice followed by the disease's own list."""
    check_disease_type(disease_type)
    return GENERAL_RECOMMENDATIONS + DISEASE_RECOMMENDATIONS[disease_type]
