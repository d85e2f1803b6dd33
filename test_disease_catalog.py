"""
Tests for the static disease catalog.
"""
import unittest
from typing import Literal, get_args, get_origin

from disease_catalog import (
    DISEASE_RECOMMENDATIONS,
    DISEASES,
    FIELD_LABELS,
    FIELD_OPTIONS,
    FORM_FIELDS,
    GENERAL_RECOMMENDATIONS,
    RISK_LEVEL_MESSAGES,
    get_recommendations,
)
from health_input import DISEASE_TYPES, NUMERIC_RANGES, REQUIRED_FIELDS, HealthInput, UnknownDiseaseError


def literal_values(annotation):
    if get_origin(annotation) is Literal:
        return set(get_args(annotation))
    values = set()
    for arg in get_args(annotation):
        values |= literal_values(arg)
    return values


class TestDiseaseCatalog(unittest.TestCase):

    def test_every_disease_listed(self):
        self.assertEqual(set(DISEASES), set(DISEASE_TYPES))
        self.assertEqual(set(FORM_FIELDS), set(DISEASE_TYPES))
        self.assertEqual(DISEASES["heart"]["name"], "Heart Disease")

    def test_forms_cover_required_fields(self):
        for disease, fields in FORM_FIELDS.items():
            self.assertTrue(set(REQUIRED_FIELDS[disease]) <= set(fields), disease)
        self.assertIn("heart_rate", FORM_FIELDS["heart"])
        self.assertNotIn("cholesterol", FORM_FIELDS["stroke"])

    def test_every_form_field_renderable(self):
        for fields in FORM_FIELDS.values():
            for field in fields:
                self.assertIn(field, FIELD_LABELS)
                self.assertTrue(field in NUMERIC_RANGES or field in FIELD_OPTIONS, field)

    def test_options_match_model(self):
        for field, options in FIELD_OPTIONS.items():
            annotation = HealthInput.model_fields[field].annotation
            self.assertEqual(set(options), literal_values(annotation), field)

    def test_recommendations(self):
        recs = get_recommendations("heart")
        self.assertEqual(len(recs), 9)
        self.assertEqual(recs[:5], GENERAL_RECOMMENDATIONS)
        self.assertEqual(recs[-1], "Quit smoking if applicable")
        self.assertEqual(get_recommendations("stroke")[5], "Control blood pressure")

    def test_recommendations_do_not_leak(self):
        get_recommendations("diabetes").append("extra")
        self.assertEqual(len(GENERAL_RECOMMENDATIONS), 5)
        self.assertEqual(len(DISEASE_RECOMMENDATIONS["diabetes"]), 4)

    def test_unknown_disease(self):
        with self.assertRaises(UnknownDiseaseError):
            get_recommendations("cancer")

    def test_level_messages(self):
        self.assertEqual(set(RISK_LEVEL_MESSAGES), {"low", "medium", "high"})


if __name__ == "__main__":
    unittest.main()
