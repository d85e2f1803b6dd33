"""
Tests for the CSV export and score chart.
"""
import unittest

import altair as alt

from health_input import UnknownDiseaseError
from report import FACTOR_COLUMNS, factors_frame, level_bands, score_chart, summary_frame, to_csv_bytes
from rules_engine import RiskAssessment, RiskFactor

ASSESSMENT = RiskAssessment(
    risk_score=43,
    risk_level="high",
    risk_factors=(
        RiskFactor(name="Age", impact="medium", value="50 years",
                   recommendation="Regular health monitoring becomes more important with age"),
        RiskFactor(name="Body Mass Index", impact="high", value="31.1 kg/m²",
                   recommendation="Maintain a healthy weight through diet and exercise"),
    ),
)


class TestFrames(unittest.TestCase):

    def test_factors_frame(self):
        df = factors_frame(ASSESSMENT)
        self.assertEqual(list(df.columns), FACTOR_COLUMNS)
        self.assertEqual(df["name"].tolist(), ["Age", "Body Mass Index"])
        self.assertEqual(df.loc[1, "impact"], "high")

    def test_empty_factors_frame(self):
        df = factors_frame(RiskAssessment(risk_score=0, risk_level="low"))
        self.assertTrue(df.empty)
        self.assertEqual(list(df.columns), FACTOR_COLUMNS)

    def test_summary_frame(self):
        df = summary_frame("diabetes", ASSESSMENT)
        self.assertEqual(len(df), 1)
        row = df.iloc[0]
        self.assertEqual(row["disease"], "diabetes")
        self.assertEqual(row["risk_score"], 43)
        self.assertEqual(row["risk_level"], "high")
        self.assertEqual(row["factor_count"], 2)

    def test_summary_unknown_disease(self):
        with self.assertRaises(UnknownDiseaseError):
            summary_frame("gout", ASSESSMENT)

    def test_csv_bytes(self):
        text = to_csv_bytes(factors_frame(ASSESSMENT)).decode("utf-8")
        lines = text.splitlines()
        self.assertEqual(lines[0], "name,impact,value,recommendation")
        self.assertEqual(len(lines), 3)
        self.assertIn("31.1 kg/m²", lines[2])


class TestChart(unittest.TestCase):

    def test_level_bands(self):
        bands = level_bands("stroke")
        self.assertEqual(bands["level"].tolist(), ["low", "medium", "high"])
        self.assertEqual(bands["start"].tolist(), [0, 20, 45])
        self.assertEqual(bands["end"].tolist(), [20, 45, 100])

    def test_score_chart(self):
        chart = score_chart(ASSESSMENT, "heart")
        self.assertIsInstance(chart, alt.LayerChart)
        spec = chart.to_dict()
        self.assertEqual(len(spec["layer"]), 2)

    def test_score_chart_unknown_disease(self):
        with self.assertRaises(UnknownDiseaseError):
            score_chart(ASSESSMENT, "flu")


if __name__ == "__main__":
    unittest.main()
