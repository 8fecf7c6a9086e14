"""Tests for report rendering."""

import json

import pytest

from openlrae.analysis import AnalysisEngine
from openlrae.analysis.result import RiskAnalysisResult
from openlrae.bok.values import RiskCategory, Verbosity
from openlrae.errors import InvalidArgument
from openlrae.i18n import Language
from openlrae.reporting import report_as_dict, report_as_json, report_as_text
from openlrae.samples import example_project


class TestRiskAnalysisResult:
    """Tests for RiskAnalysisResult."""

    def test_create_rounds_and_multiplies(self):
        result = RiskAnalysisResult.create(RiskCategory.OBSOLETE_PROJECT_LICENSES, 1 / 3, 0.5)
        assert result.exposure == 0.3333
        assert result.value == 0.1667
        assert result.title == "OBSOLETE_PROJECT_LICENSES"

    def test_out_of_range_rejected(self):
        with pytest.raises(InvalidArgument):
            RiskAnalysisResult.create(RiskCategory.OBSOLETE_PROJECT_LICENSES, 1.5, 0.5)

    def test_to_dict_keys(self):
        result = RiskAnalysisResult.create(
            RiskCategory.HETEROGENEOUS_COMPONENTS_LICENSES, 0.5, 0.5,
            root_causes=["r"], warnings=["w"], good_things=["g"], tips=["t"], title="Heterogeneous",
        )
        data = result.to_dict()
        assert data == {
            "risk": "Heterogeneous",
            "riskvalue": 0.25,
            "riskexposure": 0.5,
            "riskimpact": 0.5,
            "rootcauses": ["r"],
            "warnings": ["w"],
            "goodthings": ["g"],
            "tips": ["t"],
        }

    def test_verbosity_filters_sections(self):
        result = RiskAnalysisResult.create(
            RiskCategory.HETEROGENEOUS_COMPONENTS_LICENSES, 0.5, 0.5,
            root_causes=["r"], warnings=["w"], good_things=["g"], tips=["t"],
        )
        essential = result.to_dict(Verbosity.ESSENTIAL)
        assert essential["rootcauses"] == ["r"]
        assert essential["warnings"] == essential["goodthings"] == essential["tips"] == []
        rich = result.to_dict(Verbosity.RICH)
        assert rich["tips"] == ["t"]
        assert rich["goodthings"] == []


class TestReports:
    """Tests for JSON and text reports of the sample project."""

    def setup_method(self):
        self.project = example_project()
        self.results = AnalysisEngine.with_all_analysers(self.project).analyse()

    def test_report_structure(self):
        report = report_as_dict(self.project, self.results)
        assert report["projectinfo"]["name"] == "sample-service"
        assert report["projectinfo"]["licenses"] == ["Apache-2.0", "MIT"]
        assert report["projectinfo"]["redistribution"] == self.project.redistribution.value
        assert len(report["riskanalyses"]) == len(RiskCategory)

    def test_json_report(self):
        data = json.loads(report_as_json(self.project, self.results, Verbosity.ESSENTIAL))
        for analysis in data["riskanalyses"]:
            assert analysis["goodthings"] == []
            assert 0.0 <= analysis["riskvalue"] <= 1.0

    def test_text_report(self):
        text = report_as_text(self.project, self.results)
        assert "Project name: sample-service" in text
        assert "legacy-component-0.9 (LGPL-3.0-or-later)" in text
        assert "Good things" in text

    def test_text_report_respects_verbosity(self):
        text = report_as_text(self.project, self.results, Verbosity.ESSENTIAL)
        assert "Root causes" in text
        assert "Warnings" not in text
        assert "Good things" not in text

    def test_spanish_text_report(self):
        engine = AnalysisEngine.with_all_analysers(self.project, language=Language.SPANISH)
        text = report_as_text(self.project, engine.analyse(), language=Language.SPANISH)
        assert "Nombre del proyecto: sample-service" in text
        assert "Tener licencias del proyecto obsoletas" in text
