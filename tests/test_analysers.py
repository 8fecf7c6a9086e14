"""Tests for the risk analysers."""

import pytest

from openlrae.analysis import (
    ALL_ANALYSERS,
    HeterogeneousComponentsLicensesAnalyser,
    IncompatibleComponentsAnalyser,
    LimitedComponentsLicensesAnalyser,
    LimitedProjectLicensesAnalyser,
    MisalignedComponentsLicensesAnalyser,
    ObsoleteComponentsLicensesAnalyser,
    ObsoleteProjectLicensesAnalyser,
    RiskAnalyser,
    ScarcelySpreadComponentsLicensesAnalyser,
    ScarcelySpreadProjectLicensesAnalyser,
    UnfashionableComponentsLicensesAnalyser,
    UnfashionableProjectLicensesAnalyser,
)
from openlrae.analysis.base import Assessment
from openlrae.bok.values import License, LinkType, Redistribution, RiskCategory
from openlrae.errors import InvalidArgument
from openlrae.model import Component, ComponentBinding, Project

S = LinkType.STATIC
D = LinkType.DYNAMIC


def make_project(licenses, bindings, redistribution=Redistribution.SOFTWARE_PACKAGE):
    """Project from a license list and (name, license, link, weight) tuples."""
    project = Project(
        name="project",
        version="1.0",
        license=licenses[0],
        redistribution=redistribution,
        bindings=[
            ComponentBinding(Component(name, "1.0", lic), link, weight)
            for name, lic, link, weight in bindings
        ],
    )
    for lic in licenses[1:]:
        project.add_license(lic)
    return project


class TestAssessment:
    """Tests for the exposure/impact tally."""

    def test_empty(self):
        assessment = Assessment()
        assert assessment.exposure == 0.0
        assert assessment.impact == 0.0

    def test_weighted_impact(self):
        assessment = Assessment()
        assessment.affected(1.0, 1.0)
        assessment.affected(0.5, 0.4)
        assessment.unaffected(0.5)
        assert assessment.exposure == pytest.approx(0.75)
        assert assessment.impact == pytest.approx(1.2 / 1.5)

    def test_messages_are_not_repeated(self):
        assessment = Assessment()
        assessment.tip("same")
        assessment.tip("same")
        assessment.root_cause("one")
        assert assessment.tips == ["same"]
        assert assessment.root_causes == ["one"]


class TestRiskAnalyserContract:
    """Construction rules shared by every analyser."""

    def test_null_project(self):
        with pytest.raises(InvalidArgument):
            IncompatibleComponentsAnalyser(None)

    def test_not_a_project(self):
        with pytest.raises(InvalidArgument):
            MisalignedComponentsLicensesAnalyser("project")

    def test_abstract_base(self):
        project = make_project([License.MIT], [("a", License.MIT, D, 1.0)])
        with pytest.raises(TypeError):
            RiskAnalyser(project)

    def test_one_analyser_per_category(self):
        categories = [analyser.category for analyser in ALL_ANALYSERS]
        assert categories == list(RiskCategory)

    def test_every_analyser_is_deterministic(self):
        """Two runs over the same project give identical results."""
        project = make_project(
            [License.MIT, License.APACHE_2_0],
            [
                ("a", License.MIT, S, 1.0),
                ("b", License.GPL_2_0_ONLY, D, 0.5),
                ("c", License.UNDEFINED, D, 0.33),
                ("d", License.LGPL_2_1_ONLY, S, 0.67),
            ],
        )
        for analyser_class in ALL_ANALYSERS:
            analyser = analyser_class(project)
            assert analyser.analyse() == analyser.analyse()

    def test_failure_result_is_worst_case(self):
        project = make_project([License.MIT], [("a", License.MIT, D, 1.0)])
        result = ObsoleteProjectLicensesAnalyser(project).failure_result(RuntimeError("boom"))
        assert result.exposure == 1.0
        assert result.impact == 1.0
        assert result.value == 1.0
        assert "boom" in result.root_causes[0]


class TestIncompatibleComponentsAnalyser:
    """Tests for the component/project license incompatibility risk."""

    def test_gpl_component_in_mit_project(self):
        """MIT static 1.0 plus GPL-2.0-only dynamic 0.5, shipped as a package."""
        project = make_project(
            [License.MIT],
            [("component-a", License.MIT, S, 1.0), ("component-b", License.GPL_2_0_ONLY, D, 0.5)],
        )
        result = IncompatibleComponentsAnalyser(project).analyse()

        assert result.category == RiskCategory.COMPONENTS_LICENSES_INCOMPATIBLE_WITH_PROJECT_LICENSES
        assert result.exposure == pytest.approx(0.3333)
        assert result.impact == 1.0
        assert result.value == pytest.approx(0.9333)
        assert any("component-b" in cause for cause in result.root_causes)
        assert not any("component-a" in cause for cause in result.root_causes)
        assert any("component-a" in good for good in result.good_things)

    def test_compatible_binding_has_no_risk(self):
        project = make_project([License.APACHE_2_0], [("a", License.MIT, S, 1.0)])
        result = IncompatibleComponentsAnalyser(project).analyse()
        assert result.exposure == 0.0
        assert result.value == 0.0
        assert result.root_causes == ()

    @pytest.mark.parametrize("weight", [0.01, 0.33, 1.0])
    def test_incompatibility_saturates_regardless_of_weight(self, weight):
        project = make_project(
            [License.MIT],
            [("a", License.MIT, S, 1.0), ("b", License.GPL_3_0_ONLY, D, weight)],
        )
        result = IncompatibleComponentsAnalyser(project).analyse()
        assert result.value >= IncompatibleComponentsAnalyser.SATURATION_FLOOR

    def test_unsupported_license_saturates(self):
        project = make_project([License.MIT], [("a", License.UNSUPPORTED, D, 0.01), ("b", License.MIT, D, 1.0)])
        result = IncompatibleComponentsAnalyser(project).analyse()
        assert result.value >= 0.9
        assert result.warnings

    def test_mostly_uncompatible_does_not_saturate(self):
        project = make_project(
            [License.GPL_2_0_OR_LATER],
            [("apache-lib", License.APACHE_2_0, S, 1.0), ("mit-lib", License.MIT, S, 1.0)],
        )
        result = IncompatibleComponentsAnalyser(project).analyse()
        assert result.exposure == 0.5
        assert result.impact == pytest.approx(0.67)
        assert result.value == pytest.approx(0.335)
        assert any("patent" in warning.lower() for warning in result.warnings)

    def test_undefined_license_is_unknown_risk(self):
        project = make_project([License.MIT], [("a", License.MIT, D, 1.0), ("b", License.UNDEFINED, D, 1.0)])
        result = IncompatibleComponentsAnalyser(project).analyse()
        assert result.exposure == 0.5
        assert result.impact == 1.0
        assert result.value == 0.5

    def test_forced_license_is_acceptable(self):
        project = make_project([License.GPL_3_0_ONLY], [("a", License.FORCED_AS_PROJECT_LICENSE, S, 1.0)])
        result = IncompatibleComponentsAnalyser(project).analyse()
        assert result.value == 0.0
        assert result.warnings

    def test_worst_project_license_counts(self):
        """A binding is affected when any project license conflicts with it."""
        project = make_project(
            [License.MIT, License.GPL_2_0_ONLY],
            [("a", License.APACHE_2_0, D, 1.0)],
        )
        result = IncompatibleComponentsAnalyser(project).analyse()
        assert result.exposure == 1.0
        assert result.value == 1.0

    def test_no_redistribution_has_no_risk(self):
        project = make_project(
            [License.MIT],
            [("a", License.GPL_2_0_ONLY, S, 1.0)],
            redistribution=Redistribution.NONE,
        )
        assert IncompatibleComponentsAnalyser(project).analyse().value == 0.0

    def test_exposure_is_monotonic(self):
        bindings = [("a", License.MIT, D, 1.0), ("b", License.GPL_2_0_ONLY, D, 1.0)]
        base = IncompatibleComponentsAnalyser(make_project([License.MIT], bindings)).analyse()

        more_affected = make_project([License.MIT], bindings + [("c", License.GPL_3_0_ONLY, D, 0.5)])
        more_unaffected = make_project([License.MIT], bindings + [("c", License.BSD_3_CLAUSE, D, 0.5)])

        assert IncompatibleComponentsAnalyser(more_affected).analyse().exposure >= base.exposure
        assert IncompatibleComponentsAnalyser(more_unaffected).analyse().exposure <= base.exposure


class TestLimitedLicensesAnalysers:
    """Tests for the limited choice of project and component licenses."""

    def setup_method(self):
        self.project = make_project([License.MIT], [("a", License.MIT, D, 1.0)])

    def test_limited_project_licenses(self):
        """An MIT component rules out Public-Domain plus the licenses the table does not cover."""
        result = LimitedProjectLicensesAnalyser(self.project).analyse()
        assert result.exposure == pytest.approx(3 / 28, abs=1e-4)
        assert result.impact == 1.0
        assert len(result.good_things) == 25

    def test_limited_project_licenses_with_gpl_component(self):
        project = make_project([License.GPL_3_0_ONLY], [("a", License.GPL_3_0_ONLY, S, 1.0)])
        result = LimitedProjectLicensesAnalyser(project).analyse()
        assert result.exposure > 0.5
        assert any("GPL-3.0-only" in good for good in result.good_things)

    def test_limited_components_licenses(self):
        """AGPL, GPL and uncovered licenses cannot enter an MIT project dynamically."""
        result = LimitedComponentsLicensesAnalyser(self.project).analyse()
        assert result.exposure == pytest.approx(8 / 28, abs=1e-4)
        assert result.impact == 1.0
        assert any("GPL-2.0-only" in cause for cause in result.root_causes)

    def test_no_redistribution_leaves_every_choice_open(self):
        project = make_project([License.MIT], [("a", License.GPL_2_0_ONLY, S, 1.0)], Redistribution.NONE)
        assert LimitedProjectLicensesAnalyser(project).analyse().value == 0.0
        assert LimitedComponentsLicensesAnalyser(project).analyse().value == 0.0


class TestLicensePropertyAnalysers:
    """Tests for the obsolescence, trend and spreading analysers."""

    def test_updated_project_license(self):
        project = make_project([License.MIT], [("a", License.BSD_4_CLAUSE, D, 1.0)])
        result = ObsoleteProjectLicensesAnalyser(project).analyse()
        assert result.exposure == 0.0
        assert result.good_things

    def test_updated_components_have_no_obsolescence(self):
        project = make_project(
            [License.APACHE_2_0],
            [("a", License.MIT, D, 1.0), ("b", License.APACHE_2_0, S, 0.5)],
        )
        assert ObsoleteComponentsLicensesAnalyser(project).analyse().exposure == 0.0

    def test_obsolete_project_license(self):
        """Project licenses weigh the same."""
        project = make_project([License.MIT, License.GPL_2_0_ONLY], [("a", License.MIT, D, 1.0)])
        result = ObsoleteProjectLicensesAnalyser(project).analyse()
        assert result.exposure == 0.5
        assert result.impact == 0.67
        assert result.value == pytest.approx(0.335)

    def test_obsolete_components_licenses(self):
        project = make_project(
            [License.MIT],
            [("a", License.MIT, D, 1.0), ("old", License.BSD_4_CLAUSE, D, 0.5)],
        )
        result = ObsoleteComponentsLicensesAnalyser(project).analyse()
        assert result.exposure == pytest.approx(0.3333)
        assert result.impact == 1.0
        assert any("old" in cause for cause in result.root_causes)

    def test_unfashionable_licenses(self):
        project = make_project(
            [License.GPL_2_0_ONLY],
            [("a", License.GPL_2_0_ONLY, D, 1.0), ("b", License.MIT, D, 1.0)],
        )
        project_result = UnfashionableProjectLicensesAnalyser(project).analyse()
        components_result = UnfashionableComponentsLicensesAnalyser(project).analyse()
        assert project_result.exposure == 1.0
        assert project_result.impact == 1.0
        assert components_result.exposure == 0.5

    def test_scarcely_spread_licenses(self):
        project = make_project([License.CDDL_1_0], [("a", License.CDDL_1_0, S, 1.0)])
        assert ScarcelySpreadProjectLicensesAnalyser(project).analyse().value == 1.0
        assert ScarcelySpreadComponentsLicensesAnalyser(project).analyse().value == 1.0

    def test_synthetic_component_license_warns(self):
        project = make_project([License.MIT], [("mystery", License.UNDEFINED, D, 1.0)])
        result = ScarcelySpreadComponentsLicensesAnalyser(project).analyse()
        assert result.value == 1.0
        assert any("mystery" in warning for warning in result.warnings)


class TestCompositionAnalysers:
    """Tests for heterogeneous and misaligned component licenses."""

    def test_single_license_is_homogeneous(self):
        project = make_project([License.MIT], [("a", License.BSD_3_CLAUSE, D, 1.0), ("b", License.BSD_3_CLAUSE, S, 0.5)])
        result = HeterogeneousComponentsLicensesAnalyser(project).analyse()
        assert result.value == 0.0
        assert result.warnings == ()

    def test_heterogeneous_licenses(self):
        project = make_project(
            [License.MIT],
            [("a", License.MIT, D, 1.0), ("b", License.MIT, D, 0.5), ("c", License.APACHE_2_0, D, 0.5)],
        )
        analyser = HeterogeneousComponentsLicensesAnalyser(project)
        result = analyser.analyse()
        assert analyser.main_license() == License.MIT
        assert result.exposure == 0.25
        assert result.impact == 0.5
        assert result.value == 0.125

    def test_main_license_tie_goes_to_first(self):
        project = make_project(
            [License.MIT],
            [("a", License.APACHE_2_0, D, 0.5), ("b", License.MIT, D, 0.5)],
        )
        assert HeterogeneousComponentsLicensesAnalyser(project).main_license() == License.APACHE_2_0

    def test_misaligned_licenses(self):
        project = make_project(
            [License.MIT],
            [
                ("a", License.MIT, D, 1.0),
                ("b", License.APACHE_2_0, D, 1.0),
                ("c", License.FORCED_AS_PROJECT_LICENSE, D, 1.0),
            ],
        )
        result = MisalignedComponentsLicensesAnalyser(project).analyse()
        assert result.exposure == pytest.approx(0.3333)
        assert result.impact == 1.0
        assert len(result.root_causes) == 1
        assert "b-1.0" in result.root_causes[0]
