"""Tests for the closed value sets of the knowledge base."""

import pytest

from openlrae.bok.values import (
    Compatibility,
    ComponentWeight,
    Contribution,
    License,
    LicenseResolution,
    Obsolescence,
    RiskCategory,
    Spreading,
    Trend,
    Verbosity,
    weight_value,
)
from openlrae.errors import InvalidArgument


class TestLicense:
    """Tests for the License value set."""

    def test_project_licenses_exclude_synthetic_markers(self):
        """Synthetic markers are component-only."""
        projects = License.for_projects()
        assert License.UNDEFINED not in projects
        assert License.UNSUPPORTED not in projects
        assert License.FORCED_AS_PROJECT_LICENSE not in projects
        assert len(projects) == 28

    def test_component_licenses_include_everything(self):
        assert len(License.for_components()) == len(License)
        assert License.UNDEFINED in License.for_components()

    def test_resolution(self):
        assert License.MIT.resolution == LicenseResolution.KNOWN
        assert License.UNDEFINED.resolution == LicenseResolution.UNDEFINED
        assert License.UNSUPPORTED.resolution == LicenseResolution.UNSUPPORTED
        assert License.FORCED_AS_PROJECT_LICENSE.resolution == LicenseResolution.FORCED
        assert License.FORCED_AS_PROJECT_LICENSE.is_synthetic
        assert not License.GPL_2_0_ONLY.is_synthetic

    def test_from_spdx_ignores_case(self):
        assert License.from_spdx("mit") == License.MIT
        assert License.from_spdx("apache-2.0") == License.APACHE_2_0
        assert License.from_spdx(" GPL-2.0-only ") == License.GPL_2_0_ONLY

    def test_from_spdx_accepts_member_names(self):
        assert License.from_spdx("LGPL_2_1_OR_LATER") == License.LGPL_2_1_OR_LATER

    def test_from_spdx_rejects_unknown(self):
        with pytest.raises(InvalidArgument):
            License.from_spdx("WTFPL")

    def test_from_spdx_rejects_blank(self):
        with pytest.raises(InvalidArgument):
            License.from_spdx("   ")

    def test_every_license_has_a_full_name(self):
        for lic in License:
            assert lic.full_name


class TestCompatibility:
    """Tests for Compatibility scores."""

    def test_scores(self):
        assert Compatibility.COMPATIBLE.score == 1.0
        assert Compatibility.FORCED_COMPATIBLE.score == 0.95
        assert Compatibility.MOSTLY_COMPATIBLE.score == 0.67
        assert Compatibility.MOSTLY_UNCOMPATIBLE.score == 0.33
        assert Compatibility.UNCOMPATIBLE.score == 0.0
        assert Compatibility.UNKNOWN.score == 0.0
        assert Compatibility.UNSUPPORTED.score == 0.0

    def test_severity_is_complement_of_score(self):
        assert Compatibility.COMPATIBLE.severity == 0.0
        assert Compatibility.MOSTLY_COMPATIBLE.severity == 0.33
        assert Compatibility.MOSTLY_UNCOMPATIBLE.severity == 0.67
        assert Compatibility.UNCOMPATIBLE.severity == 1.0

    def test_acceptable(self):
        acceptable = {c for c in Compatibility if c.is_acceptable}
        assert acceptable == {Compatibility.COMPATIBLE, Compatibility.FORCED_COMPATIBLE}

    def test_all_scores_in_range(self):
        for enum_class in (Compatibility, Obsolescence, Spreading, Trend, Contribution):
            for member in enum_class:
                assert 0.0 <= member.score <= 1.0


class TestObsolescence:
    """Tests for Obsolescence.from_versions."""

    def test_latest_version_is_updated(self):
        assert Obsolescence.from_versions(1, 1) == Obsolescence.UPDATED
        assert Obsolescence.from_versions(3, 3) == Obsolescence.UPDATED

    def test_first_of_many_is_outdated(self):
        assert Obsolescence.from_versions(5, 1) == Obsolescence.OUTDATED
        assert Obsolescence.from_versions(2, 1) == Obsolescence.OUTDATED

    def test_recent_version_is_near_updated(self):
        assert Obsolescence.from_versions(4, 3) == Obsolescence.NEAR_UPDATED

    def test_old_version_is_near_outdated(self):
        assert Obsolescence.from_versions(5, 2) == Obsolescence.NEAR_OUTDATED
        assert Obsolescence.from_versions(6, 3) == Obsolescence.NEAR_OUTDATED

    def test_invalid_versions(self):
        with pytest.raises(InvalidArgument):
            Obsolescence.from_versions(0, 1)
        with pytest.raises(InvalidArgument):
            Obsolescence.from_versions(2, 3)


class TestWeights:
    """Tests for component weights and contribution labels."""

    def test_component_weights(self):
        assert ComponentWeight.LOW.weight == 0.01
        assert ComponentWeight.NEAR_LOW.weight == 0.33
        assert ComponentWeight.NEAR_HIGH.weight == 0.67
        assert ComponentWeight.HIGH.weight == 1.0

    def test_weight_value(self):
        assert weight_value(ComponentWeight.NEAR_HIGH) == 0.67
        assert weight_value(0.5) == 0.5
        assert weight_value(1) == 1.0

    def test_weight_value_rejects_other_types(self):
        with pytest.raises(InvalidArgument):
            weight_value("HIGH")
        with pytest.raises(InvalidArgument):
            weight_value(True)

    def test_closest_contribution(self):
        assert Contribution.closest(0.01) == Contribution.LOW
        assert Contribution.closest(0.4) == Contribution.NEAR_LOW
        assert Contribution.closest(0.8) == Contribution.NEAR_HIGH
        assert Contribution.closest(1.0) == Contribution.HIGH


class TestVerbosity:
    """Tests for report verbosity levels."""

    def test_sections_grow_with_verbosity(self):
        assert Verbosity.ESSENTIAL.sections == ("rootcauses",)
        assert set(Verbosity.ESSENTIAL.sections) < set(Verbosity.RICH.sections)
        assert set(Verbosity.RICH.sections) < set(Verbosity.DETAILED.sections)
        assert "goodthings" not in Verbosity.RICH.sections

    def test_eleven_risk_categories(self):
        assert len(RiskCategory) == 11
