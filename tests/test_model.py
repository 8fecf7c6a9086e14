"""Tests for the project data model."""

import pytest

from openlrae.bok.values import ComponentWeight, Contribution, License, LinkType, Redistribution
from openlrae.errors import InvalidArgument
from openlrae.model import Component, ComponentBinding, Project


def _binding(license=License.MIT, link=LinkType.DYNAMIC, weight=ComponentWeight.HIGH, name="lib"):
    return ComponentBinding(Component(name, "1.0", license), link, weight)


class TestComponent:
    """Tests for Component."""

    def test_blank_name_rejected(self):
        with pytest.raises(InvalidArgument):
            Component("  ", "1.0", License.MIT)

    def test_null_version_rejected(self):
        with pytest.raises(InvalidArgument):
            Component("lib", None, License.MIT)

    def test_license_must_be_a_license(self):
        with pytest.raises(InvalidArgument):
            Component("lib", "1.0", "MIT")


class TestComponentBinding:
    """Tests for ComponentBinding."""

    def test_named_weight(self):
        binding = _binding(weight=ComponentWeight.NEAR_LOW)
        assert binding.contribution == 0.33
        assert binding.contribution_label == Contribution.NEAR_LOW

    def test_raw_weight(self):
        binding = _binding(weight=0.5)
        assert binding.contribution == 0.5

    def test_weight_out_of_range(self):
        with pytest.raises(InvalidArgument):
            _binding(weight=0.0)
        with pytest.raises(InvalidArgument):
            _binding(weight=1.5)

    def test_link_required(self):
        with pytest.raises(InvalidArgument):
            _binding(link=None)

    def test_license_comes_from_component(self):
        binding = _binding(license=License.LGPL_2_1_ONLY, link=LinkType.STATIC)
        assert binding.license == License.LGPL_2_1_ONLY


class TestProject:
    """Tests for Project."""

    def setup_method(self):
        self.project = Project(
            name="app",
            version="2.0",
            license=License.APACHE_2_0,
            redistribution=Redistribution.SAAS,
            bindings=[_binding(weight=1.0), _binding(weight=0.5, name="other")],
        )

    def test_requires_bindings(self):
        with pytest.raises(InvalidArgument):
            Project("app", "1.0", License.MIT, Redistribution.NONE, [])

    def test_synthetic_project_license_rejected(self):
        with pytest.raises(InvalidArgument):
            Project("app", "1.0", License.UNDEFINED, Redistribution.NONE, [_binding()])

    def test_redistribution_required(self):
        with pytest.raises(InvalidArgument):
            Project("app", "1.0", License.MIT, None, [_binding()])

    def test_add_license(self):
        self.project.add_license(License.MIT)
        assert self.project.licenses == (License.APACHE_2_0, License.MIT)
        assert self.project.license == License.APACHE_2_0

    def test_add_duplicated_license(self):
        with pytest.raises(InvalidArgument):
            self.project.add_license(License.APACHE_2_0)

    def test_add_synthetic_license(self):
        with pytest.raises(InvalidArgument):
            self.project.add_license(License.FORCED_AS_PROJECT_LICENSE)

    def test_add_binding(self):
        self.project.add_binding(_binding(name="third"))
        assert len(self.project.bindings) == 3
        assert self.project.bindings[-1].component.name == "third"

    def test_add_invalid_binding(self):
        with pytest.raises(InvalidArgument):
            self.project.add_binding(None)

    def test_bindings_cannot_be_mutated_from_outside(self):
        assert isinstance(self.project.bindings, tuple)

    def test_to_dict(self):
        assert self.project.to_dict() == {
            "name": "app",
            "version": "2.0",
            "licenses": ["Apache-2.0"],
            "redistribution": "SAAS",
        }
