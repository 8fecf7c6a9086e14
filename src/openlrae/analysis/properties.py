"""Analysers built on per-license obsolescence, trend and spreading."""

from abc import abstractmethod
from enum import Enum

from openlrae.analysis.base import Assessment, RiskAnalyser
from openlrae.bok.values import License, RiskCategory


class ProjectLicensePropertyAnalyser(RiskAnalyser):
    """Rates each project license; every license weighs the same."""

    prefix = ""

    @abstractmethod
    def lookup(self, license: License) -> Enum:
        pass

    def evaluate(self, assessment: Assessment) -> None:
        msg = self.messages.get
        for project_license in self.project.licenses:
            value = self.lookup(project_license)
            fields = {"license": project_license.value, "value": self.label(value)}
            if value.score > 0.0:
                assessment.affected(1.0, value.score)
                assessment.root_cause(msg(f"{self.prefix}.root", **fields))
                assessment.tip(msg(f"{self.prefix}.tip", **fields))
            else:
                assessment.unaffected(1.0)
                assessment.good_thing(msg(f"{self.prefix}.good", **fields))

        if assessment.exposure > 0.0:
            assessment.tip(msg(f"{self.prefix}.tip.general"))


class ComponentLicensePropertyAnalyser(RiskAnalyser):
    """Rates the license of each component binding."""

    prefix = ""

    @abstractmethod
    def lookup(self, license: License) -> Enum:
        pass

    def evaluate(self, assessment: Assessment) -> None:
        msg = self.messages.get
        for binding in self.project.bindings:
            value = self.lookup(binding.license)
            fields = {"binding": self.describe(binding), "value": self.label(value)}
            if value.score > 0.0:
                assessment.affected(binding.contribution, value.score)
                assessment.root_cause(msg(f"{self.prefix}.root", **fields))
                assessment.tip(msg(f"{self.prefix}.tip", **fields))
            else:
                assessment.unaffected(binding.contribution)
                assessment.good_thing(msg(f"{self.prefix}.good", **fields))
            if binding.license.is_synthetic:
                assessment.warning(msg(
                    "property.warning.synthetic",
                    binding=fields["binding"],
                    license=binding.license.full_name,
                ))

        if assessment.exposure > 0.0:
            assessment.tip(msg(f"{self.prefix}.tip.general"))


class ObsoleteProjectLicensesAnalyser(ProjectLicensePropertyAnalyser):
    category = RiskCategory.OBSOLETE_PROJECT_LICENSES
    prefix = "obsolete_project"

    def lookup(self, license):
        return self.knowledge.obsolescences.obsolescence_of(license)


class ObsoleteComponentsLicensesAnalyser(ComponentLicensePropertyAnalyser):
    category = RiskCategory.OBSOLETE_COMPONENTS_LICENSES
    prefix = "obsolete_components"

    def lookup(self, license):
        return self.knowledge.obsolescences.obsolescence_of(license)


class UnfashionableProjectLicensesAnalyser(ProjectLicensePropertyAnalyser):
    category = RiskCategory.UNFASHIONABLE_PROJECT_LICENSES
    prefix = "unfashionable_project"

    def lookup(self, license):
        return self.knowledge.trends.trend_of(license)


class UnfashionableComponentsLicensesAnalyser(ComponentLicensePropertyAnalyser):
    category = RiskCategory.UNFASHIONABLE_COMPONENTS_LICENSES
    prefix = "unfashionable_components"

    def lookup(self, license):
        return self.knowledge.trends.trend_of(license)


class ScarcelySpreadProjectLicensesAnalyser(ProjectLicensePropertyAnalyser):
    category = RiskCategory.SCARCELY_SPREAD_PROJECT_LICENSES
    prefix = "scarce_project"

    def lookup(self, license):
        return self.knowledge.spreadings.spreading_of(license)


class ScarcelySpreadComponentsLicensesAnalyser(ComponentLicensePropertyAnalyser):
    category = RiskCategory.SCARCELY_SPREAD_COMPONENTS_LICENSES
    prefix = "scarce_components"

    def lookup(self, license):
        return self.knowledge.spreadings.spreading_of(license)
