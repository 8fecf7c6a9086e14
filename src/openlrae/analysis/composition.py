"""Analysers looking at how component licenses relate to each other."""

import logging

from openlrae.analysis.base import Assessment, RiskAnalyser
from openlrae.bok.values import License, LicenseResolution, RiskCategory

logger = logging.getLogger(__name__)


class HeterogeneousComponentsLicensesAnalyser(RiskAnalyser):
    """
    Components released under many different licenses.

    The main license is the one carrying the highest total contribution;
    ties go to the license used by more bindings, then to the one that
    appears first. Bindings under any other license are affected, and the
    severity grows with the number of distinct licenses (1 - 1/n).
    """

    category = RiskCategory.HETEROGENEOUS_COMPONENTS_LICENSES

    def main_license(self) -> License:
        totals = {}
        for position, binding in enumerate(self.project.bindings):
            weight, count, first = totals.get(binding.license, (0.0, 0, position))
            totals[binding.license] = (weight + binding.contribution, count + 1, first)
        return max(totals, key=lambda lic: (totals[lic][0], totals[lic][1], -totals[lic][2]))

    def evaluate(self, assessment: Assessment) -> None:
        msg = self.messages.get
        bindings = self.project.bindings
        distinct = len({binding.license for binding in bindings})
        main = self.main_license()
        severity = 1.0 - 1.0 / distinct

        for binding in bindings:
            fields = {"binding": self.describe(binding), "main_license": main.value}
            if binding.license == main:
                assessment.unaffected(binding.contribution)
                assessment.good_thing(msg("heterogeneous.good", **fields))
            else:
                assessment.affected(binding.contribution, severity)
                assessment.root_cause(msg("heterogeneous.root", **fields))
                assessment.tip(msg("heterogeneous.tip", **fields))

        if distinct > 1:
            logger.debug(f"{self.project.name}: {distinct} licenses, main license {main.value}")
            assessment.warning(msg("heterogeneous.warning.count", count=distinct))
            assessment.warning(msg("heterogeneous.warning.main", main_license=main.value))
            assessment.tip(msg("heterogeneous.tip.general"))


class MisalignedComponentsLicensesAnalyser(RiskAnalyser):
    """Components whose license is not one of the project licenses."""

    category = RiskCategory.COMPONENTS_LICENSES_MISALIGNED_FROM_PROJECT_LICENSES

    def evaluate(self, assessment: Assessment) -> None:
        msg = self.messages.get
        project_licenses = self.project_licenses_text()

        for binding in self.project.bindings:
            fields = {"binding": self.describe(binding), "project_licenses": project_licenses}
            if binding.license in self.project.licenses:
                assessment.unaffected(binding.contribution)
                assessment.good_thing(msg("misaligned.good", **fields))
            elif binding.license.resolution == LicenseResolution.FORCED:
                assessment.unaffected(binding.contribution)
                assessment.good_thing(msg("misaligned.good.forced", **fields))
            else:
                assessment.affected(binding.contribution, 1.0)
                assessment.root_cause(msg("misaligned.root", **fields))
                assessment.tip(msg("misaligned.tip", **fields))

        if assessment.exposure > 0.0:
            assessment.tip(msg("misaligned.tip.general"))
