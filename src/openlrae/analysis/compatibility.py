"""Analysers built on the license compatibility table."""

import logging
from typing import Optional

from openlrae.analysis.base import Assessment, RiskAnalyser
from openlrae.bok.compatibility import CompatibilityEntry
from openlrae.bok.values import Compatibility, License, LicenseResolution, RiskCategory
from openlrae.model import ComponentBinding

logger = logging.getLogger(__name__)

# Compatibilities that block a candidate license outright
_BLOCKING = (
    Compatibility.UNCOMPATIBLE,
    Compatibility.UNKNOWN,
    Compatibility.UNSUPPORTED,
    Compatibility.FORCED_COMPATIBLE,
)


class IncompatibleComponentsAnalyser(RiskAnalyser):
    """
    Components whose license cannot live inside the project licenses.

    Legal incompatibility is not diluted by usage share: when any binding is
    UNCOMPATIBLE or UNSUPPORTED the risk value saturates to at least
    SATURATION_FLOOR, keeping exposure x impact as a tie-breaker above it.
    """

    category = RiskCategory.COMPONENTS_LICENSES_INCOMPATIBLE_WITH_PROJECT_LICENSES

    SATURATION_FLOOR = 0.9
    SATURATING = (Compatibility.UNCOMPATIBLE, Compatibility.UNSUPPORTED)

    def evaluate(self, assessment: Assessment) -> None:
        project = self.project
        for binding in project.bindings:
            severity = 0.0
            for project_license in project.licenses:
                entry = self.knowledge.compatibilities.resolve(
                    binding.license, project_license, binding.link, project.redistribution
                )
                self._explain(assessment, binding, entry)
                if not entry.compatibility.is_acceptable:
                    severity = max(severity, entry.compatibility.severity)
                if entry.compatibility in self.SATURATING:
                    assessment.saturated = True

            if severity > 0.0:
                assessment.affected(binding.contribution, severity)
            else:
                assessment.unaffected(binding.contribution)

        if assessment.exposure > 0.0:
            assessment.tip(self.messages.get("incompatible.tip.general.fully_compatible"))
            assessment.tip(self.messages.get("general.tip.static_links"))
            assessment.tip(self.messages.get("general.tip.own_rights"))
        if assessment.saturated:
            assessment.warning(
                self.messages.get("incompatible.warning.saturated", floor=self.SATURATION_FLOOR)
            )

    def combine(self, assessment: Assessment) -> float:
        value = assessment.exposure * assessment.impact
        if assessment.saturated:
            return self.SATURATION_FLOOR + (1.0 - self.SATURATION_FLOOR) * value
        return value

    def _explain(self, assessment: Assessment, binding: ComponentBinding, entry: CompatibilityEntry) -> None:
        fields = {
            "binding": self.describe(binding),
            "project_license": entry.project_license.value,
            "redistribution": self.label(self.project.redistribution),
        }
        msg = self.messages.get
        compatibility = entry.compatibility

        if compatibility == Compatibility.COMPATIBLE:
            assessment.good_thing(msg("incompatible.good.compatible", **fields))
        elif compatibility == Compatibility.FORCED_COMPATIBLE:
            assessment.good_thing(msg("incompatible.good.forced", **fields))
            assessment.warning(msg("incompatible.warning.forced", **fields))
        elif compatibility == Compatibility.MOSTLY_COMPATIBLE:
            assessment.root_cause(msg("incompatible.root.mostly_compatible", **fields))
            assessment.warning(msg("incompatible.warning.mostly", **fields))
            assessment.tip(msg("incompatible.tip.check", **fields))
        elif compatibility == Compatibility.MOSTLY_UNCOMPATIBLE:
            assessment.root_cause(msg("incompatible.root.mostly_uncompatible", **fields))
            assessment.warning(msg("incompatible.warning.mostly", **fields))
            assessment.tip(msg("incompatible.tip.replace", **fields))
        elif compatibility == Compatibility.UNCOMPATIBLE:
            assessment.root_cause(msg("incompatible.root.uncompatible", **fields))
            assessment.tip(msg("incompatible.tip.replace", **fields))
        elif compatibility == Compatibility.UNSUPPORTED:
            assessment.root_cause(msg("incompatible.root.unsupported", **fields))
            assessment.warning(msg("incompatible.warning.unsupported", **fields))
            assessment.tip(msg("incompatible.tip.replace", **fields))
        elif binding.license.resolution == LicenseResolution.UNDEFINED:
            assessment.root_cause(msg("incompatible.root.undefined", **fields))
            assessment.tip(msg("incompatible.tip.clarify", **fields))
        else:
            assessment.root_cause(msg("incompatible.root.unknown", **fields))
            assessment.tip(msg("incompatible.tip.clarify", **fields))

        if entry.warning_key:
            assessment.warning(msg(f"warning.{entry.warning_key}", **fields))


class LimitedProjectLicensesAnalyser(RiskAnalyser):
    """
    How many licenses the project could be released under, given its components.

    Every project-capable license is a candidate; each (candidate, binding)
    pair is one unit weighted by the binding contribution. Mostly-compatible
    pairs count as affected but do not rule the candidate out.
    """

    category = RiskCategory.LIMITED_SET_OF_POTENTIAL_PROJECT_LICENSES

    def evaluate(self, assessment: Assessment) -> None:
        project = self.project
        msg = self.messages.get
        usable = []

        for candidate in License.for_projects():
            can_be_used = True
            for binding in project.bindings:
                entry = self.knowledge.compatibilities.resolve(
                    binding.license, candidate, binding.link, project.redistribution
                )
                severity = self._severity(entry, candidate)
                if severity is None:
                    assessment.unaffected(binding.contribution)
                    continue

                assessment.affected(binding.contribution, severity)
                fields = {
                    "candidate": candidate.value,
                    "binding": self.describe(binding),
                    "compatibility": self.label(entry.compatibility),
                    "redistribution": self.label(project.redistribution),
                }
                if entry.compatibility in _BLOCKING:
                    can_be_used = False
                    assessment.root_cause(msg("limited_project.root.blocked", **fields))
                else:
                    assessment.root_cause(msg("limited_project.root.partial", **fields))
                if entry.compatibility == Compatibility.UNSUPPORTED:
                    assessment.warning(msg("limited_project.warning.unsupported", **fields))
                assessment.tip(msg("limited_project.tip.replace", **fields))

            if can_be_used:
                usable.append(candidate)
                assessment.good_thing(msg(
                    "limited_project.good.usable",
                    candidate=candidate.value,
                    redistribution=self.label(project.redistribution),
                ))

        if not usable:
            assessment.root_cause(msg("limited_project.root.none"))
        if assessment.exposure > 0.0:
            assessment.tip(msg("limited_project.tip.root_causes_first"))
            assessment.tip(msg("limited_project.tip.contribution_first"))
            assessment.tip(msg("limited_project.tip.many_licenses"))
            assessment.tip(msg("general.tip.static_links"))
            assessment.tip(msg("general.tip.permissive"))
            assessment.tip(msg("general.tip.own_rights"))
        logger.debug(f"{len(usable)} potential project licenses for {project.name}")

    def _severity(self, entry: CompatibilityEntry, candidate: License) -> Optional[float]:
        """Severity of a (candidate, binding) pair, None when it is not affected."""
        compatibility = entry.compatibility
        if compatibility == Compatibility.COMPATIBLE:
            return None
        if compatibility == Compatibility.FORCED_COMPATIBLE:
            # The permission only covers the licenses the project already has
            if candidate in self.project.licenses:
                return None
            return 1.0
        return compatibility.severity


class LimitedComponentsLicensesAnalyser(RiskAnalyser):
    """
    How many licenses new components could be released under.

    Candidates are all real licenses, evaluated for every link type the
    project uses. A (candidate, link) unit weighs as much as the bindings
    using that link and is affected unless the candidate is fully compatible
    with every project license.
    """

    category = RiskCategory.LIMITED_SET_OF_POTENTIAL_COMPONENTS_LICENSES

    def evaluate(self, assessment: Assessment) -> None:
        project = self.project
        msg = self.messages.get

        link_weights = {}
        for binding in project.bindings:
            link_weights[binding.link] = link_weights.get(binding.link, 0.0) + binding.contribution

        for link, weight in link_weights.items():
            link_text = self.messages.get(f"link.{link.value}")
            usable = 0
            for candidate in License.for_projects():
                worst: Optional[CompatibilityEntry] = None
                for project_license in project.licenses:
                    entry = self.knowledge.compatibilities.resolve(
                        candidate, project_license, link, project.redistribution
                    )
                    if worst is None or entry.compatibility.severity > worst.compatibility.severity:
                        worst = entry

                if worst.compatibility == Compatibility.COMPATIBLE:
                    usable += 1
                    assessment.unaffected(weight)
                    assessment.good_thing(msg("limited_components.good.usable", candidate=candidate.value, link=link_text))
                    continue

                assessment.affected(weight, worst.compatibility.severity)
                assessment.root_cause(msg(
                    "limited_components.root.blocked",
                    candidate=candidate.value,
                    link=link_text,
                    compatibility=self.label(worst.compatibility),
                    project_license=worst.project_license.value,
                ))

            if usable == 0:
                assessment.root_cause(msg("limited_components.root.none", link=link_text))

        if assessment.exposure > 0.0:
            if len(project.licenses) > 1:
                assessment.tip(msg("limited_components.tip.single_license"))
            assessment.tip(msg("limited_components.tip.permissive_project"))
            assessment.tip(msg("limited_components.tip.dynamic"))
