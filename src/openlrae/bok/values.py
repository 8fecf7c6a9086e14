"""Closed value sets of the license knowledge base."""

import logging
from enum import Enum
from typing import Union

from openlrae.errors import InvalidArgument

logger = logging.getLogger(__name__)


def _check_scores(kind: str, scores: dict) -> dict:
    """Reject any score outside [0, 1] when a value set is defined."""
    for member, score in scores.items():
        if not 0.0 <= score <= 1.0:
            logger.error(f"{kind} {member.name} has score {score} outside [0, 1]")
            raise InvalidArgument(f"{kind} score has to be a float between 0.0 and 1.0")
    return scores


class LicenseResolution(str, Enum):
    """What is actually known about the license of a component."""

    KNOWN = "KNOWN"
    UNDEFINED = "UNDEFINED"  # no license declared at all
    UNSUPPORTED = "UNSUPPORTED"  # declared, but not modeled here
    FORCED = "FORCED"  # written permission to adopt the project license


class License(str, Enum):
    """Licenses understood by the knowledge base, valued by SPDX identifier."""

    AFL_3_0 = "AFL-3.0"
    AGPL_3_0_ONLY = "AGPL-3.0-only"
    AGPL_3_0_OR_LATER = "AGPL-3.0-or-later"
    APACHE_1_1 = "Apache-1.1"
    APACHE_2_0 = "Apache-2.0"
    ARTISTIC_2_0 = "Artistic-2.0"
    BSD_2_CLAUSE = "BSD-2-Clause"
    BSD_3_CLAUSE = "BSD-3-Clause"
    BSD_4_CLAUSE = "BSD-4-Clause"
    CDDL_1_0 = "CDDL-1.0"
    CPL_1_0 = "CPL-1.0"
    EDL_1_0 = "EDL-1.0"
    EPL_1_0 = "EPL-1.0"
    EPL_2_0 = "EPL-2.0"
    EUPL_1_1 = "EUPL-1.1"
    EUPL_1_2 = "EUPL-1.2"
    GPL_2_0_ONLY = "GPL-2.0-only"
    GPL_2_0_OR_LATER = "GPL-2.0-or-later"
    GPL_3_0_ONLY = "GPL-3.0-only"
    GPL_3_0_OR_LATER = "GPL-3.0-or-later"
    LGPL_2_1_ONLY = "LGPL-2.1-only"
    LGPL_2_1_OR_LATER = "LGPL-2.1-or-later"
    LGPL_3_0_ONLY = "LGPL-3.0-only"
    LGPL_3_0_OR_LATER = "LGPL-3.0-or-later"
    MIT = "MIT"
    MPL_1_1 = "MPL-1.1"
    MPL_2_0 = "MPL-2.0"
    PUBLIC_DOMAIN = "Public-Domain"

    # Component-only markers
    UNDEFINED = "UNDEFINED"
    UNSUPPORTED = "UNSUPPORTED"
    FORCED_AS_PROJECT_LICENSE = "FORCED-AS-PROJECT-LICENSE"

    @property
    def resolution(self) -> LicenseResolution:
        """Resolution outcome this license stands for."""
        return _RESOLUTIONS.get(self, LicenseResolution.KNOWN)

    @property
    def is_synthetic(self) -> bool:
        return self.resolution != LicenseResolution.KNOWN

    @property
    def full_name(self) -> str:
        """Long human-readable license name."""
        return _FULL_NAMES[self]

    @classmethod
    def for_projects(cls) -> list["License"]:
        """Licenses a project may be released under."""
        return [lic for lic in cls if not lic.is_synthetic]

    @classmethod
    def for_components(cls) -> list["License"]:
        """Licenses a component may declare (synthetic markers included)."""
        return list(cls)

    @classmethod
    def from_spdx(cls, identifier: str) -> "License":
        """Look up a license by SPDX identifier or member name, ignoring case."""
        if not identifier or not identifier.strip():
            raise InvalidArgument("license identifier cannot be blank")
        wanted = identifier.strip().upper()
        for lic in cls:
            if wanted in (lic.value.upper(), lic.name):
                return lic
        raise InvalidArgument(f"Unknown license identifier: {identifier}")


_RESOLUTIONS = {
    License.UNDEFINED: LicenseResolution.UNDEFINED,
    License.UNSUPPORTED: LicenseResolution.UNSUPPORTED,
    License.FORCED_AS_PROJECT_LICENSE: LicenseResolution.FORCED,
}

_FULL_NAMES = {
    License.AFL_3_0: "Academic Free License v3.0",
    License.AGPL_3_0_ONLY: "GNU Affero General Public License v3.0 only",
    License.AGPL_3_0_OR_LATER: "GNU Affero General Public License v3.0 or later",
    License.APACHE_1_1: "Apache License 1.1",
    License.APACHE_2_0: "Apache License 2.0",
    License.ARTISTIC_2_0: "Artistic License 2.0",
    License.BSD_2_CLAUSE: 'BSD 2-Clause "Simplified" License',
    License.BSD_3_CLAUSE: 'BSD 3-Clause "New" or "Revised" License',
    License.BSD_4_CLAUSE: 'BSD 4-Clause "Original" or "Old" License',
    License.CDDL_1_0: "Common Development and Distribution License 1.0",
    License.CPL_1_0: "Common Public License 1.0",
    License.EDL_1_0: "Eclipse Distribution License 1.0",
    License.EPL_1_0: "Eclipse Public License 1.0",
    License.EPL_2_0: "Eclipse Public License 2.0",
    License.EUPL_1_1: "European Union Public License 1.1",
    License.EUPL_1_2: "European Union Public License 1.2",
    License.GPL_2_0_ONLY: "GNU General Public License v2.0 only",
    License.GPL_2_0_OR_LATER: "GNU General Public License v2.0 or later",
    License.GPL_3_0_ONLY: "GNU General Public License v3.0 only",
    License.GPL_3_0_OR_LATER: "GNU General Public License v3.0 or later",
    License.LGPL_2_1_ONLY: "GNU Lesser General Public License v2.1 only",
    License.LGPL_2_1_OR_LATER: "GNU Lesser General Public License v2.1 or later",
    License.LGPL_3_0_ONLY: "GNU Lesser General Public License v3.0 only",
    License.LGPL_3_0_OR_LATER: "GNU Lesser General Public License v3.0 or later",
    License.MIT: "MIT License",
    License.MPL_1_1: "Mozilla Public License 1.1",
    License.MPL_2_0: "Mozilla Public License 2.0",
    License.PUBLIC_DOMAIN: "Public Domain",
    License.UNDEFINED: "Undefined license",
    License.UNSUPPORTED: "License not supported yet",
    License.FORCED_AS_PROJECT_LICENSE: "Forced to be the project license",
}


class LinkType(str, Enum):
    """How a component is bound into the project."""

    STATIC = "STATIC"
    DYNAMIC = "DYNAMIC"

    @property
    def description(self) -> str:
        return {
            LinkType.STATIC: "linked statically",
            LinkType.DYNAMIC: "linked dynamically",
        }[self]


class Redistribution(str, Enum):
    """How the project reaches third parties."""

    NONE = "NONE"
    SOFTWARE_PACKAGE = "SOFTWARE_PACKAGE"
    SAAS = "SAAS"

    @property
    def description(self) -> str:
        return {
            Redistribution.NONE: "is not redistributed",
            Redistribution.SOFTWARE_PACKAGE: "is redistributed as a software package",
            Redistribution.SAAS: "is offered as a service (SaaS)",
        }[self]


class Compatibility(str, Enum):
    """Degree to which a component license may live inside a project license."""

    COMPATIBLE = "COMPATIBLE"
    FORCED_COMPATIBLE = "FORCED_COMPATIBLE"
    MOSTLY_COMPATIBLE = "MOSTLY_COMPATIBLE"
    MOSTLY_UNCOMPATIBLE = "MOSTLY_UNCOMPATIBLE"
    UNCOMPATIBLE = "UNCOMPATIBLE"
    UNKNOWN = "UNKNOWN"
    UNSUPPORTED = "UNSUPPORTED"

    @property
    def score(self) -> float:
        """1.0 means fully compatible, 0.0 means not compatible at all."""
        return _COMPATIBILITY_SCORES[self]

    @property
    def severity(self) -> float:
        return round(1.0 - self.score, 4)

    @property
    def is_acceptable(self) -> bool:
        """Whether a binding with this compatibility is free of this risk."""
        return self in (Compatibility.COMPATIBLE, Compatibility.FORCED_COMPATIBLE)

    @property
    def description(self) -> str:
        return {
            Compatibility.COMPATIBLE: "Fully compatible",
            Compatibility.FORCED_COMPATIBLE: "Compatible because the copyright holder allowed it",
            Compatibility.MOSTLY_COMPATIBLE: "Compatible in most cases",
            Compatibility.MOSTLY_UNCOMPATIBLE: "Incompatible in most cases",
            Compatibility.UNCOMPATIBLE: "Incompatible",
            Compatibility.UNKNOWN: "Compatibility unknown",
            Compatibility.UNSUPPORTED: "Compatibility not supported yet",
        }[self]


_COMPATIBILITY_SCORES = _check_scores("Compatibility", {
    Compatibility.COMPATIBLE: 1.0,
    Compatibility.FORCED_COMPATIBLE: 0.95,
    Compatibility.MOSTLY_COMPATIBLE: 0.67,
    Compatibility.MOSTLY_UNCOMPATIBLE: 0.33,
    Compatibility.UNCOMPATIBLE: 0.0,
    Compatibility.UNKNOWN: 0.0,
    Compatibility.UNSUPPORTED: 0.0,
})


class ComponentWeight(str, Enum):
    """Share of the project a component binding represents."""

    LOW = "LOW"
    NEAR_LOW = "NEAR_LOW"
    NEAR_HIGH = "NEAR_HIGH"
    HIGH = "HIGH"

    @property
    def weight(self) -> float:
        return _WEIGHTS[self]

    @property
    def description(self) -> str:
        return {
            ComponentWeight.LOW: "Marginal use of the component in the project",
            ComponentWeight.NEAR_LOW: "Limited use of the component in the project",
            ComponentWeight.NEAR_HIGH: "Extensive use of the component in the project",
            ComponentWeight.HIGH: "The component is essential to the project",
        }[self]


_WEIGHTS = _check_scores("ComponentWeight", {
    ComponentWeight.LOW: 0.01,
    ComponentWeight.NEAR_LOW: 0.33,
    ComponentWeight.NEAR_HIGH: 0.67,
    ComponentWeight.HIGH: 1.0,
})


class Contribution(str, Enum):
    """Label describing how much a component contributes to a project."""

    LOW = "LOW"
    NEAR_LOW = "NEAR_LOW"
    NEAR_HIGH = "NEAR_HIGH"
    HIGH = "HIGH"

    @property
    def score(self) -> float:
        return _CONTRIBUTIONS[self]

    @property
    def description(self) -> str:
        return {
            Contribution.LOW: "Low contribution to the project",
            Contribution.NEAR_LOW: "Moderate contribution to the project",
            Contribution.NEAR_HIGH: "Significant contribution to the project",
            Contribution.HIGH: "High contribution to the project",
        }[self]

    @classmethod
    def closest(cls, weight: float) -> "Contribution":
        """Label whose score is nearest to a raw contribution weight."""
        return min(cls, key=lambda c: (abs(c.score - weight), -c.score))


_CONTRIBUTIONS = _check_scores("Contribution", {
    Contribution.LOW: 0.05,
    Contribution.NEAR_LOW: 0.33,
    Contribution.NEAR_HIGH: 0.67,
    Contribution.HIGH: 0.95,
})


class Obsolescence(str, Enum):
    """How far a license is from the latest version of itself."""

    UPDATED = "UPDATED"
    NEAR_UPDATED = "NEAR_UPDATED"
    NEAR_OUTDATED = "NEAR_OUTDATED"
    OUTDATED = "OUTDATED"

    @property
    def score(self) -> float:
        return _OBSOLESCENCES[self]

    @property
    def description(self) -> str:
        return {
            Obsolescence.UPDATED: "Latest version of the license",
            Obsolescence.NEAR_UPDATED: "Recent, but not the latest, version of the license",
            Obsolescence.NEAR_OUTDATED: "Old version of the license",
            Obsolescence.OUTDATED: "Oldest version of the license",
        }[self]

    @classmethod
    def from_versions(cls, num_versions: int, current_version: int) -> "Obsolescence":
        """
        Classify a license from its position in the license version history.

        Args:
            num_versions: Number of published versions of the license (>= 1)
            current_version: 1-based position of the version in use

        Returns:
            Obsolescence bucket for that version
        """
        if num_versions < 1 or current_version < 1:
            raise InvalidArgument("version numbers have to be greater than zero")
        if current_version > num_versions:
            raise InvalidArgument("current_version cannot be greater than num_versions")

        distance = 1.0 - (current_version / num_versions)
        if distance == 0.0:
            return cls.UPDATED
        elif num_versions > 1 and current_version == 1:
            return cls.OUTDATED
        elif distance < 0.5:
            return cls.NEAR_UPDATED
        else:
            return cls.NEAR_OUTDATED


_OBSOLESCENCES = _check_scores("Obsolescence", {
    Obsolescence.UPDATED: 0.0,
    Obsolescence.NEAR_UPDATED: 0.33,
    Obsolescence.NEAR_OUTDATED: 0.67,
    Obsolescence.OUTDATED: 1.0,
})


class Spreading(str, Enum):
    """How many third-party projects use a license today."""

    HIGHLY_WIDESPREAD = "HIGHLY_WIDESPREAD"
    NEAR_HIGHLY_WIDESPREAD = "NEAR_HIGHLY_WIDESPREAD"
    NEAR_LITTLE_WIDESPREAD = "NEAR_LITTLE_WIDESPREAD"
    LITTLE_WIDESPREAD = "LITTLE_WIDESPREAD"

    @property
    def score(self) -> float:
        return _SPREADINGS[self]

    @property
    def description(self) -> str:
        return {
            Spreading.HIGHLY_WIDESPREAD: "Used by a large share of projects",
            Spreading.NEAR_HIGHLY_WIDESPREAD: "Used by many projects",
            Spreading.NEAR_LITTLE_WIDESPREAD: "Used by few projects",
            Spreading.LITTLE_WIDESPREAD: "Rarely used",
        }[self]


_SPREADINGS = _check_scores("Spreading", {
    Spreading.HIGHLY_WIDESPREAD: 0.0,
    Spreading.NEAR_HIGHLY_WIDESPREAD: 0.33,
    Spreading.NEAR_LITTLE_WIDESPREAD: 0.67,
    Spreading.LITTLE_WIDESPREAD: 1.0,
})


class Trend(str, Enum):
    """Whether adoption of a license is growing or declining."""

    TRENDY = "TRENDY"
    NEAR_TRENDY = "NEAR_TRENDY"
    NEAR_UNFASHIONABLE = "NEAR_UNFASHIONABLE"
    UNFASHIONABLE = "UNFASHIONABLE"

    @property
    def score(self) -> float:
        return _TRENDS[self]

    @property
    def description(self) -> str:
        return {
            Trend.TRENDY: "Adoption is growing",
            Trend.NEAR_TRENDY: "Adoption is stable",
            Trend.NEAR_UNFASHIONABLE: "Adoption is slowly declining",
            Trend.UNFASHIONABLE: "Adoption is declining",
        }[self]


_TRENDS = _check_scores("Trend", {
    Trend.TRENDY: 0.0,
    Trend.NEAR_TRENDY: 0.33,
    Trend.NEAR_UNFASHIONABLE: 0.67,
    Trend.UNFASHIONABLE: 1.0,
})


class RiskCategory(str, Enum):
    """License risks the engine knows how to analyse."""

    COMPONENTS_LICENSES_INCOMPATIBLE_WITH_PROJECT_LICENSES = (
        "COMPONENTS_LICENSES_INCOMPATIBLE_WITH_PROJECT_LICENSES"
    )
    LIMITED_SET_OF_POTENTIAL_PROJECT_LICENSES = "LIMITED_SET_OF_POTENTIAL_PROJECT_LICENSES"
    LIMITED_SET_OF_POTENTIAL_COMPONENTS_LICENSES = "LIMITED_SET_OF_POTENTIAL_COMPONENTS_LICENSES"
    OBSOLETE_PROJECT_LICENSES = "OBSOLETE_PROJECT_LICENSES"
    OBSOLETE_COMPONENTS_LICENSES = "OBSOLETE_COMPONENTS_LICENSES"
    UNFASHIONABLE_PROJECT_LICENSES = "UNFASHIONABLE_PROJECT_LICENSES"
    UNFASHIONABLE_COMPONENTS_LICENSES = "UNFASHIONABLE_COMPONENTS_LICENSES"
    SCARCELY_SPREAD_PROJECT_LICENSES = "SCARCELY_SPREAD_PROJECT_LICENSES"
    SCARCELY_SPREAD_COMPONENTS_LICENSES = "SCARCELY_SPREAD_COMPONENTS_LICENSES"
    HETEROGENEOUS_COMPONENTS_LICENSES = "HETEROGENEOUS_COMPONENTS_LICENSES"
    COMPONENTS_LICENSES_MISALIGNED_FROM_PROJECT_LICENSES = (
        "COMPONENTS_LICENSES_MISALIGNED_FROM_PROJECT_LICENSES"
    )


class Verbosity(str, Enum):
    """How much of each risk analysis result a report shows."""

    ESSENTIAL = "ESSENTIAL"  # scores and root causes
    RICH = "RICH"  # plus warnings and tips
    DETAILED = "DETAILED"  # plus good things

    @property
    def sections(self) -> tuple[str, ...]:
        return {
            Verbosity.ESSENTIAL: ("rootcauses",),
            Verbosity.RICH: ("rootcauses", "warnings", "tips"),
            Verbosity.DETAILED: ("rootcauses", "warnings", "goodthings", "tips"),
        }[self]


def weight_value(weight: Union[ComponentWeight, float]) -> float:
    """Numeric contribution of a ComponentWeight or a raw float weight."""
    if isinstance(weight, ComponentWeight):
        return weight.weight
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise InvalidArgument(f"weight has to be a ComponentWeight or a float, got {weight!r}")
    return float(weight)
