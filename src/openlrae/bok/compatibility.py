"""License compatibility knowledge.

Every fact is a CompatibilityEntry keyed by (component license, project
license, link type, redistribution). Projects that are not redistributed
never trigger distribution obligations, so any pair of real licenses is
compatible there. Software packages and SaaS deployments are looked up in
explicit per-pair matrices.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Optional

from openlrae.bok.values import Compatibility, License, LicenseResolution, LinkType, Redistribution
from openlrae.errors import InvalidArgument, UnknownCombination

logger = logging.getLogger(__name__)

L = License
C = Compatibility.COMPATIBLE
X = Compatibility.UNCOMPATIBLE
MC = Compatibility.MOSTLY_COMPATIBLE
MU = Compatibility.MOSTLY_UNCOMPATIBLE

# Warning keys for combinations that are neither clearly allowed nor forbidden
COPYLEFT_UPGRADE = "copyleft-upgrade-required"
AGPL_SECTION_13 = "agpl-gpl3-section13"
APACHE_PATENT_TERMS = "apache-patent-terms"
GPL2_ONLY_LOCK = "gpl2-only-restricts-or-later"
GPL3_ONLY_LOCK = "gpl3-only-restricts-or-later"
EUPL_COMPATIBILITY_LIST = "eupl-compatibility-list"
LGPL_CONVERSION = "lgpl-conversion-to-gpl"
LGPL_VERSION_LOCK = "lgpl-version-lock"

WARNING_KEYS = (
    COPYLEFT_UPGRADE,
    AGPL_SECTION_13,
    APACHE_PATENT_TERMS,
    GPL2_ONLY_LOCK,
    GPL3_ONLY_LOCK,
    EUPL_COMPATIBILITY_LIST,
    LGPL_CONVERSION,
    LGPL_VERSION_LOCK,
)

_SYNTHETIC_COMPATIBILITIES = {
    LicenseResolution.UNDEFINED: Compatibility.UNKNOWN,
    LicenseResolution.FORCED: Compatibility.FORCED_COMPATIBLE,
    LicenseResolution.UNSUPPORTED: Compatibility.UNSUPPORTED,
}

_GPLS = (L.GPL_2_0_ONLY, L.GPL_2_0_OR_LATER, L.GPL_3_0_ONLY, L.GPL_3_0_OR_LATER)
_STRONG_COPYLEFT = (L.AGPL_3_0_ONLY, *_GPLS)


def _only(default, exceptions=None, *, also=(), value=None):
    """Matrix row: a default plus per-project-license exceptions."""
    row = dict(exceptions or {})
    for project_license in also:
        row[project_license] = value
    return default, row


# Component license -> (default, {project license: compatibility or (compatibility, warning key)})
_DYNAMIC_DISTRIBUTED = {
    L.AGPL_3_0_ONLY: _only(X, {L.AGPL_3_0_ONLY: C}),
    L.APACHE_1_1: _only(C, also=(*_STRONG_COPYLEFT, L.PUBLIC_DOMAIN), value=X),
    L.APACHE_2_0: _only(C, also=(L.GPL_2_0_ONLY, L.GPL_2_0_OR_LATER, L.PUBLIC_DOMAIN), value=X),
    L.ARTISTIC_2_0: _only(C, {L.PUBLIC_DOMAIN: X}),
    L.BSD_3_CLAUSE: _only(C, {L.PUBLIC_DOMAIN: X}),
    L.BSD_4_CLAUSE: _only(C, also=(*_STRONG_COPYLEFT, L.PUBLIC_DOMAIN), value=X),
    L.CDDL_1_0: _only(C, also=(*_STRONG_COPYLEFT, L.PUBLIC_DOMAIN), value=X),
    L.CPL_1_0: _only(C, also=(*_STRONG_COPYLEFT, L.PUBLIC_DOMAIN), value=X),
    L.EPL_1_0: _only(C, also=(*_STRONG_COPYLEFT, L.PUBLIC_DOMAIN), value=X),
    L.EPL_2_0: _only(C, also=(*_STRONG_COPYLEFT, L.PUBLIC_DOMAIN), value=X),
    L.EUPL_1_1: _only(C, also=(*_STRONG_COPYLEFT, L.EPL_2_0, L.PUBLIC_DOMAIN), value=X),
    L.GPL_2_0_ONLY: _only(X, {
        L.GPL_2_0_ONLY: C,
        L.GPL_2_0_OR_LATER: (MC, GPL2_ONLY_LOCK),
    }),
    L.GPL_2_0_OR_LATER: _only(X, also=(L.AGPL_3_0_ONLY, *_GPLS), value=C),
    L.GPL_3_0_ONLY: _only(X, also=(L.AGPL_3_0_ONLY, L.GPL_3_0_ONLY, L.GPL_3_0_OR_LATER), value=C),
    L.GPL_3_0_OR_LATER: _only(X, also=(L.AGPL_3_0_ONLY, L.GPL_3_0_OR_LATER), value=C),
    L.LGPL_2_1_ONLY: _only(C, {L.PUBLIC_DOMAIN: X}),
    L.LGPL_2_1_OR_LATER: _only(C, {L.PUBLIC_DOMAIN: X}),
    L.LGPL_3_0_OR_LATER: _only(C, also=(L.GPL_2_0_ONLY, L.GPL_2_0_OR_LATER, L.PUBLIC_DOMAIN), value=X),
    L.MIT: _only(C, {L.PUBLIC_DOMAIN: X}),
    L.MPL_1_1: _only(C, also=(*_STRONG_COPYLEFT, L.PUBLIC_DOMAIN), value=X),
    L.PUBLIC_DOMAIN: _only(C),
}

_STATIC_DISTRIBUTED = {
    L.AGPL_3_0_ONLY: _only(X, {
        L.AGPL_3_0_ONLY: C,
        L.GPL_3_0_ONLY: (MC, AGPL_SECTION_13),
        L.LGPL_3_0_OR_LATER: (MU, COPYLEFT_UPGRADE),
    }),
    L.APACHE_1_1: _only(X, also=(
        L.APACHE_1_1, L.APACHE_2_0, L.ARTISTIC_2_0, L.MPL_1_1,
        L.CDDL_1_0, L.CPL_1_0, L.EPL_1_0, L.EUPL_1_1,
    ), value=C),
    L.APACHE_2_0: _only(X, {
        **{lic: C for lic in (
            L.APACHE_2_0, L.ARTISTIC_2_0, L.LGPL_2_1_ONLY, L.LGPL_2_1_OR_LATER,
            L.LGPL_3_0_OR_LATER, L.MPL_1_1, L.CDDL_1_0, L.CPL_1_0, L.EPL_1_0,
            L.EUPL_1_1, L.GPL_3_0_ONLY, L.AGPL_3_0_ONLY,
        )},
        L.GPL_2_0_OR_LATER: (MU, APACHE_PATENT_TERMS),
    }),
    L.ARTISTIC_2_0: _only(C, also=(
        L.MIT, L.BSD_4_CLAUSE, L.BSD_3_CLAUSE, L.APACHE_1_1, L.APACHE_2_0, L.PUBLIC_DOMAIN,
    ), value=X),
    L.BSD_3_CLAUSE: _only(C, {L.PUBLIC_DOMAIN: X}),
    L.BSD_4_CLAUSE: _only(C, also=(
        L.LGPL_2_1_ONLY, L.LGPL_2_1_OR_LATER, L.LGPL_3_0_OR_LATER,
        L.GPL_2_0_ONLY, L.GPL_2_0_OR_LATER, L.GPL_3_0_ONLY, L.AGPL_3_0_ONLY, L.PUBLIC_DOMAIN,
    ), value=X),
    L.CDDL_1_0: _only(X, {L.CDDL_1_0: C}),
    L.CPL_1_0: _only(X, {L.CPL_1_0: C, L.EPL_1_0: C}),
    L.EPL_1_0: _only(X, {L.CPL_1_0: C, L.EPL_1_0: C}),
    L.EUPL_1_1: _only(X, also=(
        L.LGPL_2_1_ONLY, L.LGPL_2_1_OR_LATER, L.MPL_1_1, L.CDDL_1_0, L.CPL_1_0,
        L.EPL_1_0, L.EUPL_1_1, L.GPL_2_0_ONLY, L.GPL_2_0_OR_LATER,
    ), value=C),
    L.GPL_2_0_ONLY: _only(X, {
        L.GPL_2_0_ONLY: C,
        L.GPL_2_0_OR_LATER: (MC, GPL2_ONLY_LOCK),
        L.EUPL_1_1: (MU, EUPL_COMPATIBILITY_LIST),
    }),
    L.GPL_2_0_OR_LATER: _only(X, {
        L.GPL_2_0_OR_LATER: C,
        L.GPL_3_0_ONLY: C,
        L.AGPL_3_0_ONLY: C,
        L.LGPL_3_0_OR_LATER: (MU, COPYLEFT_UPGRADE),
    }),
    L.GPL_3_0_ONLY: _only(X, {
        L.GPL_3_0_ONLY: C,
        L.AGPL_3_0_ONLY: (MC, AGPL_SECTION_13),
        L.LGPL_3_0_OR_LATER: (MU, COPYLEFT_UPGRADE),
        L.GPL_2_0_OR_LATER: (MU, GPL3_ONLY_LOCK),
    }),
    L.LGPL_2_1_ONLY: _only(X, {
        L.LGPL_2_1_ONLY: C,
        L.EUPL_1_1: C,
        **{lic: (MC, LGPL_CONVERSION) for lic in (
            L.GPL_2_0_ONLY, L.GPL_2_0_OR_LATER, L.GPL_3_0_ONLY, L.AGPL_3_0_ONLY,
        )},
        L.LGPL_3_0_OR_LATER: (MU, LGPL_VERSION_LOCK),
    }),
    L.LGPL_2_1_OR_LATER: _only(X, also=(
        L.LGPL_2_1_ONLY, L.LGPL_2_1_OR_LATER, L.LGPL_3_0_OR_LATER, L.EUPL_1_1,
        L.GPL_2_0_ONLY, L.GPL_2_0_OR_LATER, L.GPL_3_0_ONLY, L.AGPL_3_0_ONLY,
    ), value=C),
    L.LGPL_3_0_OR_LATER: _only(X, {
        L.LGPL_3_0_OR_LATER: C,
        L.GPL_2_0_OR_LATER: C,
        L.GPL_3_0_ONLY: C,
        L.AGPL_3_0_ONLY: C,
        L.LGPL_2_1_ONLY: (MU, LGPL_VERSION_LOCK),
        L.LGPL_2_1_OR_LATER: (MU, LGPL_VERSION_LOCK),
    }),
    L.MIT: _only(C, {L.PUBLIC_DOMAIN: X}),
    L.MPL_1_1: _only(X, {L.MPL_1_1: C}),
    L.PUBLIC_DOMAIN: _only(C),
}

# Licenses missing from a matrix behave like a close relative that is present,
# both as component and as project license.
_DYNAMIC_ANALOGUES = {
    L.AGPL_3_0_OR_LATER: L.AGPL_3_0_ONLY,
    L.BSD_2_CLAUSE: L.BSD_3_CLAUSE,
    L.EUPL_1_2: L.EUPL_1_1,
    L.LGPL_3_0_ONLY: L.LGPL_3_0_OR_LATER,
    L.MPL_2_0: L.MPL_1_1,
}

_STATIC_ANALOGUES = {
    **_DYNAMIC_ANALOGUES,
    L.EPL_2_0: L.EPL_1_0,
    L.GPL_3_0_OR_LATER: L.GPL_3_0_ONLY,
}

_DISTRIBUTED_MATRICES = {
    LinkType.DYNAMIC: (_DYNAMIC_DISTRIBUTED, _DYNAMIC_ANALOGUES),
    LinkType.STATIC: (_STATIC_DISTRIBUTED, _STATIC_ANALOGUES),
}


@dataclass(frozen=True)
class CompatibilityEntry:
    """One compatibility fact of the knowledge base."""

    component_license: License
    project_license: License
    link: LinkType
    redistribution: Redistribution
    compatibility: Compatibility
    warning_key: Optional[str] = None

    def __post_init__(self):
        for name, kind in (
            ("component_license", License),
            ("project_license", License),
            ("link", LinkType),
            ("redistribution", Redistribution),
            ("compatibility", Compatibility),
        ):
            value = getattr(self, name)
            if value is None:
                logger.error(f"{name} cannot be null")
                raise InvalidArgument(f"{name} cannot be null")
            if not isinstance(value, kind):
                logger.error(f"Invalid {name} for compatibility entry: {value!r}")
                raise InvalidArgument(f"{name} has to be a {kind.__name__}")
        if self.project_license.is_synthetic:
            logger.error(f"{self.project_license.value} cannot be used as a project license")
            raise InvalidArgument(
                f"{self.project_license.value} is a component-only license and cannot be a project license"
            )
        if self.warning_key is not None:
            if not isinstance(self.warning_key, str):
                logger.error(f"Invalid warning_key for compatibility entry: {self.warning_key!r}")
                raise InvalidArgument("warning_key has to be a string")
            if not self.warning_key.strip():
                logger.error("warning_key cannot be blank")
                raise InvalidArgument("warning_key cannot be blank")

    @property
    def key(self) -> tuple:
        return (self.component_license, self.project_license, self.link, self.redistribution)

    @property
    def score(self) -> float:
        return self.compatibility.score


class CompatibilityTable:
    """Read-only lookup of compatibility entries."""

    def __init__(self, entries: Iterable[CompatibilityEntry]):
        table = {}
        for entry in entries:
            if entry.key in table:
                raise InvalidArgument(f"Duplicated compatibility entry for {entry.key}")
            table[entry.key] = entry
        self._entries = MappingProxyType(table)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key) -> bool:
        return key in self._entries

    def compatibility_of(
        self,
        component_license: License,
        project_license: License,
        link: LinkType,
        redistribution: Redistribution,
    ) -> CompatibilityEntry:
        """
        Look up the exact entry for a combination.

        Raises:
            InvalidArgument: if any argument is missing
            UnknownCombination: if the table holds no entry for the combination
        """
        if None in (component_license, project_license, link, redistribution):
            raise InvalidArgument("component license, project license, link and redistribution are required")
        try:
            return self._entries[(component_license, project_license, link, redistribution)]
        except KeyError:
            raise UnknownCombination(component_license, project_license, link, redistribution) from None

    def resolve(
        self,
        component_license: License,
        project_license: License,
        link: LinkType,
        redistribution: Redistribution,
    ) -> CompatibilityEntry:
        """Like compatibility_of, but a gap in the table resolves to UNKNOWN."""
        try:
            return self.compatibility_of(component_license, project_license, link, redistribution)
        except UnknownCombination as e:
            logger.debug(f"{e}; handled as unknown")
            return CompatibilityEntry(
                component_license, project_license, link, redistribution, Compatibility.UNKNOWN
            )

    @staticmethod
    def theoretical_size() -> int:
        """Size of the full combination space."""
        return (
            len(License.for_components())
            * len(License.for_projects())
            * len(LinkType)
            * len(Redistribution)
        )

    @property
    def coverage(self) -> float:
        """Share of the combination space the table holds an entry for."""
        return len(self._entries) / self.theoretical_size()

    def combinations(self, supported: bool = True) -> Iterator[tuple]:
        """
        Walk the combination space in a stable order.

        Args:
            supported: yield combinations that have an entry (True) or the gaps (False)

        Yields:
            (component license, link, project license, redistribution) tuples
        """
        for redistribution in Redistribution:
            for link in LinkType:
                for project_license in License.for_projects():
                    for component_license in License.for_components():
                        key = (component_license, project_license, link, redistribution)
                        if (key in self._entries) == supported:
                            yield component_license, link, project_license, redistribution

    @classmethod
    def build(cls) -> "CompatibilityTable":
        """Build the table shipped with openlrae."""
        table = cls(_default_entries())
        logger.info(f"Built compatibility table with {len(table)} entries ({table.coverage:.1%} coverage)")
        return table


def _default_entries() -> Iterator[CompatibilityEntry]:
    for redistribution in Redistribution:
        for link in LinkType:
            for project_license in License.for_projects():
                for component_license in License.for_components():
                    found = _lookup(component_license, project_license, link, redistribution)
                    if found is None:
                        continue
                    compatibility, warning_key = found
                    yield CompatibilityEntry(
                        component_license, project_license, link, redistribution, compatibility, warning_key
                    )


def _lookup(component_license, project_license, link, redistribution):
    """(compatibility, warning key) for a combination, or None when unknown."""
    if component_license.is_synthetic:
        return _SYNTHETIC_COMPATIBILITIES[component_license.resolution], None
    if redistribution == Redistribution.NONE:
        return C, None

    # SaaS triggers the same obligations as shipping a package for the licenses modeled
    matrix, analogues = _DISTRIBUTED_MATRICES[link]
    row = matrix.get(analogues.get(component_license, component_license))
    if row is None:
        return None
    column = analogues.get(project_license, project_license)
    if column not in matrix:
        return None

    default, exceptions = row
    value = exceptions.get(column, default)
    if isinstance(value, tuple):
        return value
    return value, None
