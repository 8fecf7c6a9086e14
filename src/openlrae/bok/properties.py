"""Per-license obsolescence, spreading and trend tables."""

import logging
from types import MappingProxyType
from typing import Optional

from openlrae.bok.values import License, Obsolescence, Spreading, Trend
from openlrae.errors import InvalidArgument

logger = logging.getLogger(__name__)

L = License

# (number of published versions, position of this version)
LICENSE_VERSIONS = {
    L.AFL_3_0: (6, 6),
    L.AGPL_3_0_ONLY: (4, 3),
    L.AGPL_3_0_OR_LATER: (4, 4),
    L.APACHE_1_1: (3, 2),
    L.APACHE_2_0: (3, 3),
    L.ARTISTIC_2_0: (2, 2),
    L.BSD_2_CLAUSE: (5, 3),
    L.BSD_3_CLAUSE: (5, 2),
    L.BSD_4_CLAUSE: (5, 1),
    L.CDDL_1_0: (2, 1),
    L.CPL_1_0: (1, 1),
    L.EDL_1_0: (1, 1),
    L.EPL_1_0: (2, 1),
    L.EPL_2_0: (2, 2),
    L.EUPL_1_1: (3, 2),
    L.EUPL_1_2: (3, 3),
    L.GPL_2_0_ONLY: (6, 3),
    L.GPL_2_0_OR_LATER: (6, 4),
    L.GPL_3_0_ONLY: (6, 5),
    L.GPL_3_0_OR_LATER: (6, 6),
    L.LGPL_2_1_ONLY: (6, 3),
    L.LGPL_2_1_OR_LATER: (6, 4),
    L.LGPL_3_0_ONLY: (6, 5),
    L.LGPL_3_0_OR_LATER: (6, 6),
    L.MIT: (1, 1),
    L.MPL_1_1: (3, 2),
    L.MPL_2_0: (3, 3),
    L.PUBLIC_DOMAIN: (1, 1),
}

LICENSE_SPREADINGS = {
    L.AFL_3_0: Spreading.LITTLE_WIDESPREAD,
    L.AGPL_3_0_ONLY: Spreading.LITTLE_WIDESPREAD,
    L.AGPL_3_0_OR_LATER: Spreading.LITTLE_WIDESPREAD,
    L.APACHE_1_1: Spreading.NEAR_LITTLE_WIDESPREAD,
    L.APACHE_2_0: Spreading.HIGHLY_WIDESPREAD,
    L.ARTISTIC_2_0: Spreading.LITTLE_WIDESPREAD,
    L.BSD_2_CLAUSE: Spreading.HIGHLY_WIDESPREAD,
    L.BSD_3_CLAUSE: Spreading.NEAR_HIGHLY_WIDESPREAD,
    L.BSD_4_CLAUSE: Spreading.LITTLE_WIDESPREAD,
    L.CDDL_1_0: Spreading.LITTLE_WIDESPREAD,
    L.CPL_1_0: Spreading.LITTLE_WIDESPREAD,
    L.EDL_1_0: Spreading.LITTLE_WIDESPREAD,
    L.EPL_1_0: Spreading.LITTLE_WIDESPREAD,
    L.EPL_2_0: Spreading.NEAR_LITTLE_WIDESPREAD,
    L.EUPL_1_1: Spreading.LITTLE_WIDESPREAD,
    L.EUPL_1_2: Spreading.LITTLE_WIDESPREAD,
    L.GPL_2_0_ONLY: Spreading.NEAR_HIGHLY_WIDESPREAD,
    L.GPL_2_0_OR_LATER: Spreading.HIGHLY_WIDESPREAD,
    L.GPL_3_0_ONLY: Spreading.NEAR_HIGHLY_WIDESPREAD,
    L.GPL_3_0_OR_LATER: Spreading.NEAR_HIGHLY_WIDESPREAD,
    L.LGPL_2_1_ONLY: Spreading.NEAR_HIGHLY_WIDESPREAD,
    L.LGPL_2_1_OR_LATER: Spreading.HIGHLY_WIDESPREAD,
    L.LGPL_3_0_ONLY: Spreading.NEAR_LITTLE_WIDESPREAD,
    L.LGPL_3_0_OR_LATER: Spreading.LITTLE_WIDESPREAD,
    L.MIT: Spreading.HIGHLY_WIDESPREAD,
    L.MPL_1_1: Spreading.NEAR_LITTLE_WIDESPREAD,
    L.MPL_2_0: Spreading.NEAR_HIGHLY_WIDESPREAD,
    L.PUBLIC_DOMAIN: Spreading.NEAR_LITTLE_WIDESPREAD,
}

_NU = Trend.NEAR_UNFASHIONABLE
LICENSE_TRENDS = {
    L.AFL_3_0: _NU,
    L.AGPL_3_0_ONLY: _NU,
    L.AGPL_3_0_OR_LATER: _NU,
    L.APACHE_1_1: Trend.UNFASHIONABLE,
    L.APACHE_2_0: Trend.TRENDY,
    L.ARTISTIC_2_0: Trend.NEAR_TRENDY,
    L.BSD_2_CLAUSE: Trend.TRENDY,
    L.BSD_3_CLAUSE: Trend.NEAR_TRENDY,
    L.BSD_4_CLAUSE: Trend.UNFASHIONABLE,
    L.CDDL_1_0: _NU,
    L.CPL_1_0: _NU,
    L.EDL_1_0: _NU,
    L.EPL_1_0: _NU,
    L.EPL_2_0: Trend.NEAR_TRENDY,
    L.EUPL_1_1: _NU,
    L.EUPL_1_2: Trend.NEAR_TRENDY,
    L.GPL_2_0_ONLY: Trend.UNFASHIONABLE,
    L.GPL_2_0_OR_LATER: _NU,
    L.GPL_3_0_ONLY: _NU,
    L.GPL_3_0_OR_LATER: _NU,
    L.LGPL_2_1_ONLY: Trend.UNFASHIONABLE,
    L.LGPL_2_1_OR_LATER: _NU,
    L.LGPL_3_0_ONLY: _NU,
    L.LGPL_3_0_OR_LATER: _NU,
    L.MIT: Trend.TRENDY,
    L.MPL_1_1: _NU,
    L.MPL_2_0: Trend.NEAR_TRENDY,
    L.PUBLIC_DOMAIN: _NU,
}


class LicensePropertyTable:
    """Immutable license -> value lookup, total over component licenses."""

    kind = "property"

    # Value reported for the synthetic markers
    worst = None

    def __init__(self, values: dict):
        table = dict(values)
        for lic in License.for_components():
            if lic.is_synthetic:
                table.setdefault(lic, self.worst)
            elif lic not in table:
                raise InvalidArgument(f"Missing {self.kind} for {lic.value}")
        self._values = MappingProxyType(table)

    def value_of(self, license: Optional[License]):
        if license is None:
            logger.error(f"license cannot be null when looking up {self.kind}")
            raise InvalidArgument("license cannot be null")
        try:
            return self._values[license]
        except KeyError:
            raise InvalidArgument(f"Unknown license {license!r}") from None

    def items(self):
        return self._values.items()


class ObsolescenceTable(LicensePropertyTable):
    """How old is the license version in use."""

    kind = "obsolescence"
    worst = Obsolescence.OUTDATED

    def obsolescence_of(self, license: License) -> Obsolescence:
        return self.value_of(license)

    @classmethod
    def build(cls) -> "ObsolescenceTable":
        return cls({
            lic: Obsolescence.from_versions(total, current)
            for lic, (total, current) in LICENSE_VERSIONS.items()
        })


class SpreadingTable(LicensePropertyTable):
    """How many third-party projects use each license."""

    kind = "spreading"
    worst = Spreading.LITTLE_WIDESPREAD

    def spreading_of(self, license: License) -> Spreading:
        return self.value_of(license)

    @classmethod
    def build(cls) -> "SpreadingTable":
        return cls(LICENSE_SPREADINGS)


class TrendTable(LicensePropertyTable):
    """Whether each license is gaining or losing adopters."""

    kind = "trend"
    worst = Trend.UNFASHIONABLE

    def trend_of(self, license: License) -> Trend:
        return self.value_of(license)

    @classmethod
    def build(cls) -> "TrendTable":
        return cls(LICENSE_TRENDS)
