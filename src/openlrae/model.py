"""Project and component data model."""

import logging
from dataclasses import dataclass
from typing import Iterable, Union

from openlrae.bok.values import ComponentWeight, Contribution, License, LinkType, Redistribution, weight_value
from openlrae.errors import InvalidArgument

logger = logging.getLogger(__name__)


def _require_text(name: str, value) -> None:
    if value is None:
        logger.error(f"{name} cannot be null")
        raise InvalidArgument(f"{name} cannot be null")
    if not isinstance(value, str) or not value.strip():
        logger.error(f"{name} cannot be blank")
        raise InvalidArgument(f"{name} cannot be blank")


@dataclass(frozen=True)
class Component:
    """A third-party component with the license it is released under."""

    name: str
    version: str
    license: License

    def __post_init__(self):
        _require_text("name", self.name)
        _require_text("version", self.version)
        if not isinstance(self.license, License):
            logger.error(f"Invalid license for component {self.name}: {self.license!r}")
            raise InvalidArgument("license has to be a License")


@dataclass(frozen=True)
class ComponentBinding:
    """One inclusion of a component into a project."""

    component: Component
    link: LinkType
    weight: Union[ComponentWeight, float]

    def __post_init__(self):
        if not isinstance(self.component, Component):
            logger.error("component cannot be null")
            raise InvalidArgument("component cannot be null")
        if not isinstance(self.link, LinkType):
            logger.error(f"Invalid link for {self.component.name}: {self.link!r}")
            raise InvalidArgument("link has to be a LinkType")
        value = weight_value(self.weight)
        if not 0.0 < value <= 1.0:
            logger.error(f"Invalid weight for {self.component.name}: {value}")
            raise InvalidArgument("weight has to be greater than 0.0 and not greater than 1.0")

    @property
    def contribution(self) -> float:
        """Numeric share of the project this binding represents."""
        return weight_value(self.weight)

    @property
    def contribution_label(self) -> Contribution:
        return Contribution.closest(self.contribution)

    @property
    def license(self) -> License:
        return self.component.license


class Project:
    """
    A software project and the components bound into it.

    Bindings keep insertion order for reporting. They can be appended but
    never removed, so analysers always see a project with at least one.
    """

    def __init__(
        self,
        name: str,
        version: str,
        license: License,
        redistribution: Redistribution,
        bindings: Iterable[ComponentBinding],
    ):
        _require_text("name", name)
        _require_text("version", version)
        if not isinstance(redistribution, Redistribution):
            logger.error(f"Invalid redistribution for project {name}: {redistribution!r}")
            raise InvalidArgument("redistribution has to be a Redistribution")

        self.name = name
        self.version = version
        self.redistribution = redistribution
        self._licenses: list[License] = []
        self._bindings: list[ComponentBinding] = []

        self.add_license(license)
        for binding in bindings or ():
            self.add_binding(binding)
        if not self._bindings:
            logger.error(f"Project {name} has no component bindings")
            raise InvalidArgument("a project needs at least one component binding")

    @property
    def license(self) -> License:
        """Main project license (the first one declared)."""
        return self._licenses[0]

    @property
    def licenses(self) -> tuple[License, ...]:
        return tuple(self._licenses)

    @property
    def bindings(self) -> tuple[ComponentBinding, ...]:
        return tuple(self._bindings)

    def add_license(self, license: License) -> None:
        """Release the project under an additional license."""
        if not isinstance(license, License):
            logger.error(f"Invalid project license: {license!r}")
            raise InvalidArgument("license has to be a License")
        if license.is_synthetic:
            logger.error(f"{license.value} cannot be used as a project license")
            raise InvalidArgument(f"{license.value} is a component-only license")
        if license in self._licenses:
            raise InvalidArgument(f"{license.value} is already a license of the project")
        self._licenses.append(license)

    def add_binding(self, binding: ComponentBinding) -> None:
        if not isinstance(binding, ComponentBinding):
            logger.error("component binding cannot be null")
            raise InvalidArgument("binding has to be a ComponentBinding")
        self._bindings.append(binding)

    def to_dict(self) -> dict:
        """Project summary for JSON serialization."""
        return {
            "name": self.name,
            "version": self.version,
            "licenses": [lic.value for lic in self._licenses],
            "redistribution": self.redistribution.value,
        }
