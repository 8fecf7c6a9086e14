"""Exception types raised by openlrae."""


class OpenLRAEError(Exception):
    """Base class for all openlrae errors."""


class InvalidArgument(OpenLRAEError, ValueError):
    """A value object or analyser was built from invalid arguments."""


class UnknownCombination(OpenLRAEError, LookupError):
    """The knowledge base has no entry for a license combination."""

    def __init__(self, component_license, project_license, link, redistribution):
        self.component_license = component_license
        self.project_license = project_license
        self.link = link
        self.redistribution = redistribution
        super().__init__(
            f"No compatibility entry for {component_license.value} ({link.value}) "
            f"into {project_license.value} ({redistribution.value})"
        )


class ProjectDefinitionError(InvalidArgument):
    """A project definition document is structurally invalid."""


class EngineConfigurationError(OpenLRAEError):
    """The analysis engine is not usable as configured."""
