"""Built-in sample project used by `openlrae example`."""

from openlrae.bok.values import ComponentWeight, License, LinkType, Redistribution
from openlrae.model import Component, ComponentBinding, Project


def example_project() -> Project:
    """An Apache-2.0/MIT project bundling four components."""
    project = Project(
        name="sample-service",
        version="1.0",
        license=License.APACHE_2_0,
        redistribution=Redistribution.SOFTWARE_PACKAGE,
        bindings=[
            ComponentBinding(
                Component("a-given-component", "3.7", License.MIT),
                LinkType.DYNAMIC,
                ComponentWeight.LOW,
            ),
            ComponentBinding(
                Component("my-favourite-component", "1.7.2", License.APACHE_1_1),
                LinkType.DYNAMIC,
                ComponentWeight.HIGH,
            ),
            ComponentBinding(
                Component("an-updated-component", "1.0", License.BSD_4_CLAUSE),
                LinkType.DYNAMIC,
                ComponentWeight.HIGH,
            ),
            ComponentBinding(
                Component("legacy-component", "0.9", License.LGPL_3_0_OR_LATER),
                LinkType.STATIC,
                ComponentWeight.HIGH,
            ),
        ],
    )
    project.add_license(License.MIT)
    return project
