"""Project definition loading from JSON or YAML documents.

Expected format:
    {
      "projectinfo": {
        "name": "my-project",
        "version": "1.0",
        "licenses": ["Apache-2.0"],
        "redistribution": "SOFTWARE_PACKAGE"
      },
      "componentbindings": [
        {"component": "lib", "version": "2.1", "license": "MIT",
         "weight": "HIGH", "link": "DYNAMIC"}
      ]
    }

Rules:
  - licenses use SPDX identifiers (a single "license" key is also accepted)
  - weight is a ComponentWeight name or a number in (0, 1]
  - link and redistribution are enum names, case-insensitive
"""

import json
import logging
from pathlib import Path
from typing import Union

import yaml

from openlrae.bok.values import ComponentWeight, License, LinkType, Redistribution
from openlrae.errors import InvalidArgument, ProjectDefinitionError
from openlrae.model import Component, ComponentBinding, Project

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def load_project(path: Union[str, Path]) -> Project:
    """Load a project definition file, choosing the parser by file extension."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            if path.suffix.lower() in YAML_SUFFIXES:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
            raise ProjectDefinitionError(f"Cannot parse {path}: {e}") from e

    logger.info(f"Loaded project definition from {path}")
    return project_from_dict(data)


def _enum(enum_class, raw, what: str, where: str):
    if not isinstance(raw, str) or not raw.strip():
        raise ProjectDefinitionError(f"{where}: '{what}' is required")
    try:
        return enum_class(raw.strip().upper())
    except ValueError:
        choices = ", ".join(member.value for member in enum_class)
        raise ProjectDefinitionError(f"{where}: unsupported {what} '{raw}' (expected one of {choices})") from None


def _license(raw, where: str) -> License:
    if not isinstance(raw, str):
        raise ProjectDefinitionError(f"{where}: license has to be an SPDX identifier")
    try:
        return License.from_spdx(raw)
    except InvalidArgument as e:
        raise ProjectDefinitionError(f"{where}: {e}") from None


def _weight(raw, where: str) -> Union[ComponentWeight, float]:
    if isinstance(raw, str):
        return _enum(ComponentWeight, raw, "weight", where)
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ProjectDefinitionError(f"{where}: 'weight' has to be a ComponentWeight name or a number")
    return float(raw)


def _text(item: dict, key: str, where: str) -> str:
    value = item.get(key)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str) or not value.strip():
        raise ProjectDefinitionError(f"{where}: '{key}' is required")
    return value.strip()


def project_from_dict(data) -> Project:
    """Build a Project from an already parsed definition document."""
    if not isinstance(data, dict) or "projectinfo" not in data:
        raise ProjectDefinitionError("Invalid project definition: expected top-level 'projectinfo' key")

    info = data["projectinfo"]
    if not isinstance(info, dict):
        raise ProjectDefinitionError("Invalid project definition: 'projectinfo' must be a mapping")

    raw_licenses = info.get("licenses", info.get("license"))
    if isinstance(raw_licenses, str):
        raw_licenses = [raw_licenses]
    if not isinstance(raw_licenses, list) or not raw_licenses:
        raise ProjectDefinitionError("projectinfo: at least one license is required")
    licenses = [_license(raw, "projectinfo") for raw in raw_licenses]
    for lic in licenses:
        if lic.is_synthetic:
            raise ProjectDefinitionError(f"projectinfo: {lic.value} cannot be a project license")
    if len(set(licenses)) != len(licenses):
        raise ProjectDefinitionError("projectinfo: duplicated project license")

    raw_bindings = data.get("componentbindings")
    if not isinstance(raw_bindings, list) or not raw_bindings:
        raise ProjectDefinitionError("Invalid project definition: 'componentbindings' must be a non-empty list")

    bindings = []
    for i, item in enumerate(raw_bindings):
        where = f"Binding {i + 1}"
        if not isinstance(item, dict):
            raise ProjectDefinitionError(f"{where}: expected a mapping, got {type(item).__name__}")
        try:
            component = Component(
                name=_text(item, "component", where),
                version=_text(item, "version", where),
                license=_license(item.get("license"), where),
            )
            bindings.append(ComponentBinding(
                component=component,
                link=_enum(LinkType, item.get("link"), "link", where),
                weight=_weight(item.get("weight"), where),
            ))
        except ProjectDefinitionError:
            raise
        except InvalidArgument as e:
            raise ProjectDefinitionError(f"{where}: {e}") from e

    try:
        project = Project(
            name=_text(info, "name", "projectinfo"),
            version=_text(info, "version", "projectinfo"),
            license=licenses[0],
            redistribution=_enum(Redistribution, info.get("redistribution"), "redistribution", "projectinfo"),
            bindings=bindings,
        )
    except ProjectDefinitionError:
        raise
    except InvalidArgument as e:
        raise ProjectDefinitionError(f"projectinfo: {e}") from e

    for lic in licenses[1:]:
        project.add_license(lic)
    return project
