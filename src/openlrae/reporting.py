"""JSON and plain-text risk reports."""

import json
from typing import Iterable

from openlrae.analysis.result import RiskAnalysisResult
from openlrae.bok.values import Verbosity
from openlrae.i18n import Language, Messages
from openlrae.model import Project

SECTIONS = ("rootcauses", "warnings", "goodthings", "tips")


def report_as_dict(
    project: Project,
    results: Iterable[RiskAnalysisResult],
    verbosity: Verbosity = Verbosity.DETAILED,
) -> dict:
    """Report structure: project info plus one entry per risk analysis."""
    return {
        "projectinfo": project.to_dict(),
        "riskanalyses": [result.to_dict(verbosity) for result in results],
    }


def report_as_json(
    project: Project,
    results: Iterable[RiskAnalysisResult],
    verbosity: Verbosity = Verbosity.DETAILED,
) -> str:
    return json.dumps(report_as_dict(project, results, verbosity), indent=2, ensure_ascii=False)


def report_as_text(
    project: Project,
    results: Iterable[RiskAnalysisResult],
    verbosity: Verbosity = Verbosity.DETAILED,
    language: Language = Language.ENGLISH,
) -> str:
    """Plain-text report for terminals and log files."""
    msg = Messages(language).get
    licenses = ", ".join(f"{lic.full_name} ({lic.value})" for lic in project.licenses)
    lines = [
        "*" * 50,
        f"\t=> {msg('report.project')}: {project.name}",
        f"\t=> {msg('report.version')}: {project.version}",
        f"\t=> {msg('report.licenses')}: {licenses}",
        f"\t=> {msg('report.redistribution')}: {msg(f'redistribution.{project.redistribution.value}')}",
        "*" * 50,
        f"### {msg('report.bindings')}:",
    ]
    for binding in project.bindings:
        component = binding.component
        lines.append(
            f"\t=> {component.name}-{component.version} ({component.license.value}) --> "
            f"{msg('report.contribution')}: {binding.contribution:g}"
        )

    lines.append(f"### {msg('report.risk_analysis')}")
    for result in results:
        data = result.to_dict(verbosity)
        lines.append(f"\t=> {result.title}")
        lines.append(
            "\t\t*** " + msg("report.scores", value=result.value, exposure=result.exposure, impact=result.impact)
        )
        for section in SECTIONS:
            if section not in verbosity.sections:
                continue
            lines.append(f"\t\t*** {msg(f'report.{section}')}")
            for text in data[section]:
                lines.append(f"\t\t\t=> {text}")

    return "\n".join(lines) + "\n"
