"""Base risk analyser interface and the shared scoring skeleton."""

import logging
from abc import abstractmethod
from typing import Optional

from openlrae.analysis.result import RiskAnalysisResult
from openlrae.bok.knowledge import KnowledgeBase, get_knowledge_base
from openlrae.bok.values import RiskCategory
from openlrae.errors import InvalidArgument
from openlrae.i18n import Language, LanguageListener, Messages
from openlrae.model import ComponentBinding, Project

logger = logging.getLogger(__name__)


class Assessment:
    """
    Running tally of one analyser run.

    Every evaluated unit (a binding, or a binding/candidate case) adds its
    weight to the total. Affected units also add their weight and their
    weighted severity, so that:

        exposure = affected weight / total weight
        impact   = weighted mean severity of the affected units
    """

    def __init__(self):
        self.total_weight = 0.0
        self.affected_weight = 0.0
        self.weighted_severity = 0.0
        # Set by categories whose value saturates on a single hard finding
        self.saturated = False
        self.root_causes: list[str] = []
        self.warnings: list[str] = []
        self.good_things: list[str] = []
        self.tips: list[str] = []

    def unaffected(self, weight: float) -> None:
        self.total_weight += weight

    def affected(self, weight: float, severity: float) -> None:
        self.total_weight += weight
        self.affected_weight += weight
        self.weighted_severity += weight * severity

    @property
    def exposure(self) -> float:
        if self.total_weight == 0.0:
            return 0.0
        return min(1.0, self.affected_weight / self.total_weight)

    @property
    def impact(self) -> float:
        if self.affected_weight == 0.0:
            return 0.0
        return min(1.0, self.weighted_severity / self.affected_weight)

    @staticmethod
    def _add(messages: list, text: str) -> None:
        if text not in messages:
            messages.append(text)

    def root_cause(self, text: str) -> None:
        self._add(self.root_causes, text)

    def warning(self, text: str) -> None:
        self._add(self.warnings, text)

    def good_thing(self, text: str) -> None:
        self._add(self.good_things, text)

    def tip(self, text: str) -> None:
        self._add(self.tips, text)


class RiskAnalyser(LanguageListener):
    """
    Abstract base class for risk analysers.

    One subclass per risk category. Subclasses walk the project in
    `evaluate` and record units and messages on an Assessment.
    """

    category: RiskCategory = None

    def __init__(self, project: Project, knowledge: Optional[KnowledgeBase] = None):
        if project is None:
            logger.error("project cannot be null")
            raise InvalidArgument("project cannot be null")
        if not isinstance(project, Project):
            logger.error(f"Invalid project: {project!r}")
            raise InvalidArgument("project has to be a Project")
        if not project.bindings:
            logger.error(f"Project {project.name} has no component bindings")
            raise InvalidArgument("project needs at least one component binding")

        self.project = project
        self.knowledge = knowledge or get_knowledge_base()
        self.language = Language.default()
        self.messages = Messages(self.language)

    def on_language_change(self, language: Language) -> None:
        self.language = language
        self.messages = Messages(language)

    @property
    def title(self) -> str:
        return self.messages.get(f"risk.{self.category.value}")

    def analyse(self) -> RiskAnalysisResult:
        """Score the project for this category. Each call starts from scratch."""
        assessment = Assessment()
        self.evaluate(assessment)
        return RiskAnalysisResult.create(
            category=self.category,
            exposure=assessment.exposure,
            impact=assessment.impact,
            value=self.combine(assessment),
            root_causes=assessment.root_causes,
            warnings=assessment.warnings,
            good_things=assessment.good_things,
            tips=assessment.tips,
            title=self.title,
        )

    @abstractmethod
    def evaluate(self, assessment: Assessment) -> None:
        """Record every unit of this category on the assessment."""
        pass

    def combine(self, assessment: Assessment) -> float:
        """Risk value of the run."""
        return assessment.exposure * assessment.impact

    def failure_result(self, error: Exception) -> RiskAnalysisResult:
        """Worst-case result used when the analysis itself breaks."""
        return RiskAnalysisResult.create(
            category=self.category,
            exposure=1.0,
            impact=1.0,
            root_causes=[self.messages.get("engine.root.failure", error=str(error) or type(error).__name__)],
            title=self.title,
        )

    # Message helpers

    def describe(self, binding: ComponentBinding) -> str:
        component = binding.component
        return self.messages.get(
            "binding.full_name",
            name=component.name,
            version=component.version,
            license=component.license.value,
            link=self.messages.get(f"link.{binding.link.value}"),
        )

    def label(self, value) -> str:
        """Localized label of a knowledge base value such as Compatibility.UNKNOWN."""
        return self.messages.get(f"{type(value).__name__.lower()}.{value.value}")

    def project_licenses_text(self) -> str:
        return ", ".join(lic.value for lic in self.project.licenses)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.project.name}-{self.project.version})"
