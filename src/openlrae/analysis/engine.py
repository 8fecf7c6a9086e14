"""License risk analysis engine."""

import logging
import threading
from typing import Optional, Union

from openlrae.analysis.base import RiskAnalyser
from openlrae.analysis.result import RiskAnalysisResult
from openlrae.bok.knowledge import KnowledgeBase
from openlrae.errors import EngineConfigurationError, InvalidArgument
from openlrae.i18n import Language, LanguageNotifier
from openlrae.model import Project

logger = logging.getLogger(__name__)


class AnalysisEngine:
    """
    Runs a set of risk analysers over a project.

    Results accumulate: every call to analyse() appends a fresh result per
    analyser to the engine's result list and returns the whole list, so a
    caller can register more analysers between runs and keep one history.
    Call clear_results() to start over.
    """

    def __init__(self, first_analyser: RiskAnalyser, language: Union[Language, str, None] = None):
        self._lock = threading.Lock()
        self._analysers: list[RiskAnalyser] = []
        self._results: list[RiskAnalysisResult] = []
        self._notifier = LanguageNotifier(Language.default())
        if language is not None:
            self._notifier.set_language(language)
        self.add_analyser(first_analyser)

    @classmethod
    def with_all_analysers(
        cls,
        project: Project,
        knowledge: Optional[KnowledgeBase] = None,
        language: Union[Language, str, None] = None,
    ) -> "AnalysisEngine":
        """Engine with one analyser per risk category, in category order."""
        from openlrae.analysis import ALL_ANALYSERS

        analysers = [analyser_class(project, knowledge) for analyser_class in ALL_ANALYSERS]
        engine = cls(analysers[0], language=language)
        for analyser in analysers[1:]:
            engine.add_analyser(analyser)
        return engine

    @property
    def language(self) -> Language:
        return self._notifier.language

    @property
    def analysers(self) -> list[RiskAnalyser]:
        with self._lock:
            return list(self._analysers)

    @property
    def results(self) -> list[RiskAnalysisResult]:
        with self._lock:
            return list(self._results)

    def add_analyser(self, analyser: RiskAnalyser) -> None:
        """Register an analyser; it immediately switches to the engine language."""
        if analyser is None:
            logger.error("risk analyser cannot be null")
            raise InvalidArgument("risk analyser cannot be null")
        if not isinstance(analyser, RiskAnalyser):
            logger.error(f"Invalid risk analyser: {analyser!r}")
            raise InvalidArgument("analyser has to be a RiskAnalyser")
        with self._lock:
            self._analysers.append(analyser)
            self._notifier.subscribe(analyser)

    def analyse(self) -> list[RiskAnalysisResult]:
        """
        Run every analyser in registration order.

        Returns:
            All results gathered by this engine so far, oldest first
        """
        with self._lock:
            if not self._analysers:
                raise EngineConfigurationError("the engine has no risk analysers")
            for analyser in self._analysers:
                self._results.append(self._run(analyser))
            return list(self._results)

    def clear_results(self) -> None:
        with self._lock:
            self._results.clear()

    def set_language(self, language: Union[Language, str]) -> None:
        """Switch every registered analyser to another language."""
        with self._lock:
            self._notifier.set_language(language)

    def set_default_language(self) -> None:
        with self._lock:
            self._notifier.set_default_language()

    @staticmethod
    def _run(analyser: RiskAnalyser) -> RiskAnalysisResult:
        try:
            return analyser.analyse()
        except Exception as e:
            logger.exception(f"{analyser!r} failed, reporting worst case: {e}")
            return analyser.failure_result(e)
