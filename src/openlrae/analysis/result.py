"""Risk analysis result."""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from openlrae.bok.values import RiskCategory, Verbosity
from openlrae.errors import InvalidArgument

logger = logging.getLogger(__name__)

DECIMALS = 4


def normalize(score: float) -> float:
    """Round a score to the precision results are reported with."""
    return round(score, DECIMALS)


@dataclass(frozen=True)
class RiskAnalysisResult:
    """Outcome of one risk analyser run."""

    category: RiskCategory
    exposure: float
    impact: float
    value: float
    root_causes: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    good_things: tuple[str, ...] = ()
    tips: tuple[str, ...] = ()
    title: str = ""

    def __post_init__(self):
        if not isinstance(self.category, RiskCategory):
            logger.error("risk category cannot be null")
            raise InvalidArgument("category has to be a RiskCategory")
        for name in ("exposure", "impact", "value"):
            score = getattr(self, name)
            if not 0.0 <= score <= 1.0:
                logger.error(f"{name} {score} is outside [0, 1]")
                raise InvalidArgument(f"{name} has to be a float between 0.0 and 1.0")

    @classmethod
    def create(
        cls,
        category: RiskCategory,
        exposure: float,
        impact: float,
        value: Optional[float] = None,
        root_causes: Iterable[str] = (),
        warnings: Iterable[str] = (),
        good_things: Iterable[str] = (),
        tips: Iterable[str] = (),
        title: str = "",
    ) -> "RiskAnalysisResult":
        """Build a result with normalized scores; value defaults to exposure x impact."""
        if value is None:
            value = exposure * impact
        return cls(
            category=category,
            exposure=normalize(exposure),
            impact=normalize(impact),
            value=normalize(value),
            root_causes=tuple(root_causes),
            warnings=tuple(warnings),
            good_things=tuple(good_things),
            tips=tuple(tips),
            title=title or category.value,
        )

    def to_dict(self, verbosity: Verbosity = Verbosity.DETAILED) -> dict:
        """Convert to dictionary for JSON serialization."""
        sections = verbosity.sections
        return {
            "risk": self.title,
            "riskvalue": self.value,
            "riskexposure": self.exposure,
            "riskimpact": self.impact,
            "rootcauses": list(self.root_causes) if "rootcauses" in sections else [],
            "warnings": list(self.warnings) if "warnings" in sections else [],
            "goodthings": list(self.good_things) if "goodthings" in sections else [],
            "tips": list(self.tips) if "tips" in sections else [],
        }
