"""Risk analysers and the analysis engine."""

from openlrae.analysis.base import Assessment, RiskAnalyser
from openlrae.analysis.compatibility import (
    IncompatibleComponentsAnalyser,
    LimitedComponentsLicensesAnalyser,
    LimitedProjectLicensesAnalyser,
)
from openlrae.analysis.composition import (
    HeterogeneousComponentsLicensesAnalyser,
    MisalignedComponentsLicensesAnalyser,
)
from openlrae.analysis.engine import AnalysisEngine
from openlrae.analysis.properties import (
    ObsoleteComponentsLicensesAnalyser,
    ObsoleteProjectLicensesAnalyser,
    ScarcelySpreadComponentsLicensesAnalyser,
    ScarcelySpreadProjectLicensesAnalyser,
    UnfashionableComponentsLicensesAnalyser,
    UnfashionableProjectLicensesAnalyser,
)
from openlrae.analysis.result import RiskAnalysisResult

# One analyser per risk category, in RiskCategory order
ALL_ANALYSERS = (
    IncompatibleComponentsAnalyser,
    LimitedProjectLicensesAnalyser,
    LimitedComponentsLicensesAnalyser,
    ObsoleteProjectLicensesAnalyser,
    ObsoleteComponentsLicensesAnalyser,
    UnfashionableProjectLicensesAnalyser,
    UnfashionableComponentsLicensesAnalyser,
    ScarcelySpreadProjectLicensesAnalyser,
    ScarcelySpreadComponentsLicensesAnalyser,
    HeterogeneousComponentsLicensesAnalyser,
    MisalignedComponentsLicensesAnalyser,
)

__all__ = [
    "ALL_ANALYSERS",
    "AnalysisEngine",
    "Assessment",
    "RiskAnalyser",
    "RiskAnalysisResult",
    "IncompatibleComponentsAnalyser",
    "LimitedProjectLicensesAnalyser",
    "LimitedComponentsLicensesAnalyser",
    "ObsoleteProjectLicensesAnalyser",
    "ObsoleteComponentsLicensesAnalyser",
    "UnfashionableProjectLicensesAnalyser",
    "UnfashionableComponentsLicensesAnalyser",
    "ScarcelySpreadProjectLicensesAnalyser",
    "ScarcelySpreadComponentsLicensesAnalyser",
    "HeterogeneousComponentsLicensesAnalyser",
    "MisalignedComponentsLicensesAnalyser",
]
