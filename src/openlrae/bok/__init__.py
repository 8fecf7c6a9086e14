"""License knowledge base."""

from openlrae.bok.compatibility import CompatibilityEntry, CompatibilityTable
from openlrae.bok.knowledge import KnowledgeBase, get_knowledge_base
from openlrae.bok.properties import ObsolescenceTable, SpreadingTable, TrendTable
from openlrae.bok.values import (
    Compatibility,
    ComponentWeight,
    Contribution,
    License,
    LicenseResolution,
    LinkType,
    Obsolescence,
    Redistribution,
    RiskCategory,
    Spreading,
    Trend,
    Verbosity,
)

__all__ = [
    "CompatibilityEntry",
    "CompatibilityTable",
    "KnowledgeBase",
    "get_knowledge_base",
    "ObsolescenceTable",
    "SpreadingTable",
    "TrendTable",
    "Compatibility",
    "ComponentWeight",
    "Contribution",
    "License",
    "LicenseResolution",
    "LinkType",
    "Obsolescence",
    "Redistribution",
    "RiskCategory",
    "Spreading",
    "Trend",
    "Verbosity",
]
