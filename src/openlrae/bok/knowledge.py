"""Knowledge base bundle shared by all risk analysers."""

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from openlrae.bok.compatibility import CompatibilityTable
from openlrae.bok.properties import ObsolescenceTable, SpreadingTable, TrendTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KnowledgeBase:
    """The four read-only tables analysers consult."""

    compatibilities: CompatibilityTable
    obsolescences: ObsolescenceTable
    spreadings: SpreadingTable
    trends: TrendTable

    @classmethod
    def build(cls) -> "KnowledgeBase":
        return cls(
            compatibilities=CompatibilityTable.build(),
            obsolescences=ObsolescenceTable.build(),
            spreadings=SpreadingTable.build(),
            trends=TrendTable.build(),
        )


_default: Optional[KnowledgeBase] = None
_lock = threading.Lock()


def get_knowledge_base() -> KnowledgeBase:
    """Return the shipped knowledge base, building it on first use."""
    global _default
    if _default is None:
        with _lock:
            if _default is None:
                logger.debug("Building default knowledge base")
                _default = KnowledgeBase.build()
    return _default
