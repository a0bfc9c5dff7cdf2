# src/sitelens_shell/core/context/shell_context.py
import logging
from typing import List, Optional

from inspector.model import AnalysisResult
from inspector.dom.models import PageStructure

logger = logging.getLogger(__name__)


class ShellContext:
    """
    Session state of the shell: the analyses run so far and which one is active.
    Commands like 'tree', 'find' and 'export' operate on the active analysis.
    """

    def __init__(self):
        self.results: List[AnalysisResult] = []
        self.current: Optional[AnalysisResult] = None

    def set_results(self, results: List[AnalysisResult]) -> None:
        """Stores a batch of results and activates the first successful one."""
        self.results = list(results)
        self.current = next((r for r in self.results if r.ok), None)
        if self.current:
            logger.debug("Active analysis: %s", self.current.source)

    @property
    def structure(self) -> Optional[PageStructure]:
        return self.current.structure if self.current else None
