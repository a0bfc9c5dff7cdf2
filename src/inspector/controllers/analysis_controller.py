# src/inspector/controllers/analysis_controller.py
import logging
from concurrent.futures import ProcessPoolExecutor
from typing import Callable, List, Optional

from tqdm.auto import tqdm

from inspector.dom.builder import DOMBuilder
from inspector.dom.summary import format_structure
from inspector.model import AnalysisResult
from inspector.services.page_loader_service import PageLoaderService, PageLoadError
from sitelens_shell.core.managers.config_manager import config_manager

logger = logging.getLogger(__name__)


def analyze_html(html: str, source: str = "inline") -> AnalysisResult:
    """
    Builds the layout tree and the textual outline for one HTML document.
    The document is parsed once and shared by both.
    """
    builder = DOMBuilder()
    soup = builder.parse(html)
    structure = builder.build_from_soup(soup)
    return AnalysisResult(source=source, structure=structure, outline=format_structure(soup))


def _worker_analyze_page(source: str) -> AnalysisResult:
    """
    Worker function to load and analyze a single page in a separate process.
    Every call owns its loader, builder and node id counter.
    """
    loader = PageLoaderService()
    try:
        html = loader.load(source)
    except PageLoadError as e:
        logger.error("Could not load %s: %s", source, e)
        return AnalysisResult(source=source, error=str(e))
    finally:
        loader.close()

    return analyze_html(html, source)


class AnalysisController:
    """
    Runs independent analyses for one or more sources.

    Builds share no state, so several pages can be processed in parallel;
    results are returned in the order of the given sources.
    """

    def __init__(self, workers: Optional[int] = None):
        self.workers = workers if workers is not None else int(config_manager.get_nested("analysis.max_workers", 4))

    def analyze(self, source: str) -> AnalysisResult:
        return _worker_analyze_page(source)

    def analyze_many(
            self,
            sources: List[str],
            progress_callback: Optional[Callable[[int, int], None]] = None
    ) -> List[AnalysisResult]:
        """Analyzes all sources, in parallel when more than one worker is configured."""
        total = len(sources)
        if not total:
            return []

        workers = min(self.workers, total)
        results: List[AnalysisResult] = []

        with tqdm(total=total, desc="Analyzing", unit="page", disable=total < 2) as bar:
            if workers <= 1:
                results_iter = map(_worker_analyze_page, sources)
                results = self._collect(results_iter, bar, total, progress_callback)
            else:
                with ProcessPoolExecutor(max_workers=workers) as executor:
                    results_iter = executor.map(_worker_analyze_page, sources)
                    results = self._collect(results_iter, bar, total, progress_callback)

        failed = sum(1 for r in results if not r.ok)
        logger.info("Analyzed %d source(s), %d failed.", total, failed)
        return results

    @staticmethod
    def _collect(results_iter, bar, total, progress_callback) -> List[AnalysisResult]:
        results = []
        for i, result in enumerate(results_iter):
            results.append(result)
            bar.update(1)
            if progress_callback:
                progress_callback(i + 1, total)
        return results
