# src/sitelens_shell/core/handlers/analyze_handler.py
import argparse
import json
import logging
from typing import List, Optional

from inspector.controllers.analysis_controller import AnalysisController
from inspector.model import AnalysisResult
from inspector.services.export_service import ExportService
from sitelens_shell.core.context.shell_context import ShellContext

logger = logging.getLogger(__name__)

analyze_help_text = """
  analyze <file|url>... [--json] [--workers N]
                      Reconstructs the layout tree of one or more pages.
                      The first successful result becomes the active analysis.
""".strip()


def _print_summary(result: AnalysisResult) -> None:
    structure = result.structure
    summary = structure.layout_summary
    landmarks = [
        name for name, present in (
            ("header", summary.has_header),
            ("nav", summary.has_nav),
            ("main", summary.has_main),
            ("aside", summary.has_aside),
            ("footer", summary.has_footer),
        ) if present
    ]
    print(f"📄 {result.source}")
    print(f"   Title:          {structure.title}")
    print(f"   Elements:       {structure.total_elements} (max depth {structure.max_depth})")
    print(f"   Layout pattern: {summary.layout_pattern.value}")
    print(f"   Landmarks:      {', '.join(landmarks) or '-'}")
    print(f"   Sections/articles: {summary.has_sections}/{summary.has_articles}")
    print(f"   Containers:     {summary.container_count} "
          f"(flex {summary.flex_containers}, grid {summary.grid_containers})")


def handle_analyze(args: List[str], ctx: ShellContext, _stdin: Optional[str] = None) -> int:
    """Analyzes the given sources and makes the first successful one active."""
    parser = argparse.ArgumentParser(prog="analyze", description="Analyze page layout structure.")
    parser.add_argument("sources", nargs="+", help="HTML file paths or http(s) URLs.")
    parser.add_argument("--json", action="store_true", help="Print the export JSON instead of a summary.")
    parser.add_argument("--workers", type=int, default=None, help="Parallel workers for several sources.")

    try:
        parsed_args = parser.parse_args(args)
    except SystemExit:
        return 1

    controller = AnalysisController(workers=parsed_args.workers)
    results = controller.analyze_many(parsed_args.sources)
    ctx.set_results(results)

    exit_code = 0
    exporter = ExportService()
    for result in results:
        if not result.ok:
            print(f"❌ {result.source}: {result.error}")
            exit_code = 1
            continue
        if parsed_args.json:
            print(json.dumps(exporter.build_export(result.structure, result.source), indent=2))
        else:
            _print_summary(result)

    return exit_code
