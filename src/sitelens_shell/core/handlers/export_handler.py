# src/sitelens_shell/core/handlers/export_handler.py
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from inspector.services.export_service import ExportService
from sitelens_shell.core.context.shell_context import ShellContext
from sitelens_shell.core.managers.config_manager import config_manager
from sitelens_shell.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

export_help_text = """
  export <json|csv> [-o <path>]
                      Exports the active analysis. 'json' writes the layout
                      summary, 'csv' writes one row per node. Relative paths
                      are placed in export.output_dir.
""".strip()

DEFAULT_FILENAMES = {
    "json": "layout-analysis.json",
    "csv": "layout-nodes.csv",
}


def handle_export(args: List[str], ctx: ShellContext, _stdin: Optional[str] = None) -> int:
    """Writes the active analysis to a JSON or CSV file."""
    parser = argparse.ArgumentParser(prog="export", description="Export the active analysis.")
    parser.add_argument("format", choices=sorted(DEFAULT_FILENAMES))
    parser.add_argument("--output", "-o", help="Output file path (absolute or relative to export.output_dir).")

    try:
        parsed_args = parser.parse_args(args)
    except SystemExit:
        return 1

    if ctx.structure is None:
        print("❌ No active analysis. Run 'analyze <file|url>' first.")
        return 1

    base_dir = Path(config_manager.get_nested("export.output_dir", str(PathUtils.get_user_documents_dir())))
    try:
        output_file = PathUtils.resolve_output_path(
            parsed_args.output or DEFAULT_FILENAMES[parsed_args.format], base_dir
        )
        exporter = ExportService()
        if parsed_args.format == "json":
            exporter.write_json(ctx.structure, output_file, url=ctx.current.source)
        else:
            exporter.write_csv(ctx.structure, output_file)
    except OSError as e:
        logger.error("Export failed: %s", e)
        print(f"❌ Export failed: {e}")
        return 1

    print(f"✅ Exported to {output_file}")
    return 0
