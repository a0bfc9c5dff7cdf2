# src/sitelens_shell/core/handlers/tree_handler.py
import argparse
from typing import List, Optional

from inspector.dom.summary import MAX_DUMP_CHILDREN, format_node_tree
from sitelens_shell.core.context.shell_context import ShellContext
from sitelens_shell.core.managers.config_manager import config_manager

tree_help_text = """
  tree [--depth N] [--children N] [--outline]
                      Prints the reconstructed tree of the active analysis.
                      --outline prints the raw document outline instead.
""".strip()


def handle_tree(args: List[str], ctx: ShellContext, _stdin: Optional[str] = None) -> int:
    parser = argparse.ArgumentParser(prog="tree", description="Show the layout tree.")
    parser.add_argument("--depth", type=int, default=None)
    parser.add_argument("--children", type=int, default=MAX_DUMP_CHILDREN)
    parser.add_argument("--outline", action="store_true")

    try:
        parsed_args = parser.parse_args(args)
    except SystemExit:
        return 1

    if ctx.structure is None:
        print("❌ No active analysis. Run 'analyze <file|url>' first.")
        return 1

    if parsed_args.outline:
        print(ctx.current.outline, end="")
        return 0

    depth = parsed_args.depth
    if depth is None:
        depth = int(config_manager.get_nested("shell.tree_depth", 4))
    print(format_node_tree(ctx.structure.root_node, max_depth=depth, max_children=parsed_args.children), end="")
    return 0
