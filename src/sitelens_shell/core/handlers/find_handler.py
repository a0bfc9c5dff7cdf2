# src/sitelens_shell/core/handlers/find_handler.py
import argparse
from typing import List, Optional

from inspector.dom.queries import find_by_tag, find_with_class, search
from sitelens_shell.core.context.shell_context import ShellContext

find_help_text = """
  find <query> | --tag <tag> | --class <fragment>
                      Searches the active tree by tag, class or id.
""".strip()

MAX_LISTED = 50


def handle_find(args: List[str], ctx: ShellContext, _stdin: Optional[str] = None) -> int:
    parser = argparse.ArgumentParser(prog="find", description="Search nodes.")
    parser.add_argument("query", nargs="?", default="")
    parser.add_argument("--tag", default=None)
    parser.add_argument("--class", dest="class_fragment", default=None)

    try:
        parsed_args = parser.parse_args(args)
    except SystemExit:
        return 1

    if ctx.structure is None:
        print("❌ No active analysis. Run 'analyze <file|url>' first.")
        return 1

    root = ctx.structure.root_node
    if parsed_args.tag:
        nodes = find_by_tag(root, parsed_args.tag.lower())
    elif parsed_args.class_fragment:
        nodes = find_with_class(root, parsed_args.class_fragment)
    elif parsed_args.query:
        nodes = search(root, parsed_args.query)
    else:
        print("Usage: find <query> | --tag <tag> | --class <fragment>")
        return 1

    print(f"Found {len(nodes)} elements")
    for node in nodes[:MAX_LISTED]:
        print(f"  [{node.id}] {node.path}")
    if len(nodes) > MAX_LISTED:
        print(f"  ... and {len(nodes) - MAX_LISTED} more")
    return 0
