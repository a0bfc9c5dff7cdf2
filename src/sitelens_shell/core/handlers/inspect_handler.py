# src/sitelens_shell/core/handlers/inspect_handler.py
from typing import List, Optional

from inspector.dom.queries import select
from inspector.dom.snippets import element_css, element_markup
from sitelens_shell.core.context.shell_context import ShellContext

inspect_help_text = """
  inspect <node-id>   Shows style, layout, box and generated code of one node.
""".strip()


def handle_inspect(args: List[str], ctx: ShellContext, _stdin: Optional[str] = None) -> int:
    if not args:
        print("Usage: inspect <node-id>")
        return 1
    if ctx.structure is None:
        print("❌ No active analysis. Run 'analyze <file|url>' first.")
        return 1

    selection = select(ctx.structure.root_node, args[0])
    if selection is None:
        print(f"❌ Node '{args[0]}' not found.")
        return 1

    node = selection.node
    box = node.bounding_box
    layout = node.layout_info

    print(f"<{node.tag_name}> [{node.id}]  {node.path}")
    print(f"  Ancestors: {' > '.join(a.id for a in selection.ancestors) or '-'}")
    print(f"  Siblings:  {len(selection.siblings)}   Children: {len(node.children)}")
    print(f"  Box:       x={box.x:g} y={box.y:g} w={box.width:g} h={box.height:g} "
          f"(right={box.right:g}, bottom={box.bottom:g})")
    print(f"  Display:   {node.display_type.value}  visible={node.is_visible}")
    print(f"  Layout:    flex container={layout.is_flex_container} grid container={layout.is_grid_container} "
          f"flex item={layout.is_flex_item} grid item={layout.is_grid_item}")
    if layout.flex_properties:
        print(f"  Flex:      {layout.flex_properties.model_dump()}")
    if layout.grid_properties:
        print(f"  Grid:      {layout.grid_properties.model_dump()}")
    if node.text_content:
        print(f"  Text:      {node.text_content}")
    print("\n" + element_markup(node))
    print("\n" + element_css(node))
    return 0
