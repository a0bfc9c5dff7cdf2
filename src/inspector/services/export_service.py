# src/inspector/services/export_service.py
import json
import logging
from pathlib import Path
from typing import Any, Dict

import pandas as pd

from inspector.dom.models import PageStructure
from inspector.dom.queries import flatten

logger = logging.getLogger(__name__)

NODE_COLUMNS = [
    "id", "tag", "classes", "element_id", "depth", "path", "display_type",
    "is_visible", "is_flex_container", "is_grid_container", "is_flex_item",
    "is_grid_item", "x", "y", "width", "height", "text",
]


class ExportService:
    """
    Serializes analysis results for use outside the shell.

    The JSON export keeps the camelCase key layout of the layout-analysis
    download format; the CSV export is one row per reconstructed node.
    """

    @staticmethod
    def build_export(structure: PageStructure, url: str = "analyzed-page") -> Dict[str, Any]:
        summary = structure.layout_summary
        return {
            "url": url,
            "structure": {
                "totalElements": structure.total_elements,
                "maxDepth": structure.max_depth,
                "layoutPattern": summary.layout_pattern.value,
                "elements": dict(structure.element_counts),
            },
            "layoutSummary": {
                "hasHeader": summary.has_header,
                "hasNav": summary.has_nav,
                "hasMain": summary.has_main,
                "hasFooter": summary.has_footer,
                "hasAside": summary.has_aside,
                "hasSections": summary.has_sections,
                "hasArticles": summary.has_articles,
                "layoutPattern": summary.layout_pattern.value,
                "containerCount": summary.container_count,
                "flexContainers": summary.flex_containers,
                "gridContainers": summary.grid_containers,
            },
        }

    def write_json(self, structure: PageStructure, output_file: Path, url: str = "analyzed-page") -> Path:
        payload = self.build_export(structure, url)
        with open(output_file, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
        logger.info("Exported layout summary to %s", output_file)
        return output_file

    @staticmethod
    def nodes_dataframe(structure: PageStructure) -> pd.DataFrame:
        """Flattens the tree (pre-order) into a DataFrame, one row per node."""
        rows = []
        for node in flatten(structure.root_node):
            box = node.bounding_box
            layout = node.layout_info
            rows.append({
                "id": node.id,
                "tag": node.tag_name,
                "classes": node.class_attribute,
                "element_id": node.id_attribute,
                "depth": node.depth,
                "path": node.path,
                "display_type": node.display_type.value,
                "is_visible": node.is_visible,
                "is_flex_container": layout.is_flex_container,
                "is_grid_container": layout.is_grid_container,
                "is_flex_item": layout.is_flex_item,
                "is_grid_item": layout.is_grid_item,
                "x": box.x,
                "y": box.y,
                "width": box.width,
                "height": box.height,
                "text": node.text_content,
            })
        return pd.DataFrame(rows, columns=NODE_COLUMNS)

    def write_csv(self, structure: PageStructure, output_file: Path) -> Path:
        df = self.nodes_dataframe(structure)
        df.to_csv(output_file, index=False)
        logger.info("Exported %d nodes to %s", len(df), output_file)
        return output_file
