import json
import shutil
from pathlib import Path

from cyclo.config import COLOR_SCALE, INDEX_PAGE_NAME, SCRIPT_RELATIVE_PATH
from cyclo.models import TreemapData

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"

SCRIPT_TEMPLATE = """var jsondata = [{{
        type: "treemap",
        values: {values},
        labels: {labels},
        parents: {parents},
        marker: {{colors: {colors}, cmid: {cmid}, colorscale: {colorscale}}}
}}]
"""

def get_script_path(output_dir: Path) -> Path:
    return Path(output_dir) / SCRIPT_RELATIVE_PATH

def render_treemap_script(data: TreemapData) -> str:
    return SCRIPT_TEMPLATE.format(
        values=json.dumps(data.values),
        labels=json.dumps(data.labels),
        parents=json.dumps(data.parents),
        colors=json.dumps([round(cc, 2) for cc in data.colors]),
        cmid=json.dumps(round(data.cmid, 2)),
        colorscale=json.dumps(COLOR_SCALE),
    )

def write_treemap_script(data: TreemapData, output_dir: Path) -> Path:
    script_path = get_script_path(output_dir)
    script_path.parent.mkdir(parents=True, exist_ok=True)
    with open(script_path, "w", encoding="utf-8") as f:
        f.write(render_treemap_script(data))
    return script_path

def ensure_index_page(output_dir: Path) -> Path:
    """Copy the bundled viewer page into output_dir unless one is already there."""
    index_path = Path(output_dir) / INDEX_PAGE_NAME
    if not index_path.exists():
        index_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(STATIC_DIR / INDEX_PAGE_NAME, index_path)
    return index_path

def write_debug_dump(data: TreemapData, path: Path) -> Path:
    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        for label, nloc, cc in zip(data.labels, data.values, data.colors):
            f.write(f"file: {json.dumps(label)}, nloc: {nloc}, cc: {cc}\n")
    return path
