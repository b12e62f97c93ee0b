import logging
from pathlib import Path
from typing import Optional, Tuple

from cyclo.config import DEBUG_FILE_NAME
from cyclo.errors import PER_FILE_ERRORS
from cyclo.models import TreemapData
from cyclo.services import render
from cyclo.services.complexity import estimate_file_complexity
from cyclo.services.hierarchy import NodeSet, build_treemap
from cyclo.services.languages import classify, get_profile
from cyclo.services.line_counter import LineStatistics, count_lines
from cyclo.services.walker import WalkEntry, walk_entries

logger = logging.getLogger(__name__)


def analyze_single_file(entry: WalkEntry, stats: Optional[LineStatistics] = None) -> Tuple[float, int]:
    """
    Return (complexity, loc) for one walked file.

    Raises one of the per-file errors when the file cannot be analyzed; the
    caller decides whether that is fatal.
    """
    language = classify(entry.path.name)
    estimate = estimate_file_complexity(entry.path, get_profile(language))
    nloc = count_lines(entry.path, language, stats)
    return estimate.score, nloc


def scan_codebase(root_path: Path, stats: Optional[LineStatistics] = None) -> NodeSet:
    root_path = Path(root_path)
    if not root_path.exists():
        raise FileNotFoundError(f"Path does not exist: {root_path}")

    print(f"🔍 Scanning: {root_path.resolve()}", flush=True)

    node_set = NodeSet()
    analyzed = 0
    skipped = 0

    for entry in walk_entries(root_path):
        try:
            complexity, nloc = analyze_single_file(entry, stats)
        except PER_FILE_ERRORS as e:
            skipped += 1
            logger.warning("Skipping %s: %s", entry.path, e)
            continue

        label = node_set.add_file(entry.path.parts, entry.depth, complexity, nloc)
        analyzed += 1
        logger.debug("Analyzed %s (nloc=%d, cc=%.2f)", label, nloc, complexity)

    print(f"📂 Analyzed {analyzed} source files ({skipped} skipped), {len(node_set)} treemap nodes", flush=True)
    return node_set


def run_analysis(
    root_path: Path,
    output_dir: Path,
    debug: bool = False,
    debug_path: Optional[Path] = None,
    stats: Optional[LineStatistics] = None,
) -> TreemapData:
    """
    Scan, validate and render in one go.

    Nothing is written unless the node set passes validation.
    """
    node_set = scan_codebase(root_path, stats)
    data = build_treemap(node_set)

    output_dir = Path(output_dir)
    script_path = render.write_treemap_script(data, output_dir)
    render.ensure_index_page(output_dir)
    print(f"✅ Saved treemap to {script_path}", flush=True)

    if debug:
        dump_path = render.write_debug_dump(data, debug_path or Path(DEBUG_FILE_NAME))
        print(f"📝 Wrote debug listing to {dump_path}", flush=True)

    return data
