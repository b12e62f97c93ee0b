from pathlib import Path
from typing import Optional

from fastapi import APIRouter, HTTPException, Request

from cyclo.errors import ConsistencyViolationError
from cyclo.models import TreemapData
from cyclo.services import analysis
from cyclo.services.hierarchy import build_treemap

router = APIRouter(prefix="/api/analysis", tags=["analysis"])


def _root_path(request: Request) -> Path:
    return getattr(request.app.state, "root_path", None) or Path.cwd()


@router.get("", response_model=TreemapData)
def get_analysis(request: Request, path: Optional[str] = None):
    """
    Analyze a directory and return the treemap arrays.

    Defaults to the root the server was started for.
    """
    target_path = Path(path) if path else _root_path(request)

    if not target_path.exists():
        raise HTTPException(status_code=404, detail="Path not found")

    try:
        node_set = analysis.scan_codebase(target_path)
        return build_treemap(node_set)
    except ConsistencyViolationError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/context")
def get_analysis_context(request: Request):
    """Report the directory this server analyzes by default."""
    root = _root_path(request)
    return {
        "root_path": str(root),
        "exists": root.exists(),
    }
