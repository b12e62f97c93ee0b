from typing import List
from pydantic import BaseModel, Field

class TreemapNode(BaseModel):
    label: str
    parent: str = ""
    # Heuristic scores are summed counts today, but the normalized
    # (per-function) form is fractional, so keep this a float.
    complexity: float = Field(default=0.0, ge=0)
    loc: int = Field(default=0, ge=0)

class TreemapData(BaseModel):
    """Parallel arrays handed to the chart, plus the color midpoint."""
    values: List[int] = Field(default_factory=list)
    colors: List[float] = Field(default_factory=list)
    labels: List[str] = Field(default_factory=list)
    parents: List[str] = Field(default_factory=list)
    cmid: float = 0.0

    model_config = {
        "frozen": True
    }

    def nodes(self) -> List[TreemapNode]:
        return [
            TreemapNode(label=label, parent=parent, complexity=cc, loc=loc)
            for label, parent, cc, loc in zip(self.labels, self.parents, self.colors, self.values)
        ]
