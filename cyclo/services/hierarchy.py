from typing import Dict, Iterator, List, Sequence

from cyclo.config import LABEL_SEPARATOR
from cyclo.errors import ConsistencyViolationError
from cyclo.models import TreemapData, TreemapNode


def _join(parts: Sequence[str]) -> str:
    return LABEL_SEPARATOR.join(parts)


class NodeSet:
    """
    Append-only accumulator for the treemap.

    Nodes live in four parallel arrays (loc, complexity, label, parent) with
    a label index on the side, so a directory referenced by many files is
    materialized exactly once.
    """

    def __init__(self):
        self._nlocs: List[int] = []
        self._ccs: List[float] = []
        self._labels: List[str] = []
        self._parents: List[str] = []
        self._index: Dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, label: object) -> bool:
        return label in self._index

    @property
    def nlocs(self) -> Sequence[int]:
        return tuple(self._nlocs)

    @property
    def complexities(self) -> Sequence[float]:
        return tuple(self._ccs)

    @property
    def labels(self) -> Sequence[str]:
        return tuple(self._labels)

    @property
    def parents(self) -> Sequence[str]:
        return tuple(self._parents)

    def _append(self, label: str, parent: str, complexity: float, loc: int) -> None:
        self._index[label] = len(self._labels)
        self._nlocs.append(loc)
        self._ccs.append(complexity)
        self._labels.append(label)
        self._parents.append(parent)

    def add_file(self, parts: Sequence[str], depth: int, complexity: float, loc: int) -> str:
        """
        Add a file node plus any ancestor directory nodes not seen yet.

        ``parts`` is the file's full path split into components and ``depth``
        the number of directory levels below the analysis root. The label
        keeps the last ``depth + 1`` components, i.e. the path starting at
        the root directory's own name.
        """
        if depth < 0 or depth >= len(parts):
            raise ConsistencyViolationError(
                f"depth {depth} does not fit a path of {len(parts)} components"
            )

        relative = list(parts[len(parts) - depth - 1:])
        label = _join(relative)
        if label in self._index:
            raise ConsistencyViolationError(f"file '{label}' was added twice")

        relative.pop()
        self._append(label, _join(relative), complexity, loc)

        while relative:
            ancestor = _join(relative)
            if ancestor in self._index:
                # Everything above a known directory is already present.
                break
            relative.pop()
            self._append(ancestor, _join(relative), 0.0, 0)

        return label

    def nodes(self) -> Iterator[TreemapNode]:
        for label, parent, cc, loc in zip(self._labels, self._parents, self._ccs, self._nlocs):
            yield TreemapNode(label=label, parent=parent, complexity=cc, loc=loc)


def build_treemap(node_set: NodeSet) -> TreemapData:
    """
    Validate the accumulated arrays and extract the chart record set.

    The mean complexity (directory nodes included) is used as the color
    scale midpoint.
    """
    nlocs = list(node_set.nlocs)
    ccs = list(node_set.complexities)
    labels = list(node_set.labels)
    parents = list(node_set.parents)

    if len(nlocs) != len(labels):
        raise ConsistencyViolationError(
            f"nloc ({len(nlocs)}) and label ({len(labels)}) array lengths differ"
        )
    if len(labels) != len(parents):
        raise ConsistencyViolationError(
            f"labels ({len(labels)}) and parents ({len(parents)}) array lengths differ"
        )
    if len(parents) != len(ccs):
        raise ConsistencyViolationError(
            f"parents ({len(parents)}) and ccs ({len(ccs)}) array lengths differ"
        )
    if not labels:
        raise ConsistencyViolationError("no recognized source files were analyzed; nothing to visualize")

    mean = sum(ccs) / len(ccs)

    return TreemapData(values=nlocs, colors=ccs, labels=labels, parents=parents, cmid=mean)
