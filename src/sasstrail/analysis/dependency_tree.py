"""
Dependency Tree

Records parent -> child import edges as the import callback resolves them, so
a failed build can show the chain of imports that led to the failing file.
Diagnostics only: nothing in resolution reads the tree back.

One tree per top-level compile. Create a fresh instance for each document;
edges from unrelated compiles must never mix.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Set, Union

from ..utils.config import CIRCULAR_LABEL_SUFFIX

logger = logging.getLogger(__name__)


@dataclass
class DependencyEdge:
    """
    A path and where it was imported from.

    lookup_path is the raw @import argument that resolved to path. Children
    keep every import in order, repeats included.
    """
    path: str
    parent_path: str = ""
    lookup_path: str = ""
    children: List[str] = field(default_factory=list)


@dataclass
class TreeNode:
    """Display node (label + child nodes), ready for format_tree()"""
    label: str
    nodes: List["TreeNode"] = field(default_factory=list)


def _identity(path: str) -> str:
    return path


class DependencyTree:
    """
    Import order of one compile.

    root follows the most recent parent that had no entry when an edge was
    added. For a normal compile that is the top-level document; see
    add_path() for when it is not.
    """

    def __init__(self):
        self._edges: Dict[str, DependencyEdge] = {}
        self._root: str = ""
        self._label_transform: Callable[[str], str] = _identity

    def slice_prefix(self, count: int) -> None:
        """Trim the first count characters of every label when rendering"""
        self._label_transform = lambda path: path[count:]

    @property
    def root(self) -> str:
        return self._root

    @property
    def edges(self) -> Dict[str, DependencyEdge]:
        return self._edges

    def path_list(self) -> List[str]:
        return list(self._edges)

    def has_path(self, path: str) -> bool:
        return path in self._edges

    def get_path(self, path: str) -> Optional[DependencyEdge]:
        return self._edges.get(path)

    def add_path(self, path: str, parent_path: str, lookup_path: str = "") -> Optional[DependencyEdge]:
        """
        Record that parent_path imported path (via lookup_path).

        - A parent without an entry becomes root and gets a placeholder entry.
          If a nested file is recorded before its ancestors, root moves to
          that nested parent.
        - path keeps the parent and lookup of its first recording
        - Repeated imports append repeated children

        An empty path is logged and ignored.
        """
        if not path:
            logger.warning(f"Trying to add invalid path: {path!r} (parent: {parent_path})")
            return None

        if not self.has_path(parent_path):
            self._root = parent_path

        edge = self._edges.get(path)
        if edge is None:
            edge = self._edges[path] = DependencyEdge(
                path=path,
                parent_path=parent_path,
                lookup_path=lookup_path or "",
            )

        parent = self._edges.get(parent_path)
        if parent is None:
            parent = self._edges[parent_path] = DependencyEdge(path=parent_path)

        parent.children.append(path)
        return edge

    def ancestry_of(self, leaf_path: str) -> List[str]:
        """
        Paths from the root down to leaf_path (leaf last).

        Stops at an entry without a parent, or at a path already walked when
        the edges form a cycle. Unknown leaves give [].
        """
        chain: List[str] = []
        visited: Set[str] = set()
        edge = self._edges.get(leaf_path)
        while edge is not None and edge.path not in visited:
            visited.add(edge.path)
            chain.insert(0, edge.path)
            edge = self._edges.get(edge.parent_path) if edge.parent_path else None
        return chain

    def materialize(
        self,
        leaf_paths: Union[str, Iterable[str]],
        dest_tree: Optional["DependencyTree"] = None
    ) -> "DependencyTree":
        """
        Copy only the ancestors of leaf_paths into dest_tree.

        Each consecutive pair of a leaf's ancestry is replayed as add_path()
        unless dest_tree already has that path. Returns dest_tree (a new tree
        sharing this tree's label transform when None).
        """
        if isinstance(leaf_paths, str):
            leaf_paths = [leaf_paths]
        if dest_tree is None:
            dest_tree = DependencyTree()
            dest_tree._label_transform = self._label_transform

        for leaf_path in leaf_paths:
            previous = None
            for path in self.ancestry_of(leaf_path):
                if previous is not None and not dest_tree.has_path(path):
                    dest_tree.add_path(path, previous, self._edges[path].lookup_path)
                previous = path
        return dest_tree

    def render(
        self,
        root_path: Optional[str] = None,
        label_transform: Optional[Callable[[str], str]] = None
    ) -> TreeNode:
        """
        Display tree from root_path (default: root) downward.

        A child already on the current branch is shown once more, marked
        circular, and not expanded.
        """
        if root_path is None:
            root_path = self._root
        transform = label_transform or self._label_transform
        branch: Set[str] = set()

        def build(path: str) -> TreeNode:
            branch.add(path)
            edge = self._edges.get(path)
            nodes = []
            for child in (edge.children if edge else []):
                if child in branch:
                    nodes.append(TreeNode(label=transform(child) + CIRCULAR_LABEL_SUFFIX))
                else:
                    nodes.append(build(child))
            branch.discard(path)
            return TreeNode(label=transform(path), nodes=nodes)

        return build(root_path)

    def format(self, root_path: Optional[str] = None) -> str:
        return format_tree(self.render(root_path))


def format_tree(node: TreeNode) -> str:
    """
    Render a TreeNode as text.

        main.scss
        ├── _reset.scss
        └─┬ 1_vars__
          ├── vars/_colors.scss
          └── vars/_spacing.scss
    """
    lines = [node.label]
    _format_children(node, "", lines)
    return "\n".join(lines)


def _format_children(node: TreeNode, prefix: str, lines: List[str]) -> None:
    total = len(node.nodes)
    for i, child in enumerate(node.nodes):
        is_last = (i == total - 1)
        connector = "└─" if is_last else "├─"
        joint = "┬ " if child.nodes else "─ "
        lines.append(f"{prefix}{connector}{joint}{child.label}")
        _format_children(child, prefix + ("  " if is_last else "│ "), lines)
