"""
Rendered Tree Data Structures

Defines the visual tree produced by template variants. Nodes mirror HTML
elements closely enough for the rendering context to serialize them directly,
while roles and section keys keep the tree queryable without parsing markup.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterator, List, Optional

# CSS that keeps embedded line breaks in free-text blocks
PRESERVE_LINE_BREAKS = {"white-space": "pre-line"}


@dataclass
class Node:
    """
    Single element of a rendered resume.

    Attributes:
        tag: HTML-like element name (div, h1, a, span, section, ...)
        role: Semantic class (header, name, contact, section, heading, entry, badge, ...)
        text: Text content, rendered before children (None for pure containers)
        attrs: Element attributes (href, data-section, data-icon, ...)
        style: CSS properties (accent color lands here)
        children: Child nodes in display order
    """

    tag: str
    role: str = ""
    text: Optional[str] = None
    attrs: Dict[str, str] = field(default_factory=dict)
    style: Dict[str, str] = field(default_factory=dict)
    children: List["Node"] = field(default_factory=list)

    def iter_nodes(self) -> Iterator["Node"]:
        """Depth-first, pre-order iteration over this node and its descendants."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()

    def find_all(self, role: str) -> List["Node"]:
        return [node for node in self.iter_nodes() if node.role == role]

    def find(self, role: str) -> Optional["Node"]:
        return next((node for node in self.iter_nodes() if node.role == role), None)


def section(key: str, *children: Node, tag: str = "section") -> Node:
    """Build a section container tagged with its section key."""
    return Node(tag=tag, role="section", attrs={"data-section": key}, children=list(children))


@dataclass
class RenderedTree:
    """
    Output of a template variant.

    Attributes:
        template: Name of the template variant that produced the tree
        accent_color: Accent color the tree was themed with
        root: Root node of the visual tree
    """

    template: str
    accent_color: str
    root: Node

    def iter_nodes(self) -> Iterator[Node]:
        return self.root.iter_nodes()

    def find_all(self, role: str) -> List[Node]:
        return self.root.find_all(role)

    def find(self, role: str) -> Optional[Node]:
        return self.root.find(role)

    def sections(self, key: str) -> List[Node]:
        """All section blocks with the given key (a template may repeat one)."""
        return [
            node for node in self.find_all("section") if node.attrs.get("data-section") == key
        ]

    def section(self, key: str) -> Optional[Node]:
        """First section block with the given key, or None if not rendered."""
        matches = self.sections(key)
        return matches[0] if matches else None

    def section_keys(self) -> List[str]:
        """Keys of rendered sections in document order, repeats included."""
        return [node.attrs["data-section"] for node in self.find_all("section")]

    def headings(self) -> List[str]:
        return [node.text for node in self.find_all("heading")]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
