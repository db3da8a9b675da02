"""Interactive display of the family tree."""

import logging
import tempfile
from pathlib import Path

import matplotlib.image as mpimg
import matplotlib.pyplot as plt

from export import render, to_dot
from tree import build_family_tree, walk

logger = logging.getLogger(__name__)


def describe_tree(manager) -> str:
    """Indented text outline of the rooted family tree."""
    root = build_family_tree(manager)
    if root is None:
        return ""
    lines = []
    for depth, node in walk(root):
        person = node.value
        name = " ".join(part for part in (person.first_name, person.last_name) if part)
        born = f" ({person.birthday})" if person.birthday else ""
        lines.append(f"{'  ' * depth}{name}{born}")
    return "\n".join(lines)


def show_tree(manager, figsize: tuple[int, int] = (20, 16)):
    """
    Render the registry with Graphviz and display the image in a matplotlib window.

    Requires the Graphviz `dot` executable.
    """
    with tempfile.TemporaryDirectory() as tmp:
        dot_file = Path(tmp) / "tree.dot"
        png_file = Path(tmp) / "tree.png"
        dot_file.write_text(to_dot(manager), encoding="utf-8")
        render(dot_file, png_file, "png")
        img = mpimg.imread(str(png_file))

    logger.debug(f"Displaying family tree of {len(manager)} persons")
    plt.figure(figsize=figsize)
    plt.imshow(img)
    plt.axis("off")
    plt.tight_layout()
    plt.show()
