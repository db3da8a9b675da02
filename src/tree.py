"""Tree index and family tree construction."""

import logging
from collections.abc import Iterator

from models import Address, Gender, MaritalStatus, Person, PersonInfo, TreeNode

logger = logging.getLogger(__name__)

ANCESTOR_NAME = "Ancestor"


class TreeIndex:
    """
    Map from person id to the person's tree node.

    Nodes are created when a person is registered and re-linked whenever a parent
    link changes, so the tree never has to be rebuilt from scratch.
    """

    def __init__(self):
        self._nodes: dict[int, TreeNode[Person]] = {}

    def __contains__(self, person_id: int) -> bool:
        return person_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def add(self, person: Person) -> TreeNode[Person]:
        node = self._nodes.get(person.id)
        if node is None:
            node = TreeNode(key=person.id, value=person)
            self._nodes[person.id] = node
        return node

    def node(self, person_id: int) -> TreeNode[Person] | None:
        return self._nodes.get(person_id)

    def attach_child(self, parent_id: int, child_node: TreeNode[Person]) -> bool:
        """Append child_node under parent_id unless a child with the same key is present."""
        parent_node = self._nodes.get(parent_id)
        if parent_node is None:
            return False
        return parent_node.add_child(child_node)

    def detach_child(self, parent_id: int, child_id: int) -> bool:
        parent_node = self._nodes.get(parent_id)
        if parent_node is None:
            return False
        return parent_node.remove_child(child_id)


def _ancestor_placeholder(person_ids) -> Person:
    placeholder_id = max(person_ids, default=0) + 1
    info = PersonInfo(
        id=placeholder_id,
        first_name=ANCESTOR_NAME,
        last_name="",
        birthday="",
        gender=Gender.MALE,
    )
    return Person(info=info, address=Address(), marital_status=MaritalStatus.single())


def build_family_tree(manager) -> TreeNode[Person] | None:
    """
    Assemble the registered persons into a single rooted tree.

    Every person without parents is a root. A lone root is returned as is; several
    roots are gathered under a synthetic "Ancestor" node so the result always has
    exactly one root.

    Returns:
        The root node, or None when the registry is empty (or holds no parentless
        person at all, which only happens when parent links form a cycle).
    """
    roots = manager.roots()
    if not roots:
        if len(manager):
            logger.warning(f"No parentless person found among {len(manager)} persons")
        return None

    root_nodes = [manager.tree_index.node(person.id) for person in roots]
    if len(root_nodes) == 1:
        return root_nodes[0]

    ancestor = _ancestor_placeholder(person.id for person in manager)
    ancestor_node = TreeNode(key=ancestor.id, value=ancestor)
    for node in root_nodes:
        ancestor_node.add_child(node)
    logger.debug(f"Joined {len(root_nodes)} family lines under a synthetic ancestor")
    return ancestor_node


def get_root_parents(manager, person: Person, visited: set[int] | None = None) -> list[Person]:
    """
    Find the ultimate ancestors of a person.

    Ascends through mother then father links. Each id is marked in `visited`
    before its parents are explored, so common ancestors are reported once and a
    parent cycle cannot recurse forever.

    Args:
        manager: The person registry used to resolve parent ids.
        person: The person to start from.
        visited: Ids already explored; shared across the whole ascent.

    Returns:
        Root persons in first-discovery order (mother branch first). A person
        without parents is their own root.
    """
    if visited is None:
        visited = set()
    visited.add(person.id)

    if not person.has_parent():
        return [person]

    found: dict[int, Person] = {}
    for parent_id in (person.mother_id, person.father_id):
        if parent_id is None or parent_id in visited:
            continue
        parent = manager.lookup(parent_id)
        if parent is None:
            continue
        for root in get_root_parents(manager, parent, visited):
            found.setdefault(root.id, root)
    return list(found.values())


def walk(node: TreeNode[Person]) -> Iterator[tuple[int, TreeNode[Person]]]:
    """Yield (depth, node) pairs depth-first, skipping keys already on the current path."""

    def _walk(current: TreeNode[Person], depth: int, path: frozenset[int]):
        yield depth, current
        for child in current.children:
            if child.key not in path:
                yield from _walk(child, depth + 1, path | {child.key})

    yield from _walk(node, 0, frozenset({node.key}))
