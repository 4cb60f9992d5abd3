"""Turn the flat bullet items of a list into a tree for rendering."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from ..models import BulletItem


@dataclass
class BulletNode:
    text: str
    children: list["BulletNode"] = field(default_factory=list)


def nest_bullets(items: Sequence[BulletItem]) -> list[BulletNode]:
    """Nest bullet items according to their levels.

    An item becomes a child of the closest preceding item with a strictly lower \
    level, or a root if there is none. Levels don't have to increase one by one: an \
    item at level 2 right after an item at level 0 is nested directly under it.

    Args:
        items: Items of a bullet list, in order.

    Returns:
        Root nodes of the tree.
    """
    roots: list[BulletNode] = []
    stack: list[tuple[int, BulletNode]] = []
    for item in items:
        node = BulletNode(item.text)
        while stack and stack[-1][0] >= item.level:
            stack.pop()
        if stack:
            stack[-1][1].children.append(node)
        else:
            roots.append(node)
        stack.append((item.level, node))
    return roots
