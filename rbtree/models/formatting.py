"""
Human readable renderings of nodes and trees.
"""

from rbtree.models.node import Node, Side, TraversalOrder
from rbtree.models.red_black_tree import RedBlackTree

NIL_LABEL = "NULL(BLACK)"


def label(node: Node | None) -> str:
    """Render a node as ``key(COLOR)``; an absent node is ``NULL(BLACK)``."""
    if node is None:
        return NIL_LABEL
    return f"{node.key}({node.color.name})"


def describe_node(tree: RedBlackTree, node: Node | None) -> str:
    """Render a node together with its parent and children."""
    if node is None:
        return f"[ {NIL_LABEL} ]"
    return (
        f"[ {label(node)}"
        f"  P:{label(tree.parent_of(node))}"
        f"  L:{label(tree.child_of(node, Side.LEFT))}"
        f"  R:{label(tree.child_of(node, Side.RIGHT))} ]"
    )


def format_tree(tree: RedBlackTree, order: TraversalOrder = TraversalOrder.PRE) -> str:
    """Space separated ``key(COLOR)`` tokens in the given order."""
    return " ".join(f"{key}({color.name})" for key, color in tree.traverse(order))
