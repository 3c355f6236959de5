# progressview/views/rich_tree.py

# SECTION: MODULE DOCSTRING
"""Renders a `TreeNode` as a `rich.tree.Tree` for non-interactive output."""

# SECTION: IMPORTS
from rich.console import Console, Group
from rich.text import Text
from rich.tree import Tree

from progressview.helpers._rich import console as default_console
from progressview.models.tree import TreeNode


def _text(value: str, style: str, markup: bool) -> Text:
    if markup:
        return Text.from_markup(value, style=style)
    return Text(value, style=style)


def _node_renderable(node: TreeNode, show_messages: bool, markup: bool) -> Text | Group:
    label = _text(node.label, "disabled" if node.disabled else "label", markup)
    if show_messages and node.message:
        return Group(label, _text(node.message.rstrip("\n"), "subtle", markup))
    return label


# FUNC: build_rich_tree
def build_rich_tree(node: TreeNode, show_messages: bool = False, markup: bool = True) -> Tree:
    """Mirrors the node structure in a Rich tree.

    With `markup` on, labels and messages are parsed as Rich markup so trees
    built with a `RichStyler` keep their colours. Turn it off for trees built
    with the plain styler. Disabled nodes are dimmed.
    """
    tree = Tree(_node_renderable(node, show_messages, markup), guide_style="tree.line")
    _add_children(tree, node, show_messages, markup)
    return tree


def _add_children(branch: Tree, node: TreeNode, show_messages: bool, markup: bool) -> None:
    for child in node.children:
        sub_branch = branch.add(_node_renderable(child, show_messages, markup))
        _add_children(sub_branch, child, show_messages, markup)


# FUNC: print_progress_tree
def print_progress_tree(
    node: TreeNode,
    show_messages: bool = False,
    markup: bool = True,
    console: Console | None = None,
) -> None:
    (console or default_console).print(build_rich_tree(node, show_messages=show_messages, markup=markup))
