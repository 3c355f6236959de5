# progressview/ui/app.py
"""Textual browser for a progress tree: menu on the left, details on the right."""

from rich.text import Text
from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import Footer, Header, Static, Tree
from textual.widgets.tree import TreeNode as WidgetNode

from progressview.helpers._logger import log
from progressview.models.tree import TreeNode


def _label(node: TreeNode, markup: bool) -> Text:
    style = "dim" if node.disabled else ""
    if markup:
        return Text.from_markup(node.label, style=style)
    return Text(node.label, style=style)


# FUNC: populate_tree
def populate_tree(widget_node: WidgetNode, node: TreeNode, markup: bool = True) -> None:
    """Adds `node`'s children (recursively) under `widget_node`."""
    for child in node.children:
        if child.is_leaf:
            widget_node.add_leaf(_label(child, markup), data=child)
        else:
            branch = widget_node.add(_label(child, markup), data=child)
            populate_tree(branch, child, markup)


# KLASS: ProgressMenuApp
class ProgressMenuApp(App):
    """Browse a progress tree built by `ProgressView`."""

    TITLE = "Progress"
    CSS = """
    #progress-tree {
        width: 40%;
        border: round $primary;
    }
    #detail-scroll {
        width: 60%;
        border: round $secondary;
        padding: 0 1;
    }
    """
    BINDINGS = [
        Binding(key="q", action="quit", description="Quit"),
        Binding(key="escape", action="quit", description="Quit"),
    ]

    def __init__(self, root: TreeNode, markup: bool = True) -> None:
        super().__init__()
        self.progress_root = root
        self.markup = markup

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            yield Tree(_label(self.progress_root, self.markup), data=self.progress_root, id="progress-tree")
            with VerticalScroll(id="detail-scroll"):
                yield Static("", id="detail-panel")
        yield Footer()

    def on_mount(self) -> None:
        tree = self.query_one("#progress-tree", Tree)
        populate_tree(tree.root, self.progress_root, self.markup)
        tree.root.expand()
        self.show_detail(self.progress_root)
        log.debug(f"Progress browser mounted with {sum(1 for _ in self.progress_root.walk())} nodes.")

    def show_detail(self, node: TreeNode | None) -> None:
        panel = self.query_one("#detail-panel", Static)
        if node is None or not node.message:
            panel.update("")
            return
        panel.update(Text.from_markup(node.message) if self.markup else Text(node.message))

    @on(Tree.NodeHighlighted)
    def _on_node_highlighted(self, event: Tree.NodeHighlighted) -> None:
        self.show_detail(event.node.data)

    @on(Tree.NodeSelected)
    def _on_node_selected(self, event: Tree.NodeSelected) -> None:
        node = event.node.data
        if node is not None and node.disabled:
            self.bell()
