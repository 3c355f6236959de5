import io
import json

import pytest
from rich.console import Console
from textual.widgets import Static, Tree

from progressview.cli import main
from progressview.helpers._rich import progress_theme
from progressview.helpers._styles import RichStyler
from progressview.models import ChallengeDefinition, UserState
from progressview.test.sample_data import CATALOG_DATA, USER_DATA
from progressview.ui.app import ProgressMenuApp
from progressview.views.progress_view import build_progress_tree
from progressview.views.rich_tree import build_rich_tree


def _render(renderable) -> str:
    console = Console(file=io.StringIO(), width=100, theme=progress_theme, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


def test_rich_tree_mirrors_nodes(user_state, catalog):
    text = _render(build_rich_tree(build_progress_tree(user_state, catalog, RichStyler())))
    assert "Progress Menu" in text
    assert "Completed Challenges" in text
    assert "withdraw: 300 gas" in text
    assert "[yellow]" not in text
    assert "Your Stats" not in text


def test_rich_tree_with_messages(user_state, catalog):
    text = _render(build_rich_tree(build_progress_tree(user_state, catalog), show_messages=True, markup=False))
    assert "Your Stats" in text
    assert "Total Gas Used: 400" in text


def test_cli_show_writes_json(tmp_path):
    user_file = tmp_path / "user.json"
    user_file.write_text(json.dumps(USER_DATA), encoding="utf-8")
    catalog_file = tmp_path / "challenges.json"
    catalog_file.write_text(json.dumps(CATALOG_DATA), encoding="utf-8")
    output = tmp_path / "tree.json"

    code = main(["show", "--user", str(user_file), "--challenges", str(catalog_file), "--plain", "--output", str(output)])

    assert code == 0
    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["name"] == "progress-menu"
    assert [c["name"] for c in data["children"][1]["children"]] == ["token-vendor", "simple-nft-example"]


def test_cli_reports_missing_file(tmp_path):
    code = main(["stats", "--user", str(tmp_path / "nope.json"), "--challenges", str(tmp_path / "nope.json")])
    assert code == 1


@pytest.mark.asyncio
async def test_browser_populates_tree(user_state, catalog):
    root = build_progress_tree(user_state, catalog, RichStyler())
    app = ProgressMenuApp(root)
    async with app.run_test() as pilot:
        await pilot.pause()
        tree = app.query_one("#progress-tree", Tree)
        assert tree.root.data is root
        assert [node.data.name for node in tree.root.children] == ["stats", "completed"]
        completed = tree.root.children[1]
        assert [node.data.name for node in completed.children] == ["token-vendor", "simple-nft-example"]
        assert app.query_one("#detail-panel", Static) is not None


def test_rich_tree_keeps_bracketed_text():
    catalog = [
        ChallengeDefinition(name="map", label="Map[address]", description="Set balances[msg.sender] to 1"),
    ]
    user = UserState.model_validate(
        {
            "address": "0xabc",
            "challenges": [
                {
                    "challengeName": "map",
                    "status": "success",
                    "timestamp": 1700000000000,
                    "gasReport": [{"functionName": "set[/x]", "gasUsed": 10}],
                }
            ],
        }
    )
    root = build_progress_tree(user, catalog, RichStyler())
    text = _render(build_rich_tree(root, show_messages=True))
    assert "Map[address]" in text
    assert "Description: Set balances[msg.sender] to 1" in text
    assert "set[/x]: 10 gas" in text
