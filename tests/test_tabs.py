import pytest

from ncurtab.tabs import MAX_TABS, Panel, TabManager


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a.txt").write_text("alpha")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "b.txt").write_text("beta")
    return tmp_path


def select(panel, name):
    panel.cursor = [e.name for e in panel.entries].index(name)


def names(panel):
    return {e.name for e in panel.entries}


def test_panel_reload_and_selected(tree):
    panel = Panel(str(tree))
    assert names(panel) == {"..", "a.txt", "sub"}
    (tree / "new").write_text("")
    panel.reload()
    assert "new" in names(panel)
    select(panel, "sub")
    assert panel.selected().name == "sub"
    panel.cursor = len(panel.entries)
    assert panel.selected() is None


def test_panel_clamp_cursor(tree):
    panel = Panel(str(tree))
    panel.cursor = 99
    panel.clamp_cursor()
    assert panel.cursor == len(panel.entries) - 1


def test_add_tab_opens_both_panels(tree):
    manager = TabManager()
    tab = manager.add_tab(str(tree))
    assert manager.active() is tab
    assert tab.left.path == tab.right.path == str(tree)
    assert tab.current() is tab.left
    tab.toggle_panel()
    assert tab.current() is tab.right
    assert tab.other() is tab.left


def test_tab_limit(tree):
    manager = TabManager()
    for _ in range(MAX_TABS):
        assert manager.add_tab(str(tree)) is not None
    assert manager.add_tab(str(tree)) is None
    assert len(manager.tabs) == MAX_TABS
    assert manager.active_index == MAX_TABS - 1


def test_switch_and_next_tab(tree):
    manager = TabManager()
    for _ in range(3):
        manager.add_tab(str(tree))
    manager.switch_tab(0)
    assert manager.active_index == 0
    manager.switch_tab(7)
    manager.switch_tab(-1)
    assert manager.active_index == 0
    manager.next_tab()
    manager.next_tab()
    assert manager.active_index == 2
    manager.next_tab()
    assert manager.active_index == 0


def test_move_cursor_clamps(tree):
    tab = TabManager().add_tab(str(tree))
    tab.move_cursor(-1, 30)
    assert (tab.left.cursor, tab.left.offset) == (0, 0)
    for _ in range(10):
        tab.move_cursor(1, 30)
    assert tab.left.cursor == len(tab.left.entries) - 1


def test_move_cursor_keeps_cursor_visible(tmp_path):
    for i in range(50):
        (tmp_path / f"f{i:02}").write_text("")
    tab = TabManager().add_tab(str(tmp_path))
    height = 20
    visible = height - 4
    for _ in range(60):
        tab.move_cursor(1, height)
        panel = tab.left
        assert 0 <= panel.offset <= panel.cursor < panel.offset + visible
    assert tab.left.cursor == len(tab.left.entries) - 1
    for _ in range(60):
        tab.move_cursor(-1, height)
        panel = tab.left
        assert 0 <= panel.offset <= panel.cursor < panel.offset + visible
    assert (tab.left.cursor, tab.left.offset) == (0, 0)


def test_move_cursor_affects_active_panel_only(tree):
    tab = TabManager().add_tab(str(tree))
    tab.toggle_panel()
    tab.move_cursor(1, 30)
    assert tab.right.cursor == 1
    assert tab.left.cursor == 0


def test_enter_directory_and_back(tree):
    tab = TabManager().add_tab(str(tree))
    select(tab.left, "sub")
    assert tab.enter_directory()
    assert tab.left.path == f"{tree}/sub"
    assert names(tab.left) == {"..", "b.txt"}
    assert tab.left.cursor == 0
    assert tab.enter_directory()
    assert tab.left.path == str(tree)


def test_enter_parent_with_trailing_slash(tree):
    tab = TabManager().add_tab(f"{tree}/sub/")
    select(tab.left, "..")
    assert tab.enter_directory()
    assert tab.left.path == str(tree)


def test_enter_file_does_nothing(tree):
    tab = TabManager().add_tab(str(tree))
    select(tab.left, "a.txt")
    assert not tab.enter_directory()
    assert tab.left.path == str(tree)


def test_delete_needs_confirmation(tree):
    tab = TabManager().add_tab(str(tree))
    select(tab.left, "a.txt")
    asked = []
    assert not tab.delete_selected(lambda name: asked.append(name) or False)
    assert asked == ["a.txt"]
    assert (tree / "a.txt").exists()


def test_delete_confirmed(tree):
    tab = TabManager().add_tab(str(tree))
    select(tab.left, "sub")
    tab.left.cursor = len(tab.left.entries) - 1
    name = tab.left.selected().name
    assert tab.delete_selected(lambda _: True)
    assert not (tree / name).exists()
    assert name not in names(tab.left)
    assert tab.left.cursor == len(tab.left.entries) - 1


def test_delete_parent_entry_refused(tree):
    tab = TabManager().add_tab(str(tree / "sub"))
    select(tab.left, "..")
    assert not tab.delete_selected(lambda _: True)
    assert (tree / "a.txt").exists()


def test_rename_selected(tree):
    tab = TabManager().add_tab(str(tree))
    select(tab.left, "a.txt")
    assert tab.rename_selected("renamed.txt")
    assert (tree / "renamed.txt").read_text() == "alpha"
    assert names(tab.left) == {"..", "renamed.txt", "sub"}
    assert tab.left.cursor == 0


def test_rename_with_empty_name_refused(tree):
    tab = TabManager().add_tab(str(tree))
    select(tab.left, "a.txt")
    assert not tab.rename_selected("")
    assert (tree / "a.txt").exists()


def test_copy_to_other_panel(tree):
    tab = TabManager().add_tab(str(tree))
    tab.right.path = str(tree / "sub")
    tab.right.reload()
    select(tab.left, "a.txt")
    assert tab.copy_to_other_panel()
    assert (tree / "sub" / "a.txt").read_text() == "alpha"
    assert (tree / "a.txt").exists()
    assert "a.txt" in names(tab.right)


def test_copy_onto_same_directory_fails(tree):
    tab = TabManager().add_tab(str(tree))
    select(tab.left, "a.txt")
    assert not tab.copy_to_other_panel()
    assert (tree / "a.txt").read_text() == "alpha"


def test_move_to_other_panel(tree):
    tab = TabManager().add_tab(str(tree / "sub"))
    tab.right.path = str(tree)
    tab.right.reload()
    select(tab.left, "b.txt")
    assert tab.move_to_other_panel()
    assert (tree / "b.txt").read_text() == "beta"
    assert not (tree / "sub" / "b.txt").exists()
    assert names(tab.left) == {".."}
    assert "b.txt" in names(tab.right)
    assert tab.left.cursor == 0


def test_move_from_right_panel(tree):
    tab = TabManager().add_tab(str(tree))
    tab.left.path = str(tree / "sub")
    tab.left.reload()
    tab.toggle_panel()
    select(tab.right, "a.txt")
    assert tab.move_to_other_panel()
    assert (tree / "sub" / "a.txt").exists()
    assert "a.txt" in names(tab.left)
    assert "a.txt" not in names(tab.right)