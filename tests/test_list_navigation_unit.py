from core.focus.list_navigation import ListItem, first_enabled_index, move_in_list, next_index, toggle_selection


def test_next_index_clamps_without_loop():
    assert next_index(5, 4, 1) == 4
    assert next_index(5, 0, -1) == 0
    assert next_index(5, 2, 1) == 3


def test_next_index_wraps_with_loop():
    assert next_index(5, 4, 1, loop=True) == 0
    assert next_index(5, 0, -1, loop=True) == 4


def test_next_index_empty_list_keeps_index():
    assert next_index(0, 3, 1) == 3


def test_disabled_items_are_skipped():
    items = [ListItem("a"), ListItem("b", disabled=True), ListItem("c")]
    assert move_in_list(items, 0, 1) == 2
    assert move_in_list(items, 2, -1) == 0


def test_no_enabled_target_keeps_position():
    items = [ListItem("a"), ListItem("b", disabled=True), ListItem("c", disabled=True)]
    assert move_in_list(items, 0, 1) == 0


def test_disabled_skip_with_loop():
    items = [ListItem("a", disabled=True), ListItem("b"), ListItem("c")]
    assert move_in_list(items, 2, 1, loop=True) == 1


def test_first_enabled_index():
    assert first_enabled_index([ListItem("a", disabled=True), ListItem("b")]) == 1
    assert first_enabled_index([ListItem("a", disabled=True)]) == 0
    assert first_enabled_index([]) == 0


def test_toggle_radio():
    assert toggle_selection("radio", None, "high") == "high"
    assert toggle_selection("radio", "low", "high") == "high"
    assert toggle_selection("radio", "high", "high") is None


def test_toggle_checkbox():
    assert toggle_selection("checkbox", None, "a") == ["a"]
    assert toggle_selection("checkbox", ["a"], "b") == ["a", "b"]
    assert toggle_selection("checkbox", ["a", "b"], "a") == ["b"]
