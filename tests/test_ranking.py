from tagcloud.ranking import RankedEntry, display_order, select_top


def test_tie_break_prefers_earlier_word():
    assert select_top({"b": 3, "a": 3, "c": 1}, 1) == [RankedEntry("a", 3)]


def test_selection_order_is_count_then_word():
    table = {"the": 3, "cat": 2, "sat": 1, "on": 1, "mat": 1, "ran": 1}
    assert select_top(table, 3) == [
        RankedEntry("the", 3), RankedEntry("cat", 2), RankedEntry("mat", 1)]


def test_size_larger_than_vocabulary():
    table = {"zeta": 1, "alpha": 2, "mid": 5}
    selected = select_top(table, 10)
    assert len(selected) == 3
    assert [e.word for e in display_order(selected)] == ["alpha", "mid", "zeta"]


def test_empty_table():
    assert select_top({}, 5) == []
    assert display_order([]) == []


def test_selection_happens_before_alphabetical_ordering():
    # A single alphabetical sort would keep "aardvark"; count-first drops it.
    table = {"aardvark": 1, "zebra": 9, "yak": 7}
    assert [e.word for e in display_order(select_top(table, 2))] == ["yak", "zebra"]


def test_display_order_ignores_count():
    entries = [RankedEntry("b", 1), RankedEntry("a", 9), RankedEntry("c", 5)]
    assert [e.word for e in display_order(entries)] == ["a", "b", "c"]


def test_selection_does_not_depend_on_insertion_order():
    words = ["delta", "alpha", "charlie", "bravo"]
    forward = {w: 2 for w in words}
    backward = {w: 2 for w in reversed(words)}
    assert select_top(forward, 2) == select_top(backward, 2) == [
        RankedEntry("alpha", 2), RankedEntry("bravo", 2)]
