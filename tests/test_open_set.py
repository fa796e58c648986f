from gridpath.domain.priority_queue import OpenSet


def test_pop_returns_lowest_f_first():
    open_set = OpenSet()
    open_set.push((0, 0), 5.0, 1.0, 0)
    open_set.push((1, 0), 3.0, 1.0, 1)
    open_set.push((2, 0), 4.0, 1.0, 2)

    assert open_set.pop() == ((1, 0), 1)
    assert open_set.pop() == ((2, 0), 2)
    assert open_set.pop() == ((0, 0), 0)
    assert open_set.pop() is None


def test_equal_f_breaks_ties_by_insertion_order():
    open_set = OpenSet()
    open_set.push((3, 3), 6.0, 2.0, 0)
    open_set.push((1, 1), 6.0, 4.0, 1)
    open_set.push((2, 2), 6.0, 0.0, 2)

    assert [open_set.pop()[0] for _ in range(3)] == [(3, 3), (1, 1), (2, 2)]


def test_better_entry_supersedes_stale_one():
    open_set = OpenSet()
    open_set.push((4, 4), 10.0, 6.0, 0)
    open_set.push((5, 5), 9.0, 5.0, 1)
    assert open_set.push((4, 4), 8.0, 4.0, 2)

    assert open_set.size() == 2
    assert open_set.best_g((4, 4)) == 4.0

    assert open_set.pop() == ((4, 4), 2)
    assert open_set.pop() == ((5, 5), 1)
    # The superseded (4, 4) entry is never handed out
    assert open_set.pop() is None
    assert open_set.is_empty()


def test_contains_and_best_g():
    open_set = OpenSet()
    assert not open_set.contains((0, 0))
    assert open_set.best_g((0, 0)) is None

    open_set.push((0, 0), 2.0, 0.0, 0)
    assert open_set.contains((0, 0))
    assert open_set.best_g((0, 0)) == 0.0

    open_set.pop()
    assert not open_set.contains((0, 0))


def test_worse_g_does_not_replace_live_entry():
    open_set = OpenSet()
    assert open_set.push((4, 4), 6.0, 2.0, 0)

    assert not open_set.push((4, 4), 9.0, 5.0, 1)
    assert not open_set.push((4, 4), 6.0, 2.0, 2)

    assert open_set.best_g((4, 4)) == 2.0
    assert open_set.size() == 1
    assert open_set.pop() == ((4, 4), 0)
    assert open_set.pop() is None


def test_coords_lists_live_entries():
    open_set = OpenSet()
    open_set.push((0, 0), 1.0, 1.0, 0)
    open_set.push((0, 1), 1.0, 0.0, 1)
    open_set.push((0, 0), 0.5, 0.5, 2)

    assert sorted(open_set.coords()) == [(0, 0), (0, 1)]

    open_set.pop()
    open_set.pop()
    assert open_set.coords() == []
    assert open_set.is_empty()
