import pytest

from models import Habit
from store import HabitStore


def names(store):
    return [h.name for h in store.list()]


@pytest.fixture
def abc():
    store = HabitStore()
    for name in ("A", "B", "C"):
        store.add(name)
    return store


def test_starts_empty():
    store = HabitStore()
    assert store.list() == ()
    assert len(store) == 0


def test_add_appends_incomplete_habit():
    store = HabitStore()
    habit = store.add("Exercise")
    assert habit == Habit(name="Exercise", completed=False, id=1)
    assert store.list() == (habit,)


@pytest.mark.parametrize("blank", ["", "   ", "\t\n"])
def test_blank_names_are_ignored(abc, blank):
    before = abc.list()
    assert abc.add(blank) is None
    assert abc.list() == before


def test_name_is_kept_as_entered():
    store = HabitStore()
    store.add("  Read  ")
    assert names(store) == ["  Read  "]


def test_duplicate_names_allowed():
    store = HabitStore()
    store.add("Walk")
    store.add("Walk")
    assert names(store) == ["Walk", "Walk"]


def test_ids_are_unique_and_never_reused(abc):
    abc.delete(2)
    d = abc.add("D")
    assert [h.id for h in abc.list()] == [1, 2, 4]
    assert d.id == 4


def test_toggle_flips_only_that_habit(abc):
    assert abc.toggle(1) is True
    assert [h.completed for h in abc.list()] == [False, True, False]


def test_toggle_twice_restores(abc):
    before = abc.list()
    abc.toggle(0)
    abc.toggle(0)
    assert abc.list() == before


def test_toggle_does_not_mutate_previous_snapshot(abc):
    snapshot = abc.list()
    abc.toggle(0)
    assert snapshot[0].completed is False
    assert abc.list()[0].completed is True


def test_delete_shifts_later_habits(abc):
    assert abc.delete(1) is True
    assert names(abc) == ["A", "C"]
    abc.toggle(1)
    assert abc.list()[1] == Habit(name="C", completed=True, id=3)


@pytest.mark.parametrize("index", [-1, 3, 100, True, "0", None, 1.0])
def test_out_of_range_index_is_a_no_op(abc, index):
    before = abc.list()
    assert abc.toggle(index) is False
    assert abc.delete(index) is False
    assert abc.list() == before


def test_length_tracks_successful_adds_and_deletes():
    store = HabitStore()
    ops = [
        ("add", "a"), ("add", ""), ("add", "b"), ("delete", 5),
        ("toggle", 0), ("add", "c"), ("delete", 0), ("add", "  "), ("delete", 0),
    ]
    adds = deletes = 0
    for op, arg in ops:
        if op == "add":
            adds += store.add(arg) is not None
        elif op == "delete":
            deletes += store.delete(arg)
        else:
            store.toggle(arg)
    assert len(store) == adds - deletes == 1


def test_subscribers_see_each_successful_mutation():
    store = HabitStore()
    seen = []
    store.subscribe(seen.append)

    store.add("A")
    store.add("")
    store.toggle(0)
    store.toggle(9)
    store.delete(0)

    assert seen == [
        (Habit("A", False, 1),),
        (Habit("A", True, 1),),
        (),
    ]


def test_unsubscribe_stops_notifications():
    store = HabitStore()
    seen = []
    unsubscribe = store.subscribe(seen.append)
    store.add("A")
    unsubscribe()
    unsubscribe()
    store.add("B")
    assert len(seen) == 1


def test_iteration_uses_current_order(abc):
    assert [h.name for h in abc] == ["A", "B", "C"]


def test_toggled_keeps_every_other_field():
    habit = Habit(name="Stretch", completed=False, id=7)
    assert habit.toggled() == Habit(name="Stretch", completed=True, id=7)
    assert habit.toggled().toggled() == habit
