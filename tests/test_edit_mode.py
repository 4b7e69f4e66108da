from __future__ import annotations

import pytest

from todoapp.services.todos import IDLE, Editing, TaskStore


@pytest.fixture()
def two_tasks(store: TaskStore, clock):
    first = store.add("first task")
    clock.advance()
    second = store.add("second task")
    return first, second


def test_begin_edit_captures_current_title(store: TaskStore, two_tasks) -> None:
    first, _ = two_tasks

    store.begin_edit(first.id)

    assert store.editing == Editing(task_id=first.id, draft="first task")
    assert store.is_editing(first.id)


def test_commit_edit_trims_and_keeps_other_fields(store: TaskStore, two_tasks) -> None:
    first, _ = two_tasks
    store.toggle_done(first.id)
    before = store.get(first.id)
    store.begin_edit(first.id)

    store.commit_edit(first.id, " new title ")

    after = store.get(first.id)
    assert after.title == "new title"
    assert (after.id, after.done, after.created_at) == (before.id, before.done, before.created_at)
    assert store.editing == IDLE


def test_commit_empty_edit_deletes_the_task(store: TaskStore, two_tasks) -> None:
    first, second = two_tasks
    store.toggle_done(first.id)
    store.begin_edit(first.id)

    store.commit_edit(first.id, "   ")

    assert store.tasks == [second]
    assert store.get(first.id) is None
    assert store.editing == IDLE
    assert store.count_active() == 1


def test_commit_without_text_uses_the_draft(store: TaskStore, two_tasks) -> None:
    _, second = two_tasks
    store.begin_edit(second.id)
    store.update_draft("  renamed  ")

    store.commit_edit(second.id)

    assert store.get(second.id).title == "renamed"
    assert store.editing == IDLE


def test_commit_without_text_and_without_edit_is_noop(store: TaskStore, two_tasks) -> None:
    before = store.tasks

    store.commit_edit(two_tasks[0].id)

    assert store.tasks == before
    assert store.editing == IDLE


def test_cancel_edit_leaves_task_untouched(store: TaskStore, two_tasks) -> None:
    first, _ = two_tasks
    before = store.tasks
    store.begin_edit(first.id)
    store.update_draft("something else")

    store.cancel_edit()

    assert store.tasks == before
    assert store.editing == IDLE


def test_switching_edit_target_cancels_previous_edit(store: TaskStore, two_tasks) -> None:
    first, second = two_tasks
    store.begin_edit(first.id)
    store.update_draft("abandoned draft")

    store.begin_edit(second.id)

    assert store.editing == Editing(task_id=second.id, draft="second task")
    assert not store.is_editing(first.id)

    store.commit_edit(second.id, "second, edited")

    assert store.get(first.id).title == "first task"
    assert store.get(second.id).title == "second, edited"
    assert store.editing == IDLE


def test_cancel_after_switch_affects_nothing(store: TaskStore, two_tasks) -> None:
    first, second = two_tasks
    before = store.tasks
    store.begin_edit(first.id)
    store.begin_edit(second.id)

    store.cancel_edit()

    assert store.tasks == before
    assert store.editing == IDLE


def test_begin_edit_unknown_id_keeps_state(store: TaskStore, two_tasks) -> None:
    first, _ = two_tasks
    store.begin_edit(first.id)

    store.begin_edit("missing")

    assert store.is_editing(first.id)


def test_update_draft_while_idle_is_ignored(store: TaskStore, two_tasks) -> None:
    store.update_draft("nobody is editing")

    assert store.editing == IDLE


def test_removing_the_edited_task_ends_editing(store: TaskStore, two_tasks) -> None:
    first, second = two_tasks
    store.begin_edit(first.id)

    store.remove(first.id)

    assert store.editing == IDLE
    assert store.tasks == [second]


def test_clearing_the_edited_task_ends_editing(store: TaskStore, two_tasks) -> None:
    first, _ = two_tasks
    store.toggle_done(first.id)
    store.begin_edit(first.id)

    store.clear_completed()

    assert store.editing == IDLE


def test_unrelated_change_keeps_editing(store: TaskStore, two_tasks) -> None:
    first, second = two_tasks
    store.begin_edit(first.id)

    store.toggle_done(second.id)

    assert store.is_editing(first.id)


def test_commit_of_previous_target_after_switch_is_ignored(store: TaskStore, two_tasks) -> None:
    first, second = two_tasks
    before = store.tasks
    store.begin_edit(first.id)
    store.begin_edit(second.id)

    store.commit_edit(first.id, "")

    assert store.tasks == before
    assert store.editing == IDLE


def test_commit_with_text_while_idle_is_ignored(store: TaskStore, two_tasks) -> None:
    first, _ = two_tasks

    store.commit_edit(first.id, "renamed without edit")

    assert store.get(first.id).title == "first task"
    assert store.editing == IDLE


def test_commit_empty_edit_of_active_task_drops_one_task(store: TaskStore, two_tasks) -> None:
    first, second = two_tasks
    total, active = len(store.tasks), store.count_active()
    store.begin_edit(second.id)

    store.commit_edit(second.id, "")

    assert len(store.tasks) == total - 1
    assert store.count_active() == active - 1
    assert store.tasks == [first]


def test_commit_empty_edit_of_later_task_keeps_the_rest(store: TaskStore, clock, two_tasks) -> None:
    first, second = two_tasks
    clock.advance()
    third = store.add("third task")
    # newest first: third, second, first
    store.begin_edit(second.id)

    store.commit_edit(second.id, "  ")

    assert store.tasks == [third, first]
    assert store.count_active() == 2
