"""
Tests for the undo/redo history store
"""
import pytest

from pdf_engine.core.history import MAX_HISTORY, EditorState, HistoryStore
from pdf_engine.core.models import TextAnnotation


def state(label: str) -> EditorState:
    return EditorState(
        text_annotations=[TextAnnotation(text=label, x=0, y=0, page_number=1, id=label)],
        field_values={"name": label},
    )


@pytest.fixture
def s0():
    return state("s0")


class TestHistoryStore:
    def test_push_undo_redo_walkthrough(self, s0):
        store = HistoryStore(s0)
        s1, s2 = state("s1"), state("s2")

        store.push_state(s1, "edit1")
        assert [e.state for e in store.past] == [s0]
        store.push_state(s2, "edit2")
        assert [e.state for e in store.past] == [s0, s1]

        assert store.undo() == s1
        assert store.get_present() == s1
        assert [e.state for e in store.future] == [s2]

        assert store.redo() == s2
        assert store.get_present() == s2
        assert store.future == []

    def test_undo_returns_state_before_push(self, s0):
        store = HistoryStore(s0)
        store.push_state(state("s1"), "edit")
        assert store.undo() == s0

    def test_empty_stacks(self):
        store = HistoryStore()
        assert store.undo() is None
        assert store.redo() is None
        assert not store.can_undo()
        assert not store.can_redo()
        assert store.get_undo_action() is None
        assert store.get_redo_action() is None

    def test_redo_available_after_undo(self, s0):
        store = HistoryStore(s0)
        store.push_state(state("s1"), "edit")
        store.undo()
        assert store.can_redo()

    def test_push_clears_future(self, s0):
        store = HistoryStore(s0)
        store.push_state(state("s1"), "a")
        store.push_state(state("s2"), "b")
        store.undo()
        store.undo()
        assert store.can_redo()
        store.push_state(state("s3"), "c")
        assert not store.can_redo()
        assert store.future == []

    def test_labels_are_relabelled_on_move(self, s0):
        store = HistoryStore(s0)
        store.push_state(state("s1"), "add text")
        assert store.get_undo_action() == "add text"

        store.undo()
        assert store.get_redo_action() == "undo"
        assert store.get_undo_action() is None

        store.redo()
        assert store.get_undo_action() == "redo"

    def test_past_is_bounded(self, s0):
        store = HistoryStore(s0)
        for i in range(MAX_HISTORY + 25):
            store.push_state(state(f"s{i + 1}"), f"edit{i}")
            assert len(store.past) <= MAX_HISTORY
        assert len(store.past) == MAX_HISTORY
        # Oldest entries were evicted first
        assert store.past[0].state == state("s25")

    def test_custom_limit(self):
        store = HistoryStore(max_history=2)
        for i in range(5):
            store.push_state(state(str(i)), "edit")
        assert len(store.past) == 2

    def test_no_aliasing(self, s0):
        store = HistoryStore(s0)
        s1 = state("s1")
        store.push_state(s1, "edit")

        # Mutating the caller's object does not reach into the store
        s1.text_annotations[0].text = "changed"
        s1.field_values["name"] = "changed"
        assert store.get_present() == state("s1")

        # Nor does mutating a returned snapshot
        returned = store.undo()
        returned.field_values["name"] = "changed"
        assert store.get_present() == s0
        assert store.redo() == state("s1")

    def test_reset(self, s0):
        store = HistoryStore(s0)
        store.push_state(state("s1"), "edit")
        store.undo()
        fresh = state("fresh")
        store.reset(fresh)
        assert not store.can_undo()
        assert not store.can_redo()
        assert store.get_present() == fresh

        store.reset()
        assert store.get_present() == EditorState()

    def test_history_info(self, s0):
        store = HistoryStore(s0)
        store.push_state(state("s1"), "edit")
        assert store.get_history_info() == {
            'undo_count': 1,
            'redo_count': 0,
            'can_undo': True,
            'can_redo': False,
            'undo_action': "edit",
            'redo_action': None,
        }

    def test_state_to_dict(self, s0):
        data = s0.to_dict()
        assert data['field_values'] == {"name": "s0"}
        assert data['text_annotations'][0]['text'] == "s0"
        assert data['has_document'] is False
