"""
Undo/Redo History System
Snapshot-based history over editor state
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import copy
import time

from .models import ImageAnnotation, TextAnnotation

MAX_HISTORY = 50

UNDO_ACTION = "undo"
REDO_ACTION = "redo"


@dataclass
class EditorState:
    """
    Editor-visible state captured by a snapshot.

    `document` optionally holds serialized PDF bytes so structural page
    edits can be snapshotted along with the overlay.
    """
    text_annotations: List[TextAnnotation] = field(default_factory=list)
    image_annotations: List[ImageAnnotation] = field(default_factory=list)
    field_values: Dict[str, str] = field(default_factory=dict)
    document: Optional[bytes] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize state"""
        return {
            'text_annotations': [a.to_dict() for a in self.text_annotations],
            'image_annotations': [a.to_dict() for a in self.image_annotations],
            'field_values': dict(self.field_values),
            'has_document': self.document is not None,
        }


@dataclass
class HistoryEntry:
    """A snapshot plus the label of the action that produced the move"""
    state: EditorState
    timestamp: float
    action: str


class HistoryStore:
    """
    Manages undo/redo history.

    The entry moved onto the opposite stack by undo/redo is always labelled
    "undo"/"redo", never with the original action's label.
    """

    def __init__(self, initial_state: Optional[EditorState] = None, max_history: int = MAX_HISTORY):
        self.max_history = max_history
        self.past: List[HistoryEntry] = []
        self.future: List[HistoryEntry] = []
        self.present: EditorState = _snapshot(initial_state or EditorState())

    def push_state(self, state: EditorState, action: str):
        """Record a new present; the old present becomes undoable under `action`"""
        self.past.append(HistoryEntry(self.present, time.time(), action))

        # Limit history size
        while len(self.past) > self.max_history:
            self.past.pop(0)

        self.present = _snapshot(state)
        self.future.clear()

    def undo(self) -> Optional[EditorState]:
        """Step back; returns the restored state or None"""
        if not self.can_undo():
            return None

        previous = self.past.pop()
        self.future.insert(0, HistoryEntry(self.present, time.time(), UNDO_ACTION))
        self.present = previous.state
        return _snapshot(self.present)

    def redo(self) -> Optional[EditorState]:
        """Step forward; returns the restored state or None"""
        if not self.can_redo():
            return None

        following = self.future.pop(0)
        self.past.append(HistoryEntry(self.present, time.time(), REDO_ACTION))
        self.present = following.state
        return _snapshot(self.present)

    def can_undo(self) -> bool:
        return len(self.past) > 0

    def can_redo(self) -> bool:
        return len(self.future) > 0

    def get_undo_action(self) -> Optional[str]:
        """Label of the entry undo would restore"""
        if self.can_undo():
            return self.past[-1].action
        return None

    def get_redo_action(self) -> Optional[str]:
        """Label of the entry redo would restore"""
        if self.can_redo():
            return self.future[0].action
        return None

    def get_present(self) -> EditorState:
        return _snapshot(self.present)

    def reset(self, initial_state: Optional[EditorState] = None):
        """Clear all history"""
        self.past.clear()
        self.future.clear()
        self.present = _snapshot(initial_state or EditorState())

    def get_history_info(self) -> Dict[str, Any]:
        """Get information about current history state"""
        return {
            'undo_count': len(self.past),
            'redo_count': len(self.future),
            'can_undo': self.can_undo(),
            'can_redo': self.can_redo(),
            'undo_action': self.get_undo_action(),
            'redo_action': self.get_redo_action(),
        }


def _snapshot(state: EditorState) -> EditorState:
    return copy.deepcopy(state)
