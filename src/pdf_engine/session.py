"""
Editing Session
Owns one document, the engines that edit it, and its undo/redo history
"""
import logging
from typing import Dict, List, Optional

from .core.history import EditorState, HistoryStore
from .core.models import ImageAnnotation, TextAnnotation
from .core.page_operations import PageOperations
from .core.pdf_document import PDFDocument
from .tools import AnnotationEngine, HeaderFooterTool, RedactionTool, WatermarkTool
from .utils.settings import Settings

logger = logging.getLogger(__name__)


class EditorSession:
    """
    One open document and everything needed to edit it.

    Sessions share nothing, so several documents can be edited side by side.
    Text/image annotations and form values live in an overlay until
    commit_annotations() writes them into the document; the overlay is what
    history snapshots capture, optionally together with the document bytes.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.document = PDFDocument()
        self.pages = PageOperations(self.document, self.settings)
        self.annotations = AnnotationEngine(self.document, self.settings)
        self.watermarks = WatermarkTool(self.document, self.settings)
        self.headers_footers = HeaderFooterTool(self.document, self.settings)
        self.redactions = RedactionTool(self.document, self.settings)
        self.history = HistoryStore(max_history=self.settings.get('history.max_entries', 50))

        self.text_annotations: List[TextAnnotation] = []
        self.image_annotations: List[ImageAnnotation] = []
        self.field_values: Dict[str, str] = {}
        # Document bytes of the history snapshot the document currently reflects
        self._synced_document: Optional[bytes] = None

    def load(self, data: bytes, password: Optional[str] = None):
        self.document.load(data, password)
        self._clear_overlay()
        # The loaded document is the base every structural undo returns to
        initial = self.snapshot(include_document=True)
        self._synced_document = initial.document
        self.history.reset(initial)

    def load_file(self, file_path: str, password: Optional[str] = None):
        with open(file_path, 'rb') as f:
            self.load(f.read(), password)

    def reset(self):
        self.document.reset()
        self._clear_overlay()
        self._synced_document = None
        self.history.reset()

    # Overlay

    def add_text_annotation(self, annotation: TextAnnotation):
        self.text_annotations.append(annotation)

    def add_image_annotation(self, annotation: ImageAnnotation):
        self.image_annotations.append(annotation)

    def set_field_value(self, field_name: str, value: str):
        self.field_values[field_name] = value

    def commit_annotations(self) -> int:
        """Write the overlay into the document; returns the number of items applied"""
        applied = 0
        for annotation in self.text_annotations:
            if self.annotations.add_text(annotation):
                applied += 1
        for annotation in self.image_annotations:
            self.annotations.add_image(annotation)
            applied += 1
        for field_name, value in self.field_values.items():
            self.document.fill_form_field(field_name, value)

        self._clear_overlay()
        logger.info(f"Committed {applied} annotation(s)")
        return applied

    def _clear_overlay(self):
        self.text_annotations = []
        self.image_annotations = []
        self.field_values = {}

    # History

    def snapshot(self, include_document: bool = False) -> EditorState:
        return EditorState(
            text_annotations=list(self.text_annotations),
            image_annotations=list(self.image_annotations),
            field_values=dict(self.field_values),
            document=self.document.save() if include_document else None,
        )

    def record(self, action: str, include_document: bool = False):
        """Push the current overlay (and optionally the document) onto the history"""
        state = self.snapshot(include_document)
        if state.document is not None:
            self._synced_document = state.document
        self.history.push_state(state, action)

    def undo(self) -> Optional[EditorState]:
        state = self.history.undo()
        if state is not None:
            self._restore(state)
        return state

    def redo(self) -> Optional[EditorState]:
        state = self.history.redo()
        if state is not None:
            self._restore(state)
        return state

    def _restore(self, state: EditorState):
        self.text_annotations = list(state.text_annotations)
        self.image_annotations = list(state.image_annotations)
        self.field_values = dict(state.field_values)

        # Overlay-only states inherit the latest document snapshot before them
        document = self._document_at_present()
        if document is not None and document != self._synced_document:
            password = self.document.get_password()
            self.document.load(document, password)
            self._synced_document = document
            logger.debug("Restored document from history snapshot")

    def _document_at_present(self) -> Optional[bytes]:
        if self.history.present.document is not None:
            return self.history.present.document
        for entry in reversed(self.history.past):
            if entry.state.document is not None:
                return entry.state.document
        return None
