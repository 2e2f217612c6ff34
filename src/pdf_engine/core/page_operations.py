"""
Page Operations
Structural edits at page-index granularity

PyMuPDF re-indexes pages itself after every insert/delete/move, so indices
stay contiguous 0..count-1 as long as every edit goes through the document.
"""
import logging
from typing import List, Optional, Sequence, Tuple

from .errors import (
    CannotDeleteLastPage,
    InvalidPageIndex,
    InvalidSplitPosition,
)
from .pdf_document import PDFDocument, open_pdf_bytes
from ..utils.export import PDFSerializer
from ..utils.settings import Settings

logger = logging.getLogger(__name__)

VALID_ROTATIONS = (0, 90, 180, 270)


class PageOperations:
    """Insert, delete, move, rotate, duplicate, extract, split and merge pages"""

    def __init__(self, pdf_doc: PDFDocument, settings: Optional[Settings] = None):
        self.pdf_doc = pdf_doc
        self.settings = settings or Settings()

    def _check_index(self, page_index: int):
        if not isinstance(page_index, int) or not 0 <= page_index < self.pdf_doc.page_count:
            raise InvalidPageIndex()

    def rotate_page(self, page_index: int, rotation: int):
        """Rotate a page by 0/90/180/270 degrees on top of its current rotation"""
        page = self.pdf_doc.get_page(page_index)
        if rotation not in VALID_ROTATIONS:
            raise ValueError(f"Rotation must be one of {VALID_ROTATIONS}, got {rotation}")
        new_rotation = (page.rotation + rotation) % 360
        page.set_rotation(new_rotation)
        logger.info(f"Rotated page {page_index} to {new_rotation} degrees")

    def delete_page(self, page_index: int):
        """Delete a page; the last remaining page can never be deleted"""
        doc = self.pdf_doc.require()
        if doc.page_count == 1:
            raise CannotDeleteLastPage()
        self._check_index(page_index)
        doc.delete_page(page_index)
        logger.info(f"Deleted page {page_index}, {doc.page_count} page(s) left")

    def insert_blank_page(self, after_index: int, size: Optional[Tuple[float, float]] = None) -> int:
        """
        Insert a blank page after `after_index` (-1 inserts at the front).
        Returns the index of the new page.
        """
        doc = self.pdf_doc.require()
        if after_index != -1:
            self._check_index(after_index)

        if size is None:
            size = (self.settings.get('page.default_width', 612),
                    self.settings.get('page.default_height', 792))
        width, height = size

        new_index = after_index + 1
        pno = new_index if new_index < doc.page_count else -1
        doc.new_page(pno=pno, width=width, height=height)
        logger.info(f"Inserted blank page at {new_index}")
        return new_index

    def move_page(self, from_index: int, to_index: int):
        """
        Move a page so it ends up at `to_index`.

        Equivalent to removing it and reinserting it; PyMuPDF's move_page
        inserts before its target, so a forward move targets the page after
        `to_index` (or the end of the document).
        """
        doc = self.pdf_doc.require()
        self._check_index(from_index)
        self._check_index(to_index)
        if from_index == to_index:
            return

        if from_index < to_index:
            target = to_index + 1 if to_index + 1 < doc.page_count else -1
        else:
            target = to_index
        doc.move_page(from_index, target)
        logger.info(f"Moved page {from_index} to {to_index}")

    def duplicate_page(self, page_index: int) -> int:
        """Duplicate a page right after itself; returns the copy's index"""
        doc = self.pdf_doc.require()
        self._check_index(page_index)
        if page_index + 1 < doc.page_count:
            doc.fullcopy_page(page_index, page_index + 1)
        else:
            doc.fullcopy_page(page_index, -1)
        logger.info(f"Duplicated page {page_index}")
        return page_index + 1

    def extract_pages(self, page_indices: Sequence[int]) -> bytes:
        """Serialize copies of the given pages, in order, as a new document"""
        doc = self.pdf_doc.require()
        if not page_indices:
            raise InvalidPageIndex("No pages selected")
        for index in page_indices:
            self._check_index(index)
        return PDFSerializer.pages_to_bytes(doc, list(page_indices))

    def split_pdf(self, after_index: int) -> Tuple[bytes, bytes]:
        """Split into [0, after_index) and [after_index, count)"""
        doc = self.pdf_doc.require()
        count = doc.page_count
        if not isinstance(after_index, int) or not 0 < after_index < count:
            raise InvalidSplitPosition()

        first = PDFSerializer.pages_to_bytes(doc, range(0, after_index))
        second = PDFSerializer.pages_to_bytes(doc, range(after_index, count))
        logger.info(f"Split {count} page(s) at {after_index}")
        return first, second

    def merge_pdf(self, other_bytes: bytes, password: Optional[str] = None) -> int:
        """Append every page of another PDF; returns the number of pages added"""
        doc = self.pdf_doc.require()
        other, _ = open_pdf_bytes(other_bytes, password)
        try:
            added = other.page_count
            doc.insert_pdf(other)
        finally:
            other.close()
        logger.info(f"Merged {added} page(s), now {doc.page_count}")
        return added

    def page_order(self) -> List[int]:
        """Page object numbers in current order, for identity checks"""
        return [page.xref for page in self.pdf_doc.require()]
