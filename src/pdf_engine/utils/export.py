"""
PDF Export Utilities
Serializes in-memory documents to bytes
"""
import logging
from typing import Iterable

import fitz  # PyMuPDF

logger = logging.getLogger(__name__)


class PDFSerializer:
    """Turns a fitz.Document into output bytes and reports sizes"""

    @staticmethod
    def to_bytes(doc: fitz.Document) -> bytes:
        """Plain serialization"""
        return doc.tobytes()

    @staticmethod
    def to_compressed_bytes(doc: fitz.Document) -> bytes:
        """
        Serialize with a more compact object layout: unused objects are
        dropped, duplicates merged, streams deflated and objects packed into
        object streams. The reduction is opportunistic and may be zero.
        """
        return doc.tobytes(
            garbage=4,
            deflate=True,
            deflate_images=True,
            deflate_fonts=True,
            clean=True,
            use_objstms=1,
        )

    @classmethod
    def size(cls, doc: fitz.Document) -> int:
        """Byte length of a full serialization pass"""
        return len(cls.to_bytes(doc))

    @classmethod
    def compressed_size(cls, doc: fitz.Document) -> int:
        return len(cls.to_compressed_bytes(doc))

    @classmethod
    def pages_to_bytes(cls, doc: fitz.Document, indices: Iterable[int]) -> bytes:
        """
        Build a new document from copies of the given pages, in the given
        order (duplicates allowed), and serialize it. The source is untouched.
        """
        new_doc = fitz.open()
        try:
            for index in indices:
                new_doc.insert_pdf(doc, from_page=index, to_page=index)
            data = cls.to_bytes(new_doc)
            logger.debug(f"Serialized {new_doc.page_count} page(s), {len(data)} bytes")
            return data
        finally:
            new_doc.close()
