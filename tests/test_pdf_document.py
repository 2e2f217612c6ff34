"""
Tests for loading, serializing and inspecting documents
"""
import pytest

from pdf_engine.core.errors import (
    DocumentLoadError,
    InvalidPassword,
    InvalidPageIndex,
    NotLoaded,
    PasswordRequired,
    UnsupportedCapability,
)
from pdf_engine.core.pdf_document import PDFDocument

from conftest import make_pdf, page_labels


class TestLoad:
    def test_load_reports_page_count(self, pdf_doc):
        assert pdf_doc.is_loaded
        assert pdf_doc.page_count == 3

    def test_operations_before_load_raise_not_loaded(self):
        doc = PDFDocument()
        assert doc.page_count == 0
        with pytest.raises(NotLoaded, match="No PDF loaded"):
            doc.save()
        with pytest.raises(NotLoaded):
            doc.get_page(0)

    def test_garbage_bytes_raise_load_error(self):
        with pytest.raises(DocumentLoadError):
            PDFDocument().load(b"this is not a pdf")

    def test_encrypted_without_password(self):
        with pytest.raises(PasswordRequired):
            PDFDocument().load(make_pdf(2, password="secret"))

    def test_encrypted_with_password(self):
        doc = PDFDocument()
        doc.load(make_pdf(2, password="secret"), password="secret")
        assert doc.page_count == 2
        assert doc.password_verified
        assert doc.get_password() == "secret"

    def test_wrong_password_is_rejected(self):
        doc = PDFDocument()
        with pytest.raises(InvalidPassword, match="does not unlock"):
            doc.load(make_pdf(2, password="secret"), password="wrong")
        assert not doc.is_loaded
        with pytest.raises(NotLoaded):
            doc.save()

    def test_wrong_password_is_a_password_error(self, pdf_doc):
        with pytest.raises(PasswordRequired):
            pdf_doc.load(make_pdf(1, password="secret"), password="wrong")
        assert pdf_doc.page_count == 3

    def test_failed_load_keeps_previous_document(self, pdf_doc):
        with pytest.raises(DocumentLoadError):
            pdf_doc.load(b"nope")
        assert pdf_doc.page_count == 3

    def test_load_file(self, tmp_path, pdf_bytes):
        path = tmp_path / "in.pdf"
        path.write_bytes(pdf_bytes)
        doc = PDFDocument()
        doc.load_file(str(path))
        assert doc.page_count == 3

    def test_reset(self, pdf_doc):
        pdf_doc.reset()
        assert not pdf_doc.is_loaded
        assert pdf_doc.page_count == 0
        assert pdf_doc.original_bytes is None


class TestSerialization:
    def test_save_round_trips(self, pdf_doc):
        data = pdf_doc.save()
        assert data.startswith(b"%PDF")
        assert page_labels(data) == ["page-0", "page-1", "page-2"]

    def test_save_to_file(self, pdf_doc, tmp_path):
        path = tmp_path / "out.pdf"
        pdf_doc.save_to_file(str(path))
        assert page_labels(path.read_bytes()) == ["page-0", "page-1", "page-2"]

    def test_get_size_matches_save(self, pdf_doc):
        assert pdf_doc.get_size() == len(pdf_doc.save())

    def test_compress_keeps_pages(self, pdf_doc):
        data = pdf_doc.compress()
        assert data.startswith(b"%PDF")
        assert page_labels(data) == ["page-0", "page-1", "page-2"]
        assert pdf_doc.get_compressed_size() == len(data)


class TestPageAccess:
    def test_page_size(self, pdf_doc):
        assert pdf_doc.get_page_size(0) == (612, 792)

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_invalid_index(self, pdf_doc, index):
        with pytest.raises(InvalidPageIndex, match="Invalid page index"):
            pdf_doc.get_page(index)

    def test_find_page_returns_none(self, pdf_doc):
        assert pdf_doc.find_page(5) is None
        assert pdf_doc.find_page(1) is not None


class TestFormsAndOutline:
    def test_fill_form_field(self):
        doc = PDFDocument()
        doc.load(make_pdf(1, with_field=True))
        doc.fill_form_field("full_name", "Ada Lovelace")
        assert doc.get_field_values() == {"full_name": "Ada Lovelace"}

    def test_fill_missing_field_is_logged(self, pdf_doc, caplog):
        pdf_doc.fill_form_field("nope", "value")
        assert "Could not fill field nope" in caplog.text

    def test_flatten_removes_widgets(self):
        doc = PDFDocument()
        doc.load(make_pdf(1, with_field=True))
        doc.flatten_annotations()
        assert list(doc.get_page(0).widgets()) == []

    def test_get_outline(self):
        doc = PDFDocument()
        doc.load(make_pdf(3, toc=[[1, "Intro", 1], [2, "Details", 3]]))
        assert doc.get_outline() == [
            {'level': 1, 'title': "Intro", 'page': 1},
            {'level': 2, 'title': "Details", 'page': 3},
        ]

    def test_bookmarks_and_encryption_are_unsupported(self, pdf_doc):
        with pytest.raises(UnsupportedCapability) as exc:
            pdf_doc.add_bookmark("Intro", 0)
        assert exc.value.capability == "Bookmark writing"
        with pytest.raises(UnsupportedCapability):
            pdf_doc.encrypt("user")
