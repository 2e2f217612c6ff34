"""
Core module for the PDF engine
Contains the document model, page operations, history and shared types
"""
from .pdf_document import PDFDocument
from .page_operations import PageOperations
from .history import EditorState, HistoryEntry, HistoryStore
from .errors import (
    PDFEngineError,
    NotLoaded,
    PasswordRequired,
    InvalidPassword,
    DocumentLoadError,
    InvalidPageIndex,
    InvalidSourcePageIndex,
    InvalidTargetPageIndex,
    InvalidSplitPosition,
    CannotDeleteLastPage,
    DecodeError,
    UnsupportedCapability,
)
from .models import (
    TextAnnotation,
    ImageAnnotation,
    DrawingTool,
    DrawingPath,
    ShapeType,
    DrawingShape,
    StickyNote,
    LinkRect,
    LinkPlaceholder,
    Redaction,
    WatermarkType,
    WatermarkPosition,
    WatermarkConfig,
    HeaderFooterSlot,
    HeaderFooterConfig,
)

__all__ = [
    'PDFDocument',
    'PageOperations',
    'EditorState',
    'HistoryEntry',
    'HistoryStore',
    'PDFEngineError',
    'NotLoaded',
    'PasswordRequired',
    'InvalidPassword',
    'DocumentLoadError',
    'InvalidPageIndex',
    'InvalidSourcePageIndex',
    'InvalidTargetPageIndex',
    'InvalidSplitPosition',
    'CannotDeleteLastPage',
    'DecodeError',
    'UnsupportedCapability',
    'TextAnnotation',
    'ImageAnnotation',
    'DrawingTool',
    'DrawingPath',
    'ShapeType',
    'DrawingShape',
    'StickyNote',
    'LinkRect',
    'LinkPlaceholder',
    'Redaction',
    'WatermarkType',
    'WatermarkPosition',
    'WatermarkConfig',
    'HeaderFooterSlot',
    'HeaderFooterConfig',
]
