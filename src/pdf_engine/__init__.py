"""
PDF Engine - in-memory PDF editing
Page structure, annotations, redaction, watermarks, headers/footers and undo/redo
"""
from .core import (
    PDFDocument,
    PageOperations,
    EditorState,
    HistoryEntry,
    HistoryStore,
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
    TextAnnotation,
    ImageAnnotation,
    DrawingPath,
    DrawingShape,
    StickyNote,
    LinkRect,
    LinkPlaceholder,
    Redaction,
    WatermarkConfig,
    HeaderFooterSlot,
    HeaderFooterConfig,
)
from .session import EditorSession
from .tools import AnnotationEngine, HeaderFooterTool, RedactionTool, WatermarkTool
from .utils import PDFSerializer, Settings

__version__ = "1.0.0"

__all__ = [
    'EditorSession',
    'PDFDocument',
    'PageOperations',
    'AnnotationEngine',
    'WatermarkTool',
    'HeaderFooterTool',
    'RedactionTool',
    'HistoryStore',
    'EditorState',
    'HistoryEntry',
    'PDFSerializer',
    'Settings',
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
    'DrawingPath',
    'DrawingShape',
    'StickyNote',
    'LinkRect',
    'LinkPlaceholder',
    'Redaction',
    'WatermarkConfig',
    'HeaderFooterSlot',
    'HeaderFooterConfig',
]
