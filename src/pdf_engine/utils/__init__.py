"""
Utilities module for the PDF engine
Contains settings and serialization utilities
"""
from .settings import Settings
from .export import PDFSerializer

__all__ = ['Settings', 'PDFSerializer']
