"""
Engine Errors
Every failure an editing operation can surface to the caller
"""


class PDFEngineError(Exception):
    """Base class for all engine errors"""

    default_message = "PDF engine error"

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)


class NotLoaded(PDFEngineError):
    """Operation attempted before a document was loaded"""

    default_message = "No PDF loaded"


class PasswordRequired(PDFEngineError):
    """Encrypted source and no usable password"""

    default_message = "The document is encrypted and cannot be read without a password"


class InvalidPassword(PasswordRequired):
    """A password was supplied but does not unlock the document"""

    default_message = "The password does not unlock this document"


class DocumentLoadError(PDFEngineError):
    """Source bytes could not be parsed as a PDF"""

    default_message = "Failed to parse PDF document"


class InvalidPageIndex(PDFEngineError):
    default_message = "Invalid page index"


class InvalidSourcePageIndex(InvalidPageIndex):
    default_message = "Invalid source page index"


class InvalidTargetPageIndex(InvalidPageIndex):
    default_message = "Invalid target page index"


class InvalidSplitPosition(PDFEngineError):
    default_message = "Invalid split position"


class CannotDeleteLastPage(PDFEngineError):
    default_message = "Cannot delete the last page"


class DecodeError(PDFEngineError):
    """Image payload could not be decoded"""

    default_message = "Could not decode image data"


class UnsupportedCapability(PDFEngineError):
    """The underlying PDF library cannot provide this feature"""

    default_message = "This capability is not supported"

    def __init__(self, capability: str, message: str = None):
        self.capability = capability
        super().__init__(message or f"{capability} is not supported")
