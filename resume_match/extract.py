"""
Document decoding.

Turns uploaded bytes into plain text. PDF and DOCX decoding is delegated to
pdfplumber and python-docx; everything after this point works on strings.
"""

import io
import logging

import docx
import pdfplumber

from . import config
from .errors import DecodeError, DocumentTooLargeError, UnsupportedFormatError

logger = logging.getLogger(__name__)


def normalize_mime_type(mime_type: str) -> str:
    """Lower-case a MIME type and drop parameters such as charset."""
    return (mime_type or "").split(";", 1)[0].strip().lower()


def extract_text_from_plain_bytes(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"Text document is not valid UTF-8: {e}") from e


def extract_text_from_pdf_bytes(raw: bytes) -> str:
    """Extract text from every page of a PDF, one page per block."""
    try:
        with pdfplumber.open(io.BytesIO(raw)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as e:
        raise DecodeError(f"Failed to parse PDF file: {e}") from e
    return "\n".join(pages)


def extract_text_from_docx_bytes(raw: bytes) -> str:
    """Extract paragraph text from a DOCX document."""
    try:
        document = docx.Document(io.BytesIO(raw))
    except Exception as e:
        raise DecodeError(f"Failed to parse DOCX file: {e}") from e
    return "\n".join(paragraph.text for paragraph in document.paragraphs)


_DECODERS = {
    "text": extract_text_from_plain_bytes,
    "pdf": extract_text_from_pdf_bytes,
    "docx": extract_text_from_docx_bytes,
}


def decode_document(raw: bytes, mime_type: str) -> str:
    """
    Decode a document into text.

    Args:
        raw: Document bytes as uploaded
        mime_type: Declared MIME type of the document

    Returns:
        Decoded text

    Raises:
        UnsupportedFormatError: If the MIME type is not text, PDF or DOCX
        DecodeError: If the bytes cannot be decoded or exceed the size limit
    """
    fmt = config.SUPPORTED_FORMATS.get(normalize_mime_type(mime_type))
    if fmt is None:
        logger.warning(f"Rejected document with unsupported type {mime_type!r}")
        raise UnsupportedFormatError(mime_type)

    if len(raw) > config.MAX_DOCUMENT_BYTES:
        raise DocumentTooLargeError(len(raw), config.MAX_DOCUMENT_BYTES)

    try:
        text = _DECODERS[fmt](raw)
    except DecodeError as e:
        logger.error(f"Decoding {fmt} document failed: {e}", exc_info=True)
        raise

    logger.debug(f"Decoded {fmt} document: {len(raw)} bytes -> {len(text)} chars")
    return text
