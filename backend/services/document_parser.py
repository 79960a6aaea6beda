"""Resume text extraction from uploaded documents."""

import io
import logging
import re
from pathlib import Path

import pdfplumber
from docx import Document

from config import settings

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = frozenset({".pdf", ".docx", ".txt"})

_CONTROL_CHARS_RE = re.compile(r"[\u0000-\u0008\u000B-\u001F\u007F-\u009F]")


class DocumentParseError(Exception):
    """The document could not be turned into resume text."""


class UnsupportedDocumentError(DocumentParseError):
    pass


class DocumentTooLargeError(DocumentParseError):
    pass


def extract_text_pdf(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all text from a DOCX file."""
    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def extract_text_plain(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DocumentParseError("Text file is not valid UTF-8") from e


_EXTRACTORS = {
    ".pdf": extract_text_pdf,
    ".docx": extract_text_docx,
    ".txt": extract_text_plain,
}


def clean_text(text: str) -> str:
    """Normalize resume text to a single line of single-spaced words."""
    if not text:
        return ""
    text = text.replace("\r\n", "\n").replace("\r", "\n").replace("\t", " ")
    text = _CONTROL_CHARS_RE.sub(" ", text)
    return " ".join(text.split())


def extract_text(content: bytes, filename: str) -> str:
    """Extract cleaned resume text from a PDF, DOCX or TXT upload."""
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise DocumentTooLargeError(f"File too large. Max size: {settings.max_upload_size_mb}MB")

    extension = Path(filename).suffix.lower()
    extractor = _EXTRACTORS.get(extension)
    if extractor is None:
        raise UnsupportedDocumentError(
            f"Unsupported file type {extension or filename!r}. Upload PDF, DOCX or TXT files only."
        )

    try:
        text = extractor(content)
    except DocumentParseError:
        raise
    except Exception as e:
        logger.error("Failed to parse %s file: %s", extension, e)
        raise DocumentParseError(f"Could not parse {extension} file") from e

    return clean_text(text)
