# extract plain text from an uploaded resume PDF
import logging
from io import BytesIO

import PyPDF2

from errors import DocumentReadError, UnsupportedDocumentError

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


def extract_pages_from_pdf_bytes(pdf_bytes: bytes):
    reader = PyPDF2.PdfReader(BytesIO(pdf_bytes))
    text = []
    for p in reader.pages:
        text.append(p.extract_text() or "")
    return text


def extract_text_from_pdf_bytes(pdf_bytes: bytes) -> str:
    return "\n".join(extract_pages_from_pdf_bytes(pdf_bytes))


def is_pdf(filename, content_type) -> bool:
    if content_type == PDF_CONTENT_TYPE:
        return True
    return bool(filename) and filename.lower().endswith(".pdf")


def read_resume_upload(filename, content_type, data: bytes):
    """Return (text, page_count) for an uploaded resume.

    Raises UnsupportedDocumentError for anything but a PDF and DocumentReadError
    when PyPDF2 cannot read it, so the user can fall back to pasting the text.
    """
    if not is_pdf(filename, content_type):
        raise UnsupportedDocumentError("Please upload a PDF file")
    try:
        pages = extract_pages_from_pdf_bytes(data)
    except Exception as e:
        logger.warning("could not read PDF %r: %s", filename, e)
        raise DocumentReadError("Error reading PDF. Please try pasting text instead.") from e
    return "\n".join(pages), len(pages)
