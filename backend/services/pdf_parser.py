import io
import logging
from pathlib import PurePath

import pdfplumber

from services.errors import ValidationError

logger = logging.getLogger(__name__)

TEXT_EXTENSIONS = frozenset({".txt", ".md"})


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_document_text(filename: str, content: bytes) -> str:
    """Turn an uploaded resume (PDF or plain text) into a single string."""
    suffix = PurePath(filename or "").suffix.lower()
    if suffix == ".pdf":
        try:
            return extract_text(content)
        except Exception as e:
            logger.warning("Could not parse PDF %s: %s", filename, e)
            raise ValidationError("Could not parse PDF file") from e
    if suffix in TEXT_EXTENSIONS:
        return content.decode("utf-8", errors="replace").strip()
    raise ValidationError("Only PDF or plain-text resumes are accepted")
