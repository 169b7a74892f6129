"""PDF text extraction using PyMuPDF."""

import fitz  # PyMuPDF


def extract_text_from_pdf(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file's bytes.

    Raises ValueError if the bytes are not a readable PDF.
    """
    try:
        doc = fitz.open(stream=pdf_bytes, filetype="pdf")
    except (RuntimeError, ValueError) as exc:
        raise ValueError(f"Could not read PDF: {exc}") from exc
    with doc:
        pages = [page.get_text() for page in doc]
    return "\n".join(pages).strip()
