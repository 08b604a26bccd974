"""PDF document text reader."""

from pathlib import Path

import pdfplumber
from PyPDF2 import PdfReader
from PyPDF2.errors import PdfReadError

from .exceptions import DocumentCorruptedError, ParseError, UnsupportedFormatError


class PDFDocumentParser:
    """
    Reads plain text out of PDF documents.

    Uses PyPDF2 to validate the file and pdfplumber for text
    extraction. Page boundaries become blank lines; layout is not kept.
    """

    def extract_text(self, file_path: str) -> str:
        """
        Extract the text of a PDF document.

        Args:
            file_path: Path to the PDF file.

        Returns:
            Page texts joined by blank lines. Pages without a text layer
            contribute nothing.

        Raises:
            FileNotFoundError: If the file does not exist.
            UnsupportedFormatError: If the file is not a PDF.
            DocumentCorruptedError: If the document is corrupted or encrypted.
        """
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        if path.suffix.lower() != ".pdf":
            raise UnsupportedFormatError(
                message=f"Unsupported file format: {path.suffix}",
                file_path=file_path,
                location="file extension"
            )

        try:
            reader = PdfReader(file_path)
            encrypted = reader.is_encrypted
            page_count = 0 if encrypted else len(reader.pages)
        except PdfReadError as e:
            raise DocumentCorruptedError(
                message="PDF file is corrupted or encrypted",
                file_path=file_path,
                location="file header",
                details={"original_error": str(e)}
            )
        except Exception as e:
            raise ParseError(
                message=f"Failed to open PDF: {str(e)}",
                file_path=file_path,
                details={"original_error": str(e)}
            )

        if encrypted:
            raise DocumentCorruptedError(
                message="PDF file is encrypted",
                file_path=file_path,
                location="file header",
            )

        try:
            with pdfplumber.open(file_path) as pdf:
                return self._extract_pages(pdf)
        except Exception as e:
            raise ParseError(
                message=f"Failed to read PDF content: {str(e)}",
                file_path=file_path,
                details={"original_error": str(e), "page_count": page_count}
            )

    @staticmethod
    def _extract_pages(pdf: pdfplumber.PDF) -> str:
        text_parts = []
        for page in pdf.pages:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)
        return "\n\n".join(text_parts)
