"""Base document parser implementation."""

from pathlib import Path

from ..extractors.document_extractor import extract_document
from ..interfaces.parser import IDocumentParser
from ..models.document import ExtractedDocument
from ..models.enums import DocumentFormat
from .exceptions import SUPPORTED_EXTENSIONS, UnsupportedFormatError
from .pdf_parser import PDFDocumentParser
from .serialization import DocumentSerializer
from .word_parser import WordDocumentParser


class DocumentParser(IDocumentParser):
    """
    Main document parser that delegates to format-specific readers.

    Reads .docx/.doc through python-docx and .pdf through pdfplumber,
    then runs section and metadata extraction on the resulting text.
    """

    def __init__(self):
        self._word_parser = WordDocumentParser()
        self._pdf_parser = PDFDocumentParser()
        self._serializer = DocumentSerializer()

    def extract_text(self, file_path: str) -> str:
        """
        Read the plain text of a document, choosing a reader by extension.

        Raises:
            FileNotFoundError: If the file does not exist.
            UnsupportedFormatError: If the file format is not supported.
            DocumentCorruptedError: If the document is corrupted.
        """
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        doc_format = self.detect_document_format(file_path)
        if doc_format == DocumentFormat.PDF:
            return self._pdf_parser.extract_text(file_path)
        return self._word_parser.extract_text(file_path)

    def parse(self, file_path: str) -> ExtractedDocument:
        """
        Read a document and extract its sections and metadata.

        Args:
            file_path: Path to the document file.

        Returns:
            ExtractedDocument for the file.
        """
        text = self.extract_text(file_path)
        return extract_document(text, Path(file_path).name)

    def serialize(self, doc: ExtractedDocument) -> str:
        """Serialize an ExtractedDocument to JSON string."""
        return self._serializer.serialize(doc)

    def deserialize(self, json_str: str) -> ExtractedDocument:
        """Deserialize a JSON string to an ExtractedDocument."""
        return self._serializer.deserialize(json_str)

    def get_supported_formats(self) -> list[str]:
        """Return list of supported file formats."""
        return list(SUPPORTED_EXTENSIONS)

    def detect_document_format(self, file_path: str) -> DocumentFormat:
        """
        Detect the document format from the file extension.

        Raises:
            UnsupportedFormatError: If format is not supported.
        """
        suffix = Path(file_path).suffix.lower()

        if suffix == ".docx":
            return DocumentFormat.WORD
        elif suffix == ".doc":
            return DocumentFormat.LEGACY_WORD
        elif suffix == ".pdf":
            return DocumentFormat.PDF
        else:
            raise UnsupportedFormatError(
                message=(
                    f"Unsupported file format: {suffix or '(none)'}. "
                    "Please upload a Word (.docx) or PDF file."
                ),
                file_path=file_path,
                location="file extension",
                details={"supported_formats": list(SUPPORTED_EXTENSIONS)}
            )
