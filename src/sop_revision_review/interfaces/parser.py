"""Document parser interface for the SOP Revision Review System."""

from abc import ABC, abstractmethod

from ..models.document import ExtractedDocument


class IDocumentParser(ABC):
    """
    Abstract interface for reading uploaded documents.

    Implementations turn a file into best-effort plain text and then
    into an ExtractedDocument.
    """

    @abstractmethod
    def extract_text(self, file_path: str) -> str:
        """
        Read the plain text of a document.

        Raises:
            FileNotFoundError: If the file does not exist.
            UnsupportedFormatError: If the file format is not supported.
            ParseError: If the document is corrupted or unreadable.
        """
        pass

    @abstractmethod
    def parse(self, file_path: str) -> ExtractedDocument:
        """
        Read a document and extract its sections and metadata.

        Raises:
            FileNotFoundError: If the file does not exist.
            UnsupportedFormatError: If the file format is not supported.
            ParseError: If the document is corrupted or unreadable.
        """
        pass

    @abstractmethod
    def serialize(self, doc: ExtractedDocument) -> str:
        """Serialize an ExtractedDocument to a JSON string."""
        pass

    @abstractmethod
    def deserialize(self, json_str: str) -> ExtractedDocument:
        """
        Deserialize a JSON string to an ExtractedDocument.

        Raises:
            ValueError: If the JSON is invalid or malformed.
        """
        pass
