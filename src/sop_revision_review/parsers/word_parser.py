"""Word document (.docx) text reader."""

from pathlib import Path
from typing import Iterator
from zipfile import BadZipFile

from docx import Document
from docx.opc.exceptions import PackageNotFoundError
from docx.oxml.ns import qn
from docx.table import Table
from docx.text.paragraph import Paragraph

from .exceptions import DocumentCorruptedError, ParseError, UnsupportedFormatError


class WordDocumentParser:
    """
    Reads plain text out of Word documents.

    Paragraphs and tables are emitted in body order, one line per
    paragraph and one ``| cell | cell |`` line per table row. Legacy
    .doc files are accepted by extension but only readable when they are
    really Office Open XML packages.
    """

    SUPPORTED_SUFFIXES = (".docx", ".doc")

    def extract_text(self, file_path: str) -> str:
        """
        Extract the text of a Word document.

        Args:
            file_path: Path to the .docx or .doc file.

        Returns:
            Newline-joined text of all non-empty paragraphs and table rows.

        Raises:
            FileNotFoundError: If the file does not exist.
            UnsupportedFormatError: If the file is not a Word file.
            DocumentCorruptedError: If the document cannot be opened.
        """
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        if path.suffix.lower() not in self.SUPPORTED_SUFFIXES:
            raise UnsupportedFormatError(
                message=f"Unsupported file format: {path.suffix}",
                file_path=file_path,
                location="file extension"
            )

        try:
            doc = Document(file_path)
        except (BadZipFile, PackageNotFoundError, KeyError) as e:
            raise DocumentCorruptedError(
                message="Document is corrupted or not a valid Word file",
                file_path=file_path,
                location="file header",
                details={"original_error": str(e)}
            )
        except Exception as e:
            raise ParseError(
                message=f"Failed to open document: {str(e)}",
                file_path=file_path,
                details={"original_error": str(e)}
            )

        return "\n".join(self._iter_lines(doc))

    def _iter_lines(self, doc) -> Iterator[str]:
        """Yield text lines for body paragraphs and table rows in order."""
        for child in doc.element.body.iterchildren():
            if child.tag == qn("w:p"):
                text = Paragraph(child, doc).text
                if text.strip():
                    yield text
            elif child.tag == qn("w:tbl"):
                yield from self._table_lines(Table(child, doc))

    @staticmethod
    def _table_lines(table: Table) -> Iterator[str]:
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells]
            if any(cells):
                yield "| " + " | ".join(cells) + " |"
