"""
Word document reader

Extracts the paragraph text of a .docx file, one paragraph per line.
Formatting is dropped; Harvard-Kyoto carries everything in the letters.
"""

import os
import zipfile


class DocxReader:
    """Reads Harvard-Kyoto text from Word (.docx) documents."""

    SUPPORTED_EXTENSIONS = {".docx"}

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(file_path.lower())
        return ext in DocxReader.SUPPORTED_EXTENSIONS

    @staticmethod
    def read(file_path: str) -> str:
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"File not found: {file_path}")

        try:
            from docx import Document
            from docx.opc.exceptions import PackageNotFoundError
        except ImportError:
            raise RuntimeError("python-docx is not installed. Run: pip install python-docx")

        try:
            doc = Document(file_path)
        except (PackageNotFoundError, zipfile.BadZipFile, KeyError) as e:
            raise RuntimeError(f"Not a Word document: {file_path}") from e

        return "\n".join(p.text for p in doc.paragraphs)
