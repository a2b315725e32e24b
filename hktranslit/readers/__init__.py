from .web_reader import WebReader
from .docx_reader import DocxReader
from .text_reader import TextReader

# Checked in order; TextReader is the fallback for any existing file
READERS = (WebReader, DocxReader, TextReader)


def read_source(source: str) -> str:
    """Read text from a URL, a .docx file or a plain text file."""
    for reader in READERS:
        if reader.can_handle(source):
            return reader.read(source)
    raise FileNotFoundError(f"File not found: {source}")


__all__ = ["WebReader", "DocxReader", "TextReader", "READERS", "read_source"]
