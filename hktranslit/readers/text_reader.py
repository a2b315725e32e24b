"""
Plain text reader
"""

import os


class TextReader:
    """Reads Harvard-Kyoto text from plain text files."""

    ENCODING = "utf-8"

    @staticmethod
    def can_handle(file_path: str) -> bool:
        return os.path.isfile(file_path)

    @staticmethod
    def read(file_path: str) -> str:
        """
        Read a file as UTF-8.

        Decoding is strict: non-ASCII bytes are left for the validator
        to report, but bytes that are not UTF-8 at all raise here.
        """
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"File not found: {file_path}")

        with open(file_path, "r", encoding=TextReader.ENCODING) as f:
            return f.read()
