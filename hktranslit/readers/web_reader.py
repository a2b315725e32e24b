"""
URL reader

Fetches Harvard-Kyoto text published on the web, such as the plain
text e-texts found in Sanskrit text archives.
"""

from urllib.parse import urlparse


class WebReader:
    """Reads Harvard-Kyoto text from an http(s) URL."""

    TIMEOUT = 30

    @staticmethod
    def can_handle(source: str) -> bool:
        """Check if the source looks like a URL."""
        try:
            parsed = urlparse(source)
        except ValueError:
            return False
        return parsed.scheme in ("http", "https") and bool(parsed.netloc)

    @staticmethod
    def read(url: str) -> str:
        """
        Fetch a URL and return its body as text.

        Raises:
            requests.HTTPError: on a non-2xx response.
        """
        try:
            import requests
        except ImportError:
            raise RuntimeError("requests is not installed. Run: pip install requests")

        response = requests.get(url, timeout=WebReader.TIMEOUT, allow_redirects=True)
        response.raise_for_status()

        # Archives often serve text/plain without a charset
        if not response.encoding or response.encoding.lower() == "iso-8859-1":
            response.encoding = "utf-8"

        return response.text
