"""arXiv link normalization."""

_ABS_SEGMENT = "arxiv.org/abs/"
_PDF_SEGMENT = "arxiv.org/pdf/"


def _force_https(url: str) -> str:
    return url.replace("http://", "https://")


def normalize_url(url: str) -> str:
    """Rewrite an arXiv link into a secure PDF link.

    Example: http://arxiv.org/abs/1234.5678 -> https://arxiv.org/pdf/1234.5678.pdf

    Abstract-page links are pointed at the PDF and get a ``.pdf`` suffix.
    PDF links and unrecognized links only have their scheme upgraded.
    Applying it to its own output returns the same string.
    """
    if _ABS_SEGMENT in url:
        return _force_https(url.replace(_ABS_SEGMENT, _PDF_SEGMENT)) + ".pdf"
    return _force_https(url)
