"""URL and path normalization.

All functions are pure and total: any string in, a string out.
"""

from urllib.parse import unquote, urlsplit

_SCHEMES = ("http://", "https://")


def _strip_query(text: str) -> str:
    """Cut *text* at the first ``?`` or ``#``."""
    end = len(text)
    for marker in ("?", "#"):
        index = text.find(marker)
        if index != -1:
            end = min(end, index)
    return text[:end]


def strip_host(text: str) -> str:
    """Drop a literal or templated host in front of the first ``/``.

    ``"acme.localhost/terms"`` and ``"{account}.localhost/terms"`` both
    become ``"/terms"``; text whose head has no ``.``, ``{``, or ``}`` is
    returned unchanged.
    """
    head, sep, _ = text.partition("/")
    if sep and any(ch in head for ch in ".{}"):
        return text[len(head) :]
    return text


def extract_path(url: str) -> str:
    """Return the path portion of a URL or user-typed input.

    Examples::

        "http://localhost:8000/users/123?page=2" -> "/users/123"
        "https://example.com/%C3%BCber-uns"       -> "/über-uns"
        "https://example.com"                    -> "/"
        "acme.localhost/terms"                   -> "/terms"
        "{account}.localhost/terms"              -> "/terms"
        "users/123#top"                          -> "users/123"
        "contact"                                -> "contact"
    """
    text = url.strip()

    if text.startswith(_SCHEMES):
        try:
            return unquote(urlsplit(text).path) or "/"
        except ValueError:
            # e.g. an unbalanced "[" in the host
            start = 8 if text.startswith("https://") else 7
            slash = text.find("/", start)
            if slash == -1:
                return "/"
            return unquote(_strip_query(text[slash:])) or "/"

    return strip_host(_strip_query(text))


def normalize_path(path: str) -> str:
    """Unescape ``\\/`` and strip one leading and one trailing slash."""
    path = path.replace("\\/", "/")
    path = path.removeprefix("/")
    return path.removesuffix("/")


def strip_scheme(url: str) -> str:
    """Return *url* with the host kept but scheme, port, query, and fragment gone.

    Percent-escapes are decoded, as in the path from ``extract_path``.
    ``"https://acme.localhost:8000/terms/?x=1"`` -> ``"acme.localhost/terms"``.
    Used when a route's domain or subdomain placeholder takes part in the match.
    """
    text = url.strip()
    for scheme in _SCHEMES:
        if text.startswith(scheme):
            text = text[len(scheme) :]
            break
    text = normalize_path(_strip_query(text))

    head, sep, rest = text.partition("/")
    host, colon, port = head.rpartition(":")
    if colon and host and port.isdigit():
        head = host
    return unquote(f"{head}{sep}{rest}")
