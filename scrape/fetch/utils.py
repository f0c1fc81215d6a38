import string
from typing import Optional

import httpx

from scrape.core.errors import UrlParseError

LANGUAGES = {
    "text/html": "html",
    "application/json": "json",
}

# Hostnames, IPv4 and bracket-less IPv6 literals; httpx percent-encodes anything else
HOST_CHARS = frozenset(string.ascii_letters + string.digits + "-._:")

def parse_url(raw: str) -> httpx.URL:
    """
    Turn user input into an absolute URL.
    Bare hosts get an https:// prefix: 'example.com/page' -> 'https://example.com/page',
    '//example.com/page' -> 'https://example.com/page'.
    Anything else that does not parse is rejected with the original input.
    """
    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL as e:
        raise UrlParseError(raw, str(e)) from e

    if not url.scheme:
        # Relative URL without a base: retry once as https
        prefix = "https:" if raw.startswith("//") else "https://"
        try:
            url = httpx.URL(prefix + raw)
        except httpx.InvalidURL as e:
            raise UrlParseError(raw, str(e)) from e

    if url.scheme in ("http", "https") and not url.host:
        raise UrlParseError(raw, "empty host")
    if not set(url.raw_host.decode("ascii")) <= HOST_CHARS:
        raise UrlParseError(raw, "invalid host")

    return url

def guess_language(content_type: Optional[str]) -> Optional[str]:
    """
    Map a Content-Type header value to a highlighting language.
    Examples: 'text/html; charset=utf-8' -> 'html', 'application/json' -> 'json', 'image/png' -> None
    """
    if not content_type:
        return None

    media_type = content_type.split(";", 1)[0].strip().lower()
    return LANGUAGES.get(media_type)
