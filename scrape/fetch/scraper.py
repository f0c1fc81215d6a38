import sys
from typing import Callable, Optional

import httpx
from tqdm import tqdm

from scrape.core.config import settings
from scrape.core.errors import EncodingError, RequestError, StreamError
from scrape.fetch.utils import guess_language
from scrape.schemas import FetchedContent, RequestOptions, TransferState

class ProgressBar:
    """Byte progress for one download, drawn on stderr and cleared when done."""

    def __init__(self, total_bytes: int, url: str):
        self._bar = tqdm(
            total=total_bytes,
            desc=f"Downloading {url}",
            unit="B",
            unit_scale=True,
            unit_divisor=1024,
            leave=False,
            file=sys.stderr,
            dynamic_ncols=True,
        )

    def update(self, state: TransferState) -> None:
        self._bar.update(state.downloaded_bytes - self._bar.n)

    def close(self) -> None:
        self._bar.close()

ProgressFactory = Callable[[int, str], ProgressBar]

def build_headers(options: RequestOptions) -> dict:
    """Headers for the single GET; empty unless browser emulation is on."""
    headers = {}
    if options.emulate_browser:
        headers["Accept"] = settings.ACCEPT
        headers["User-Agent"] = settings.USER_AGENT
    return headers

async def download(
    client: httpx.AsyncClient,
    url: httpx.URL,
    options: RequestOptions,
    progress_factory: ProgressFactory = ProgressBar,
) -> FetchedContent:
    """
    GET the URL and return its decoded body with the language guessed from Content-Type.

    With a Content-Length the body is streamed chunk by chunk and progress is
    reported; without one it is read in a single call.
    """
    headers = build_headers(options)
    if options.verbose:
        print(f"REQUEST HEADERS {headers}", file=sys.stderr)

    try:
        request = client.build_request("GET", url, headers=headers)
        response = await client.send(request, stream=True)
    except httpx.RequestError as e:
        raise RequestError(str(url)) from e

    try:
        if options.verbose:
            print(
                f"RESPONSE {response.http_version} {response.status_code} {response.reason_phrase}",
                file=sys.stderr,
            )
        if options.show_response_headers:
            for name, value in response.headers.items():
                print(f"{name}: {value}", file=sys.stderr)

        language = guess_language(response.headers.get("content-type"))
        encoding = response.charset_encoding or settings.DEFAULT_ENCODING
        total_bytes = _content_length(response)

        if total_bytes is not None:
            raw = await _read_streaming(response, str(url), total_bytes, options, progress_factory)
        else:
            if options.verbose and not options.quiet:
                print(f"no content-length header for '{url}'", file=sys.stderr)
            try:
                raw = await response.aread()
            except httpx.RequestError as e:
                raise StreamError(str(url)) from e
    finally:
        await response.aclose()

    return FetchedContent(body=_decode(raw, encoding, str(url)), declared_language=language)

async def _read_streaming(
    response: httpx.Response,
    url: str,
    total_bytes: int,
    options: RequestOptions,
    progress_factory: ProgressFactory,
) -> bytes:
    progress: Optional[ProgressBar] = None if options.quiet else progress_factory(total_bytes, url)
    state = TransferState(total_bytes=total_bytes)
    buffer = bytearray()

    try:
        async for chunk in response.aiter_bytes():
            buffer.extend(chunk)
            state.advance(len(chunk))
            if progress is not None:
                progress.update(state)
    except httpx.RequestError as e:
        raise StreamError(url) from e
    finally:
        if progress is not None:
            progress.close()

    return bytes(buffer)

def _content_length(response: httpx.Response) -> Optional[int]:
    value = response.headers.get("content-length")
    if value is None:
        return None
    try:
        length = int(value)
    except ValueError:
        return None
    return length if length >= 0 else None

def _decode(raw: bytes, encoding: str, url: str) -> str:
    try:
        return raw.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise EncodingError(url, encoding) from e
