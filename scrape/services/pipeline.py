from typing import Optional

import httpx

from scrape.fetch import scraper
from scrape.fetch.extractor import build_query, extract
from scrape.fetch.utils import parse_url
from scrape.schemas import FetchedContent, RequestOptions

async def run_pipeline(
    url: str,
    options: RequestOptions,
    selector: Optional[str] = None,
    attribute: Optional[str] = None,
    count: Optional[int] = None,
    regex: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> FetchedContent:
    """
    Main pipeline for one invocation.

    1. Compile the query (selector, regex) so bad input fails before any request
    2. Normalize the URL
    3. Download the body
    4. If a selector was given, replace the body with the extracted lines
    """
    query = build_query(selector, attribute, count, regex) if selector is not None else None
    target = parse_url(url)

    if client is None:
        async with httpx.AsyncClient(follow_redirects=True) as own_client:
            content = await scraper.download(own_client, target, options)
    else:
        content = await scraper.download(client, target, options)

    if query is None:
        return content
    return extract(content, query)
