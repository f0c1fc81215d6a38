"""
Selector-based extraction from a fetched HTML document.
A Query is compiled from user input before anything is downloaded, so a bad
selector or regex never costs a request.
"""

import re
from dataclasses import dataclass
from itertools import islice
from typing import Iterable, Iterator, Optional

import soupsieve
from bs4 import BeautifulSoup, Tag

from scrape.core.errors import InvalidQueryError
from scrape.schemas import FetchedContent

@dataclass(frozen=True)
class Query:
    selector: soupsieve.SoupSieve
    attribute: Optional[str] = None
    cap: Optional[int] = None  # None means every match
    filter: Optional[re.Pattern] = None

def build_query(
    selector: str,
    attribute: Optional[str] = None,
    count: Optional[int] = None,
    regex: Optional[str] = None,
) -> Query:
    """Compile the CSS selector and optional regex, failing fast on either."""
    try:
        compiled = soupsieve.compile(selector)
    except soupsieve.SelectorSyntaxError as e:
        raise InvalidQueryError(selector) from e

    pattern = None
    if regex is not None:
        try:
            pattern = re.compile(regex)
        except re.error as e:
            raise InvalidQueryError(regex, kind="regex") from e

    return Query(selector=compiled, attribute=attribute, cap=count, filter=pattern)

def take_nodes(nodes: Iterable[Tag], cap: Optional[int]) -> Iterator[Tag]:
    """First `cap` nodes in document order, or all of them when cap is None."""
    return islice(nodes, cap)

def reg_select(pattern: Optional[re.Pattern], value: str) -> str:
    """
    Narrow value to the first regex match.
    Without a pattern, or without a match, value is returned unchanged.
    """
    if pattern is None:
        return value
    match = pattern.search(value)
    return match.group(0) if match else value

def node_value(node: Tag, attribute: Optional[str]) -> str:
    """Raw attribute value if the node has it, otherwise its inner HTML."""
    if attribute is not None:
        value = node.get(attribute)
        if value is not None:
            return value
    return node.decode_contents()

def extract(content: FetchedContent, query: Query) -> FetchedContent:
    """Replace the body with one line per matched node; the language passes through."""
    # Keep attributes like class as raw strings, not token lists
    soup = BeautifulSoup(content.body, "html.parser", multi_valued_attributes=None)

    lines = []
    for node in take_nodes(query.selector.iselect(soup), query.cap):
        lines.append(reg_select(query.filter, node_value(node, query.attribute)) + "\n")

    return FetchedContent(body="".join(lines), declared_language=content.declared_language)
