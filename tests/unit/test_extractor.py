import re

import pytest

from scrape.core.errors import InvalidQueryError
from scrape.fetch.extractor import (
    build_query,
    extract,
    node_value,
    reg_select,
    take_nodes,
)
from scrape.schemas import FetchedContent

LINKS_HTML = """
<html>
<body>
    <ul class="links">
        <li><a href="/one" class="nav main">One</a></li>
        <li><a href="/two">Two</a></li>
        <li><a>Three</a></li>
        <li><a href="/four">Four <b>bold</b></a></li>
        <li><a href="/five">Five</a></li>
    </ul>
</body>
</html>
"""

def _page(body=LINKS_HTML, language="html"):
    return FetchedContent(body=body, declared_language=language)

class TestBuildQuery:
    """Unit tests for query compilation"""

    def test_valid_selector(self):
        query = build_query("ul.links > li a", attribute="href", count=2, regex=r"\w+")
        assert query.attribute == "href"
        assert query.cap == 2
        assert query.filter.pattern == r"\w+"

    def test_malformed_selector(self):
        """Test that a broken selector is reported with its text"""
        with pytest.raises(InvalidQueryError) as exc_info:
            build_query("div[")
        assert exc_info.value.query == "div["
        assert exc_info.value.kind == "selector"

    def test_malformed_regex(self):
        with pytest.raises(InvalidQueryError) as exc_info:
            build_query("a", regex="(unclosed")
        assert exc_info.value.kind == "regex"

    def test_defaults(self):
        query = build_query("a")
        assert query.attribute is None
        assert query.cap is None
        assert query.filter is None

class TestTakeNodes:
    """Unit tests for capped/uncapped truncation"""

    def test_capped(self):
        assert list(take_nodes(iter(range(10)), 3)) == [0, 1, 2]

    def test_cap_larger_than_matches(self):
        assert list(take_nodes(iter(range(2)), 5)) == [0, 1]

    def test_unbounded(self):
        assert list(take_nodes(iter(range(4)), None)) == [0, 1, 2, 3]

    def test_is_lazy(self):
        """Test that nodes past the cap are never pulled"""
        pulled = []

        def source():
            for i in range(100):
                pulled.append(i)
                yield i

        assert list(take_nodes(source(), 2)) == [0, 1]
        assert pulled == [0, 1]

class TestRegSelect:
    """Unit tests for best-effort regex narrowing"""

    def test_first_match_wins(self):
        assert reg_select(re.compile(r"\d+"), "abc 12 def 34") == "12"

    def test_no_match_passes_through(self):
        """Test that a value without a match is never emptied"""
        assert reg_select(re.compile(r"\d+"), "no digits") == "no digits"

    def test_no_pattern(self):
        assert reg_select(None, "value") == "value"

class TestExtract:
    """Unit tests for selection over a parsed document"""

    def test_inner_html_per_node(self):
        result = extract(_page(), build_query("a"))
        assert result.body.splitlines() == ["One", "Two", "Three", "Four <b>bold</b>", "Five"]

    def test_cap_keeps_document_order(self):
        result = extract(_page(), build_query("a", count=3))
        assert result.body == "One\nTwo\nThree\n"

    def test_cap_above_match_count(self):
        result = extract(_page(), build_query("a", count=50))
        assert len(result.body.splitlines()) == 5

    def test_attribute_with_fallback(self):
        """Test that nodes without the attribute fall back to inner content"""
        result = extract(_page(), build_query("a", attribute="href"))
        assert result.body.splitlines() == ["/one", "/two", "Three", "/four", "/five"]

    def test_multi_valued_attribute_is_raw(self):
        """Test that class comes back exactly as written"""
        result = extract(_page(), build_query("a", attribute="class", count=1))
        assert result.body == "nav main\n"

    def test_regex_refines_each_value(self):
        result = extract(_page(), build_query("a", attribute="href", regex=r"(?<=/)\w+"))
        assert result.body.splitlines() == ["one", "two", "Three", "four", "five"]

    def test_regex_without_match_keeps_value(self):
        result = extract(_page(), build_query("a", count=2, regex=r"\d+"))
        assert result.body == "One\nTwo\n"

    def test_no_matches(self):
        result = extract(_page(), build_query("table td"))
        assert result.body == ""

    def test_language_passes_through(self):
        assert extract(_page(language="json"), build_query("a")).declared_language == "json"
        assert extract(_page(language=None), build_query("a")).declared_language is None

class TestNodeValue:
    """Unit tests for per-node value selection"""

    def test_empty_attribute_value_is_used(self):
        from bs4 import BeautifulSoup

        node = BeautifulSoup('<a href="">x</a>', "html.parser").a
        assert node_value(node, "href") == ""
        assert node_value(node, "title") == "x"
