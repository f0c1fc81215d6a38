import sys
from typing import Optional, TextIO

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import TextLexer, get_lexer_by_name, guess_lexer
from pygments.util import ClassNotFound

from scrape.core.errors import RenderError
from scrape.schemas import FetchedContent

def print_content(
    content: FetchedContent,
    theme: str,
    no_colors: bool = False,
    lang: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Write the body to stdout, highlighted unless no_colors is set.
    An explicit lang wins over the language declared by the server.
    """
    out = stream or sys.stdout

    if no_colors:
        out.write(content.body)
        out.write("\n")
        return

    language = lang or content.declared_language
    try:
        lexer = _lexer_for(content.body, language)
        formatter = Terminal256Formatter(style=theme)
        rendered = highlight(content.body, lexer, formatter)
    except ClassNotFound as e:
        raise RenderError(str(e)) from e

    out.write(rendered)
    out.write("\n")

def _lexer_for(body: str, language: Optional[str]):
    if language:
        return get_lexer_by_name(language)
    try:
        return guess_lexer(body)
    except ClassNotFound:
        return TextLexer()
