from typing import Union

from bs4 import BeautifulSoup

HTML_PARSER = "html.parser"


def make_soup(html: Union[str, BeautifulSoup]) -> BeautifulSoup:
    """Parse once, reuse everywhere (already-parsed soups pass through)"""
    if isinstance(html, BeautifulSoup):
        return html
    return BeautifulSoup(html or "", HTML_PARSER)


def clean_text(value: str) -> str:
    """Collapse whitespace runs and trim"""
    return " ".join((value or "").split())
