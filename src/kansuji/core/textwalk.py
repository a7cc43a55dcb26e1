"""
Text-tree walker

HTML / XML 文書の全テキストノードに convert を適用し、
変化したノードだけを書き戻す。script / style の中身には触れない。
"""
import logging
from typing import Callable, Optional

from bs4 import BeautifulSoup
from bs4.element import NavigableString

from .converter import convert

logger = logging.getLogger(__name__)

SKIP_PARENTS = {"script", "style"}


def convert_soup(soup: BeautifulSoup, converter: Optional[Callable[[str], str]] = None) -> int:
    """
    Convert every text node of a parsed document in place.

    Returns:
        Number of text nodes that were rewritten.
    """
    converter = converter or convert
    changed = 0

    # replace_with 中に走査が壊れないよう先にリスト化する
    for node in list(soup.find_all(string=True)):
        # Comment や Doctype などの派生クラスは対象外
        if type(node) is not NavigableString:
            continue
        original = str(node)
        if not original.strip():
            continue
        parent = node.parent
        if parent is not None and parent.name in SKIP_PARENTS:
            continue

        converted = converter(original)
        if converted != original:
            node.replace_with(NavigableString(converted))
            changed += 1

    logger.debug(f"Rewrote {changed} text nodes")
    return changed


def convert_markup(markup: str, features: str = "html.parser",
                   converter: Optional[Callable[[str], str]] = None) -> str:
    """
    Parse markup, convert its text nodes and serialize it again.

    features: BeautifulSoup parser name ("html.parser" / "xml").
    """
    soup = BeautifulSoup(markup, features)
    convert_soup(soup, converter)
    return str(soup)
