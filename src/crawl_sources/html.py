"""Markup helpers: selector compilation, node text, markup stripping."""

from __future__ import annotations

import logging
import re
from typing import Optional

from lxml import etree
from lxml import html as lxml_html
from lxml.cssselect import CSSSelector, SelectorError

from common.errors import StructureError

logger = logging.getLogger(__name__)

# lxml rejects str input that carries an encoding declaration.
XML_DECLARATION = re.compile(r"^\s*<\?xml[^>]*\?>", re.IGNORECASE)


def compile_selector(css: str) -> CSSSelector:
    """Compile a CSS selector, raising StructureError if it is invalid."""
    try:
        return CSSSelector(css)
    except SelectorError as e:
        raise StructureError(f"Invalid selector {css!r}: {e}") from e


def _without_xml_declaration(markup: str) -> str:
    return XML_DECLARATION.sub("", markup, count=1)


def parse_document(markup: str) -> Optional[etree._Element]:
    """Parse a full HTML document. Empty or unparseable markup gives None."""
    if not markup or not markup.strip():
        return None
    markup = _without_xml_declaration(markup)
    if not markup.strip():
        return None
    try:
        return lxml_html.document_fromstring(markup)
    except (etree.ParserError, ValueError) as e:
        logger.warning("Could not parse HTML document: %s", e)
        return None


def node_text(node: etree._Element) -> str:
    return "".join(node.itertext()).strip()


def first_text(node: etree._Element, selector: CSSSelector) -> Optional[str]:
    """Stripped text of the first match, or None when nothing matches."""
    matches = selector(node)
    if not matches:
        return None
    return node_text(matches[0])


def strip_markup(markup: Optional[str]) -> str:
    """Return the text content of an HTML fragment or document."""
    if not markup or not markup.strip():
        return ""
    markup = _without_xml_declaration(markup)
    if not markup.strip():
        return ""
    try:
        root = lxml_html.fromstring(markup)
    except (etree.ParserError, ValueError) as e:
        logger.warning("Could not parse markup: %s", e)
        return ""
    return root.text_content()
