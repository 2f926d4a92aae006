"""
Node matchers

A matcher is a plain predicate over a BeautifulSoup Tag. It can be handed
straight to ``soup.find_all``. The builders below cover the page structures
the conference recipes need.
"""

import re
from typing import Callable, Optional, Pattern, Union

from bs4 import Tag

from .urls import is_gated

Matcher = Callable[[Tag], bool]


def attr(tag: Optional[Tag], name: str) -> str:
    """
    Read an attribute as a string

    Multi-valued attributes such as ``class`` are joined with a space.
    Missing attributes (or a missing tag) give an empty string.
    """
    if tag is None:
        return ''
    value = tag.get(name)
    if value is None:
        return ''
    if isinstance(value, (list, tuple)):
        return ' '.join(value)
    return value


def text(tag: Tag) -> str:
    """Text of all descendant strings, each stripped, joined by a single space"""
    return ' '.join(tag.stripped_strings)


def parent_of(tag: Optional[Tag]) -> Optional[Tag]:
    if tag is None:
        return None
    return tag.parent


def grandparent_of(tag: Optional[Tag]) -> Optional[Tag]:
    return parent_of(parent_of(tag))


def anchor_with_text(value: str) -> Matcher:
    """<a> whose text is exactly ``value``"""
    def match(tag: Tag) -> bool:
        return tag.name == 'a' and text(tag) == value
    return match


def anchor_text_matching(pattern: Union[str, Pattern]) -> Matcher:
    """<a> whose whole text matches ``pattern``"""
    regex = re.compile(pattern)

    def match(tag: Tag) -> bool:
        return tag.name == 'a' and regex.match(text(tag)) is not None
    return match


def anchor_in_parent_class(cls: str) -> Matcher:
    """<a> whose parent's class attribute is exactly ``cls``"""
    return tag_in_parent_class('a', cls)


def anchor_in_grandparent_class_containing(fragment: str) -> Matcher:
    """<a> whose grandparent's class attribute contains ``fragment``"""
    def match(tag: Tag) -> bool:
        if tag.name != 'a':
            return False
        grandparent = grandparent_of(tag)
        return grandparent is not None and fragment in attr(grandparent, 'class')
    return match


def anchor_in_parent_tag(name: str) -> Matcher:
    """<a> directly inside a ``name`` element"""
    def match(tag: Tag) -> bool:
        if tag.name != 'a':
            return False
        parent = parent_of(tag)
        return parent is not None and parent.name == name
    return match


def tag_in_parent_class(name: str, cls: str) -> Matcher:
    """``name`` element whose parent's class attribute is exactly ``cls``"""
    def match(tag: Tag) -> bool:
        if tag.name != name:
            return False
        parent = parent_of(tag)
        return parent is not None and attr(parent, 'class') == cls
    return match


def tag_in_grandparent_class(name: str, cls: str) -> Matcher:
    """``name`` element whose grandparent's class attribute is exactly ``cls``"""
    def match(tag: Tag) -> bool:
        if tag.name != name:
            return False
        grandparent = grandparent_of(tag)
        return grandparent is not None and attr(grandparent, 'class') == cls
    return match


def pdf_anchor_in_parent_class(cls: str, exclude_gated: bool = False) -> Matcher:
    """
    <a> linking to a .pdf whose parent's class attribute is exactly ``cls``

    Args:
        cls: Marker class of the parent element
        exclude_gated: Also reject links to the JS-gated host
    """
    def match(tag: Tag) -> bool:
        if tag.name != 'a':
            return False
        parent = parent_of(tag)
        if parent is None or attr(parent, 'class') != cls:
            return False
        href = attr(tag, 'href')
        if not href.endswith('.pdf'):
            return False
        return not (exclude_gated and is_gated(href))
    return match


# Google Scholar marks the direct full-text link of a result with this class
SCHOLAR_PDF_CLASS = 'gs_or_ggsm'

ALL_VERSIONS_PATTERN = r'^All \d+ versions$'


def scholar_pdf_anchor(exclude_gated: bool = False) -> Matcher:
    return pdf_anchor_in_parent_class(SCHOLAR_PDF_CLASS, exclude_gated=exclude_gated)
