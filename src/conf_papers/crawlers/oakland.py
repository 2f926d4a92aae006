"""
IEEE Symposium on Security and Privacy ("Oakland") recipes

The program pages only list titles, so PDFs are found through Google Scholar.
"""

from ..core.matchers import scholar_pdf_anchor, tag_in_grandparent_class, tag_in_parent_class
from ..core.recipe import Recipe, Strategy, year_range

NAME = "Oakland"

RECIPES = [
    (year_range(2015, 2018), Recipe(
        strategy=Strategy.SCHOLAR_SEARCH,
        listing=tag_in_parent_class('b', 'list-group-item'),
        paper=scholar_pdf_anchor(),
    )),
    (year_range(last=2014), Recipe(
        strategy=Strategy.SCHOLAR_SEARCH,
        listing=tag_in_grandparent_class('a', 'list-group-item'),
        paper=scholar_pdf_anchor(),
    )),
]
