"""
NDSS (Network and Distributed System Security Symposium) recipes
"""

from ..core.matchers import anchor_in_parent_tag, anchor_with_text
from ..core.recipe import Recipe, Strategy, years

NAME = "NDSS"

RECIPES = [
    # Programme page with a "Paper" link per talk
    (years(2018), Recipe(
        strategy=Strategy.DIRECT,
        listing=anchor_with_text('Paper'),
    )),
    # Paper titles in <h3> link to detail pages with a "Paper" link
    (years(2014, 2015, 2017), Recipe(
        strategy=Strategy.PAPER_PAGES,
        listing=anchor_in_parent_tag('h3'),
        paper=anchor_with_text('Paper'),
    )),
    # Paper titles in <h3> link straight to the PDF
    (years(2016), Recipe(
        strategy=Strategy.DIRECT,
        listing=anchor_in_parent_tag('h3'),
    )),
]
