"""
USENIX Security Symposium recipes

The technical sessions page links every paper to its presentation page,
which has the PDF in a ``<span class="file">``.
"""

from ..core.matchers import anchor_in_grandparent_class_containing, anchor_in_parent_class
from ..core.recipe import Recipe, Strategy, any_year

NAME = "USENIX"

RECIPES = [
    (any_year(), Recipe(
        strategy=Strategy.PAPER_PAGES,
        listing=anchor_in_grandparent_class_containing('node-paper'),
        paper=anchor_in_parent_class('file'),
    )),
]
