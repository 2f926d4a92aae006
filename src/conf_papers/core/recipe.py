"""
Scraping recipes

A recipe says how to get from a conference listing page to PDF URLs. There
are only three shapes, so they are described by a Strategy value instead of
crawler subclasses.
"""

import enum
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from .matchers import Matcher


class Strategy(enum.Enum):
    # Listing page links straight to the PDFs
    DIRECT = 'direct'
    # Listing page links to one page per paper, which links to the PDF
    PAPER_PAGES = 'paper_pages'
    # Listing page only has titles; PDFs are looked up on Google Scholar
    SCHOLAR_SEARCH = 'scholar_search'


@dataclass(frozen=True)
class Recipe:
    strategy: Strategy
    listing: Matcher
    paper: Optional[Matcher] = None

    def __post_init__(self):
        if self.strategy is not Strategy.DIRECT and self.paper is None:
            raise ValueError(f"{self.strategy.value} recipe needs a paper matcher")


@dataclass(frozen=True)
class YearRule:
    """Year predicate with a readable description for `conf-papers list`"""
    description: str
    test: Callable[[int], bool]

    def __call__(self, year: int) -> bool:
        return self.test(year)


def any_year() -> YearRule:
    return YearRule('any', lambda year: True)


def years(*values: int) -> YearRule:
    allowed = frozenset(values)
    return YearRule(', '.join(str(v) for v in sorted(allowed)), lambda year: year in allowed)


def year_range(first: Optional[int] = None, last: Optional[int] = None) -> YearRule:
    """Inclusive range, open-ended on a side left as None"""
    if first is None and last is None:
        return any_year()
    if first is None:
        description = f'<= {last}'
    elif last is None:
        description = f'>= {first}'
    else:
        description = f'{first}-{last}'

    def test(year: int) -> bool:
        if first is not None and year < first:
            return False
        if last is not None and year > last:
            return False
        return True

    return YearRule(description, test)


RecipeTable = Sequence[Tuple[YearRule, Recipe]]


def select_recipe(table: RecipeTable, year: int) -> Optional[Recipe]:
    """First recipe whose year rule accepts ``year``"""
    for rule, recipe in table:
        if rule(year):
            return recipe
    return None


def describe(table: RecipeTable) -> List[Tuple[str, str]]:
    return [(rule.description, recipe.strategy.value) for rule, recipe in table]
