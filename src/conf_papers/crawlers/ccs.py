"""
ACM CCS (Conference on Computer and Communications Security) recipes
"""

from ..core.matchers import anchor_with_text
from ..core.recipe import Recipe, Strategy, years

NAME = "CCS"

RECIPES = [
    # Accepted papers page with open access "[PDF]" links
    (years(2017), Recipe(
        strategy=Strategy.DIRECT,
        listing=anchor_with_text('[PDF]'),
    )),
]
