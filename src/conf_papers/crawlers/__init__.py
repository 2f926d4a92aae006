"""
Conference recipe tables, keyed by the name used in the conference list
"""

from typing import Dict, Optional

from . import ccs, ndss, oakland, usenix
from ..core.recipe import Recipe, RecipeTable, select_recipe

RECIPES: Dict[str, RecipeTable] = {
    usenix.NAME: usenix.RECIPES,
    ndss.NAME: ndss.RECIPES,
    oakland.NAME: oakland.RECIPES,
    ccs.NAME: ccs.RECIPES,
}


def find_recipe(name: str, year: int) -> Optional[Recipe]:
    """
    Look up the recipe for a conference edition

    Args:
        name: Conference name, case-sensitive
        year: Conference year

    Returns:
        Recipe, or None if the name is unknown or no year rule matches
    """
    table = RECIPES.get(name)
    if table is None:
        return None
    return select_recipe(table, year)


__all__ = ['RECIPES', 'find_recipe']
