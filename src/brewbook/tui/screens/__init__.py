from .detail import RecipeDetailScreen
from .recipes import RecipeListScreen

__all__ = [
    "RecipeDetailScreen",
    "RecipeListScreen",
]
