"""
Recipe table, channel registry and template expansion.

Describes which built artifacts are published and where, and turns the
templates into concrete paths and keys for one channel and version.
"""

from .channels import (
    CHANNELS,
    PRERELEASE_CHANNEL,
    is_valid_channel,
    validate_channel,
)
from .recipes import (
    BASE_RECIPES,
    LEGACY_PRERELEASE_RECIPES,
    Recipe,
    ResolvedRecipe,
    build_recipe_table,
    expand_recipes,
    resolve_recipes,
    substitute,
)

__all__ = [
    "CHANNELS",
    "PRERELEASE_CHANNEL",
    "is_valid_channel",
    "validate_channel",
    "BASE_RECIPES",
    "LEGACY_PRERELEASE_RECIPES",
    "Recipe",
    "ResolvedRecipe",
    "build_recipe_table",
    "expand_recipes",
    "resolve_recipes",
    "substitute",
]
