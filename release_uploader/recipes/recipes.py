"""
Recipe table and template expansion.

A recipe maps one locally built artifact (relative to the source tree) to
the S3 key prefix it is published under. Both sides are templates holding
the placeholders VERSION and CHANNEL, which are substituted once per run.

Example usage:
    >>> from release_uploader.recipes import build_recipe_table, expand_recipes
    >>> table = build_recipe_table("release")
    >>> expanded = expand_recipes(table, channel="release", version="1.2.3")
    >>> expanded[4].remote_key_template
    'multi-channel/releases/release/1.2.3/osx'
"""

from pathlib import Path
from typing import Iterable, List, Tuple, Union
from dataclasses import dataclass

from release_uploader.recipes.channels import PRERELEASE_CHANNEL
from release_uploader.utils.logging import get_logger, log_function_call

logger = get_logger(__name__)

VERSION_TOKEN = "VERSION"
CHANNEL_TOKEN = "CHANNEL"


@dataclass(frozen=True)
class Recipe:
    """
    Mapping from a local artifact to a remote key prefix.

    Attributes:
        local_path_template: Artifact path relative to the source directory
        remote_key_template: Key prefix in the bucket (file name is appended)
    """

    local_path_template: str
    remote_key_template: str


@dataclass(frozen=True)
class ResolvedRecipe:
    """
    Recipe after substitution, anchored to the source directory.

    Attributes:
        local_path: Absolute path of the artifact
        remote_key_prefix: Key prefix the artifact is uploaded under
    """

    local_path: Path
    remote_key_prefix: str


def _recipes(*pairs: Tuple[str, str]) -> Tuple[Recipe, ...]:
    return tuple(Recipe(local, remote) for local, remote in pairs)


BASE_RECIPES: Tuple[Recipe, ...] = _recipes(
    ("dist/Brave.tar.bz2", "multi-channel/releases/CHANNEL/VERSION/linux64"),
    ("dist/brave_VERSION_amd64.deb", "multi-channel/releases/CHANNEL/VERSION/debian64"),
    ("dist/brave-VERSION.x86_64.rpm", "multi-channel/releases/CHANNEL/VERSION/fedora64"),
    ("dist/Brave-VERSION.zip", "multi-channel/releases/CHANNEL/VERSION/osx"),
    ("dist/Brave.dmg", "multi-channel/releases/CHANNEL/VERSION/osx"),

    ("dist/x64/BraveSetup-x64.exe", "multi-channel/releases/CHANNEL/VERSION/winx64"),
    ("dist/x64/BraveSetup-x64.msi", "multi-channel/releases/CHANNEL/VERSION/winx64"),
    ("dist/x64/BraveSetup-x64.exe", "multi-channel/releases/CHANNEL/winx64"),
    ("dist/x64/RELEASES", "multi-channel/releases/CHANNEL/winx64"),
    ("dist/x64/brave-VERSION-full.nupkg", "multi-channel/releases/CHANNEL/winx64"),

    ("dist/ia32/BraveSetup-ia32.exe", "multi-channel/releases/CHANNEL/VERSION/winia32"),
    ("dist/ia32/BraveSetup-ia32.msi", "multi-channel/releases/CHANNEL/VERSION/winia32"),
    ("dist/ia32/BraveSetup-ia32.exe", "multi-channel/releases/CHANNEL/winia32"),
    ("dist/ia32/RELEASES", "multi-channel/releases/CHANNEL/winia32"),
    ("dist/ia32/brave-VERSION-full.nupkg", "multi-channel/releases/CHANNEL/winia32"),
)

# Pre-release builds also go to the legacy location that older dev installs
# still poll for updates.
LEGACY_PRERELEASE_RECIPES: Tuple[Recipe, ...] = _recipes(
    ("dist/x64/BraveSetup-x64.exe", "releases/winx64"),
    ("dist/x64/RELEASES", "releases/winx64"),
    ("dist/x64/brave-VERSION-full.nupkg", "releases/winx64"),
)


def build_recipe_table(channel: str) -> List[Recipe]:
    """
    Return the recipe table for a channel.

    The pre-release channel gets LEGACY_PRERELEASE_RECIPES appended after
    the base table; every other channel gets the base table alone.

    Args:
        channel: Release channel (assumed already validated)

    Returns:
        New list of recipes in upload order
    """
    recipes = list(BASE_RECIPES)
    if channel == PRERELEASE_CHANNEL:
        recipes.extend(LEGACY_PRERELEASE_RECIPES)
    return recipes


def substitute(template: str, channel: str, version: str) -> str:
    """Replace every VERSION and CHANNEL token in template."""
    return template.replace(VERSION_TOKEN, version).replace(CHANNEL_TOKEN, channel)


@log_function_call
def expand_recipes(recipes: Iterable[Recipe], channel: str, version: str) -> List[Recipe]:
    """
    Substitute channel and version into both templates of every recipe.

    Order and length are preserved. Tokens are plain substrings, so token
    text that appears inside a literal path segment is substituted too.

    Args:
        recipes: Recipe table, typically from build_recipe_table()
        channel: Release channel name
        version: Version string from the manifest

    Returns:
        List of recipes with no placeholders left
    """
    expanded = [
        Recipe(
            local_path_template=substitute(recipe.local_path_template, channel, version),
            remote_key_template=substitute(recipe.remote_key_template, channel, version),
        )
        for recipe in recipes
    ]
    logger.debug(f"Expanded {len(expanded)} recipes for {channel} {version}")
    return expanded


def resolve_recipes(recipes: Iterable[Recipe], source_dir: Union[str, Path]) -> List[ResolvedRecipe]:
    """
    Anchor expanded recipes to the source directory.

    Args:
        recipes: Expanded recipes from expand_recipes()
        source_dir: Root of the built source tree

    Returns:
        ResolvedRecipe list in the same order
    """
    root = Path(source_dir).resolve()
    return [
        ResolvedRecipe(
            local_path=root / recipe.local_path_template,
            remote_key_prefix=recipe.remote_key_template,
        )
        for recipe in recipes
    ]
