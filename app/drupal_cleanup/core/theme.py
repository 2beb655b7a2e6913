"""Console color theme.

Colors come from the bundled ``data/theme.toml``; a partial
``theme.toml`` in the user config directory overrides individual entries.
"""

import logging
import tomllib
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, ValidationError
from rich.theme import Theme

from drupal_cleanup.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)


def _check_hex(value: str) -> str:
    color = value.strip()
    if not color.startswith("#"):
        msg = "color must start with '#'"
        raise ValueError(msg)
    digits = color[1:]
    if len(digits) not in (3, 6):
        msg = "color must be #RGB or #RRGGBB format"
        raise ValueError(msg)
    if any(c not in "0123456789abcdefABCDEF" for c in digits):
        msg = f"invalid hex color '{color}'"
        raise ValueError(msg)
    return color


HexColor = Annotated[str, AfterValidator(_check_hex)]


class ThemeColors(BaseModel):
    """Palette used by the console.

    Attributes:
        removed: Paths that were (or would be) deleted.
        kept: Patterns dropped by the exclude list.
        package: Package names in headings.
        package_type: Composer package types.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    text: HexColor = "#ffffff"
    muted: HexColor = "#b2bec3"
    header: HexColor = "#69B9A1"
    border: HexColor = "#29526d"
    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"
    info: HexColor = "#0ec1c8"
    removed: HexColor = "#f53263"
    kept: HexColor = "#c1ff62"
    package: HexColor = "#69B9A1"
    package_type: HexColor = "#faf870"

    def styles(self) -> dict[str, str]:
        """Rich style definitions keyed by markup tag."""
        styles = self.model_dump()
        styles["error"] = f"bold {self.error}"
        styles["package"] = f"bold {self.package}"
        styles["bold_header"] = f"bold {self.header}"
        styles["dim"] = self.muted
        return styles


def get_bundled_theme_path() -> Path:
    """Path of the theme shipped inside the package."""
    return Path(str(resources.files("drupal_cleanup.data").joinpath("theme.toml")))


def _load_toml_colors(path: Path) -> dict[str, str] | None:
    """Read the ``[colors]`` table of a theme file.

    Non-string entries are ignored.

    Args:
        path: Theme file.

    Returns:
        Color name to value mapping, or None if the file is missing or unreadable.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return None

    table = data.get("colors", {})
    if not isinstance(table, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", path)
        return None
    return {name: value for name, value in table.items() if isinstance(value, str)}


def load_theme() -> ThemeColors:
    """Merge the bundled palette with the user's overrides.

    An invalid merged palette falls back to the built-in defaults.
    """
    colors = _load_toml_colors(get_bundled_theme_path()) or {}

    user_path = get_user_theme_path()
    overrides = _load_toml_colors(user_path)
    if overrides:
        logger.debug("Applying theme overrides from %s", user_path)
        colors.update(overrides)

    try:
        return ThemeColors.model_validate(colors)
    except ValidationError as e:
        logger.warning("Invalid theme, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build a Rich theme from a palette (loaded from disk if not given)."""
    return Theme((colors or load_theme()).styles())


@lru_cache(maxsize=1)
def get_theme() -> Theme:
    return get_rich_theme()
