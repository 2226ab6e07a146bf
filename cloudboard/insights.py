"""Advisory insight rules and their presentation styles."""

from typing import Dict, List, Tuple

from cloudboard.models import (
    CATEGORY_COST,
    CATEGORY_OPTIMIZATION,
    CATEGORY_PERFORMANCE,
    CATEGORY_SECURITY,
    Insight,
)

_RULES: Tuple[Tuple[str, str], ...] = (
    (
        CATEGORY_OPTIMIZATION,
        "Recommended: Scale down Dev environment during off-hours "
        "(Est. savings: $1,200/month)",
    ),
    (
        CATEGORY_SECURITY,
        "Alert: Unusual API access pattern detected from new geographic region",
    ),
    (
        CATEGORY_PERFORMANCE,
        "Performance boost: Consider implementing CDN for static assets "
        "(38% faster load times)",
    ),
    (
        CATEGORY_COST,
        "Cost optimization: Reserved instances could reduce compute costs by 23%",
    ),
)

# category -> (icon, color)
CATEGORY_STYLES: Dict[str, Tuple[str, str]] = {
    CATEGORY_OPTIMIZATION: ("settings", "blue"),
    CATEGORY_SECURITY: ("shield", "red"),
    CATEGORY_PERFORMANCE: ("zap", "green"),
    CATEGORY_COST: ("bar-chart", "orange"),
}
FALLBACK_CATEGORY_STYLE: Tuple[str, str] = ("info", "gray")


def generate() -> List[Insight]:
    """Return the advisory insights in display order."""
    return [Insight(category=category, message=message) for category, message in _RULES]


def category_style(category: str) -> Tuple[str, str]:
    """Return the ``(icon, color)`` pair for an insight category.

    Categories without a mapping get a neutral fallback instead of an error.
    """
    return CATEGORY_STYLES.get(category, FALLBACK_CATEGORY_STYLE)


def category_title(category: str) -> str:
    return f"{str(category).capitalize()} Recommendation"
