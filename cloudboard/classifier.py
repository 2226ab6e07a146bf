"""Map raw component and deployment status tokens to severity classes."""

from typing import Dict, Iterable, Tuple

from cloudboard.models import (
    SEVERITIES,
    SEVERITY_CAUTION,
    SEVERITY_CRITICAL,
    SEVERITY_IN_PROGRESS,
    SEVERITY_OK,
)

_TOKEN_SEVERITY: Dict[str, str] = {
    "healthy": SEVERITY_OK,
    "active": SEVERITY_OK,
    "processing": SEVERITY_IN_PROGRESS,
    "warning": SEVERITY_CAUTION,
}

# severity -> (icon, color)
SEVERITY_STYLES: Dict[str, Tuple[str, str]] = {
    SEVERITY_OK: ("check-circle", "green"),
    SEVERITY_IN_PROGRESS: ("activity", "blue"),
    SEVERITY_CAUTION: ("alert-triangle", "yellow"),
    SEVERITY_CRITICAL: ("alert-triangle", "red"),
}


def classify(token) -> str:
    """Classify a status token.

    Any token outside the known set, including the empty string and
    non-string values, is treated as critical.
    """
    if not isinstance(token, str):
        return SEVERITY_CRITICAL
    return _TOKEN_SEVERITY.get(token, SEVERITY_CRITICAL)


def worst_severity(tokens: Iterable) -> str:
    """Return the most severe class among the given tokens (ok if none)."""
    worst = SEVERITY_OK
    for token in tokens:
        severity = classify(token)
        if SEVERITIES.index(severity) > SEVERITIES.index(worst):
            worst = severity
            if worst == SEVERITY_CRITICAL:
                break
    return worst


def severity_style(severity: str) -> Tuple[str, str]:
    return SEVERITY_STYLES.get(severity, SEVERITY_STYLES[SEVERITY_CRITICAL])
