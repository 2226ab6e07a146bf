"""Format session snapshots and catalog data as dashboard text sections."""

import math
from typing import Dict, List, Optional, Tuple

from cloudboard.catalog import (
    CORE_SERVICE_COUNT,
    DATA_FLOW,
    DEPLOYMENT_PROPERTIES,
    default_architecture,
)
from cloudboard.classifier import classify, severity_style, worst_severity
from cloudboard.insights import category_style, category_title
from cloudboard.models import (
    ArchitectureTier,
    Component,
    DashboardConfig,
    Insight,
    MetricSample,
    SessionSnapshot,
)

_COMPONENT_ICONS: Dict[str, str] = {
    "gateway": "shield",
    "api": "server",
    "compute": "cloud",
    "ai": "brain",
    "database": "database",
    "cache": "zap",
    "queue": "settings",
    "analytics": "bar-chart",
}
_DEFAULT_COMPONENT_ICON = "server"


def format_uptime(value: float) -> str:
    return f"{value:.2f}%"


def format_requests(value: int) -> str:
    return f"{value:,}"


def format_latency(value: float) -> str:
    return f"{_round_half_up(value)}ms"


def format_cost(value: float) -> str:
    return f"${_round_half_up(value):,}"


def metric_cards(sample: MetricSample) -> List[Tuple[str, str, str]]:
    """Return ``(title, value, caption)`` for each metric card, in display order."""
    return [
        ("System Uptime", format_uptime(sample.uptime_percent), "Last 30 days"),
        ("API Requests", format_requests(sample.request_count), "Today"),
        ("Avg Latency", format_latency(sample.latency_ms), "Global average"),
        ("Monthly Cost", format_cost(sample.monthly_cost_usd), "Current month"),
    ]


def component_icon(component_type: str) -> str:
    return _COMPONENT_ICONS.get(component_type, _DEFAULT_COMPONENT_ICON)


def render_overview(snapshot: SessionSnapshot, config: DashboardConfig) -> List[str]:
    """Metric cards followed by component health, split into two groups."""
    lines = []
    for title, value, caption in metric_cards(snapshot.metrics):
        lines.append(f"{title}: {value} ({caption})")

    overall = worst_severity(c.status for c in config.components)
    lines.append(f"Overall health: {overall}")

    groups = [
        ("Core Services", config.components[:CORE_SERVICE_COUNT]),
        ("Data & Analytics", config.components[CORE_SERVICE_COUNT:]),
    ]
    for heading, components in groups:
        if not components:
            continue
        lines.append(f"{heading}:")
        for component in components:
            lines.append("  " + _component_line(component))
    return lines


def render_deployments(config: DashboardConfig) -> List[str]:
    lines = ["Deployments:"]
    for d in config.deployments:
        lines.append(
            f"  [{classify(d.status)}] {d.env} ({d.region}) "
            f"version {d.version}, {d.instances} instances"
        )
        for label, value in DEPLOYMENT_PROPERTIES:
            lines.append(f"    {label}: {value}")
    if config.pipeline:
        lines.append("CI/CD Pipeline:")
        for stage in config.pipeline:
            lines.append(f"  [{classify(stage.status)}] {stage.name}: {stage.detail}")
    return lines


def render_architecture(tiers: Optional[List[ArchitectureTier]] = None) -> List[str]:
    """Layered architecture view followed by the request data flow."""
    if tiers is None:
        tiers = default_architecture()
    lines = ["Architecture:"]
    for tier in tiers:
        lines.append(f"  {tier.name}:")
        for node in tier.nodes:
            lines.append(f"    <{node.icon}> {node.name}: {node.description}")
    lines.append("Data Flow: " + " -> ".join(DATA_FLOW))
    return lines


def render_insights(insights: List[Insight]) -> List[str]:
    lines = ["Insights:"]
    for insight in insights:
        icon, _ = category_style(insight.category)
        lines.append(f"  <{icon}> {category_title(insight.category)}")
        lines.append(f"    {insight.message}")
    return lines


def severity_color(status: str) -> str:
    """Presentation color for a raw status token."""
    return severity_style(classify(status))[1]


# -- internal helpers ---------------------------------------------------------


def _component_line(component: Component) -> str:
    severity = classify(component.status)
    icon = component_icon(component.type)
    return (
        f"[{severity}] <{icon}> {component.name} "
        f"({component.connections} conn)"
    )


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
