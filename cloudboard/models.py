"""Data models for telemetry samples, insights, topology, and sessions."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


# Insight categories, in the order the dashboard documents them.
CATEGORY_OPTIMIZATION = "optimization"
CATEGORY_SECURITY = "security"
CATEGORY_PERFORMANCE = "performance"
CATEGORY_COST = "cost"

CATEGORIES = (
    CATEGORY_OPTIMIZATION,
    CATEGORY_SECURITY,
    CATEGORY_PERFORMANCE,
    CATEGORY_COST,
)

# Severity classes, least to most severe.
SEVERITY_OK = "ok"
SEVERITY_IN_PROGRESS = "inProgress"
SEVERITY_CAUTION = "caution"
SEVERITY_CRITICAL = "critical"

SEVERITIES = (
    SEVERITY_OK,
    SEVERITY_IN_PROGRESS,
    SEVERITY_CAUTION,
    SEVERITY_CRITICAL,
)

UPTIME_FLOOR = 99.5
UPTIME_CEILING = 100.0
LATENCY_FLOOR_MS = 20.0

DEFAULT_TICK_INTERVAL_MS = 2000


@dataclass(frozen=True)
class MetricSample:
    uptime_percent: float
    request_count: int
    latency_ms: float
    monthly_cost_usd: float


SEED_SAMPLE = MetricSample(
    uptime_percent=99.94,
    request_count=2847392,
    latency_ms=45.0,
    monthly_cost_usd=12847.0,
)


@dataclass(frozen=True)
class Insight:
    category: str  # one of CATEGORIES
    message: str


@dataclass
class Component:
    name: str
    type: str  # "gateway", "api", "compute", ...
    status: str  # raw token, e.g. "healthy", "processing"
    connections: int = 0


@dataclass
class Deployment:
    env: str
    region: str
    status: str
    version: str
    instances: int = 0


@dataclass
class PipelineStage:
    name: str  # "Build", "Tests", "Deploy"
    detail: str
    status: str


@dataclass
class ArchitectureNode:
    name: str
    icon: str
    description: str


@dataclass
class ArchitectureTier:
    name: str  # "Presentation Layer", "Application Layer", "Data Layer"
    nodes: List[ArchitectureNode] = field(default_factory=list)


@dataclass
class DashboardConfig:
    tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS
    seed: Optional[int] = None
    components: List[Component] = field(default_factory=list)
    deployments: List[Deployment] = field(default_factory=list)
    pipeline: List[PipelineStage] = field(default_factory=list)


@dataclass(frozen=True)
class SessionSnapshot:
    metrics: MetricSample
    insights: Tuple[Insight, ...] = ()
    running: bool = False
    ticks: int = 0
