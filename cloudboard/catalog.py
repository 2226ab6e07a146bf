"""Built-in topology, deployments, architecture, and CI/CD stages shown by the dashboard."""

from typing import List, Tuple

from cloudboard.models import (
    DEFAULT_TICK_INTERVAL_MS,
    ArchitectureNode,
    ArchitectureTier,
    Component,
    DashboardConfig,
    Deployment,
    PipelineStage,
)

# The first CORE_SERVICE_COUNT components are grouped as core services,
# the remainder as data & analytics.
CORE_SERVICE_COUNT = 4

# (label, value) pairs every environment is provisioned with.
DEPLOYMENT_PROPERTIES: Tuple[Tuple[str, str], ...] = (
    ("Compute", "Auto-scaling enabled"),
    ("Storage", "Encrypted at rest"),
    ("Network", "VPC with security groups"),
)

# Request path through the platform, outermost first.
DATA_FLOW: Tuple[str, ...] = ("Users", "WAF", "API Gateway", "Services", "Data")


def default_components() -> List[Component]:
    return [
        Component("Load Balancer", "gateway", "healthy", 24),
        Component("API Gateway", "api", "healthy", 18),
        Component("Microservices Cluster", "compute", "healthy", 12),
        Component("AI/ML Pipeline", "ai", "processing", 8),
        Component("Primary Database", "database", "healthy", 16),
        Component("Cache Layer", "cache", "healthy", 22),
        Component("Message Queue", "queue", "healthy", 14),
        Component("Analytics Engine", "analytics", "healthy", 6),
    ]


def default_deployments() -> List[Deployment]:
    return [
        Deployment("Production", "us-east-1", "active", "v2.4.1", 12),
        Deployment("Staging", "us-west-2", "active", "v2.5.0-rc1", 4),
        Deployment("Development", "eu-west-1", "active", "v2.5.0-dev", 2),
    ]


def default_pipeline() -> List[PipelineStage]:
    return [
        PipelineStage("Build", "Passing", "healthy"),
        PipelineStage("Tests", "98% coverage", "healthy"),
        PipelineStage("Deploy", "In progress", "processing"),
    ]


def default_architecture() -> List[ArchitectureTier]:
    return [
        ArchitectureTier("Presentation Layer", [
            ArchitectureNode("Load Balancer", "shield", "AWS ALB with SSL termination"),
            ArchitectureNode("CDN", "server", "Global content delivery"),
        ]),
        ArchitectureTier("Application Layer", [
            ArchitectureNode("Microservices", "cloud", "Containerized with Docker"),
            ArchitectureNode("AI/ML Services", "brain", "RAG agents & neural networks"),
        ]),
        ArchitectureTier("Data Layer", [
            ArchitectureNode("Oracle Database", "database", "Master-slave clustering"),
            ArchitectureNode("Redis Cache", "zap", "High-performance caching"),
        ]),
    ]


def default_config() -> DashboardConfig:
    """Return a fresh configuration populated with the built-in catalog."""
    return DashboardConfig(
        tick_interval_ms=DEFAULT_TICK_INTERVAL_MS,
        seed=None,
        components=default_components(),
        deployments=default_deployments(),
        pipeline=default_pipeline(),
    )
