"""Bounded random-walk simulator for the dashboard metrics."""

from cloudboard.models import (
    LATENCY_FLOOR_MS,
    UPTIME_CEILING,
    UPTIME_FLOOR,
    MetricSample,
)

UPTIME_STEP = 0.005
LATENCY_STEP_MS = 2.5
MAX_REQUEST_INCREMENT = 99
MAX_COST_INCREMENT_USD = 10.0


def tick(previous: MetricSample, rng) -> MetricSample:
    """Advance a metric sample by one random-walk step.

    Uptime and latency wander around their previous value and are held at
    their floors; the request counter and the monthly cost only grow.

    Args:
        previous: The current sample. It is not modified.
        rng: Source of randomness exposing ``uniform(a, b)`` and
            ``randint(a, b)``, such as ``random.Random``.

    Returns:
        A new MetricSample.
    """
    uptime = previous.uptime_percent + rng.uniform(-UPTIME_STEP, UPTIME_STEP)
    latency = previous.latency_ms + rng.uniform(-LATENCY_STEP_MS, LATENCY_STEP_MS)

    return MetricSample(
        uptime_percent=_clamp(uptime, UPTIME_FLOOR, UPTIME_CEILING),
        request_count=previous.request_count + rng.randint(0, MAX_REQUEST_INCREMENT),
        latency_ms=max(LATENCY_FLOOR_MS, latency),
        monthly_cost_usd=previous.monthly_cost_usd
        + rng.uniform(0.0, MAX_COST_INCREMENT_USD),
    )


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))
