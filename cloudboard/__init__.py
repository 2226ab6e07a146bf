"""Simulated live telemetry for a cloud operations dashboard."""
