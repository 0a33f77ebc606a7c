"""
Health checks and liveness/readiness probes.

Maps the qBittorrent daemon's state to a binary verdict per probe, for
Kubernetes or any orchestrator polling /healthz and /readyz.
"""

from qbit_probe.health.probes import (
    LivenessVerdict,
    ReadinessVerdict,
    evaluate_liveness,
    evaluate_readiness,
)

__all__ = [
    "LivenessVerdict",
    "ReadinessVerdict",
    "evaluate_liveness",
    "evaluate_readiness",
]
