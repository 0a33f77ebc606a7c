"""
API server package — HTTP probe endpoints.

Exposes /healthz and /readyz for the orchestrator; delegates every verdict
to qbit_probe.health.
"""
