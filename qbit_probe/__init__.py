"""
qbit_probe — liveness and readiness sidecar for a qBittorrent daemon.

Serves GET /healthz and GET /readyz for an orchestrator (e.g. Kubernetes).
Each request queries the daemon's Web API once and maps the answer to
204 No Content or 503 Service Unavailable.
"""

__version__ = "0.1.0"
