"""
FastAPI server: liveness and readiness endpoints.

GET /healthz and GET /readyz answer 204 (no body) when the verdict is
positive and 503 (no body) otherwise. The DownloadClient is built once by the
caller and injected through app.state; handlers never mutate it.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, Response

from qbit_probe import __version__
from qbit_probe.health import evaluate_liveness, evaluate_readiness
from qbit_probe.probe_logging import get_logger
from qbit_probe.qbittorrent.base import DownloadClient

logger = get_logger(__name__)


# -----------------------------------------------------------------------------
# Dependency
# -----------------------------------------------------------------------------

def get_download_client(request: Request) -> DownloadClient:
    """Dependency: the shared client created at startup."""
    return request.app.state.download_client


# -----------------------------------------------------------------------------
# Lifespan: close the shared client on shutdown
# -----------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    client = app.state.download_client
    aclose = getattr(client, "aclose", None)
    if aclose is not None:
        await aclose()
        logger.info("api_download_client_closed")


# -----------------------------------------------------------------------------
# App and routes
# -----------------------------------------------------------------------------

def create_app(client: DownloadClient) -> FastAPI:
    """Build the probe app around an already-constructed DownloadClient."""
    app = FastAPI(
        title="qBittorrent probe",
        description="Liveness and readiness probes for a qBittorrent daemon.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.download_client = client

    @app.get("/healthz", status_code=204, response_class=Response)
    async def healthz(download_client: DownloadClient = Depends(get_download_client)) -> Response:
        """Liveness probe: 204 when torrents are idle or progressing, 503 otherwise."""
        verdict = await evaluate_liveness(download_client)
        return Response(status_code=verdict.status_code)

    @app.get("/readyz", status_code=204, response_class=Response)
    async def readyz(download_client: DownloadClient = Depends(get_download_client)) -> Response:
        """Readiness probe: 204 when qBittorrent is connected or firewalled, 503 otherwise."""
        verdict = await evaluate_readiness(download_client)
        return Response(status_code=verdict.status_code)

    return app
