"""
Main entrypoint: resolve config, connect the qBittorrent client, serve the probes.

Exits with status 1 only when QBITTORRENT_PASSWORD is missing; every other
misconfiguration falls back to a default with a logged warning.

Env: QBITTORRENT_HOST, QBITTORRENT_USERNAME, QBITTORRENT_PASSWORD (required),
QBITTORRENT_TIMEOUT, PORT, ADDRESS, LOG_LEVEL, LOG_FORMAT.
"""

import sys

# Configure structured JSON logging before other imports that may log
from qbit_probe.probe_logging import get_logger, uvicorn_log_level

logger = get_logger("main")


def main() -> None:
    """Build the probe app and run it with uvicorn in the main thread."""
    from qbit_probe.config import resolve_config
    from qbit_probe.core.exceptions import MissingCredentialError

    try:
        config = resolve_config()
    except MissingCredentialError as e:
        logger.error("main_config_error", variable=e.variable, error=str(e))
        sys.exit(1)

    logger.info("main_config_loaded", **config.log_fields())

    from qbit_probe.api_server.server import create_app
    from qbit_probe.qbittorrent import QBittorrentClient
    import uvicorn

    app = create_app(QBittorrentClient.from_config(config))

    logger.info("main_server_starting", address=config.socket_address)
    uvicorn.run(
        app,
        host=str(config.address),
        port=config.port,
        log_level=uvicorn_log_level(),
    )


if __name__ == "__main__":
    main()
