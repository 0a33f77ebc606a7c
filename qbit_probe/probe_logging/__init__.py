"""
Structured logging for qbit_probe.

JSON logs with timestamp, level, event_type and the probe fields.
Use get_logger() in every module so output stays aggregation-friendly.
"""

from qbit_probe.probe_logging.logger import get_logger, uvicorn_log_level

__all__ = ["get_logger", "uvicorn_log_level"]
