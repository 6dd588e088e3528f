"""
Lambda entry point for the encoder function.

startup() wires dependencies once per process (Composition Root) and
shutdown() releases them; handler() serves one invocation.
"""

import atexit
import json
import sys
from typing import Any

import structlog

from .application.services import EncodeObjectService
from .config import Settings, settings
from .infrastructure.adapters import S3ObjectStorage, StorageClientConfig
from .infrastructure.logging import configure_logging, set_correlation_id

logger = structlog.get_logger()

_service: EncodeObjectService | None = None
_shutdown_registered = False


def startup(app_settings: Settings | None = None) -> EncodeObjectService:
    """Configure logging and build the encode service if not already built."""
    global _service, _shutdown_registered

    if _service is not None:
        return _service

    app_settings = app_settings or settings
    configure_logging(app_settings.service_name, app_settings.log_level)

    storage = S3ObjectStorage(StorageClientConfig.from_settings(app_settings))
    _service = EncodeObjectService(storage, chunk_size=app_settings.read_chunk_size)

    if not _shutdown_registered:
        atexit.register(shutdown)
        _shutdown_registered = True

    logger.info(
        "Encoder started",
        service=app_settings.service_name,
        region=app_settings.aws_region,
    )
    return _service


def shutdown() -> None:
    """Release the encode service."""
    global _service

    if _service is None:
        return
    _service = None
    logger.info("Encoder shutdown complete")


def handler(event: Any, context: Any) -> dict:
    """AWS Lambda handler for direct invocations."""
    service = startup()

    request_id = getattr(context, "aws_request_id", "") or ""
    set_correlation_id(request_id)

    response = service.execute(event)

    return response.to_invocation_result()


def main(argv: list[str] | None = None) -> int:
    """Invoke the handler locally with a payload from argv or stdin."""
    argv = sys.argv[1:] if argv is None else argv
    payload = argv[0] if argv else sys.stdin.read()

    try:
        result = handler(payload, None)
    finally:
        shutdown()

    print(json.dumps(result))
    return 0 if result["success"] else 1


if __name__ == "__main__":
    sys.exit(main())
