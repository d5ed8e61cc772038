"""Run the service with uvicorn: ``python -m device_inventory``."""

import uvicorn

from device_inventory.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "device_inventory.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
