from __future__ import annotations

import logging

import uvicorn

from toggle_demo.app import configure_logging, create_app
from toggle_demo.config import load_app_config

logger = logging.getLogger("toggle_demo")


def main() -> None:
    config = load_app_config()
    configure_logging(config)

    host = config.network.bind_host
    port = config.network.port

    logger.info("App listening on %s", port)
    uvicorn.run(create_app(config), host=host, port=port)


if __name__ == "__main__":
    main()
