"""Run the Yatzy API with uvicorn: ``python server.py``."""

from __future__ import annotations

import logging

import uvicorn

from app.main import app

settings = app.state.settings
logging.basicConfig(level=settings.log_level)


def main() -> None:
    logging.info("[server] Yatzy API listening on http://%s:%d%s", settings.host, settings.port, settings.api_prefix)
    for route in app.routes:
        if hasattr(route, "path") and hasattr(route, "methods"):
            logging.info("App route: %s %s", sorted(route.methods or []), route.path)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
