"""Unified entry point for both services.

This script launches the investment planner service and the portfolio
service concurrently in a single process.  It is intended to be
executed from the project root, for example under Docker, where you
only specify a single Python file to run.

Hosts and ports are read from ``PLANNER_HOST``/``PLANNER_PORT`` and
``PORTFOLIO_HOST``/``PORTFOLIO_PORT`` (see ``core/config.py``).

Usage:
    python run.py
"""
import asyncio
import logging

from fastapi import FastAPI
from uvicorn import Config, Server

from portfolio_api.app.core.config import settings
from portfolio_api.app.main import app as planner_app, portfolio_app


async def serve(app: FastAPI, host: str, port: int) -> None:
    """Serve ``app`` with Uvicorn until it is stopped."""
    # Logging is configured by setup_logging; uvicorn only propagates.
    config = Config(app=app, host=host, port=port, reload=False, log_config=None, log_level=settings.log_level.lower())
    server = Server(config)
    logging.info("Serving %s on http://%s:%s", app.title, host, port)
    await server.serve()


async def main() -> None:
    """Run both services; if one fails, stop the other."""
    tasks = [
        asyncio.create_task(serve(planner_app, settings.planner_host, settings.planner_port)),
        asyncio.create_task(serve(portfolio_app, settings.portfolio_host, settings.portfolio_port)),
    ]
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    for task in done:
        if exception := task.exception():
            logging.exception("Exception in service", exc_info=exception)
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
