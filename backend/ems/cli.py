"""Command-line entry point: run the API server or the terminal frontend."""

from __future__ import annotations

import click

from ems import __version__
from ems.config import get_settings
from ems.infrastructure.observability import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="ems")
def cli() -> None:
    """Employee Management System."""


@cli.command()
@click.option("--host", default=None, help="Bind address (default from settings).")
@click.option("--port", type=int, default=None, help="Bind port (default from settings).")
@click.option("--reload", is_flag=True, help="Reload on code changes (development).")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Run the REST API under uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "ems.main:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_config=None,
    )


@cli.command()
@click.option("--api-url", default=None, help="Base URL of the EMS API (default from settings).")
def ui(api_url: str | None) -> None:
    """Start the interactive terminal frontend."""
    from ems.client.employee_service import EmployeeServiceClient
    from ems.ui.console import ConsoleApp

    settings = get_settings()
    # INFO-level request logs would interleave with the screen
    setup_logging("WARNING", "text")
    with EmployeeServiceClient(
        api_url or settings.api_base_url,
        timeout=settings.client_timeout_seconds,
    ) as client:
        ConsoleApp(client).run()


if __name__ == "__main__":
    cli()
