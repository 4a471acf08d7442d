"""webdocs command line interface."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import typer

from webdocs.config import ViewerConfig, configure_logging

app = typer.Typer(
    name="webdocs",
    help="Catln WebDocs: browse compiler introspection data.",
    no_args_is_help=True,
)


def _version() -> str:
    try:
        return version("catln-webdocs")
    except PackageNotFoundError:
        return "unknown"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"webdocs version {_version()}")
        raise typer.Exit()


@app.callback()
def main(
    version_flag: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Catln WebDocs."""


@app.command()
def view(
    api_url: str = typer.Option(None, "--api-url", help="Backend base URL (default: $WEBDOCS_API_URL)."),
    host: str = typer.Option("127.0.0.1", help="Address the viewer binds to."),
    port: int = typer.Option(8501, help="Port the viewer listens on."),
    no_browser: bool = typer.Option(False, "--no-browser", help="Do not open a browser window."),
) -> None:
    """Start the viewer."""
    from webdocs.launch import launch_web

    config = ViewerConfig.from_env()
    if api_url:
        config = ViewerConfig(api_url=api_url.rstrip("/"), timeout=config.timeout, log_level=config.log_level)
    code = launch_web(config=config, host=host, port=port, open_browser=not no_browser)
    raise typer.Exit(code=int(code))


@app.command()
def serve(
    root: Path = typer.Argument(..., exists=True, file_okay=False, help="Directory of recorded artifacts."),
    host: str = typer.Option("127.0.0.1", help="Address the backend binds to."),
    port: int = typer.Option(8080, help="Port the backend listens on."),
) -> None:
    """Serve recorded artifacts with the compiler's /api surface."""
    import uvicorn

    from webdocs.backend.main import create_app

    configure_logging(ViewerConfig.from_env().log_level)
    uvicorn.run(create_app(root), host=host, port=port)


if __name__ == "__main__":
    app()
