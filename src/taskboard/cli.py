"""Command-line entry point: serve the API with uvicorn."""

import argparse

import uvicorn

from src.taskboard.core.config import get_settings


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="taskboard", description="Run the Taskboard API server")
    parser.add_argument("--host", default=settings.host, help="Bind address")
    parser.add_argument("--port", type=int, default=settings.port, help="Bind port")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the API server."""
    args = parse_args(argv)

    uvicorn.run(
        "src.taskboard.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_config=None,  # structlog owns logging
    )


if __name__ == "__main__":
    main()
