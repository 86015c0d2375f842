"""CLI entry point for the project service."""

import argparse
import os


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="projectsvc-server",
        description="Project lifecycle service",
    )
    parser.add_argument("--host", default=None, help="Bind host (default: settings.host)")
    parser.add_argument("--port", type=int, default=None, help="Bind port (default: settings.port)")
    parser.add_argument(
        "--local",
        action="store_true",
        help="Local dev mode: SQLite database, console logs",
    )
    args = parser.parse_args(argv)

    if args.local:
        os.environ["PROJECTSVC_LOCAL_MODE"] = "1"

    # Settings are read at import, after --local has been applied
    import uvicorn

    from projectsvc.config import Settings

    settings = Settings()
    uvicorn.run(
        "projectsvc.main:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
