from __future__ import annotations

import argparse

import uvicorn

from .api import create_api_app
from .config import LOG_FORMATS, Settings
from .observability import setup_logging


def main(argv: list[str] | None = None) -> None:
    settings = Settings.from_env()

    p = argparse.ArgumentParser(prog="measurestore", description="measurestore: in-memory measurement registry")
    p.add_argument("--host", default=settings.host)
    p.add_argument("--port", type=int, default=settings.port)
    p.add_argument("--log-level", default=settings.log_level)
    p.add_argument("--log-format", choices=LOG_FORMATS, default=settings.log_format)
    p.add_argument(
        "--cors-origin",
        action="append",
        dest="cors_origins",
        default=None,
        help="Allowed CORS origin (repeatable). Defaults to MEASURESTORE_CORS_ORIGINS.",
    )
    args = p.parse_args(argv)

    cors_origins = args.cors_origins if args.cors_origins is not None else list(settings.cors_origins)

    setup_logging(args.log_level, args.log_format)
    app = create_api_app(cors_origins=cors_origins)
    uvicorn.run(app, host=args.host, port=args.port, log_level=str(args.log_level).lower(), access_log=False)


if __name__ == "__main__":
    main()
