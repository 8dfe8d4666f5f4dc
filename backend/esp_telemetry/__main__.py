"""Command-line entry point: python -m esp_telemetry [flags].

Flags mirror the APP_* environment variables; when both are given the
environment variable wins.
"""

import argparse

import uvicorn

from esp_telemetry.config import Settings
from esp_telemetry.main import create_app


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="esp_telemetry", description="ESP8266 temperature telemetry service",
    )
    parser.add_argument("--host", help="Server host")
    parser.add_argument("--port", type=int, help="Server port")
    parser.add_argument("--db-host", help="Database host")
    parser.add_argument("--db-port", type=int, help="Database port")
    parser.add_argument("--db-user", help="Database user")
    parser.add_argument("--db-pass", help="Database password")
    parser.add_argument("--db-name", help="Database name")
    parser.add_argument("--secret-key", help="Shared secret expected in X-Secret-Key")
    parser.add_argument("--log-level", help="Log level (DEBUG, INFO, ...)")
    return parser


def settings_from_args(argv: list[str] | None = None) -> Settings:
    """Settings from flags; unset flags fall through to env and defaults."""
    args = build_parser().parse_args(argv)
    flags = {k: v for k, v in vars(args).items() if v is not None}
    return Settings(**flags)


def main(argv: list[str] | None = None) -> None:
    settings = settings_from_args(argv)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
