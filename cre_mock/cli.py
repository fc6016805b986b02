"""Command-line entry point: run the API server or export a dataset."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from cre_mock.config import CreMockConfig
from cre_mock.exceptions import CreMockError
from cre_mock.logging import setup_logging
from cre_mock.scenarios.market import CreMarketScenario
from cre_mock.sinks.json_file import JsonFileSink

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the ``cre-mock`` command."""
    parser = argparse.ArgumentParser(prog="cre-mock", description="CRE mock API")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible dataset")
    parser.add_argument("--log-level", type=str, default=None, help="Log level (default: LOG_LEVEL or INFO)")
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default=None,
        help="Log format (default: LOG_FORMAT or standard)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", type=str, default=None, help="Bind address (default: 0.0.0.0)")
    serve.add_argument("--port", type=int, default=None, help="Port (default: 3001)")

    export = subparsers.add_parser("export", help="Write a generated dataset to JSON files")
    export.add_argument("--output-dir", type=Path, default=Path("output"), help="Target directory")
    export.add_argument("--pretty", action="store_true", help="Pretty-print JSON")

    return parser


def apply_overrides(config: CreMockConfig, args: argparse.Namespace) -> CreMockConfig:
    """Let command-line flags win over environment settings."""
    if args.seed is not None:
        config.seed = args.seed
    if args.log_level:
        config.log_level = args.log_level
    if args.log_format:
        config.log_format = args.log_format
    if getattr(args, "host", None):
        config.server.host = args.host
    if getattr(args, "port", None):
        config.server.port = args.port
    return config


def serve(config: CreMockConfig) -> None:
    """Run the API under uvicorn until interrupted."""
    import uvicorn

    from cre_mock.api.app import create_app

    app = create_app(config)
    logger.info("CRE mock API server running at %s", config.server.base_url)
    for method, path in (
        ("GET", "/v1/transactions"),
        ("GET", "/v1/transactions/{transactionId}"),
        ("GET", "/v1/trends"),
        ("POST", "/v1/reset-data"),
    ):
        logger.info("  %s %s%s", method, config.server.base_url, path)

    # log_config=None keeps the handlers installed by setup_logging
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_config=None)


def export(config: CreMockConfig, output_dir: Path, pretty: bool) -> dict[str, int]:
    """Generate one dataset and write it to ``output_dir``."""
    scenario = CreMarketScenario.from_config(config.generation, seed=config.seed)
    sink = JsonFileSink(output_dir, pretty=pretty)
    sink.write_generation(scenario.generate_generation())
    sink.close()
    return sink.counts


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = apply_overrides(CreMockConfig.from_env(), args)
    except CreMockError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    setup_logging(config.log_level, config.log_format)

    try:
        if args.command == "serve":
            serve(config)
        else:
            export(config, args.output_dir, args.pretty)
    except CreMockError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
