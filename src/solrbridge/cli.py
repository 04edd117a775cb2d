"""CLI entry point for the solrbridge server."""

from __future__ import annotations

import argparse
import os
import socket
import subprocess
import sys
from pathlib import Path

from solrbridge import __version__


def main() -> None:
    """Main CLI entry point for the solrbridge server."""
    parser = argparse.ArgumentParser(
        prog="solrbridge",
        description="solrbridge: Solr query protocol on top of OpenSearch",
    )
    parser.add_argument("--config", "-c", type=str, default=None, help="Path to YAML configuration file")
    parser.add_argument("--host", type=str, default=None, help="Server bind address (overrides config)")
    parser.add_argument("--port", "-p", type=int, default=None, help="Server port (overrides config)")
    parser.add_argument("--workers", "-w", type=int, default=None, help="Number of worker processes")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument("--version", action="version", version=f"solrbridge {__version__}")

    args = parser.parse_args()

    from solrbridge.config.settings import CONFIG_ENV_VAR, load_settings
    from solrbridge.observability.logging import setup_logging

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        os.environ[CONFIG_ENV_VAR] = str(config_path.resolve())

    # Server workers rebuild their settings from the environment
    overrides = {
        "SOLRBRIDGE_SERVER__HOST": args.host,
        "SOLRBRIDGE_SERVER__PORT": args.port,
        "SOLRBRIDGE_SERVER__WORKERS": args.workers,
        "SOLRBRIDGE_OBSERVABILITY__LOG_LEVEL": args.log_level,
    }
    for name, value in overrides.items():
        if value:
            os.environ[name] = str(value)

    settings = load_settings()

    setup_logging(settings.observability)

    # Check port availability before starting
    _check_port(settings.server.host, settings.server.port)

    import uvicorn

    uvicorn.run(
        "solrbridge.api.app:create_app",
        factory=True,
        host=settings.server.host,
        port=settings.server.port,
        workers=settings.server.workers if not args.reload else 1,
        reload=args.reload,
        log_level=settings.observability.log_level.lower(),
    )


def _check_port(host: str, port: int) -> None:
    """Exit with a hint about the blocking process if the port is taken."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.bind((host if host != "0.0.0.0" else "127.0.0.1", port))
    except OSError:
        print(f"\n  ERROR: Port {port} is already in use!", file=sys.stderr)
        try:
            result = subprocess.run(
                ["lsof", "-i", f":{port}", "-P", "-n"],
                capture_output=True,
                text=True,
                timeout=5,
            )
            if result.stdout.strip():
                print(f"\n  Processes using port {port}:\n", file=sys.stderr)
                for line in result.stdout.strip().splitlines():
                    print(f"    {line}", file=sys.stderr)
            else:
                print(f"\n  Could not identify the process using port {port}.", file=sys.stderr)
        except (subprocess.TimeoutExpired, FileNotFoundError):
            print(f"\n  Run 'lsof -i :{port}' to find the process.", file=sys.stderr)
        sys.exit(1)
    finally:
        sock.close()


if __name__ == "__main__":
    main()
