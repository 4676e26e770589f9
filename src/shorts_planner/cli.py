"""
CLI Entry Point — command-line interface for the Shorts Planner.

Provides a user-friendly CLI with Rich console output.

Usage:
    shorts-planner plan --niche finance --tone calm   # Print a plan dashboard
    shorts-planner plan --niche finance --tone calm --json
    shorts-planner setup                              # Validate configuration
    shorts-planner serve                              # Start FastAPI server
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shorts-planner",
        description="🎬 Shorts Planner — production plans for short-form video",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  shorts-planner plan --niche finance --tone calm
  shorts-planner plan --niche fitness --tone energetic --duration 30 --json
  shorts-planner setup
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Plan command
    plan_parser = subparsers.add_parser("plan", help="Generate a production plan")
    plan_parser.add_argument("--niche", required=True, help="Channel niche, e.g. 'finance'")
    plan_parser.add_argument("--tone", required=True, help="Tone of voice, e.g. 'calm'")
    plan_parser.add_argument("--topic", help="Specific topic for this video")
    plan_parser.add_argument("--goal", help="What the video should achieve")
    plan_parser.add_argument(
        "--duration",
        type=int,
        help="Target runtime in seconds, 15-120 (default: 60)",
    )
    plan_parser.add_argument("--platform", help="Target platform (default: youtube_shorts)")
    plan_parser.add_argument("--cta", help="Call to action for the closing beat")
    plan_parser.add_argument("--no-captions", action="store_true", help="Skip caption lines")
    plan_parser.add_argument("--no-hashtags", action="store_true", help="Skip hashtags")
    plan_parser.add_argument("--no-shot-list", action="store_true", help="Skip the shot list")
    plan_parser.add_argument("--json", action="store_true", help="Print the raw JSON response")
    plan_parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to environment file (default: .env)",
    )

    # Setup command
    setup_parser = subparsers.add_parser("setup", help="Validate configuration")
    setup_parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to environment file (default: .env)",
    )

    # Serve command (FastAPI)
    serve_parser = subparsers.add_parser("serve", help="Start the FastAPI REST API")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Server port (default: from settings, 8000)",
    )
    serve_parser.add_argument(
        "--host",
        default=None,
        help="Server host (default: from settings, 0.0.0.0)",
    )
    serve_parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to environment file (default: .env)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv).

    Returns:
        Exit code (0 = success, 1 = failure, 2 = invalid brief).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_OK

    if args.command == "setup":
        return _cmd_setup(env_file=args.env_file)
    elif args.command == "plan":
        return _cmd_plan(args)
    elif args.command == "serve":
        return _cmd_serve(host=args.host, port=args.port, env_file=args.env_file)

    return EXIT_OK


def payload_from_args(args: argparse.Namespace) -> dict[str, Any]:
    """Build a request body from CLI flags, leaving unset options to defaults."""
    payload: dict[str, Any] = {"niche": args.niche, "tone": args.tone}
    optional = {
        "topic": args.topic,
        "goal": args.goal,
        "durationSeconds": args.duration,
        "platform": args.platform,
        "callToAction": args.cta,
    }
    payload.update({key: value for key, value in optional.items() if value is not None})
    if args.no_captions:
        payload["includeCaptions"] = False
    if args.no_hashtags:
        payload["includeHashtags"] = False
    if args.no_shot_list:
        payload["includeShotList"] = False
    return payload


def _cmd_plan(args: argparse.Namespace) -> int:
    """Generate a plan and print it."""
    from rich.console import Console

    from shorts_planner.core.config import Settings
    from shorts_planner.core.container import Container
    from shorts_planner.core.logging import setup_logging
    from shorts_planner.domain.exceptions import (
        ConfigurationError,
        PlanGenerationError,
        RequestValidationError,
    )
    from shorts_planner.presentation.dashboard import render_plan

    console = Console()

    try:
        settings = Settings.from_env_file(args.env_file)
        setup_logging(settings.log_level, settings.log_file)
        service = Container(settings).delivery_service()
        result = asyncio.run(service.deliver(payload_from_args(args)))
    except RequestValidationError as e:
        console.print("[red]❌ Invalid brief:[/red]")
        for violation in e.violations:
            console.print(f"   • {violation.field}: {violation.reason}")
        return EXIT_INVALID
    except (PlanGenerationError, ConfigurationError) as e:
        console.print(f"[red]❌ {e}[/red]")
        return EXIT_FAILURE

    if args.json:
        print(json.dumps(result.to_payload(), indent=2, ensure_ascii=False))
    else:
        render_plan(result, console)
    return EXIT_OK


def _cmd_setup(env_file: str) -> int:
    """Validate configuration and print status."""
    from pydantic import ValidationError
    from rich.console import Console
    from rich.table import Table

    from shorts_planner.core.config import Settings

    console = Console()

    try:
        settings = Settings.from_env_file(env_file)
    except ValidationError as e:
        console.print(f"❌ Configuration error: {e}")
        return EXIT_FAILURE

    table = Table(title="🔧 Configuration Status")
    table.add_column("Setting", style="cyan")
    table.add_column("Status", style="green")

    table.add_row(
        "OpenAI API key",
        "✅" if settings.openai.is_configured else "⚠️  Not set (template plans)",
    )
    table.add_row("OpenAI model", settings.openai.model)
    table.add_row("Temperature", f"{settings.openai.temperature:g}")
    table.add_row("Max output tokens", str(settings.openai.max_output_tokens))
    table.add_row("Request timeout", f"{settings.openai.timeout_seconds:g}s")
    table.add_row("Log level", settings.log_level)

    console.print(table)
    console.print("\n✅ Configuration validated!")
    return EXIT_OK


def _cmd_serve(host: str | None, port: int | None, env_file: str) -> int:
    """Start the FastAPI REST API server."""
    import uvicorn

    from shorts_planner.core.config import Settings
    from shorts_planner.presentation.api import create_app

    settings = Settings.from_env_file(env_file)
    host = host or settings.host
    port = port or settings.port

    app = create_app(settings)
    print(f"🚀 Starting Shorts Planner API on http://{host}:{port}")
    print(f"   📖 Docs: http://{host}:{port}/docs")
    uvicorn.run(app, host=host, port=port)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
