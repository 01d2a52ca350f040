"""CLI entrypoints for repomirror commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import REPORT_FORMATS, ConfigError, load_config
from .errors import InvalidInput, NotFound, RateLimited, RepoMirrorError
from .github import GitHubClient
from .logging import configure_logging
from .pipeline import evaluate_repository
from .report import render, save_report


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repomirror",
        description="Evaluate a GitHub repository's engineering quality from its metadata.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Score a repository and print the evaluation report.",
    )
    _add_verbose_option(analyze_parser, suppress_default=True)
    analyze_parser.add_argument(
        "url",
        help="GitHub repository URL (https://github.com/owner/name) or owner/name.",
    )
    analyze_parser.add_argument(
        "--format",
        choices=REPORT_FORMATS,
        default=None,
        help="Report format (defaults to the config file value, then markdown).",
    )
    analyze_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write the report to this path instead of standard output.",
    )
    analyze_parser.add_argument(
        "--token",
        default=None,
        help="GitHub token for higher rate limits. Also read from GITHUB_TOKEN.",
    )
    analyze_parser.add_argument(
        "--config",
        default=".",
        help="Path to .repomirror.yml or the directory containing it.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for repomirror commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "analyze":
        _run_analyze(parser, args)
    elif args.command == "serve":
        configure_logging(verbose=bool(args.verbose), log_file=_log_file(args))
        from .service import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_analyze(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    fmt = args.format or config.report.format
    output = Path(args.output) if args.output else config.report.output
    configure_logging(
        verbose=bool(args.verbose),
        quiet=fmt == "json" and output is None,
        log_file=_log_file(args),
    )

    client = GitHubClient(
        token=args.token or config.github.token,
        api_url=config.github.api_url,
        timeout=config.github.timeout,
        commit_limit=config.github.commit_limit,
    )

    try:
        result = evaluate_repository(args.url, client=client)
    except InvalidInput as exc:
        parser.exit(1, f"{exc}\n")
    except NotFound as exc:
        parser.exit(1, f"{exc}\n")
    except RateLimited as exc:
        parser.exit(1, f"{exc} Provide a token with --token or GITHUB_TOKEN.\n")
    except RepoMirrorError as exc:
        parser.exit(1, f"repomirror analyze failed: {exc}\nRun with --verbose for more details.\n")

    if output is not None:
        saved = save_report(result, output, fmt)
        print(f"Report written to {_relativize(saved)}")
    else:
        sys.stdout.write(render(result, fmt))


def _log_file(args: argparse.Namespace) -> Path | None:
    return Path(args.log_file) if args.log_file else None


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
