# src/checkcommit/main.py
import argparse
import asyncio
import io
import logging
import sys
from pathlib import Path

from checkcommit.config import Settings, get_settings
from checkcommit.exceptions import ConfigurationError, TransportError
from checkcommit.models.config import ProjectType
from checkcommit.models.review import GateOutcome, GateResult
from checkcommit.platforms.base import DiffSource
from checkcommit.platforms.git import GitDiffSource
from checkcommit.providers.base import LLMProvider
from checkcommit.providers.gemini import GeminiProvider
from checkcommit.review.engine import CommitGate, REPORT_FILE, load_checklist, load_config


logger = logging.getLogger(__name__)


def configure_console(level: str = "INFO") -> None:
    """One-time process setup: UTF-8 console streams and logging."""
    for stream in (sys.stdout, sys.stderr):
        if isinstance(stream, io.TextIOWrapper) and stream.encoding.lower() != "utf-8":
            stream.reconfigure(encoding="utf-8")
    logging.basicConfig(level=level.upper(), format="%(message)s")


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="checkcommit",
        description="Review staged changes against a project checklist with Gemini.",
    )
    parser.add_argument(
        "project_type",
        nargs="?",
        default=settings.default_project_type,
        help="Project type, selects comment syntax and checklist folder (default: %(default)s)",
    )
    parser.add_argument(
        "repo_root",
        nargs="?",
        default=settings.checkcommit_root,
        help="Folder holding one sub-folder per project type (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def get_provider(settings: Settings, temperature: float) -> LLMProvider:
    """Get LLM provider based on settings."""
    if not settings.gemini_api_key:
        raise ConfigurationError("API key not found. Set GEMINI_API_KEY in the environment.")
    return GeminiProvider(
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        api_url=settings.gemini_api_url,
        temperature=temperature,
        timeout=settings.request_timeout,
        max_retries=settings.max_retries,
    )


async def run_gate(
    project_type: str,
    repo_root: str | Path,
    settings: Settings,
    diff_source: DiffSource | None = None,
) -> GateResult:
    """Wire provider, diff source and engine for one run."""
    project_dir = Path(repo_root) / project_type

    # Checklist, then API key, both before git or Gemini are touched.
    checklist = load_checklist(project_dir)
    config = load_config(project_dir)
    provider = get_provider(settings, config.temperature)

    gate = CommitGate(
        provider=provider,
        diff_source=diff_source or GitDiffSource(timeout=settings.git_timeout),
        project_dir=project_dir,
        project_type=ProjectType.from_arg(project_type),
        config=config,
        log_dir=settings.log_dir,
    )
    return await gate.run(checklist)


def report(result: GateResult, project_type: str) -> None:
    if result.outcome == GateOutcome.NO_CHANGES:
        logger.warning(f"⚠️ {result.reason}.")
    elif result.outcome == GateOutcome.FAIL and result.verdict is None:
        logger.error(f"❌ {result.reason}. Commit blocked.")
    elif result.outcome == GateOutcome.FAIL:
        logger.info(f"\nChecklist results for {project_type}:\n")
        logger.error(f"❌ {result.reason}. See {REPORT_FILE} for details.")
    elif result.verdict is None:
        logger.info(f"{result.reason}. You can commit.")
    else:
        logger.info(f"\nChecklist results for {project_type}:\n")
        logger.info(f"✅ {result.reason}. You can commit.")


def main(argv: list[str] | None = None, diff_source: DiffSource | None = None) -> int:
    settings = get_settings()
    args = build_parser(settings).parse_args(argv)
    configure_console("DEBUG" if args.verbose else settings.log_level)

    try:
        result = asyncio.run(run_gate(args.project_type, args.repo_root, settings, diff_source))
    except ConfigurationError as e:
        logger.error(f"❌ {e}")
        return 1
    except TransportError as e:
        logger.error(f"❌ {e}")
        if e.body:
            logger.error(e.body)
        return 1

    report(result, args.project_type)
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
