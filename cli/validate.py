"""
Validate Subcommand Module

Validates generated game manifests (or single scenes) from JSON files.
Supports batch validation with glob patterns, strict mode, JSON report
generation and writing the sanitized content of an accepted file.
"""

import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import click

from cli.help_texts import (
    CONFIG_HELP,
    LOG_LEVEL_HELP,
    VALIDATE_BATCH_HELP,
    VALIDATE_HELP,
    VALIDATE_INPUT_HELP,
    VALIDATE_REPORT_HELP,
    VALIDATE_SANITIZED_HELP,
    VALIDATE_STATS_HELP,
    VALIDATE_STRICT_HELP,
    VALIDATE_TYPE_HELP,
    ExitCodes,
)
from gatekeeper.config.manager import ConfigurationManager
from gatekeeper.errors import ConfigurationError
from gatekeeper.utils.logging_config import configure_logging
from gatekeeper.validation.engine import CONTENT_TYPES, ContentValidator
from gatekeeper.validation.report import ValidationResult


logger = logging.getLogger(__name__)


@click.command(help=VALIDATE_HELP)
@click.option("--input", "-i", "input_path", type=click.Path(), help=VALIDATE_INPUT_HELP)
@click.option("--batch", "-b", type=str, help=VALIDATE_BATCH_HELP)
@click.option(
    "--type", "-t",
    "content_type",
    type=click.Choice(CONTENT_TYPES, case_sensitive=False),
    default="game",
    help=VALIDATE_TYPE_HELP,
)
@click.option("--strict", is_flag=True, help=VALIDATE_STRICT_HELP)
@click.option("--report", "-r", "report_path", type=click.Path(), help=VALIDATE_REPORT_HELP)
@click.option("--sanitized-output", "sanitized_path", type=click.Path(), help=VALIDATE_SANITIZED_HELP)
@click.option("--stats", "show_stats", is_flag=True, help=VALIDATE_STATS_HELP)
@click.option("--config", "-c", "config_file", type=click.Path(), help=CONFIG_HELP)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    help=LOG_LEVEL_HELP,
)
def validate(
    input_path: Optional[str],
    batch: Optional[str],
    content_type: str,
    strict: bool,
    report_path: Optional[str],
    sanitized_path: Optional[str],
    show_stats: bool,
    config_file: Optional[str],
    log_level: Optional[str],
):
    """Validate generated game manifests before deployment.

    Examples:
        # Validate a single manifest
        content-gatekeeper validate --input manifest.json

        # Validate a single quiz scene
        content-gatekeeper validate --input quiz.json --type quiz

        # Strict mode (fail on warnings)
        content-gatekeeper validate --input manifest.json --strict

        # Write the sanitized manifest for deployment
        content-gatekeeper validate --input manifest.json --sanitized-output clean.json

        # Batch validation with report and statistics
        content-gatekeeper validate --batch "manifests/*.json" --report report.json --stats
    """
    if not input_path and not batch:
        click.echo("Error: --input or --batch is required", err=True)
        click.echo("Run 'content-gatekeeper validate --help' for usage", err=True)
        sys.exit(ExitCodes.MISSING_REQUIRED_OPTION)

    try:
        overrides = {"log_level": log_level.lower() if log_level else None}
        config = ConfigurationManager().load_configuration(config_file, overrides)
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(ExitCodes.INVALID_CONFIGURATION)

    configure_logging(config.log_level, force=True)
    validator = ContentValidator(config=config)

    if batch:
        results = validator.validate_batch(batch, content_type.lower())
    else:
        results = [validator.validate_file(input_path, content_type.lower())]

    for result in results:
        click.echo(result.format_human())

    passed = [r for r in results if _passes(r, strict)]
    failed = len(results) - len(passed)

    if batch:
        warnings_count = sum(1 for r in results if r.success and r.warnings)
        click.echo(f"\n  ✅ {len(passed)} passed")
        if warnings_count:
            click.echo(f"  ⚠ {warnings_count} with warnings")
        if failed:
            click.echo(f"  ❌ {failed} failed")

    if report_path:
        _write_json(report_path, {
            "total": len(results),
            "passed": len(passed),
            "failed": failed,
            "strict": strict,
            "results": [r.to_dict(include_content=False) for r in results],
        })
        click.echo(f"\nReport saved: {report_path}")

    if sanitized_path:
        _write_sanitized(sanitized_path, results, batch)

    if show_stats:
        _echo_stats(validator)

    if failed:
        sys.exit(ExitCodes.VALIDATION_FAILED)


def _passes(result: ValidationResult, strict: bool) -> bool:
    return result.success and (not strict or not result.warnings)


def _write_sanitized(path: str, results: List[ValidationResult], batch: Optional[str]):
    """Write the sanitized content of a single accepted file."""
    if batch:
        click.echo("--sanitized-output is only supported with --input", err=True)
        return
    result = results[0]
    if not result.success:
        click.echo("Sanitized content not written: validation failed", err=True)
        return
    _write_json(path, result.sanitized_content)
    click.echo(f"Sanitized content saved: {path}")


def _echo_stats(validator: ContentValidator):
    stats = validator.get_stats()
    click.echo("\nValidation statistics:")
    click.echo(f"  Total: {stats.total}")
    click.echo(f"  Successes: {stats.successes}")
    click.echo(f"  Failures: {stats.failures}")
    click.echo(f"  Success rate: {stats.success_rate:.1f}%")
    if stats.top_errors:
        click.echo("  Top errors:")
        for message, count in stats.top_errors:
            click.echo(f"    {count}x {message}")


def _write_json(path: str, data):
    """Write JSON to disk, keeping non-ASCII text readable."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
