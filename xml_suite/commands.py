"""Command handlers shared by the CLI and the interactive menu.

Handlers never print or exit. They return a ``CommandResult`` and leave
output and the process exit code to the caller.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from . import config
from .collaborators import (
    ValidationReport,
    resolve_filter_creator,
    resolve_schema_generator,
    resolve_validator,
)
from .results import CommandResult

log = logging.getLogger(__name__)

INTERMEDIATE_SUFFIXES = (".intermediate.json", ".json")


def default_output_path(
    intermediate: str | Path,
    strictness: str,
    generated_dir: str | Path | None = None,
) -> Path:
    """Output filter path derived from the intermediate file name.

    ``foo.intermediate.json`` with strictness ``loose`` becomes
    ``generated/foo-loose.xml``.
    """
    name = Path(intermediate).name
    for suffix in INTERMEDIATE_SUFFIXES:
        if name.endswith(suffix) and len(name) > len(suffix):
            name = name[: -len(suffix)]
            break
    out_dir = Path(generated_dir if generated_dir is not None else config.GENERATED_DIR)
    return out_dir / f"{name}-{strictness}.xml"


def run_schema(
    source: str = config.SOURCE_PATTERN,
    output: str = config.SCHEMA_PATH,
    generator=None,
) -> CommandResult:
    """Generate an XSD schema from existing XML filters."""
    result = CommandResult().heading("🔧 XML Schema Generation").info()

    try:
        result.info(f"📁 Source pattern: {source}")
        result.info(f"📄 Output schema: {output}")
        result.info()

        if generator is None:
            generator = resolve_schema_generator()
        if generator is None:
            result.fail("Schema generation failed: no schema generator configured")
            result.hint("Set XML_SUITE_SCHEMA_GENERATOR to a 'module:attribute' import string")
            return result

        generator.generate_schema(source, output)
    except Exception as e:
        log.debug("Schema generation failed", exc_info=True)
        return result.fail(f"Schema generation failed: {e}")

    return result.success(f"XSD schema generated: {output}")


def run_create(
    intermediate: str,
    strictness: str = config.DEFAULT_STRICTNESS,
    output: str | None = None,
    creator=None,
) -> CommandResult:
    """Create an XML filter from an intermediate JSON file."""
    result = CommandResult().heading("⚡ XML Filter Creation").info()

    try:
        if not Path(intermediate).exists():
            result.fail(f"Intermediate file not found: {intermediate}")
            result.hint("Create intermediate JSON using Claude with FILTER_ANALYSIS_INSTRUCTIONS.md")
            return result

        output_file = Path(output) if output else default_output_path(intermediate, strictness)

        result.info(f"📁 Intermediate file: {intermediate}")
        result.info(f"🎯 Strictness level: {strictness}")
        result.info(f"📄 Output filter: {output_file}")
        result.info()

        if creator is None:
            creator = resolve_filter_creator()
        if creator is None:
            result.warning("XML filter creation not yet implemented")
            result.hint("Will read intermediate JSON and generate XML using native XML processing")
            return result

        with open(intermediate, encoding="utf-8") as fh:
            data = json.load(fh)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        creator.create_filter(data, strictness, str(output_file))
    except Exception as e:
        log.debug("Filter creation failed", exc_info=True)
        return result.fail(f"Filter creation failed: {e}")

    return result.success(f"XML filter created: {output_file}")


def _summarize(result: CommandResult, report: ValidationReport) -> None:
    result.heading("📊 Validation Summary:")
    result.info(f"   Total files: {report.total_files}")
    result.info(f"   Valid files: {report.valid_files}")
    result.info(f"   Files with errors: {len(report.errors)}")
    result.info()
    if report.ok:
        result.success("All XML files are valid!")
    else:
        result.failed("Files with validation errors:")
        for file_errors in report.errors:
            result.info(f"   {file_errors.file} ({len(file_errors.errors)} error(s))")


def run_validate(
    schema: str = config.SCHEMA_PATH,
    directory: str = config.FILTER_DIR,
    validator=None,
) -> CommandResult:
    """Validate every XML filter in *directory* against *schema*."""
    result = CommandResult().heading("✅ XML Filter Validation").info()

    try:
        if not Path(schema).exists():
            result.fail(f"Schema file not found: {schema}")
            result.hint('Run "xml-suite schema" first to generate the XSD schema')
            return result

        if not Path(directory).exists():
            return result.fail(f"Directory not found: {directory}")

        result.info(f"📋 Schema file: {schema}")
        result.info(f"📁 Filter directory: {directory}")
        result.info()

        if validator is None:
            validator = resolve_validator()
        if validator is None:
            return result.fail("Validation failed: no validator configured")

        report = ValidationReport.coerce(validator.validate_directory(directory, schema))

        if report.total_files == 0:
            result.warning("No XML files found in directory")

        for name in report.valid:
            result.success(name)
        for file_errors in report.errors:
            result.failed(file_errors.file)
            for err in file_errors.errors:
                result.info(f"   └─ {err}")
        if report.valid or report.errors:
            result.info()
        _summarize(result, report)
    except Exception as e:
        log.debug("Validation failed", exc_info=True)
        return result.fail(f"Validation failed: {e}")

    if report.errors:
        result.exit_code = 1
    log.info(
        "Validated %d file(s): %d valid, %d with errors",
        report.total_files, report.valid_files, len(report.errors),
    )
    return result
