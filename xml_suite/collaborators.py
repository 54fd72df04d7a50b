"""Collaborator contracts and the import-string loader that resolves them.

xml-suite does no schema inference, XML generation or validation itself.
Each of those jobs belongs to a collaborator selected by configuration::

    XML_SUITE_SCHEMA_GENERATOR=my_pkg.schema:Generator
    XML_SUITE_VALIDATOR=xml_suite.validation:XsdValidator
    XML_SUITE_FILTER_CREATOR=my_pkg.creator:build_creator

The attribute after the colon is called with no arguments and must return
an object implementing the matching protocol below.
"""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from . import config
from .errors import CollaboratorError

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Report types
# ---------------------------------------------------------------------------


@dataclass
class FileErrors:
    """Validation problems found in one XML file."""

    file: str
    errors: list[str] = field(default_factory=list)


@dataclass
class ValidationReport:
    """Outcome of validating a directory of XML filters.

    ``valid`` names the files that passed; ``errors`` holds the rest.
    """

    total_files: int = 0
    valid_files: int = 0
    errors: list[FileErrors] = field(default_factory=list)
    valid: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def add_valid(self, name: str) -> None:
        self.valid.append(name)
        self.valid_files += 1

    @classmethod
    def coerce(cls, report: Any) -> ValidationReport:
        """Normalise whatever a validator returned into a ValidationReport.

        Only ``errors`` is required. Entries may be ``FileErrors``, dicts
        with ``file`` / ``errors`` keys, or objects with those attributes.
        Counts that the validator leaves out are derived from the lists.
        """
        if isinstance(report, cls):
            return report

        raw_errors = getattr(report, "errors", None)
        if raw_errors is None and isinstance(report, dict):
            raw_errors = report.get("errors")
        if raw_errors is None:
            raise TypeError(
                f"Validator returned {type(report).__name__}, expected a report with 'errors'"
            )

        errors = []
        for entry in raw_errors:
            if isinstance(entry, FileErrors):
                errors.append(entry)
            elif isinstance(entry, dict):
                errors.append(FileErrors(str(entry.get("file", "?")), list(entry.get("errors", []))))
            else:
                errors.append(FileErrors(
                    str(getattr(entry, "file", entry)), list(getattr(entry, "errors", [])),
                ))

        valid = list(getattr(report, "valid", None) or [])
        valid_files = getattr(report, "valid_files", None)
        if valid_files is None:
            valid_files = len(valid)
        total_files = getattr(report, "total_files", None)
        if total_files is None:
            total_files = valid_files + len(errors)
        return cls(total_files=total_files, valid_files=valid_files, errors=errors, valid=valid)


# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------


@runtime_checkable
class SchemaGenerator(Protocol):
    def generate_schema(self, source_pattern: str, output_path: str) -> None: ...


@runtime_checkable
class XMLValidator(Protocol):
    def validate_directory(self, directory: str, schema_path: str) -> ValidationReport: ...


@runtime_checkable
class FilterCreator(Protocol):
    def create_filter(
        self, intermediate: Any, strictness: str, output_path: str
    ) -> None: ...


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------


def load_collaborator(spec: str) -> Any:
    """Import ``module:attribute`` and call the attribute with no arguments.

    Raises ``CollaboratorError`` when the string is malformed, the module
    or attribute is missing, or construction fails.
    """
    module_name, sep, attr_name = spec.partition(":")
    if not sep or not module_name or not attr_name:
        raise CollaboratorError(
            f"Invalid collaborator {spec!r}; expected 'module:attribute'"
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise CollaboratorError(f"Cannot import {module_name!r}: {e}") from e

    factory = module
    for part in attr_name.split("."):
        try:
            factory = getattr(factory, part)
        except AttributeError as e:
            raise CollaboratorError(
                f"{module_name!r} has no attribute {attr_name!r}"
            ) from e

    if not callable(factory):
        raise CollaboratorError(f"{spec!r} is not callable")

    try:
        instance = factory()
    except Exception as e:
        raise CollaboratorError(f"Failed to construct {spec!r}: {e}") from e

    log.debug("Loaded collaborator %s -> %s", spec, type(instance).__name__)
    return instance


def _resolve(spec: str | None, protocol: type, role: str) -> Any | None:
    if not spec:
        return None
    instance = load_collaborator(spec)
    if not isinstance(instance, protocol):
        raise CollaboratorError(
            f"{spec!r} does not implement the {role} interface"
        )
    return instance


def resolve_schema_generator() -> SchemaGenerator | None:
    """Configured schema generator, or None when unset."""
    return _resolve(config.SCHEMA_GENERATOR, SchemaGenerator, "schema generator")


def resolve_validator() -> XMLValidator | None:
    """Configured validator (lxml-backed by default)."""
    return _resolve(config.VALIDATOR, XMLValidator, "validator")


def resolve_filter_creator() -> FilterCreator | None:
    """Configured filter creator, or None when unset."""
    return _resolve(config.FILTER_CREATOR, FilterCreator, "filter creator")
