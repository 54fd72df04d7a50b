"""Default XML validator: loot filter files checked against an XSD with lxml."""

from __future__ import annotations

import logging
from pathlib import Path

from lxml import etree

from .collaborators import FileErrors, ValidationReport
from .errors import SchemaLoadError

log = logging.getLogger(__name__)


def find_xml_files(directory: str | Path) -> list[Path]:
    """XML files directly inside *directory*, sorted by name."""
    return sorted(
        p for p in Path(directory).iterdir()
        if p.is_file() and p.suffix.lower() == ".xml"
    )


def _format_log(error_log) -> list[str]:
    return [f"line {entry.line}: {entry.message}" for entry in error_log]


class XsdValidator:
    """Validate every XML file in a directory against one XSD schema."""

    def __init__(self):
        self._parser = etree.XMLParser(resolve_entities=False, no_network=True)

    def load_schema(self, schema_path: str | Path) -> etree.XMLSchema:
        try:
            schema_doc = etree.parse(str(schema_path), self._parser)
            return etree.XMLSchema(schema_doc)
        except (etree.XMLSyntaxError, etree.XMLSchemaParseError) as e:
            raise SchemaLoadError(f"Cannot load schema {schema_path}: {e}") from e

    def validate_file(self, xml_path: str | Path, schema: etree.XMLSchema) -> list[str]:
        """Return error strings for one file; empty means valid."""
        try:
            doc = etree.parse(str(xml_path), self._parser)
        except etree.XMLSyntaxError as e:
            messages = _format_log(getattr(e, "error_log", [])) or [str(e)]
            return [f"XML parsing failed: {msg}" for msg in messages]
        except OSError as e:
            log.warning("Cannot read %s: %s", xml_path, e)
            return [f"Failed to read file: {e}"]

        if schema.validate(doc):
            return []
        return _format_log(schema.error_log)

    def validate_directory(self, directory: str, schema_path: str) -> ValidationReport:
        schema = self.load_schema(schema_path)
        log.info("Loaded schema %s", schema_path)

        xml_files = find_xml_files(directory)
        log.info("Found %d XML files in %s", len(xml_files), directory)

        report = ValidationReport(total_files=len(xml_files))
        for xml_file in xml_files:
            errors = self.validate_file(xml_file, schema)
            if errors:
                log.debug("%s: %d error(s)", xml_file.name, len(errors))
                report.errors.append(FileErrors(file=xml_file.name, errors=errors))
            else:
                report.add_valid(xml_file.name)
        return report
