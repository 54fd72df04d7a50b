"""Shared fixtures for xml-suite tests."""

import logging
from types import SimpleNamespace

import pytest

from xml_suite.results import CommandResult

FILTER_XSD = """<?xml version="1.0" encoding="UTF-8"?>
<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema">
  <xs:element name="ItemFilter">
    <xs:complexType>
      <xs:sequence>
        <xs:element name="name" type="xs:string"/>
        <xs:element name="lootFilterVersion" type="xs:int"/>
      </xs:sequence>
    </xs:complexType>
  </xs:element>
</xs:schema>
"""

VALID_FILTER = (
    "<ItemFilter><name>Rogue</name><lootFilterVersion>4</lootFilterVersion></ItemFilter>"
)
INVALID_FILTER = (
    "<ItemFilter><name>Rogue</name><lootFilterVersion>four</lootFilterVersion></ItemFilter>"
)
MALFORMED_FILTER = "<ItemFilter><name>Rogue</ItemFilter>"


@pytest.fixture(autouse=True)
def reset_logging():
    """CLI runs install handlers on the package logger; drop them between tests."""
    yield
    logger = logging.getLogger("xml_suite")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "filter-schema.xsd"
    path.write_text(FILTER_XSD, encoding="utf-8")
    return path


@pytest.fixture
def filter_dir(tmp_path):
    path = tmp_path / "SampleFilters"
    path.mkdir()
    return path


@pytest.fixture
def filter_xml():
    """Sample loot filter documents: valid, schema-invalid and malformed."""
    return SimpleNamespace(valid=VALID_FILTER, invalid=INVALID_FILTER, malformed=MALFORMED_FILTER)


@pytest.fixture
def ok_result():
    return CommandResult().info("done")
