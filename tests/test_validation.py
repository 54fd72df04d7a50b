"""Tests for the lxml-backed XSD validator."""

from unittest.mock import patch

import pytest
from lxml import etree

from xml_suite.errors import SchemaLoadError
from xml_suite.validation import XsdValidator, find_xml_files


class TestFindXmlFiles:
    def test_filters_by_extension_case_insensitive(self, filter_dir, filter_xml):
        (filter_dir / "b.xml").write_text(filter_xml.valid)
        (filter_dir / "A.XML").write_text(filter_xml.valid)
        (filter_dir / "notes.txt").write_text("ignore me")
        (filter_dir / "nested").mkdir()
        (filter_dir / "nested" / "c.xml").write_text(filter_xml.valid)

        names = [p.name for p in find_xml_files(filter_dir)]
        assert names == ["A.XML", "b.xml"]


class TestValidateDirectory:
    def test_all_valid(self, schema_file, filter_dir, filter_xml):
        (filter_dir / "rogue.xml").write_text(filter_xml.valid)
        (filter_dir / "mage.xml").write_text(filter_xml.valid)

        report = XsdValidator().validate_directory(str(filter_dir), str(schema_file))
        assert report.total_files == 2
        assert report.valid_files == 2
        assert report.valid == ["mage.xml", "rogue.xml"]
        assert report.errors == []
        assert report.ok

    def test_schema_violation_reported_per_file(self, schema_file, filter_dir, filter_xml):
        (filter_dir / "good.xml").write_text(filter_xml.valid)
        (filter_dir / "bad.xml").write_text(filter_xml.invalid)

        report = XsdValidator().validate_directory(str(filter_dir), str(schema_file))
        assert report.total_files == 2
        assert report.valid_files == 1
        assert [fe.file for fe in report.errors] == ["bad.xml"]
        assert report.errors[0].errors[0].startswith("line 1:")
        assert "lootFilterVersion" in report.errors[0].errors[0]

    def test_malformed_xml_reported(self, schema_file, filter_dir, filter_xml):
        (filter_dir / "broken.xml").write_text(filter_xml.malformed)

        report = XsdValidator().validate_directory(str(filter_dir), str(schema_file))
        assert report.valid_files == 0
        assert report.errors[0].file == "broken.xml"
        assert all(e.startswith("XML parsing failed") for e in report.errors[0].errors)

    def test_empty_directory(self, schema_file, filter_dir):
        report = XsdValidator().validate_directory(str(filter_dir), str(schema_file))
        assert report.total_files == 0
        assert report.ok

    def test_bad_schema_raises(self, tmp_path, filter_dir):
        schema = tmp_path / "broken.xsd"
        schema.write_text("<xs:schema xmlns:xs='http://www.w3.org/2001/XMLSchema'><xs:element/>")
        with pytest.raises(SchemaLoadError):
            XsdValidator().validate_directory(str(filter_dir), str(schema))

    def test_not_a_schema_raises(self, tmp_path, filter_dir):
        schema = tmp_path / "plain.xsd"
        schema.write_text("<notaschema/>")
        with pytest.raises(SchemaLoadError):
            XsdValidator().validate_directory(str(filter_dir), str(schema))

    def test_unreadable_file_does_not_abort_run(self, schema_file, filter_dir, filter_xml):
        (filter_dir / "locked.xml").write_text(filter_xml.valid)
        (filter_dir / "rogue.xml").write_text(filter_xml.valid)
        real_parse = etree.parse

        def parse(source, *args, **kwargs):
            if str(source).endswith("locked.xml"):
                raise OSError("Error reading file 'locked.xml': permission denied")
            return real_parse(source, *args, **kwargs)

        with patch.object(etree, "parse", side_effect=parse):
            report = XsdValidator().validate_directory(str(filter_dir), str(schema_file))

        assert report.total_files == 2
        assert report.valid == ["rogue.xml"]
        assert report.errors[0].file == "locked.xml"
        assert report.errors[0].errors == [
            "Failed to read file: Error reading file 'locked.xml': permission denied"
        ]
