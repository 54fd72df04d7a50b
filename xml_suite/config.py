"""Configuration and environment handling."""

import logging
import os
import sys
from dotenv import load_dotenv

load_dotenv()

# Default paths, relative to the working directory
SOURCE_PATTERN = os.getenv("XML_SUITE_SOURCE_PATTERN", "SampleFilters/*.xml")
SCHEMA_PATH = os.getenv("XML_SUITE_SCHEMA_PATH", "schema/filter-schema.xsd")
FILTER_DIR = os.getenv("XML_SUITE_FILTER_DIR", "SampleFilters")
GENERATED_DIR = os.getenv("XML_SUITE_GENERATED_DIR", "generated")
DEFAULT_STRICTNESS = os.getenv("XML_SUITE_STRICTNESS", "strict")

# Collaborators as "module:attribute" import strings
SCHEMA_GENERATOR = os.getenv("XML_SUITE_SCHEMA_GENERATOR")
VALIDATOR = os.getenv("XML_SUITE_VALIDATOR", "xml_suite.validation:XsdValidator")
FILTER_CREATOR = os.getenv("XML_SUITE_FILTER_CREATOR")

# Logging
LOG_LEVEL_NAME = os.getenv("XML_SUITE_LOG_LEVEL", "WARNING").upper()
LOG_LEVEL = logging.getLevelName(LOG_LEVEL_NAME)

# getLevelName returns a string for unknown names (warn, don't block)
if not isinstance(LOG_LEVEL, int):
    print(
        f"WARNING: XML_SUITE_LOG_LEVEL={LOG_LEVEL_NAME!r} is not a logging level. "
        "Falling back to WARNING.",
        file=sys.stderr,
    )
    LOG_LEVEL = logging.WARNING

LOG_FILE = os.getenv("XML_SUITE_LOG_FILE")
