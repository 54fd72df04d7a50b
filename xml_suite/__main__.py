"""Allow ``python -m xml_suite``."""

from .cli import app

app(prog_name="xml-suite")
