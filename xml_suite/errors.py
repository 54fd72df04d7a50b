"""Exception types raised by xml-suite."""


class XmlSuiteError(Exception):
    """Base class for all xml-suite errors."""


class CollaboratorError(XmlSuiteError):
    """A configured collaborator could not be imported or constructed."""


class SchemaLoadError(XmlSuiteError):
    """An XSD schema file could not be parsed."""
