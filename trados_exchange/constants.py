from typing import ClassVar


class Defaults:
    WORKSPACE = "live"
    LANGUAGE_DIMENSION = "language"
    DOCUMENT_NODE_TYPE = "Neos.Neos:Document"
    SNAPSHOT_FILE = "content-snapshot.json"
    CONFIG_FILE = "trados_exchange.toml"
    INDENT = 2
    IGNORE_HIDDEN = True
    EXCLUDE_CHILD_DOCUMENTS = False


class ExportFormat:
    FORMAT_VERSION = "1.0"
    XML_VERSION = "1.0"
    ENCODING = "UTF-8"
    STRING_PROPERTY_TYPE = "string"


class Paths:
    SEPARATOR = "/"
    ROOT = "/"
    SITES_ROOT = "/sites"
    # "!" is the first printable ASCII character, below "-" and friends
    SORT_SEPARATOR = "!"


class NodeTypeFilters:
    NEGATION_PREFIX = "!"
    SEPARATOR = ","


class LogLevels:
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


class ElementNames:
    CONTENT = "content"
    NODES = "nodes"
    NODE = "node"
    VARIANT = "variant"
    DIMENSIONS = "dimensions"
    PROPERTIES = "properties"
    CONTENT_ATTRIBUTES: ClassVar[tuple[str, ...]] = (
        "name",
        "sitePackageKey",
        "workspace",
        "sourceLanguage",
        "targetLanguage",
        "modifiedAfter",
    )
