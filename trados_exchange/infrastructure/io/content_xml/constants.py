import re

from ....constants import ElementNames, ExportFormat

CONTENT = ElementNames.CONTENT
NODES = ElementNames.NODES
NODE = ElementNames.NODE
VARIANT = ElementNames.VARIANT
DIMENSIONS = ElementNames.DIMENSIONS
PROPERTIES = ElementNames.PROPERTIES

FORMAT_VERSION = ExportFormat.FORMAT_VERSION
XML_VERSION = ExportFormat.XML_VERSION
ENCODING = ExportFormat.ENCODING
STRING_TYPE = ExportFormat.STRING_PROPERTY_TYPE

CDATA_START = "<![CDATA["
CDATA_END = "]]>"
# Closing a section right after "]]" and reopening before ">" keeps the
# terminator out of any single section.
CDATA_SPLIT = "]]]]><![CDATA[>"

# Everything outside the XML 1.0 Char production.
INVALID_XML_CHARS = re.compile(
    "[^\u0009\u000a\u000d\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)
XML_NAME = re.compile(r"(?:[^\W\d]|:)[\w.:-]*")
