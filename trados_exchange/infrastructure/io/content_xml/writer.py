"""Incremental XML writer.

``xml.etree`` builds the whole tree before writing, which the export cannot
afford for large subtrees, and it has no notion of CDATA sections. This
writer emits markup straight to a text sink as elements are opened and
closed, indenting child elements and collapsing empty ones to ``<tag/>``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from xml.sax.saxutils import escape

from ..exceptions import ExportWriteError
from .constants import (
    CDATA_END,
    CDATA_SPLIT,
    CDATA_START,
    ENCODING,
    INVALID_XML_CHARS,
    XML_NAME,
    XML_VERSION,
)

if TYPE_CHECKING:
    from typing import TextIO

_ATTRIBUTE_ENTITIES = {'"': "&quot;", "\n": "&#10;", "\r": "&#13;", "\t": "&#9;"}


def strip_invalid_chars(value: str) -> str:
    """Drop characters XML 1.0 cannot represent, such as control characters."""
    return INVALID_XML_CHARS.sub("", value)


def escape_text(value: str) -> str:
    return escape(strip_invalid_chars(value))


def escape_attribute(value: str) -> str:
    return escape(strip_invalid_chars(value), _ATTRIBUTE_ENTITIES)


def escape_cdata(value: str) -> str:
    return strip_invalid_chars(value).replace(CDATA_END, CDATA_SPLIT)


def check_name(name: str) -> str:
    if not XML_NAME.fullmatch(name):
        raise ExportWriteError(f'"{name}" is not a valid XML name')
    return name


@dataclass(slots=True)
class _OpenElement:
    name: str
    has_children: bool = False
    has_text: bool = False


class XmlStreamWriter:
    pass

    def __init__(self, sink: TextIO, *, indent: int = 2) -> None:
        super().__init__()
        self._sink = sink
        self._indent = " " * indent
        self._stack: list[_OpenElement] = []
        self._start_tag_open = False

    def start_document(
        self, version: str = XML_VERSION, encoding: str = ENCODING
    ) -> None:
        self._sink.write(f'<?xml version="{version}" encoding="{encoding}"?>\n')

    def end_document(self) -> None:
        while self._stack:
            self.end_element()
        self._sink.write("\n")

    def start_element(self, name: str) -> None:
        check_name(name)
        self._close_start_tag()
        if self._stack:
            parent = self._stack[-1]
            if not parent.has_text:
                self._newline(len(self._stack))
            parent.has_children = True
        self._sink.write(f"<{name}")
        self._stack.append(_OpenElement(name))
        self._start_tag_open = True

    def write_attribute(self, name: str, value: str) -> None:
        if not self._start_tag_open:
            raise ExportWriteError(
                f'Cannot write attribute "{name}" outside of a start tag'
            )
        self._sink.write(f' {check_name(name)}="{escape_attribute(value)}"')

    def text(self, value: str) -> None:
        self._current("text").has_text = True
        self._close_start_tag()
        self._sink.write(escape_text(value))

    def cdata(self, value: str) -> None:
        self._current("CDATA").has_text = True
        self._close_start_tag()
        self._sink.write(f"{CDATA_START}{escape_cdata(value)}{CDATA_END}")

    def end_element(self) -> None:
        element = self._current("end tag")
        self._stack.pop()
        if self._start_tag_open:
            self._sink.write("/>")
            self._start_tag_open = False
            return
        if element.has_children and not element.has_text:
            self._newline(len(self._stack))
        self._sink.write(f"</{element.name}>")

    def write_element(self, name: str, value: str | None = None) -> None:
        self.start_element(name)
        if value:
            self.text(value)
        self.end_element()

    def flush(self) -> None:
        self._sink.flush()

    def _current(self, what: str) -> _OpenElement:
        if not self._stack:
            raise ExportWriteError(f"Cannot write {what} without an open element")
        return self._stack[-1]

    def _close_start_tag(self) -> None:
        if self._start_tag_open:
            self._sink.write(">")
            self._start_tag_open = False

    def _newline(self, level: int) -> None:
        if self._indent:
            self._sink.write("\n" + self._indent * level)
