from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import Sequence

from ...users.model import User
from .base import ExportFormatter, export_row

# Anything outside the XML 1.0 Char production; ElementTree writes these as-is.
_ILLEGAL_XML_CHARS = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def _xml_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return _ILLEGAL_XML_CHARS.sub("", str(value))


class XmlExportFormatter(ExportFormatter):
    """``<users><user>...</user></users>``, one child element per field."""

    media_type = "application/xml"
    extension = "xml"

    def render(self, users: Sequence[User]) -> str:
        root = ET.Element("users")
        for user in users:
            node = ET.SubElement(root, "user")
            for key, value in export_row(user).items():
                ET.SubElement(node, key).text = _xml_text(value)
        ET.indent(root)
        return '<?xml version="1.0" encoding="UTF-8"?>\n' + ET.tostring(root, encoding="unicode")
