"""XML bytes -> raw JSON-like tree.

The output mirrors what browser and Node clients of this service already
round-trip: attributes are merged into the element object, element text next
to attributes lives under `_`, repeated siblings become lists while single
ones stay bare, and qualified names keep their namespace prefix.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from lxml import etree

from .errors import XmlParseError
from .tree import TEXT_KEY

logger = logging.getLogger(__name__)

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(
        no_network=True,
        resolve_entities=False,
        remove_comments=True,
        remove_pis=True,
    )


def parse_xml_bytes(data: bytes) -> Dict[str, Any]:
    if not data or not data.strip():
        raise XmlParseError(detail="Document is empty.")
    try:
        root = etree.fromstring(data, _make_parser())
    except (etree.XMLSyntaxError, ValueError) as exc:
        logger.info("XML parse failed: %s", exc)
        raise XmlParseError(detail=str(exc)) from exc
    return {_qualified_name(root): _convert(root, parent_nsmap={})}


def _qualified_name(el: etree._Element) -> str:
    local = etree.QName(el).localname
    return f"{el.prefix}:{local}" if el.prefix else local


def _attribute_name(name: str, nsmap: Mapping[Optional[str], str]) -> str:
    if not name.startswith("{"):
        return name
    qname = etree.QName(name)
    if qname.namespace == XML_NAMESPACE:
        return f"xml:{qname.localname}"
    for prefix, uri in nsmap.items():
        if prefix and uri == qname.namespace:
            return f"{prefix}:{qname.localname}"
    return qname.localname


def _append(obj: Dict[str, Any], key: str, value: Any) -> None:
    if key not in obj:
        obj[key] = value
    elif isinstance(obj[key], list):
        obj[key].append(value)
    else:
        obj[key] = [obj[key], value]


def _convert(el: etree._Element, parent_nsmap: Mapping[Optional[str], str]) -> Any:
    obj: Dict[str, Any] = {}

    for prefix, uri in el.nsmap.items():
        if parent_nsmap.get(prefix) != uri:
            _append(obj, f"xmlns:{prefix}" if prefix else "xmlns", uri)
    for name, value in el.attrib.items():
        _append(obj, _attribute_name(name, el.nsmap), value)

    parts = [el.text or ""]
    for child in el:
        parts.append(child.tail or "")
        if not isinstance(child.tag, str):
            continue
        _append(obj, _qualified_name(child), _convert(child, el.nsmap))
    text = "".join(parts)

    if not obj:
        return text
    if text.strip():
        _append(obj, TEXT_KEY, text)
    return obj
