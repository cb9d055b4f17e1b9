# app/importers/sap_landscape_xml.py
# -*- coding: utf-8 -*-
"""
Generisk XML -> tre (RawDocument) for SAP GUI Landscape-filer.

Attributter legges i samme nøkkelrom som barn-elementene (``name="X"`` blir
``{"name": "X"}``), og teksten til elementet havner under ``TEXT_KEY``.
Gjentatte tagger blir liste, men et enkelt forekommende element blir
skalar – bruk ``as_list`` der en sekvens forventes.

Alle attributtverdier beholdes som strenger (f.eks. ``sncop="-1"``).
"""
from __future__ import annotations

from typing import Any, Dict, List, Union

from lxml import etree

__all__ = ["TEXT_KEY", "TEXT_KEYS", "decode_xml", "as_list", "extract_text", "attr"]

TEXT_KEY = "value"
# Rekkefølgen betyr noe: første ikke-tomme vinner
TEXT_KEYS = ("value", "#text", "#value", "_text", "text")

_XML_NS = "{http://www.w3.org/XML/1998/namespace}"

RawNode = Union[str, Dict[str, Any], List[Any]]


def _lname(tag: str) -> str:
    if not tag:
        return ""
    return tag.rsplit("}", 1)[-1] if "}" in tag else tag


def _attr_name(name: str) -> str:
    if name.startswith(_XML_NS):
        return "xml:" + name[len(_XML_NS):]
    return _lname(name)


def _put(out: Dict[str, Any], key: str, value: Any) -> None:
    if key not in out:
        out[key] = value
    elif isinstance(out[key], list):
        out[key].append(value)
    else:
        out[key] = [out[key], value]


def _element_text(el) -> str:
    parts = [el.text or ""]
    for ch in el:
        parts.append(ch.tail or "")
    return "".join(parts).strip()


def _decode_element(el) -> RawNode:
    out: Dict[str, Any] = {}
    for k, v in el.attrib.items():
        _put(out, _attr_name(k), v)
    for ch in el:
        # kommentarer og PI-er har ikke str-tag
        if not isinstance(ch.tag, str):
            continue
        _put(out, _lname(ch.tag), _decode_element(ch))
    text = _element_text(el)
    if not out:
        return text
    if text:
        _put(out, TEXT_KEY, text)
    return out


def _xml_parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True)


def decode_xml(xml: Union[str, bytes]) -> Dict[str, Any]:
    """Parser XML-tekst til ``{rot-tag: node}``.

    Kaster ``etree.XMLSyntaxError`` / ``ValueError`` for ugyldig input;
    feilhåndteringen ligger hos kalleren.
    """
    data = xml.encode("utf-8") if isinstance(xml, str) else xml
    root = etree.fromstring(data, parser=_xml_parser())
    return {_lname(root.tag): _decode_element(root)}


def as_list(node: Any) -> List[Any]:
    if node is None:
        return []
    if isinstance(node, list):
        return node
    return [node]


def extract_text(node: Any) -> str:
    """Henter tekst fra de tre formene dekodingen gir: streng, liste, mapping."""
    if not node:
        return ""
    if isinstance(node, list):
        return "\n\n".join(extract_text(x) for x in node)
    if isinstance(node, str):
        return node
    if isinstance(node, dict):
        for k in TEXT_KEYS:
            v = node.get(k)
            if v:
                return v if isinstance(v, str) else str(v)
    return ""


def attr(node: Any, key: str) -> str:
    """Attributtverdi som streng, eller "" hvis den mangler / ikke er tekst."""
    if not isinstance(node, dict):
        return ""
    v = node.get(key)
    return v if isinstance(v, str) else ""
