import sys
from pathlib import Path

import pytest

# Sørg for at prosjektroten (der importers/ ligger) er på sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from importers.sap_landscape_xml import (  # type: ignore[import]
    as_list,
    attr,
    decode_xml,
    extract_text,
)


def test_plain_text_element_decodes_to_string():
    assert decode_xml("<Memo>hei</Memo>") == {"Memo": "hei"}


def test_attributes_and_text_share_keyspace():
    doc = decode_xml('<Memo xml:space="preserve">linje 1\nlinje 2</Memo>')
    assert doc == {"Memo": {"xml:space": "preserve", "value": "linje 1\nlinje 2"}}


def test_vendor_flags_are_kept_as_strings():
    doc = decode_xml('<Service uuid="a" sncop="-1" mode="1"/>')
    assert doc["Service"]["sncop"] == "-1"
    assert doc["Service"]["mode"] == "1"


def test_repeated_tags_become_list_single_stays_scalar():
    many = decode_xml('<R><A x="1"/><A x="2"/></R>')
    one = decode_xml('<R><A x="1"/></R>')
    assert many["R"]["A"] == [{"x": "1"}, {"x": "2"}]
    assert one["R"]["A"] == {"x": "1"}
    # kalleren må tvinge til liste selv
    assert as_list(one["R"]["A"]) == [{"x": "1"}]
    assert as_list(None) == []


def test_comments_are_ignored():
    doc = decode_xml('<R><!-- kommentar --><A x="1"/></R>')
    assert doc == {"R": {"A": {"x": "1"}}}


def test_empty_element_without_attributes_is_empty_string():
    assert decode_xml("<R><A/></R>") == {"R": {"A": ""}}


def test_bytes_input_honours_declared_encoding():
    data = '<?xml version="1.0" encoding="ISO-8859-1"?><Memo>blåbær</Memo>'.encode("latin-1")
    assert decode_xml(data) == {"Memo": "blåbær"}


def test_extract_text_shapes():
    assert extract_text(None) == ""
    assert extract_text("") == ""
    assert extract_text("abc") == "abc"
    assert extract_text({"value": "v", "xml:space": "preserve"}) == "v"
    assert extract_text({"#text": "t"}) == "t"
    assert extract_text({"_text": "u"}) == "u"
    assert extract_text({"xml:space": "preserve"}) == ""
    assert extract_text(["a", {"value": "b"}]) == "a\n\nb"


def test_extract_text_prefers_first_candidate_key():
    assert extract_text({"text": "sist", "value": "først"}) == "først"


def test_attr_helper():
    assert attr({"uuid": " x "}, "uuid") == " x "
    assert attr({"uuid": {"value": "x"}}, "uuid") == ""
    assert attr("tekst", "uuid") == ""
