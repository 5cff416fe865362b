"""Tests for SVG parser."""

import pytest

from tests.conftest import ALERT_CIRCLE_SVG, CIRCLE_SVG, TEXT_SVG, XLINK_SVG

from svg2tsx.errors import SvgParseError
from svg2tsx.svg.parser import XLINK_NS, parse_svg


def _names(node):
    return [a.name for a in node.attributes]


def test_parse_circle():
    ast = parse_svg(CIRCLE_SVG)
    assert ast.root.type == "element"
    assert ast.root.tag_name == "svg"
    assert len(ast.root.children) == 1
    circle = ast.root.children[0]
    assert circle.tag_name == "circle"
    assert [(a.name, a.value) for a in circle.attributes] == [("cx", "12"), ("cy", "12"), ("r", "10")]
    assert circle.children == []


def test_metadata_extraction():
    ast = parse_svg(ALERT_CIRCLE_SVG)
    assert ast.metadata.view_box == "0 0 24 24"
    assert ast.metadata.xmlns == "http://www.w3.org/2000/svg"
    assert ast.metadata.width == "24"
    assert ast.metadata.height == "24"


def test_metadata_absent_attributes_stay_absent():
    ast = parse_svg(CIRCLE_SVG)
    assert ast.metadata.view_box is None
    assert ast.metadata.xmlns is None
    assert ast.metadata.width == "24"


def test_attribute_document_order():
    ast = parse_svg('<svg><rect y="2" x="1" height="4" width="3"/></svg>')
    assert _names(ast.root.children[0]) == ["y", "x", "height", "width"]


def test_whitespace_text_dropped():
    ast = parse_svg(ALERT_CIRCLE_SVG)
    assert [c.tag_name for c in ast.root.children] == ["circle", "line", "line"]


def test_text_node_trimmed():
    ast = parse_svg(TEXT_SVG)
    assert len(ast.root.children) == 1
    text_el = ast.root.children[0]
    assert text_el.tag_name == "text"
    assert len(text_el.children) == 1
    text = text_el.children[0]
    assert text.type == "text"
    assert text.tag_name == "#text"
    assert text.text_content == "Hello"
    assert text.attributes == []
    assert text.children == []


def test_comments_skipped():
    ast = parse_svg("<svg><!-- a comment --><rect/><!-- another --></svg>")
    assert [c.tag_name for c in ast.root.children] == ["rect"]


def test_adjacent_text_not_merged():
    ast = parse_svg("<svg><text> first <!-- split --> second </text></svg>")
    text_el = ast.root.children[0]
    assert [c.text_content for c in text_el.children] == ["first", "second"]


def test_tag_names_lowercased():
    ast = parse_svg('<SVG><Rect X="1"/></SVG>')
    assert ast.root.tag_name == "svg"
    assert ast.root.children[0].tag_name == "rect"
    # attribute names are not touched
    assert _names(ast.root.children[0]) == ["X"]


def test_namespace_prefix_kept_on_attributes():
    svg = f'<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="{XLINK_NS}"><use xlink:href="#a"/></svg>'
    ast = parse_svg(svg)
    use = ast.root.children[0]
    assert use.tag_name == "use"
    assert use.get("xlink:href") == "#a"
    assert "xmlns:xlink" in _names(ast.root)
    # declarations are reported where they are made, not on every descendant
    assert not any(n.startswith("xmlns") for n in _names(use))


def test_missing_xlink_namespace_injected():
    ast = parse_svg(XLINK_SVG)
    assert ast.root.get("xmlns:xlink") == XLINK_NS
    assert ast.root.children[0].get("xlink:href") == "#icon"


def test_prefixed_tag_uses_local_name():
    svg = '<svg xmlns:sodipodi="http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd"><sodipodi:namedview/></svg>'
    ast = parse_svg(svg)
    assert ast.root.children[0].tag_name == "namedview"


def test_xml_declaration_accepted():
    ast = parse_svg('<?xml version="1.0" encoding="UTF-8"?>\n<svg><path d="M0 0"/></svg>')
    assert ast.root.children[0].get("d") == "M0 0"


def test_walk_document_order():
    ast = parse_svg("<svg><g><rect/><circle/></g><path/></svg>")
    assert [n.tag_name for n in ast.root.walk()] == ["svg", "g", "rect", "circle", "path"]


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_empty_input_rejected(text):
    with pytest.raises(SvgParseError):
        parse_svg(text)


def test_non_svg_root_rejected():
    with pytest.raises(SvgParseError, match="root"):
        parse_svg("<div>not svg</div>")


def test_mismatched_tag_rejected():
    with pytest.raises(SvgParseError) as exc_info:
        parse_svg("<svg><rect></svg>")
    assert exc_info.value.line == 1


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_svg("not xml at all")


def test_internal_entity_expanded_in_text():
    svg = '<!DOCTYPE svg [<!ENTITY label "Hello">]><svg><text>&label;</text></svg>'
    ast = parse_svg(svg)
    text_el = ast.root.children[0]
    assert [c.text_content for c in text_el.children] == ["Hello"]


def test_internal_entity_expanded_in_attribute():
    svg = '<!DOCTYPE svg [<!ENTITY red "#f00">]><svg><rect fill="&red;"/></svg>'
    ast = parse_svg(svg)
    assert ast.root.children[0].get("fill") == "#f00"


def test_namespace_declarations_listed_before_attributes():
    ast = parse_svg('<svg width="24" xmlns="http://www.w3.org/2000/svg" height="24"/>')
    assert _names(ast.root) == ["xmlns", "width", "height"]
