"""SVG parser — facade over lxml.

Converts raw SVG string → SvgAst (element/text tree + root metadata).
"""

from __future__ import annotations

import logging
import re

from lxml import etree

from svg2tsx.errors import SvgParseError
from svg2tsx.models.svg_ast import SvgAst, SvgAttribute, SvgMetadata, SvgNode

logger = logging.getLogger(__name__)

XLINK_NS = "http://www.w3.org/1999/xlink"
_XML_NS = "http://www.w3.org/XML/1998/namespace"

_SVG_OPEN_RE = re.compile(r"<svg")

# Root attributes copied into SvgMetadata (source name -> field)
_METADATA_ATTRS = {
    "viewBox": "view_box",
    "xmlns": "xmlns",
    "width": "width",
    "height": "height",
}


def parse_svg(svg_text: str) -> SvgAst:
    """Parse raw SVG string into an SvgAst.

    Raises SvgParseError for empty input, malformed XML, or a root that is not <svg>.
    """
    if not svg_text or not svg_text.strip():
        raise SvgParseError("SVG string is empty")

    processed = _ensure_xlink_namespace(svg_text.strip())

    parser = etree.XMLParser(
        encoding="utf-8",
        resolve_entities="internal",
        no_network=True,
        remove_comments=False,
    )
    try:
        root = etree.fromstring(processed.encode("utf-8"), parser)
    except etree.XMLSyntaxError as e:
        raise SvgParseError(f"SVG parsing failed: {e.msg}", line=e.lineno, column=e.offset) from e

    if root is None or not isinstance(root.tag, str) or _local_name(root).lower() != "svg":
        raise SvgParseError("SVG root element not found")

    node = _element_to_node(root, parent_nsmap={})
    metadata = _extract_metadata(node)

    logger.info(
        "Parsed SVG: %d nodes, viewBox=%s",
        sum(1 for _ in node.walk()),
        metadata.view_box,
    )
    return SvgAst(root=node, metadata=metadata)


def _ensure_xlink_namespace(svg_text: str) -> str:
    """Declare xmlns:xlink on the opening <svg tag when xlink: is used undeclared."""
    if "xlink:" in svg_text and "xmlns:xlink" not in svg_text:
        logger.debug("Injecting missing xmlns:xlink declaration")
        return _SVG_OPEN_RE.sub(f'<svg xmlns:xlink="{XLINK_NS}"', svg_text, count=1)
    return svg_text


def _local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def _element_to_node(element: etree._Element, parent_nsmap: dict) -> SvgNode:
    return SvgNode(
        type="element",
        tag_name=_local_name(element).lower(),
        attributes=_extract_attributes(element, parent_nsmap),
        children=_extract_children(element),
    )


def _extract_attributes(element: etree._Element, parent_nsmap: dict) -> list[SvgAttribute]:
    """Namespace declarations made on this element first, then attributes in document order.

    lxml resolves prefixed attributes to ``{uri}local``; the source prefix is restored
    from the element's namespace map so names stay as written (``xlink:href``).
    """
    attributes: list[SvgAttribute] = []
    nsmap = element.nsmap

    # lxml keeps declarations apart from attributes, so their source position is lost;
    # they are listed first. The generator never renders them.
    for prefix, uri in nsmap.items():
        if parent_nsmap.get(prefix) == uri:
            continue
        name = "xmlns" if prefix is None else f"xmlns:{prefix}"
        attributes.append(SvgAttribute(name=name, value=uri))

    for key, value in element.attrib.items():
        attributes.append(SvgAttribute(name=_attribute_name(key, nsmap), value=value))

    return attributes


def _attribute_name(key: str, nsmap: dict) -> str:
    if not key.startswith("{"):
        return key
    qname = etree.QName(key)
    if qname.namespace == _XML_NS:
        return f"xml:{qname.localname}"
    for prefix, uri in nsmap.items():
        if prefix is not None and uri == qname.namespace:
            return f"{prefix}:{qname.localname}"
    return qname.localname


def _extract_children(element: etree._Element) -> list[SvgNode]:
    """Element and non-blank text children in document order; comments and PIs are skipped."""
    children: list[SvgNode] = []
    _append_text(children, element.text)

    for child in element:
        if isinstance(child.tag, str):
            children.append(_element_to_node(child, parent_nsmap=element.nsmap))
        # Text following a child (including a skipped comment) lives in its tail
        _append_text(children, child.tail)

    return children


def _append_text(children: list[SvgNode], text: str | None) -> None:
    if text is None:
        return
    trimmed = text.strip()
    if trimmed:
        children.append(SvgNode.text(trimmed))


def _extract_metadata(root: SvgNode) -> SvgMetadata:
    fields: dict[str, str] = {}
    for attr in root.attributes:
        field_name = _METADATA_ATTRS.get(attr.name)
        if field_name and attr.value:
            fields[field_name] = attr.value
    return SvgMetadata(**fields)
