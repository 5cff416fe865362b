"""TSX generator — renders an SvgAst as the JSX body of a React component."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from svg2tsx.models.options import GeneratorOptions, TemplateOptions, coerce_options
from svg2tsx.models.svg_ast import SvgAst, SvgAttribute, SvgNode
from svg2tsx.tsx.templates import get_template

logger = logging.getLogger(__name__)

_INDENT = "  "
# Levels of indentation between the component body and the root JSX element
_BASE_DEPTH = 2

_NUMERIC_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")
_KEBAB_RE = re.compile(r"-([a-z])")

_RENAMED_ATTRS = {
    "class": "className",
    "xlink:href": "href",
}

_REF_MARKER = "ref={ref}"
_SPREAD_MARKER = "...props"


def generate_tsx(
    ast: SvgAst,
    options: GeneratorOptions | Mapping[str, Any] | None = None,
) -> str:
    """Render ``ast`` as a complete component definition (no imports)."""
    opts = coerce_options(GeneratorOptions, options)
    svg_content = node_to_jsx(ast.root, opts, depth=0)
    template_options = TemplateOptions(**opts.model_dump(), svg_content=svg_content)
    code = get_template(template_options)
    logger.debug("Generated %s: %d chars", opts.component_name, len(code))
    return code


def node_to_jsx(node: SvgNode, options: GeneratorOptions, depth: int = 0) -> str:
    if node.is_text:
        return node.text_content or ""

    tag = node.tag_name
    attributes = transform_attributes(node.attributes, options, is_root=depth == 0)

    if not node.children:
        return f"<{tag} {attributes} />" if attributes else f"<{tag} />"

    open_tag = f"<{tag} {attributes}>" if attributes else f"<{tag}>"
    close_tag = f"</{tag}>"

    if len(node.children) == 1 and node.children[0].is_text:
        return f"{open_tag}{node.children[0].text_content or ''}{close_tag}"

    indent = _INDENT * (depth + _BASE_DEPTH)
    lines = [open_tag]
    for child in node.children:
        lines.append(f"{indent}{_INDENT}{node_to_jsx(child, options, depth + 1)}")
    lines.append(f"{indent}{close_tag}")
    return "\n".join(lines)


def transform_attributes(
    attributes: list[SvgAttribute],
    options: GeneratorOptions,
    is_root: bool = False,
) -> str:
    """JSX attribute string for one element; the root <svg> gets ref/props markers first."""
    rendered: list[str] = []

    if is_root and options.spread_props:
        if options.use_forward_ref:
            rendered.append(_REF_MARKER)
        rendered.append(_SPREAD_MARKER)

    for attr in attributes:
        name, value = attr.name, attr.value
        if name == "xmlns" or name.startswith("xmlns:"):
            continue
        if name == "style" and not value.strip():
            continue
        jsx_name = transform_attribute_name(name)
        rendered.append(f"{jsx_name}={transform_attribute_value(jsx_name, value)}")

    return " ".join(rendered)


def transform_attribute_name(name: str) -> str:
    """class → className, xlink:href → href, kebab-case → camelCase."""
    renamed = _RENAMED_ATTRS.get(name)
    if renamed:
        return renamed
    return kebab_to_camel(name)


def transform_attribute_value(name: str, value: str) -> str:
    if name == "style":
        return transform_style_value(value)
    if is_numeric_value(value):
        return f"{{{value}}}"
    # TODO: escape embedded double quotes once callers agree on the escaping form
    return f'"{value}"'


def transform_style_value(style: str) -> str:
    """Flat CSS declarations → JSX style object literal."""
    entries: list[str] = []
    for declaration in style.split(";"):
        prop, _, val = declaration.partition(":")
        prop, val = prop.strip(), val.strip()
        if not prop or not val:
            continue
        entries.append(f'{kebab_to_camel(prop)}: "{val}"')

    if not entries:
        return "{{}}"
    return "{{ " + ", ".join(entries) + " }}"


def kebab_to_camel(name: str) -> str:
    return _KEBAB_RE.sub(lambda m: m.group(1).upper(), name)


def is_numeric_value(value: str) -> bool:
    """Plain integer or decimal (``24``, ``-1.5``); not ``1e3``, ``50%`` or ``.5``."""
    return _NUMERIC_RE.fullmatch(value) is not None
