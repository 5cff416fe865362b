"""SVG optimizer — rebuilds an SvgAst with redundant attributes and empty groups removed.

The input tree is never mutated: every node and attribute in the result is a new object,
so one parsed AST can be re-optimized with different options.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from svg2tsx.models.options import OptimizerOptions, coerce_options
from svg2tsx.models.svg_ast import SvgAst, SvgAttribute, SvgNode

logger = logging.getLogger(__name__)

# SVG presentation defaults; only these exact values are dropped.
_DEFAULT_VALUES: dict[str, tuple[str, ...]] = {
    "fill": ("black", "#000", "#000000"),
    "stroke": ("none",),
}

_NOOP_TRANSFORMS = ("translate(0,0)", "translate(0 0)", "translate(0, 0)")


def optimize_svg_ast(
    ast: SvgAst,
    options: OptimizerOptions | Mapping[str, Any] | None = None,
) -> SvgAst:
    """Return an optimized copy of ``ast``. With no options set, the copy equals the input."""
    opts = coerce_options(OptimizerOptions, options)
    optimized = SvgAst(
        root=_optimize_node(ast.root, opts),
        metadata=ast.metadata.model_copy(),
    )
    logger.debug(
        "Optimized SVG: %d -> %d nodes",
        sum(1 for _ in ast.root.walk()),
        sum(1 for _ in optimized.root.walk()),
    )
    return optimized


def _optimize_node(node: SvgNode, options: OptimizerOptions) -> SvgNode:
    attributes = [attr.model_copy() for attr in node.attributes]

    # Order matters: each pass sees the output of the previous one
    if options.remove_data_attrs:
        attributes = remove_data_attributes(attributes)
    if options.remove_ids:
        attributes = remove_id_attributes(attributes)
    if options.remove_default_attrs:
        attributes = remove_default_attributes(attributes)
    if options.optimize_transforms:
        attributes = remove_noop_transforms(attributes)

    children = [_optimize_node(child, options) for child in node.children]
    if options.remove_empty_groups:
        children = remove_empty_groups(children)

    return SvgNode(
        type=node.type,
        tag_name=node.tag_name,
        attributes=attributes,
        children=children,
        text_content=node.text_content,
    )


def remove_data_attributes(attributes: list[SvgAttribute]) -> list[SvgAttribute]:
    return [attr for attr in attributes if not attr.name.startswith("data-")]


def remove_id_attributes(attributes: list[SvgAttribute]) -> list[SvgAttribute]:
    return [attr for attr in attributes if attr.name != "id"]


def remove_default_attributes(attributes: list[SvgAttribute]) -> list[SvgAttribute]:
    """Drop fill="black"/"#000"/"#000000" and stroke="none" (case-insensitive values)."""
    kept = []
    for attr in attributes:
        defaults = _DEFAULT_VALUES.get(attr.name)
        if defaults and attr.value.lower() in defaults:
            continue
        kept.append(attr)
    return kept


def remove_noop_transforms(attributes: list[SvgAttribute]) -> list[SvgAttribute]:
    """Drop transform attributes that spell out a zero translation."""
    return [
        attr
        for attr in attributes
        if not (attr.name == "transform" and attr.value.strip() in _NOOP_TRANSFORMS)
    ]


def remove_empty_groups(children: list[SvgNode]) -> list[SvgNode]:
    """Drop <g> children with no children of their own. Expects already-optimized children."""
    return [child for child in children if not (child.tag_name == "g" and not child.children)]
