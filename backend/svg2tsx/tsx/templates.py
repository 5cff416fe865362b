"""TSX component skeletons — wraps a generated JSX body in one of four component shapes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from svg2tsx.models.options import TemplateOptions, coerce_options

_PROPS_TYPE = "React.SVGProps<SVGSVGElement>"
_REF_TYPE = "SVGSVGElement"
_UNTYPED = "any"


def get_template(options: TemplateOptions | Mapping[str, Any]) -> str:
    """Select the skeleton for (use_memo, use_forward_ref) and insert the JSX body."""
    opts = coerce_options(TemplateOptions, options)
    name = opts.component_name
    content = opts.svg_content
    props_param = "props" if opts.spread_props else "_props"

    if opts.use_forward_ref:
        props_type = _PROPS_TYPE if opts.typescript else _UNTYPED
        ref_type = _REF_TYPE if opts.typescript else _UNTYPED
        inner = f"{name}Component" if opts.use_memo else name
        forward_ref = (
            f"React.forwardRef<{ref_type}, {props_type}>(\n"
            f"  ({props_param}, ref) => {{\n"
            f"    return (\n"
            f"      {content}\n"
            f"    );\n"
            f"  }}\n"
            f")"
        )
        if opts.use_memo:
            return (
                f"const {inner} = {forward_ref};\n"
                f"\n"
                f"{inner}.displayName = '{name}';\n"
                f"\n"
                f"export const {name} = React.memo({inner});"
            )
        return (
            f"export const {name} = {forward_ref};\n"
            f"\n"
            f"{name}.displayName = '{name}';"
        )

    props_type = f": {_PROPS_TYPE}" if opts.typescript else ""
    arrow = (
        f"({props_param}{props_type}) => {{\n"
        f"  return (\n"
        f"    {content}\n"
        f"  );\n"
        f"}};"
    )
    if opts.use_memo:
        return (
            f"const {name}Component = {arrow}\n"
            f"\n"
            f"export const {name} = React.memo({name}Component);"
        )
    return f"export const {name} = {arrow}"
