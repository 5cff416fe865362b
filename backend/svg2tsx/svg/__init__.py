"""SVG side of the conversion: parsing and AST optimization."""

from svg2tsx.errors import SvgParseError
from svg2tsx.models.svg_ast import SvgAst, SvgAttribute, SvgMetadata, SvgNode
from svg2tsx.svg.optimizer import optimize_svg_ast
from svg2tsx.svg.parser import parse_svg

__all__ = [
    "SvgAst",
    "SvgAttribute",
    "SvgMetadata",
    "SvgNode",
    "SvgParseError",
    "optimize_svg_ast",
    "parse_svg",
]
