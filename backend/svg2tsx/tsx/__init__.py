"""TSX side of the conversion: JSX rendering and component templates."""

from svg2tsx.models.options import GeneratorOptions, TemplateOptions
from svg2tsx.tsx.generator import generate_tsx
from svg2tsx.tsx.templates import get_template

__all__ = [
    "GeneratorOptions",
    "TemplateOptions",
    "generate_tsx",
    "get_template",
]
