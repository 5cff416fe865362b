"""Parsed SVG tree model — the unit passed between parser, optimizer and generator."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

TEXT_TAG = "#text"


class _AstModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SvgAttribute(_AstModel):
    """Raw XML attribute, name and value as written in the source."""

    name: str
    value: str


class SvgNode(_AstModel):
    type: Literal["element", "text"] = "element"
    tag_name: str
    attributes: list[SvgAttribute] = Field(default_factory=list)
    children: list[SvgNode] = Field(default_factory=list)
    text_content: str | None = None

    @classmethod
    def text(cls, content: str) -> SvgNode:
        return cls(type="text", tag_name=TEXT_TAG, text_content=content)

    @property
    def is_text(self) -> bool:
        return self.type == "text"

    def get(self, name: str) -> str | None:
        """Value of the attribute called ``name``, or None."""
        for attr in self.attributes:
            if attr.name == name:
                return attr.value
        return None

    def walk(self) -> Iterator[SvgNode]:
        """Depth-first, document-order iteration over this node and its descendants."""
        yield self
        for child in self.children:
            yield from child.walk()


class SvgMetadata(_AstModel):
    view_box: str | None = None
    xmlns: str | None = None
    width: str | None = None
    height: str | None = None


class SvgAst(_AstModel):
    root: SvgNode
    metadata: SvgMetadata = Field(default_factory=SvgMetadata)
