"""Model classes for the presentation document.

The document is what the outline parser produces and what the renderer and the \
capture driver consume. It is serialized as YAML with the following shape:

    title: string?
    subtitle: string?
    slides:
      - title: string?
        timing: number?
        content:
          - {type: bullets, items: [{text: string, level: int}]}
          - {type: text, text: string}
          - {type: code, language: string, code: string}
          - {type: image, src: string, alt: string}

All classes are frozen: a document is built once per parse and only read afterwards.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _empty_to_none(value: object) -> object:
    if isinstance(value, str) and not value.strip():
        return None
    return value


_OptionalText = Annotated[str | None, BeforeValidator(_empty_to_none)]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class BulletItem(_Frozen):
    """One line of a bullet list."""

    text: str
    """Text of the bullet, without its marker."""

    level: int = Field(default=0, ge=0)
    """Nesting depth, 0 being the top level."""


class BulletList(_Frozen):
    """Run of consecutive bullet lines, whatever their levels."""

    type: Literal["bullets"] = "bullets"
    items: tuple[BulletItem, ...]


class Paragraph(_Frozen):
    type: Literal["text"] = "text"
    text: str


class CodeBlock(_Frozen):
    """Verbatim content of a fenced code region."""

    type: Literal["code"] = "code"
    language: str = "text"
    code: str = ""


class Image(_Frozen):
    type: Literal["image"] = "image"
    src: str
    alt: str = ""


ContentBlock = Annotated[
    BulletList | Paragraph | CodeBlock | Image, Field(discriminator="type")
]
"""Any block of slide content, tagged by its `type` field."""


class Slide(_Frozen):
    title: _OptionalText = None
    """Heading of the slide, if it has one."""

    content: tuple[ContentBlock, ...] = ()
    """Blocks of the slide, in source order."""

    timing: float | None = Field(default=None, gt=0)
    """Seconds the slide stays on screen in videos. Never set by the parser, but \
    can be added by hand to the YAML document."""


class PresentationDocument(_Frozen):
    """Top of the hierarchy of a parsed outline."""

    title: _OptionalText = None
    subtitle: _OptionalText = None
    slides: tuple[Slide, ...] = ()
