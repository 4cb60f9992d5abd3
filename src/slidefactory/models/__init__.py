"""Model classes for the different parts of slidefactory.

- [`document`][slidefactory.models.document] contains the presentation document \
    produced by the outline parser and consumed by every later step
- [`encoding`][slidefactory.models.encoding] contains the result of a video \
    encoding run
"""

from .document import (
    BulletItem,
    BulletList,
    CodeBlock,
    ContentBlock,
    Image,
    Paragraph,
    PresentationDocument,
    Slide,
)
from .encoding import EncodeResult

__all__ = [
    "BulletItem",
    "BulletList",
    "CodeBlock",
    "ContentBlock",
    "EncodeResult",
    "Image",
    "Paragraph",
    "PresentationDocument",
    "Slide",
]
