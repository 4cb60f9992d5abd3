"""Parse plain-text outlines into presentation documents.

An outline is split into blocks by lines made only of `---`. The first block is the \
title block if it only holds `#` and `##` headings. Every other block is a slide: an \
optional `# Title` line followed by content, where each non-blank line is, by order \
of precedence, an image (`![alt](src)`), a bullet (`- text` or `* text`, indented by \
two spaces per level), a fenced code block or a paragraph.

Parsing never fails: anything that does not match a construct ends up as a paragraph.
"""

from collections.abc import Iterator
from enum import Enum
from logging import getLogger
from pathlib import Path
from re import MULTILINE
from re import compile as re_compile

from ..exceptions import InputNotFoundError
from ..models import (
    BulletItem,
    BulletList,
    CodeBlock,
    ContentBlock,
    Image,
    Paragraph,
    PresentationDocument,
    Slide,
)
from .cursor import LineCursor
from .protocols import ParserProtocol

_logger = getLogger(__name__)

_SEPARATOR_RE = re_compile(r"^[^\S\n]*---[^\S\n]*$", MULTILINE)
_TITLE_BLOCK_LINE_RE = re_compile(r"^#{1,2}\s+\S")
_H1_RE = re_compile(r"^#\s+(.+)$")
_H2_RE = re_compile(r"^##\s+(.+)$")
_IMAGE_RE = re_compile(r"^!\[([^\]]*)\]\(([^)]+)\)$")
_BULLET_RE = re_compile(r"^(\s*)[-*]\s+(\S.*)$")
_FENCE = "```"
_DEFAULT_LANGUAGE = "text"

STARTER_OUTLINE = """\
# My Presentation
## By Author Name

---

# First Slide
- Point one
- Point two

---

# Second Slide
Some content here.
"""


class LineKind(Enum):
    Blank = "blank"
    Image = "image"
    Bullet = "bullet"
    Fence = "fence"
    Paragraph = "paragraph"


def classify(line: str) -> LineKind:
    """Tell which content rule applies to a line.

    Rules are tried in order of precedence: image, bullet, fence, paragraph.

    Args:
        line: Raw line, with its indentation.

    Returns:
        The kind of the line.
    """
    trimmed = line.strip()
    if not trimmed:
        return LineKind.Blank
    if _IMAGE_RE.match(trimmed):
        return LineKind.Image
    if _BULLET_RE.match(line):
        return LineKind.Bullet
    if trimmed.startswith(_FENCE):
        return LineKind.Fence
    return LineKind.Paragraph


def split_blocks(text: str) -> list[list[str]]:
    """Split an outline into the lines of its non-empty blocks.

    Leading and trailing blank lines of each block are dropped. Indentation is kept.
    """
    blocks = []
    for raw_block in _SEPARATOR_RE.split(_normalize_newlines(text)):
        if not raw_block.strip():
            continue
        lines = raw_block.split("\n")
        start = next(i for i, line in enumerate(lines) if line.strip())
        end = max(i for i, line in enumerate(lines) if line.strip()) + 1
        blocks.append(lines[start:end])
    return blocks


def extract_title_block(lines: list[str]) -> tuple[str | None, str | None] | None:
    """Read the presentation title and subtitle from a block, if it is a title block.

    Args:
        lines: Lines of the block.

    Returns:
        None if some non-blank line of the block is not a `#` or `##` heading. \
        Otherwise the text of the first `#` heading and of the first `##` heading \
        (each None if absent).
    """
    headings = [line.strip() for line in lines if line.strip()]
    if not all(_TITLE_BLOCK_LINE_RE.match(heading) for heading in headings):
        return None
    title = next(
        (m.group(1).strip() for h in headings if (m := _H1_RE.match(h))), None
    )
    subtitle = next(
        (m.group(1).strip() for h in headings if (m := _H2_RE.match(h))), None
    )
    return title, subtitle


def parse_slide_block(lines: list[str]) -> Slide:
    cursor = LineCursor(lines)
    title = _take_title(cursor)
    return Slide(title=title, content=tuple(_parse_content(cursor)))


def parse(text: str) -> PresentationDocument:
    """Parse an outline into a presentation document.

    Args:
        text: Content of the outline.

    Returns:
        The parsed document. Degenerate input (including the empty string) gives a \
        document without title and slides.
    """
    blocks = split_blocks(text)
    title = subtitle = None
    if blocks and (title_block := extract_title_block(blocks[0])) is not None:
        title, subtitle = title_block
        blocks = blocks[1:]
    return PresentationDocument(
        title=title,
        subtitle=subtitle,
        slides=tuple(parse_slide_block(block) for block in blocks),
    )


def _normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _take_title(cursor: LineCursor) -> str | None:
    cursor.skip_blank()
    if cursor.exhausted:
        return None
    match = _H1_RE.match(cursor.peek().strip())
    if match is None:
        return None
    cursor.advance()
    return match.group(1).strip()


def _parse_content(cursor: LineCursor) -> Iterator[ContentBlock]:
    pending: list[BulletItem] = []

    def flush() -> Iterator[BulletList]:
        if pending:
            yield BulletList(items=tuple(pending))
            pending.clear()

    while not cursor.exhausted:
        match classify(cursor.peek()):
            case LineKind.Blank:
                cursor.advance()
                yield from flush()
            case LineKind.Image:
                yield from flush()
                yield _take_image(cursor)
            case LineKind.Bullet:
                pending.append(_take_bullet(cursor))
            case LineKind.Fence:
                yield from flush()
                yield _take_code(cursor)
            case LineKind.Paragraph:
                yield from flush()
                yield Paragraph(text=cursor.advance().strip())
    yield from flush()


def _take_image(cursor: LineCursor) -> Image:
    match = _IMAGE_RE.match(cursor.advance().strip())
    assert match is not None
    return Image(alt=match.group(1), src=match.group(2))


def _take_bullet(cursor: LineCursor) -> BulletItem:
    match = _BULLET_RE.match(cursor.advance())
    assert match is not None
    return BulletItem(text=match.group(2).strip(), level=len(match.group(1)) // 2)


def _take_code(cursor: LineCursor) -> CodeBlock:
    language = cursor.advance().strip()[len(_FENCE) :].strip() or _DEFAULT_LANGUAGE
    code_lines = []
    while not cursor.exhausted:
        line = cursor.advance()
        if line.strip().startswith(_FENCE):
            break
        code_lines.append(line)
    return CodeBlock(language=language, code="\n".join(code_lines))


class OutlineParser(ParserProtocol):
    """Parse outlines from strings or files."""

    def parse(self, text: str) -> PresentationDocument:
        document = parse(text)
        _logger.debug(
            "Parsed outline into %d slide(s), title %r",
            len(document.slides),
            document.title,
        )
        return document

    def parse_path(self, outline_path: Path) -> PresentationDocument:
        """Read and parse an outline file.

        Args:
            outline_path: Path to the outline.

        Raises:
            InputNotFoundError: Raised if the outline cannot be read.

        Returns:
            The parsed document.
        """
        try:
            text = outline_path.read_text(encoding="utf8")
        except (OSError, UnicodeDecodeError) as e:
            msg = (
                f"could not read outline {outline_path} ({e}). Create an outline "
                f"first, for example:\n\n{STARTER_OUTLINE}"
            )
            raise InputNotFoundError(msg) from e
        return self.parse(text)
