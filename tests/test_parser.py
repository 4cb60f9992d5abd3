from pytest import mark

from slidefactory.components.cursor import LineCursor
from slidefactory.components.parser import (
    LineKind,
    classify,
    extract_title_block,
    parse,
    parse_slide_block,
    split_blocks,
)
from slidefactory.models import (
    BulletItem,
    BulletList,
    CodeBlock,
    Image,
    Paragraph,
    PresentationDocument,
    Slide,
)


def test_empty_input() -> None:
    assert parse("") == PresentationDocument()


@mark.parametrize("text", ["   ", "\n\n", "---", "\n---\n\n---\n"])
def test_degenerate_input(text: str) -> None:
    document = parse(text)
    assert document.title is None
    assert document.subtitle is None
    assert document.slides == ()


def test_title_block() -> None:
    document = parse("# Title\n## Sub\n\n---\n\n# First\nHello")
    assert document.title == "Title"
    assert document.subtitle == "Sub"
    assert document.slides == (
        Slide(title="First", content=(Paragraph(text="Hello"),)),
    )


def test_title_only_outline() -> None:
    document = parse("# Title\n## Sub")
    assert document.title == "Title"
    assert document.subtitle == "Sub"
    assert document.slides == ()


def test_first_block_with_content_is_a_slide() -> None:
    document = parse("# Title\nSome text\n---\n# Second")
    assert document.title is None
    assert document.subtitle is None
    assert [slide.title for slide in document.slides] == ["Title", "Second"]


def test_later_title_looking_block_is_a_slide() -> None:
    document = parse("Intro\n---\n# Heading\n## Sub")
    assert document.title is None
    assert document.slides[1].title == "Heading"
    assert document.slides[1].content == (Paragraph(text="## Sub"),)


def test_nested_bullets() -> None:
    document = parse("# T\n\n---\n\n# S\n- a\n  - b\n- c")
    assert document.title == "T"
    assert document.slides == (
        Slide(
            title="S",
            content=(
                BulletList(
                    items=(
                        BulletItem(text="a", level=0),
                        BulletItem(text="b", level=1),
                        BulletItem(text="c", level=0),
                    )
                ),
            ),
        ),
    )


def test_fenced_code() -> None:
    document = parse("# S\n```python\nprint(1)\n```")
    assert document.slides[0].content == (CodeBlock(language="python", code="print(1)"),)


def test_fenced_code_preserves_blank_lines_and_indentation() -> None:
    slide = parse_slide_block(["```", "def f():", "", "    return 1", "```", "after"])
    assert slide.content == (
        CodeBlock(language="text", code="def f():\n\n    return 1"),
        Paragraph(text="after"),
    )


def test_unclosed_fence_consumes_rest_of_block() -> None:
    document = parse("# S\n```js\nlet a;\n- not a bullet\n---\n# Next")
    assert document.slides[0].content == (
        CodeBlock(language="js", code="let a;\n- not a bullet"),
    )
    assert document.slides[1].title == "Next"


def test_consecutive_images() -> None:
    slide = parse_slide_block(["![one](a.png)", "![two](b.png)"])
    assert slide.content == (
        Image(src="a.png", alt="one"),
        Image(src="b.png", alt="two"),
    )


def test_image_must_match_full_line() -> None:
    slide = parse_slide_block(["see ![one](a.png) here"])
    assert slide.content == (Paragraph(text="see ![one](a.png) here"),)


def test_bullet_run_interrupted_by_blank_line() -> None:
    slide = parse_slide_block(["- a", "", "- b"])
    assert slide.content == (
        BulletList(items=(BulletItem(text="a"),)),
        BulletList(items=(BulletItem(text="b"),)),
    )


def test_bullets_flushed_before_other_blocks() -> None:
    slide = parse_slide_block(
        ["- a", "![img](i.png)", "* b", "text", "- c", "```", "x", "```"]
    )
    assert slide.content == (
        BulletList(items=(BulletItem(text="a"),)),
        Image(src="i.png", alt="img"),
        BulletList(items=(BulletItem(text="b"),)),
        Paragraph(text="text"),
        BulletList(items=(BulletItem(text="c"),)),
        CodeBlock(language="text", code="x"),
    )


def test_skipped_levels_are_kept() -> None:
    slide = parse_slide_block(["- a", "    - b", "   - c", "\t- d"])
    assert slide.content == (
        BulletList(
            items=(
                BulletItem(text="a", level=0),
                BulletItem(text="b", level=2),
                BulletItem(text="c", level=1),
                BulletItem(text="d", level=0),
            )
        ),
    )


def test_paragraph_lines_are_not_merged() -> None:
    slide = parse_slide_block(["  first  ", "second"])
    assert slide.content == (Paragraph(text="first"), Paragraph(text="second"))


def test_slide_without_title() -> None:
    slide = parse_slide_block(["", "text", "# Not a title"])
    assert slide.title is None
    assert slide.content == (Paragraph(text="text"), Paragraph(text="# Not a title"))


def test_blank_slide_block() -> None:
    assert parse_slide_block(["", "  ", ""]) == Slide()


def test_slide_count_matches_separators() -> None:
    document = parse("a\n---\nb\n  ---  \nc\n---\n\n---\nd")
    assert [slide.content[0].text for slide in document.slides] == ["a", "b", "c", "d"]


def test_separator_must_be_full_line() -> None:
    document = parse("a --- b\n----\n---x")
    assert len(document.slides) == 1


def test_windows_newlines() -> None:
    document = parse("# T\r\n\r\n---\r\n# S\r\n- a\r\n")
    assert document.title == "T"
    assert document.slides[0].content == (BulletList(items=(BulletItem(text="a"),)),)


def test_split_blocks_keeps_indentation() -> None:
    assert split_blocks("\n\n  - a\n    - b\n\n---\n") == [["  - a", "    - b"]]


@mark.parametrize(
    ("lines", "expected"),
    [
        (["# T", "## S"], ("T", "S")),
        (["## S", "", "# T", "# U"], ("T", "S")),
        (["## S"], (None, "S")),
        (["# T", "text"], None),
        (["### T"], None),
    ],
)
def test_extract_title_block(
    lines: list[str], expected: tuple[str | None, str | None] | None
) -> None:
    assert extract_title_block(lines) == expected


@mark.parametrize(
    ("line", "kind"),
    [
        ("", LineKind.Blank),
        ("   ", LineKind.Blank),
        ("![a](b)", LineKind.Image),
        ("  ![a](b)  ", LineKind.Image),
        ("- item", LineKind.Bullet),
        ("    * item", LineKind.Bullet),
        ("-item", LineKind.Paragraph),
        ("**bold**", LineKind.Paragraph),
        ("```python", LineKind.Fence),
        ("  ```", LineKind.Fence),
        ("- ```", LineKind.Bullet),
        ("plain", LineKind.Paragraph),
    ],
)
def test_classify(line: str, kind: LineKind) -> None:
    assert classify(line) is kind


def test_cursor() -> None:
    cursor = LineCursor(["", " ", "a", "b"])
    cursor.skip_blank()
    assert cursor.position == 2
    assert cursor.peek() == "a"
    assert cursor.advance() == "a"
    assert cursor.advance() == "b"
    assert cursor.exhausted


def test_never_raises_on_odd_input() -> None:
    text = "```\n---\n#\n##\n- \n*\n![](\n![x]()\n\t\t-\tx\n```"
    document = parse(text)
    assert isinstance(document, PresentationDocument)
