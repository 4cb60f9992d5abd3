from pathlib import Path

from pytest import fixture, mark

from slidefactory.components.bullets import BulletNode, nest_bullets
from slidefactory.components.renderer import (
    HtmlRenderer,
    builtin_stylesheet,
    resolve_stylesheet,
)
from slidefactory.configuring.settings import TransitionSettings
from slidefactory.models import (
    BulletItem,
    BulletList,
    CodeBlock,
    Image,
    Paragraph,
    PresentationDocument,
    Slide,
)


@fixture
def renderer() -> HtmlRenderer:
    return HtmlRenderer(default_timing=5)


def _render(renderer: HtmlRenderer, document: PresentationDocument) -> str:
    return renderer.render_to_str(document, "/* css */", TransitionSettings())


def test_nest_bullets() -> None:
    items = [
        BulletItem(text="a", level=0),
        BulletItem(text="b", level=1),
        BulletItem(text="c", level=3),
        BulletItem(text="d", level=1),
        BulletItem(text="e", level=0),
    ]
    assert nest_bullets(items) == [
        BulletNode("a", [BulletNode("b", [BulletNode("c")]), BulletNode("d")]),
        BulletNode("e"),
    ]


def test_nest_bullets_starting_deep() -> None:
    items = [BulletItem(text="a", level=2), BulletItem(text="b", level=0)]
    assert nest_bullets(items) == [BulletNode("a"), BulletNode("b")]


def test_render_document(renderer: HtmlRenderer) -> None:
    document = PresentationDocument(
        title="Deck",
        subtitle="Sub",
        slides=(
            Slide(
                title="First",
                timing=2,
                content=(
                    BulletList(
                        items=(
                            BulletItem(text="a", level=0),
                            BulletItem(text="b", level=1),
                        )
                    ),
                    Paragraph(text="para"),
                    CodeBlock(language="python", code="print(1)"),
                    Image(src="img.png", alt="alt"),
                ),
            ),
            Slide(),
        ),
    )
    html = _render(renderer, document)
    assert "<title>Deck</title>" in html
    assert '<section class="title-slide">' in html
    assert "<h1>Deck</h1>" in html
    assert "<h2>Sub</h2>" in html
    assert "<h2>First</h2>" in html
    assert "<ul><li>a<ul><li>b</li></ul></li></ul>" in html
    assert "<p>para</p>" in html
    assert '<pre><code class="language-python">print(1)</code></pre>' in html
    assert '<img src="img.png" alt="alt" />' in html
    assert 'data-timing="2.0"' in html
    assert 'data-timing="5"' in html
    assert 'transition: "fade"' in html
    assert 'transitionSpeed: "default"' in html
    assert "/* css */" in html


def test_render_without_title(renderer: HtmlRenderer) -> None:
    html = _render(renderer, PresentationDocument(slides=(Slide(title="Only"),)))
    assert "<title>Presentation</title>" in html
    assert "title-slide" not in html
    assert html.count("<section") == 1


def test_render_escapes_user_text(renderer: HtmlRenderer) -> None:
    document = PresentationDocument(
        title="<script>",
        slides=(
            Slide(
                title="a & b",
                content=(
                    BulletList(items=(BulletItem(text="<li>"),)),
                    Paragraph(text='"quoted"'),
                    CodeBlock(language='x"y', code="if a < b && c > d:"),
                    Image(src='a.png" onerror="x', alt="it's"),
                ),
            ),
        ),
    )
    html = _render(renderer, document)
    assert "<h1>&lt;script&gt;</h1>" in html
    assert "<h2>a &amp; b</h2>" in html
    assert "<li>&lt;li&gt;</li>" in html
    assert "<p>&#34;quoted&#34;</p>" in html
    assert 'class="language-x&#34;y"' in html
    assert "if a &lt; b &amp;&amp; c &gt; d:" in html
    assert 'src="a.png&#34; onerror=&#34;x"' in html
    assert 'alt="it&#39;s"' in html


def test_render_to_path(renderer: HtmlRenderer, tmp_path: Path) -> None:
    output = tmp_path / "out" / "slides.html"
    document = PresentationDocument(slides=(Slide(title="S"),))
    renderer.render_to_path(document, "", TransitionSettings(style="zoom"), output)
    content = output.read_text(encoding="utf8")
    assert 'transition: "zoom"' in content
    assert list(output.parent.iterdir()) == [output]


def test_resolve_stylesheet(tmp_path: Path) -> None:
    local, user = tmp_path / "local", tmp_path / "user"
    local.mkdir()
    user.mkdir()
    (user / "dark.css").write_text("user dark", encoding="utf8")
    (user / "minimal.css").write_text("user minimal", encoding="utf8")
    (local / "dark.css").write_text("local dark", encoding="utf8")
    assert resolve_stylesheet("dark", [local, user]) == "local dark"
    assert resolve_stylesheet("corporate", [local, user]) == "user minimal"
    assert resolve_stylesheet("corporate", [local]) == builtin_stylesheet()
    assert resolve_stylesheet("minimal", [tmp_path / "missing"]) == builtin_stylesheet()


def test_builtin_stylesheet() -> None:
    assert ".reveal" in builtin_stylesheet()


@mark.parametrize(
    ("speed", "reveal_speed"),
    [(0, "fast"), (0.4, "fast"), (0.8, "default"), (1.0, "default"), (1.5, "slow")],
)
def test_render_transition_speed(
    renderer: HtmlRenderer, speed: float, reveal_speed: str
) -> None:
    html = renderer.render_to_str(
        PresentationDocument(slides=(Slide(title="S"),)),
        "",
        TransitionSettings(style="slide", speed=speed),
    )
    assert 'transition: "slide"' in html
    assert f'transitionSpeed: "{reveal_speed}"' in html
