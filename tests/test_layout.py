"""Tests compositeur : séquence de blocs, ordre, absence."""
from concurrent.futures import ThreadPoolExecutor

from content_renderer import CallToActionBlock, render_sequence


def promo(heading, **extra):
    return {"blockType": "callToAction", "heading": heading, **extra}


def headings(out):
    return [h.text() for h in out.find_all("h2")]


# ── Absence → rien ────────────────────────────────────────────────────────

def test_absent_or_empty_sequence_renders_nothing():
    assert render_sequence(None) is None
    assert render_sequence([]) is None
    assert render_sequence(()) is None


def test_non_sequence_renders_nothing():
    assert render_sequence({"blockType": "content"}) is None
    assert render_sequence("blocks") is None


# ── Ordre ─────────────────────────────────────────────────────────────────

def test_unknown_kind_among_known_ones():
    out = render_sequence([promo("A"), {"blockKind": "mystery"}, promo("B")])
    assert out.tag == "div"
    assert out.props["class"] == "render-blocks"
    assert len(out.children) == 2
    assert headings(out) == ["A", "B"]
    assert [c.key for c in out.children] == ["block-0", "block-2"]


def test_order_preserved_with_duplicates_and_degraded_positions():
    blocks = [
        promo("un", id="p1"),
        {"blockType": "mediaBlock", "media": "unresolved"},
        {"blockType": "content", "columns": "1"},
        promo("deux"),
        promo("un", id="p2"),
    ]
    out = render_sequence(blocks)
    assert [c.key for c in out.children] == ["p1", "block-2", "block-3", "p2"]
    assert headings(out) == ["un", "deux", "un"]


def test_models_and_dicts_mixed():
    out = render_sequence([CallToActionBlock(heading="modèle"), promo("dict")])
    assert headings(out) == ["modèle", "dict"]


def test_all_blocks_degraded_still_wrapped():
    out = render_sequence([{"blockType": "mystery"}, {"blockType": "mediaBlock", "media": "x"}])
    assert out is not None
    assert out.children == []


# ── Déterminisme ──────────────────────────────────────────────────────────

def test_repeatable_across_threads():
    blocks = [promo(str(i), buttons=[{"label": "go", "link": f"/{i}"}]) for i in range(5)]
    expected = render_sequence(blocks)
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(lambda _: render_sequence(blocks), range(8)))
    assert all(r == expected for r in results)


def test_deep_rich_text_column_does_not_break_siblings():
    node = {"type": "text", "text": "leaf"}
    for _ in range(1000):
        node = {"type": "paragraph", "children": [node]}
    blocks = [
        promo("avant"),
        {"blockType": "content", "columns": "1", "columnOne": {"root": {"children": [node]}}},
        promo("après"),
    ]
    out = render_sequence(blocks)
    assert [c.key for c in out.children] == ["block-0", "block-1", "block-2"]
    assert headings(out) == ["avant", "après"]
