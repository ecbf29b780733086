"""Tests renderer texte riche : dispatch par type de nœud, clés, dégradation."""
import copy

from content_renderer import DocumentRoot, Element, render_document, render_node
from content_renderer.core.schemas import MAX_DEPTH


# ── Helpers ───────────────────────────────────────────────────────────────

def text(value, fmt=0):
    return {"type": "text", "text": value, "format": fmt, "version": 1}


def paragraph(*children):
    return {"type": "paragraph", "version": 1, "format": "", "children": list(children)}


def doc(*nodes):
    return {"root": {"type": "root", "version": 1, "format": "", "children": list(nodes)}}


def nested_paragraphs(depth, leaf="leaf"):
    node = text(leaf)
    for _ in range(depth):
        node = paragraph(node)
    return doc(node)


def nesting(element):
    level = 0
    while isinstance(element, Element) and element.children:
        element = element.children[0]
        level += 1
    return level


# ── Absence → rien ────────────────────────────────────────────────────────

def test_absent_root_renders_nothing():
    assert render_document(None) is None
    assert render_document({"root": None}) is None
    assert render_document({"root": {"children": []}}) is None
    assert render_document({"children": []}) is None
    assert render_document({}) is None


def test_non_object_root_renders_nothing():
    assert render_document("raw") is None
    assert render_document(["a"]) is None


def test_all_children_malformed_renders_nothing():
    assert render_document({"root": {"children": [None, 5, "x"]}}) is None
    assert render_document(doc({"type": "horizontalrule"}, {"type": "text", "text": 1})) is None


# ── Scénarios ─────────────────────────────────────────────────────────────

def test_single_paragraph_plain_text():
    out = render_document(doc(paragraph(text("Hello"))))
    assert out.tag == "div"
    assert "prose" in out.props["class"]
    assert len(out.children) == 1

    p = out.children[0]
    assert p.tag == "p"
    assert p.key == "paragraph-0"
    assert p.text() == "Hello"
    leaf = p.children[0]
    assert leaf.tag is None
    assert leaf.children == ["Hello"]
    for tag in ("strong", "em", "s", "u", "code"):
        assert out.find(tag) is None


def test_bold_code_text_node():
    out = render_document(doc(paragraph(text("X", 17))))
    strong = out.find("strong")
    assert strong is not None
    assert strong.children[0].tag == "code"
    assert strong.text() == "X"


def test_kind_vocabulary_accepted():
    out = render_document({"children": [{"kind": "paragraph", "children": [{"kind": "text", "text": "Hi"}]}]})
    assert out.children[0].tag == "p"
    assert out.text() == "Hi"


def test_class_name_appended():
    out = render_document(doc(paragraph(text("a"))), class_name="extra")
    assert out.props["class"].endswith(" extra")


# ── Titres ────────────────────────────────────────────────────────────────

def test_heading_levels_distinct():
    classes = set()
    for level in range(1, 7):
        node = render_node({"type": "heading", "tag": f"h{level}", "children": [text("T")]}, 0)
        assert node.tag == f"h{level}"
        classes.add(node.props["class"])
    assert len(classes) == 6


def test_heading_fallback_h2():
    h2 = render_node({"type": "heading", "tag": "h2", "children": [text("T")]}, 0)
    for tag in (None, "h9", "title", 3):
        node = render_node({"type": "heading", "tag": tag, "children": [text("T")]}, 0)
        assert node.tag == "h2"
        assert node.props == h2.props


# ── Listes, citations, liens, sauts de ligne ──────────────────────────────

def test_list_kinds():
    item = {"type": "listitem", "children": [text("i")]}
    assert render_node({"type": "list", "listType": "number", "children": [item]}, 0).tag == "ol"
    assert render_node({"type": "list", "listKind": "ordered", "children": [item]}, 0).tag == "ol"
    assert render_node({"type": "list", "listType": "bullet", "children": [item]}, 0).tag == "ul"
    assert render_node({"type": "list", "children": [item]}, 0).tag == "ul"
    assert render_node({"type": "list", "listType": "check", "children": [item]}, 0).tag == "ul"


def test_list_items_rendered_in_order():
    node = render_node({"type": "list", "listType": "number", "children": [
        {"type": "listitem", "children": [text("un")]},
        {"type": "listitem", "children": [text("deux")]},
    ]}, 0)
    assert [li.tag for li in node.children] == ["li", "li"]
    assert [li.key for li in node.children] == ["listitem-0", "listitem-1"]
    assert [li.text() for li in node.children] == ["un", "deux"]


def test_quote():
    node = render_node({"type": "quote", "children": [text("cité")]}, 2)
    assert node.tag == "blockquote"
    assert node.key == "quote-2"
    assert node.text() == "cité"


def test_link_same_window():
    node = render_node({"type": "link", "url": "/a", "children": [text("lien")]}, 0)
    assert node.tag == "a"
    assert node.props["href"] == "/a"
    assert "target" not in node.props
    assert "rel" not in node.props


def test_link_new_window_sets_target_and_rel_together():
    node = render_node({"type": "link", "fields": {"url": "https://x.io", "newTab": True}, "children": [text("x")]}, 0)
    assert node.props["href"] == "https://x.io"
    assert node.props["target"] == "_blank"
    assert node.props["rel"] == "noopener noreferrer"

    flat = render_node({"type": "link", "linkTarget": "/b", "opensNewWindow": True, "children": []}, 0)
    assert flat.props["target"] == "_blank"
    assert flat.props["rel"] == "noopener noreferrer"


def test_link_nested_fields_win_and_fallback_href():
    node = render_node({"type": "link", "url": "/flat", "fields": {"url": "/nested"}, "children": []}, 0)
    assert node.props["href"] == "/nested"
    assert render_node({"type": "link", "children": [text("x")]}, 0).props["href"] == "#"


def test_linebreak():
    node = render_node({"type": "linebreak", "version": 1}, 4)
    assert node.tag == "br"
    assert node.key == "linebreak-4"
    assert node.children == []


# ── Types inconnus ────────────────────────────────────────────────────────

def test_unknown_kind_with_children_passes_through():
    node = render_node({"type": "futureKind123", "children": [text("A"), text("B")]}, 0)
    assert node.tag is None
    assert node.key == "futureKind123-0"
    assert node.text() == "AB"
    for tag in ("p", "h2", "ul", "ol", "li", "blockquote", "a"):
        assert node.find(tag) is None


def test_unknown_kind_without_children_renders_nothing():
    assert render_node({"type": "horizontalrule", "version": 1}, 0) is None
    assert render_node({"type": "upload", "children": []}, 0) is None


def test_missing_kind_passes_children_through():
    node = render_node({"children": [text("orphelin")]}, 0)
    assert node.text() == "orphelin"


# ── Dégradation ───────────────────────────────────────────────────────────

def test_malformed_sibling_keeps_positional_keys():
    out = render_node(paragraph(text("a"), "garbage", {"type": "text", "text": 123}, text("b")), 0)
    assert [c.key for c in out.children] == ["text-0", "text-3"]
    assert out.text() == "ab"


def test_malformed_fields_degrade():
    out = render_document(doc(
        {"type": "heading", "tag": 5, "children": "not-a-list"},
        paragraph(text("ok")),
        {"type": "text", "text": "x", "format": "bold"},
    ))
    assert out.children[0].tag == "h2"
    assert out.children[0].children == []
    assert out.children[1].text() == "ok"
    assert out.children[2].children == ["x"]


def test_non_dict_node_renders_nothing():
    assert render_node(None, 0) is None
    assert render_node(42, 0) is None


# ── Idempotence ───────────────────────────────────────────────────────────

def test_render_is_idempotent_and_input_untouched():
    data = doc(
        {"type": "heading", "tag": "h1", "children": [text("Titre", 1)]},
        paragraph(text("a"), {"type": "linebreak"}, text("b", 2)),
        {"type": "list", "listType": "bullet", "children": [{"type": "listitem", "children": [text("i")]}]},
    )
    snapshot = copy.deepcopy(data)
    first = render_document(data)
    second = render_document(data)
    assert first == second
    assert first.model_dump() == second.model_dump()
    assert data == snapshot


def test_document_root_model_accepted():
    root = DocumentRoot.model_validate(doc(paragraph(text("m"))))
    out = render_document(root)
    assert isinstance(out, Element)
    assert out.text() == "m"


# ── Profondeur ────────────────────────────────────────────────────────────

def test_moderately_deep_document_renders_leaf():
    out = render_document(nested_paragraphs(50))
    assert out.text() == "leaf"


def test_very_deep_document_is_cut_not_raised():
    out = render_document(nested_paragraphs(1000))
    assert out is not None
    assert out.children[0].tag == "p"
    assert out.text() == ""
    assert nesting(out) <= MAX_DEPTH + 1


def test_deep_subtree_does_not_affect_siblings():
    data = nested_paragraphs(1000)
    data["root"]["children"].append(paragraph(text("frère")))
    out = render_document(data)
    assert [c.key for c in out.children] == ["paragraph-0", "paragraph-1"]
    assert out.children[1].text() == "frère"
