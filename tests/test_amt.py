"""Tests for Abstract Meaning Tree construction."""

from strata import NodeType, RelationType, build_amt, calculate_stats


def _ids(root):
    return [n.id for n in root.iter_nodes()]


def test_two_paragraphs_depth_two(two_paragraphs):
    root = build_amt(two_paragraphs, depth=2)
    assert root.node_type is NodeType.ROOT
    assert root.relationships == []
    assert len(root.children) == 2

    first, second = root.children
    assert [p.node_type for p in root.children] == [NodeType.PARAGRAPH] * 2
    assert len(first.children) == 1
    assert len(second.children) == 1
    assert first.relationships == []
    assert len(second.relationships) == 1
    assert second.relationships[0].target_id == first.id
    assert second.relationships[0].relation_type is RelationType.SEQUENCE

    # First sentence of each paragraph has no predecessor.
    assert first.children[0].relationships == []
    assert second.children[0].relationships == []
    assert first.children[0].content == "First paragraph here"


def test_preorder_ids(two_paragraphs):
    root = build_amt(two_paragraphs, depth=2)
    assert _ids(root) == [1, 2, 3, 4, 5]


def test_sentence_sequence_links():
    root = build_amt("One. Two! Three?", depth=2)
    (para,) = root.children
    sentences = para.children
    assert [s.content for s in sentences] == ["One", "Two", "Three"]
    assert sentences[0].relationships == []
    assert sentences[1].relationships[0].target_id == sentences[0].id
    assert sentences[2].relationships[0].target_id == sentences[1].id
    for s in sentences:
        assert s.node_type is NodeType.SENTENCE
        assert s.children == []


def test_depth_one_has_no_sentences(two_paragraphs):
    root = build_amt(two_paragraphs, depth=1)
    assert len(root.children) == 2
    assert all(p.children == [] for p in root.children)


def test_depth_zero_is_root_only(two_paragraphs):
    root = build_amt(two_paragraphs, depth=0)
    assert root.children == []
    assert root.content == two_paragraphs


def test_content_previews():
    long_para = "x" * 300
    root = build_amt(long_para + "\n\n" + "short", depth=1)
    assert root.content == ("x" * 100)
    assert root.children[0].content == "x" * 200
    assert root.children[1].content == "short"


def test_ids_unique_in_large_tree():
    text = "\n\n".join(
        "Alpha one. Beta two. Gamma three." for _ in range(300)
    )
    root = build_amt(text, depth=3)
    ids = _ids(root)
    assert len(ids) == 1 + 300 * 4
    assert len(set(ids)) == len(ids)


def test_children_match_paragraph_count():
    text = "A.\n\nB.\n\nC."
    root = build_amt(text, depth=1)
    assert len(root.children) == calculate_stats(text).paragraph_count


def test_metadata_empty():
    root = build_amt("Hello. World.", depth=2)
    assert all(n.metadata == {} for n in root.iter_nodes())


def test_empty_text():
    root = build_amt("", depth=3)
    assert root.content == ""
    assert root.children == []


def test_blank_text_has_no_paragraph_nodes():
    assert calculate_stats("   ").paragraph_count == 1
    assert build_amt("   ", depth=1).children == []
