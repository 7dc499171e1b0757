"""Tests for normalization and chunking."""

from strata import chunk_text, estimate_tokens, normalize_text


def test_normalize_whitespace():
    raw = "  Hello\u00a0 world\r\n\r\n\r\n\r\nNext   para\u200b  "
    assert normalize_text(raw) == "Hello world\n\nNext para"


def test_normalize_keeps_single_breaks():
    assert normalize_text("a\n  b\n\nc") == "a\nb\n\nc"


def test_estimate_tokens():
    assert estimate_tokens("") == 0
    assert estimate_tokens("abcdefgh") == 2
    assert estimate_tokens("é" * 4) == 2


def test_empty_text_has_no_chunks():
    assert chunk_text("") == []


def test_small_text_is_one_chunk():
    text = "Para one.\n\nPara two."
    (chunk,) = chunk_text(text)
    assert chunk.text == text
    assert (chunk.start_char, chunk.end_char) == (0, len(text))
    assert chunk.is_complete_paragraph
    assert chunk.index == 0


def test_paragraphs_packed_without_overlap():
    text = "\n\n".join(["a" * 30] * 3)
    chunks = chunk_text(text, max_tokens=10, overlap_tokens=0)
    assert [c.text for c in chunks] == ["a" * 30] * 3
    assert [c.index for c in chunks] == [0, 1, 2]
    assert all(c.is_complete_paragraph for c in chunks)
    assert [(c.start_char, c.end_char) for c in chunks] == [(0, 30), (32, 62), (64, 94)]


def test_overlap():
    text = "\n\n".join(["a" * 30] * 3)
    chunks = chunk_text(text, max_tokens=10, overlap_tokens=2)
    assert len(chunks) == 3
    assert chunks[1].start_char < chunks[0].end_char
    assert chunks[-1].end_char == len(text)
    for c in chunks:
        assert c.text == text[c.start_char:c.end_char]


def test_oversized_paragraph_split_by_sentences():
    text = "First sentence here. Second sentence here. Third one."
    chunks = chunk_text(text, max_tokens=5, overlap_tokens=0)
    assert [c.text for c in chunks] == [
        "First sentence here.", "Second sentence here.", "Third one.",
    ]
    assert not any(c.is_complete_paragraph for c in chunks)


def test_fixed_windows():
    text = "x" * 100
    chunks = chunk_text(text, max_tokens=10, overlap_tokens=2, preserve_paragraphs=False)
    assert [(c.start_char, c.end_char) for c in chunks] == [(0, 40), (32, 72), (64, 100)]
    assert chunks[0].token_count == 10
