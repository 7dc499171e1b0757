"""Tests for pattern-based entity extraction."""

from strata import EntityType, extract_entities


def _spans(entities):
    return [(e.entity_type, e.text) for e in entities]


def test_email_and_url():
    text = "contact me at a@b.com or visit http://example.com"
    entities = extract_entities(text)
    assert _spans(entities) == [
        (EntityType.EMAIL, "a@b.com"),
        (EntityType.URL, "http://example.com"),
    ]
    email, url = entities
    assert (email.start_pos, email.end_pos) == (14, 21)
    assert (url.start_pos, url.end_pos) == (31, 49)


def test_category_order_not_document_order():
    entities = extract_entities("Visit http://x.io or mail bob@x.io")
    assert [e.entity_type for e in entities] == [EntityType.EMAIL, EntityType.URL]


def test_dates():
    entities = extract_entities("due 12/25/2023 or 2023-01-15.")
    assert _spans(entities) == [
        (EntityType.DATE, "12/25/2023"),
        (EntityType.DATE, "2023-01-15"),
    ]


def test_phone_numbers():
    assert _spans(extract_entities("call 555-123-4567 now")) == [
        (EntityType.PHONE, "555-123-4567"),
    ]
    assert _spans(extract_entities("dial +1 555 123 4567")) == [
        (EntityType.PHONE, "+1 555 123 4567"),
    ]


def test_proper_nouns():
    entities = extract_entities("I met John Smith in New York yesterday")
    assert _spans(entities) == [
        (EntityType.PROPER_NOUN, "John Smith"),
        (EntityType.PROPER_NOUN, "New York"),
    ]


def test_demonstrative_prefix_excluded():
    assert extract_entities("we saw The Beatles live") == []
    assert extract_entities("This Morning was cold") == []


def test_single_capitalized_word_is_not_an_entity():
    assert extract_entities("Paris is lovely") == []


def test_offsets_are_utf8_bytes():
    text = "café a@b.com"
    (email,) = extract_entities(text)
    assert (email.start_pos, email.end_pos) == (6, 13)
    data = text.encode("utf-8")
    assert data[email.start_pos:email.end_pos].decode("utf-8") == email.text


def test_span_validity():
    text = (
        "Dr Jane Doe (jane.doe@example.org) posted https://example.org/a?b=1 "
        "on 2024/03/09, call 555.867.5309."
    )
    data = text.encode("utf-8")
    entities = extract_entities(text)
    assert entities
    for e in entities:
        assert 0 <= e.start_pos < e.end_pos <= len(data)
        assert data[e.start_pos:e.end_pos].decode("utf-8") == e.text


def test_no_entities():
    assert extract_entities("") == []
    assert extract_entities("nothing to see here") == []


def test_proper_noun_does_not_stop_inside_accented_word():
    assert extract_entities("We ate at Paris Café today") == []
    (noun,) = extract_entities("Café Paris Rome")
    assert (noun.entity_type, noun.text) == (EntityType.PROPER_NOUN, "Paris Rome")
    assert (noun.start_pos, noun.end_pos) == (6, 16)


def test_url_stops_at_unicode_whitespace():
    (url,) = extract_entities("see http://example.com\u00a0now")
    assert url.text == "http://example.com"
    assert (url.start_pos, url.end_pos) == (4, 22)


def test_email_between_accented_text():
    (email,) = extract_entities("écrire a@b.com\u00a0é")
    assert email.text == "a@b.com"
    assert (email.start_pos, email.end_pos) == (8, 15)


def test_date_glued_to_accented_letter_is_not_a_date():
    assert extract_entities("réf 12/05/2024é") == []


def test_phone_with_no_break_spaces():
    (phone,) = extract_entities("tél 555\u00a0123\u00a04567")
    assert phone.entity_type is EntityType.PHONE
    assert phone.text == "555\u00a0123\u00a04567"
    assert (phone.start_pos, phone.end_pos) == (5, 19)


def test_multibyte_spans_are_whole_words():
    text = (
        "Zoë met Anna Lee at Café Noir. Mail ana@example.com or see "
        "https://exämple.org/ü\u00a0today, 03/04/2025."
    )
    data = text.encode("utf-8")
    entities = extract_entities(text)
    assert _spans(entities) == [
        (EntityType.EMAIL, "ana@example.com"),
        (EntityType.URL, "https://exämple.org/ü"),
        (EntityType.DATE, "03/04/2025"),
        (EntityType.PROPER_NOUN, "Anna Lee"),
    ]
    for e in entities:
        assert data[e.start_pos:e.end_pos].decode("utf-8") == e.text
        start = len(data[:e.start_pos].decode("utf-8"))
        end = start + len(e.text)
        assert start == 0 or not text[start - 1].isalnum()
        assert end == len(text) or not text[end].isalnum()
