"""currents.frontmatter unit tests."""

from currents.frontmatter import (
    ENTRY_RULE,
    FIELD_ORDER,
    build_entry_document,
    parse_frontmatter,
    serialize_frontmatter,
)


class TestParseFrontmatter:
    def test_normal_header(self):
        content = """---
id: "2024-01-01__x"
date: 2024-01-01
title: 'Quoted single'
archive: null
tags: []
---
# Title

Body text here.
"""
        fm, body = parse_frontmatter(content)
        assert fm["id"] == "2024-01-01__x"
        assert fm["date"] == "2024-01-01"
        assert fm["title"] == "Quoted single"
        assert fm["archive"] is None
        assert fm["tags"] == []
        assert body == "# Title\n\nBody text here.\n"

    def test_no_frontmatter(self):
        content = "# Just a plain note\nNo header here."
        fm, body = parse_frontmatter(content)
        assert fm == {}
        assert body == content

    def test_opening_delimiter_must_start_text(self):
        content = "\n---\ntitle: x\n---\nbody"
        fm, body = parse_frontmatter(content)
        assert fm == {}
        assert body == content

    def test_unclosed_header(self):
        content = "---\ntitle: x\nno closing delimiter"
        fm, body = parse_frontmatter(content)
        assert fm == {}
        assert body == content

    def test_lines_without_colon_are_skipped(self):
        content = "---\ngarbage line\ntitle: kept\n# comment: ignored\n\n---\nbody"
        fm, body = parse_frontmatter(content)
        assert fm == {"title": "kept"}
        assert body == "body"

    def test_value_keeps_colons_after_first(self):
        fm, _ = parse_frontmatter("---\nurl_1: https://example.com/a?b=c:d\n---\n")
        assert fm["url_1"] == "https://example.com/a?b=c:d"

    def test_quoted_null_is_a_string(self):
        fm, _ = parse_frontmatter('---\narchive: "null"\nstatus: null\n---\n')
        assert fm["archive"] == "null"
        assert fm["status"] is None

    def test_duplicate_keys_last_wins(self):
        fm, _ = parse_frontmatter("---\ntitle: first\ntitle: second\n---\n")
        assert fm["title"] == "second"

    def test_array_drops_empty_items(self):
        fm, _ = parse_frontmatter('---\ntags: ["a", "b c", ""]\n---\n')
        assert fm["tags"] == ["a", "b c"]

    def test_array_mixed_quotes_and_bare(self):
        fm, _ = parse_frontmatter("---\ntags: [one, 'two', \"three\", , ]\n---\n")
        assert fm["tags"] == ["one", "two", "three"]

    def test_array_comma_inside_quotes(self):
        fm, _ = parse_frontmatter('---\ntags: ["a, b", "c"]\n---\n')
        assert fm["tags"] == ["a, b", "c"]

    def test_only_one_quote_layer_stripped(self):
        fm, _ = parse_frontmatter("---\ntitle: \"'inner'\"\n---\n")
        assert fm["title"] == "'inner'"

    def test_double_quoted_json_escapes_are_decoded(self):
        fm, _ = parse_frontmatter('---\ntitle: "C:\\new"\nimage_alt: "a\\tb"\n---\n')
        assert fm["title"] == "C:\new"
        assert fm["image_alt"] == "a\tb"

    def test_escapes_kept_when_not_json_or_single_quoted(self):
        fm, _ = parse_frontmatter("---\ntitle: \"C:\\qdir\"\nimage_alt: 'a\\tb'\n---\n")
        assert fm["title"] == "C:\\qdir"
        assert fm["image_alt"] == "a\\tb"

    def test_unbalanced_quotes_kept(self):
        fm, _ = parse_frontmatter('---\ntitle: "half\n---\n')
        assert fm["title"] == '"half'

    def test_crlf_document(self):
        content = '---\r\ntitle: "x"\r\n---\r\nbody\r\n'
        fm, body = parse_frontmatter(content)
        assert fm["title"] == "x"
        assert body == "body\r\n"


class TestSerializeFrontmatter:
    def test_fixed_order_and_presence(self):
        text = serialize_frontmatter({"title": "T"})
        lines = text.split("\n")
        assert lines[0] == "---"
        assert lines[-1] == "---"
        keys = [line.split(":", 1)[0] for line in lines[1:-1]]
        assert keys == list(FIELD_ORDER)

    def test_absent_null_and_empty_tags(self):
        text = serialize_frontmatter({"archive": None, "url_1": None})
        assert 'id: ""' in text
        assert "archive: null" in text
        assert "url_1: null" in text
        assert "tags: []" in text

    def test_tags_are_double_quoted(self):
        text = serialize_frontmatter({"tags": ["a", 'say "hi"']})
        assert 'tags: ["a", "say \\"hi\\""]' in text

    def test_colon_and_newline_values_are_json_escaped(self):
        text = serialize_frontmatter({"title": "Re: one\ntwo"})
        assert 'title: "Re: one\\ntwo"' in text
        assert text.count("\n") == len(FIELD_ORDER) + 1

    def test_unknown_keys_dropped(self):
        text = serialize_frontmatter({"custom": "x"})
        assert "custom" not in text

    def test_no_undefined_word(self):
        text = serialize_frontmatter({})
        assert "undefined" not in text
        assert "None" not in text


class TestRoundTrip:
    def test_full_field_set(self):
        fields = {
            "id": "2024-06-15__post",
            "date": "2024-06-15",
            "title": 'He said "hi": twice',
            "status": "draft",
            "archive": None,
            "tags": ["a", "b, c", "d'e", 'f"g'],
            "url_1": "https://example.com/x?y=1",
            "url_2": "",
            "url_3": "back\\slash",
            "image_top": "/img/top.png",
            "image_bottom": "/img/bottom.png",
            "image_alt": "multi\nline",
            "audio_top": "/a.mp3",
            "audio_bottom": "\ttabbed",
            "audio_caption": "ünïcode ✓",
        }
        parsed, body = parse_frontmatter(serialize_frontmatter(fields) + "\nbody")
        assert parsed == fields
        assert body == "body"

    def test_absent_fields_come_back_empty(self):
        parsed, _ = parse_frontmatter(serialize_frontmatter({"title": "only"}))
        assert parsed["title"] == "only"
        assert parsed["id"] == ""
        assert parsed["archive"] == ""
        assert parsed["tags"] == []

    def test_literal_null_string_survives(self):
        parsed, _ = parse_frontmatter(serialize_frontmatter({"title": "null"}))
        assert parsed["title"] == "null"


class TestBuildEntryDocument:
    def test_shape(self):
        doc = build_entry_document({"title": "T"}, "Body text\n\n\n")
        assert doc.endswith(f"---\nBody text\n\n{ENTRY_RULE}\n")

    def test_parses_back(self):
        doc = build_entry_document({"title": "T", "tags": ["x"]}, "Hello")
        fm, body = parse_frontmatter(doc)
        assert fm["title"] == "T"
        assert fm["tags"] == ["x"]
        assert body.startswith("Hello")
