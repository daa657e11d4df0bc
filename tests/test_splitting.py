"""Tests for splitting long text into embed fields."""

import discord
import pytest

from pagedembed.pagination import splitting

ZWSP = "\N{ZERO WIDTH SPACE}"


class TestChunks:
    def test_short_text_is_one_chunk(self):
        assert splitting.split_fields("Sentence one. Sentence two.") == ["Sentence one. Sentence two."]

    def test_empty_text(self):
        assert splitting.split_fields("") == []

    def test_chunks_never_exceed_the_field_limit(self):
        text = "Lorem ipsum dolor sit amet.\n" * 200
        chunks = splitting.split_fields(text)

        assert len(chunks) > 1
        assert all(len(chunk) <= splitting.FIELD_LIMIT for chunk in chunks)
        assert "".join(chunks) == text

    def test_breaks_on_sentence_boundaries(self):
        sentence = "x" * 600 + "."
        chunks = splitting.split_fields(sentence * 2)
        assert chunks == [sentence, sentence]

    def test_long_sentence_is_hard_wrapped(self):
        chunks = splitting.split_fields("a" * 2500)
        assert [len(chunk) for chunk in chunks] == [1024, 1024, 452]


class TestEmbeds:
    def test_one_page_for_short_text(self):
        template = discord.Embed(title="Reader")
        pages = splitting.split_fields("Sentence one. Sentence two.", template, per_page=2)

        assert len(pages) == 1
        assert pages[0].title == "Reader"
        assert [field.value for field in pages[0].fields] == ["Sentence one. Sentence two."]

    def test_groups_chunks_per_page(self):
        pages = splitting.split_fields("a" * 2500, discord.Embed(), per_page=2)

        assert [len(page.fields) for page in pages] == [2, 1]
        assert all(not field.inline for page in pages for field in page.fields)

    def test_first_field_on_each_page_gets_the_title(self):
        pages = splitting.split_fields("a" * 2500, discord.Embed(), per_page=2, field_title="Text")

        assert [field.name for field in pages[0].fields] == ["Text", ZWSP]
        assert [field.name for field in pages[1].fields] == ["Text"]

    def test_whitespace_only_chunk_is_not_empty(self):
        pages = splitting.split_fields("\n", discord.Embed(), per_page=1)
        assert pages[0].fields[0].value == ZWSP

    def test_template_is_left_alone(self):
        template = discord.Embed(title="Reader", colour=0x123456)
        pages = splitting.split_fields("One. Two. Three.", template, per_page=1)

        assert template.fields == []
        assert all(page is not template for page in pages)
        assert all(page.colour == template.colour for page in pages)

    @pytest.mark.parametrize("per_page", [0, -3])
    def test_per_page_must_be_positive(self, per_page):
        with pytest.raises(ValueError):
            splitting.split_fields("text", discord.Embed(), per_page=per_page)
