"""Unit tests for the line-preserving tokenizer."""

from cloze.tokenizer import count_words, tokenize


def _spans(text):
    return [(t.text, t.start_offset, t.line_index) for t in tokenize(text)]


class TestTokenize:
    def test_single_line(self, simple_text):
        """Should split on spaces and report absolute offsets."""
        assert _spans(simple_text) == [
            ("나는", 0, 0),
            ("학교에", 3, 0),
            ("간다", 7, 0),
        ]

    def test_offsets_skip_leading_and_repeated_whitespace(self):
        """Should not drift on leading spaces, blank lines or runs of spaces."""
        text = "  앞 공백\n\n둘째   줄  \n마지막"
        assert _spans(text) == [
            ("앞", 2, 0),
            ("공백", 4, 0),
            ("둘째", 8, 2),
            ("줄", 13, 2),
            ("마지막", 17, 3),
        ]

    def test_tabs_and_carriage_returns_are_whitespace(self):
        """Should treat tabs and CR as separators while counting them as characters."""
        text = "가나\t다라\r\n마바"
        assert _spans(text) == [("가나", 0, 0), ("다라", 3, 0), ("마바", 7, 1)]

    def test_every_token_matches_source_slice(self, messy_text):
        """Should satisfy text[start:end] == token for every token."""
        tokens = list(tokenize(messy_text))
        assert tokens
        for token in tokens:
            assert messy_text[token.start_offset : token.end_offset] == token.text
            assert token.length == len(token.text)

    def test_index_counts_across_lines(self, messy_text):
        """Should number tokens globally, not per line."""
        tokens = list(tokenize(messy_text))
        assert [t.index for t in tokens] == list(range(len(tokens)))

    def test_line_index_follows_newlines(self, messy_text):
        tokens = list(tokenize(messy_text))
        assert {t.line_index for t in tokens} == {0, 3, 4, 6}

    def test_empty_and_blank_text(self):
        assert list(tokenize("")) == []
        assert list(tokenize("   \n\t\n  ")) == []

    def test_restartable(self, messy_text):
        """Should produce the same sequence on every call."""
        first = list(tokenize(messy_text))
        second = list(tokenize(messy_text))
        assert first == second

    def test_lazy(self, simple_text):
        """Should return an iterator rather than a list."""
        tokens = tokenize(simple_text)
        assert next(tokens).text == "나는"


class TestCountWords:
    def test_counts_all_tokens(self, simple_text, messy_text):
        assert count_words(simple_text) == 3
        assert count_words(messy_text) == 14

    def test_counts_particles_and_punctuation(self):
        """Should count every token, eligible or not."""
        assert count_words("그 는 . 학교") == 4
