"""Tests for the chunker service."""

import pytest

from errors import ConfigError
from services.chunker import Chunker, chunk_text, expected_chunk_count


class TestChunkText:
    """Tests for the chunk_text function."""

    def test_empty_text_yields_no_chunks(self):
        """Test chunking empty text returns empty list."""
        assert chunk_text("", 1200, 200) == []

    def test_short_text_single_chunk(self):
        """Test text shorter than the window returns itself."""
        assert chunk_text("abc", 10, 2) == ["abc"]

    def test_windows_and_overlap(self):
        """Test 25 chars with size 10 / overlap 2 gives three windows."""
        text = "abcdefghijklmnopqrstuvwxy"

        result = chunk_text(text, 10, 2)

        assert result == ["abcdefghij", "ijklmnopqr", "qrstuvwxy"]

    def test_text_exactly_one_window(self):
        """Test no redundant trailing chunk when text fills one window."""
        assert chunk_text("x" * 1200, 1200, 200) == ["x" * 1200]

    def test_consecutive_chunks_share_overlap(self):
        """Test each chunk starts with the previous chunk's last overlap chars."""
        text = "".join(chr(ord("a") + i % 26) for i in range(5000))

        result = chunk_text(text, 1200, 200)

        for previous, current in zip(result, result[1:]):
            assert current[:200] == previous[-200:]
        assert all(len(c) == 1200 for c in result[:-1])

    def test_chunks_cover_text(self):
        """Test reassembling chunks minus overlaps gives the original text."""
        text = "The quick brown fox jumps over the lazy dog. " * 80

        result = chunk_text(text, 300, 50)

        rebuilt = result[0] + "".join(c[50:] for c in result[1:])
        assert rebuilt == text

    @pytest.mark.parametrize("length", [1, 199, 200, 201, 1200, 1201, 2200, 5000])
    def test_count_matches_formula(self, length):
        """Test the number of chunks matches expected_chunk_count."""
        result = chunk_text("a" * length, 1200, 200)
        assert len(result) == expected_chunk_count(length, 1200, 200)

    @pytest.mark.parametrize(
        "size,overlap",
        [(0, 0), (-5, 0), (10, -1), (10, 10), (10, 15)],
    )
    def test_invalid_window_rejected(self, size, overlap):
        """Test windows that would never advance raise ConfigError."""
        with pytest.raises(ConfigError):
            chunk_text("some text", size, overlap)


class TestExpectedChunkCount:
    """Tests for expected_chunk_count."""

    def test_empty(self):
        assert expected_chunk_count(0, 1200, 200) == 0

    def test_up_to_overlap_is_one(self):
        assert expected_chunk_count(150, 1200, 200) == 1

    def test_formula(self):
        # ceil((5000 - 200) / 1000)
        assert expected_chunk_count(5000, 1200, 200) == 5


class TestChunker:
    """Tests for Chunker."""

    def test_uses_settings_defaults(self, settings):
        """Test window comes from settings when not given."""
        chunker = Chunker(settings=settings)

        assert chunker.chunk_size == 1200
        assert chunker.chunk_overlap == 200

    def test_chunk_metadata(self, settings):
        """Test chunk positions and indexes."""
        chunker = Chunker(chunk_size=100, chunk_overlap=20, settings=settings)
        text = "Word " * 50  # 250 chars

        result = chunker.chunk_text(text)

        assert [c.chunk_index for c in result] == list(range(len(result)))
        assert result[0].start_char == 0
        assert result[-1].end_char == len(text)
        for chunk in result:
            assert text[chunk.start_char : chunk.end_char] == chunk.text
        for i in range(len(result) - 1):
            assert result[i + 1].start_char < result[i].end_char

    def test_estimate_matches_output(self, settings):
        chunker = Chunker(chunk_size=100, chunk_overlap=20, settings=settings)
        text = "x" * 777

        assert chunker.estimate_chunk_count(len(text)) == len(chunker.chunk_text(text))

    def test_invalid_overlap_rejected(self, settings):
        """Test overlap >= size is rejected at construction."""
        with pytest.raises(ConfigError):
            Chunker(chunk_size=100, chunk_overlap=100, settings=settings)
