"""
Unit tests for deck discovery.
"""
from slideloader.services.slideshow import list_decks


class TestListDecks:
    """Tests for list_decks."""

    def test_lists_markdown_files(self, slides_dir):
        """Test decks are listed by name in sorted order."""
        decks = list_decks(slides_dir)

        assert [deck.name for deck in decks] == ["category-theory", "monoids"]
        assert decks[1].source_url == "slides/monoids.md"
        assert decks[1].size_bytes == len("# Monoids\n---\n# Laws\n")

    def test_skips_other_files(self, slides_dir):
        """Test non-markdown files and subdirectories are ignored."""
        (slides_dir / "notes.txt").write_text("not a deck")
        (slides_dir / "images").mkdir()
        (slides_dir / "images" / "nested.md").write_text("# Nested")

        names = [deck.name for deck in list_decks(slides_dir)]

        assert names == ["category-theory", "monoids"]

    def test_missing_directory(self, tmp_path):
        """Test a missing directory yields no decks."""
        assert list_decks(tmp_path / "missing") == []
