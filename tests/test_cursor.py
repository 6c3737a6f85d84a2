"""Tests for the anchor cursor."""

import pytest

from scanner.cursor import Cursor, keyword, literal


IMPORT = keyword("import")
SEMICOLON = literal(";")


class TestAdvanceTo:
    """Tests for Cursor.advance_to."""
    
    def test_moves_past_match(self):
        """Test that the offset ends up right after the matched text."""
        cursor = Cursor("abc import x")
        
        match = cursor.advance_to((IMPORT,))
        
        assert match is not None
        assert match.anchor == IMPORT
        assert (match.start, match.end) == (4, 10)
        assert cursor.offset == 10
    
    def test_no_match_moves_to_end(self):
        """Test that a failed search exhausts the cursor."""
        cursor = Cursor("nothing here")
        
        assert cursor.advance_to((SEMICOLON,)) is None
        assert cursor.offset == len("nothing here")
        assert cursor.at_end
    
    def test_exhausted_cursor_never_matches(self):
        """Test that an exhausted cursor stays exhausted."""
        cursor = Cursor("a;b;")
        cursor.advance_to((IMPORT,))
        
        assert cursor.advance_to((SEMICOLON,)) is None
        assert cursor.offset == 4
    
    def test_empty_source(self):
        """Test searching an empty source."""
        cursor = Cursor("")
        
        assert cursor.at_end
        assert cursor.advance_to((IMPORT, SEMICOLON)) is None
        assert cursor.offset == 0
    
    def test_earliest_candidate_wins(self):
        """Test that the leftmost occurrence wins regardless of listing order."""
        cursor = Cursor("x ; import")
        
        match = cursor.advance_to((IMPORT, SEMICOLON))
        
        assert match.anchor == SEMICOLON
        assert cursor.offset == 3
    
    def test_tie_goes_to_first_listed(self):
        """Test that candidates starting at the same offset resolve by order."""
        slash = literal("/", name="slash")
        double_slash = literal("//")
        
        assert Cursor("//").advance_to((slash, double_slash)).anchor == slash
        assert Cursor("//").advance_to((double_slash, slash)).anchor == double_slash
    
    def test_successive_searches(self):
        """Test that searches continue from the current offset."""
        cursor = Cursor("a;b;c")
        
        first = cursor.advance_to((SEMICOLON,))
        second = cursor.advance_to((SEMICOLON,))
        
        assert (first.start, second.start) == (1, 3)
        assert cursor.advance_to((SEMICOLON,)) is None
    
    def test_offset_is_clamped(self):
        """Test that the starting offset is kept within the source."""
        assert Cursor("abc", offset=10).offset == 3
        assert Cursor("abc", offset=-1).offset == 0


class TestKeywordAnchors:
    """Tests for whole-word keyword anchors."""
    
    @pytest.mark.parametrize("source", [
        "important",
        "reimport",
        "import_path",
        "$import",
        "import$",
        "import2",
    ])
    def test_rejects_keyword_inside_identifier(self, source):
        """Test that keywords embedded in identifiers are not anchors."""
        assert Cursor(source).advance_to((IMPORT,)) is None
    
    @pytest.mark.parametrize("source, start", [
        ("import", 0),
        ('import"a";', 0),
        ("x.import", 2),
        ("{import}", 1),
        ("important import", 10),
    ])
    def test_accepts_standalone_keyword(self, source, start):
        """Test keywords delimited by non-identifier characters."""
        match = Cursor(source).advance_to((IMPORT,))
        
        assert match is not None
        assert match.start == start
    
    def test_literal_escapes_pattern_characters(self):
        """Test that literal anchors match regex metacharacters verbatim."""
        cursor = Cursor("a*b /* c */")
        
        match = cursor.advance_to((literal("/*"),))
        
        assert match.start == 4
