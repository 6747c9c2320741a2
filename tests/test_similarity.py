"""
Test cases for LCS-based title similarity.
"""
import pytest
from pathlib import Path
import sys

# Add src directory to path for testing
sys.path.insert( 0, str( Path( __file__ ).parent.parent / "src" ) );

from submatch.similarity import calculate_similarity, longest_common_subsequence


SAMPLE_TITLES = [
    "",
    "a",
    "how to code",
    "how to code part 2",
    "kitten",
    "sitting",
    "why not?",
];


class TestLongestCommonSubsequence:
    """Test cases for the LCS length table."""
    
    @pytest.mark.parametrize( "text1, text2, expected", [
        ( "", "", 0 ),
        ( "abc", "", 0 ),
        ( "abc", "abc", 3 ),
        ( "abcde", "ace", 3 ),
        ( "kitten", "sitting", 4 ),
        ( "abc", "xyz", 0 ),
        ( "aaaa", "aa", 2 ),
    ] )
    def test_known_lengths( self, text1, text2, expected ):
        """Test LCS lengths for hand-checked pairs."""
        assert longest_common_subsequence( text1, text2 ) == expected;
    
    def test_non_contiguous( self ):
        """Test characters need only keep their relative order."""
        assert longest_common_subsequence( "how to code", "h_o_w" ) == 3;


class TestCalculateSimilarity:
    """Test cases for calculate_similarity."""
    
    @pytest.mark.parametrize( "title", SAMPLE_TITLES )
    def test_identity_scores_one( self, title ):
        """Test every string is fully similar to itself, the empty string included."""
        assert calculate_similarity( title, title ) == 1.0;
    
    @pytest.mark.parametrize( "text1", SAMPLE_TITLES )
    @pytest.mark.parametrize( "text2", SAMPLE_TITLES )
    def test_symmetric( self, text1, text2 ):
        """Test argument order does not matter."""
        assert calculate_similarity( text1, text2 ) == calculate_similarity( text2, text1 );
    
    @pytest.mark.parametrize( "title", [ t for t in SAMPLE_TITLES if t ] )
    def test_against_empty_scores_zero( self, title ):
        """Test a non-empty string shares nothing with the empty string."""
        assert calculate_similarity( title, "" ) == 0.0;
    
    def test_ratio_uses_longer_length( self ):
        """Test LCS length is divided by the longer string's length."""
        assert calculate_similarity( "kitten", "sitting" ) == pytest.approx( 4 / 7 );
        assert calculate_similarity( "how to code", "how to code part 2" ) == pytest.approx( 11 / 18 );
    
    def test_compares_utf8_bytes( self ):
        """Test non-ASCII titles are scored on their UTF-8 bytes."""
        assert calculate_similarity( "café", "cafè" ) == pytest.approx( 0.8 );
        assert calculate_similarity( "为什么", "为何" ) == pytest.approx( 4 / 9 );
    
    @pytest.mark.parametrize( "text1", SAMPLE_TITLES )
    @pytest.mark.parametrize( "text2", SAMPLE_TITLES )
    def test_range( self, text1, text2 ):
        """Test scores stay within [0, 1]."""
        assert 0.0 <= calculate_similarity( text1, text2 ) <= 1.0;


if __name__ == '__main__':
    pytest.main( [ __file__ ] );
