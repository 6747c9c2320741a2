"""
Test cases for best-candidate selection.
"""
import pytest
from pathlib import Path
import sys

# Add src directory to path for testing
sys.path.insert( 0, str( Path( __file__ ).parent.parent / "src" ) );

from submatch.selector import select_best


class TestSelectBest:
    """Test cases for select_best."""
    
    def test_empty_candidates( self ):
        """Test no candidates yields no path and a zero score."""
        assert select_best( "how to code", [] ) == ( None, 0.0 );
    
    def test_picks_highest_score( self ):
        """Test the best-scoring candidate is returned with its score."""
        candidates = [
            ( Path( "cooking.mkv" ), "cooking" ),
            ( Path( "how_to_code.mkv" ), "how to code" ),
            ( Path( "how_to_cope.mkv" ), "how to cope" ),
        ];
        
        path, score = select_best( "how to code", candidates );
        
        assert path == Path( "how_to_code.mkv" );
        assert score == 1.0;
    
    def test_tie_keeps_first_candidate( self ):
        """Test equal scores keep the earliest candidate."""
        candidates = [
            ( Path( "abcx.mkv" ), "abcx" ),
            ( Path( "abcy.mkv" ), "abcy" ),
        ];
        
        path, score = select_best( "abcz", candidates );
        
        assert path == Path( "abcx.mkv" );
        assert score == pytest.approx( 0.75 );
    
    def test_tie_order_follows_input( self ):
        """Test reversing the candidates flips the tie winner."""
        candidates = [
            ( Path( "abcy.mkv" ), "abcy" ),
            ( Path( "abcx.mkv" ), "abcx" ),
        ];
        
        path, _ = select_best( "abcz", candidates );
        
        assert path == Path( "abcy.mkv" );
    
    def test_zero_scores_select_nothing( self ):
        """Test candidates with nothing in common are never selected."""
        path, score = select_best( "abc", [ ( Path( "xyz.mkv" ), "xyz" ) ] );
        
        assert path is None;
        assert score == 0.0;
    
    def test_candidates_not_mutated( self ):
        """Test the candidate list is left untouched."""
        candidates = [ ( Path( "b.mkv" ), "b" ), ( Path( "a.mkv" ), "a" ) ];
        snapshot = list( candidates );
        
        select_best( "a", candidates );
        
        assert candidates == snapshot;


if __name__ == '__main__':
    pytest.main( [ __file__ ] );
