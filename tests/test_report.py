"""
Test cases for console reporting.
"""
import io
import pytest
from pathlib import Path
import sys

# Add src directory to path for testing
sys.path.insert( 0, str( Path( __file__ ).parent.parent / "src" ) );

from rich.console import Console

from submatch.config import MatcherConfig
from submatch.engine import MatchEngine, MatchResult
from submatch.errors import RenameError
from submatch.report import ConsoleReporter


def make_reporter():
    output = io.StringIO();
    console = Console( file=output, width=200, color_system=None );
    return ConsoleReporter( console ), output;


class TestConsoleReporter:
    """Test cases for ConsoleReporter."""
    
    def test_dry_run_report( self ):
        """Test match lines and the dry run summary."""
        reporter, output = make_reporter();
        engine = MatchEngine( MatcherConfig(), reporter=reporter );
        
        engine.run(
            [ Path( "How_to_code_[ABC123].mkv" ) ],
            [ Path( "How_to_code_-_YouTube-zh-CN-dual-double.srt" ), Path( "zzz.srt" ) ]
        );
        
        text = output.getvalue();
        assert "Found 1 video files and 2 subtitle files" in text;
        assert "Match found (1.00 similarity):" in text;
        assert "New name: How_to_code_[ABC123].srt" in text;
        assert "No good match found for: zzz.srt (best score: 0.00)" in text;
        assert "Dry run completed. 1 subtitles would be renamed." in text;
    
    def test_rename_outcomes( self ):
        """Test success, already-named and error lines."""
        reporter, output = make_reporter();
        
        reporter.match_found( MatchResult( Path( "a.srt" ), Path( "b.mkv" ), Path( "b.srt" ), 0.9, True ) );
        reporter.match_found( MatchResult( Path( "b.srt" ), Path( "b.mkv" ), Path( "b.srt" ), 1.0, True ) );
        reporter.match_found( MatchResult(
            Path( "c.srt" ), Path( "b.mkv" ), Path( "b.srt" ), 0.8, False,
            RenameError( "c.srt", "b.srt", FileExistsError( "Destination already exists: b.srt" ) )
        ) );
        reporter.run_complete( [], dry_run=False );
        
        text = output.getvalue();
        assert "✓ Renamed successfully" in text;
        assert "✓ Already correctly named" in text;
        assert "Error renaming: Destination already exists: b.srt" in text;
        assert "Renaming completed. 0 subtitles processed." in text;
    
    def test_table_keeps_bracketed_names( self ):
        """Test names with [ID] tags are printed literally, not as markup."""
        reporter, output = make_reporter();
        results = [
            MatchResult( Path( "x.srt" ), Path( "Clip_[ABC123].mkv" ), Path( "Clip_[ABC123].srt" ), 0.75 ),
            MatchResult( Path( "y.srt" ), None, None, 0.0 ),
        ];
        
        reporter.print_table( results );
        
        text = output.getvalue();
        assert "Clip_[ABC123].srt" in text;
        assert "WOULD RENAME" in text;
        assert "NO MATCH" in text;


if __name__ == '__main__':
    pytest.main( [ __file__ ] );
