#!/usr/bin/env python3
"""
Demo script running three example matcher configurations against a directory.

Usage:
    python demo_examples.py [directory] [--execute]
"""
import sys
from pathlib import Path
from rich.console import Console

# Add src to path
sys.path.insert( 0, str( Path( __file__ ).parent / "src" ) );

from submatch.config import MatcherConfig;
from submatch.engine import MatchEngine, STATUS_ERROR;
from submatch.errors import ScanError;
from submatch.report import ConsoleReporter;


console = Console();


def run_basic_example( directory: Path ):
    """Defaults: dry run, threshold 0.6."""
    console.rule( "Example 1: Basic usage (dry run)" );
    engine = MatchEngine( MatcherConfig(), reporter=ConsoleReporter( console ) );
    results = engine.match_directory( directory );
    console.print( f"Processed {len( results )} subtitle files" );


def run_high_threshold_example( directory: Path, execute: bool ):
    """Stricter threshold, renames when executing."""
    console.rule( "Example 2: High similarity threshold" );
    config = MatcherConfig( similarity_threshold=0.8, dry_run=not execute );
    engine = MatchEngine( config, reporter=ConsoleReporter( console ) );
    results = engine.match_directory( directory );

    success_count = sum( 1 for r in results if r.renamed and r.error is None );
    console.print( f"Successfully processed {success_count} subtitle files" );


def run_custom_config_example( directory: Path, execute: bool ):
    """Custom extensions, quiet engine, detailed listing afterwards."""
    console.rule( "Example 3: Custom configuration" );
    config = MatcherConfig(
        video_extensions=( ".mkv", ".mp4", ".webm" ),
        subtitle_extensions=( ".srt", ),
        similarity_threshold=0.7,
        recursive=True,
        dry_run=not execute,
        verbose=False,
        ignore_existing=True
    );
    results = MatchEngine( config ).match_directory( directory );

    matched = [ r for r in results if r.is_match ];
    if not matched:
        return;

    console.print( "Detailed results:" );
    for r in matched:
        status = f"ERROR: {r.error}" if r.status == STATUS_ERROR else r.status;
        console.print(
            f"  {r.subtitle_path.stem} ({r.similarity:.2f} similarity) -> {r.new_subtitle_path.stem} [{status}]",
            markup=False,
            highlight=False
        );


def main():
    args = [ a for a in sys.argv[1:] if a not in ( "-execute", "--execute" ) ];
    execute = len( args ) != len( sys.argv ) - 1;
    directory = Path( args[0] ) if args else Path( "." );

    if not directory.is_dir():
        console.print( f"Error: directory does not exist: {directory}", markup=False );
        sys.exit( 1 );

    try:
        run_basic_example( directory );
        run_high_threshold_example( directory, execute );
        run_custom_config_example( directory, execute );
    except ScanError as e:
        console.print( f"Error: {e}", markup=False );
        sys.exit( 1 );

    console.rule();
    if execute:
        console.print( "File renaming operations completed." );
    else:
        console.print( "All examples ran in dry-run mode. Add --execute to perform actual renaming." );


if __name__ == "__main__":
    main();
