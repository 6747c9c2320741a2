"""
Console reporting for match runs using Rich.
"""
from typing import Sequence
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text


class NullReporter:
    """Reporter that discards everything."""

    def scan_complete( self, video_count: int, subtitle_count: int ):
        pass;

    def match_found( self, result ):
        pass;

    def no_match( self, result ):
        pass;

    def run_complete( self, results: Sequence, dry_run: bool ):
        pass;


class ConsoleReporter( NullReporter ):
    """
    Writes per-subtitle progress and a closing summary to a Rich console.

    The console is injected so callers (and tests) decide where output goes.
    """

    STATUS_STYLES = {
        "WOULD RENAME": "cyan",
        "RENAMED": "green",
        "ALREADY NAMED": "green",
        "ERROR": "red",
        "NO MATCH": "yellow",
    };

    def __init__( self, console: Console = None ):
        self.console = console if console is not None else Console();

    def scan_complete( self, video_count: int, subtitle_count: int ):
        self.console.print( f"Found {video_count} video files and {subtitle_count} subtitle files" );

    def match_found( self, result ):
        self.console.print( f"\n[bold]Match found ({result.similarity:.2f} similarity):[/bold]", highlight=False );
        self.console.print( f"  Subtitle: {result.subtitle_path.name}", markup=False, highlight=False );
        self.console.print( f"  Video:    {result.video_path.name}", markup=False, highlight=False );
        self.console.print( f"  New name: {result.new_subtitle_path.name}", markup=False, highlight=False );

        if result.error is not None:
            self.console.print( f"  [red]Error renaming:[/red] {escape( str( result.error.cause or result.error ) )}", highlight=False );
        elif result.renamed and result.new_subtitle_path == result.subtitle_path:
            self.console.print( "  [green]✓ Already correctly named[/green]" );
        elif result.renamed:
            self.console.print( "  [green]✓ Renamed successfully[/green]" );

    def no_match( self, result ):
        self.console.print(
            f"\n[yellow]No good match found for:[/yellow] {escape( result.subtitle_path.name )} "
            f"(best score: {result.similarity:.2f})",
            highlight=False
        );

    def run_complete( self, results: Sequence, dry_run: bool ):
        match_count = sum( 1 for r in results if r.is_match );
        if dry_run:
            self.console.print( f"\nDry run completed. {match_count} subtitles would be renamed." );
            self.console.print( "Use --execute to perform actual renaming." );
        else:
            self.console.print( f"\nRenaming completed. {match_count} subtitles processed." );

    def print_table( self, results: Sequence ):
        """Print all results as a table."""
        table = Table( title="Subtitle matches" );
        table.add_column( "Subtitle" );
        table.add_column( "Video" );
        table.add_column( "New name" );
        table.add_column( "Similarity", justify="right" );
        table.add_column( "Result" );

        for r in results:
            style = self.STATUS_STYLES.get( r.status, "" );
            table.add_row(
                Text( r.subtitle_path.name ),
                Text( r.video_path.name if r.video_path else "-" ),
                Text( r.new_subtitle_path.name if r.new_subtitle_path else "-" ),
                f"{r.similarity:.2f}",
                f"[{style}]{r.status}[/{style}]" if style else r.status
            );

        self.console.print( table );
