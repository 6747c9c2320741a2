"""
CLI entry point for SubMatch with argument parsing and environment variable loading.
"""
import argparse
import sys
from pathlib import Path
from rich.console import Console

from . import __version__
from .config import MatcherConfig, is_valid_threshold
from .engine import MatchEngine, summarize
from .errors import ScanError
from .logging import setup_logging
from .report import ConsoleReporter


EXIT_OK = 0;
EXIT_FAILURE = 1;
EXIT_RENAME_FAILURES = 2;
EXIT_INTERRUPTED = 130;


class SubMatchCLI:
    """
    Command line interface for SubMatch subtitle renaming.

    Defaults come from SUBMATCH_* environment variables (and a .env file in
    the working directory); command line arguments override them.
    """

    def __init__( self ):
        self.parser = self._create_parser();
        self.args = None;
        self.logger = None;
        self.config = None;

    def _create_parser( self ):
        """Create argument parser with all SubMatch options."""
        parser = argparse.ArgumentParser(
            prog="submatch",
            description="Rename subtitle files to match the video files they belong to",
            epilog="Environment variables: SUBMATCH_THRESHOLD, SUBMATCH_VIDEO_EXTENSIONS, "
                   "SUBMATCH_SUBTITLE_EXTENSIONS, SUBMATCH_RECURSIVE, SUBMATCH_IGNORE_EXISTING"
        );

        parser.add_argument(
            "directory",
            nargs="?",
            default=Path( "." ),
            type=Path,
            help="Directory to scan for videos and subtitles (default: current directory)"
        );

        parser.add_argument(
            "--execute", "-x",
            action="store_true",
            help="Actually rename files (default is a dry run)"
        );

        parser.add_argument(
            "--threshold", "-t",
            type=float,
            default=None,
            dest="similarity_threshold",
            help="Minimum similarity to accept a match (0.0-1.0, default: 0.6)"
        );

        parser.add_argument(
            "--video-ext",
            nargs="+",
            default=None,
            dest="video_extensions",
            metavar="EXT",
            help="Video extensions to look for (default: .mkv .mp4 .avi .mov .webm)"
        );

        parser.add_argument(
            "--sub-ext",
            nargs="+",
            default=None,
            dest="subtitle_extensions",
            metavar="EXT",
            help="Subtitle extensions to look for (default: .srt .ass .vtt)"
        );

        parser.add_argument(
            "--no-recursive",
            action="store_false",
            default=None,
            dest="recursive",
            help="Only scan the top level of the directory"
        );

        parser.add_argument(
            "--ignore-existing",
            action="store_true",
            default=None,
            help="Leave out subtitles that already carry their video's name"
        );

        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Only print the final table"
        );

        parser.add_argument(
            "--table",
            action="store_true",
            help="Print a table of all results at the end"
        );

        parser.add_argument(
            "--strict",
            action="store_true",
            help="Exit with status 2 when any rename failed"
        );

        parser.add_argument(
            "--debug",
            action="store_true",
            help="Enable debug logging"
        );

        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}"
        );

        return parser;

    def _validate_arguments( self ):
        """Validate parsed arguments."""
        errors = [];

        if not self.args.directory.exists():
            errors.append( f"Directory does not exist: {self.args.directory}" );
        elif not self.args.directory.is_dir():
            errors.append( f"Not a directory: {self.args.directory}" );

        threshold = self.args.similarity_threshold;
        if threshold is not None and not is_valid_threshold( threshold ):
            errors.append( "Similarity threshold must be between 0.0 and 1.0" );

        return errors;

    def _build_config( self ) -> MatcherConfig:
        """Merge environment defaults with explicit command line options."""
        overrides = {
            'dry_run': not self.args.execute,
            'verbose': not self.args.quiet,
        };
        for name in ( "similarity_threshold", "video_extensions", "subtitle_extensions", "recursive", "ignore_existing" ):
            value = getattr( self.args, name );
            if value is not None:
                overrides[name] = tuple( value ) if isinstance( value, list ) else value;

        return MatcherConfig.from_env( env_file=Path( ".env" ), **overrides );

    def parse_args( self, argv=None ):
        """Parse command line arguments and validate configuration."""
        self.args = self.parser.parse_args( argv );

        self.logger = setup_logging( debug=self.args.debug );

        errors = self._validate_arguments();
        if errors:
            self.logger.error( "Configuration errors:" );
            for error in errors:
                self.logger.error( f"  - {error}" );
            sys.exit( EXIT_FAILURE );

        self.config = self._build_config();

        self.logger.info( f"SubMatch v{__version__} starting..." );
        self.logger.info( f"Directory: {self.args.directory}" );
        self.logger.info( f"Threshold: {self.config.similarity_threshold}" );
        self.logger.info( f"Dry run: {self.config.dry_run}" );

        return self.args;


def main( argv=None ):
    """Main entry point for the SubMatch CLI."""
    cli = SubMatchCLI();
    args = cli.parse_args( argv );

    console = Console();
    reporter = ConsoleReporter( console );
    engine = MatchEngine( cli.config, reporter=reporter, logger=cli.logger );

    try:
        results = engine.match_directory( args.directory );
    except ScanError as e:
        cli.logger.error( str( e ) );
        sys.exit( EXIT_FAILURE );
    except KeyboardInterrupt:
        cli.logger.warning( "Interrupted by user" );
        sys.exit( EXIT_INTERRUPTED );
    except Exception as e:
        cli.logger.error( f"Unexpected error: {e}" );
        if args.debug:
            raise;
        sys.exit( EXIT_FAILURE );

    if args.table or args.quiet:
        reporter.print_table( results );

    counts = summarize( results );
    cli.logger.info(
        f"Processed {counts['total']} subtitles: {counts['matched']} matched, "
        f"{counts['renamed']} renamed, {counts['failed']} failed"
    );

    if args.strict and counts['failed']:
        sys.exit( EXIT_RENAME_FAILURES );
    return EXIT_OK;


if __name__ == "__main__":
    main();
