"""
Match engine: pairs each subtitle with its best video and renames it to match.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from .config import MatcherConfig
from .errors import RenameError
from .logging import get_logger
from .normalize import normalize_title
from .renamer import FileRenamer
from .report import NullReporter
from .scanner import scan_media_files
from .selector import select_best


STATUS_WOULD_RENAME = "WOULD RENAME";
STATUS_RENAMED = "RENAMED";
STATUS_ALREADY_NAMED = "ALREADY NAMED";
STATUS_ERROR = "ERROR";
STATUS_NO_MATCH = "NO MATCH";


@dataclass( frozen=True )
class MatchResult:
    """Outcome for one subtitle file."""

    subtitle_path: Path;                      # Original subtitle path
    video_path: Optional[Path];               # Best video, None when there were no candidates
    new_subtitle_path: Optional[Path];        # Set only when similarity passed the threshold
    similarity: float;                        # Best score found (0.0-1.0)
    renamed: bool = False;                    # File now carries the video's name on disk
    error: Optional[RenameError] = None;      # Rename failure, if any

    @property
    def is_match( self ) -> bool:
        return self.new_subtitle_path is not None;

    @property
    def status( self ) -> str:
        if self.error is not None:
            return STATUS_ERROR;
        if not self.is_match:
            return STATUS_NO_MATCH;
        if self.renamed:
            return STATUS_ALREADY_NAMED if self.new_subtitle_path == self.subtitle_path else STATUS_RENAMED;
        return STATUS_WOULD_RENAME;

    def __repr__( self ):
        return f"MatchResult({self.status} {self.subtitle_path.name!r}, similarity={self.similarity:.2f})";


def target_subtitle_path( subtitle_path: Path, video_path: Path ) -> Path:
    """Subtitle's directory + video's stem + the subtitle's own extension."""
    return subtitle_path.parent / f"{video_path.stem}{subtitle_path.suffix}";


def summarize( results: Sequence[MatchResult] ) -> Dict[str, int]:
    """Count results by outcome."""
    return {
        'total': len( results ),
        'matched': sum( 1 for r in results if r.is_match ),
        'renamed': sum( 1 for r in results if r.renamed ),
        'failed': sum( 1 for r in results if r.error is not None ),
        'unmatched': sum( 1 for r in results if not r.is_match ),
    };


class MatchEngine:
    """
    Greedy per-subtitle matcher.

    For every subtitle (in the order given) the best-scoring video is chosen
    independently; two subtitles may pick the same video. A score equal to the
    threshold is accepted. Rename failures are stored on the result and do not
    stop the run.
    """

    def __init__( self, config: MatcherConfig = None, renamer=None, reporter=None, logger=None ):
        self.config = config if config is not None else MatcherConfig();
        self.logger = logger if logger is not None else get_logger();
        self.renamer = renamer if renamer is not None else FileRenamer( logger=self.logger );
        if reporter is None or not self.config.verbose:
            reporter = NullReporter();
        self.reporter = reporter;

    def build_candidates( self, video_paths: Sequence ) -> List:
        """Normalize each video stem once per run."""
        candidates = [];
        for video_path in video_paths:
            video_path = Path( video_path );
            candidates.append( ( video_path, normalize_title( video_path.stem ) ) );
        return candidates;

    def _match_one( self, subtitle_path: Path, candidates: List, perform_renames: bool ) -> Optional[MatchResult]:
        subtitle_title = normalize_title( subtitle_path.stem );
        video_path, score = select_best( subtitle_title, candidates );
        self.logger.debug( f"{subtitle_path.name}: title={subtitle_title!r} best={video_path} score={score:.3f}" );

        if video_path is None or score < self.config.similarity_threshold:
            result = MatchResult( subtitle_path, video_path, None, score );
            self.reporter.no_match( result );
            return result;

        new_path = target_subtitle_path( subtitle_path, video_path );
        if self.config.ignore_existing and new_path == subtitle_path:
            self.logger.debug( f"Skipping already named subtitle {subtitle_path.name}" );
            return None;

        renamed = False;
        error = None;
        if perform_renames:
            if new_path == subtitle_path:
                renamed = True;
            else:
                try:
                    self.renamer.rename( subtitle_path, new_path );
                    renamed = True;
                except RenameError as e:
                    self.logger.warning( str( e ) );
                    error = e;
                except ( OSError, ValueError ) as e:
                    error = RenameError( subtitle_path, new_path, e );
                    self.logger.warning( str( error ) );

        result = MatchResult( subtitle_path, video_path, new_path, score, renamed, error );
        self.reporter.match_found( result );
        return result;

    def _process( self, video_paths: Sequence, subtitle_paths: Sequence, perform_renames: bool ) -> List[MatchResult]:
        self.reporter.scan_complete( len( video_paths ), len( subtitle_paths ) );
        candidates = self.build_candidates( video_paths );

        results = [];
        for subtitle_path in subtitle_paths:
            result = self._match_one( Path( subtitle_path ), candidates, perform_renames );
            if result is not None:
                results.append( result );

        self.reporter.run_complete( results, dry_run=not perform_renames );
        return results;

    def plan( self, video_paths: Sequence, subtitle_paths: Sequence ) -> List[MatchResult]:
        """Compute results without touching the filesystem, whatever dry_run says."""
        return self._process( video_paths, subtitle_paths, perform_renames=False );

    def run( self, video_paths: Sequence, subtitle_paths: Sequence ) -> List[MatchResult]:
        """
        Match every subtitle and, unless dry_run is set, rename it.

        Args:
            video_paths: Candidate videos in scan order
            subtitle_paths: Subtitles in scan order

        Returns:
            One MatchResult per subtitle in input order, except subtitles
            skipped by ignore_existing because they are already correctly named
        """
        return self._process( video_paths, subtitle_paths, perform_renames=not self.config.dry_run );

    def match_directory( self, directory ) -> List[MatchResult]:
        """
        Scan a directory and run the matcher on what was found.

        Raises:
            ScanError: Scanning failed; no subtitle has been processed
        """
        video_paths, subtitle_paths = scan_media_files( directory, self.config, logger=self.logger );
        self.logger.info( f"Found {len( video_paths )} video files and {len( subtitle_paths )} subtitle files" );
        return self.run( video_paths, subtitle_paths );
