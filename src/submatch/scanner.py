"""
Directory scanning for video and subtitle files.
"""
import os
from pathlib import Path
from typing import List, Tuple

from .config import MatcherConfig
from .errors import ScanError
from .logging import get_logger


def _raise_walk_error( error: OSError ):
    raise error;


def classify_file( path: Path, config: MatcherConfig ) -> str:
    """Return "video", "subtitle" or "" based on the (case-insensitive) extension."""
    extension = path.suffix.lower();
    if extension in config.video_extensions:
        return "video";
    if extension in config.subtitle_extensions:
        return "subtitle";
    return "";


def scan_media_files( directory, config: MatcherConfig, logger=None ) -> Tuple[List[Path], List[Path]]:
    """
    Collect video and subtitle files under a directory.

    Recursive mode walks the whole tree, otherwise only direct entries are
    listed. Entries are visited in sorted order so runs are repeatable.

    Args:
        directory: Root directory to scan
        config: Extension lists and recursive flag
        logger: Logger for scan details (defaults to the global SubMatch logger)

    Returns:
        (video_paths, subtitle_paths)

    Raises:
        ScanError: The directory (or any directory below it) could not be listed
    """
    if logger is None:
        logger = get_logger();
    directory = Path( directory );
    video_files = [];
    subtitle_files = [];

    def collect( path: Path ):
        kind = classify_file( path, config );
        if kind == "video":
            video_files.append( path );
        elif kind == "subtitle":
            subtitle_files.append( path );

    try:
        if not directory.is_dir():
            raise NotADirectoryError( f"Not a directory: {directory}" );

        if config.recursive:
            for root, dirs, files in os.walk( directory, onerror=_raise_walk_error ):
                dirs.sort();
                for name in sorted( files ):
                    collect( Path( root ) / name );
        else:
            for entry in sorted( directory.iterdir() ):
                if not entry.is_dir():
                    collect( entry );
    except OSError as e:
        raise ScanError( directory, e ) from e;

    logger.debug( f"Scanned {directory}: {len( video_files )} videos, {len( subtitle_files )} subtitles" );
    return video_files, subtitle_files;
