"""
Matcher configuration value object with validation and environment loading.
"""
import math
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterable, Optional, Tuple
from dotenv import load_dotenv

from .logging import get_package_logger


DEFAULT_VIDEO_EXTENSIONS = ( ".mkv", ".mp4", ".avi", ".mov", ".webm" );
DEFAULT_SUBTITLE_EXTENSIONS = ( ".srt", ".ass", ".vtt" );
DEFAULT_SIMILARITY_THRESHOLD = 0.6;

ENV_PREFIX = "SUBMATCH_";
TRUE_VALUES = { "1", "true", "yes", "on" };
FALSE_VALUES = { "0", "false", "no", "off" };


def is_valid_threshold( value ) -> bool:
    """True for real numbers within [0.0, 1.0]."""
    if isinstance( value, bool ) or not isinstance( value, ( int, float ) ):
        return False;
    return not math.isnan( value ) and 0.0 <= value <= 1.0;


def normalize_extensions( extensions: Iterable[str] ) -> Tuple[str, ...]:
    """Lowercase extensions and make sure each carries a leading dot."""
    normalized = [];
    for extension in extensions:
        extension = extension.strip().lower();
        if not extension:
            continue;
        if not extension.startswith( "." ):
            extension = f".{extension}";
        if extension not in normalized:
            normalized.append( extension );
    return tuple( normalized );


@dataclass( frozen=True )
class MatcherConfig:
    """
    Settings for one matching run. Immutable once built.

    Defaults: videos .mkv/.mp4/.avi/.mov/.webm, subtitles .srt/.ass/.vtt,
    threshold 0.6, recursive scan, dry run, verbose, keep already-named files.
    An out-of-range threshold is ignored (with a warning) and the default kept.
    """

    video_extensions: Tuple[str, ...] = DEFAULT_VIDEO_EXTENSIONS;
    subtitle_extensions: Tuple[str, ...] = DEFAULT_SUBTITLE_EXTENSIONS;
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD;
    recursive: bool = True;
    dry_run: bool = True;
    verbose: bool = True;
    ignore_existing: bool = False;

    def __post_init__( self ):
        object.__setattr__( self, "video_extensions", normalize_extensions( self.video_extensions ) );
        object.__setattr__( self, "subtitle_extensions", normalize_extensions( self.subtitle_extensions ) );

        if not is_valid_threshold( self.similarity_threshold ):
            get_package_logger().warning(
                f"Ignoring similarity threshold {self.similarity_threshold!r} (must be 0.0-1.0), "
                f"using {DEFAULT_SIMILARITY_THRESHOLD}"
            );
            object.__setattr__( self, "similarity_threshold", DEFAULT_SIMILARITY_THRESHOLD );
        else:
            object.__setattr__( self, "similarity_threshold", float( self.similarity_threshold ) );

    def with_threshold( self, threshold ) -> "MatcherConfig":
        """Copy with a new threshold; an invalid value keeps the current one."""
        if not is_valid_threshold( threshold ):
            get_package_logger().warning(
                f"Ignoring similarity threshold {threshold!r} (must be 0.0-1.0), "
                f"keeping {self.similarity_threshold}"
            );
            return self;
        return replace( self, similarity_threshold=threshold );

    def with_options( self, **changes ) -> "MatcherConfig":
        """Copy with other fields replaced. Thresholds go through with_threshold."""
        threshold = changes.pop( "similarity_threshold", None );
        config = replace( self, **changes ) if changes else self;
        if threshold is not None:
            config = config.with_threshold( threshold );
        return config;

    @classmethod
    def from_env( cls, env_file: Optional[Path] = None, **overrides ) -> "MatcherConfig":
        """
        Build a config from SUBMATCH_* environment variables.

        Args:
            env_file: Optional .env file to load first (existing variables win)
            **overrides: Field values that take precedence over the environment

        Returns:
            MatcherConfig
        """
        if env_file is not None and Path( env_file ).exists():
            load_dotenv( env_file );

        logger = get_package_logger();
        values = {};

        threshold = os.getenv( f"{ENV_PREFIX}THRESHOLD" );
        if threshold:
            try:
                values["similarity_threshold"] = float( threshold );
            except ValueError:
                logger.warning( f"Ignoring {ENV_PREFIX}THRESHOLD={threshold!r}: not a number" );

        for field_name in ( "video_extensions", "subtitle_extensions" ):
            raw = os.getenv( f"{ENV_PREFIX}{field_name.upper()}" );
            if raw:
                values[field_name] = tuple( raw.split( "," ) );

        for field_name in ( "recursive", "ignore_existing" ):
            variable = f"{ENV_PREFIX}{field_name.upper()}";
            raw = os.getenv( variable );
            if raw is None or raw.strip() == "":
                continue;
            flag = raw.strip().lower();
            if flag in TRUE_VALUES:
                values[field_name] = True;
            elif flag in FALSE_VALUES:
                values[field_name] = False;
            else:
                logger.warning( f"Ignoring {variable}={raw!r}: expected true/false" );

        values.update( overrides );
        return cls( **values );
