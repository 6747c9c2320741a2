"""
Filesystem rename operation used when a run is not a dry run.
"""
import os
from pathlib import Path

from .errors import RenameError
from .logging import get_logger


class FileRenamer:
    """
    Renames one file per call with os.rename.

    Refuses to replace a different existing file at the destination, so two
    subtitles matched to the same video cannot overwrite each other.
    """

    def __init__( self, logger=None ):
        self.logger = logger if logger is not None else get_logger();

    def rename( self, old_path: Path, new_path: Path ):
        """
        Rename old_path to new_path.

        Raises:
            RenameError: The destination is taken or the OS call failed
        """
        old_path = Path( old_path );
        new_path = Path( new_path );

        try:
            if new_path.exists() and not os.path.samefile( old_path, new_path ):
                raise FileExistsError( f"Destination already exists: {new_path}" );
            os.rename( old_path, new_path );
        except OSError as e:
            raise RenameError( old_path, new_path, e ) from e;

        self.logger.debug( f"Renamed {old_path} -> {new_path}" );
