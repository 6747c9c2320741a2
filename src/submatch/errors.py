"""
Exception types raised by SubMatch.
"""
from pathlib import Path


class SubMatchError( Exception ):
    """Base class for all SubMatch errors."""


class ScanError( SubMatchError ):
    """Directory traversal or listing failed. Fatal for the whole run."""
    
    def __init__( self, directory, cause: Exception = None ):
        self.directory = Path( directory );
        self.cause = cause;
        message = f"Failed to scan files in {self.directory}";
        if cause is not None:
            message = f"{message}: {cause}";
        super().__init__( message );


class RenameError( SubMatchError ):
    """A single subtitle rename failed. Recorded on that subtitle's result."""
    
    def __init__( self, old_path, new_path, cause: Exception = None ):
        self.old_path = Path( old_path );
        self.new_path = Path( new_path );
        self.cause = cause;
        message = f"Failed to rename {self.old_path.name} -> {self.new_path.name}";
        if cause is not None:
            message = f"{message}: {cause}";
        super().__init__( message );
