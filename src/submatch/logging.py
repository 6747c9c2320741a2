"""
Logging system for SubMatch with 5MB startup rotation and Rich console output.
"""
import logging
import shutil
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from rich.console import Console
from rich.logging import RichHandler


LOG_SIZE_LIMIT = 5 * 1024 * 1024;  # 5MB


class SubMatchLogger:
    """
    Logger for SubMatch with automatic log rotation and Rich display.

    Features:
    - 5MB size check on startup, rotates if exceeded
    - Rich console output on stderr so reports on stdout stay clean
    - File logging with rotation
    - INFO default, DEBUG with --debug flag
    """

    def __init__( self, name: str = "submatch", debug: bool = False, logs_dir: Path = None ):
        self.name = name;
        self.debug_enabled = debug;
        self.console = Console( stderr=True );

        self.logs_dir = Path( logs_dir ) if logs_dir else Path( "logs" );
        self.logs_dir.mkdir( parents=True, exist_ok=True );

        self.log_file = self.logs_dir / f"{name}.log";

        self._check_and_rotate_on_startup();

        self.logger = self._setup_logger();

    def _check_and_rotate_on_startup( self ):
        """Check log file size on startup and rotate if >5MB."""
        if self.log_file.exists() and self.log_file.stat().st_size > LOG_SIZE_LIMIT:
            timestamp = datetime.now().isoformat().replace( ":", "-" );
            backup_name = self.logs_dir / f"{self.name}.{timestamp}.log";
            shutil.move( str( self.log_file ), str( backup_name ) );

    def _setup_logger( self ):
        """Setup logger with Rich console and file handlers."""
        level = logging.DEBUG if self.debug_enabled else logging.INFO;
        logger = logging.getLogger( self.name );
        logger.setLevel( logging.DEBUG );
        logger.propagate = False;

        # Drop handlers left over from an earlier instance
        for handler in list( logger.handlers ):
            handler.close();
        logger.handlers.clear();

        console_handler = RichHandler(
            console=self.console,
            rich_tracebacks=True,
            show_time=self.debug_enabled,
            show_path=self.debug_enabled
        );
        console_handler.setLevel( logging.DEBUG if self.debug_enabled else logging.WARNING );
        console_handler.setFormatter( logging.Formatter( "%(message)s" ) );
        logger.addHandler( console_handler );

        file_handler = RotatingFileHandler(
            self.log_file,
            maxBytes=LOG_SIZE_LIMIT,
            backupCount=5,
            encoding="utf-8"
        );
        file_handler.setLevel( level );
        file_handler.setFormatter( logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ) );
        logger.addHandler( file_handler );

        return logger;

    def debug( self, message, **kwargs ):
        """Log debug message."""
        self.logger.debug( message, **kwargs );

    def info( self, message, **kwargs ):
        """Log info message."""
        self.logger.info( message, **kwargs );

    def warning( self, message, **kwargs ):
        """Log warning message."""
        self.logger.warning( message, **kwargs );

    def error( self, message, **kwargs ):
        """Log error message."""
        self.logger.error( message, **kwargs );


def get_package_logger() -> logging.Logger:
    """
    The plain "submatch" logger.

    Unlike get_logger this never creates handlers or a log file; messages reach
    the handlers SubMatchLogger installed once the application configured it.
    """
    return logging.getLogger( "submatch" );


# Global logger instance
_logger = None;


def get_logger( debug: bool = False ) -> SubMatchLogger:
    """Get the global SubMatch logger instance."""
    global _logger;
    if _logger is None:
        _logger = SubMatchLogger( debug=debug );
    return _logger;


def setup_logging( debug: bool = False, logs_dir: Path = None ) -> SubMatchLogger:
    """(Re)configure the global logger, e.g. once the CLI knows about --debug."""
    global _logger;
    _logger = SubMatchLogger( debug=debug, logs_dir=logs_dir );
    return _logger;
