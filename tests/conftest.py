"""
Shared pytest setup for SubMatch tests.
"""
import sys
from pathlib import Path
import pytest

# Add src directory to path for testing
sys.path.insert( 0, str( Path( __file__ ).parent.parent / "src" ) );

from submatch.logging import setup_logging


@pytest.fixture( autouse=True, scope="session" )
def isolated_logs( tmp_path_factory ):
    """Keep log files out of the working tree."""
    return setup_logging( debug=True, logs_dir=tmp_path_factory.mktemp( "logs" ) );
