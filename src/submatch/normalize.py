"""
Title normalization for comparing video and subtitle filename stems.
"""
import re

# Platform ID tags such as "[dQw4w9WgXcQ]"
BRACKET_TAG_PATTERN = re.compile( r'\[[A-Za-z0-9_-]+\]' );
WHITESPACE_PATTERN = re.compile( r'\s+' );

# Literal suffixes left by download tools, removed by exact substring match.
# Order matters: the dual-subtitle marker contains the bare platform marker's tail.
PLATFORM_SUFFIXES = (
    "-_YouTube-zh-CN-dual-double",
    "_-_YouTube",
);

CHARACTER_SUBSTITUTIONS = {
    "？": "?",  # full-width question mark
};


def _strip_once( title: str ) -> str:
    title = BRACKET_TAG_PATTERN.sub( "", title );

    for suffix in PLATFORM_SUFFIXES:
        title = title.replace( suffix, "" );

    title = title.replace( "_", " " );
    for source, target in CHARACTER_SUBSTITUTIONS.items():
        title = title.replace( source, target );

    title = WHITESPACE_PATTERN.sub( " ", title ).strip();
    return title.lower();


def normalize_title( stem: str ) -> str:
    """
    Canonicalize a filename stem into a comparable title.

    Strips bracketed platform IDs and known platform suffixes, turns underscores
    into spaces, maps the full-width question mark to "?", collapses whitespace
    and lowercases. Removing a tag can expose a new one ("[a[b]]" -> "[a]"), so
    stripping repeats until the title stops changing; this keeps the function
    idempotent.

    Args:
        stem: Filename without its extension

    Returns:
        Normalized title (empty for empty input)
    """
    title = _strip_once( stem );
    while True:
        stripped = _strip_once( title );
        if stripped == title:
            return title;
        title = stripped;
