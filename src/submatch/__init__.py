"""
SubMatch - Subtitle to video filename matching utility.

Pairs subtitle files with the videos they belong to using normalized titles
and longest-common-subsequence similarity, then renames them to match.
"""

__version__ = "0.1.0";
__author__ = "SubMatch Project";
__license__ = "MIT";
