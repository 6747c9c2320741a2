"""
Title similarity scoring based on longest common subsequence (LCS) length.
"""


def longest_common_subsequence( text1, text2 ) -> int:
    """
    Length of the longest common subsequence of two sequences (str or bytes).

    Classic O(len(text1) * len(text2)) dynamic programming table where
    table[i][j] is the LCS length of text1[:i] and text2[:j]. Only the length
    is needed, so there is no backtracking.
    """
    rows, cols = len( text1 ), len( text2 );
    table = [ [ 0 ] * ( cols + 1 ) for _ in range( rows + 1 ) ];

    for i in range( 1, rows + 1 ):
        for j in range( 1, cols + 1 ):
            if text1[i - 1] == text2[j - 1]:
                table[i][j] = table[i - 1][j - 1] + 1;
            else:
                table[i][j] = max( table[i - 1][j], table[i][j - 1] );

    return table[rows][cols];


def calculate_similarity( text1: str, text2: str ) -> float:
    """
    Calculate similarity between two normalized titles.

    Titles are compared as UTF-8 bytes, so lengths and matches count bytes
    rather than characters.

    Args:
        text1: First normalized title
        text2: Second normalized title

    Returns:
        Similarity score (0.0-1.0): LCS length divided by the longer length.
        Identical strings (including two empty ones) score exactly 1.0.
    """
    if text1 == text2:
        return 1.0;

    bytes1 = text1.encode( "utf-8" );
    bytes2 = text2.encode( "utf-8" );
    max_length = max( len( bytes1 ), len( bytes2 ) );
    if max_length == 0:
        return 0.0;

    return longest_common_subsequence( bytes1, bytes2 ) / max_length;
