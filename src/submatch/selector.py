"""
Best-candidate selection for a single subtitle title.
"""
from pathlib import Path
from typing import Iterable, Optional, Tuple

from .similarity import calculate_similarity


def select_best( subtitle_title: str, candidates: Iterable[Tuple[Path, str]] ) -> Tuple[Optional[Path], float]:
    """
    Pick the candidate video whose normalized title best matches the subtitle.

    Candidates are scanned in order and only a strictly greater score replaces
    the current best, so the earliest candidate wins ties. A candidate scoring
    0.0 is never selected.

    Args:
        subtitle_title: Normalized subtitle title
        candidates: (video_path, normalized_video_title) pairs in scan order

    Returns:
        (best_video_path, best_score); (None, 0.0) when there are no candidates
    """
    best_path = None;
    best_score = 0.0;

    for video_path, video_title in candidates:
        score = calculate_similarity( subtitle_title, video_title );
        if score > best_score:
            best_score = score;
            best_path = video_path;

    return best_path, best_score;
