"""Extract YouTube video IDs from pasted URLs or bare IDs."""

import re

# Tried in order; the first pattern that matches wins.
VIDEO_ID_PATTERNS = [
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([^&\n?#]+)"),
    re.compile(r"^([a-zA-Z0-9_-]{11})$"),
]

_BARE_ID = re.compile(r"[a-zA-Z0-9_-]{11}")


def extract_video_id(text: str) -> str | None:
    """Return the video ID found in ``text``, or None.

    Accepts ``watch?v=``, ``youtu.be/`` and ``embed/`` URLs as well as a bare
    11-character ID. IDs taken from URLs are not length-checked.
    """
    candidate = text.strip()
    if not candidate:
        return None

    for pattern in VIDEO_ID_PATTERNS:
        match = pattern.search(candidate)
        if match:
            return match.group(1)
    return None


def is_valid_video_id(value: str) -> bool:
    """Check that ``value`` is a well-formed 11-character video ID."""
    return bool(_BARE_ID.fullmatch(value))
