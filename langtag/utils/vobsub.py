"""
Reads the language tracks declared in a VobSub index (.idx).

Each track starts with a line like ``id: en, index: 0``; DVDs without a
language tag use ``id: --``.
"""
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from .langcodes import translate

logger = logging.getLogger(__name__)

_TRACK_LINE = re.compile(r'^\s*id:\s*(?P<lang>[^,\s]*)\s*,\s*index:\s*(?P<index>\S+)\s*$', re.IGNORECASE)


class VobSubError(ValueError):
    """Raised for .idx files with unreadable track declarations."""


@dataclass(frozen=True)
class VobSubTrack:
    index: int
    language: str
    tag: str | None


def resolve_idx_path(path: Path | str) -> Path:
    """Maps a .sub bitmap file to its sibling .idx index."""
    path = Path(path)
    if path.suffix.lower() == ".sub":
        path = path.with_suffix(".idx")
    return path

def parse_idx_tracks(lines) -> list[VobSubTrack]:
    tracks = []
    for line_no, line in enumerate(lines, 1):
        if line.lstrip().startswith("#"):
            continue
        match = _TRACK_LINE.match(line)
        if not match:
            continue

        raw_index = match.group("index")
        try:
            index = int(raw_index)
        except ValueError:
            raise VobSubError(f"Line {line_no}: invalid track index {raw_index!r}") from None

        lang = match.group("lang")
        # idx tags are lowercase by convention; '--' means no language
        tag = translate(lang.lower()) if lang and lang != "--" else None
        if tag is None:
            logger.debug("Track %d has no known language (%r)", index, lang)
        tracks.append(VobSubTrack(index=index, language=lang, tag=tag))
    return tracks

def read_idx_tracks(path: Path | str) -> list[VobSubTrack]:
    """Returns the tracks of a VobSub index, in file order."""
    idx_path = resolve_idx_path(path)
    if not idx_path.exists():
        raise FileNotFoundError(f"Missing {idx_path.name}")

    # .idx files are plain ASCII, but some authoring tools write latin-1 comments
    with open(idx_path, 'r', encoding='latin-1') as f:
        return parse_idx_tracks(f)
