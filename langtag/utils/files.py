import logging
import pysubs2
from pysubs2.exceptions import Pysubs2Error
from pathlib import Path

logger = logging.getLogger(__name__)

SUBTITLE_ENCODINGS = [
    "utf-8", "utf-8-sig", "cp1252",
    "cp1250", "cp1251", "gb18030",
    "big5", "shift_jis", "cp949",
    "latin-1",
]

def open_subtitle(path: Path, **kwargs) -> pysubs2.SSAFile:
    """
    Attempts to load a subtitle file using various common encodings.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)

    last_error = None
    for enc in SUBTITLE_ENCODINGS:
        try:
            return pysubs2.load(str(path), encoding=enc, **kwargs)
        except UnicodeDecodeError as e:
            last_error = e
            continue
        except Pysubs2Error as e:
            # Format errors won't be fixed by another encoding
            last_error = e
            break

    logger.error("Failed to open %s. Last error: %s", path.name, last_error)
    raise ValueError(f"Could not open {path.name}")
