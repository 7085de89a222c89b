import logging
from pathlib import Path
from langdetect import detect, DetectorFactory, LangDetectException
from .config import load_config
from .files import open_subtitle
from .mappings import get_iso_639_2_code, normalize_language_code

logger = logging.getLogger(__name__)

# langdetect is non-deterministic unless seeded
DetectorFactory.seed = 0

def get_subtitle_language(sub_path: Path, sample_chars: int | None = None) -> str:
    """
    Detects the language of a subtitle file by analyzing its text content.
    Returns the ISO 639-1 code (e.g., 'en', 'pt', 'es') or 'unknown'.
    """
    if sample_chars is None:
        sample_chars = load_config()["detection"]["sample_chars"]

    try:
        subs = open_subtitle(sub_path)
    except ValueError as e:
        # Empty or unparseable files have nothing to detect
        logger.debug("Could not read %s: %s", sub_path, e)
        return "unknown"

    sample_text = []
    char_count = 0

    for event in subs:
        text = event.plaintext.strip()

        # Skip empty lines, numbers, or very short generic sounds
        if not text or len(text) < 2 or text.isnumeric():
            continue

        sample_text.append(text)
        char_count += len(text)

        if char_count > sample_chars:
            break

    if not sample_text:
        return "unknown"

    try:
        # langdetect reports Chinese as zh-cn / zh-tw
        return normalize_language_code(detect(" ".join(sample_text)))
    except LangDetectException as e:
        logger.debug("Language detection failed for %s: %s", sub_path, e)
        return "unknown"

def language_to_tag(lang: str, fallback: str | None = None) -> str:
    """Maps a detected ISO 639-1 code (or 'unknown') to its container tag."""
    if lang == "unknown":
        return get_iso_639_2_code("", fallback=fallback)
    return get_iso_639_2_code(lang, fallback=fallback)

def get_subtitle_tag(sub_path: Path, fallback: str | None = None) -> str:
    """Detects a subtitle's language and returns its 3-letter container tag."""
    return language_to_tag(get_subtitle_language(sub_path), fallback=fallback)
