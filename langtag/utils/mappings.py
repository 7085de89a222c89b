import logging
import re
from .config import load_config
from .langcodes import translate

logger = logging.getLogger(__name__)

_REGION_SUFFIX = re.compile(r'[-_].*$')

def normalize_language_code(lang_code: str) -> str:
    """
    Prepares a raw tag for lookup: trims, lowercases and drops region
    suffixes ('pt-BR' -> 'pt', 'zh_TW' -> 'zh').
    """
    if not lang_code: return ""
    return _REGION_SUFFIX.sub('', lang_code.strip().lower())

def get_iso_639_2_code(lang_code: str, fallback: str | None = None, keep_unknown: bool | None = None) -> str:
    """
    Converts 2-letter ISO 639-1 codes to 3-letter ISO 639-2/B container codes.

    Codes that are already 3 letters are returned unchanged. Unknown codes
    become `fallback`, or are passed through untouched when `keep_unknown`
    is set. Either argument left as None is read from the config file
    ('und' and False by default).
    """
    if fallback is None or keep_unknown is None:
        tagging = load_config()["tagging"]
        if fallback is None: fallback = tagging["fallback_tag"]
        if keep_unknown is None: keep_unknown = tagging["keep_unknown"]

    code = normalize_language_code(lang_code)
    if not code: return fallback

    # Container tags from ffprobe / mkvmerge are already ISO 639-2
    if len(code) == 3 and code.isalpha(): return code

    tag = translate(code)
    if tag is not None: return tag

    if keep_unknown:
        logger.debug("No ISO 639-2 code for %r, keeping it", lang_code)
        return code

    logger.warning("No ISO 639-2 code for %r, using %r", lang_code, fallback)
    return fallback
