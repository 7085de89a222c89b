from .langcodes import translate, LanguageTableError
from .mappings import get_iso_639_2_code, normalize_language_code
