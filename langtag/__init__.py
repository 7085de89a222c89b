import logging
import sys

# Ensure logging handlers write to the real stderr FD even if stdout/stderr get redirected.
logging.basicConfig(stream=sys.__stderr__)

__version__ = "1.0.0"

from .utils.langcodes import translate, LanguageTableError
