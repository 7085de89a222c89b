import pytest

from langtag.utils.files import open_subtitle
from langtag.utils.languages import get_subtitle_language, get_subtitle_tag, language_to_tag

ENGLISH = [
    "Where were you last night? I waited for hours.",
    "I told you, I had to work late at the office.",
    "You always say that, but nobody there answers the phone.",
    "Please, just listen to me for one minute.",
    "I am tired of listening. I want the truth.",
]

FRENCH = [
    "Où étais-tu hier soir ? Je t'ai attendu pendant des heures.",
    "Je te l'ai dit, je devais travailler tard au bureau.",
    "Tu dis toujours ça, mais personne ne répond jamais au téléphone.",
    "S'il te plaît, écoute-moi une minute.",
    "Je suis fatiguée d'écouter. Je veux la vérité.",
]


def test_detects_english(write_srt):
    path = write_srt("movie.en.srt", ENGLISH)
    assert get_subtitle_language(path) == "en"
    assert get_subtitle_tag(path) == "eng"


def test_detects_french_in_legacy_encoding(write_srt):
    path = write_srt("movie.fr.srt", FRENCH, encoding="cp1252")
    assert get_subtitle_language(path) == "fr"
    assert get_subtitle_tag(path) == "fre"


def test_numbers_only_is_unknown(write_srt):
    path = write_srt("numbers.srt", ["1", "22", "333"])
    assert get_subtitle_language(path) == "unknown"
    assert get_subtitle_tag(path) == "und"
    assert get_subtitle_tag(path, fallback="mis") == "mis"


def test_open_subtitle_reads_events(write_srt):
    subs = open_subtitle(write_srt("a.srt", ENGLISH[:2]))
    assert [e.plaintext for e in subs] == ENGLISH[:2]


def test_open_missing_subtitle(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_subtitle(tmp_path / "missing.srt")


def test_empty_subtitle_is_unknown(tmp_path):
    path = tmp_path / "empty.srt"
    path.write_text("")
    assert get_subtitle_language(path) == "unknown"
    assert get_subtitle_tag(path) == "und"
    assert get_subtitle_tag(path, fallback="mis") == "mis"


def test_missing_subtitle_still_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_subtitle_language(tmp_path / "missing.srt")


@pytest.mark.parametrize("lang, expected", [
    ("en", "eng"),
    ("zh", "chi"),
    ("unknown", "und"),
    ("qq", "und"),
])
def test_language_to_tag(lang, expected):
    assert language_to_tag(lang) == expected
