import pytest
from langtag.utils import config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keeps tests away from the real ~/.langtag directory."""
    config_dir = tmp_path / ".langtag"
    monkeypatch.setattr(config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config, "CONFIG_FILE", config_dir / "config.json")
    return config_dir / "config.json"


@pytest.fixture
def write_srt(tmp_path):
    def _write(name, lines, encoding="utf-8"):
        blocks = []
        for i, text in enumerate(lines, 1):
            blocks.append(f"{i}\n00:00:{i:02},000 --> 00:00:{i:02},900\n{text}\n")
        path = tmp_path / name
        path.write_text("\n".join(blocks), encoding=encoding)
        return path
    return _write
