from pathlib import Path

import yaml

from c7gamedata.settings import Settings


def test_defaults_load_from_package():
    settings = Settings.load()
    assert settings.persistence.indent == 2
    assert settings.persistence.compression_level == 6
    assert settings.persistence.default_extension == ".zip"
    assert settings.persistence.save_dir is None
    assert settings.import_.default_biq_path is None


def test_user_file_overlays_defaults(tmp_path: Path):
    user = tmp_path / "settings.yaml"
    user.write_text(
        yaml.safe_dump({"persistence": {"indent": 0}, "import": {"default_biq_path": "/civ3/conquests.biq"}}),
        encoding="utf-8",
    )
    settings = Settings.load(user)
    assert settings.persistence.indent == 0
    assert settings.persistence.default_extension == ".zip"
    assert settings.import_.default_biq_path == "/civ3/conquests.biq"


def test_missing_user_file_keeps_defaults(tmp_path: Path, caplog):
    settings = Settings.load(tmp_path / "nope.yaml")
    assert settings.persistence.indent == 2
    assert any("not found" in rec.message for rec in caplog.records)


def test_save_and_reload(tmp_path: Path):
    settings = Settings()
    settings.persistence.default_extension = ".json"
    settings.persistence.save_dir = str(tmp_path / "saves")
    path = tmp_path / "config" / "settings.yaml"
    settings.save(path)

    reloaded = Settings.load(path)
    assert reloaded.persistence.default_extension == ".json"
    assert reloaded.persistence.save_dir == str(tmp_path / "saves")
