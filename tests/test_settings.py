import configparser
import pathlib
import sys

import pytest

from aifilesorter.settings import Settings, default_sort_folder, define_config_path


@pytest.fixture
def home(tmp_path, monkeypatch):
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setattr(pathlib.Path, "home", classmethod(lambda cls: home_dir))
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home_dir / ".config"))
    return home_dir


@pytest.fixture
def config_file(tmp_path, home):
    return tmp_path / "conf" / "nested" / "config.ini"


def read_ini(path):
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str
    parser.read(path, encoding="utf-8")
    return parser


def test_constructor_creates_config_dir(config_file):
    settings = Settings(config_file)
    assert settings.config_dir == config_file.parent
    assert config_file.parent.is_dir()


def test_defaults(config_file, home):
    settings = Settings(config_file)
    assert settings.use_subcategories is True
    assert settings.categorize_files is True
    assert settings.categorize_directories is False
    assert settings.sort_folder == str(home)
    assert settings.skipped_version == ""


def test_load_missing_file_returns_false_and_uses_default(config_file, home):
    settings = Settings(config_file)
    settings.sort_folder = "/somewhere/else"
    assert settings.load() is False
    assert settings.sort_folder == str(home)


def test_save_writes_expected_keys(config_file, home):
    settings = Settings(config_file)
    settings.categorize_directories = True
    settings.use_subcategories = False
    assert settings.save() is True
    section = read_ini(config_file)["Settings"]
    assert section["UseSubcategories"] == "false"
    assert section["CategorizeFiles"] == "true"
    assert section["CategorizeDirectories"] == "true"
    assert section["SortFolder"] == str(home)
    assert "SkippedVersion" not in section


def test_round_trip(config_file, tmp_path):
    settings = Settings(config_file)
    settings.use_subcategories = False
    settings.categorize_files = False
    settings.categorize_directories = True
    settings.sort_folder = str(tmp_path / "sorted")
    settings.skipped_version = "1.2.3"
    assert settings.save()

    loaded = Settings(config_file)
    assert loaded.load() is True
    assert loaded.use_subcategories is False
    assert loaded.categorize_files is False
    assert loaded.categorize_directories is True
    assert loaded.sort_folder == str(tmp_path / "sorted")
    assert loaded.skipped_version == "1.2.3"


def test_load_partial_file_uses_load_defaults(config_file, home):
    config_file.parent.mkdir(parents=True)
    config_file.write_text("[Settings]\nCategorizeFiles = false\n", encoding="utf-8")
    settings = Settings(config_file)
    assert settings.load() is True
    assert settings.use_subcategories is False
    assert settings.categorize_files is False
    assert settings.categorize_directories is False
    assert settings.sort_folder == str(home)
    assert settings.skipped_version == "0.0.0"


def test_save_keeps_unrelated_entries(config_file):
    config_file.parent.mkdir(parents=True)
    config_file.write_text("[Settings]\nExtra = kept\n[Other]\nKey = value\n", encoding="utf-8")
    settings = Settings(config_file)
    assert settings.load()
    settings.categorize_files = False
    assert settings.save()
    parser = read_ini(config_file)
    assert parser["Settings"]["Extra"] == "kept"
    assert parser["Other"]["Key"] == "value"
    assert parser["Settings"]["CategorizeFiles"] == "false"


def test_save_fails_when_path_is_directory(tmp_path, home):
    target = tmp_path / "dir_as_file"
    target.mkdir()
    settings = Settings(target)
    assert settings.save() is False


def test_define_config_path_linux(monkeypatch, home):
    monkeypatch.setattr(sys, "platform", "linux")
    assert define_config_path() == str(home / ".config" / "AIFileSorter" / "config.ini")


def test_define_config_path_macos(monkeypatch, home):
    monkeypatch.setattr(sys, "platform", "darwin")
    expected = home / "Library" / "Application Support" / "AIFileSorter" / "config.ini"
    assert define_config_path() == str(expected)


def test_define_config_path_without_home(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.delenv("HOME", raising=False)
    assert define_config_path() == "config.ini"


def test_default_sort_folder_prefers_downloads(monkeypatch, home):
    monkeypatch.setattr(sys, "platform", "linux")
    (home / "Downloads").mkdir()
    assert default_sort_folder() == str(home / "Downloads")


def test_default_sort_folder_reads_user_dirs(monkeypatch, home):
    monkeypatch.setattr(sys, "platform", "linux")
    config_dir = home / ".config"
    config_dir.mkdir()
    (config_dir / "user-dirs.dirs").write_text(
        'XDG_DOWNLOAD_DIR="$HOME/Incoming"\n', encoding="utf-8"
    )
    assert default_sort_folder() == str(home) + "/Incoming"


def test_default_sort_folder_falls_back_to_home(monkeypatch, home):
    monkeypatch.setattr(sys, "platform", "linux")
    assert default_sort_folder() == str(home)