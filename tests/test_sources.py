"""Tests for configuration and dictionary files."""

import json
import logging
from pathlib import Path

import pytest

from xkpgen.config import CaseTransform, UnknownEnumValue
from xkpgen.sources import (
    CONFIG_FILENAME,
    ConfigFileError,
    DictionaryError,
    find_config_file,
    read_config_file,
    read_dictionary,
)


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_find_config_prefers_home(tmp_path):
    home = tmp_path / "home"
    cwd = tmp_path / "work"
    home.mkdir()
    cwd.mkdir()
    write_json(home / CONFIG_FILENAME, {})
    write_json(cwd / CONFIG_FILENAME, {})
    assert find_config_file(home=home, cwd=cwd) == home / CONFIG_FILENAME


def test_find_config_falls_back_to_cwd(tmp_path):
    home = tmp_path / "home"
    cwd = tmp_path / "work"
    home.mkdir()
    cwd.mkdir()
    write_json(cwd / CONFIG_FILENAME, {})
    assert find_config_file(home=home, cwd=cwd) == cwd / CONFIG_FILENAME


def test_find_config_none(tmp_path):
    assert find_config_file(home=tmp_path, cwd=tmp_path) is None


def test_read_config_file(tmp_path):
    path = write_json(tmp_path / "defaults.json", {"num_words": 2, "case_transform": "upper"})
    config = read_config_file(path, dictionary=("wolf",))
    assert config.num_words == 2
    assert config.case_transform is CaseTransform.UPPER
    assert config.word_dictionary == ("wolf",)


def test_read_config_file_logs_unknown_keys(tmp_path, caplog):
    path = write_json(tmp_path / "defaults.json", {"num_words": 2, "colour": "red"})
    logger = logging.getLogger("sources-test")
    with caplog.at_level(logging.DEBUG, logger="sources-test"):
        read_config_file(path, logger=logger)
    assert "colour" in caplog.text


def test_read_config_file_errors(tmp_path):
    with pytest.raises(ConfigFileError):
        read_config_file(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigFileError):
        read_config_file(broken)

    with pytest.raises(ConfigFileError):
        read_config_file(write_json(tmp_path / "list.json", [1, 2]))

    with pytest.raises(UnknownEnumValue):
        read_config_file(write_json(tmp_path / "bad.json", {"padding_type": "elastic"}))


def test_read_dictionary(tmp_path):
    path = write_json(tmp_path / "words.json", ["wolf", "tiger", "puma"])
    assert read_dictionary(path) == ("wolf", "tiger", "puma")


@pytest.mark.parametrize("data", [[], {"wolf": 1}, ["wolf", 3]])
def test_read_dictionary_rejects_bad_content(tmp_path, data):
    with pytest.raises(DictionaryError):
        read_dictionary(write_json(tmp_path / "words.json", data))


def test_read_dictionary_missing_file(tmp_path):
    with pytest.raises(DictionaryError):
        read_dictionary(tmp_path / "nope.json")


def test_find_config_without_home_directory(tmp_path, monkeypatch):
    def no_home():
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", staticmethod(no_home))
    write_json(tmp_path / CONFIG_FILENAME, {})
    assert find_config_file(cwd=tmp_path) == tmp_path / CONFIG_FILENAME
    assert find_config_file(cwd=tmp_path / "missing") is None
