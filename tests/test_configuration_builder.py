from dataclasses import dataclass

import pytest

from src.main.configuration.builder import ConfigurationBuilder
from src.main.section_binding import get_required_as
from src.main.utils.config import ConfigurationFormatError


@dataclass
class Indexing:
    keyframes_dir: str
    embed_batch_size: int = 16
    skip_on_error: bool = False


def test_yaml_layers_later_overrides_earlier(tmp_path):
    base = tmp_path / 'base.yml'
    base.write_text("Indexing:\n  keyframes_dir: frames\n  embed_batch_size: 8\n", encoding='utf-8')
    override = tmp_path / 'override.yml'
    override.write_text("Indexing:\n  embed_batch_size: 32\n  skip_on_error: true\n", encoding='utf-8')

    tree = ConfigurationBuilder().add_yaml_file(str(base)).add_yaml_file(str(override)).build()

    assert get_required_as(tree, Indexing) == Indexing(keyframes_dir='frames', embed_batch_size=32, skip_on_error=True)


def test_in_memory_and_mapping_sources_combine():
    tree = (
        ConfigurationBuilder()
        .add_mapping({"Indexing": {"keyframes_dir": "frames"}})
        .add_in_memory_collection({"Indexing:keyframes_dir": "other", "Indexing:embed_batch_size": "4"})
        .build()
    )
    assert tree["indexing:keyframes_dir"] == "other"
    assert get_required_as(tree, Indexing).embed_batch_size == 4


def test_missing_required_yaml_raises(tmp_path):
    builder = ConfigurationBuilder().add_yaml_file(str(tmp_path / 'nope.yml'))
    with pytest.raises(FileNotFoundError):
        builder.build()


def test_missing_optional_yaml_is_skipped(tmp_path, capsys):
    tree = (
        ConfigurationBuilder()
        .add_in_memory_collection([("Indexing:keyframes_dir", "frames")])
        .add_yaml_file(str(tmp_path / 'debug.yml'), optional=True)
        .build()
    )
    assert len(tree) == 1
    assert 'optional YAML source not found' in capsys.readouterr().out


def test_non_mapping_yaml_is_rejected(tmp_path):
    path = tmp_path / 'list.yml'
    path.write_text("- a\n- b\n", encoding='utf-8')
    with pytest.raises(ConfigurationFormatError):
        ConfigurationBuilder().add_yaml_file(str(path)).build()


def test_sources_are_read_at_build_time(tmp_path):
    path = tmp_path / 'late.yml'
    builder = ConfigurationBuilder().add_yaml_file(str(path))
    path.write_text("Indexing:\n  keyframes_dir: late\n", encoding='utf-8')
    assert builder.build()["Indexing:keyframes_dir"] == "late"
