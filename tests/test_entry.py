"""Tests for the FileEntry snapshot."""

import os
from datetime import datetime

import pytest

from houndtree import EntryKind, FileEntry
from houndtree._common.config import WalkConfig
from houndtree._common.entry import kind_from_mode, structural_depth


class TestFileEntry:

    def test_basic_fields(self):
        entry = FileEntry(os.path.join('a', 'b.txt'), EntryKind.FILE, size=5)
        assert entry.name == 'b.txt'
        assert entry.size == 5
        assert entry.depth == 2
        assert entry.is_file()
        assert not entry.is_directory()
        assert entry.identifier() == entry.path
        assert str(entry) == entry.path

    def test_immutable(self):
        entry = FileEntry('a.txt', EntryKind.FILE)
        with pytest.raises(AttributeError):
            entry.size = 10
        with pytest.raises(AttributeError):
            del entry.path

    @pytest.mark.parametrize("name,expected", [
        ('a.json', 'json'),
        ('archive.tar.gz', 'gz'),
        ('Makefile', ''),
        ('.env', ''),
    ])
    def test_extension_has_no_dot(self, name, expected):
        assert FileEntry(name, EntryKind.FILE).extension() == expected

    @pytest.mark.parametrize("name,hidden", [
        ('.git', True),
        ('.env', True),
        ('visible', False),
        (os.curdir, False),
        (os.pardir, False),
    ])
    def test_is_hidden(self, name, hidden):
        assert FileEntry(name, EntryKind.DIRECTORY).is_hidden() is hidden

    def test_equality_by_path(self):
        a = FileEntry('x', EntryKind.FILE, size=1)
        b = FileEntry('x', EntryKind.FILE, size=2)
        assert a == b
        assert len({a, b}) == 1

    def test_from_stat(self, tmp_path):
        target = tmp_path / 'data.bin'
        target.write_bytes(b'12345')
        entry = FileEntry.from_stat(str(target), os.stat(target))
        assert entry.kind is EntryKind.FILE
        assert entry.size == 5
        assert entry.modified_time == os.stat(target).st_mtime

        directory = FileEntry.from_stat(str(tmp_path), os.stat(tmp_path))
        assert directory.is_directory()

    def test_metadata(self):
        entry = FileEntry('notes.md', EntryKind.FILE, size=3, modified_time=0.0)
        metadata = entry.metadata()
        assert metadata['type'] == 'file'
        assert metadata['extension'] == 'md'
        assert isinstance(metadata['mtime_dt'], datetime)

    def test_kind_from_mode(self, tmp_path):
        assert kind_from_mode(os.stat(tmp_path).st_mode) is EntryKind.DIRECTORY

    def test_structural_depth(self):
        assert structural_depth('a') == 1
        assert structural_depth(os.path.join('a', 'b', '')) == 2
        assert structural_depth(os.path.join('.', 'a')) == 1


class TestWalkConfig:

    def test_defaults(self):
        config = WalkConfig()
        assert config.max_depth is None
        assert config.reduces_paths
        assert config.validate() == []

    def test_depth_limit(self):
        config = WalkConfig.shallow(1)
        assert not config.is_beyond_depth(1)
        assert config.is_beyond_depth(2)
        assert not config.reduces_paths

    def test_prune_hidden_only_when_enabled(self):
        hidden = FileEntry(os.path.join('root', '.git'), EntryKind.DIRECTORY)
        assert not WalkConfig().should_prune(hidden, 1)
        assert WalkConfig(ignore_hidden_directories=True).should_prune(hidden, 1)

    def test_prune_beyond_depth(self):
        deep = FileEntry(os.path.join('root', 'a', 'b'), EntryKind.DIRECTORY)
        assert WalkConfig(max_depth=1).should_prune(deep, 1)
        assert not WalkConfig(max_depth=2).should_prune(deep, 1)

    @pytest.mark.parametrize("value,message", [
        (-1, "max_depth cannot be negative"),
        ("2", "max_depth must be an integer"),
        (True, "max_depth must be an integer"),
    ])
    def test_validate(self, value, message):
        assert WalkConfig(max_depth=value).validate() == [message]
