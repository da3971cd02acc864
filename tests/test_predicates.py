"""Tests for the predicate algebra and the atomic predicates."""

import os
import re

import pytest

from houndtree import EntryKind, TargetKind
from houndtree import predicates as P
from houndtree.testing import make_entry


JSON = make_entry(os.path.join('src', 'a.json'), size=10)
TXT = make_entry(os.path.join('src', 'notes.txt'), size=0)
DOTFILE = make_entry(os.path.join('src', '.env'), size=3)
SUBDIR = make_entry(os.path.join('src', 'pkg'), EntryKind.DIRECTORY)
HIDDEN_DIR = make_entry(os.path.join('src', '.git'), EntryKind.DIRECTORY)
SOCK = make_entry(os.path.join('run', 'app.sock'), EntryKind.SOCKET)


class TestAlgebra:

    def test_and(self):
        both = P.ext('json').and_(P.size(10))
        assert both.test(JSON)
        assert not both.test(TXT)

    def test_or(self):
        either = P.ext('json').or_(P.ext('txt'))
        assert either.test(JSON)
        assert either.test(TXT)
        assert not either.test(DOTFILE)

    def test_not(self):
        not_json = P.ext('json').not_()
        assert not not_json.test(JSON)
        assert not_json.test(TXT)

    def test_operators(self):
        combined = (P.ext('json') | P.ext('txt')) & ~P.is_empty()
        assert combined(JSON)
        assert not combined(TXT)

    def test_operator_with_non_predicate(self):
        with pytest.raises(TypeError):
            P.ext('json') & 'json'

    def test_operands_untouched(self):
        json = P.ext('json')
        json.and_(P.nothing())
        json.not_()
        assert json.test(JSON)

    def test_everything_and_nothing(self):
        assert P.everything().test(TXT)
        assert not P.nothing().test(TXT)

    def test_target_kind_propagates(self):
        assert P.ext('json').target_kind is TargetKind.REGULAR
        assert P.directories().target_kind is TargetKind.DIRECTORY
        assert P.ext('json').and_(P.directories()).target_kind is TargetKind.DIRECTORY
        assert P.ext('json').or_(P.directories()).target_kind is TargetKind.DIRECTORY
        assert P.directories().not_().target_kind is TargetKind.DIRECTORY

    def test_repr(self):
        assert repr(P.ext('json').not_()) == "Not(Extension(['json']))"


class TestExtension:

    def test_leading_dot_ignored(self):
        assert P.ext('.json').test(JSON)
        assert P.ext('json').test(JSON)

    def test_varargs_and_list(self):
        assert P.ext('txt', 'json').test(JSON)
        assert P.ext(['txt', '.json']).test(JSON)

    def test_no_extension(self):
        assert not P.ext('env').test(DOTFILE)

    def test_case_sensitive(self):
        assert not P.ext('JSON').test(JSON)


class TestGlob:

    def test_pattern_without_slash_matches_name(self):
        assert P.glob('*.json').test(JSON)
        assert not P.glob('*.json').test(TXT)
        assert P.glob('a.*').test(JSON)

    def test_character_classes(self):
        assert P.glob('[ab].json').test(JSON)
        assert not P.glob('[!a].json').test(JSON)
        assert P.glob('?.json').test(JSON)

    def test_pattern_with_slash_matches_path(self):
        assert P.glob('src/*.json').test(JSON)
        assert P.glob('*/a.json').test(JSON)
        assert not P.glob('lib/*.json').test(JSON)

    def test_compiled_once(self):
        assert P.compile_glob('*.md') is P.compile_glob('*.md')


class TestTextMatch:

    def test_searches_whole_path(self):
        assert P.like('src').test(JSON)
        assert P.like(r'\.json$').test(JSON)
        assert not P.like('^a').test(JSON)

    def test_flags(self):
        assert P.like('A\\.JSON', re.IGNORECASE).test(JSON)

    def test_discard(self):
        keep = P.discard('notes')
        assert keep.test(JSON)
        assert not keep.test(TXT)

    def test_discard_several(self):
        keep = P.discard(['notes', r'\.env'])
        assert keep.test(JSON)
        assert not keep.test(TXT)
        assert not keep.test(DOTFILE)

    def test_discard_needs_patterns(self):
        with pytest.raises(ValueError):
            P.discard()


class TestMetadataPredicates:

    def test_size(self):
        assert P.size('<15').test(JSON)
        assert not P.size('>15').test(JSON)

    def test_is_empty(self):
        assert P.is_empty().test(TXT)
        assert not P.is_empty().test(JSON)

    def test_time_predicates_read_their_own_field(self):
        now = 1_700_000_000.0
        entry = make_entry('f', modified_time=now - 10 * 86400,
                           accessed_time=now, changed_time=now)
        assert P.Modified('> 5 days', now=now).test(entry)
        assert not P.Accessed('> 5 days', now=now).test(entry)
        assert not P.Changed('> 5 days', now=now).test(entry)

    def test_socket(self):
        assert P.socket().test(SOCK)
        assert not P.socket().test(JSON)


class TestHiddenAndDirectories:

    def test_directories(self):
        assert P.directories().test(SUBDIR)
        assert P.directories().test(HIDDEN_DIR)
        assert not P.directories().test(JSON)

    def test_directories_excluding_hidden(self):
        visible_only = P.directories(exclude_hidden=True)
        assert visible_only.test(SUBDIR)
        assert not visible_only.test(HIDDEN_DIR)

    def test_ignore_hidden_files(self):
        assert P.ignore_hidden_files().test(JSON)
        assert not P.ignore_hidden_files().test(DOTFILE)

    def test_ignore_hidden_path(self):
        inside_hidden = make_entry(os.path.join('src', '.git', 'config'))
        assert P.ignore_hidden_path().test(JSON)
        assert not P.ignore_hidden_path().test(inside_hidden)
        assert not P.ignore_hidden_path().test(DOTFILE)

    def test_relative_dot_segments_are_not_hidden(self):
        relative = make_entry(os.path.join('..', 'src', 'a.json'))
        assert P.ignore_hidden_path().test(relative)


class TestCustomFilter:

    def test_wraps_callable(self):
        big = P.custom_filter(lambda entry: entry.size > 5)
        assert big.test(JSON)
        assert not big.test(TXT)

    def test_result_coerced_to_bool(self):
        assert P.custom_filter(lambda entry: entry.name).test(JSON) is True

    def test_repr_uses_function_name(self):
        def is_large(entry):
            return entry.size > 1000

        assert repr(P.custom_filter(is_large)) == "CustomFilter(is_large)"


def test_from_args():
    assert P.from_args(('a', 'b')) == ['a', 'b']
    assert P.from_args((['a', 'b'],)) == ['a', 'b']
    assert P.from_args(()) == []
