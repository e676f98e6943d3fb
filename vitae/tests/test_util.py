"""
Minimal unit tests for vitae.util
"""

import tempfile
import os
import pytest
from pathlib import Path
from vitae.util import (
    _deep_merge,
    _load_json_file,
    _prune_none,
    ensure_resume_dict,
    load_data_file,
)


def test_deep_merge_does_not_mutate_inputs():
    base = {'margins': {'top': '1cm', 'left': '1cm'}}
    merged = _deep_merge(base, {'margins': {'top': '2cm'}})
    assert merged == {'margins': {'top': '2cm', 'left': '1cm'}}
    assert base == {'margins': {'top': '1cm', 'left': '1cm'}}


def test_load_json_file():
    d = {'foo': 'bar'}
    with tempfile.NamedTemporaryFile('w+', delete=False) as f:
        import json

        json.dump(d, f)
        f.close()
        loaded = _load_json_file(f.name)
    os.unlink(f.name)
    assert loaded == d


def test_prune_none():
    assert _prune_none({'a': None, 'b': [1, None], 'c': {'d': None}}) == {
        'b': [1],
        'c': {},
    }


def test_load_yaml_keeps_dates_as_strings():
    with tempfile.NamedTemporaryFile('w+', suffix='.yml', delete=False) as f:
        f.write('startDate: 2020-01-01\nscore: 3.8\nyear: 2016\nflag: true\n')
        f.close()
        loaded = load_data_file(f.name)
    os.unlink(f.name)
    assert loaded == {
        'startDate': '2020-01-01',
        'score': '3.8',
        'year': '2016',
        'flag': True,
    }


def test_ensure_resume_dict_sources(tmp_path):
    d = {'content': {'basics': {'name': 'Jane'}}}
    assert ensure_resume_dict(d) == d
    assert ensure_resume_dict('{"content": {"basics": {"name": "Jane"}}}') == d
    assert ensure_resume_dict('content:\n  basics:\n    name: Jane\n') == d
    p = tmp_path / 'resume.yaml'
    p.write_text('content:\n  basics:\n    name: Jane\n', encoding='utf-8')
    assert ensure_resume_dict(p) == d
    assert ensure_resume_dict(str(p)) == d


def test_ensure_resume_dict_rejects_bad_input():
    with pytest.raises(ValueError):
        ensure_resume_dict('just some words')
    with pytest.raises(TypeError):
        ensure_resume_dict(42)


def test_yaml_yes_no_words_stay_strings(tmp_path):
    p = tmp_path / 'resume.yaml'
    p.write_text(
        'country: NO\nlanguage: no\nanswer: yes\nshowPageNumbers: false\n',
        encoding='utf-8',
    )
    assert load_data_file(str(p)) == {
        'country': 'NO',
        'language': 'no',
        'answer': 'yes',
        'showPageNumbers': False,
    }
    assert ensure_resume_dict('country: NO\nflag: True\n') == {
        'country': 'NO',
        'flag': True,
    }


def test_ensure_resume_dict_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ensure_resume_dict(str(tmp_path / 'missing.json'))
    with pytest.raises(FileNotFoundError):
        ensure_resume_dict(tmp_path / 'missing.yaml')
