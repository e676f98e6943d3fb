"""
Minimal unit tests for vitae.content
"""

import pytest
from vitae.content import FileContentSource, DictContentSource, TextContentSource
import tempfile
import json
import os


def test_dict_content_source():
    d = {'foo': 'bar'}
    src = DictContentSource(d)
    assert src.read() == d


def test_file_content_source_json():
    d = {'foo': 'bar'}

    with tempfile.NamedTemporaryFile('w+', suffix='.json', delete=False) as f:
        json.dump(d, f)
        f.close()
        src = FileContentSource(f.name)
        assert src.read() == d
    os.unlink(f.name)


def test_file_content_source_yaml():
    with tempfile.NamedTemporaryFile('w+', suffix='.yaml', delete=False) as f:
        f.write('foo: bar\n')
        f.close()
        src = FileContentSource(f.name)
        assert src.read() == {'foo': 'bar'}
    os.unlink(f.name)


def test_file_content_source_unsupported():
    with pytest.raises(ValueError):
        FileContentSource('resume.docx').read()


def test_text_content_source():
    assert TextContentSource('{"foo": "bar"}').read() == {'foo': 'bar'}
    assert TextContentSource('foo: bar').read() == {'foo': 'bar'}
