"""
Tests for the high-level API in vitae.tools
"""

import json
import pytest
from pydantic import ValidationError
from vitae import load_resume, mk_resume, mk_computed_resume, dump_resume
from vitae.models import Resume
from vitae.content import DictContentSource

CONTENT = {
    'basics': {'name': 'Jane Doe', 'email': 'jane@example.com'},
    'education': [
        {
            'area': 'Computer Science',
            'institution': 'University of Tokyo',
            'startDate': '2014',
            'endDate': '2018',
            'degree': 'Bachelor',
        }
    ],
    'location': {'city': 'Berlin', 'country': 'DE'},
}


def test_load_resume_from_dict():
    resume = load_resume({'content': CONTENT})
    assert isinstance(resume, Resume)
    assert resume.content.education[0].computed is None


def test_load_resume_from_content_source():
    resume = load_resume(DictContentSource({'content': CONTENT}), compute=True)
    assert resume.content.location.computed.fullAddress == 'Berlin, Germany'


def test_load_resume_from_yaml_file(tmp_path):
    p = tmp_path / 'resume.yml'
    p.write_text(
        'content:\n'
        '  basics:\n'
        '    name: Jane Doe\n'
        '  education:\n'
        '    - area: Physics\n'
        '      institution: ETH Zurich\n'
        '      startDate: 2015-09-01\n'
        '      degree: Master\n',
        encoding='utf-8',
    )
    resume = load_resume(p)
    assert resume.content.education[0].startDate == '2015-09-01'


def test_load_resume_invalid():
    with pytest.raises(ValidationError):
        load_resume({'content': {'basics': {'name': 'Jane Doe'}}})


def test_mk_resume():
    resume = mk_resume(CONTENT, {'template': 'moderncv-classic'})
    assert resume.layout.template == 'moderncv-classic'
    assert resume.content.education[0].computed.dateRange == '2014 - 2018'


def test_mk_resume_without_transform_and_with_defaults(monkeypatch):
    monkeypatch.delenv('VITAE_CONFIG', raising=False)
    resume = mk_resume(CONTENT, transform=None, resolve_defaults=True)
    assert resume.content.basics.computed is None
    assert resume.layout.typography.fontSize == '11pt'


def test_mk_computed_resume():
    resume = mk_computed_resume({'content': CONTENT})
    assert resume.content.computed.sectionNames.location == 'Location'


def test_dump_resume_round_trip(tmp_path):
    resume = mk_computed_resume({'content': CONTENT})
    p = tmp_path / 'out.json'
    dump_resume(resume, p)
    data = json.loads(p.read_text(encoding='utf-8'))
    assert 'computed' not in data['content']
    assert 'computed' not in data['content']['education'][0]
    assert load_resume(str(p)) == load_resume({'content': CONTENT})


def test_dump_resume_yaml_with_computed(tmp_path):
    resume = mk_computed_resume({'content': CONTENT})
    p = tmp_path / 'out.yaml'
    dump_resume(resume, p, include_computed=True)
    assert load_resume(p).content.location.computed.regionAndCountry == 'Germany'


def test_load_resume_yaml_norway_and_norwegian_locale():
    text = (
        'content:\n'
        '  basics:\n'
        '    name: Kari Nordmann\n'
        '  education: []\n'
        '  location:\n'
        '    city: Oslo\n'
        '    country: NO\n'
        'layout:\n'
        '  locale:\n'
        '    language: no\n'
        '  page:\n'
        '    showPageNumbers: false\n'
    )
    resume = load_resume(text, compute=True)
    assert resume.content.location.country == 'NO'
    assert resume.content.location.computed.fullAddress == 'Oslo, Norway'
    assert resume.layout.locale.language == 'no'
    assert resume.layout.page.showPageNumbers is False


def test_load_resume_missing_file():
    with pytest.raises(FileNotFoundError):
        load_resume('no_such_resume.json')
