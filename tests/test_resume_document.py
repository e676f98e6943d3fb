"""
Tests for whole resume documents: every section at once, aggregated errors,
JSON Schema agreement, and the computed-fields pass.
"""

import copy

import pytest

from vitae import (
    ViolationKind,
    check_resume,
    compute_resume,
    get_jsonschema_errors,
    validate_resume,
)
from vitae.options import SECTION_IDS
from vitae.validators import jsonschema_issues

SUMMARY = 'Led a team of five building the billing platform.'


# Test fixtures


@pytest.fixture
def full_resume():
    """A resume that fills every section and every layout setting."""
    return {
        'content': {
            'basics': {
                'name': 'Jane Doe',
                'email': 'jane@example.com',
                'headline': 'Software Engineer',
                'phone': '+49 30 1234567',
                'summary': 'Backend engineer with a taste for type systems.',
                'url': 'https://jane.example.com',
            },
            'location': {
                'city': 'Berlin',
                'address': 'Unter den Linden 1',
                'country': 'Germany',
                'postalCode': '10117',
                'region': 'Berlin',
            },
            'profiles': [
                {'network': 'GitHub', 'username': 'janedoe', 'url': 'https://github.com/janedoe'},
                {'network': 'LinkedIn', 'username': 'janedoe'},
            ],
            'education': [
                {
                    'area': 'Computer Science',
                    'institution': 'Technical University of Munich',
                    'startDate': 'Oct 2010',
                    'endDate': 'Sep 2014',
                    'degree': 'Bachelor',
                    'courses': ['Compilers', 'Databases'],
                    'score': '1.3',
                    'url': 'https://www.tum.de',
                }
            ],
            'work': [
                {
                    'name': 'Acme GmbH',
                    'position': 'Senior Engineer',
                    'startDate': '2018-04',
                    'summary': SUMMARY,
                    'keywords': ['Python', 'PostgreSQL'],
                    'url': 'https://acme.example.com',
                },
                {
                    'name': 'Initech',
                    'position': 'Engineer',
                    'startDate': '2014',
                    'endDate': '2018',
                    'summary': SUMMARY,
                },
            ],
            'languages': [
                {'fluency': 'Native or Bilingual Proficiency', 'language': 'German'},
                {
                    'fluency': 'Full Professional Proficiency',
                    'language': 'English',
                    'keywords': ['Technical writing'],
                },
            ],
            'skills': [
                {'level': 'Expert', 'name': 'Python', 'keywords': ['asyncio', 'pydantic']}
            ],
            'awards': [
                {'awarder': 'ACM', 'title': 'Best Paper', 'date': '2016', 'summary': SUMMARY}
            ],
            'certificates': [
                {'issuer': 'CNCF', 'name': 'CKA', 'date': 'Nov 2021', 'url': 'https://cncf.io'}
            ],
            'publications': [
                {'name': 'Typed Pipelines', 'publisher': 'IEEE', 'releaseDate': '2019-03'}
            ],
            'references': [
                {
                    'name': 'John Smith',
                    'summary': 'Jane was the best engineer on my team.',
                    'email': 'john@example.com',
                    'relationship': 'Former Manager',
                }
            ],
            'projects': [
                {
                    'name': 'vitae',
                    'startDate': '2021',
                    'summary': 'A resume schema written in pydantic.',
                    'description': 'Validation for structured resumes.',
                    'keywords': ['pydantic'],
                }
            ],
            'interests': [{'name': 'Photography', 'keywords': ['Film', 'Street']}],
            'volunteer': [
                {
                    'organization': 'Code Club',
                    'position': 'Mentor',
                    'startDate': '2017',
                    'summary': 'Taught kids to program on Saturdays.',
                }
            ],
        },
        'layout': {
            'template': 'moderncv-banking',
            'margins': {'top': '2.5cm', 'bottom': '2.5cm', 'left': '1.5cm', 'right': '1.5cm'},
            'typography': {'fontSize': '11pt'},
            'latex': {'fontspec': {'numbers': 'OldStyle'}},
            'locale': {'language': 'en'},
            'page': {'showPageNumbers': True},
        },
    }


class TestValidDocument:
    def test_full_resume_validates(self, full_resume):
        resume = validate_resume(full_resume)
        assert resume.content.location.city == 'Berlin'
        assert [w.name for w in resume.content.work] == ['Acme GmbH', 'Initech']

    def test_jsonschema_agrees(self, full_resume):
        assert get_jsonschema_errors(full_resume) == []

    def test_revalidation_is_idempotent(self, full_resume):
        first = validate_resume(full_resume)
        second = validate_resume(first.model_dump(exclude_none=True))
        assert first == second

    def test_validating_a_model_is_idempotent(self, full_resume):
        first = validate_resume(full_resume)
        assert validate_resume(first) == first

    def test_unknown_fields_are_ignored(self, full_resume):
        full_resume['content']['basics']['nickname'] = 'JD'
        resume = validate_resume(full_resume)
        assert not hasattr(resume.content.basics, 'nickname')


class TestInvalidDocument:
    def test_errors_across_sections_are_reported_together(self, full_resume):
        broken = copy.deepcopy(full_resume)
        broken['content']['basics']['name'] = 'J'
        broken['content']['work'][1]['position'] = 'x' * 65
        broken['content']['skills'][0]['level'] = 'Guru'
        del broken['content']['education'][0]['degree']
        broken['layout']['margins']['top'] = 'wide'

        resume, issues = check_resume(broken)
        assert resume is None
        assert {(i.field_path, i.kind) for i in issues} == {
            ('content.basics.name', ViolationKind.LENGTH),
            ('content.work.1.position', ViolationKind.LENGTH),
            ('content.skills.0.level', ViolationKind.INVALID_CHOICE),
            ('content.education.0.degree', ViolationKind.MISSING_REQUIRED_FIELD),
            ('layout.margins.top', ViolationKind.INVALID_FORMAT),
        }

    def test_bad_formats(self, full_resume):
        broken = copy.deepcopy(full_resume)
        broken['content']['basics']['email'] = 'not-an-email'
        broken['content']['basics']['url'] = 'jane.example.com'
        broken['content']['work'][0]['startDate'] = 'last spring'
        _, issues = check_resume(broken)
        assert {(i.field_path, i.kind) for i in issues} == {
            ('content.basics.email', ViolationKind.INVALID_FORMAT),
            ('content.basics.url', ViolationKind.INVALID_FORMAT),
            ('content.work.0.startDate', ViolationKind.INVALID_FORMAT),
        }

    def test_wrong_types(self, full_resume):
        broken = copy.deepcopy(full_resume)
        broken['content']['work'] = {'name': 'Acme'}
        _, issues = check_resume(broken)
        assert [(i.field_path, i.kind) for i in issues] == [
            ('content.work', ViolationKind.INVALID_TYPE)
        ]

    def test_jsonschema_reports_the_same_bounds(self, full_resume):
        broken = copy.deepcopy(full_resume)
        broken['content']['basics']['name'] = 'J'
        broken['content']['skills'][0]['level'] = 'Guru'
        issues = {(i.field_path, i.kind) for i in jsonschema_issues(broken)}
        assert issues == {
            ('content.basics.name', ViolationKind.LENGTH),
            ('content.skills.0.level', ViolationKind.INVALID_CHOICE),
        }


class TestComputed:
    def test_every_present_section_is_named(self, full_resume):
        resume = compute_resume(validate_resume(full_resume))
        names = resume.content.computed.sectionNames.model_dump()
        assert set(names) == set(SECTION_IDS)
        assert all(names[section_id] for section_id in SECTION_IDS)

    def test_computed_fields(self, full_resume):
        content = compute_resume(validate_resume(full_resume)).content
        assert content.work[0].computed.dateRange == 'Apr 2018 - Present'
        assert content.work[1].computed.dateRange == '2014 - 2018'
        assert content.education[0].computed.degreeAreaAndScore == (
            'Bachelor, Computer Science, Score: 1.3'
        )
        assert content.location.computed.regionAndCountry == 'Berlin, Germany'
        assert content.languages[1].computed.keywords == 'Technical writing'
        assert content.skills[0].computed.level == 'Expert'
        assert content.certificates[0].computed.date == 'Nov 2021'
        assert content.publications[0].computed.releaseDate == 'Mar 2019'
        assert content.computed.urls == (
            'https://jane.example.com | https://github.com/janedoe'
        )

    def test_computed_resume_still_validates(self, full_resume):
        resume = compute_resume(validate_resume(full_resume))
        assert validate_resume(resume.model_dump(exclude_none=True)) == resume
        assert get_jsonschema_errors(resume.model_dump(exclude_none=True)) == []

    def test_layout_is_untouched(self, full_resume):
        resume = validate_resume(full_resume)
        assert compute_resume(resume).layout == resume.layout
