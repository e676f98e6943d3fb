"""
Tests for the computed-fields transform.
"""

from vitae.models import (
    BasicsItem,
    EducationItem,
    LocationItem,
    ProfileItem,
    ResumeContent,
    WorkItem,
)
from vitae.transform import (
    compute_content,
    compute_education,
    compute_location,
    compute_work,
    format_date,
    format_end_date,
)

SUMMARY = 'Built and ran the payments platform.'


def test_format_date():
    assert format_date('2020-10') == 'Oct 2020'
    assert format_date('October 2020') == 'Oct 2020'
    assert format_date('2020') == '2020'
    assert format_end_date('') == 'Present'
    assert format_end_date(None) == 'Present'


def test_compute_work():
    item = WorkItem(
        name='Acme',
        position='Engineer',
        startDate='2019-04',
        summary=SUMMARY,
        keywords=['Python', 'Go'],
    )
    computed = compute_work(item).computed
    assert computed.startDate == 'Apr 2019'
    assert computed.endDate == 'Present'
    assert computed.dateRange == 'Apr 2019 - Present'
    assert computed.keywords == 'Python, Go'
    assert computed.summary == SUMMARY


def test_compute_does_not_touch_the_input():
    item = WorkItem(name='Acme', position='Engineer', startDate='2019', summary=SUMMARY)
    out = compute_work(item)
    assert item.computed is None
    assert out is not item
    assert out.model_dump(exclude={'computed'}) == item.model_dump(exclude={'computed'})


def test_compute_education():
    item = EducationItem(
        area='Computer Science',
        institution='MIT',
        startDate='2012',
        endDate='2016',
        degree='Bachelor',
        courses=['Algorithms', 'Compilers'],
    )
    computed = compute_education(item).computed
    assert computed.degreeAreaAndScore == 'Bachelor, Computer Science'
    assert computed.dateRange == '2012 - 2016'
    assert computed.courses == 'Algorithms, Compilers'
    assert computed.summary == ''


def test_compute_location():
    item = LocationItem(
        city='Berlin',
        address='Unter den Linden 1',
        postalCode='10117',
        region='Berlin',
        country='DE',
    )
    computed = compute_location(item).computed
    assert computed.postalCodeAndAddress == 'Unter den Linden 1, 10117'
    assert computed.regionAndCountry == 'Berlin, Germany'
    assert computed.fullAddress == 'Unter den Linden 1, Berlin, Berlin, 10117, Germany'


def _content():
    return ResumeContent(
        basics=BasicsItem(name='Jane Doe', url='https://jane.example.com'),
        education=[
            EducationItem(
                area='Physics', institution='ETH', startDate='2010', degree='Master'
            )
        ],
        profiles=[
            ProfileItem(network='GitHub', username='jane', url='https://github.com/jane'),
            ProfileItem(network='LinkedIn', username='jane'),
        ],
    )


def test_compute_content():
    content = compute_content(_content())
    assert content.basics.computed.url == 'https://jane.example.com'
    assert content.education[0].computed.endDate == 'Present'
    assert content.profiles[1].computed.url == ''
    assert content.computed.urls == 'https://jane.example.com | https://github.com/jane'
    names = content.computed.sectionNames
    assert names.basics == 'Basics'
    assert names.profiles == 'Profiles'
    assert names.work is None


def test_compute_content_is_idempotent():
    once = compute_content(_content())
    twice = compute_content(once)
    assert once == twice


def test_compute_content_leaves_input_unchanged():
    content = _content()
    before = content.model_dump()
    compute_content(content)
    assert content.model_dump() == before
