"""
The transform pass: fills the ``computed`` sub-model of every item.

Base fields are never touched. Each function returns a new model with a
fresh ``computed`` value, so transforming twice gives the same result as
transforming once, and the input model is left as it was.

>>> from vitae.models import LocationItem
>>> compute_location(LocationItem(city='Berlin', country='DE')).computed.fullAddress
'Berlin, Germany'
"""

import logging
from typing import Callable, Iterable

from vitae.models import (
    AwardItem,
    AwardItemComputed,
    BasicsItem,
    BasicsItemComputed,
    CertificateItem,
    CertificateItemComputed,
    EducationItem,
    EducationItemComputed,
    InterestItem,
    InterestItemComputed,
    LanguageItem,
    LanguageItemComputed,
    LocationItem,
    LocationItemComputed,
    ProfileItem,
    ProfileItemComputed,
    ProjectItem,
    ProjectItemComputed,
    PublicationItem,
    PublicationItemComputed,
    ReferenceItem,
    ReferenceItemComputed,
    Resume,
    ResumeContent,
    ResumeContentComputed,
    SectionNames,
    SkillItem,
    SkillItemComputed,
    VolunteerItem,
    VolunteerItemComputed,
    WorkItem,
    WorkItemComputed,
)
from vitae.options import SECTION_IDS, country_name
from vitae.primitives import parse_date

logger = logging.getLogger(__name__)

PRESENT = 'Present'
DATE_RANGE_SEPARATOR = ' - '
LIST_SEPARATOR = ', '
URL_SEPARATOR = ' | '

SECTION_TITLES = {section_id: section_id.title() for section_id in SECTION_IDS}


# --------------------------------------------------------------------------------------
# Helpers


def format_date(value: str | None) -> str:
    """Normalize a date for display: ``YYYY`` stays, finer dates become ``Mon YYYY``.

    >>> format_date('2020-10-03')
    'Oct 2020'
    >>> format_date('2016')
    '2016'
    >>> format_date(None)
    ''
    """
    if not value:
        return ''
    parsed = parse_date(value)
    if parsed is None:
        return value
    d, precision = parsed
    if precision == 'year':
        return str(d.year)
    return d.strftime('%b %Y')


def format_end_date(value: str | None) -> str:
    """Like ``format_date``, but a missing end date means the item is ongoing."""
    return format_date(value) or PRESENT


def date_range(start: str, end: str) -> str:
    return f"{start}{DATE_RANGE_SEPARATOR}{end}" if start else end


def join_items(items: Iterable[str] | None, sep: str = LIST_SEPARATOR) -> str:
    """Join the non-empty strings of ``items``.

    >>> join_items(['Python', '', 'Rust'])
    'Python, Rust'
    """
    return sep.join(item for item in (items or ()) if item)


def _text(value: str | None) -> str:
    return value.strip() if value else ''


# --------------------------------------------------------------------------------------
# Per item transforms


def compute_award(item: AwardItem) -> AwardItem:
    computed = AwardItemComputed(
        date=format_date(item.date), summary=_text(item.summary)
    )
    return item.model_copy(update={'computed': computed})


def compute_basics(item: BasicsItem) -> BasicsItem:
    computed = BasicsItemComputed(summary=_text(item.summary), url=item.url or '')
    return item.model_copy(update={'computed': computed})


def compute_certificate(item: CertificateItem) -> CertificateItem:
    computed = CertificateItemComputed(date=format_date(item.date))
    return item.model_copy(update={'computed': computed})


def degree_area_and_score(item: EducationItem) -> str:
    """
    >>> degree_area_and_score(EducationItem(
    ...     area='Computer Science', institution='MIT', startDate='2016',
    ...     degree='Bachelor', score='3.8'))
    'Bachelor, Computer Science, Score: 3.8'
    """
    parts = [item.degree, item.area]
    if item.score:
        parts.append(f"Score: {item.score}")
    return join_items(parts)


def compute_education(item: EducationItem) -> EducationItem:
    start, end = format_date(item.startDate), format_end_date(item.endDate)
    computed = EducationItemComputed(
        courses=join_items(item.courses),
        degreeAreaAndScore=degree_area_and_score(item),
        dateRange=date_range(start, end),
        startDate=start,
        endDate=end,
        summary=_text(item.summary),
    )
    return item.model_copy(update={'computed': computed})


def compute_interest(item: InterestItem) -> InterestItem:
    computed = InterestItemComputed(keywords=join_items(item.keywords))
    return item.model_copy(update={'computed': computed})


def compute_language(item: LanguageItem) -> LanguageItem:
    # English labels are the option values themselves
    computed = LanguageItemComputed(
        fluency=item.fluency,
        language=item.language,
        keywords=join_items(item.keywords),
    )
    return item.model_copy(update={'computed': computed})


def compute_location(item: LocationItem) -> LocationItem:
    country = country_name(item.country) if item.country else None
    computed = LocationItemComputed(
        postalCodeAndAddress=join_items([item.address, item.postalCode]),
        regionAndCountry=join_items([item.region, country]),
        fullAddress=join_items(
            [item.address, item.city, item.region, item.postalCode, country]
        ),
    )
    return item.model_copy(update={'computed': computed})


def compute_profile(item: ProfileItem) -> ProfileItem:
    computed = ProfileItemComputed(url=item.url or '')
    return item.model_copy(update={'computed': computed})


def compute_project(item: ProjectItem) -> ProjectItem:
    start, end = format_date(item.startDate), format_end_date(item.endDate)
    computed = ProjectItemComputed(
        keywords=join_items(item.keywords),
        dateRange=date_range(start, end),
        startDate=start,
        endDate=end,
        summary=_text(item.summary),
    )
    return item.model_copy(update={'computed': computed})


def compute_publication(item: PublicationItem) -> PublicationItem:
    computed = PublicationItemComputed(
        releaseDate=format_date(item.releaseDate), summary=_text(item.summary)
    )
    return item.model_copy(update={'computed': computed})


def compute_reference(item: ReferenceItem) -> ReferenceItem:
    computed = ReferenceItemComputed(summary=_text(item.summary))
    return item.model_copy(update={'computed': computed})


def compute_skill(item: SkillItem) -> SkillItem:
    computed = SkillItemComputed(level=item.level, keywords=join_items(item.keywords))
    return item.model_copy(update={'computed': computed})


def compute_volunteer(item: VolunteerItem) -> VolunteerItem:
    start, end = format_date(item.startDate), format_end_date(item.endDate)
    computed = VolunteerItemComputed(
        dateRange=date_range(start, end),
        startDate=start,
        endDate=end,
        summary=_text(item.summary),
    )
    return item.model_copy(update={'computed': computed})


def compute_work(item: WorkItem) -> WorkItem:
    start, end = format_date(item.startDate), format_end_date(item.endDate)
    computed = WorkItemComputed(
        keywords=join_items(item.keywords),
        dateRange=date_range(start, end),
        startDate=start,
        endDate=end,
        summary=_text(item.summary),
    )
    return item.model_copy(update={'computed': computed})


# section id -> transform of one item of that section
ITEM_TRANSFORMS: dict[str, Callable] = {
    'awards': compute_award,
    'basics': compute_basics,
    'certificates': compute_certificate,
    'education': compute_education,
    'interests': compute_interest,
    'languages': compute_language,
    'location': compute_location,
    'profiles': compute_profile,
    'projects': compute_project,
    'publications': compute_publication,
    'references': compute_reference,
    'skills': compute_skill,
    'volunteer': compute_volunteer,
    'work': compute_work,
}


# --------------------------------------------------------------------------------------
# Whole content


def combined_urls(content: ResumeContent) -> str:
    """The basics URL followed by every profile URL."""
    urls = [content.basics.url]
    urls.extend(profile.url for profile in content.profiles or ())
    return join_items(urls, URL_SEPARATOR)


def compute_content(content: ResumeContent) -> ResumeContent:
    """Return a copy of ``content`` with every ``computed`` field populated."""
    update = {}
    for section_id, transform in ITEM_TRANSFORMS.items():
        value = getattr(content, section_id)
        if value is None:
            continue
        if isinstance(value, list):
            update[section_id] = [transform(item) for item in value]
        else:
            update[section_id] = transform(value)

    present = [
        section_id for section_id in SECTION_IDS if getattr(content, section_id)
    ]
    update['computed'] = ResumeContentComputed(
        sectionNames=SectionNames(
            **{section_id: SECTION_TITLES[section_id] for section_id in present}
        ),
        urls=combined_urls(content),
    )
    logger.debug("Computed fields for sections: %s", ', '.join(present))
    return content.model_copy(update=update)


def compute_resume(resume: Resume) -> Resume:
    """Return a copy of ``resume`` whose content has its ``computed`` fields populated."""
    return resume.model_copy(update={'content': compute_content(resume.content)})
