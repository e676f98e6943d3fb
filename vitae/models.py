"""Pydantic models for resume content and layout

Each item model holds the validated base fields plus an optional ``computed``
sub-model. Computed models are filled by ``vitae.transform`` and are never
needed for validation.
"""

from typing import Optional

from pydantic import BaseModel, Field

from vitae.primitives import (
    Email,
    Keywords,
    country_option,
    date_string,
    degree_option,
    fluency_option,
    font_size_option,
    fontspec_numbers_option,
    language_option,
    length_string,
    level_option,
    locale_language_option,
    network_option,
    phone_string,
    section_id_option,
    sized_string,
    summary_string,
    template_option,
    url_string,
)


# --------------------------------------------------------------------------------------
# Awards


class AwardItemComputed(BaseModel):
    date: str = Field(..., description='Transformed date string')
    summary: str = Field(..., description='Transformed summary string')


class AwardItem(BaseModel):
    awarder: sized_string('awarder', 2, 128) = Field(
        ..., description='The organization or entity that gave the award'
    )
    title: sized_string('title', 2, 128) = Field(
        ..., description='The name or title of the award'
    )

    date: Optional[date_string('date')] = Field(
        None, description='e.g. 2020, Oct 2020'
    )
    summary: Optional[summary_string()] = Field(
        None, description='A short description of the award (rich text)'
    )

    computed: AwardItemComputed | None = None


# --------------------------------------------------------------------------------------
# Basics


class BasicsItemComputed(BaseModel):
    summary: str = Field(..., description='Transformed summary string')
    url: str = Field(..., description='Transformed URL string')


class BasicsItem(BaseModel):
    name: sized_string('name', 2, 128) = Field(..., description='Full name')

    email: Optional[Email] = Field(None, description='e.g. jane@example.com')
    headline: Optional[sized_string('headline', 2, 128)] = Field(
        None, description='e.g. Software Engineer'
    )
    phone: Optional[phone_string()] = Field(None, description='e.g. +1 712-117-2923')
    summary: Optional[summary_string()] = Field(
        None, description='A professional summary or objective (rich text)'
    )
    url: Optional[url_string()] = Field(
        None, description='Personal website or portfolio URL'
    )

    computed: BasicsItemComputed | None = None


# --------------------------------------------------------------------------------------
# Certificates


class CertificateItemComputed(BaseModel):
    date: str


class CertificateItem(BaseModel):
    issuer: sized_string('issuer', 2, 128) = Field(..., description='e.g. CNCF')
    name: sized_string('name', 2, 128) = Field(
        ..., description='e.g. Certified Kubernetes Administrator'
    )

    date: Optional[date_string('date')] = Field(None, description='e.g. Nov 2021')
    url: Optional[url_string()] = Field(
        None, description='URL related to the certificate, e.g. a verification link'
    )

    computed: CertificateItemComputed | None = None


# --------------------------------------------------------------------------------------
# Education


class EducationItemComputed(BaseModel):
    courses: str = Field(..., description='Courses joined in one string')
    degreeAreaAndScore: str = Field(
        ..., description='Degree, area and score combined'
    )
    dateRange: str
    startDate: str
    endDate: str = Field(..., description='Transformed end date, or "Present"')
    summary: str


class EducationItem(BaseModel):
    area: sized_string('area', 2, 64) = Field(
        ..., description='Field of study, e.g. Computer Science'
    )
    institution: sized_string('institution', 2, 128) = Field(
        ..., description='e.g. Massachusetts Institute of Technology'
    )
    startDate: date_string('startDate') = Field(..., description='e.g. Sep 2016')
    degree: degree_option = Field(..., description='e.g. Bachelor')

    courses: Optional[list[sized_string('course', 2, 128)]] = Field(
        None, description='List notable courses/subjects'
    )
    endDate: Optional[date_string('endDate')] = Field(
        None, description='Empty means "Present"'
    )
    summary: Optional[summary_string()] = None
    score: Optional[sized_string('score', 2, 32)] = Field(
        None, description='grade point average, e.g. 3.67/4.0'
    )
    url: Optional[url_string()] = None

    computed: EducationItemComputed | None = None


# --------------------------------------------------------------------------------------
# Interests


class InterestItemComputed(BaseModel):
    keywords: str


class InterestItem(BaseModel):
    name: sized_string('name', 2, 128) = Field(..., description='e.g. Photography')

    keywords: Optional[Keywords] = None

    computed: InterestItemComputed | None = None


# --------------------------------------------------------------------------------------
# Languages


class LanguageItemComputed(BaseModel):
    fluency: str
    language: str
    keywords: str


class LanguageItem(BaseModel):
    fluency: fluency_option = Field(
        ..., description='e.g. Full Professional Proficiency'
    )
    language: language_option = Field(..., description='e.g. English, Spanish')

    keywords: Optional[Keywords] = Field(
        None, description='Specific language skills, e.g. Translation'
    )

    computed: LanguageItemComputed | None = None


# --------------------------------------------------------------------------------------
# Location


class LocationItemComputed(BaseModel):
    postalCodeAndAddress: str
    regionAndCountry: str
    fullAddress: str


class LocationItem(BaseModel):
    city: sized_string('city', 2, 64) = Field(..., description='e.g. Berlin')

    address: Optional[sized_string('address', 4, 256)] = Field(
        None,
        description='To add multiple address lines, use \n. For example, 1234 Glücklichkeit Straße\nHinterhaus 5. Etage li.',
    )
    country: Optional[country_option] = Field(
        None, description='Country/region name or ISO-3166-1 ALPHA-2 code, e.g. DE'
    )
    postalCode: Optional[sized_string('postalCode', 2, 16)] = None
    region: Optional[sized_string('region', 2, 64)] = Field(
        None,
        description='The general region where you live. Can be a US state, or a province, for instance.',
    )

    computed: LocationItemComputed | None = None


# --------------------------------------------------------------------------------------
# Profiles


class ProfileItemComputed(BaseModel):
    url: str


class ProfileItem(BaseModel):
    network: network_option = Field(..., description='e.g. GitHub or LinkedIn')
    username: sized_string('username', 2, 64) = Field(
        ..., description='e.g. neutralthoughts'
    )

    url: Optional[url_string()] = Field(
        None, description='e.g. https://github.com/neutralthoughts'
    )

    computed: ProfileItemComputed | None = None


# --------------------------------------------------------------------------------------
# Projects


class ProjectItemComputed(BaseModel):
    keywords: str
    dateRange: str
    startDate: str
    endDate: str
    summary: str


class ProjectItem(BaseModel):
    name: sized_string('name', 2, 128) = Field(
        ..., description='e.g. The World Wide Web'
    )
    startDate: date_string('startDate')
    summary: summary_string() = Field(
        ..., description='Detailed accomplishments for the project (rich text)'
    )

    description: Optional[summary_string('description')] = Field(
        None, description='Short summary of project. e.g. Collated works of 2017.'
    )
    endDate: Optional[date_string('endDate')] = None
    keywords: Optional[Keywords] = Field(
        None, description='Specify special elements involved'
    )
    url: Optional[url_string()] = None

    computed: ProjectItemComputed | None = None


# --------------------------------------------------------------------------------------
# Publications


class PublicationItemComputed(BaseModel):
    releaseDate: str
    summary: str


class PublicationItem(BaseModel):
    name: sized_string('name', 2, 128) = Field(
        ..., description='e.g. The World Wide Web'
    )
    publisher: sized_string('publisher', 2, 128) = Field(
        ..., description='e.g. IEEE, Computer Magazine'
    )

    releaseDate: Optional[date_string('releaseDate')] = None
    summary: Optional[summary_string()] = Field(
        None,
        description='Short summary of publication. e.g. Discussion of the World Wide Web, HTTP, HTML.',
    )
    url: Optional[url_string()] = None

    computed: PublicationItemComputed | None = None


# --------------------------------------------------------------------------------------
# References


class ReferenceItemComputed(BaseModel):
    summary: str


class ReferenceItem(BaseModel):
    name: sized_string('name', 2, 128) = Field(..., description='e.g. Timothy Cook')
    summary: summary_string() = Field(
        ..., description='A brief note about the reference (rich text)'
    )

    email: Optional[Email] = None
    phone: Optional[phone_string()] = None
    relationship: Optional[sized_string('relationship', 2, 128)] = Field(
        None, description='e.g. Former Manager'
    )

    computed: ReferenceItemComputed | None = None


# --------------------------------------------------------------------------------------
# Skills


class SkillItemComputed(BaseModel):
    level: str
    keywords: str


class SkillItem(BaseModel):
    level: level_option = Field(..., description='e.g. Expert')
    name: sized_string('name', 2, 128) = Field(..., description='e.g. Web Development')

    keywords: Optional[Keywords] = Field(
        None, description='List some keywords pertaining to this skill'
    )

    computed: SkillItemComputed | None = None


# --------------------------------------------------------------------------------------
# Volunteer


class VolunteerItemComputed(BaseModel):
    dateRange: str
    startDate: str
    endDate: str
    summary: str


class VolunteerItem(BaseModel):
    organization: sized_string('organization', 2, 128) = Field(
        ..., description='e.g. Greenpeace'
    )
    position: sized_string('position', 2, 64) = Field(
        ..., description='e.g. Volunteer Coordinator'
    )
    startDate: date_string('startDate')
    summary: summary_string() = Field(
        ..., description='Summary of responsibilities or achievements (rich text)'
    )

    endDate: Optional[date_string('endDate')] = None
    url: Optional[url_string()] = None

    computed: VolunteerItemComputed | None = None


# --------------------------------------------------------------------------------------
# Work


class WorkItemComputed(BaseModel):
    keywords: str
    dateRange: str
    startDate: str
    endDate: str
    summary: str


class WorkItem(BaseModel):
    name: sized_string('name', 2, 128) = Field(..., description='e.g. Facebook')
    position: sized_string('position', 2, 64) = Field(
        ..., description='e.g. Software Engineer'
    )
    startDate: date_string('startDate') = Field(..., description='e.g. Apr 2021')
    summary: summary_string() = Field(
        ..., description='Give an overview of your responsibilities at the company'
    )

    endDate: Optional[date_string('endDate')] = None
    keywords: Optional[Keywords] = Field(
        None, description='Keywords related to the role or technologies used'
    )
    url: Optional[url_string()] = Field(
        None, description='e.g. https://facebook.example.com'
    )

    computed: WorkItemComputed | None = None


# --------------------------------------------------------------------------------------
# Whole content


class SectionNames(BaseModel):
    awards: str | None = None
    basics: str | None = None
    certificates: str | None = None
    education: str | None = None
    interests: str | None = None
    languages: str | None = None
    location: str | None = None
    projects: str | None = None
    profiles: str | None = None
    publications: str | None = None
    references: str | None = None
    skills: str | None = None
    volunteer: str | None = None
    work: str | None = None


class ResumeContentComputed(BaseModel):
    sectionNames: SectionNames | None = Field(
        None, description='Display name of each section'
    )
    urls: str | None = Field(
        None, description='URLs from basics and profiles, combined'
    )


class ResumeContent(BaseModel):
    """All resume sections. Only ``basics`` and ``education`` are required."""

    awards: list[AwardItem] | None = None
    basics: BasicsItem
    certificates: list[CertificateItem] | None = None
    education: list[EducationItem]
    interests: list[InterestItem] | None = None
    languages: list[LanguageItem] | None = None
    location: LocationItem | None = None
    projects: list[ProjectItem] | None = None
    profiles: list[ProfileItem] | None = None
    publications: list[PublicationItem] | None = None
    references: list[ReferenceItem] | None = None
    skills: list[SkillItem] | None = None
    volunteer: list[VolunteerItem] | None = None
    work: list[WorkItem] | None = None

    computed: ResumeContentComputed | None = None


# --------------------------------------------------------------------------------------
# Layout


class ResumeLayoutMargins(BaseModel):
    top: Optional[length_string('top')] = Field(None, description='e.g. 2.5cm')
    bottom: Optional[length_string('bottom')] = Field(None, description='e.g. 2.5cm')
    left: Optional[length_string('left')] = Field(None, description='e.g. 1.5cm')
    right: Optional[length_string('right')] = Field(None, description='e.g. 1.5cm')


class ResumeLayoutTypography(BaseModel):
    fontSize: Optional[font_size_option] = Field(None, description='e.g. 11pt')


class ResumeLayoutFontspec(BaseModel):
    numbers: Optional[fontspec_numbers_option] = Field(
        None,
        description='Lining (CJK default), OldStyle (Latin default) or Auto (from the locale)',
    )


class ResumeLayoutLaTeX(BaseModel):
    fontspec: ResumeLayoutFontspec | None = None


class ResumeLayoutLocale(BaseModel):
    language: Optional[locale_language_option] = Field(
        None, description='Language of the template terms, e.g. en'
    )


class ResumeLayoutPage(BaseModel):
    showPageNumbers: bool | None = None


class ResumeLayoutSections(BaseModel):
    order: Optional[list[section_id_option]] = Field(
        None, description='Sections to show first, in this order; the rest follow'
    )


class ResumeLayout(BaseModel):
    """Presentation settings. Every field is optional, see ``vitae.config``
    for defaults."""

    template: Optional[template_option] = None
    latex: ResumeLayoutLaTeX | None = None
    margins: ResumeLayoutMargins | None = None
    typography: ResumeLayoutTypography | None = None
    locale: ResumeLayoutLocale | None = None
    page: ResumeLayoutPage | None = None
    sections: ResumeLayoutSections | None = None


class Resume(BaseModel):
    content: ResumeContent
    layout: ResumeLayout | None = None


# item name -> item model
ITEM_MODELS = {
    'award': AwardItem,
    'basics': BasicsItem,
    'certificate': CertificateItem,
    'education': EducationItem,
    'interest': InterestItem,
    'language': LanguageItem,
    'location': LocationItem,
    'project': ProjectItem,
    'profile': ProfileItem,
    'publication': PublicationItem,
    'reference': ReferenceItem,
    'skill': SkillItem,
    'volunteer': VolunteerItem,
    'work': WorkItem,
}
