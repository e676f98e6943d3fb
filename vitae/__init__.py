"""
Public API for the vitae package.
Import the main user-facing functions and classes.
"""

from vitae.tools import load_resume, mk_resume, mk_computed_resume, dump_resume
from vitae.config import load_config, get_config, get_default_config, resolve_layout
from vitae.base import ContentSource, Transformer, get_section_registry
from vitae.models import (
    Resume,
    ResumeContent,
    ResumeLayout,
    ITEM_MODELS,
    AwardItem,
    BasicsItem,
    CertificateItem,
    EducationItem,
    InterestItem,
    LanguageItem,
    LocationItem,
    ProfileItem,
    ProjectItem,
    PublicationItem,
    ReferenceItem,
    SkillItem,
    VolunteerItem,
    WorkItem,
)
from vitae.primitives import sized_string, option

# Validation
from vitae.validators import (
    ValidationIssue,
    ViolationKind,
    check_resume,
    check_section,
    extract_validation_issues,
    is_valid,
    validate_resume,
    validate_content,
    validate_layout,
    validate_section,
    resume_json_schema,
    get_jsonschema_errors,
)

# Computed fields
from vitae.transform import compute_content, compute_resume

__all__ = [
    # Reading and building resumes
    'load_resume',
    'mk_resume',
    'mk_computed_resume',
    'dump_resume',
    'load_config',
    'get_config',
    'get_default_config',
    'resolve_layout',
    # Models
    'Resume',
    'ResumeContent',
    'ResumeLayout',
    'ITEM_MODELS',
    'AwardItem',
    'BasicsItem',
    'CertificateItem',
    'EducationItem',
    'InterestItem',
    'LanguageItem',
    'LocationItem',
    'ProfileItem',
    'ProjectItem',
    'PublicationItem',
    'ReferenceItem',
    'SkillItem',
    'VolunteerItem',
    'WorkItem',
    # Primitives and sections
    'sized_string',
    'option',
    'ContentSource',
    'Transformer',
    'get_section_registry',
    # Validation
    'ValidationIssue',
    'ViolationKind',
    'check_resume',
    'check_section',
    'extract_validation_issues',
    'is_valid',
    'validate_resume',
    'validate_content',
    'validate_layout',
    'validate_section',
    'resume_json_schema',
    'get_jsonschema_errors',
    # Computed fields
    'compute_content',
    'compute_resume',
]
