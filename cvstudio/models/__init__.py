from .cv import CV
from .personal_info import PersonalInfo
from .experience import Experience
from .education import Education
from .skill import Skill
from .project import Project
from .certification import Certification

__all__ = [
    "CV",
    "PersonalInfo",
    "Experience",
    "Education",
    "Skill",
    "Project",
    "Certification",
]
