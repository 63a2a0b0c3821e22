"""
CV Layout Model

Encoding-free description of a rendered CV: a header followed by blocks of
sections. Every document backend (HTML, PDF via WeasyPrint) reproduces this model,
and tests assert against it directly.

Also holds the section primitives shared by all templates. Section content never
depends on the template; templates only decide where sections go.
"""

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterable, List, Optional, Union

PRESENT = "Present"
MONTH_FORMAT = "%b %Y"


@dataclass
class TextLine:
    """
    One line of text with a style tag the backend maps to typography.

    Styles: title, organization, meta, body, category, entry, link.
    """

    text: str
    style: str = "body"


@dataclass
class Section:
    """
    A headed section. ``items`` are groups of lines a backend keeps together
    (one job, one degree, one skill category...).
    """

    kind: ClassVar[str] = "section"

    key: str
    heading: str
    items: List[List[TextLine]] = field(default_factory=list)

    @property
    def lines(self) -> List[TextLine]:
        return [line for item in self.items for line in item]


@dataclass
class Columns:
    """Sections laid out side by side; ``weights`` are relative column widths."""

    kind: ClassVar[str] = "columns"

    columns: List[List[Section]]
    weights: List[int]

    @property
    def widths(self) -> List[float]:
        total = sum(self.weights) or 1
        return [round(100.0 * weight / total, 2) for weight in self.weights]


Block = Union[Section, Columns]


@dataclass
class Header:
    """Name, job title and contact entries. ``split`` puts contacts in a right-hand column."""

    name: str
    job_title: str
    contact: List[str] = field(default_factory=list)
    split: bool = False


@dataclass
class Document:
    template: str
    header: Header
    body: List[Block] = field(default_factory=list)

    def sections(self) -> List[Section]:
        """Sections in reading order (columns left to right)."""
        found = []
        for block in self.body:
            if isinstance(block, Columns):
                for column in block.columns:
                    found.extend(column)
            else:
                found.append(block)
        return found

    def headings(self) -> List[str]:
        return [section.heading for section in self.sections()]

    def section(self, key: str) -> Optional[Section]:
        for section in self.sections():
            if section.key == key:
                return section
        return None

    def to_text(self) -> str:
        """Plain-text rendering, mostly for diagnostics and tests."""
        out = [self.header.name, self.header.job_title]
        out.extend(self.header.contact)
        for section in self.sections():
            out.append("")
            out.append(section.heading)
            out.extend(line.text for line in section.lines)
        return "\n".join(out)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_month(value) -> str:
    return value.strftime(MONTH_FORMAT) if value else ""


def format_date_range(start, end, ongoing: bool = False, open_end: str = PRESENT) -> str:
    """``"{start} - {end}"``; the ongoing flag wins over any stored end date.

    A missing end date renders ``open_end``.
    """
    if ongoing:
        end_text = PRESENT
    else:
        end_text = format_month(end) if end else open_end
    return f"{format_month(start)} - {end_text}".rstrip()


def in_display_order(items: Optional[Iterable[Any]]) -> List[Any]:
    """Stable sort on display_order, so duplicates keep their incoming order."""
    return sorted(items or [], key=lambda item: item.display_order or 0)


def _present(value) -> bool:
    return bool(value and str(value).strip())


# ---------------------------------------------------------------------------
# Headers
# ---------------------------------------------------------------------------


def _display_name(cv) -> str:
    info = cv.personal_info
    name = (info.full_name if info else None) or cv.title or "CV"
    return name.upper()


def _job_title(cv) -> str:
    info = cv.personal_info
    return (info.job_title if info else None) or "Professional"


def compose_header(cv) -> Header:
    info = cv.personal_info
    contact = []
    if info is not None:
        contact = [
            value
            for value in (info.email, info.phone, info.location, info.linkedin)
            if _present(value)
        ]
    return Header(name=_display_name(cv), job_title=_job_title(cv), contact=contact)


def compose_split_header(cv) -> Header:
    info = cv.personal_info
    contact = []
    if info is not None:
        for label, value in (("Email", info.email), ("Phone", info.phone), ("Location", info.location)):
            if _present(value):
                contact.append(f"{label}: {value}")
    return Header(name=_display_name(cv), job_title=_job_title(cv), contact=contact, split=True)


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


def summary_section(summary: Optional[str], heading: str) -> Optional[Section]:
    if not _present(summary):
        return None
    return Section("summary", heading, [[TextLine(summary.strip(), "body")]])


def _timeline_item(title, organization, location, date_range, extra=(), description=None):
    item = [
        TextLine(title or "", "title"),
        TextLine(date_range, "meta"),
        TextLine(organization or "", "organization"),
    ]
    if _present(location):
        item.append(TextLine(location, "meta"))
    item.extend(extra)
    if _present(description):
        item.append(TextLine(description.strip(), "body"))
    return item


def experience_section(experiences) -> Optional[Section]:
    items = [
        _timeline_item(
            exp.job_title,
            exp.company,
            exp.location,
            format_date_range(exp.start_date, exp.end_date, exp.currently_working),
            description=exp.description,
        )
        for exp in in_display_order(experiences)
    ]
    return Section("experience", "PROFESSIONAL EXPERIENCE", items) if items else None


def education_section(educations) -> Optional[Section]:
    items = []
    for edu in in_display_order(educations):
        extra = [TextLine(f"Grade: {edu.grade}", "meta")] if _present(edu.grade) else []
        items.append(
            _timeline_item(
                edu.degree,
                edu.institution,
                edu.location,
                format_date_range(edu.start_date, edu.end_date, edu.currently_studying),
                extra=extra,
                description=edu.description,
            )
        )
    return Section("education", "EDUCATION", items) if items else None


def skills_section(skills) -> Optional[Section]:
    groups = OrderedDict()
    for skill in in_display_order(skills):
        groups.setdefault(skill.category or "Other", []).append(skill)

    items = [
        [TextLine(category, "category")]
        + [TextLine(f"{skill.name} - {skill.level}", "entry") for skill in members]
        for category, members in groups.items()
    ]
    return Section("skills", "SKILLS", items) if items else None


def projects_section(projects) -> Optional[Section]:
    items = []
    for project in in_display_order(projects):
        item = [TextLine(project.name or "", "title")]
        # projects are never ongoing, so an unknown end stays blank
        if project.start_date or project.end_date:
            item.append(TextLine(format_date_range(project.start_date, project.end_date, open_end=""), "meta"))
        if _present(project.technologies):
            item.append(TextLine(f"Technologies: {project.technologies}", "meta"))
        if _present(project.description):
            item.append(TextLine(project.description.strip(), "body"))
        if _present(project.github_link):
            item.append(TextLine(f"GitHub: {project.github_link}", "link"))
        items.append(item)
    return Section("projects", "PROJECTS", items) if items else None


def certifications_section(certifications) -> Optional[Section]:
    # expiration dates are stored but not shown
    items = []
    for cert in in_display_order(certifications):
        item = [
            TextLine(cert.name or "", "title"),
            TextLine(cert.issuing_organization or "", "organization"),
        ]
        if cert.issue_date:
            item.append(TextLine(f"Issued: {format_month(cert.issue_date)}", "meta"))
        items.append(item)
    return Section("certifications", "CERTIFICATIONS", items) if items else None


def build_sections(cv, summary_heading: str) -> "OrderedDict[str, Optional[Section]]":
    """All six sections keyed by name; absent ones are None."""
    return OrderedDict(
        [
            ("summary", summary_section(cv.summary, summary_heading)),
            ("experience", experience_section(cv.experiences)),
            ("education", education_section(cv.educations)),
            ("skills", skills_section(cv.skills)),
            ("projects", projects_section(cv.projects)),
            ("certifications", certifications_section(cv.certifications)),
        ]
    )
