import os
import logging
import re

from jinja2 import Environment, FileSystemLoader, select_autoescape
from jinja2.exceptions import TemplateError

from cvstudio.exceptions import RenderError
from cvstudio.services.cv_layout import Document, build_sections
from cvstudio.services.cv_templates import TemplateRegistry

# Configure logging
logger = logging.getLogger(__name__)

TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "templates")
SUPPORTED_FORMATS = ("pdf", "html")

registry = TemplateRegistry()

env = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    autoescape=select_autoescape(["html", "xml"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def available_templates():
    return registry.available()


def compose(cv, template_id=None):
    """
    Build the layout model for a CV.

    ``template_id`` defaults to the CV's own template; unknown ids fall back to Modern.
    Raises RenderError when the CV has neither personal info nor a title.
    """
    if cv.personal_info is None and not (cv.title or "").strip():
        raise RenderError("CV has no personal info and no title, nothing to render")

    layout = registry.resolve(template_id or cv.template)
    sections = build_sections(cv, layout.summary_heading)
    return Document(
        template=layout.id,
        header=layout.compose_header(cv),
        body=layout.arrange(sections),
    )


def render_html(cv, template_id=None, page_size="A4", page_margin="2cm"):
    """Print-ready HTML; page size and margins go into the @page rule."""
    document = compose(cv, template_id)
    try:
        template = env.get_template("cv.html")
        return template.render(
            document=document,
            title=cv.title or document.header.name,
            page_size=page_size,
            page_margin=page_margin,
        )
    except TemplateError as e:
        logger.exception("❌ Failed to render CV template")
        raise RenderError("Failed to render CV template", original_error=e) from e


def html_to_pdf(html):
    """Paginate HTML into PDF bytes. Page breaks are WeasyPrint's job."""
    try:
        # importing loads Pango and cairo, which fails with OSError when they are missing
        from weasyprint import HTML

        return HTML(string=html, base_url=TEMPLATE_DIR).write_pdf()
    except Exception as e:
        logger.exception("❌ WeasyPrint failed to produce the PDF")
        raise RenderError("Failed to generate PDF", original_error=e) from e


def render(cv, template_id=None, fmt="pdf", page_size="A4", page_margin="2cm"):
    """
    Render a loaded CV aggregate to document bytes.

    Args:
        cv: CV aggregate (ORM instance or anything with the same attributes)
        template_id: Modern, Classic or Executive; defaults to ``cv.template``
        fmt: "pdf" or "html"

    Returns:
        bytes of the rendered document
    """
    if fmt not in SUPPORTED_FORMATS:
        raise RenderError(f"Unsupported format {fmt!r}, expected one of {', '.join(SUPPORTED_FORMATS)}")

    html = render_html(cv, template_id, page_size=page_size, page_margin=page_margin)
    if fmt == "html":
        return html.encode("utf-8")

    pdf_bytes = html_to_pdf(html)
    logger.info("✅ Rendered CV %s as PDF (%d bytes)", getattr(cv, "id", None), len(pdf_bytes))
    return pdf_bytes


def suggested_filename(cv, fmt="pdf"):
    """``Full_Name_Resume.pdf``, falling back to ``CV_Resume.pdf``."""
    info = cv.personal_info
    name = (info.full_name if info else "") or "CV"
    safe_name = "".join(c for c in name if c.isalnum() or c in (" ", "-", "_")).strip()
    safe_name = re.sub(r"\s+", "_", safe_name) or "CV"
    return f"{safe_name}_Resume.{fmt}"
