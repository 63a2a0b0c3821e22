import os

import click
from flask import current_app
from flask.cli import with_appcontext

from cvstudio.exceptions import RenderError
from cvstudio.services import cv_generator
from cvstudio.services.cv_store import CvAggregateStore


@click.command("render-cv")
@click.argument("cv_id", type=int)
@click.argument("user_id")
@click.option("--template", "-t", default=None, help="Modern, Classic or Executive (defaults to the CV's own).")
@click.option("--format", "fmt", type=click.Choice(cv_generator.SUPPORTED_FORMATS), default="pdf")
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None, help="Target file.")
@with_appcontext
def render_cv(cv_id, user_id, template, fmt, output):
    """Render one stored CV to a file."""
    cv = CvAggregateStore.get(cv_id, user_id)
    if cv is None:
        raise click.ClickException(f"CV {cv_id} not found for user {user_id}")

    try:
        content = cv_generator.render(
            cv,
            template,
            fmt=fmt,
            page_size=current_app.config.get("CV_PAGE_SIZE", "A4"),
            page_margin=current_app.config.get("CV_PAGE_MARGIN", "2cm"),
        )
    except RenderError as e:
        raise click.ClickException(str(e)) from e

    output = output or cv_generator.suggested_filename(cv, fmt)
    directory = os.path.dirname(output)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(output, "wb") as f:
        f.write(content)

    click.echo(f"✅ CV {cv_id} written to {output} ({len(content)} bytes)")
