from flask.cli import with_appcontext
from cvstudio.database.seed.seed_cvs import seed as seed_cvs

import click

@click.command("seed-all")
@with_appcontext
def seed_all():
    """Run all database seeders."""
    click.echo("🌱 Seeding database...")
    seed_cvs()
    click.echo("✅ All seeders completed!")
