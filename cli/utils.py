# cli/utils.py
import click

from core.config import Settings
from core.sa.database import Database

def open_database(settings: Settings) -> Database:
    """Connect to the configured database, telling the user where"""
    click.echo(click.style("Database: ", fg='blue') +
              click.style(settings.masked_url(), fg='cyan'))
    return Database(settings.sqlalchemy_url)

def print_error(message: str) -> None:
    click.echo("\n" + click.style(message, fg='red'), err=True)
