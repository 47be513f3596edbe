# cli/commands/db.py
import click
from sqlalchemy.exc import SQLAlchemyError

from core.config import get_settings
from ..utils import open_database, print_error

@click.group()
def db():
    """Database schema commands"""
    pass

@db.command()
def init():
    """Create the author and book tables if they do not exist"""
    database = open_database(get_settings())
    try:
        database.init_db()
        click.echo(click.style("\nSchema created", fg='green'))
    except SQLAlchemyError as e:
        print_error(f"Error creating schema: {e}")
        raise SystemExit(1)
    finally:
        database.dispose()

@db.command()
@click.option('--force/--no-force', default=False, help='Skip confirmation prompt')
def drop(force: bool):
    """Drop the author and book tables, losing all data

    Example:
        bookshelf db drop  # Drop with confirmation
        bookshelf db drop --force  # Drop without confirmation
    """
    if not force and not click.confirm("This deletes every author and book. Continue?"):
        click.echo("Aborted")
        return

    database = open_database(get_settings())
    try:
        database.drop_db()
        click.echo(click.style("\nSchema dropped", fg='green'))
    except SQLAlchemyError as e:
        print_error(f"Error dropping schema: {e}")
        raise SystemExit(1)
    finally:
        database.dispose()
