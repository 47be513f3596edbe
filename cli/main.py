# cli/main.py
import click

from .commands.config import config
from .commands.db import db
from .commands.serve import serve

@click.group()
def cli():
    """Bookshelf service CLI"""
    pass

cli.add_command(serve)
cli.add_command(db)
cli.add_command(config)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
