# cli/commands/config.py
import click

from core.config import get_settings

@click.command()
def config():
    """Show the effective configuration, password masked"""
    settings = get_settings()
    rows = [
        ('Service', settings.service_name),
        ('Database', settings.masked_url()),
        ('Auto migrate', str(settings.db_auto_migrate)),
        ('Server', f"{settings.server_host}:{settings.server_port}"),
        ('CORS origins', ', '.join(settings.cors_origins)),
        ('Log level', settings.log_level),
    ]
    for label, value in rows:
        click.echo(click.style(f"{label}: ", fg='blue') + click.style(value, fg='cyan'))
