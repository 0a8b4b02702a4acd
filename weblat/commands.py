"""
CLI commands

    flask --app weblat create-admin NAME EMAIL USERNAME PASSWORD
"""

import click
from flask.cli import with_appcontext

from weblat.errors import StoreError
from weblat.services import get_store


@click.command('create-admin')
@click.argument('name')
@click.argument('email')
@click.argument('username')
@click.argument('password')
@with_appcontext
def create_admin_command(name, email, username, password):
    """Create a user with the admin role."""
    try:
        get_store().create_user(name=name, email=email, username=username,
                                password=password, role='admin')
    except StoreError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f'Admin user {username} created')
