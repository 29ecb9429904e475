"""Admin account CLI commands."""

import click
from flask.cli import with_appcontext

from tuskers.extensions import db
from tuskers.models import UserRole
from tuskers.security import is_password_strong
from tuskers.services.auth import create_user as provision_user
from tuskers.services.auth import get_user_by_username


@click.group('user')
def user_commands():
    """Admin account management commands."""
    pass


@user_commands.command('create')
@click.option('--username', required=True, help='Login name')
@click.option('--password', required=True, help='User password')
@click.option('--role', type=click.Choice([r.value for r in UserRole]), default=UserRole.ADMIN.value, show_default=True)
@with_appcontext
def create_user(username, password, role):
    """Create an admin account."""
    if get_user_by_username(username):
        click.echo(click.style(f'Error: User "{username}" already exists', fg='red'))
        return

    ok, reason = is_password_strong(password)
    if not ok:
        click.echo(click.style(f'Error: {reason}', fg='red'))
        return

    user = provision_user(username, password, role=UserRole(role))

    click.echo(click.style('User created successfully!', fg='green'))
    click.echo(f'  ID: {user.id}')
    click.echo(f'  Username: {username}')
    click.echo(f'  Role: {role}')


@user_commands.command('set-password')
@click.option('--username', required=True, help='Login name')
@click.option('--password', required=True, help='New password')
@with_appcontext
def set_password(username, password):
    """Set or reset a user's password."""
    user = get_user_by_username(username)
    if not user:
        click.echo(click.style(f'Error: No user {username} found', fg='red'))
        return

    ok, reason = is_password_strong(password)
    if not ok:
        click.echo(click.style(f'Error: {reason}', fg='red'))
        return

    user.set_password(password)
    db.session.commit()
    click.echo(click.style('Password updated.', fg='green'))
