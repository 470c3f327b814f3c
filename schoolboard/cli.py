import click
from flask import current_app
from schoolboard import db
from schoolboard.models import User, Profile, UserRole
from schoolboard.services.scope_service import ROLE_PRIORITY
from schoolboard.utils.school_levels import SCHOOL_LEVELS


def create_user(email, password, name=None, level=None, roles=()):
    """Create a user with profile and roles. Returns (user, message)."""
    if User.query.filter_by(email=email).first():
        return None, f'User {email} already exists'

    user = User(email=email, name=name)
    user.set_password(password)
    db.session.add(user)
    db.session.flush()

    db.session.add(Profile(id=user.id, full_name=name, school_level=level))
    for role in dict.fromkeys(roles):
        db.session.add(UserRole(user_id=user.id, role=role))

    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f'Error creating user {email}: {str(e)}')
        return None, f'Could not create user {email}: {e}'

    return user, f'User {email} created'


def register_commands(app):

    @app.cli.command('create-user')
    @click.argument('email')
    @click.argument('password')
    @click.option('--name', default=None, help='Full name shown in the dashboard')
    @click.option('--level', type=click.Choice(list(SCHOOL_LEVELS)), default=None, help='School level of the user')
    @click.option('--role', 'roles', multiple=True, type=click.Choice(list(ROLE_PRIORITY)), help='Role, may be repeated')
    def create_user_command(email, password, name, level, roles):
        """Create a dashboard user with a profile and roles."""
        user, message = create_user(email, password, name=name, level=level, roles=roles)
        if user is None:
            raise click.ClickException(message)
        click.echo(message)
