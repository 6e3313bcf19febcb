import asyncio
import typer
from tortoise.exceptions import IntegrityError

from .commands.finance import donations_app, expenses_app
from .db import DBConnection
from ..features.auth.security import get_password_hash
from ..features.auth import service as auth_service
from ..features.auth.models import User as AuthUser

app = typer.Typer(name="relief-admin", help="CLI for managing Relief Admin data.")

# User management commands
user_app = typer.Typer(name="users", help="Manage user accounts.")
app.add_typer(user_app)

@user_app.command("create-admin")
def create_admin_user_command(
    username: str = typer.Option(..., prompt=True, help="Username for the new admin."),
    email: str = typer.Option(..., prompt=True, help="Email for the new admin."),
    password: str = typer.Option(..., prompt=True, hide_input=True, confirmation_prompt=True, help="Password for the new admin.")
):
    """Creates a new admin user."""
    asyncio.run(_create_admin_user(username, email, password))

async def _create_admin_user(username: str, email: str, password: str):
    async with DBConnection():
        typer.echo(f"Attempting to create admin user: {username} ({email})...")
        if await auth_service.get_user_by_username(username):
            typer.secho(f"Error: User with username '{username}' already exists.", fg=typer.colors.RED)
            raise typer.Exit(code=1)
        if await auth_service.get_user_by_email(email):
            typer.secho(f"Error: User with email '{email}' already exists.", fg=typer.colors.RED)
            raise typer.Exit(code=1)
        try:
            admin_user = await auth_service.create_user(
                username=username,
                email=email,
                hashed_password=get_password_hash(password),
                role="admin",
            )
        except IntegrityError as e:
            typer.secho(f"Error creating admin user: {e}", fg=typer.colors.RED)
            raise typer.Exit(code=1)
        typer.secho(f"Admin user '{admin_user.username}' created successfully with ID: {admin_user.public_id}", fg=typer.colors.GREEN)

@user_app.command("disable-user")
def disable_user_account_command(
    username: str = typer.Argument(..., help="The username of the user to disable.")
):
    """Disables an existing user's account."""
    asyncio.run(_set_user_active(username, False))

@user_app.command("enable-user")
def enable_user_account_command(
    username: str = typer.Argument(..., help="The username of the user to enable.")
):
    """Enables an existing user's account."""
    asyncio.run(_set_user_active(username, True))

async def _set_user_active(username: str, is_active: bool):
    verb = "enable" if is_active else "disable"
    async with DBConnection():
        typer.echo(f"Attempting to {verb} user account '{username}'...")
        user = await AuthUser.get_or_none(username=username)
        if not user:
            typer.secho(f"Error: User with username '{username}' not found.", fg=typer.colors.RED)
            raise typer.Exit(code=1)
        if user.is_active == is_active:
            typer.secho(f"User '{username}' is already {'active' if is_active else 'inactive'}.", fg=typer.colors.YELLOW)
            raise typer.Exit(code=0)
        await auth_service.set_user_active(username, is_active)
        typer.secho(f"User account '{username}' has been successfully {verb}d.", fg=typer.colors.GREEN)

app.add_typer(donations_app)
app.add_typer(expenses_app)

if __name__ == "__main__":
    app()
