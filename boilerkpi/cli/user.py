"""CLI commands for local accounts, the login session and preferences."""

from __future__ import annotations

import boilerkpi.lib.cli as click
from boilerkpi.auth import AuthProvider
from boilerkpi.core import di
from boilerkpi.model import Theme, UserAccount
from boilerkpi.storage import preference
from boilerkpi.storage.store import KeyValueStore


def _describe(account: UserAccount) -> None:
    click.echo(f"{account.full_name} <{account.username}>")
    click.echo(f"  ID: {account.id}")
    if account.role:
        click.echo(f"  Role: {account.role}")
    if account.department:
        click.echo(f"  Department: {account.department}")


@click.group("user")
def user():
    """Manage local accounts and the login session."""
    ...


@user.command("register")
@click.argument("email")
@click.argument("full_name")
@click.option("--password", "-p", prompt=True, hide_input=True, confirmation_prompt=True)
@click.option("--role", default="", help="Job title")
@click.option("--department", default="", help="Department")
@click.option("--avatar", default=None, help="Avatar image URL")
@di.inject
def user_register(
    email: str,
    full_name: str,
    password: str,
    role: str,
    department: str,
    avatar: str | None,
    auth: AuthProvider = di.Provide["auth.provider"],
) -> None:
    """Register a new account and log in as it.

    EMAIL is the address used to log in.
    FULL_NAME is the user's display name.
    """
    result = auth.register(email, password, full_name, role=role, department=department, avatar=avatar)
    if not result.success or result.user is None:
        click.echo(f"Error: {result.error}", err=True)
        raise SystemExit(1)

    click.echo("Registered and logged in:")
    _describe(result.user)


@user.command("login")
@click.argument("email")
@click.option("--password", "-p", prompt=True, hide_input=True)
@di.inject
def user_login(email: str, password: str, auth: AuthProvider = di.Provide["auth.provider"]) -> None:
    """Log in with EMAIL and a password."""
    result = auth.authenticate(email, password)
    if not result.success or result.user is None:
        click.echo(f"Error: {result.error}", err=True)
        raise SystemExit(1)

    click.echo("Logged in:")
    _describe(result.user)


@user.command("logout")
@di.inject
def user_logout(auth: AuthProvider = di.Provide["auth.provider"]) -> None:
    auth.logout()
    click.echo("Logged out.")


@user.command("whoami")
@di.inject
def user_whoami(auth: AuthProvider = di.Provide["auth.provider"]) -> None:
    """Show the logged-in account."""
    account = auth.current_user()
    if account is None:
        click.echo("Not logged in.", err=True)
        raise SystemExit(1)
    _describe(account)


@user.command("theme")
@click.argument("theme", required=False, type=click.EnumType(Theme))
@di.inject
def user_theme(theme: Theme | None, store: KeyValueStore = di.Provide["storage.store"]) -> None:
    """Show the display theme, or set it to THEME."""
    if theme is not None:
        preference.set_theme(theme, store=store)
    click.echo(preference.get_theme(store=store).value)
