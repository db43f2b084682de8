"""Bloglist CLI — run the server and manage the database.

Usage:
    bloglist serve                                   # Run the API with uvicorn
    bloglist init-db                                 # Create tables (dev; prod uses alembic)
    bloglist create-user alice --name "Alice"        # Register an account (prompts for password)
    bloglist users                                   # List accounts and blog counts

All commands read BLOGLIST_* env vars; BLOGLIST_JWT_SECRET must be set.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import sys
from typing import Optional

import click

from bloglist import __version__
from bloglist.auth.password import PasswordHasher
from bloglist.config import Settings, load_settings
from bloglist.db.engine import build_engine, build_session_factory, create_tables
from bloglist.errors import AppError, FatalConfigError
from bloglist.services.account_service import AccountService

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _run(coro):
    """Run an async coroutine from synchronous Click handler.

    Handles nested event loops (e.g. when invoked via Click CliRunner
    inside an existing async context like tests) by offloading to a thread.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        # No running loop: normal CLI invocation
        return asyncio.run(coro)
    else:
        with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
            return pool.submit(asyncio.run, coro).result()


def _settings() -> Settings:
    try:
        return load_settings()
    except FatalConfigError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)


def _print_table(rows: list[dict], columns: list[tuple[str, str, int]]):
    """Print a simple ASCII table.

    columns: list of (header, dict_key, width)
    """
    header = "  ".join(h.ljust(w) for h, _, w in columns)
    click.secho(header, bold=True)
    click.echo("-" * len(header))
    for row in rows:
        line = "  ".join(str(row.get(k, "—"))[:w].ljust(w) for _, k, w in columns)
        click.echo(line)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(version=__version__, prog_name="bloglist")
def main():
    """Bloglist — blog listing service with token auth."""


# ---------------------------------------------------------------------------
# bloglist serve
# ---------------------------------------------------------------------------


@main.command()
@click.option("--host", help="Bind address (default: BLOGLIST_HOST)")
@click.option("--port", type=int, help="Port (default: BLOGLIST_PORT)")
@click.option("--reload", is_flag=True, help="Auto-reload on code changes")
def serve(host: Optional[str], port: Optional[int], reload: bool):
    """Run the API server."""
    import uvicorn

    settings = _settings()
    uvicorn.run(
        "bloglist.main:create_app",
        factory=True,
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
    )


# ---------------------------------------------------------------------------
# bloglist init-db
# ---------------------------------------------------------------------------


@main.command("init-db")
def init_db():
    """Create all tables in the configured database."""
    settings = _settings()
    _run(_init_db_impl(settings))
    click.secho("Tables created.", fg="green")


async def _init_db_impl(settings: Settings):
    engine = build_engine(settings)
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


# ---------------------------------------------------------------------------
# bloglist create-user
# ---------------------------------------------------------------------------


@main.command("create-user")
@click.argument("username")
@click.option("--name", "-n", default="", help="Display name")
@click.password_option("--password", "-p", help="Password (prompted if omitted)")
def create_user(username: str, name: str, password: str):
    """Register an account."""
    settings = _settings()
    try:
        user_id = _run(_create_user_impl(settings, username, name, password))
    except AppError as e:
        click.secho(f"Error: {e.message}", fg="red", err=True)
        sys.exit(1)
    click.secho(f"Created {username} ({user_id})", fg="green")


async def _create_user_impl(settings: Settings, username: str, name: str, password: str) -> str:
    engine = build_engine(settings)
    try:
        async with build_session_factory(engine)() as session:
            svc = AccountService(
                session,
                PasswordHasher(rounds=settings.password_hash_rounds),
                min_password_length=settings.min_password_length,
            )
            user = await svc.create(username=username, name=name, password=password)
            return str(user.id)
    finally:
        await engine.dispose()


# ---------------------------------------------------------------------------
# bloglist users
# ---------------------------------------------------------------------------


@main.command()
def users():
    """List accounts."""
    settings = _settings()
    rows = _run(_users_impl(settings))
    if not rows:
        click.echo("No users.")
        return
    _print_table(rows, [("USERNAME", "username", 20), ("NAME", "name", 24), ("BLOGS", "blogs", 6), ("ID", "id", 36)])


async def _users_impl(settings: Settings) -> list[dict]:
    engine = build_engine(settings)
    try:
        async with build_session_factory(engine)() as session:
            svc = AccountService(session, PasswordHasher(rounds=settings.password_hash_rounds))
            return [
                {"username": u.username, "name": u.name, "blogs": len(u.blogs), "id": str(u.id)}
                for u in await svc.list_accounts()
            ]
    finally:
        await engine.dispose()


if __name__ == "__main__":
    main()
