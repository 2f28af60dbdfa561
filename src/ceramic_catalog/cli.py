"""Command-line interface for the ceramic catalog.

This module provides the CLI commands for running and managing
the catalog service.
"""

from typing import NoReturn

import click

from ceramic_catalog.core.config import get_settings
from ceramic_catalog.core.logging import configure_logging, get_logger
from ceramic_catalog.domain.entities.role import Role


@click.group()
@click.version_option(version="0.1.0", prog_name="ceramic-catalog")
def cli() -> None:
    """Ceramic Catalog - product collections with client exclusivity.

    Settings are read from CERAMIC_CATALOG_* environment variables and .env.
    """


@cli.command()
@click.option("--host", type=str, default=None, help="Host to bind to (overrides config)")
@click.option("--port", type=int, default=None, help="Port to bind to (overrides config)")
@click.option(
    "--workers",
    type=int,
    default=None,
    help="Number of worker processes (overrides config)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
def serve(host: str | None, port: int | None, workers: int | None, reload: bool) -> None:
    """Start the catalog server."""
    import uvicorn

    settings = get_settings()

    bind_host = host or settings.host
    bind_port = port or settings.port
    bind_workers = workers or settings.workers

    configure_logging(settings)

    logger = get_logger(__name__)
    logger.info(
        "Starting Ceramic Catalog server",
        host=bind_host,
        port=bind_port,
        workers=bind_workers,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "ceramic_catalog.infrastructure.api.app:app",
        host=bind_host,
        port=bind_port,
        workers=1 if reload else bind_workers,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command()
@click.option(
    "--force",
    is_flag=True,
    help="Skip confirmation prompt",
)
def init_db(force: bool) -> None:
    """Initialize the database.

    Creates all database tables. Use this only in development; in
    production, use migrations instead.
    """
    import asyncio

    from ceramic_catalog.infrastructure.persistence.database import (
        get_db_manager,
        init_database,
    )

    settings = get_settings()
    configure_logging(settings)

    if settings.is_production and not force:
        click.echo(
            "ERROR: Running in production mode. Use migrations instead of init-db.",
            err=True,
        )
        raise SystemExit(1)

    if not force:
        click.confirm(
            "This will create all database tables. Continue?",
            abort=True,
            default=False,
        )

    async def initialize():
        db = get_db_manager()
        try:
            await db.create_tables()
            await init_database()
            click.echo("Database initialized successfully.")
        finally:
            await db.disconnect()

    asyncio.run(initialize())


@cli.command()
@click.option("--email", type=str, default=None, help="User email (prompts if not provided)")
@click.option(
    "--password",
    type=str,
    default=None,
    help="User password (prompts if not provided)",
)
@click.option("--name", type=str, default=None, help="Display name (defaults to the email)")
@click.option(
    "--role",
    type=click.Choice([r.value for r in Role], case_sensitive=False),
    default=Role.PUBLIC.value,
    show_default=True,
    help="Role of the new user",
)
@click.option("--client-id", type=str, default=None, help="Client the user acts for")
def create_user(
    email: str | None,
    password: str | None,
    name: str | None,
    role: str,
    client_id: str | None,
) -> None:
    """Create a user with any role."""
    import asyncio

    from ceramic_catalog.domain.exceptions import CatalogError
    from ceramic_catalog.domain.services import UserService
    from ceramic_catalog.infrastructure.persistence.database import get_db_manager

    settings = get_settings()
    configure_logging(settings)
    logger = get_logger(__name__)

    if email is None:
        email = click.prompt("Email", type=str)
    if "@" not in email or "." not in email.split("@")[-1]:
        click.echo("Error: Invalid email format", err=True)
        raise SystemExit(1)
    if password is None:
        password = click.prompt("Password", hide_input=True, confirmation_prompt=True)

    async def create() -> None:
        db = get_db_manager()
        try:
            async with db.session() as session:
                user = await UserService(session).register(
                    email=email,
                    password=password,
                    name=name or email,
                    role=Role.parse(role),
                    client_id=client_id,
                )
                await session.commit()
            click.echo(
                f"\nUser created successfully!\n"
                f"  User ID: {user.id}\n"
                f"  Email:   {user.email}\n"
                f"  Role:    {user.role}\n"
            )
            logger.info("User created via CLI", user_id=user.id, role=user.role)
        except CatalogError as e:
            click.echo(f"Error: {e.message}", err=True)
            logger.error("User creation failed", error=e.message)
            raise SystemExit(1)
        finally:
            await db.disconnect()

    asyncio.run(create())


@cli.command()
def info() -> None:
    """Display catalog configuration and system information."""
    settings = get_settings()

    click.echo(f"""
Ceramic Catalog v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:  {settings.environment}
  Debug:        {settings.debug}
  API Prefix:   {settings.api_prefix}

Server:
  Host:         {settings.host}
  Port:         {settings.port}
  Workers:      {settings.workers}

Database:
  URL:          {settings.database_url}
  Pool Size:    {settings.db_pool_size}
  Echo:         {settings.db_echo}

Security:
  Token Expire: {settings.access_token_expire_minutes} minutes

Pagination:
  Default Size: {settings.default_page_size}
  Max Size:     {settings.max_page_size}

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `ceramic-catalog` command is run
    or when using `python -m ceramic_catalog`.
    """
    cli()


if __name__ == "__main__":
    main()
