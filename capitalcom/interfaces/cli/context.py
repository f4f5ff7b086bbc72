"""Shared helpers for composing CLI command contexts.

Settings are resolved lazily, when a command actually needs a client, so that
``--help`` works without any credentials configured.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, NoReturn

import click
from rich.console import Console

from capitalcom.app.config import ClientSettings, ConfigurationError
from capitalcom.client import CapitalClient
from capitalcom.infrastructure.http import HOST_LIVE, CapitalComError

console = Console()

ClientFactory = Callable[[ClientSettings], CapitalClient]


@dataclass(frozen=True)
class CLIContext:
    """Container for CLI options and the client factory."""

    config_path: Path | None = None
    live: bool = False
    client_factory: ClientFactory = CapitalClient.from_settings

    def settings(self) -> ClientSettings:
        overrides = {"host": HOST_LIVE} if self.live else None
        return ClientSettings.load(self.config_path, overrides=overrides)


def build_cli_context(
    config_path: str | None = None,
    *,
    live: bool = False,
    client_factory: ClientFactory | None = None,
) -> CLIContext:
    return CLIContext(
        config_path=Path(config_path) if config_path else None,
        live=live,
        client_factory=client_factory or CapitalClient.from_settings,
    )


def fail(ctx: click.Context, message: str) -> NoReturn:
    console.print(f"Error: {message}", style="red", markup=False, highlight=False)
    ctx.exit(1)


@contextmanager
def open_client(ctx: click.Context, *, login: bool = True) -> Iterator[CapitalClient]:
    """Yield a client built from the CLI settings, logged in unless told otherwise.

    Library and configuration errors raised while the client is in use are
    reported as ``Error: ...`` and end the command with exit code 1.
    """

    cli_context: CLIContext = ctx.obj["cli_context"]
    try:
        settings = cli_context.settings()
    except (ConfigurationError, OSError, ValueError) as exc:
        fail(ctx, str(exc))

    client = cli_context.client_factory(settings)
    try:
        if login:
            if not settings.identifier or not settings.password:
                fail(ctx, "identifier and password must be configured to log in")
            client.login(encrypt_password=settings.encrypt_password)
        yield client
    except CapitalComError as exc:
        fail(ctx, str(exc))
    finally:
        client.close()


__all__ = ["CLIContext", "build_cli_context", "console", "fail", "open_client"]
