"""Command line entry point: ``asciinema-api upload`` and ``asciinema-api auth``."""

from __future__ import annotations

import asyncio

import click

from . import api, network
from .config import Config
from .errors import AsciinemaApiError
from .logging import get_logger, setup_logging
from .recording import open_from_path

logger = get_logger(__name__, service='asciinema')

server_url_option = click.option(
    '--server-url',
    metavar='URL',
    default=None,
    help='asciinema server URL (defaults to config / ASCIINEMA_SERVER_URL)',
)


@click.group()
@click.version_option(package_name='asciinema-api')
def main():
    """Talk to an asciinema server."""
    setup_logging('asciinema')


@main.command()
@click.argument('filename', type=click.Path(dir_okay=False))
@server_url_option
def upload(filename, server_url):
    """Upload a recording to the server."""
    if not network.network_access_enabled():
        raise click.ClickException(network.DISABLED_MESSAGE)

    try:
        config = Config(server_url=server_url)
        open_from_path(filename)
        result = asyncio.run(api.upload_recording(filename, config))
    except AsciinemaApiError as exc:
        logger.debug(f"upload failed with {exc.code}")
        raise click.ClickException(exc.message) from exc

    click.echo(result.display_text)


@main.command()
@server_url_option
def auth(server_url):
    """Link this installation with a server account."""
    try:
        config = Config(server_url=server_url)
        url = api.get_auth_url(config)
        host = config.get_server_url().host
    except AsciinemaApiError as exc:
        raise click.ClickException(exc.message) from exc

    click.echo(f"Open the following URL in a web browser to authenticate this CLI with your {host} user account:")
    click.echo()
    click.echo(f"    {url}")
    click.echo()
    click.echo(
        "This action will associate all recordings uploaded from this machine "
        "(past and future ones) with your account, and allow you to stream via "
        f"{host}."
    )


if __name__ == '__main__':
    main()
