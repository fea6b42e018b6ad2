"""CLI entry point for building scoring request payloads."""

from __future__ import annotations

import json

import click
from click.core import ParameterSource

from .core.config import Settings, load_settings
from .core.digest import md5_hex
from .core.errors import ConfigError, FraudRequestError
from .observability.logger import setup_logging


def _settings(config: str | None) -> Settings:
    try:
        settings = load_settings(config_path=config)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    setup_logging(
        level=settings.observability.log_level,
        format=settings.observability.log_format,
    )
    return settings


@click.group()
def main() -> None:
    """Fraud-scoring request builder."""


@main.command()
@click.argument("value")
def digest(value: str) -> None:
    """Print the MD5 digest of VALUE."""
    click.echo(md5_hex(value))


@main.command()
@click.argument("address", required=False)
@click.option("--config", default=None, help="Config file path")
@click.option("--domain", default=None, help="Explicit email domain")
@click.option(
    "--hash/--no-hash", "hash_address", default=None,
    help="Send the MD5 of the address (default from config)",
)
@click.option(
    "--validate/--no-validate", "validate", default=None,
    help="Check address and domain syntax (default from config)",
)
@click.pass_context
def email(
    ctx: click.Context,
    address: str | None,
    config: str | None,
    domain: str | None,
    hash_address: bool | None,
    validate: bool | None,
) -> None:
    """Print the canonical JSON for one email sub-object."""
    from .request import request_from_mapping

    settings = _settings(config)
    fields: dict = {}
    if address is not None:
        fields["address"] = address
    if domain is not None:
        fields["domain"] = domain
    # Options left off the command line fall back to the [email] settings.
    if ctx.get_parameter_source("hash_address") is ParameterSource.COMMANDLINE:
        fields["hash_address"] = bool(hash_address)
    if ctx.get_parameter_source("validate") is ParameterSource.COMMANDLINE:
        fields["validate"] = bool(validate)

    try:
        request = request_from_mapping({"email": fields}, settings)
    except FraudRequestError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(json.dumps(request.to_dict().get("email", {})))


@main.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--config", default=None, help="Config file path")
def build(input_path: str, config: str | None) -> None:
    """Build a request from a JSON file of sections and print it."""
    from .request import request_from_mapping

    settings = _settings(config)
    with open(input_path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise click.ClickException(f"Invalid JSON in {input_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise click.ClickException("Request input must be a JSON object")

    try:
        request = request_from_mapping(data, settings)
        click.echo(request.to_json())
    except FraudRequestError as exc:
        raise click.ClickException(str(exc)) from exc


if __name__ == "__main__":
    main()
