"""Validation commands: entities, validate, check-param."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import httpx
import structlog
import typer

from predcheck.errors import ValidationError, format_error_response
from predcheck.validation import params
from predcheck.validation.registry import entity_names, get_entity

log = structlog.get_logger(__name__)

PARAM_CHECKS = {
    "address": params.validate_ethereum_address,
    "condition-id": params.validate_condition_id,
    "timestamp": params.validate_timestamp,
    "interval": params.validate_interval,
    "time-period": params.validate_time_period,
    "order": params.validate_order_string,
    "event-slug": params.validate_event_slug,
}


def _load_source(source: str | None, url: str | None, settings: Any) -> Any:
    """Read JSON from a URL, a file, or stdin ("-" or no source)."""
    if url:
        headers = {"User-Agent": settings.user_agent}
        with httpx.Client(timeout=settings.http_timeout_sec, headers=headers) as client:
            resp = client.get(url)
            resp.raise_for_status()
            log.debug("fetched_payload", url=url, status=resp.status_code)
            return resp.json()
    if source is None or source == "-":
        return json.load(sys.stdin)
    with open(Path(source), encoding="utf-8") as f:
        return json.load(f)


def _fail(error: BaseException) -> None:
    typer.echo(format_error_response(error).model_dump_json(indent=2))
    raise typer.Exit(code=1)


def entities() -> None:
    """List the entity names accepted by `validate`."""
    for name in entity_names():
        typer.echo(name)


def validate(
    ctx: typer.Context,
    entity: str = typer.Argument(..., help="Entity name, e.g. Market or Comment"),
    source: str | None = typer.Argument(None, help="JSON file, or - for stdin"),
    many: bool = typer.Option(False, "--many", help="Payload is a list of entities"),
    deep: bool | None = typer.Option(
        None, "--deep/--shallow", help="Validate every nested entity (default from config)"
    ),
    url: str | None = typer.Option(None, "--url", help="Fetch the payload with GET instead"),
) -> None:
    """Validate a JSON payload and print it normalized, or print the error payload."""
    settings = ctx.obj["settings"]
    try:
        registered = get_entity(entity)
    except KeyError as e:
        typer.echo(str(e.args[0]), err=True)
        raise typer.Exit(code=2)
    try:
        data = _load_source(source, url, settings)
    except (OSError, json.JSONDecodeError, httpx.HTTPError) as e:
        log.warning("load_failed", source=source, url=url, error=str(e))
        _fail(e)
    use_deep = settings.deep_nested if deep is None else deep
    try:
        result = registered.validate(data, many=many, deep=use_deep)
    except ValidationError as e:
        _fail(e)
    typer.echo(json.dumps(result, indent=2))


def check_param(
    kind: str = typer.Argument(..., help=f"One of: {', '.join(PARAM_CHECKS)}"),
    value: str = typer.Argument(..., help="Raw parameter value"),
) -> None:
    """Run a single parameter check and print the normalized value."""
    check = PARAM_CHECKS.get(kind)
    if check is None:
        typer.echo(f"unknown parameter kind: {kind}", err=True)
        raise typer.Exit(code=2)
    try:
        result = check(value)
    except ValidationError as e:
        _fail(e)
    typer.echo(result)


def register(app: typer.Typer) -> None:
    app.command("entities")(entities)
    app.command("validate")(validate)
    app.command("check-param")(check_param)
