from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Optional

import typer

from passfields.config import get_settings
from passfields.core.builder import build as build_record
from passfields.core.errors import RecordSerializationError, RecordValidationError, UnknownRecordKindError
from passfields.core.registry import available_record_kinds, resolve_record_kind
from passfields.core.serializer import encode
from passfields.domain import kinds as _bundled_kinds  # noqa: F401 - registers seat/location
from passfields.reporter import print_kinds
from passfields.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Validate loosely-typed input into pass records and emit canonical JSON.")
log = get_logger(__name__)

EXIT_INVALID_RECORD = 1
EXIT_BAD_INPUT = 2


def _read_payload(payload: Optional[str], file: Optional[Path]) -> str:
    try:
        if file is not None:
            return file.read_text(encoding="utf-8")
        if payload is None or payload == "-":
            return sys.stdin.read()
    except (UnicodeDecodeError, OSError) as exc:
        typer.echo(f"error: payload is not readable: {exc}", err=True)
        raise typer.Exit(code=EXIT_BAD_INPUT) from exc
    return payload


def _parse_payload(text: str) -> dict[str, Any]:
    try:
        data = json.loads(text) if text.strip() else {}
    except json.JSONDecodeError as exc:
        typer.echo(f"error: payload is not valid JSON: {exc}", err=True)
        raise typer.Exit(code=EXIT_BAD_INPUT) from exc
    if not isinstance(data, dict):
        typer.echo("error: payload must be a JSON object", err=True)
        raise typer.Exit(code=EXIT_BAD_INPUT)
    return data


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"log_level={settings.log_level} log_json={settings.log_json} "
        f"output_indent={settings.output_indent} | kinds={', '.join(available_record_kinds())}"
    )


@app.command()
def kinds() -> None:
    """
    List registered record kinds and their field contracts.
    """
    print_kinds(resolve_record_kind(name) for name in available_record_kinds())


@app.command()
def build(
    kind: str = typer.Argument(..., help="Record kind to build (see `kinds`)."),
    payload: Optional[str] = typer.Argument(
        None,
        help="JSON object with the record attributes. Reads stdin when omitted or '-'.",
    ),
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Read the JSON payload from a file instead.",
    ),
    indent: Optional[int] = typer.Option(
        None,
        "--indent",
        "-i",
        min=0,
        help="Pretty-print with this indent (default from settings: compact).",
    ),
) -> None:
    """
    Validate a payload into a record and print its canonical JSON.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    try:
        record_kind = resolve_record_kind(kind)
    except UnknownRecordKindError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=EXIT_BAD_INPUT) from exc

    attrs = _parse_payload(_read_payload(payload, file))

    try:
        record = build_record(record_kind, attrs)
        output = encode(record, record_kind, indent=indent if indent is not None else settings.output_indent)
    except RecordValidationError as exc:
        typer.echo(f"error: {exc.kind.value} {exc.field}: {exc.message}", err=True)
        raise typer.Exit(code=EXIT_INVALID_RECORD) from exc
    except RecordSerializationError as exc:
        typer.echo(f"error: {exc.message}", err=True)
        raise typer.Exit(code=EXIT_INVALID_RECORD) from exc

    log.debug(f"Built {record_kind.name} record", extra={"record_kind": record_kind.name})
    typer.echo(output)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
