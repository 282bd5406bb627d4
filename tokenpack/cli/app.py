import json
from importlib.metadata import PackageNotFoundError, version as package_version
from pathlib import Path
from dataclasses import dataclass
from typing import Any

import typer

from tokenpack.diff import (
    diff_token_trees,
    render_change_summary,
    render_diff_report,
)
from tokenpack.source import (
    DEFAULT_BASE_REF,
    DEFAULT_HEAD_REF,
    DEFAULT_TOKENS_PATH,
    TOKENS_PATH_ENV_VAR,
    TokenSource,
    load_token_source,
)

app = typer.Typer(help="TokenKit CLI")


@dataclass(slots=True)
class _OutputOptions:
    quiet: bool = False
    no_color: bool = False
    stable_json: bool = True


_OUTPUT_OPTIONS = _OutputOptions()


def _resolve_cli_version() -> str:
    try:
        return package_version("tokenkit")
    except PackageNotFoundError:
        from tokenpack import __version__ as local_version

        return local_version


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(_resolve_cli_version(), color=False)
    raise typer.Exit()


@app.callback()
def app_options(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show TokenKit version and exit.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Suppress non-error text output.",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable ANSI color output.",
    ),
    stable_json: bool = typer.Option(
        True,
        "--stable-json/--pretty-json",
        help="Emit stable compact JSON (or pretty JSON).",
    ),
) -> None:
    """Global output controls for all CLI commands."""
    _OUTPUT_OPTIONS.quiet = quiet
    _OUTPUT_OPTIONS.no_color = no_color
    _OUTPUT_OPTIONS.stable_json = stable_json


def _echo(message: str, *, err: bool = False) -> None:
    if _OUTPUT_OPTIONS.quiet and not err:
        return
    typer.echo(message, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _echo_json(payload: dict[str, Any], *, err: bool = False) -> None:
    if _OUTPUT_OPTIONS.stable_json:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            separators=(",", ":"),
        )
    else:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            indent=2,
        )
    typer.echo(rendered, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _load_side(
    *,
    file_path: Path | None,
    ref: str,
    tokens_path: str,
    cwd: Path | None,
) -> TokenSource:
    if file_path is not None:
        return load_token_source(path=file_path)
    return load_token_source(ref=ref, tokens_path=tokens_path, cwd=cwd)


@app.command()
def diff(
    base: str = typer.Option(
        DEFAULT_BASE_REF,
        "--base",
        "-b",
        help="Base branch or commit.",
    ),
    head: str = typer.Option(
        DEFAULT_HEAD_REF,
        "--head",
        "-h",
        help="Head branch or commit.",
    ),
    base_file: Path | None = typer.Option(
        None,
        "--base-file",
        help="Read base tokens from a JSON file instead of a git ref.",
    ),
    head_file: Path | None = typer.Option(
        None,
        "--head-file",
        help="Read head tokens from a JSON file instead of a git ref.",
    ),
    tokens_path: str = typer.Option(
        DEFAULT_TOKENS_PATH,
        "--tokens-path",
        envvar=TOKENS_PATH_ENV_VAR,
        help=f"Token file path inside the repository. Can also be set via {TOKENS_PATH_ENV_VAR}.",
    ),
    cwd: Path | None = typer.Option(
        None,
        "--cwd",
        help="Repository directory used for git lookups.",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the Markdown diff report to this file.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable diff output.",
    ),
) -> None:
    """Compare design tokens between branches, commits or files."""
    base_source = _load_side(file_path=base_file, ref=base, tokens_path=tokens_path, cwd=cwd)
    head_source = _load_side(file_path=head_file, ref=head, tokens_path=tokens_path, cwd=cwd)

    warnings: list[str] = []
    for source in (base_source, head_source):
        if source.error is not None:
            warning = f"no tokens found in {source.label}: {source.error}"
            warnings.append(warning)
            if not json_output:
                _echo(f"warning: {warning}", err=True)

    if not json_output:
        _echo(f"comparing tokens: {base_source.label}...{head_source.label}")

    result = diff_token_trees(
        base_source.tree,
        head_source.tree,
        base_label=base_source.label,
        head_label=head_source.label,
    )

    report_path: str | None = None
    if output is not None:
        report = render_diff_report(result)
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(report, encoding="utf-8")
        except OSError as error:
            message = f"diff failed: {error}"
            if json_output:
                _echo_json(
                    {
                        "status": "error",
                        "exit_code": 1,
                        "message": message,
                        "report_path": str(output),
                        "warnings": warnings,
                    }
                )
            else:
                _echo(message, err=True)
            raise typer.Exit(code=1) from error
        report_path = str(output)

    if json_output:
        _echo_json(
            {
                **result.to_dict(),
                "status": "ok",
                "exit_code": 0,
                "message": "diff completed",
                "report_path": report_path,
                "sources": {
                    "base": base_source.to_dict(),
                    "head": head_source.to_dict(),
                },
                "warnings": warnings,
            }
        )
        return

    if report_path is not None:
        _echo(f"diff report saved to: {report_path}")
        _echo(render_change_summary(result))
        return

    _echo(render_diff_report(result))


def main() -> None:
    app()
