from pathlib import Path
from typing import Any, Callable, Dict, Optional

import click
from rich.console import Console

from restricted_imports.config.repository import (
    RestrictionsConfigRepository,
    load_importees,
)
from restricted_imports.errors import RestrictedImportsError
from restricted_imports.logs import configure_logging
from restricted_imports.messages import make_diagnostic
from restricted_imports.models import Importee
from restricted_imports.restrictions.restriction_set import RestrictionSet
from restricted_imports.tui import RestrictionsConsoleUI


def _config_option() -> Callable:
    return click.option(
        "--config",
        "-c",
        "config_path",
        type=click.Path(path_type=Path, dir_okay=False),
        default=None,
        help="Restrictions config file (JSON or YAML).",
    )


def _load_restrictions(
    config_path: Optional[Path],
) -> tuple[RestrictionSet, Path]:
    repository = RestrictionsConfigRepository(path=config_path)
    try:
        path = repository.config_path
        return repository.load_restrictions(), path
    except RestrictedImportsError as exc:
        raise click.ClickException(str(exc))


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Report imports matching configured restrictions."""
    configure_logging(verbose=verbose)
    ctx.obj = {"verbose": verbose}


@cli.command(help="Check an importee feed against the configured restrictions.")
@click.argument("importees_path", type=click.Path(path_type=Path, dir_okay=False))
@_config_option()
@click.pass_obj
def check(obj: Dict[str, Any], importees_path: Path, config_path: Optional[Path]) -> None:
    ui = RestrictionsConsoleUI(Console())
    restrictions, path = _load_restrictions(config_path)

    try:
        importees = load_importees(importees_path)
    except RestrictedImportsError as exc:
        raise click.ClickException(str(exc))

    diagnostics = restrictions.check(importees)
    ui.render_check(diagnostics, checked=len(importees), config=str(path))

    if diagnostics:
        raise click.exceptions.Exit(1)


@cli.command(help="Check a single module name or file path.")
@click.argument("name")
@click.option("--file-path", default=None, help="Resolved absolute path of the module.")
@_config_option()
@click.pass_obj
def match(
    obj: Dict[str, Any],
    name: str,
    file_path: Optional[str],
    config_path: Optional[Path],
) -> None:
    ui = RestrictionsConsoleUI(Console())
    restrictions, _ = _load_restrictions(config_path)

    importee = Importee(name=name, file_path=file_path)
    restriction = restrictions.find_violation(importee)
    diagnostic = make_diagnostic(importee, restriction) if restriction else None
    ui.render_match(name, diagnostic)

    if diagnostic is not None:
        raise click.exceptions.Exit(1)


@cli.command(help="List configured restrictions and their patterns.")
@_config_option()
@click.pass_obj
def restrictions(obj: Dict[str, Any], config_path: Optional[Path]) -> None:
    ui = RestrictionsConsoleUI(Console())
    restriction_set, path = _load_restrictions(config_path)
    ui.render_restrictions(restriction_set, config=str(path))


def main() -> int:
    try:
        result = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    # click returns the exit code instead of raising when not standalone
    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
