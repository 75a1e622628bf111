"""Typer command that scaffolds a new rule file."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from rulegen.cases import TestCase, any_filename, load_cases
from rulegen.errors import CaseFileError, InvalidIdentifier, TemplateRenderError
from rulegen.kinds import parse_rule_kind
from rulegen.naming import RuleName
from rulegen.renderer import create_rule_renderer
from rulegen.utils import resolve_path

from .app import app, logger
from .common import ConfigOption, KindOption, load_app_config


@app.command("new")
def new_command(
    rule_name: str = typer.Argument(..., help="Rule name, e.g. no-foo."),
    config: Optional[Path] = ConfigOption,
    kind: Optional[str] = KindOption,
    pass_codes: Optional[List[str]] = typer.Option(
        None,
        "--pass",
        help="Code that the rule must accept. Repeat for several cases.",
    ),
    fail_codes: Optional[List[str]] = typer.Option(
        None,
        "--fail",
        help="Code that the rule must report. Repeat for several cases.",
    ),
    cases: Optional[Path] = typer.Option(
        None,
        "--cases",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        path_type=Path,
        help="JSON file with 'pass' and 'fail' case lists.",
    ),
    has_filename: bool = typer.Option(
        False,
        "--has-filename",
        help="Import PathBuf in the test body. Implied when a case sets a filename.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the rule to this path instead of stdout.",
        path_type=Path,
    ),
    write: bool = typer.Option(
        False,
        "--write",
        help="Write the rule into the configured rules directory.",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        help="Overwrite an existing rule file.",
    ),
) -> None:
    """Render a new lint rule and its test stub."""

    if output is not None and write:
        raise typer.BadParameter("Use either --output or --write, not both.")

    try:
        config_obj, base_path = load_app_config(config)
    except (TypeError, ValueError) as exc:
        logger.error("Invalid configuration: %s", exc)
        raise typer.Exit(code=1) from exc
    if config is not None:
        logger.info("Loaded configuration from %s", config)

    try:
        name = RuleName.parse(rule_name)
    except InvalidIdentifier as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=1) from exc

    rule_kind = parse_rule_kind(kind or config_obj.rule.kind)

    pass_cases: list[TestCase] = [TestCase(code=code) for code in pass_codes or []]
    fail_cases: list[TestCase] = [TestCase(code=code) for code in fail_codes or []]
    if cases is not None:
        try:
            file_pass, file_fail = load_cases(cases, encoding=config_obj.template.encoding)
        except CaseFileError as exc:
            logger.error("%s", exc)
            raise typer.Exit(code=1) from exc
        pass_cases.extend(file_pass)
        fail_cases.extend(file_fail)

    needs_filename = has_filename or any_filename(pass_cases, fail_cases)

    try:
        renderer = create_rule_renderer(
            config_obj.template,
            config_obj.rule,
            base_dir=base_path if config is not None else None,
        )
        source = renderer.render(
            name,
            has_filename=needs_filename,
            pass_cases=pass_cases,
            fail_cases=fail_cases,
        )
    except (FileNotFoundError, TemplateRenderError) as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=1) from exc

    if output is None and not write:
        typer.echo(source, nl=False)
        return

    if output is not None:
        target = resolve_path(Path.cwd(), output)
    else:
        target = config_obj.output.resolve_rule_path(rule_kind, name, base_path)

    if target.exists() and not (force or config_obj.output.overwrite):
        logger.error("Refusing to overwrite existing file %s (use --force)", target)
        raise typer.Exit(code=1)

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(source, encoding="utf-8")
    logger.info(
        "Wrote %s rule %s to %s",
        rule_kind.value,
        name.kebab,
        target,
    )
