import logging
import sys
from pathlib import Path

import click

from repo_compliance import __version__
from repo_compliance.config import OutputFormat, ReportAction, RunConfig, Verbosity
from repo_compliance.errors import PathResolutionError
from repo_compliance.exit_codes import ExitCode, exit_code_for_error
from repo_compliance.pipeline import Pipeline

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}

EPILOG = """\b
Exit codes:
  0  all checks pass, no critical warning
  1  one or more required checks failed
  2  a symlink escapes the repository (critical)
  3  path does not exist or is not a directory
  4  invalid command-line arguments
"""


class ComplianceCommand(click.Command):
    """Command that exits with INVALID_ARGS on usage errors.

    click exits with 2 on bad usage, which is reserved for security failures.
    """

    def main(
        self,
        args=None,
        prog_name=None,
        complete_var=None,
        standalone_mode=True,
        **extra,
    ):
        try:
            rv = super().main(
                args=args,
                prog_name=prog_name,
                complete_var=complete_var,
                standalone_mode=False,
                **extra,
            )
        except click.UsageError as exc:
            click.echo(f"Error: {exc.format_message()}", err=True)
            click.echo("Use --help for usage information.", err=True)
            sys.exit(ExitCode.INVALID_ARGS)
        except click.ClickException as exc:
            exc.show()
            sys.exit(exc.exit_code)
        except click.Abort:
            click.echo("Aborted!", err=True)
            sys.exit(1)
        sys.exit(int(rv or 0))


def _configure_logging(debug: bool) -> None:
    if not debug:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _build_config(
    path: Path | None,
    output_format: str,
    quiet: bool,
    verbose: bool,
    badge: bool,
    conformity: bool,
    output: Path | None,
    debug: bool,
) -> RunConfig:
    if quiet and verbose:
        raise click.UsageError("--quiet and --verbose cannot be used together")
    if badge and conformity:
        raise click.UsageError("--badge and --conformity cannot be used together")

    if quiet:
        verbosity = Verbosity.QUIET
    elif verbose:
        verbosity = Verbosity.VERBOSE
    else:
        verbosity = Verbosity.NORMAL

    if badge:
        action = ReportAction.BADGE
    elif conformity:
        action = ReportAction.CONFORMITY
    else:
        action = ReportAction.CHECK

    return RunConfig(
        path=path if path is not None else Path.cwd(),
        output_format=OutputFormat(output_format.lower()),
        verbosity=verbosity,
        action=action,
        output_file=output,
        debug=debug,
    )


@click.command(cls=ComplianceCommand, context_settings=CONTEXT_SETTINGS, epilog=EPILOG)
@click.argument("path", required=False, type=click.Path(path_type=Path))
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    show_default=True,
    help="Output format",
)
@click.option("--quiet", "-q", is_flag=True, help="Show category totals only")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Show check details, symlink targets and the exit code",
)
@click.option("--badge", is_flag=True, help="Print a badge for the achieved tier")
@click.option(
    "--conformity", is_flag=True, help="Print a Markdown conformity statement"
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write output to a file instead of stdout",
)
@click.option("--debug", is_flag=True, help="Log debug messages to stderr")
@click.version_option(__version__, "--version", "-V", prog_name="repo-compliance")
def main(
    path: Path | None,
    output_format: str,
    quiet: bool,
    verbose: bool,
    badge: bool,
    conformity: bool,
    output: Path | None,
    debug: bool,
) -> ExitCode:
    """Verify a repository against the Bronze compliance tier.

    PATH defaults to the current directory.
    """
    config = _build_config(
        path, output_format, quiet, verbose, badge, conformity, output, debug
    )
    _configure_logging(config.debug)

    pipeline = Pipeline(config)
    try:
        pipeline.validate_path()
    except PathResolutionError as exc:
        click.echo(f"Error: {exc}", err=True)
        return exit_code_for_error(exc)

    pipeline.run_checks()
    pipeline.run_scan()
    pipeline.aggregate()

    color = config.output_file is None and sys.stdout.isatty()
    text = pipeline.render(color=color)

    if config.output_file is not None:
        try:
            config.output_file.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise click.BadParameter(
                f"cannot write {config.output_file}: {exc.strerror}",
                param_hint="'--output'",
            ) from exc
        click.echo(f"Output written to {config.output_file}")
    else:
        click.echo(text, nl=False)

    return pipeline.terminate()


if __name__ == "__main__":
    main()
