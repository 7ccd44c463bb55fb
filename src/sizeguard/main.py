import typer

from sizeguard import __version__
from sizeguard.logging_config import logger, setup_logging
from sizeguard.cli import budget
from sizeguard.cli.config import CLIConfig

app = typer.Typer()


# Global CLI callback for flags that apply to all commands
@app.callback()
def global_options(
    human: bool = typer.Option(
        False,
        "--human",
        "-H",
        help="Enable human mode: pretty output with tables and colors (also via SIZEGUARD_HUMAN_MODE env var)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log per-artifact decisions to stderr"
    ),
):
    """
    SizeGuard: bundle size budgets for build output.

    Global flags apply to all commands.
    Machine mode is DEFAULT (JSON output, no formatting).
    Use --human/-H for pretty output.
    """
    CLIConfig.reset()
    if human:
        CLIConfig.set_machine_mode(False)

    if verbose:
        setup_logging(level="DEBUG", suppress_console=False, force=True)
    elif CLIConfig.is_machine_mode():
        # Keep stdout/stderr clean for CI parsing
        setup_logging(suppress_console=True, force=True)


app.command(name="check")(budget.check_cmd)
app.command(name="match")(budget.match_cmd)
app.command(name="show-config")(budget.show_config_cmd)


@app.command()
def version():
    """
    Print the installed version.
    """
    logger.debug(f"SizeGuard {__version__}")
    typer.echo(__version__)


if __name__ == "__main__":
    app()
