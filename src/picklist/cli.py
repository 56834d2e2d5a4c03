"""CLI commands."""

from __future__ import annotations

import logging
import webbrowser
from typing import TYPE_CHECKING, Annotated, NoReturn

import typer
from rich.console import Console

from picklist.errors import SelectionCanceled, SelectionError

if TYPE_CHECKING:
    from picklist.config import Config
    from picklist.ui.rich_renderer import RichRenderer

app = typer.Typer(
    name="picklist",
    help="Pick items from a list in the terminal.",
    no_args_is_help=True,
)
console = Console()
# The list is drawn on stderr so stdout only carries the result
err_console = Console(stderr=True)

logger = logging.getLogger("picklist.cli")

LabelsArg = Annotated[list[str] | None, typer.Argument(help="Labels to choose from")]
OpenOpt = Annotated[
    str | None,
    typer.Option("--open", "-o", help="URL template opened with 'o', e.g. https://x/?q={}"),
]
LogFileOpt = Annotated[str | None, typer.Option("--log-file", help="Write logs here")]


def _get_config() -> Config:
    """Lazy import and load config."""
    from picklist.config import Config

    return Config.load()


def _setup_logging(cfg: Config, log_file: str | None) -> None:
    """Log to a file if one is configured; the terminal belongs to the list."""
    path = log_file or cfg.log_file
    if not path:
        return
    level = str(cfg.log_level).upper()
    if not isinstance(logging.getLevelName(level), int):
        _fail(f"Unknown log level '{cfg.log_level}'")
    try:
        handler = logging.FileHandler(path)
    except OSError as e:
        _fail(f"Cannot open log file {path}: {e}")
    handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
    root = logging.getLogger("picklist")
    root.addHandler(handler)
    root.setLevel(level)


def _open_url(template: str, value: str) -> None:
    url = template.format(value)
    logger.info("Opening %s", url)
    webbrowser.open(url)


def _renderer(cfg: Config) -> RichRenderer:
    from picklist.ui.rich_renderer import RichRenderer

    return RichRenderer.from_config(cfg, console=err_console)


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(1)


@app.command()
def one(
    labels: LabelsArg = None,
    open_url: OpenOpt = None,
    log_file: LogFileOpt = None,
):
    """Choose one label and print it."""
    from picklist.actions import ItemCallback
    from picklist.items import items_from_labels
    from picklist.single import SingleSelect

    cfg = _get_config()
    _setup_logging(cfg, log_file)

    select = SingleSelect(items_from_labels(labels or []), renderer=_renderer(cfg))
    if open_url:
        select.bind("o", ItemCallback(lambda value: _open_url(open_url, value)))

    try:
        value = select.run()
    except SelectionCanceled:
        console.print("Canceled")
        raise typer.Exit(1)
    except SelectionError as e:
        _fail(str(e))
    console.print(value, markup=False, highlight=False)


@app.command()
def many(
    labels: LabelsArg = None,
    open_url: OpenOpt = None,
    log_file: LogFileOpt = None,
):
    """Choose any number of labels and print them comma separated."""
    from picklist.actions import SelectionCallback
    from picklist.items import items_from_labels
    from picklist.multi import MultiSelect

    cfg = _get_config()
    _setup_logging(cfg, log_file)

    select = MultiSelect(items_from_labels(labels or []), renderer=_renderer(cfg))
    if open_url:

        def open_all(values: list[str]) -> None:
            for value in values:
                _open_url(open_url, value)

        select.bind("o", SelectionCallback(open_all))

    try:
        values = select.run()
    except SelectionCanceled:
        console.print("Canceled")
        raise typer.Exit(1)
    except SelectionError as e:
        _fail(str(e))
    console.print(", ".join(values), markup=False, highlight=False)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
