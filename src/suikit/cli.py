"""
suikit command line.

Commands:
- components: list the registered components
- classes: print the class attribute a component derives from JSON props
- render: print the HTML a component renders from JSON props
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.table import Table

from suikit.classes.compose import class_attr
from suikit.components.registry import COMPONENTS, create_component
from suikit.core.config import load_config
from suikit.core.errors import PropsError, SuikitError
from suikit.core.logging import configure_logging
from suikit.runtime.renderer import HtmlRenderer

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Semantic UI components: derive classes and render HTML from props",
    no_args_is_help=True,
)

console = Console()


def _get_version() -> str:
    from suikit import __version__

    return __version__


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"suikit {_get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version and exit"
        ),
    ] = False,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", envvar="SUIKIT_LOG_LEVEL", help="Logging level"),
    ] = None,
) -> None:
    """Semantic UI components: derive classes and render HTML from props."""
    configure_logging(log_level)


def _parse_props(props: str | None) -> dict[str, Any]:
    if not props:
        return {}
    try:
        data = json.loads(props)
    except json.JSONDecodeError as e:
        raise PropsError(f"props are not valid JSON: {e.msg}", source="--props") from e
    if not isinstance(data, dict):
        raise PropsError("props must be a JSON object", source="--props")
    return data


def _fail(error: SuikitError) -> typer.Exit:
    typer.echo(f"Error: {error}", err=True)
    return typer.Exit(code=1)


PropsOption = Annotated[
    str | None,
    typer.Option("--props", "-p", help='Props as a JSON object, e.g. \'{"primary": true}\''),
]


@app.command("components")
def list_components() -> None:
    """List the registered components."""
    table = Table(title="Components")
    table.add_column("Name", style="cyan")
    table.add_column("Props")
    table.add_column("Root element")

    for name, cls in sorted(COMPONENTS.items()):
        root = cls.props_type.model_fields["root"].default
        table.add_row(name, cls.props_type.__name__, root)

    console.print(table)


@app.command("classes")
def classes_command(
    component: Annotated[str, typer.Argument(help="Component name, e.g. button")],
    props: PropsOption = None,
) -> None:
    """Print the class attribute of the component's root element."""
    try:
        instance = create_component(component, _parse_props(props))
    except SuikitError as e:
        raise _fail(e) from e

    typer.echo(class_attr(instance.classes) or "")


@app.command("render")
def render_command(
    component: Annotated[str, typer.Argument(help="Component name, e.g. button")],
    props: PropsOption = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to suikit.toml"),
    ] = None,
) -> None:
    """Render the component to HTML."""
    try:
        config = load_config(config_path)
        instance = create_component(component, _parse_props(props), config)
        html = HtmlRenderer(config.render).render(instance.view())
    except SuikitError as e:
        raise _fail(e) from e

    logger.debug("Rendered %s (%d chars)", component, len(html))
    typer.echo(html)


def main() -> None:
    """Entry point for the suikit command."""
    app()


if __name__ == "__main__":
    main()
