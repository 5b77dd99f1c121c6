from pathlib import Path

import click
import toml

from countrytable.config import (
    ALLOWED_THEMES,
    CONFIG_FILE_PATH,
    CountryTableConfig,
    load_config,
    merge_config_with_cli_args,
)
from countrytable.log import configure_logging
from countrytable.ui.app import CountryTableApp


@click.group(invoke_without_command=True)
@click.pass_context
@click.option(
    "--endpoint-url",
    type=str,
    help="URL returning the full country list as a JSON array",
    default=None,
    envvar="COUNTRYTABLE_ENDPOINT_URL",
)
@click.option(
    "--timeout",
    type=float,
    help="Seconds to wait for the country list request",
    default=None,
)
@click.option(
    "--page-size",
    type=click.IntRange(min=1),
    help="Number of rows appended each time the table is scrolled to the bottom",
    default=None,
)
@click.option(
    "--scroll-debounce-ms",
    type=click.IntRange(min=0),
    help="Quiet period in milliseconds before a burst of scroll events is evaluated",
    default=None,
)
@click.option(
    "--theme",
    type=click.Choice(ALLOWED_THEMES, case_sensitive=False),
    help="Theme to use for the UI",
    default=None,
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=str),
    help="File to write logs to (default: ~/.countrytable.log)",
    default=None,
)
@click.option(
    "--config",
    type=click.Path(exists=True, readable=True, path_type=str),
    help="Path to configuration file (default: ~/.countrytable.config)",
    default=None,
)
def cli(
    ctx,
    endpoint_url: str | None = None,
    timeout: float | None = None,
    page_size: int | None = None,
    scroll_debounce_ms: int | None = None,
    theme: str | None = None,
    log_file: str | None = None,
    config: str | None = None,
):
    """Country table - search, sort and scroll through the world's countries."""
    if ctx.invoked_subcommand is None:
        main(endpoint_url, timeout, page_size, scroll_debounce_ms, theme, log_file, config)


@cli.command()
@click.option(
    "--config",
    type=click.Path(path_type=str),
    help="Path to configuration file (default: ~/.countrytable.config)",
    default=None,
)
def configure(config: str | None = None):
    """Interactive configuration setup for countrytable"""
    config_path = CONFIG_FILE_PATH
    if config:
        config_path = Path(config)

    click.echo("Country Table Configuration Setup")
    click.echo("=" * 33)
    click.echo("Leave fields empty to keep the defaults.")
    click.echo()

    existing_config = {}
    if config_path.exists():
        try:
            with open(config_path, "r") as f:
                existing_config = toml.load(f)
            click.echo(f"Found existing configuration at {config_path}")
            click.echo()
        except (OSError, toml.TomlDecodeError) as e:
            click.echo(f"Ignoring unreadable configuration at {config_path}: {e}")

    defaults = CountryTableConfig.__dataclass_fields__
    config = {}

    click.echo("Data Source:")
    click.echo("-" * 12)

    current = existing_config.get("endpoint_url", defaults["endpoint_url"].default)
    config["endpoint_url"] = click.prompt("Endpoint URL", default=current, type=str).strip()

    current = existing_config.get("timeout", defaults["timeout"].default)
    config["timeout"] = click.prompt("Request timeout (seconds)", default=current, type=float)

    click.echo()
    click.echo("Table:")
    click.echo("-" * 6)

    current = existing_config.get("page_size", defaults["page_size"].default)
    config["page_size"] = click.prompt("Rows per page", default=current, type=click.IntRange(min=1))

    current = existing_config.get("scroll_debounce_ms", defaults["scroll_debounce_ms"].default)
    config["scroll_debounce_ms"] = click.prompt(
        "Scroll debounce (milliseconds)", default=current, type=click.IntRange(min=0)
    )

    click.echo()
    click.echo("Theme Configuration:")
    click.echo("-" * 20)

    current_theme = existing_config.get("theme", defaults["theme"].default)
    click.echo("Available themes:")
    for i, theme in enumerate(ALLOWED_THEMES, 1):
        marker = " (current)" if theme == current_theme else ""
        click.echo(f"  {i}. {theme}{marker}")

    theme_choice = click.prompt(
        f"Select theme (1-{len(ALLOWED_THEMES)})",
        default=ALLOWED_THEMES.index(current_theme) + 1 if current_theme in ALLOWED_THEMES else 1,
        type=click.IntRange(1, len(ALLOWED_THEMES)),
    )
    config["theme"] = ALLOWED_THEMES[theme_choice - 1]

    for key in ("log_file", "log_level"):
        if key in existing_config:
            config[key] = existing_config[key]

    click.echo()
    try:
        CountryTableConfig(**config)
        click.echo("✓ Configuration validated successfully!")
    except ValueError as e:
        click.echo(f"✗ Configuration validation failed: {e}")
        if not click.confirm("Save configuration anyway?"):
            click.echo("Configuration cancelled.")
            return

    click.echo()
    try:
        with open(config_path, "w") as f:
            toml.dump(config, f)
        click.echo(f"✓ Configuration saved to {config_path}")
    except OSError as e:
        click.echo(f"✗ Failed to save configuration: {e}")


def main(
    endpoint_url: str | None = None,
    timeout: float | None = None,
    page_size: int | None = None,
    scroll_debounce_ms: int | None = None,
    theme: str | None = None,
    log_file: str | None = None,
    config: str | None = None,
):
    """Country table - search, sort and scroll through the world's countries."""
    try:
        config_obj = load_config(config)

        # CLI takes priority over the file
        config_obj = merge_config_with_cli_args(
            config_obj,
            endpoint_url=endpoint_url,
            timeout=timeout,
            page_size=page_size,
            scroll_debounce_ms=scroll_debounce_ms,
            theme=theme.lower() if theme else None,
            log_file=log_file,
        )
    except ValueError as e:
        raise click.ClickException(str(e))

    configure_logging(config_obj.log_file, config_obj.log_level)

    app = CountryTableApp(
        endpoint_url=config_obj.endpoint_url,
        timeout=config_obj.timeout,
        page_size=config_obj.page_size,
        scroll_debounce_ms=config_obj.scroll_debounce_ms,
        theme=config_obj.theme,
    )
    app.run()


if __name__ == "__main__":
    cli()
