"""Settings CLI commands for Pay Roster.

Manages settings.json - which roster file commands read.
"""

import click
from pathlib import Path

from payroster.sdk import (
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    get_settings_path,
    get_roster_path,
    load_roster,
    RosterFileError,
    RosterNotFoundError,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - roster: path to the roster YAML file
    """
    pass


def _effective_roster() -> str:
    try:
        path = get_roster_path()
    except RosterNotFoundError as e:
        return f"(error) {e.args[0].splitlines()[0]}"
    return str(path) if path else "bundled sample roster"


@settings.command("show")
def settings_show():
    """Show current settings and their values."""
    settings_path = get_settings_path()
    current = load_settings()

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
    else:
        click.echo("Current settings:")
        for key, value in current.items():
            click.echo(f"  {key}: {value}")

    click.echo()
    click.echo("Effective roster:")
    click.echo(f"  {_effective_roster()}")


@settings.command("roster")
@click.argument("path", required=False, type=click.Path())
@click.option("--clear", is_flag=True, help="Clear custom roster, revert to default")
def settings_roster(path, clear):
    """Set or clear the roster file.

    PATH is a roster YAML file. It is loaded once to check it before
    being saved.

    Examples:
        pay-roster settings roster ~/payroll/roster.yaml
        pay-roster settings roster --clear
    """
    if clear:
        current = load_settings()
        if "roster" in current:
            del current["roster"]
            save_settings(current)
            click.echo("Cleared roster setting.")
            click.echo(f"Roster is now: {_effective_roster()}")
        else:
            click.echo("roster was not set.")
        return

    if not path:
        # Show current value
        current_roster = get_setting("roster")
        if current_roster:
            click.echo(f"Current roster: {current_roster}")
        else:
            click.echo(f"No custom roster set. Using: {_effective_roster()}")
        return

    roster_path = Path(path).expanduser().resolve()

    try:
        roster = load_roster(roster_path)
    except RosterFileError as e:
        raise click.ClickException(str(e))

    set_setting("roster", str(roster_path))
    click.echo(f"Set roster: {roster_path} ({len(roster)} employees)")
    click.echo(f"Saved to: {get_settings_path()}")
