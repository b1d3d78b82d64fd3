"""Pay Roster CLI - Command-line interface for employee pay records."""

import re

import click
from rich.console import Console

from payroster import __version__
from payroster.sdk import (
    get_roster_path,
    load_roster,
    sample_roster,
    EmployeeNotFoundError,
    RosterFileError,
    RosterNotFoundError,
    describe,
)

from .renderers.roster_renderer import render_roster
from .settings_commands import settings as settings_group


LAST_NAME_PATTERN = re.compile(r"^[A-Za-z-]+$")


def _open_roster(roster_path):
    """Load the roster named on the command line, configured, or bundled."""
    try:
        if roster_path:
            return load_roster(roster_path)
        configured = get_roster_path()
        if configured:
            return load_roster(configured)
        return sample_roster()
    except (RosterFileError, RosterNotFoundError) as e:
        raise click.ClickException(str(e))


def _parse_entries(ctx, param, values):
    """Parse repeated NUMBER=VALUE options into a dict."""
    convert = int if param.name == "units" else float
    entries = {}
    for value in values:
        number, sep, amount = value.partition("=")
        if not sep:
            raise click.BadParameter(f"Expected NUMBER=VALUE, got '{value}'")
        try:
            entries[int(number)] = convert(amount)
        except ValueError:
            raise click.BadParameter(f"Invalid entry '{value}'")
    return entries


@click.group()
@click.version_option(version=__version__, prog_name="pay-roster")
@click.option(
    "--roster", "roster_path",
    type=click.Path(dir_okay=False),
    help="Roster YAML file (default: configured roster, else bundled sample)",
)
@click.pass_context
def cli(ctx, roster_path):
    """Pay Roster - employee pay records, ordering and lookup.

    The roster is loaded from (in order):

    \b
    1. --roster PATH
    2. settings.json 'roster' key (set via 'pay-roster settings roster')
    3. ~/.config/pay-roster/roster.yaml
    4. The bundled sample roster
    """
    ctx.ensure_object(dict)
    ctx.obj["roster_path"] = roster_path


cli.add_command(settings_group)


@cli.command("list")
@click.option(
    "--by", "order",
    type=click.Choice(["number", "name"]),
    default="number",
    show_default=True,
    help="Sort key",
)
@click.pass_context
def list_employees(ctx, order):
    """List every employee, sorted by number or by name."""
    roster = _open_roster(ctx.obj["roster_path"])
    roster.sort(by_number=(order == "number"))
    render_roster(Console(), roster.employees, title=f"Roster by {order}")


@cli.command("search")
@click.argument("last_name")
@click.pass_context
def search(ctx, last_name):
    """Find employees by LAST_NAME (case-insensitive)."""
    if not LAST_NAME_PATTERN.match(last_name):
        raise click.BadParameter(
            f"'{last_name}' is not a valid last name (letters and hyphens only)",
            param_hint="LAST_NAME",
        )

    last_name = last_name.lower()
    roster = _open_roster(ctx.obj["roster_path"])
    found = roster.find_by_last_name(last_name)

    if not found:
        click.echo(f"No employees found with last name {last_name}")
        return

    click.echo(f"Employees with last name {last_name}:")
    for employee in found:
        click.echo(f"{employee.first_name} {employee.last_name} {employee.employee_number}")


@cli.command("show")
@click.argument("employee_number", type=click.IntRange(min=0))
@click.pass_context
def show(ctx, employee_number):
    """Show one employee by EMPLOYEE_NUMBER."""
    roster = _open_roster(ctx.obj["roster_path"])
    employee = roster.get(employee_number)

    if employee is None:
        click.echo(f"No employee found with ID {employee_number}")
        return

    click.echo(describe(employee))


@cli.command("run")
@click.option(
    "--hours", "hours", multiple=True, callback=_parse_entries,
    metavar="NUMBER=HOURS", help="Hours worked by an hourly employee (repeatable)",
)
@click.option(
    "--units", "units", multiple=True, callback=_parse_entries,
    metavar="NUMBER=UNITS", help="Units sold by a commissioned employee (repeatable)",
)
@click.pass_context
def run(ctx, hours, units):
    """Run payroll: enter hours and units, then list pay highest first.

    Employees without an entry keep the hours or units from the roster
    file (zero by default).

    \b
    Example:
        pay-roster run --hours 32=40 --hours 33=37.5 --units 0=120
    """
    roster = _open_roster(ctx.obj["roster_path"])

    try:
        roster.run_payroll(hours=hours, units=units, emit=click.echo)
    except (EmployeeNotFoundError, ValueError) as e:
        raise click.ClickException(str(e))

    click.echo("End of Payroll")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
