"""Rich renderer for roster listings."""

from rich import box
from rich.console import Console
from rich.table import Table

from payroster.sdk import EMPLOYEE_KINDS, describe


_KIND_STYLES = dict(zip(EMPLOYEE_KINDS, ("cyan", "green", "magenta")))


def render_roster(console: Console, employees, title: str = "Roster") -> None:
    """Render employees as a Rich table, in list order.

    Args:
        console: Rich Console instance
        employees: Employee records, already ordered
        title: Table title
    """
    table = Table(title=title, box=box.SIMPLE_HEAD)
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Type")
    table.add_column("Details", style="dim")

    for employee in employees:
        style = _KIND_STYLES.get(employee.kind, "")
        table.add_row(
            str(employee.employee_number),
            f"{employee.last_name}, {employee.first_name}",
            f"[{style}]{employee.kind}[/{style}]" if style else employee.kind,
            describe(employee),
        )

    console.print(table)
    console.print(f"[dim]{len(employees)} employee(s)[/dim]")
