"""Unit tests for pay computation and text rendering.

Tests use in-memory records built from a fresh allocator - no files.
"""

import pytest

from payroster.sdk.employees import (
    EmployeeNumberAllocator,
    new_commissioned,
    new_hourly,
    new_salaried,
    set_hours,
    set_units_sold,
)
from payroster.sdk.pay import (
    commission_amount,
    compute_pay,
    describe,
    display_name,
    format_amount,
)


# Schedule used by the reference commission examples
THRESHOLDS = [0, 12, 25, 47, 70, 100]
RATES = [1, 3.3, 4.1, 4.7, 5.5, 7]


@pytest.fixture
def allocator():
    return EmployeeNumberAllocator()


def make_commissioned(allocator, units_sold=0, salary=48000, schedule=(THRESHOLDS, RATES)):
    emp = new_commissioned(allocator, "Chris", "Evans", salary, schedule)
    set_units_sold(emp, units_sold)
    return emp


class TestSalariedPay:
    """Salaried pay is salary / 26."""

    def test_salary_divided_by_26(self, allocator):
        emp = new_salaried(allocator, "John", "Doe", 52000)
        assert compute_pay(emp) == pytest.approx(2000.0)

    def test_zero_salary(self, allocator):
        emp = new_salaried(allocator, "John", "Doe", 0)
        assert compute_pay(emp) == 0

    def test_negative_salary_not_guarded(self, allocator):
        emp = new_salaried(allocator, "John", "Doe", -2600)
        assert compute_pay(emp) == pytest.approx(-100.0)

    def test_repeat_calls_same_result(self, allocator):
        emp = new_salaried(allocator, "John", "Doe", 61234.56)
        assert compute_pay(emp) == compute_pay(emp)


class TestHourlyPay:
    """Hourly pay is hours * rate."""

    def test_hours_times_rate(self, allocator):
        emp = new_hourly(allocator, "Jane", "Smith", 25)
        set_hours(emp, 40)
        assert compute_pay(emp) == pytest.approx(1000.0)

    def test_hours_default_to_zero(self, allocator):
        emp = new_hourly(allocator, "Jane", "Smith", 25)
        assert emp.hours == 0
        assert compute_pay(emp) == 0

    def test_fractional_hours(self, allocator):
        emp = new_hourly(allocator, "Jane", "Smith", 17.5)
        set_hours(emp, 37.5)
        assert compute_pay(emp) == pytest.approx(656.25)

    def test_negative_hours_not_guarded(self, allocator):
        emp = new_hourly(allocator, "Jane", "Smith", 20)
        set_hours(emp, -5)
        assert compute_pay(emp) == pytest.approx(-100.0)

    def test_hours_can_be_reset(self, allocator):
        emp = new_hourly(allocator, "Jane", "Smith", 20)
        set_hours(emp, 40)
        set_hours(emp, 10)
        assert compute_pay(emp) == pytest.approx(200.0)


class TestCommissionPay:
    """Commissioned pay is salary / 26 plus matched rate * units sold."""

    def test_reference_example(self, allocator):
        emp = make_commissioned(allocator, units_sold=30)
        assert compute_pay(emp) == pytest.approx(48000 / 26 + 4.1 * 30)

    def test_units_equal_to_threshold_match_inclusive(self, allocator):
        emp = make_commissioned(allocator, units_sold=25)
        assert compute_pay(emp) == pytest.approx(48000 / 26 + 4.1 * 25)

    def test_units_just_below_threshold_use_previous_rate(self, allocator):
        emp = make_commissioned(allocator, units_sold=24)
        assert compute_pay(emp) == pytest.approx(48000 / 26 + 3.3 * 24)

    def test_units_past_last_threshold_use_last_rate(self, allocator):
        emp = make_commissioned(allocator, units_sold=150)
        assert compute_pay(emp) == pytest.approx(48000 / 26 + 7 * 150)

    def test_zero_units_match_zero_threshold(self, allocator):
        emp = make_commissioned(allocator, units_sold=0)
        assert compute_pay(emp) == pytest.approx(48000 / 26)

    def test_units_below_every_threshold_earn_base_only(self, allocator):
        emp = make_commissioned(allocator, units_sold=5, schedule=([10, 100], [0.5, 1.2]))
        assert compute_pay(emp) == pytest.approx(48000 / 26)

    def test_empty_schedule_earns_base_only(self, allocator):
        emp = make_commissioned(allocator, units_sold=500, schedule=([], []))
        assert compute_pay(emp) == pytest.approx(48000 / 26)

    def test_negative_units_not_guarded(self, allocator):
        emp = make_commissioned(allocator, units_sold=-3, schedule=([-10, 0], [2, 5]))
        assert compute_pay(emp) == pytest.approx(48000 / 26 + 2 * -3)

    def test_commission_amount_excludes_base(self, allocator):
        emp = make_commissioned(allocator, units_sold=30)
        assert commission_amount(emp) == pytest.approx(4.1 * 30)


class TestFormatAmount:
    """Money formatting rounds half-up."""

    def test_grouped_no_decimals(self):
        assert format_amount(52000, 0) == "52,000"

    def test_grouped_two_decimals(self):
        assert format_amount(1234567.891, 2) == "1,234,567.89"

    def test_ungrouped(self):
        assert format_amount(1234.5, 2, grouped=False) == "1234.50"

    def test_half_rounds_up(self):
        assert format_amount(52000.5, 0) == "52,001"
        assert format_amount(0.125, 2) == "0.13"

    def test_negative(self):
        assert format_amount(-1500.256, 2) == "-1,500.26"

    def test_beyond_default_decimal_precision(self):
        assert format_amount(1e26, 2) == "100," + ",".join(["000"] * 8) + ".00"
        assert format_amount(1e30, 0) == "1," + ",".join(["000"] * 10)
        assert format_amount(1e30, 2, grouped=False) == "1" + "0" * 30 + ".00"

    @pytest.mark.parametrize("value,expected", [
        (float("inf"), "Infinity"),
        (float("-inf"), "-Infinity"),
        (float("nan"), "NaN"),
    ])
    def test_non_finite(self, value, expected):
        assert format_amount(value, 2) == expected
        assert format_amount(value, 0, grouped=False) == expected


class TestDescribe:
    """Display strings per employee kind; ids render in octal."""

    def test_salaried(self, allocator):
        emp = new_salaried(allocator, "John", "Doe", 52000)
        assert describe(emp) == "Salaried, Base: $52,000; Id:0 - John, Doe"

    def test_hourly(self, allocator):
        emp = new_hourly(allocator, "Jane", "Smith", 25)
        set_hours(emp, 40)
        assert describe(emp) == "Hourly: $25.00; Id:0 - Jane, Smith"

    def test_hourly_rate_not_grouped(self, allocator):
        emp = new_hourly(allocator, "Jane", "Smith", 1250.5)
        assert describe(emp) == "Hourly: $1250.50; Id:0 - Jane, Smith"

    def test_commissioned(self, allocator):
        emp = make_commissioned(allocator, units_sold=30)
        assert describe(emp) == "Commission: $123.00 Base: $48,000; Id:0 - Chris, Evans"

    def test_commissioned_grouped_commission(self, allocator):
        emp = make_commissioned(allocator, units_sold=200)
        assert describe(emp) == "Commission: $1,400.00 Base: $48,000; Id:0 - Chris, Evans"

    def test_employee_number_rendered_in_octal(self):
        allocator = EmployeeNumberAllocator(start=8)
        emp = new_salaried(allocator, "Alice", "Brown", 60000)
        assert emp.employee_number == 8
        assert describe(emp) == "Salaried, Base: $60,000; Id:10 - Alice, Brown"

    def test_octal_for_larger_numbers(self):
        allocator = EmployeeNumberAllocator(start=64)
        emp = new_hourly(allocator, "Tom", "Johnson", 30)
        assert describe(emp) == "Hourly: $30.00; Id:100 - Tom, Johnson"

    def test_huge_salary(self, allocator):
        emp = new_salaried(allocator, "A", "Big", 1e30)
        assert describe(emp) == "Salaried, Base: $1," + ",".join(["000"] * 10) + "; Id:0 - A, Big"

    def test_infinite_rate(self, allocator):
        emp = new_hourly(allocator, "Jane", "Smith", float("inf"))
        assert describe(emp) == "Hourly: $Infinity; Id:0 - Jane, Smith"

    def test_display_name(self, allocator):
        emp = new_hourly(allocator, "Tom", "Johnson", 30)
        assert display_name(emp) == "Johnson, Tom"
