from datetime import date

from dateutil.relativedelta import relativedelta


def find_first(func, iterable, default=None):
    return next(filter(func, iterable), default)


def beginning_of_month(day: date) -> date:
    return day.replace(day=1)


def end_of_month(day: date) -> date:
    """
    Returns the last day of the month of the given date.
    Args:
        day (date): any day of the month.
    Returns:
        date: the last day of that month, leap years included.
    """
    return beginning_of_month(day) + relativedelta(months=1, days=-1)


def beginning_of_year(day: date) -> date:
    return day.replace(month=1, day=1)


def end_of_year(day: date) -> date:
    return beginning_of_year(day) + relativedelta(years=1, days=-1)
