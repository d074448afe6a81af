"""
# Primary public module.

# Provides access to the value types, &Date, &Month, &TimeOfDay, &Duration, and &DateTime,
# and the calendar predicates used to validate them.
"""
from . import gregorian
from . import system

__shortname__ = 'libcalendar'

from .types import *
from .core import Error, RangeError, InvalidDate, InvalidMonth, DayCountError
from .core import FormatError, ParseError, IntegrityError

is_leap_year = gregorian.year_is_leap
last_day_in_month = gregorian.last_day_in_month

def today(*, snapshot=system.snapshot) -> Date:
	"""
	# The current date according to the system's real clock.
	"""
	return Date.today(snapshot=snapshot)

def now(*, snapshot=system.snapshot) -> DateTime:
	"""
	# The current date and time according to the system's real clock.
	"""
	return DateTime.now(snapshot=snapshot)

def between(former:DateTime, latter:DateTime) -> Duration:
	"""
	# The &Duration elapsed between two points regardless of their order.
	"""
	return Duration.between(former, latter)
