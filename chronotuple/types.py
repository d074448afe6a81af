"""
# Calendar value types.

#!python
	d = types.Date(2000, 1, 31)
	assert d.add_months(1) == types.Date(2000, 2, 29)

	t = types.TimeOfDay(25, 90, 90)
	assert str(t) == "02:31:30"

	start = types.DateTime(types.Date(2000, 1, 1), types.TimeOfDay(0, 0, 0))
	stop = types.DateTime(types.Date(2000, 1, 2), types.TimeOfDay(1, 0, 0))
	assert str(types.Duration.between(start, stop)) == "25:00:00"

# [ Elements ]

# /Date/
	# A validated day between 0000-01-01 and 9999-12-31.
	# Arithmetic saturates at the bounds.
# /Month/
	# A validated month between Jan 0000 and Dec 9999.
# /TimeOfDay/
	# A position within a day. Construction wraps instead of failing.
# /Duration/
	# Elapsed time with unbounded hours. Never negative.
# /DateTime/
	# A &Date and &TimeOfDay pair ordered by date, then time.
"""
import operator

from . import core
from . import earth
from . import format
from . import gregorian
from . import system

__all__ = [
	'Date',
	'Month',
	'TimeOfDay',
	'Duration',
	'DateTime',
]

def _clamp(value, lower, upper):
	return max(lower, min(value, upper))

class Fields(tuple):
	"""
	# Base class for the value types.

	# Instances are immutable and only compare with instances of the same class;
	# a &TimeOfDay is never equal to a &Duration with the same fields.
	"""
	__slots__ = ()

	# Build comparison methods restricted to operands of the same class.
	for k in ('__eq__', '__ne__', '__lt__', '__le__', '__gt__', '__ge__'):
		def compare(self, operand, *, op=getattr(tuple, k)):
			if operand.__class__ is not self.__class__:
				return NotImplemented
			return op(self, operand)
		locals()[k] = compare
	del k, compare

	__hash__ = tuple.__hash__

	# Sequence concatenation and repetition are not meaningful for fields.
	def __add__(self, operand):
		return NotImplemented

	def __mul__(self, operand):
		return NotImplemented
	__rmul__ = __mul__

	def __getnewargs__(self):
		return tuple(self)

	def __repr__(self):
		return "%s.%s.parse(%r)" %(__name__, self.__class__.__name__, str(self))

class Date(Fields):
	"""
	# A day of the proleptic Gregorian calendar.

	# Construction rejects fields that do not identify a day between 0000-01-01
	# and 9999-12-31 by raising &core.InvalidDate. Arithmetic never fails;
	# results beyond the bounds are held at &min_value or &max_value.
	"""
	__slots__ = ()

	def __new__(Class, year, month, day, *, index=operator.index):
		fields = (index(year), index(month), index(day))
		year, month, day = fields

		if not gregorian.minimum_year <= year <= gregorian.maximum_year:
			raise core.InvalidDate(fields, "year must be between 0 and 9999")
		if not 1 <= month <= gregorian.months_in_year:
			raise core.InvalidDate(fields, "month must be between 1 and 12")

		last = gregorian.last_day_in_month(month, year)
		if not 1 <= day <= last:
			raise core.InvalidDate(fields, "day must be between 1 and %d" %(last,))

		return super().__new__(Class, fields)

	@property
	def year(self) -> int:
		return self[0]

	@property
	def month(self) -> int:
		"""
		# The one-based month of the year.
		"""
		return self[1]

	@property
	def day(self) -> int:
		return self[2]

	@classmethod
	def min_value(Class):
		return Class(gregorian.minimum_year, 1, 1)

	@classmethod
	def max_value(Class):
		return Class(gregorian.maximum_year, gregorian.months_in_year, 31)

	@classmethod
	def today(Class, *, snapshot=system.snapshot):
		"""
		# The current date according to the system's real clock.
		"""
		return Class(*snapshot()[:3])

	@classmethod
	def from_days(Class, days:int):
		"""
		# Construct the date identified by the one-based day count, &days.
		# 0000-01-01 is day one.

		# Raises &core.DayCountError when &days is outside of the representable range.
		"""
		limit = gregorian.maximum_days + 1
		if not 1 <= days <= limit:
			raise core.DayCountError((days,), "day count must be between 1 and %d" %(limit,))

		return Class(*gregorian.date_from_days(days - 1))

	def to_days(self) -> int:
		"""
		# The one-based count of days since 0000-01-01, inclusive.
		"""
		return gregorian.days_from_date(self) + 1

	def _elapse(self, days):
		total = _clamp(gregorian.days_from_date(self) + days, 0, gregorian.maximum_days)
		return self.__class__(*gregorian.date_from_days(total))

	def _within(self, month):
		# Align the day with the end of the month when it would overflow.
		y, m = month
		return self.__class__(y, m, min(self[2], gregorian.last_day_in_month(m, y)))

	def next_date(self):
		return self._elapse(1)

	def previous_date(self):
		return self._elapse(-1)

	def add_days(self, days:int):
		return self._elapse(days)

	def subtract_days(self, days:int):
		return self._elapse(-days)

	def add_months(self, months:int):
		"""
		# Move the date forward by &months. The day is reduced to the last day
		# of the resulting month when necessary: Jan 31 plus one month is the
		# last day of February.
		"""
		return self._within(Month.from_date(self).add_months(months))

	def subtract_months(self, months:int):
		return self._within(Month.from_date(self).subtract_months(months))

	def add_years(self, years:int):
		"""
		# Move the date forward by &years, holding at 9999.
		# February 29 becomes February 28 when the resulting year is not a leap year.
		"""
		return self._within(Month.from_date(self).add_years(years))

	def subtract_years(self, years:int):
		return self._within(Month.from_date(self).subtract_years(years))

	def __str__(self, *, _format=format.formatter('date')):
		return _format(self)

	def to_readable_string(self, *, _format=format.formatter('date-readable')) -> str:
		"""
		# The date in the form `10 Jun 2000`.
		"""
		return _format(self)

	@classmethod
	def parse(Class, text:str, *, _parse=format.parser('date')):
		"""
		# Construct the date from its `YYYY-MM-DD` or `YYYYMMDD` string.
		"""
		return _parse(text, Class)

class Month(Fields):
	"""
	# A month of a specific year between Jan 0000 and Dec 9999.
	"""
	__slots__ = ()

	def __new__(Class, year, month, *, index=operator.index):
		fields = (index(year), index(month))
		year, month = fields

		if not 1 <= month <= gregorian.months_in_year:
			raise core.InvalidMonth(fields, "month must be between 1 and 12; months are one-based")
		if not gregorian.minimum_year <= year <= gregorian.maximum_year:
			raise core.InvalidMonth(fields, "year must be between 0 and 9999")

		return super().__new__(Class, fields)

	@property
	def year(self) -> int:
		return self[0]

	@property
	def month(self) -> int:
		return self[1]

	@classmethod
	def this_month(Class, *, snapshot=system.snapshot):
		"""
		# The current month according to the system's real clock.
		"""
		return Class(*snapshot()[:2])

	@classmethod
	def from_date(Class, date):
		"""
		# The month containing &date.
		"""
		return Class(date[0], date[1])

	def _elapse(self, months):
		total = _clamp(gregorian.months_from_month(self) + months, 0, gregorian.maximum_months)
		return self.__class__(*gregorian.month_from_months(total))

	def next_month(self):
		return self._elapse(1)

	def previous_month(self):
		return self._elapse(-1)

	def add_months(self, months:int):
		return self._elapse(months)

	def subtract_months(self, months:int):
		return self._elapse(-months)

	def add_years(self, years:int):
		y = _clamp(self[0] + years, gregorian.minimum_year, gregorian.maximum_year)
		return self.__class__(y, self[1])

	def subtract_years(self, years:int):
		return self.add_years(-years)

	def __str__(self, *, _format=format.formatter('month')):
		return _format(self)

	def to_readable_string(self, *, _format=format.formatter('month-readable')) -> str:
		"""
		# The month in the form `Jan 2018`.
		"""
		return _format(self)

	@classmethod
	def parse(Class, text:str, *, _parse=format.parser('month')):
		return _parse(text, Class)

class Seconds(Fields):
	"""
	# Common implementation of &TimeOfDay and &Duration.

	# Fields are always derived from a total number of seconds; every
	# adjustment reconstructs the instance from its adjusted total.
	"""
	__slots__ = ()

	@classmethod
	def from_seconds(Class, seconds:int):
		return Class(0, 0, seconds)
	from_total_seconds = from_seconds

	def to_seconds(self) -> int:
		return earth.join_seconds(*self)

	def to_minutes(self) -> int:
		"""
		# The total number of whole minutes. Seconds are truncated.
		"""
		return self.to_seconds() // earth.seconds_in_minute

	def add_seconds(self, seconds:int):
		return self.from_seconds(self.to_seconds() + seconds)

	def subtract_seconds(self, seconds:int):
		return self.from_seconds(self.to_seconds() - seconds)

	def add_minutes(self, minutes:int):
		return self.add_seconds(minutes * earth.seconds_in_minute)

	def subtract_minutes(self, minutes:int):
		return self.subtract_seconds(minutes * earth.seconds_in_minute)

	def add_hours(self, hours:int):
		return self.add_seconds(hours * earth.seconds_in_hour)

	def subtract_hours(self, hours:int):
		return self.subtract_seconds(hours * earth.seconds_in_hour)

	def __add__(self, operand):
		if operand.__class__ is not self.__class__:
			return NotImplemented
		return self.from_seconds(self.to_seconds() + operand.to_seconds())

	def __sub__(self, operand):
		if operand.__class__ is not self.__class__:
			return NotImplemented
		return self.from_seconds(self.to_seconds() - operand.to_seconds())

class TimeOfDay(Seconds):
	"""
	# A moment within a 24-hour day.

	# Construction never fails. The total of the given fields is wrapped into the
	# day, so `TimeOfDay(25, 0, 0)` is `01:00:00` and `TimeOfDay(0, 0, -1)`
	# is `23:59:59`. Arithmetic wraps in the same way.
	"""
	__slots__ = ()

	def __new__(Class, hour=0, minute=0, second=0, *, index=operator.index):
		total = earth.join_seconds(index(hour), index(minute), index(second))
		return super().__new__(Class, earth.split_seconds(total % earth.seconds_in_day))

	@property
	def hour(self) -> int:
		return self[0]

	@property
	def minute(self) -> int:
		return self[1]

	@property
	def second(self) -> int:
		return self[2]

	@classmethod
	def now(Class, *, snapshot=system.snapshot):
		"""
		# The current time of day according to the system's real clock.
		"""
		return Class(*snapshot()[3:])

	def to_hhmm_string(self, *, _format=format.formatter('timeofday-readable')) -> str:
		return _format(self)

	def __str__(self, *, _format=format.formatter('timeofday')):
		return _format(self)

	@classmethod
	def parse(Class, text:str, *, _parse=format.parser('timeofday')):
		"""
		# Construct the time of day from its `HH:MM:SS` string.
		# Overflowing fields are wrapped as they are by the constructor.
		"""
		return _parse(text, Class)

class Duration(Seconds):
	"""
	# Elapsed time in hours, minutes, and seconds.

	# Minutes and seconds carry into hours, which are not bounded.
	# Totals below zero, including subtraction results, are held at zero.
	"""
	__slots__ = ()

	def __new__(Class, hours=0, minutes=0, seconds=0, *, index=operator.index):
		total = earth.join_seconds(index(hours), index(minutes), index(seconds))
		return super().__new__(Class, earth.split_seconds(max(0, total)))

	@property
	def hours(self) -> int:
		return self[0]

	@property
	def minutes(self) -> int:
		return self[1]

	@property
	def seconds(self) -> int:
		return self[2]

	@classmethod
	def from_time(Class, time:TimeOfDay):
		"""
		# The duration since midnight of the given &time.
		"""
		return Class.from_seconds(time.to_seconds())

	@classmethod
	def between(Class, former, latter):
		"""
		# The elapsed time between two &DateTime instances regardless of their order.
		"""
		if former == latter:
			return Class()

		smaller, greater = min(former, latter), max(former, latter)
		days = greater.date.to_days() - smaller.date.to_days()
		earlier = Class.from_time(smaller.time)
		later = Class.from_time(greater.time)

		if days == 0:
			return later - earlier

		# Remainder of the first day, the whole days between, and the part of the last.
		day = Class(earth.hours_in_day)
		return (later + day) - earlier + Class(earth.hours_in_day * (days - 1))

	def to_hhmm_string(self, *, _format=format.formatter('duration-readable')) -> str:
		"""
		# The duration in the form `H:MM`; hours are not padded.
		"""
		return _format(self)
	to_hours_and_minutes_string = to_hhmm_string

	def __str__(self, *, _format=format.formatter('duration')):
		return _format(self)

	@classmethod
	def parse(Class, text:str, *, _parse=format.parser('duration')):
		return _parse(text, Class)

class DateTime(Fields):
	"""
	# A &Date and &TimeOfDay pair.

	# Ordered by date first and by time when the dates are equal.
	"""
	__slots__ = ()

	def __new__(Class, date, time):
		if not isinstance(date, Date):
			raise TypeError("date must be a Date instance, not %r" %(date.__class__.__name__,))
		if not isinstance(time, TimeOfDay):
			raise TypeError("time must be a TimeOfDay instance, not %r" %(time.__class__.__name__,))
		return super().__new__(Class, (date, time))

	@property
	def date(self) -> Date:
		return self[0]

	@property
	def time(self) -> TimeOfDay:
		return self[1]

	@classmethod
	def now(Class, *, snapshot=system.snapshot):
		"""
		# The current date and time according to a single reading of the system's real clock.
		"""
		y, m, d, *hms = snapshot()
		return Class(Date(y, m, d), TimeOfDay(*hms))

	def to_readable_string(self, *, _format=format.formatter('datetime-readable')) -> str:
		"""
		# The date and time in the form `2 Oct 2018 08:30:00`.
		"""
		return _format(self)

	def __str__(self, *, _format=format.formatter('datetime')):
		return _format(self)

	@classmethod
	def parse(Class, text:str, *, _parse=format.parser('datetime')):
		"""
		# Construct the instance from its `YYYY-MM-DD@HH:MM:SS` or
		# `YYYYMMDD@HH:MM:SS` string.
		"""
		return _parse(text, (lambda date, time: Class(Date.parse(date), TimeOfDay.parse(time))))
