"""
[ About ]
---------

chronotuple is a small set of calendar value types based on the built-in
Python &tuple: dates, months, times of day, durations, and date-times.
Every value is immutable and arithmetic always produces a new instance.

Calendar Support:

	- Proleptic Gregorian, 0000-01-01 through 9999-12-31.

There are no time zones and no sub-second precision. chronotuple's APIs are
*not* compatible with the standard library's datetime module.

The surface functionality is provided by &.library:

#!/pl/python
	from chronotuple import library as libcalendar

[ Dates and Months ]
--------------------

Dates are validated on construction; arithmetic saturates at the bounds of the
calendar instead of failing.

#!/pl/python
	d = libcalendar.Date(2000, 1, 31)
	assert d.add_months(1) == libcalendar.Date(2000, 2, 29)
	assert libcalendar.Date.max_value().next_date() == libcalendar.Date.max_value()

Months are dates without days.

#!/pl/python
	m = libcalendar.Month.from_date(d)
	assert str(m.next_month()) == "2000-02"

[ Times and Durations ]
-----------------------

Times of day wrap into the 24-hour cycle; durations carry into unbounded hours.

#!/pl/python
	assert str(libcalendar.TimeOfDay(25, 90, 90)) == "02:31:30"
	assert str(libcalendar.Duration(0, 90, 90)) == "1:31:30"

[ Strings ]
-----------

Every type has a canonical string produced by &str and accepted by its `parse`
class method, and readable strings for display.

#!/pl/python
	dt = libcalendar.DateTime.parse("2000-05-10@08:30:00")
	assert dt.to_readable_string() == "10 May 2000 08:30:00"
"""
