"""
Gregorian calendar functions and data.

The calendar is proleptic and bounded to the years 0000 through 9999.
Months and days are one-based in the common (year, month, day) form;
day counts are zero-based offsets from 0000-01-01.
"""
import bisect
import itertools

#: number of centuries in a gregorian cycle.
centuries_in_cycle = 4

#: number of years in a century.
years_in_century = 100

#: number of years in a gregorian cycle.
years_in_cycle = years_in_century * centuries_in_cycle

#: earliest representable year.
minimum_year = 0

#: latest representable year.
maximum_year = 9999

#: english names of the months of the year.
month_names = (
	"january",
	"february",
	"march",
	"april",
	"may",
	"june",
	"july",
	"august",
	"september",
	"october",
	"november",
	"december",
)

#: number of months in a year.
months_in_year = len(month_names)

#: abbreviations for the english names of the months of the year.
month_abbreviations = (
	"jan", "feb", "mar",
	"apr", "may", "jun",
	"jul", "aug", "sep",
	"oct", "nov", "dec",
)

#: Definition of a year in terms of gregorian month-to-days.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Definition of a leap year in terms of gregorian month-to-days.
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:] # Feb29

#: Days preceding the first of each month; the final entry is the length of the year.
year_offsets = tuple(itertools.accumulate(itertools.chain((0,), calendar_year)))
leap_offsets = tuple(itertools.accumulate(itertools.chain((0,), calendar_leap)))

def year_is_leap(y):
	"""
	Given a gregorian calendar year, determine whether it is a leap year.
	"""
	if y % 4 == 0 and (y % 400 == 0 or not y % 100 == 0):
		return True
	return False

def last_day_in_month(month, year):
	"""
	The number of days in the one-based &month of the given &year.
	"""
	if month < 1:
		# Negative indexes would select from the end of the table.
		raise IndexError("month index out of range: %r" %(month,))

	if year_is_leap(year):
		return calendar_leap[month - 1]
	return calendar_year[month - 1]

def days_from_year(year):
	"""
	The number of days leading up to the first day of &year.
	"""
	return (year * 365) + ((year + 3) // 4) - ((year + 99) // 100) + ((year + 399) // 400)

#: Number of days in a gregorian cycle.
days_in_cycle = days_from_year(years_in_cycle)

def year_from_days(days, divmod=divmod):
	"""
	Identify the year containing the given zero-based day.
	"""
	cycles, days = divmod(days, days_in_cycle)

	# Estimate using the average year and correct the remaining error.
	year = (days * years_in_cycle) // days_in_cycle
	while days_from_year(year + 1) <= days:
		year += 1
	while days_from_year(year) > days:
		year -= 1

	return (cycles * years_in_cycle) + year

def date_from_days(days, bisect=bisect.bisect_right):
	"""
	Convert the given Earth-days into a Gregorian date in the common form:
	 (year, month, day).
	"""
	year = year_from_days(days)
	day_of_year = days - days_from_year(year)
	offsets = leap_offsets if year_is_leap(year) else year_offsets

	month = bisect(offsets, day_of_year)
	return (year, month, day_of_year - offsets[month - 1] + 1)

def days_from_date(date):
	"""
	Convert a Gregorian date in the common form, (year, month, day), to the number
	of days leading up to the date.
	"""
	year, month, day = date
	offsets = leap_offsets if year_is_leap(year) else year_offsets
	return days_from_year(year) + offsets[month - 1] + (day - 1)

def months_from_month(month):
	"""
	Convert a (year, month) pair into the number of months leading up to it.
	"""
	year, moy = month
	return (year * months_in_year) + (moy - 1)

def month_from_months(months):
	"""
	Convert a month count into the common (year, month) form.
	"""
	year, moy = divmod(months, months_in_year)
	return (year, moy + 1)

#: Zero-based day count of 9999-12-31.
maximum_days = days_from_year(maximum_year + 1) - 1

#: Month count of December 9999.
maximum_months = months_from_month((maximum_year, months_in_year))
