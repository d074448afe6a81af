"""
# Format and parse calendar strings.

# Primarily this module exposes two functions: &parser and &formatter.
# Formatters take the fields of a value and produce its string; parsers take
# a string and a constructor and produce the constructed value.

# Each kind of value has a canonical format used for storage, a readable
# format for display, and, for dates, months, and date-times, a legacy
# format without separators that is accepted by the parsers.

# Parsing can fail in two ways. When the string does not match any accepted
# pattern, &.core.ParseError is raised. When the string matches but the fields
# it describes are rejected by the constructor, &.core.IntegrityError is raised
# with the constructor's error as its cause.
"""
import re

from . import core
from . import gregorian

models = {
	'date': "{0:04}-{1:02}-{2:02}",
	'date-legacy': "{0:04}{1:02}{2:02}",
	'date-readable': "{2} {month} {0:04}",
	'month': "{0:04}-{1:02}",
	'month-legacy': "{0:04}{1:02}",
	'month-readable': "{month} {0:04}",
	'timeofday': "{0:02}:{1:02}:{2:02}",
	'timeofday-readable': "{0:02}:{1:02}",
	'duration': "{0}:{1:02}:{2:02}",
	'duration-readable': "{0}:{1:02}",
	'datetime': "{date}@{time}",
	'datetime-legacy': "{date}@{time}",
	'datetime-readable': "{date} {time}",
}

#: Sample strings used to describe the expected format in errors.
examples = {
	'date': "2018-11-02",
	'month': "2018-11",
	'timeofday': "08:30:00",
	'duration': "35:30:00",
	'datetime': "2018-11-02@08:30:00",
}

patterns = {
	'date': re.compile(r'(\d{4})-(\d{2})-(\d{2})', re.ASCII),
	'date-legacy': re.compile(r'(\d{4})(\d{2})(\d{2})', re.ASCII),
	'month': re.compile(r'(\d{4})-(\d{2})', re.ASCII),
	'month-legacy': re.compile(r'(\d{4})(\d{2})', re.ASCII),
	'timeofday': re.compile(r'(\d{2}):(\d{2}):(\d{2})', re.ASCII),
	'duration': re.compile(r'(\d+):(\d{2}):(\d{2})', re.ASCII),
	'datetime': re.compile(r'(\d{4}-\d{2}-\d{2})@(\d{2}:\d{2}:\d{2})', re.ASCII),
	'datetime-legacy': re.compile(r'(\d{8})@(\d{2}:\d{2}:\d{2})', re.ASCII),
}

#: The formats accepted when parsing a kind of value, in order of preference.
accepted = {
	'date': ('date', 'date-legacy'),
	'month': ('month', 'month-legacy'),
	'timeofday': ('timeofday',),
	'duration': ('duration',),
	'datetime': ('datetime', 'datetime-legacy'),
}

aliases = {
	'time': 'timeofday',
}

def _integers(groups, int=int):
	return tuple(map(int, groups))

transformers = {
	'date': _integers,
	'month': _integers,
	'timeofday': _integers,
	'duration': _integers,
	# Components are parsed by their own types.
	'datetime': tuple,
}

def _parse(kind, formats):
	example = examples[kind]
	matchers = [patterns[x].fullmatch for x in formats]

	def EXCEPTION(src, isinstance=isinstance, str=str):
		if isinstance(src, str):
			for match in matchers:
				m = match(src)
				if m is not None:
					return (src, m.groups())
		raise core.ParseError(src, format=kind, example=example)
	return EXCEPTION

def _structure(kind, fun):
	example = examples[kind]

	def EXCEPTION(state):
		src, groups = state
		try:
			return (src, fun(groups))
		except ValueError as err:
			raise core.ParseError(src, format=kind, example=example) from err
	return EXCEPTION

def _integrity(kind):
	example = examples[kind]

	def EXCEPTION(state, construct):
		src, fields = state
		try:
			return construct(*fields)
		except (core.RangeError, core.FormatError) as err:
			raise core.IntegrityError(src, format=kind, example=example) from err
	return EXCEPTION

def parser(kind, _deref=aliases.get):
	"""
	# Given a kind of value, return the function that parses strings of any
	# accepted format into fields and gives them to a constructor.

	#!python
		parse = format.parser('date')
		assert parse("2000-06-10", lambda *x: x) == (2000, 6, 10)
	"""
	kind = _deref(kind, kind)
	def parser_composition(
		x, construct,
		integ = _integrity(kind),
		struct = _structure(kind, transformers[kind]),
		parse = _parse(kind, accepted[kind]),
	):
		return integ(struct(parse(x)), construct)
	return parser_composition

def _month_abbreviation(month, table=gregorian.month_abbreviations):
	if month < 1:
		raise IndexError("month index out of range: %r" %(month,))
	return table[month - 1].capitalize()

def format_date_readable(date, _fmt=models['date-readable'].format):
	y, m, d = date
	return _fmt(y, m, d, month=_month_abbreviation(m))

def format_month_readable(month, _fmt=models['month-readable'].format):
	y, m = month
	return _fmt(y, m, month=_month_abbreviation(m))

def format_datetime(fields, _date=models['date'].format, _time=models['timeofday'].format):
	date, time = fields
	return models['datetime'].format(date=_date(*date), time=_time(*time))

def format_datetime_legacy(fields, _date=models['date-legacy'].format, _time=models['timeofday'].format):
	date, time = fields
	return models['datetime-legacy'].format(date=_date(*date), time=_time(*time))

def format_datetime_readable(fields, _time=models['timeofday'].format):
	date, time = fields
	return models['datetime-readable'].format(date=format_date_readable(date), time=_time(*time))

def _fields(fmt):
	return (lambda fields: fmt(*fields))

formatters = {
	'date': _fields(models['date'].format),
	'date-legacy': _fields(models['date-legacy'].format),
	'date-readable': format_date_readable,
	'month': _fields(models['month'].format),
	'month-legacy': _fields(models['month-legacy'].format),
	'month-readable': format_month_readable,
	'timeofday': _fields(models['timeofday'].format),
	'timeofday-readable': _fields(models['timeofday-readable'].format),
	'duration': _fields(models['duration'].format),
	'duration-readable': _fields(models['duration-readable'].format),
	'datetime': format_datetime,
	'datetime-legacy': format_datetime_legacy,
	'datetime-readable': format_datetime_readable,
}

def formatter(fmt, _deref=aliases.get):
	"""
	# Given a format identifier, return the function that can be used to format
	# the fields of a value.
	"""
	return formatters[_deref(fmt, fmt)]
