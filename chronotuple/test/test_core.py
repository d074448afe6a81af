from .. import core

def test_hierarchy():
	for Class in (core.InvalidDate, core.InvalidMonth, core.DayCountError):
		assert issubclass(Class, core.RangeError)
		assert issubclass(Class, ValueError)
		assert issubclass(Class, core.Error)

	for Class in (core.ParseError, core.IntegrityError):
		assert issubclass(Class, core.FormatError)
		assert issubclass(Class, ValueError)
		assert issubclass(Class, core.Error)

	assert not issubclass(core.FormatError, core.RangeError)

def test_range_error_message():
	err = core.InvalidDate((2000, 6, 31), "day must be between 1 and 30")
	assert err.fields == (2000, 6, 31)
	assert err.constraint == "day must be between 1 and 30"
	assert str(err) == "invalid date (2000, 6, 31): day must be between 1 and 30"

def test_parse_error_message():
	err = core.ParseError("20OO-01", format='month', example="2018-11")
	assert str(err) == "unrecognized format: '20OO-01'; expects a string formatted like '2018-11'"

	err = core.ParseError(None, format='month')
	assert str(err) == "unrecognized format: None"

def test_integrity_error_message():
	try:
		try:
			raise core.InvalidMonth((2000, 15), "month must be between 1 and 12")
		except core.InvalidMonth as cause:
			raise core.IntegrityError("2000-15", format='month', example="2018-11") from cause
	except core.IntegrityError as err:
		msg = str(err)

	assert msg.startswith("invalid fields: '2000-15'")
	assert msg.endswith("(invalid month (2000, 15): month must be between 1 and 12)")
