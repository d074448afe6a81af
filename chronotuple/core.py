"""
# Exception hierarchy for the calendar types.

# Construction errors are raised by &.types when fields violate a range
# constraint. Format errors are raised by &.format parsers; when the text
# is well formed but describes an invalid value, the &RangeError is chained
# as the cause of the &IntegrityError.
"""

class Error(Exception):
	"""
	# Base class of all errors raised by the package.
	"""

class RangeError(Error, ValueError):
	"""
	# The fields given to a constructor do not describe a representable value.

	# [ Properties ]
	# /fields/
		# The offending fields in the order given to the constructor.
	# /constraint/
		# Description of the constraint that was violated.
	"""

	subject = 'value'

	def __init__(self, fields, constraint):
		self.fields = tuple(fields)
		self.constraint = constraint
		super().__init__(fields, constraint)

	def __str__(self):
		return "invalid %s %r: %s" %(self.subject, self.fields, self.constraint)

class InvalidDate(RangeError):
	subject = 'date'

class InvalidMonth(RangeError):
	subject = 'month'

class DayCountError(RangeError):
	"""
	# A day count does not identify a date between 0000-01-01 and 9999-12-31.
	"""
	subject = 'day count'

class FormatError(Error, ValueError):
	"""
	# Base class for string conversion errors.

	# [ Properties ]
	# /source/
		# The object given to the parser.
	# /format/
		# Identifier of the format that was expected.
	# /example/
		# A sample string of the expected format.
	"""

	def __init__(self, source, format=None, example=None):
		self.source = source
		self.format = format
		self.example = example
		super().__init__(source, format, example)

	def __str__(self):
		msg = "%s: %r" %(self.description, self.source)
		if self.example is not None:
			msg += "; expects a string formatted like %r" %(self.example,)
		return msg

	description = 'invalid string'

class ParseError(FormatError):
	"""
	# The source does not match any of the accepted patterns.
	"""
	description = 'unrecognized format'

class IntegrityError(FormatError):
	"""
	# The source matched a pattern, but the fields it describes are invalid.
	"""
	description = 'invalid fields'

	def __str__(self):
		msg = super().__str__()
		if self.__cause__ is not None:
			msg += " (%s)" %(self.__cause__,)
		return msg
