"""
# Typed system clock access.

# The system's real clock is read as the number of seconds elapsed since
# the unix epoch and converted into calendar fields using the day counts
# of &.gregorian. Time zones are not considered; the reading is UTC.
"""
import time
import warnings

from . import earth
from . import gregorian

#: Date of the unix epoch. The real clock is measured from its first second.
unix_epoch = (1970, 1, 1)

_epoch_days = gregorian.days_from_date(unix_epoch)

def _real_clock_read(time=time.time):
	return time()

def elapsed(read=_real_clock_read, stacklevel=2) -> int:
	"""
	# Whole seconds elapsed since the unix epoch according to &read.

	# Readings that fail or precede the epoch degrade to zero. A &RuntimeWarning
	# is issued in place of an exception.

	# [ Parameters ]
	# /read/
		# The clock to read. Defaults to the system's real clock.
	# /stacklevel/
		# Given to &warnings.warn so that degradation is reported at the caller.
	"""
	try:
		seconds = int(read())
	except (OSError, OverflowError, ValueError) as err:
		warnings.warn("system clock could not be read: %s" %(err,), RuntimeWarning, stacklevel=stacklevel)
		return 0

	if seconds < 0:
		warnings.warn("system clock reports a time before the epoch", RuntimeWarning, stacklevel=stacklevel)
		return 0

	return seconds

def snapshot(read=_real_clock_read) -> tuple:
	"""
	# The current reading of the real clock in the form
	# `(year, month, day, hour, minute, second)`.

	# Readings beyond 9999-12-31 are held at the last representable day.
	"""
	days, seconds = divmod(elapsed(read, stacklevel=3), earth.seconds_in_day)
	days = min(_epoch_days + days, gregorian.maximum_days)
	return gregorian.date_from_days(days) + earth.split_seconds(seconds)
