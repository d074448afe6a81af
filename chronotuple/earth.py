"""
Data regarding Earth-based units of time. (The earth day)
"""
#: Number of seconds contained in a `minute`.
seconds_in_minute = 60

#: Number of minutes contained in an `hour`.
minutes_in_hour = 60

#: Number of hours contained in an earth `day`.
hours_in_day = 24

#: Number of seconds contained in an `hour`.
seconds_in_hour = seconds_in_minute * minutes_in_hour

#: Number of seconds contained in an earth `day`.
seconds_in_day = seconds_in_hour * hours_in_day

def split_seconds(seconds, divmod=divmod):
	"""
	# Decompose a count of seconds into hours, minutes, and seconds.
	# Hours are not bounded by the day.
	"""
	hours, seconds = divmod(seconds, seconds_in_hour)
	minutes, seconds = divmod(seconds, seconds_in_minute)
	return (hours, minutes, seconds)

def join_seconds(hours, minutes, seconds):
	"""
	# Total seconds of the given fields. Fields may be negative or overflow.
	"""
	return seconds + (minutes * seconds_in_minute) + (hours * seconds_in_hour)
