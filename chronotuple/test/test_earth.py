from .. import earth

def test_constants():
	assert earth.seconds_in_hour == 3600
	assert earth.seconds_in_day == 86400

def test_split_seconds():
	assert earth.split_seconds(0) == (0, 0, 0)
	assert earth.split_seconds(9030) == (2, 30, 30)
	# hours are not bounded by the day
	assert earth.split_seconds(200 * 3600) == (200, 0, 0)

def test_join_seconds():
	assert earth.join_seconds(2, 30, 30) == 9030
	assert earth.join_seconds(-3, -116, -301) == -18061
	assert earth.join_seconds(0, 90, 90) == 5490
