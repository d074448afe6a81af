import warnings
import pytest

from .. import system

def fixed(seconds):
	return (lambda: seconds)

def test_elapsed():
	assert system.elapsed(fixed(1234.75)) == 1234

def test_elapsed_before_epoch():
	with pytest.warns(RuntimeWarning):
		assert system.elapsed(fixed(-1.0)) == 0

def test_elapsed_read_failure():
	def read():
		raise OSError("clock unavailable")

	with pytest.warns(RuntimeWarning):
		assert system.elapsed(read) == 0

def test_snapshot_epoch():
	assert system.snapshot(fixed(0)) == (1970, 1, 1, 0, 0, 0)

def test_snapshot_degraded():
	with pytest.warns(RuntimeWarning):
		assert system.snapshot(fixed(-86400)) == (1970, 1, 1, 0, 0, 0)

def test_snapshot():
	# 11016 days after the epoch is the leap day of 2000.
	assert system.snapshot(fixed(951782400 + 30600)) == (2000, 2, 29, 8, 30, 0)
	assert system.snapshot(fixed(86400 * 365 - 1)) == (1970, 12, 31, 23, 59, 59)

def test_snapshot_real_clock():
	with warnings.catch_warnings():
		warnings.simplefilter('error')
		y, m, d, hour, minute, second = system.snapshot()
	assert 0 <= y <= 9999
	assert 1 <= m <= 12
	assert 0 <= hour < 24

def test_snapshot_warning_location():
	# Degradation is reported at the caller of snapshot, not within the module.
	with pytest.warns(RuntimeWarning) as record:
		system.snapshot(fixed(-1))
	assert record[0].filename == __file__
