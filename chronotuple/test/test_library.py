from .. import library
from .. import types

def test_exports():
	assert library.Date is types.Date
	assert library.Month is types.Month
	assert library.TimeOfDay is types.TimeOfDay
	assert library.Duration is types.Duration
	assert library.DateTime is types.DateTime

def test_leap_years():
	for year in (2000, 2012, 2016):
		assert library.is_leap_year(year)
	for year in (2100, 2018, 2013):
		assert not library.is_leap_year(year)

def test_last_day_in_month():
	assert library.last_day_in_month(2, 2000) == 29
	assert library.last_day_in_month(2, 2001) == 28
	assert library.last_day_in_month(4, 2001) == 30

def test_clock():
	snapshot = (lambda: (2018, 10, 2, 8, 30, 0))
	assert library.today(snapshot=snapshot) == library.Date(2018, 10, 2)
	assert str(library.now(snapshot=snapshot)) == "2018-10-02@08:30:00"

def test_between():
	a = library.DateTime.parse("2000-05-10@08:30:00")
	b = library.DateTime.parse("2000-05-11@08:30:00")
	assert library.between(a, b) == library.Duration(24, 0, 0)

def test_project():
	from .. import project
	assert project.name == 'chronotuple'
	assert project.version == '.'.join(map(str, project.version_info))
