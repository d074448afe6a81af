name = 'chronotuple'
abstract = 'Bounded calendar dates, months, times of day, and durations as tuples.'

version_info = (2, 1, 0)
version = '.'.join(map(str, version_info))
