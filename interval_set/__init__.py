from interval_set.id_range import IdRange, InvalidRange
from interval_set.ordered_interval_set import OrderedIntervalSet
