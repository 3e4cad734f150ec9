# dual.py
#
# Bidirectional map with anonymous sides
from dualmap.base import BaseDualMap


class DualMap(BaseDualMap):
    """Dual-entry map where keys and values are interchangeable.

    Lookups need no side: an element is searched on side 1 first and on
    side 2 after that, so both halves of a pair find each other::

      >>> dm = DualMap([('x', 'y')])
      >>> dm.get('x'), dm.get('y')
      ('y', 'x')

    Methods that read or write a whole side take an inverted flag to
    select side 2 instead of side 1.
    """

    def __init__(self, pairs=None, purge_stale=True, logger_name='dualmap'):
        BaseDualMap.__init__(self, purge_stale=purge_stale,
                             logger_name=logger_name)
        if pairs is not None:
            self._slots = self._put(0, pairs)._slots

    @staticmethod
    def _side(inverted):
        return 1 if inverted else 0

    @property
    def forward(self):
        return dict(self._slots[0])

    @property
    def reverse(self):
        return dict(self._slots[1])

    def put(self, pairs, inverted=False):
        """Insert or replace one or more pairs.

        :param pairs:    a 2-tuple or a sequence of 2-tuples
        :param inverted: pairs are (side 2, side 1) instead of
                         (side 1, side 2)
        :return:         a new DualMap
        """
        return self._put(self._side(inverted), pairs)

    def delete(self, keys):
        """Delete the pairs holding keys, whichever side they are on."""
        return self._delete(keys)

    def drop(self, keys):
        return self._delete(list(keys))

    def get(self, key, default=None):
        slot = self._locate(key)
        if slot is None:
            return default
        return self._get(slot, key)

    def fetch(self, key):
        return self._fetch(self._locate(key), key)

    def fetch_strict(self, key):
        return self._fetch_strict(self._locate(key), key)

    def __getitem__(self, key):
        return self.fetch_strict(key)

    def get_map(self, inverted=False):
        return dict(self._slots[self._side(inverted)])

    def keys(self, inverted=False):
        return list(self._slots[self._side(inverted)].keys())

    def values(self, inverted=False):
        return list(self._slots[self._side(inverted)].values())

    def items(self, inverted=False):
        return self.to_list(inverted)

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self.to_list())
