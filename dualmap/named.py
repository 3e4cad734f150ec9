# named.py
#
# Bidirectional map with named sides
"""
A NamedDualMap stores pairs whose two elements live on sides with
caller-chosen names (master keys). Most operations take the side a key
belongs to::

  >>> hosts = NamedDualMap('hostname', 'ip')
  >>> hosts = hosts.put_ordered([('ns3', '192.168.0.4'),
  ...                            ('ns2', '192.168.0.3'),
  ...                            ('ns1', '192.168.0.2')])
  >>> hosts.get('hostname', 'ns3')
  '192.168.0.4'
  >>> hosts.get('ip', '192.168.0.4')
  'ns3'
  >>> hosts.delete('ip', '192.168.0.3').count()
  2

The order in which the names are declared matters: put_ordered and
to_list read pairs as (first side, second side).
"""
from dualmap.base import BaseDualMap

__docformat__ = 'epytext en'


class SideError(Exception):
    """Side name exceptions.

    :ivar msg:   Error message
    :type msg:   string
    :ivar side:  side name that caused the error
    :ivar names: the declared side names
    :type names: tuple
    """

    def __init__(self, msg=None, **data):
        Exception.__init__(self, msg)
        self.msg = msg
        self.side = data.get('side')
        self.names = data.get('names', ())

    def __str__(self):
        str = ''
        if self.names:
            str += '(%r, %r): ' % tuple(self.names)
        str += 'Side error'
        if self.msg:
            str += ': %s' % self.msg
        return str


class UnknownSideError(SideError, KeyError):
    """A side name that is not one of the declared names."""


class DuplicateSideError(SideError, ValueError):
    """Both sides declared with the same name."""


class NamedDualMap(BaseDualMap):
    """Dual-entry map with named sides.

    Every mutating method returns a new NamedDualMap; the instance it
    was called on is left untouched.
    """

    def __init__(self, name1, name2, pairs=None, purge_stale=True,
                 logger_name='dualmap'):
        """Constructor

        :param name1:       name of the first side
        :param name2:       name of the second side
        :param pairs:       pair or sequence of pairs in (name1, name2)
                            order to start with
        :param purge_stale: see L{BaseDualMap}
        :param logger_name: see L{BaseDualMap}
        """
        if name1 == name2:
            raise DuplicateSideError('both sides are named %r' % (name1,),
                                     side=name1, names=(name1, name2))
        BaseDualMap.__init__(self, purge_stale=purge_stale,
                             logger_name=logger_name)
        self._names = (name1, name2)
        if pairs is not None:
            self._slots = self._put(0, pairs)._slots

    @classmethod
    def fromnames(cls, names, pairs=None, **options):
        """Create a map from a (name1, name2) tuple."""
        name1, name2 = names
        return cls(name1, name2, pairs, **options)

    @property
    def names(self):
        return self._names

    def _slot(self, side):
        if side == self._names[0]:
            return 0
        if side == self._names[1]:
            return 1
        raise UnknownSideError('no side named %r' % (side,),
                               side=side, names=self._names)

    def _label(self, slot):
        return str(self._names[slot])

    def _identity(self):
        return (self._names, self._slots)

    def opposite(self, side):
        """Return the name of the other side."""
        return self._names[1 - self._slot(side)]

    def put(self, side, pairs):
        """Insert or replace one or more pairs.

        The first element of every pair is a key on side, the second
        one its partner on the opposite side. Pairs in a sequence are
        applied in order, so later pairs win.

        :param side:  side name the pair keys belong to
        :param pairs: a 2-tuple or a sequence of 2-tuples
        :return:      a new NamedDualMap
        """
        return self._put(self._slot(side), pairs)

    def put_ordered(self, *args):
        """Insert pairs given in declaration order.

        Takes either a pair, a sequence of pairs or the two elements of
        one pair as separate arguments.
        """
        if len(args) == 2:
            pairs = (args[0], args[1])
        elif len(args) == 1:
            pairs = args[0]
        else:
            raise TypeError('put_ordered() takes a pair, a sequence of pairs '
                            'or two values (%d given)' % len(args))
        return self._put(0, pairs)

    def delete(self, side, keys):
        """Delete the pairs found by looking up keys on side.

        Absent keys are ignored. A list, set or iterator deletes one pair
        per key.

        :return: a new NamedDualMap, or this one if nothing was removed
        """
        return self._delete(keys, self._slot(side))

    def drop(self, side, keys):
        return self._delete(list(keys), self._slot(side))

    def get(self, side, key, default=None):
        return self._get(self._slot(side), key, default)

    def fetch(self, side, key):
        """Look up key on side.

        :return: (True, value) if key is present, (False, None) if not
        """
        return self._fetch(self._slot(side), key)

    def fetch_strict(self, side, key):
        """Like fetch, but raise KeyError for a missing key."""
        return self._fetch_strict(self._slot(side), key)

    def __getitem__(self, item):
        side, key = item
        return self.fetch_strict(side, key)

    def get_map(self, side):
        """Return a copy of the dictionary behind side."""
        return dict(self._slots[self._slot(side)])

    def keys(self, side):
        return list(self._slots[self._slot(side)].keys())

    def values(self, side):
        return list(self._slots[self._slot(side)].values())

    def items(self, side):
        return list(self._slots[self._slot(side)].items())

    def __repr__(self):
        return '%s(%r, %r, %r)' % (type(self).__name__, self._names[0],
                                   self._names[1], self.to_list())
