# base.py
#
# Bidirectional map storage shared by DualMap and NamedDualMap
from copy import copy
import logging

from dualmap import tools

__docformat__ = 'epytext en'


class BaseDualMap(object):
    """Two dictionaries kept as exact inverses of each other.

    Slot 0 maps elements of the first side to their partners on the
    second side, slot 1 holds the same pairs the other way around.
    Instances are values: put and delete never touch the receiver but
    return a new map sharing nothing mutable with it.
    """

    def __init__(self, purge_stale=True, logger_name='dualmap'):
        """Constructor

        :param purge_stale: when rebinding a key or a value, remove the
                            pair it belonged to so both sides stay inverse
        :type purge_stale:  boolean
        :param logger_name: name of the logger debug output goes to
        :type logger_name:  string
        """
        self._slots = ({}, {})
        self.purge_stale = purge_stale
        self.logger_name = logger_name
        self.logger = logging.getLogger(logger_name)

    def _label(self, slot):
        return str(slot + 1)

    def _derive(self, slots):
        dual_map = copy(self)
        dual_map._slots = tuple(slots)
        return dual_map

    def _put(self, slot, pairs):
        slots = [dict(self._slots[0]), dict(self._slots[1])]
        for key, value in tools.iter_pairs(pairs):
            self._assign(slots, slot, key, value)
        return self._derive(slots)

    def _assign(self, slots, slot, key, value):
        near = slots[slot]
        far = slots[1 - slot]
        label = self._label(slot)

        if key in near and near[key] != value:
            old_value = near[key]
            if self.purge_stale:
                far.pop(old_value, None)
                self.logger.debug('[%s] Purge stale pair %r -> %r', label,
                                  key, old_value)
            else:
                self.logger.debug('[%s] Key %r rebound to %r, %r still points back',
                                  label, key, value, old_value)

        if value in far and far[value] != key:
            old_key = far[value]
            if self.purge_stale:
                near.pop(old_key, None)
                self.logger.debug('[%s] Purge stale pair %r -> %r', label,
                                  old_key, value)
            else:
                self.logger.debug('[%s] Value %r taken over by %r, %r still points to it',
                                  label, value, key, old_key)

        near[key] = value
        far[value] = key

    def _delete(self, keys, slot=None):
        """Remove the pairs owning keys.

        With no slot given every key is looked up on side 1 first and on
        side 2 after that.
        """
        slots = [dict(self._slots[0]), dict(self._slots[1])]
        changed = False
        for key in tools.iter_keys(keys):
            found = self._locate(key, slots) if slot is None else slot
            if found is None or key not in slots[found]:
                self.logger.debug('[%s] Ignore delete of absent key %r',
                                  '*' if found is None else self._label(found),
                                  key)
                continue
            value = slots[found].pop(key)
            slots[1 - found].pop(value, None)
            changed = True

        if not changed:
            return self
        return self._derive(slots)

    def _locate(self, key, slots=None):
        if slots is None:
            slots = self._slots
        if key in slots[0]:
            return 0
        if key in slots[1]:
            return 1
        return None

    def _get(self, slot, key, default=None):
        return self._slots[slot].get(key, default)

    def _fetch(self, slot, key):
        if slot is not None and key in self._slots[slot]:
            return (True, self._slots[slot][key])
        return (False, None)

    def _fetch_strict(self, slot, key):
        if slot is None or key not in self._slots[slot]:
            raise KeyError(key)
        return self._slots[slot][key]

    def _identity(self):
        return self._slots

    def count(self):
        """Number of pairs stored."""
        return len(self._slots[0])

    def __len__(self):
        return self.count()

    def has(self, element):
        """Check if element is stored on either side."""
        return self._locate(element) is not None

    def __contains__(self, element):
        return self.has(element)

    def member(self, pair):
        """Check if pair is stored, in either orientation."""
        key, value = pair
        for near in self._slots:
            if key in near and near[key] == value:
                return True
        return False

    def to_list(self, inverted=False):
        """List the pairs of side 1, or of side 2 when inverted."""
        return list(self._slots[1 if inverted else 0].items())

    def __iter__(self):
        return iter(self.to_list())

    def equal(self, other):
        return (type(self) is type(other) and
                self._identity() == other._identity())

    def __eq__(self, other):
        if not isinstance(other, BaseDualMap):
            return NotImplemented
        return self.equal(other)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((type(self).__name__, frozenset(self._slots[0].items())))

    def __str__(self):
        return str(self.to_list())
