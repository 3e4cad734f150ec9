# tools.py
#
# Argument normalisation shared by the dual maps
from collections.abc import ItemsView, Iterator, Mapping

# containers that hold several keys rather than being a key themselves
KEY_SEQUENCE_TYPES = (list, set, frozenset, Iterator)


def is_pair(obj):
  return isinstance(obj, tuple) and len(obj) == 2


def iter_pairs(pairs):
  """Iterate over one pair or a sequence of pairs.

  A 2-tuple is a single pair. Lists, sets, iterators and items views
  are sequences of pairs and a mapping contributes its items.

  @param pairs: a pair or a sequence of pairs
  @raise TypeError: if a pair is not a 2-tuple
  """
  if isinstance(pairs, tuple):
    if not is_pair(pairs):
      raise TypeError('A pair has to be a 2-tuple, got %r' % (pairs,))
    yield pairs
    return

  if isinstance(pairs, Mapping):
    pairs = pairs.items()
  elif not isinstance(pairs, (list, set, frozenset, ItemsView, Iterator)):
    raise TypeError('Expected a pair or a sequence of pairs, got %r' % (pairs,))

  for pair in pairs:
    if not is_pair(pair):
      raise TypeError('A pair has to be a 2-tuple, got %r' % (pair,))
    yield pair


def iter_keys(keys):
  """Iterate over one key or a sequence of keys.

  Tuples and strings are keys in their own right; only lists, sets and
  iterators are unpacked.
  """
  if isinstance(keys, KEY_SEQUENCE_TYPES):
    for key in keys:
      yield key
  else:
    yield keys
