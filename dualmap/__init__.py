"""Dual-entry maps.

dualmap stores pairs of elements so that either element of a pair can
be used to look up the other one. There is no difference between key
and value: both are keys, each on its own side.

Here is an example of a map between host names and addresses::

  from dualmap import NamedDualMap

  hosts = NamedDualMap('hostname', 'ip', [('ns1', '192.168.0.2'),
                                          ('ns2', '192.168.0.3')])
  hosts.get('ip', '192.168.0.3')        # 'ns2'
  hosts = hosts.delete('hostname', 'ns1')
  print(hosts)                          # [('ns2', '192.168.0.3')]

All maps are values: put and delete return a new map and leave the
original alone.

This package contains four modules:

  - base: storage and queries shared by both maps
  - dual: DualMap, a map with anonymous sides
  - named: NamedDualMap, a map with named sides
  - tools: argument handling helpers
"""

from dualmap.dual import DualMap
from dualmap.named import NamedDualMap, SideError, UnknownSideError, \
    DuplicateSideError

__docformat__ = 'epytext en'

__author__ = 'Mauricio Santecchia'
__url__ = 'https://github.com/mailcmd/dual_map_ex'
__copyright__ = 'Copyright 2024 Mauricio Santecchia. All rights reserved.'
__version__ = '0.1.2'

__all__ = ['DualMap', 'NamedDualMap', 'SideError', 'UnknownSideError',
           'DuplicateSideError', 'base', 'dual', 'named', 'tools']
