#!/usr/bin/python
from dualmap import NamedDualMap
from netaddr import AddrFormatError
from netaddr import IPAddress
import logging
import sys

logging.basicConfig(level="DEBUG",
                    format="%(asctime)s [%(levelname)-8s] %(message)s")

SAMPLE = """\
# hostname  address
ns1         192.168.0.2
ns2         192.168.0.3
ns3         192.168.0.4
ns2         192.168.0.5
gw          fe80::1
"""


def read_hosts(lines):
    """Collect (hostname, address) pairs from hosts style lines.

    Lines starting with # are comments. A hostname seen twice keeps its
    last address.
    """
    pairs = []
    for (lineno, line) in enumerate(lines, 1):
        tokens = line.split('#', 1)[0].split()
        if not tokens:
            continue
        if len(tokens) != 2:
            print("line %d: expected hostname and address" % lineno)
            continue
        try:
            pairs.append((tokens[0], IPAddress(tokens[1])))
        except AddrFormatError as error:
            print("line %d: %s" % (lineno, error))
    return pairs


if len(sys.argv) > 1:
    with open(sys.argv[1]) as fd:
        hosts = NamedDualMap('hostname', 'ip', read_hosts(fd))
else:
    hosts = NamedDualMap('hostname', 'ip', read_hosts(SAMPLE.splitlines()))

print("%d hosts known" % hosts.count())
for (name, address) in sorted(hosts, key=lambda pair: pair[1]):
    print("%-10s %s" % (name, address))

for query in sys.argv[2:] or ['ns2', '192.168.0.4', 'fe80::1', 'ns9']:
    try:
        found, result = hosts.fetch('ip', IPAddress(query))
    except (AddrFormatError, ValueError):
        found, result = hosts.fetch('hostname', query)

    if found:
        print("%s => %s" % (query, result))
    else:
        print("%s is unknown" % query)

hosts = hosts.delete('hostname', 'ns1')
print("After removing ns1: %s" % hosts)
