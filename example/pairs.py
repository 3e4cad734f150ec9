#!/usr/bin/python
from dualmap import DualMap

colors = DualMap([("red", "#ff0000"), ("green", "#00ff00")])
colors = colors.put(("#0000ff", "blue"), inverted=True)

for name in ["red", "#00ff00", "blue", "purple"]:
    print("%s: %s" % (name, colors.get(name, "unknown")))

colors = colors.delete(["#ff0000", "green"])
print("Remaining: %r" % colors)
