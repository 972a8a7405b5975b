"""An ordered list built on a dict of index -> item.

See README.md for complete documentation and usage examples.
"""

from keyedlist.keyedlist import ABSENT, Absent, KeyOrder, keyedlist

__all__ = ["ABSENT", "Absent", "KeyOrder", "keyedlist"]
