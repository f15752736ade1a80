# contractkit/logging/tags.py
"""
Logging subsystem tags.

Used as message prefixes so contract failures are easy to grep for in
application logs.
"""

VALIDATION = "[VALIDATION]"
INVARIANT = "[INVARIANT]"
FORMAT = "[FORMAT]"
CONFIG = "[CONFIG]"
