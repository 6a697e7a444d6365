"""
Notices module.

Notices are listed pinned-first, newest first. Read tracking goes through a
dedicated store operation; the generic update never touches the view counter
or the reader set.
"""
