# topmark:header:start
#
#   project      : Seti Icons
#   file         : __init__.py
#   file_relpath : src/seti_icons/data/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Bundled icon data artifacts.

- ``definitions.json``: the rule table (``files``, ``extensions``, ``partials``,
  ``default``), with ``partials`` already in scan order.
- ``icons.json``: icon key to SVG markup.

Both files are generated offline and read by [`seti_icons.rules.loader`][].
"""
