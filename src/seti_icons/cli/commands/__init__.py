# topmark:header:start
#
#   project      : Seti Icons
#   file         : __init__.py
#   file_relpath : src/seti_icons/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Click subcommands of the ``seti-icons`` CLI."""
