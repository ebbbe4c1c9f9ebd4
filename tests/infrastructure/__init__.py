"""
Shared helpers for the wschanges test-suite.

Modules:
- change_utils: building texts with changes and ranges inside changes
- file_utils: writing config files
"""

from .change_utils import Change, replaced_with, with_changes, add_changes
from .file_utils import write

__all__ = ["Change", "replaced_with", "with_changes", "add_changes", "write"]
