"""User management core.

This package contains the user and role entities, the validation and
persistence collaborators around them, and the command line interface.
"""

__version__ = "0.1.0"
