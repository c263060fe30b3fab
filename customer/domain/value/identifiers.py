"""Strongly typed identifiers for domain entities.

Identifiers are database-assigned integers; NewType keeps them from being
mixed up with other integers in signatures.
"""

from typing import NewType

CustomerId = NewType("CustomerId", int)
