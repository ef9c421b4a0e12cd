"""
module dialogkit.tables.abstract

Contains the definition of the TableBackend abstract base class
implemented by all table rendering backends
"""

from .tablebackend import TableBackend
