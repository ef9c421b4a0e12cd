"""
module dialogkit.config

Contains the definitions of all classes used to read, write and represent
a set of dialogkit configurations
"""

from .dialogkitconfig import DialogKitConfig
from .tablebackendtype import TableBackendType
