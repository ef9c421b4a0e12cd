"""
module dialogkit.__init__

Contains the import of the DialogKit class that binds a configuration to the
prompt specification builder, the image codec and the table reshaper. Also
contains definitions that indicate the current version of dialogkit.
"""

__version_info__: tuple[int, ...] = (0, 1, 0)
__version__: str = ".".join(map(str, __version_info__))

from .dialogkit import DialogKit
