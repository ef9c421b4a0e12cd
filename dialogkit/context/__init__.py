"""
module dialogkit.context

Contains the definitions of dataclasses that store the configuration and
component instances shared by an individual DialogKit
"""

from .dialogkitcontext import DialogKitContext
