"""
module dialogkit.context.dialogkitcontext

Contains the definition of the DialogKitContext dataclass which contains the
configuration and component instances used by an individual DialogKit
"""

from dataclasses import dataclass

from ..config import DialogKitConfig
from ..prompt import PromptSpecBuilder
from ..tables.abstract import TableBackend


@dataclass(frozen=True)
class DialogKitContext:
    """
    class DialogKitContext

    Dataclass which contains the configuration and component instances
    used by an individual DialogKit
    """

    config: DialogKitConfig
    config_path: str | None
    prompt_builder: PromptSpecBuilder
    table_backend: TableBackend
