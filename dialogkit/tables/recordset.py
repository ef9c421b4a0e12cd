"""
module dialogkit.tables.recordset

Contains the definition of the RecordSet class, a dataclass that contains a
set of table rows represented as tuples along with the names of the columns
present in each row
"""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass
class RecordSet:
    """
    class RecordSet

    Dataclass that contains a set of table rows represented as tuples
    along with the names of the columns present in each row
    """

    columns: List[str]
    records: List[Tuple]
