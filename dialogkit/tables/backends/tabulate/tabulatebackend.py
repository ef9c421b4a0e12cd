from tabulate import tabulate

from ...abstract import TableBackend
from ...recordset import RecordSet


class TabulateBackend(TableBackend):
    def construct_table(self: "TabulateBackend", record_set: RecordSet) -> str:
        return tabulate(
            [
                [self.field_to_str(field) for field in record]
                for record in record_set.records
            ],
            headers=record_set.columns,
            tablefmt="rounded_outline",
            disable_numparse=True,
        )
