from terminaltables import SingleTable

from ...abstract import TableBackend
from ...recordset import RecordSet


class TerminalTablesBackend(TableBackend):
    # pylint: disable=too-few-public-methods

    def construct_table(self: "TerminalTablesBackend", record_set: RecordSet) -> str:
        table: SingleTable = SingleTable(
            [list(record_set.columns)]
            + [
                [self.field_to_str(field) for field in record]
                for record in record_set.records
            ]
        )
        table.inner_column_border = True
        return table.table
