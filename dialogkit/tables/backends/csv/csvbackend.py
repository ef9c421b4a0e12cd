import csv
import io

from ...abstract import TableBackend
from ...recordset import RecordSet


class CsvBackend(TableBackend):
    def construct_table(self: "CsvBackend", record_set: RecordSet) -> str:
        output: io.StringIO = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(record_set.columns)

        # None is written as NULL rather than as an empty cell
        writer.writerows(
            [self.field_to_str(field) for field in record]
            for record in record_set.records
        )

        return output.getvalue()
