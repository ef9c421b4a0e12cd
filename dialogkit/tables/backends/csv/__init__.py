from .csvbackend import CsvBackend
