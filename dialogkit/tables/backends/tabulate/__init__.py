from .tabulatebackend import TabulateBackend
