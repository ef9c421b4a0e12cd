from .terminaltablesbackend import TerminalTablesBackend
