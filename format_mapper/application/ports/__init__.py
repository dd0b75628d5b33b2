from .services import LoggerPort, TableReaderPort

__all__ = ["LoggerPort", "TableReaderPort"]
