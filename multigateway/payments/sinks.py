"""Sinks de saída: para onde vão as linhas exibidas pelos componentes dos gateways."""

import logging
import sys
import threading
from typing import Optional, TextIO


class ConsoleSink:
    """Escreve cada linha no stdout (ou no stream informado)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def write(self, line: str) -> None:
        # sys.stdout resolvido na hora da escrita
        print(line, file=self._stream or sys.stdout)


class MemorySink:
    """Guarda as linhas em memória, útil para testes e para inspecionar a saída."""

    def __init__(self):
        self._lines: list[str] = []
        self._lock = threading.Lock()

    def write(self, line: str) -> None:
        with self._lock:
            self._lines.append(line)

    @property
    def lines(self) -> list[str]:
        with self._lock:
            return list(self._lines)

    def clear(self) -> None:
        with self._lock:
            self._lines.clear()


class LoggingSink:
    """Encaminha as linhas para um logger do módulo logging."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO):
        self._logger = logger or logging.getLogger("multigateway.output")
        self._level = level

    def write(self, line: str) -> None:
        self._logger.log(self._level, "%s", line)
