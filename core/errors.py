# core/errors.py
from __future__ import annotations
from typing import Optional


class PrinterCountersError(Exception):
    pass


class ConfigurationError(PrinterCountersError):
    """printers.json is missing, unparsable, or has no `printers` list."""


class ExtractionError(PrinterCountersError):
    def __init__(self, message: str, *, ip: Optional[str] = None):
        super().__init__(message)
        self.ip = ip


class SerializationError(ExtractionError):
    pass


class PipelineAborted(PrinterCountersError):
    def __init__(self, ip: str, cause: BaseException):
        super().__init__(f"run aborted at {ip}: {cause}")
        self.ip = ip
        self.cause = cause
