from __future__ import annotations

from .raw_processor import RawImportProcessor, detect_type, process_raw_directory

__all__ = ["RawImportProcessor", "detect_type", "process_raw_directory"]
