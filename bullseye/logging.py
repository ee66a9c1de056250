"""
Bullseye Logging System

Per-module loggers with environment-driven levels, plus structured record
sinks for machine-readable session summaries.

Structured Record Logging:
    Records are plain dicts routed to a sink registered for their module.
    FileSink writes JSON Lines to disk; NullSink drops everything.

Usage:
    from bullseye.logging import get_logger

    log = get_logger('session')
    log.debug("Arrow fired")
    log.info("Game started")

    # Structured record logging (end-of-game summaries, etc.)
    from bullseye.logging import emit_record
    emit_record('session', {'type': 'game_over', 'score': 120, ...})

Configuration:
    Environment variables:
        BULLSEYE_LOG_LEVEL=DEBUG          # Global default level
        BULLSEYE_LOG_SESSION=DEBUG        # Module-specific level
        BULLSEYE_LOG_DIR=/tmp/logs        # Where FileSink writes
        BULLSEYE_RECORDS_SESSION=true     # Enable the session record sink

    Or programmatically:
        from bullseye.logging import configure_logging
        configure_logging(level='DEBUG', modules={'scheduler': 'INFO'})
"""

import json
import os
import sys
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, TextIO


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""
    TRACE = 5      # Per-step detail (arrow positions, scheduler runs)
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100


# =============================================================================
# Sink-Based Structured Logging
# =============================================================================

class LogSink(ABC):
    """
    Abstract base class for log record sinks.

    Sinks receive structured records and write them to their destination.
    """

    @abstractmethod
    def emit(self, module: str, record: Dict[str, Any]) -> None:
        """
        Emit a structured log record.

        Args:
            module: Module name (e.g., 'session')
            record: Structured data to log (must be JSON-serializable)
        """

    @abstractmethod
    def flush(self) -> None:
        """Flush any buffered records."""

    @abstractmethod
    def close(self) -> None:
        """Close the sink and release resources."""

    def __enter__(self) -> 'LogSink':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class FileSink(LogSink):
    """
    Writes structured records to JSONL files.

    Each module gets its own file in the log directory, one JSON object per
    line, framed by a header and a footer record.

    Args:
        log_dir: Directory for log files (default: from get_log_dir())
        session_name: Identifier used in file names (default: timestamp)
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        session_name: Optional[str] = None,
    ):
        self._log_dir = Path(log_dir) if log_dir else None
        self._session_name = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._files: Dict[str, TextIO] = {}

    def _ensure_dir(self) -> Path:
        if self._log_dir is None:
            self._log_dir = Path(get_log_dir())
        self._log_dir.mkdir(parents=True, exist_ok=True)
        return self._log_dir

    def _get_file(self, module: str) -> TextIO:
        if module not in self._files:
            path = self._ensure_dir() / f"{self._session_name}_{module}.jsonl"
            handle = open(path, 'a', encoding='utf-8')
            header = {
                "type": "header",
                "module": module,
                "session_name": self._session_name,
                "start_time": time.time(),
            }
            handle.write(json.dumps(header) + "\n")
            self._files[module] = handle
        return self._files[module]

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        """Write record to the module's JSONL file."""
        if 'wall_time' not in record:
            record = {'wall_time': time.time(), **record}
        self._get_file(module).write(json.dumps(record) + "\n")

    def flush(self) -> None:
        for handle in self._files.values():
            handle.flush()

    def close(self) -> None:
        """Write footers and close all files."""
        for module, handle in self._files.items():
            footer = {"type": "footer", "module": module, "end_time": time.time()}
            handle.write(json.dumps(footer) + "\n")
            handle.close()
        self._files.clear()

    @property
    def log_paths(self) -> Dict[str, Path]:
        """Paths of all files opened so far."""
        log_dir = self._ensure_dir()
        return {
            module: log_dir / f"{self._session_name}_{module}.jsonl"
            for module in self._files
        }


class NullSink(LogSink):
    """No-op sink when record logging is disabled."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass


_sinks: Dict[str, LogSink] = {}


def register_sink(module: str, sink: LogSink) -> None:
    """Route records for ``module`` to ``sink``."""
    _sinks[module] = sink


def get_sink(module: str) -> Optional[LogSink]:
    return _sinks.get(module)


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """
    Emit a structured record to the module's sink.

    Returns:
        True if a sink received the record, False if none is registered
    """
    sink = get_sink(module)
    if sink is None:
        return False
    sink.emit(module, record)
    return True


def close_all_sinks() -> None:
    """Close and unregister every sink."""
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()


def create_sink(module: str, session_name: Optional[str] = None) -> LogSink:
    """Create a FileSink if records are enabled for ``module``, else a NullSink."""
    if not _config['records'].get(module.lower(), False):
        return NullSink()
    return FileSink(session_name=session_name)


# =============================================================================
# Global configuration
# =============================================================================

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
    'log_dir': None,
    'records': {},           # module -> bool, from BULLSEYE_RECORDS_<MODULE>
}


def get_log_dir() -> str:
    """Get the log directory.

    Priority:
    1. Configured log_dir (BULLSEYE_LOG_DIR)
    2. XDG data home: ~/.local/share/bullseye/logs
    """
    if _config.get('log_dir'):
        return str(Path(_config['log_dir']).expanduser())
    xdg_data = os.environ.get('XDG_DATA_HOME', str(Path.home() / '.local' / 'share'))
    return str(Path(xdg_data) / 'bullseye' / 'logs')


def _level_from_string(level_str: str) -> LogLevel:
    mapping = {
        'TRACE': LogLevel.TRACE,
        'DEBUG': LogLevel.DEBUG,
        'INFO': LogLevel.INFO,
        'WARNING': LogLevel.WARNING,
        'WARN': LogLevel.WARNING,
        'ERROR': LogLevel.ERROR,
        'CRITICAL': LogLevel.CRITICAL,
        'OFF': LogLevel.OFF,
    }
    return mapping.get(level_str.upper(), LogLevel.INFO)


def _format_message(module: str, level: str, msg: str) -> str:
    return f"[{module}] {level}: {msg}"


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
    log_dir: Optional[str] = None,
) -> None:
    """
    Configure the logging system.

    Args:
        level: Default log level for all modules
        modules: Dict of module_name -> level for per-module configuration
        log_dir: Directory for FileSink output
    """
    _config['default_level'] = _level_from_string(level)
    if modules:
        for mod, mod_level in modules.items():
            _config['module_levels'][mod.lower()] = _level_from_string(mod_level)
    if log_dir is not None:
        _config['log_dir'] = log_dir


def _load_env_config() -> None:
    """Load configuration from BULLSEYE_LOG_* and BULLSEYE_RECORDS_* variables."""
    if 'BULLSEYE_LOG_LEVEL' in os.environ:
        _config['default_level'] = _level_from_string(os.environ['BULLSEYE_LOG_LEVEL'])

    if 'BULLSEYE_LOG_DIR' in os.environ:
        _config['log_dir'] = os.environ['BULLSEYE_LOG_DIR']

    reserved = ('BULLSEYE_LOG_LEVEL', 'BULLSEYE_LOG_DIR')
    for key, value in os.environ.items():
        if key.startswith('BULLSEYE_LOG_') and key not in reserved:
            module_name = key[len('BULLSEYE_LOG_'):].lower()
            _config['module_levels'][module_name] = _level_from_string(value)
        elif key.startswith('BULLSEYE_RECORDS_'):
            module_name = key[len('BULLSEYE_RECORDS_'):].lower()
            _config['records'][module_name] = value.lower() in ('1', 'true', 'yes', 'on')


_load_env_config()


class GameLogger:
    """Logger for a single module."""

    def __init__(self, module: str):
        self.module = module
        self._module_key = module.lower().replace('.', '_').replace('/', '_')

    @property
    def level(self) -> LogLevel:
        """Effective level: module override, else the global default."""
        return _config['module_levels'].get(self._module_key, _config['default_level'])

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def _log(self, level: LogLevel, level_name: str, msg: str, *args) -> None:
        if not self.is_enabled_for(level):
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(_format_message(self.module, level_name, msg), file=sys.stdout)

    def trace(self, msg: str, *args) -> None:
        self._log(LogLevel.TRACE, 'TRACE', msg, *args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, 'DEBUG', msg, *args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, 'INFO', msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, 'WARN', msg, *args)

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> GameLogger:
    """
    Get a logger for the specified module.

    Loggers are cached, so calling get_logger('foo') twice returns the same
    instance.
    """
    return GameLogger(module)


def disable_logging() -> None:
    """Silence every module."""
    _config['default_level'] = LogLevel.OFF
    _config['module_levels'].clear()
