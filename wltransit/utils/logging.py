"""
Unified logging for the transition tools.

Provides dual output to console and transitions.log file.
Tracks warnings and errors for end-of-run summary.

Usage:
    from wltransit.utils import log, logWarning, logError, logDebug, init_logging, print_summary

    # At start of main script:
    init_logging()

    # Throughout code:
    log("Collecting transitions...")          # Info - section headers, major points
    logWarning("ignoring op: no round trip")  # Operation skipped, output still valid
    logError("critical failure")              # Fundamentally breaks output
    logDebug("discarding transition ...")     # Useful for debugging

    # At end:
    print_summary()  # Shows warning/error counts
"""

import sys
import atexit
from pathlib import Path
from datetime import datetime
from typing import List, Optional

# ANSI color codes
class Colors:
    YELLOW = '\033[93m'
    RED = '\033[91m'
    GREEN = '\033[92m'
    BOLD = '\033[1m'
    RESET = '\033[0m'


# Module state
_log_file = None
_log_path = None
_initialized = False
_atexit_registered = False
_warnings: List[str] = []
_errors: List[str] = []


def init_logging(log_path: Optional[Path] = None):
    """
    Initialize logging to both console and file.

    Args:
        log_path: Path to log file. Defaults to transitions.log in the
                  current working directory
    """
    global _log_file, _log_path, _initialized, _atexit_registered, _warnings, _errors

    if _initialized:
        return

    # Reset tracking lists
    _warnings = []
    _errors = []

    if log_path is None:
        log_path = Path.cwd() / "transitions.log"

    _log_path = Path(log_path)
    _initialized = True

    try:
        _log_path.parent.mkdir(parents=True, exist_ok=True)
        _log_file = open(_log_path, 'w', encoding='utf-8')

        # Write header
        timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        _log_file.write(f"Run started: {timestamp}\n")
        _log_file.write("=" * 70 + "\n\n")
        _log_file.flush()

        # Register cleanup
        if not _atexit_registered:
            atexit.register(close_logging)
            _atexit_registered = True

    except OSError as e:
        print(f"Warning: Could not open log file {_log_path}: {e}", file=sys.stderr)
        _log_file = None


def close_logging():
    """Close the log file."""
    global _log_file, _initialized

    if _log_file is not None:
        try:
            timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
            _log_file.write(f"\n{'=' * 70}\n")
            _log_file.write(f"Run finished: {timestamp}\n")
            _log_file.close()
        except OSError:
            pass
        _log_file = None

    _initialized = False


def print_summary():
    """
    Print a summary of warnings and errors at the end of the run.
    Uses colors for terminal output.
    """
    log("\n" + "=" * 70)
    log("RUN SUMMARY")
    log("=" * 70)

    # Print error details first
    if _errors:
        print(f"\n{Colors.RED}{Colors.BOLD}Errors ({len(_errors)}):{Colors.RESET}")
        for err in _errors:
            print(f"  {Colors.RED}- {err}{Colors.RESET}")
        # Also write to log file (without colors)
        if _log_file:
            _log_file.write(f"\nErrors ({len(_errors)}):\n")
            for err in _errors:
                _log_file.write(f"  - {err}\n")

    # Print warning details
    if _warnings:
        print(f"\n{Colors.YELLOW}{Colors.BOLD}Warnings ({len(_warnings)}):{Colors.RESET}")
        for warn in _warnings:
            print(f"  {Colors.YELLOW}- {warn}{Colors.RESET}")
        if _log_file:
            _log_file.write(f"\nWarnings ({len(_warnings)}):\n")
            for warn in _warnings:
                _log_file.write(f"  - {warn}\n")

    # Print final counts
    print()
    if _errors:
        print(f"{Colors.RED}{Colors.BOLD}{len(_errors)} Error(s){Colors.RESET}", end="")
    else:
        print(f"{Colors.GREEN}0 Errors{Colors.RESET}", end="")

    print(" | ", end="")

    if _warnings:
        print(f"{Colors.YELLOW}{Colors.BOLD}{len(_warnings)} Warning(s){Colors.RESET}")
    else:
        print(f"{Colors.GREEN}0 Warnings{Colors.RESET}")

    # Write counts to log file
    if _log_file:
        _log_file.write(f"\n{len(_errors)} Error(s) | {len(_warnings)} Warning(s)\n")
        _log_file.flush()


def get_warnings() -> List[str]:
    """Return the warnings recorded since logging was initialized."""
    return list(_warnings)


def get_errors() -> List[str]:
    """Return the errors recorded since logging was initialized."""
    return list(_errors)


def _write_to_file(msg: str, end: str = "\n"):
    """Write message to log file."""
    if _log_file is not None:
        try:
            _log_file.write(msg + end)
            _log_file.flush()
        except OSError:
            pass


def log(msg: str = "", end: str = "\n"):
    """
    Log an info message to both console and file.
    Use for section headers and major points of a run.
    """
    if not _initialized:
        init_logging()

    print(msg, end=end)
    _write_to_file(msg, end)


def logWarning(msg: str, end: str = "\n"):
    """
    Log a warning message. Warnings mark skipped work; output is still valid.
    Displayed in yellow. Tracked for end-of-run summary.
    """
    if not _initialized:
        init_logging()

    formatted = f"Warning: {msg}"
    print(f"{Colors.YELLOW}{formatted}{Colors.RESET}", end=end)
    _write_to_file(formatted, end)
    _warnings.append(msg)


def logError(msg: str, end: str = "\n"):
    """
    Log an error message. Errors indicate something fundamentally breaks the output.
    Displayed in red. Tracked for end-of-run summary.
    """
    if not _initialized:
        init_logging()

    formatted = f"ERROR: {msg}"
    print(f"{Colors.RED}{formatted}{Colors.RESET}", end=end, file=sys.stderr)
    _write_to_file(formatted, end)
    _errors.append(msg)


def logDebug(msg: str, end: str = "\n"):
    """
    Log a debug message. Only written to log file, not shown in console.
    Use for detailed information useful when debugging issues.
    """
    if not _initialized:
        init_logging()

    formatted = f"[DEBUG] {msg}"
    _write_to_file(formatted, end)
