"""Adapters talking to the outside world."""

from .bridge import build_argv, invoke, run_checked, run_text

__all__ = ["build_argv", "invoke", "run_checked", "run_text"]
