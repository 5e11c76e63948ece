"""Display helpers for CLI output."""

from canonpath.ui.cli.display.report import CheckDisplay
from canonpath.ui.cli.display.summary import render_check_summary

__all__ = ["CheckDisplay", "render_check_summary"]
