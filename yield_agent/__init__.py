"""Yield Agent backend package."""

from .agent import run_earnings_agent
from .app import create_app
from .config import get_settings

__all__ = ["create_app", "get_settings", "run_earnings_agent"]
