"""
Helper Functions

Contains utility functions used throughout the application.
"""

from dataclasses import asdict
from typing import Any, Dict


def snapshot_payload(engine) -> Dict[str, Any]:
    """JSON-ready game state for the presentation layer."""
    return asdict(engine.snapshot())


def error_payload(error: Exception) -> Dict[str, str]:
    return {'error': str(error), 'error_type': type(error).__name__}
