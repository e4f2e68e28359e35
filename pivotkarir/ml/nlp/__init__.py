"""
Profile parsing and text rendering.

Components:
- ProfileLoader: parses uploaded JSON documents into ProfileRecords
- create_profile_text: renders a ProfileRecord as embedding model input
"""

from .profile_loader import ProfileLoader
from .text_synthesizer import create_profile_text

__all__ = [
    "ProfileLoader",
    "create_profile_text",
]
