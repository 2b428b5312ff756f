"""Strongly typed identifiers for Photoshare domain entities.

Using NewType keeps photo and user IDs from being mixed up.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PhotoId = NewType("PhotoId", UUID)
