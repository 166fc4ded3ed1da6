"""
Video Domain Models.

Pure business entities for the video catalog.
These models contain no external dependencies.
"""

from dataclasses import dataclass, asdict
from typing import Dict


@dataclass
class Video:
    """Catalog entry for a video"""

    id: str
    title: str
    url: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
