from __future__ import annotations

import uuid
from dataclasses import dataclass, field


@dataclass(frozen=True)
class VideoRecord:
    title: str
    speaker: str
    time_line: str
    reference_link: str
    thumbnail: str
    video_id: str
    # UI identity only, assigned at decode time
    id: uuid.UUID = field(default_factory=uuid.uuid4, compare=False)


@dataclass(frozen=True)
class Catalog:
    year: int
    items: tuple[VideoRecord, ...]

    def __len__(self) -> int:
        return len(self.items)
