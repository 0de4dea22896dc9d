from dataclasses import dataclass
from typing import Any, Dict, Optional
import math


@dataclass
class CatalogVideo:
    """Entity: A video record from the remote catalog"""
    id: int
    title: str
    media_locator: str
    catalog_duration_seconds: Optional[float] = None
    uploaded_at: Optional[str] = None

    def __post_init__(self):
        """Validates data"""
        if not self.media_locator:
            raise ValueError("Media locator cannot be empty")
        if self.catalog_duration_seconds is not None:
            duration = float(self.catalog_duration_seconds)
            self.catalog_duration_seconds = duration if math.isfinite(duration) and duration > 0 else None

    @property
    def has_known_duration(self) -> bool:
        return self.catalog_duration_seconds is not None

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "CatalogVideo":
        """Builds the entity from the catalog API payload"""
        duration = payload.get("duration_seconds")
        try:
            duration = float(duration) if duration is not None else None
        except (TypeError, ValueError):
            duration = None
        return cls(
            id=int(payload["id"]),
            title=str(payload.get("title") or ""),
            media_locator=str(payload.get("file") or ""),
            catalog_duration_seconds=duration,
            uploaded_at=payload.get("uploaded_at"),
        )
