"""
Build the property document the site reads from extracted records.

Only `aktorer` comes from the report; everything else is the standard
scaffold every property page starts with.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional, Sequence

from .config import get_settings
from .models import (
    Actor,
    DocumentMetadata,
    ExtraInfo,
    Property,
    PropertyDocument,
    Record,
    ReportData,
    Screenshot,
)

# (filename, description, category)
SCREENSHOTS = [
    ("nokkeldata", "Nøkkeldata og statistikk", "oversikt"),
    ("korthandel", "Korthandel og transaksjoner", "marked"),
    ("konkurransebildet", "Konkurransebildet", "marked"),
    ("demografi", "Demografisk data", "demografi"),
    ("bevegelse", "Bevegelsesdata", "utvikling"),
    ("besokende", "Besøkende", "utvikling"),
]

# The key-figures screenshot was exported as PNG for these properties only.
PNG_KEY_FIGURES = {"nedre-foss-gard"}


def _now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def screenshots_for(property_id: str, image_root: str) -> List[Screenshot]:
    shots = []
    for filename, description, category in SCREENSHOTS:
        ext = "png" if filename == "nokkeldata" and property_id in PNG_KEY_FIGURES else "jpg"
        shots.append(Screenshot(
            filename=filename,
            path=f"{image_root}/{property_id}/{filename}.{ext}",
            description=description,
            category=category,
        ))
    return shots


def assemble_document(
    prop: Property,
    records: Sequence[Record],
    now: Optional[str] = None,
) -> PropertyDocument:
    settings = get_settings()
    now = now or _now()
    root = settings.image_root.rstrip("/")

    return PropertyDocument(
        id=prop.id,
        address=prop.name,
        description=f"Placeanalyse for {prop.name}",
        hero_image=f"{root}/{prop.id}/hero.jpg",
        map_image=f"{root}/{prop.id}/map.png",
        actors=[Actor.from_record(r) for r in records],
        report_data=ReportData(
            report_date=now,
            screenshots=screenshots_for(prop.id, root),
        ),
        extra_info=ExtraInfo(
            history=f"Eiendom i {prop.name}",
            contact=settings.contact,
        ),
        metadata=DocumentMetadata(created=now, last_updated=now),
    )
