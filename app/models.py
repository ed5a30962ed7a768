from __future__ import annotations

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .rules import DEFAULT_COLUMNS


class ColumnMap(BaseModel):
    """Column index of each extracted attribute in a data row."""

    model_config = ConfigDict(frozen=True)

    name: int = Field(default=DEFAULT_COLUMNS["name"], ge=0)
    revenue: int = Field(default=DEFAULT_COLUMNS["revenue"], ge=0)
    year_over_year_growth: int = Field(default=DEFAULT_COLUMNS["year_over_year_growth"], ge=0)
    employee_count: int = Field(default=DEFAULT_COLUMNS["employee_count"], ge=0)
    market_share: int = Field(default=DEFAULT_COLUMNS["market_share"], ge=0)


class Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    revenue: Optional[float] = None
    year_over_year_growth: Optional[float] = Field(default=None, alias="yearOverYearGrowth")
    employee_count: Optional[int] = Field(default=None, alias="employeeCount")
    market_share: Optional[float] = Field(default=None, alias="marketShare")


class Property(BaseModel):
    id: str
    name: str
    csv_path: Optional[str] = None


# --- Property document (Norwegian keys are what the site reads) ---

class _Document(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Screenshot(_Document):
    filename: str = Field(alias="filnavn")
    path: str
    description: str = Field(alias="beskrivelse")
    category: str = Field(alias="kategori")


class KeyFigures(_Document):
    price_level: Optional[float] = Field(default=None, alias="prisniva")
    rental_income: Optional[float] = Field(default=None, alias="leieinntekter")
    population: Optional[int] = Field(default=None, alias="befolkning")
    average_income: Optional[float] = Field(default=None, alias="gjennomsnittsinntekt")
    unemployment: Optional[float] = Field(default=None, alias="arbeidsledighet")


class ReportData(_Document):
    report_date: str = Field(alias="rapportDato")
    screenshots: List[Screenshot] = Field(default_factory=list)
    key_figures: KeyFigures = Field(default_factory=KeyFigures, alias="nokkeldata")


class ExtraInfo(_Document):
    history: str = Field(alias="historikk")
    contact: str = Field(alias="kontaktperson")
    notes: List[str] = Field(default_factory=list, alias="notater")
    links: List[str] = Field(default_factory=list, alias="lenker")


class DocumentMetadata(_Document):
    created: str = Field(alias="opprettet")
    last_updated: str = Field(alias="sistOppdatert")
    status: str = "publisert"
    version: int = Field(default=1, alias="versjon")


class Actor(_Document):
    """A Record as it is embedded in a property document."""

    name: str = Field(alias="navn")
    revenue: Optional[float] = Field(default=None, alias="omsetning")
    year_over_year_growth: Optional[float] = Field(default=None, alias="yoyVekst")
    employee_count: Optional[int] = Field(default=None, alias="ansatte")
    market_share: Optional[float] = Field(default=None, alias="markedsandel")

    @classmethod
    def from_record(cls, record: Record) -> "Actor":
        return cls(**record.model_dump())


class PropertyDocument(_Document):
    id: str
    address: str = Field(alias="adresse")
    description: str = Field(alias="beskrivelse")
    hero_image: str = Field(alias="heroImage")
    map_image: str = Field(alias="mapImage")
    actors: List[Actor] = Field(default_factory=list, alias="aktorer")
    report_data: ReportData = Field(alias="plaaceData")
    extra_info: ExtraInfo = Field(alias="tilleggsinfo")
    metadata: DocumentMetadata


# --- API envelopes ---

class ParseResponse(BaseModel):
    rows: List[List[str]]
    decoding: Dict[str, Any] = Field(default_factory=dict)


class ExtractSummary(BaseModel):
    rows: int = 0
    records: int = 0
    skipped: int = 0


class ExtractResponse(BaseModel):
    summary: ExtractSummary
    records: List[Record]
    decoding: Dict[str, Any] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    ok: bool = True
