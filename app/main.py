import logging

from fastapi import Depends, FastAPI, UploadFile, File, HTTPException, Query

from .assemble import assemble_document
from .config import configure_logging, get_settings
from .extract import extract_records
from .models import (
    ColumnMap,
    ExtractResponse,
    ExtractSummary,
    HealthResponse,
    ParseResponse,
    Property,
    PropertyDocument,
)
from .normalize import decode_report_bytes
from .rules import DEFAULT_COLUMNS, HEADER_ROWS
from .storage import write_document
from .table import parse_table

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="plaace-report-extractor",
    description="Extract market actors from exported location-analysis sheets",
    version="0.1.0",
)


def column_map(
    name: int = Query(DEFAULT_COLUMNS["name"], ge=0, alias="name_column"),
    revenue: int = Query(DEFAULT_COLUMNS["revenue"], ge=0, alias="revenue_column"),
    year_over_year_growth: int = Query(
        DEFAULT_COLUMNS["year_over_year_growth"], ge=0, alias="year_over_year_growth_column"
    ),
    employee_count: int = Query(DEFAULT_COLUMNS["employee_count"], ge=0, alias="employee_count_column"),
    market_share: int = Query(DEFAULT_COLUMNS["market_share"], ge=0, alias="market_share_column"),
) -> ColumnMap:
    return ColumnMap(
        name=name,
        revenue=revenue,
        year_over_year_growth=year_over_year_growth,
        employee_count=employee_count,
        market_share=market_share,
    )


async def _read_upload(file: UploadFile):
    if not (file.filename or "").lower().endswith(".csv"):
        raise HTTPException(status_code=422, detail="Only CSV files are supported")

    raw = await file.read()
    return decode_report_bytes(raw)


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/parse", response_model=ParseResponse)
async def parse(file: UploadFile = File(...)):
    text, decoding = await _read_upload(file)
    return ParseResponse(rows=parse_table(text), decoding=decoding)


@app.post("/extract", response_model=ExtractResponse)
async def extract(file: UploadFile = File(...), columns: ColumnMap = Depends(column_map)):
    text, decoding = await _read_upload(file)
    rows = parse_table(text)
    records = extract_records(rows, columns)

    data_rows = max(len(rows) - HEADER_ROWS, 0)
    return ExtractResponse(
        summary=ExtractSummary(rows=data_rows, records=len(records), skipped=data_rows - len(records)),
        records=records,
        decoding=decoding,
    )


@app.post("/properties/{property_id}", response_model=PropertyDocument)
async def build_property(
    property_id: str,
    name: str = Query(..., min_length=1),
    save: bool = False,
    file: UploadFile = File(...),
    columns: ColumnMap = Depends(column_map),
):
    text, _ = await _read_upload(file)
    records = extract_records(parse_table(text), columns)
    doc = assemble_document(Property(id=property_id, name=name), records)
    logger.info("assembled %s with %d actors", property_id, len(records))

    if save:
        write_document(doc, get_settings().output_dir)
    return doc
