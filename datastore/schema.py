"""Layout of the sensor readings table."""

from __future__ import annotations

from typing import Dict

from sqlalchemy import Column, DateTime, Float, Integer, MetaData, Table, func
from sqlalchemy.engine import Engine

READINGS_TABLE = "IAQ_SEN55"

ID_COLUMN = "id"
LOCATION_COLUMN = "location"
RECORDED_AT_COLUMN = "recTime"

# Reading field name -> column name.
NUMERIC_COLUMNS: Dict[str, str] = {
    "temperature": "temp",
    "relative_humidity": "rH",
    "pm1": "pmass1",
    "pm2_5": "pmass25",
    "pm4": "pmass4",
    "pm10": "pmass10",
    "voc_index": "VOC",
    "nox_index": "NOx",
    "formaldehyde": "HCHO",
    "co2": "CO2",
    "indoor_dewpoint": "indoorTd",
}

metadata = MetaData()

readings_table = Table(
    READINGS_TABLE,
    metadata,
    Column(ID_COLUMN, Integer, primary_key=True, autoincrement=True),
    Column(LOCATION_COLUMN, Integer, nullable=False),
    Column(RECORDED_AT_COLUMN, DateTime, nullable=False, server_default=func.now(), index=True),
    *(Column(column, Float) for column in NUMERIC_COLUMNS.values()),
)


def create_schema(engine: Engine) -> None:
    """Create the readings table when it does not exist yet."""
    metadata.create_all(bind=engine, checkfirst=True)
