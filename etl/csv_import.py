"""
CSV bulk import for the internship catalog.

Expected header (camelCase, as exported by the admin console template):

    title,sector,orgName,description,city,state,pin,remote,minEducation,
    requiredSkills,stipendMin,stipendMax,applicationUrl,deadline,active

`requiredSkills` is semicolon separated. Rows are validated, checked for
duplicates on (title, orgName) and inserted in one batch.
"""

import io
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd

from core.config_loader import CsvImportConfig
from database.repositories.internship import InternshipRepository, catalog_key

logger = logging.getLogger(__name__)

CSV_COLUMNS = {
    "title": "title",
    "sector": "sector",
    "orgName": "org_name",
    "description": "description",
    "city": "city",
    "state": "state",
    "pin": "pin",
    "remote": "remote",
    "minEducation": "min_education",
    "requiredSkills": "required_skills",
    "stipendMin": "stipend_min",
    "stipendMax": "stipend_max",
    "applicationUrl": "application_url",
    "deadline": "deadline",
    "active": "active",
}

SAMPLE_CSV = (
    "title,sector,orgName,description,city,state,pin,remote,minEducation,requiredSkills,"
    "stipendMin,stipendMax,applicationUrl,deadline,active\n"
    "Software Engineer Intern,Technology,TechCorp,Full-stack development,Bangalore,Karnataka,"
    "560001,false,B.Tech,Python;React;JavaScript,15000,25000,https://example.com/apply,2025-12-31,true\n"
    "Data Analyst Intern,Finance,FinServ,Data analysis and reporting,Mumbai,Maharashtra,"
    "400001,true,BCA,Excel;SQL;Tableau,12000,20000,https://example.com/apply,2025-11-30,true\n"
)


class CsvImportError(Exception):
    """Raised when a CSV file cannot be imported at all."""
    pass


@dataclass
class RowError:
    row: int  # 1-based data row, header excluded
    message: str


@dataclass
class ImportReport:
    inserted: int = 0
    skipped_duplicates: List[str] = field(default_factory=list)
    errors: List[RowError] = field(default_factory=list)


def _parse_bool(value: str) -> bool:
    return value.strip().lower() == "true"


def _parse_int(value: str, column: str) -> Optional[int]:
    if not value:
        return None
    try:
        return int(float(value))
    except (ValueError, OverflowError):
        raise ValueError(f"{column} must be a number, got '{value}'")


def _parse_date(value: str) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValueError(f"deadline must be an ISO date (YYYY-MM-DD), got '{value}'")


def parse_row(raw: Dict[str, str], skill_separator: str = ";") -> Dict[str, Any]:
    """
    Map one CSV row (camelCase headers) to internship columns.

    Raises:
        ValueError: If a required field is missing or a value is malformed.
    """
    values = {k: (v or "").strip() for k, v in raw.items()}

    record: Dict[str, Any] = {}
    for header, column in CSV_COLUMNS.items():
        value = values.get(header, "")
        if column in ("remote", "active"):
            record[column] = _parse_bool(value) if value else None
        elif column in ("stipend_min", "stipend_max"):
            record[column] = _parse_int(value, header)
        elif column == "required_skills":
            record[column] = [s.strip() for s in value.split(skill_separator) if s.strip()]
        elif column == "deadline":
            record[column] = _parse_date(value)
        else:
            record[column] = value or None

    if not record["title"] or not record["org_name"]:
        raise ValueError("title and orgName are required")

    if record["active"] is None:
        record["active"] = True
    if record["remote"] is None:
        record["remote"] = False
    record["sector"] = record["sector"] or ""
    record["application_url"] = record["application_url"] or ""

    return record


def read_csv_rows(text: str) -> List[Dict[str, str]]:
    """Read CSV text into a list of string dicts, skipping blank lines."""
    try:
        df = pd.read_csv(io.StringIO(text), dtype=str, keep_default_na=False, skip_blank_lines=True)
    except pd.errors.EmptyDataError:
        raise CsvImportError("CSV file is empty")
    except pd.errors.ParserError as e:
        raise CsvImportError(f"Could not parse CSV: {e}")

    df.columns = [str(c).strip() for c in df.columns]
    return df.fillna("").to_dict(orient="records")


def parse_csv(text: str, config: Optional[CsvImportConfig] = None) -> Tuple[List[Dict[str, Any]], List[RowError]]:
    """
    Parse CSV text into internship records.

    Returns: (records, row_errors)
    """
    config = config or CsvImportConfig()
    records: List[Dict[str, Any]] = []
    errors: List[RowError] = []

    for index, raw in enumerate(read_csv_rows(text), start=1):
        try:
            records.append(parse_row(raw, config.skill_separator))
        except ValueError as e:
            errors.append(RowError(row=index, message=str(e)))

    return records, errors


def import_csv(
    text: str,
    repo: InternshipRepository,
    config: Optional[CsvImportConfig] = None
) -> ImportReport:
    """
    Validate, de-duplicate and insert internships from CSV text.

    Raises:
        CsvImportError: If the file holds no valid internship row.
    """
    config = config or CsvImportConfig()
    records, errors = parse_csv(text, config)

    if not records:
        logger.warning(f"CSV import rejected: {len(errors)} invalid rows, none valid")
        raise CsvImportError("No valid internships found in CSV")

    seen = repo.existing_keys() if config.skip_existing else set()
    report = ImportReport(errors=errors)
    to_insert: List[Dict[str, Any]] = []

    for record in records:
        key = catalog_key(record["title"], record["org_name"])
        if key in seen:
            report.skipped_duplicates.append(f"{record['title']} ({record['org_name']})")
            continue
        seen.add(key)
        to_insert.append(record)

    if to_insert:
        repo.bulk_insert(to_insert)
    report.inserted = len(to_insert)

    logger.info(f"CSV import: {report.inserted} inserted, "
                f"{len(report.skipped_duplicates)} duplicates skipped, {len(errors)} rows rejected")
    return report
