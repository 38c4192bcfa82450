"""
Tool Catalog - Read-only lookup from tool code to Tool.

The catalog is built once (from the shipped tools.csv or the built-in
defaults) and never mutated afterwards. Loading from CSV produces a report
in the same shape as the old master catalog build:
- status / input_file
- metrics (row counts, duplicates, skipped rows)
- warnings and errors
"""
import hashlib
from datetime import datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Optional

import pandas as pd

from ..config.settings import get_settings, Settings
from .models import Tool
from ..exceptions import CatalogError


REQUIRED_COLUMNS = [
    'code', 'type', 'brand', 'daily_charge',
    'weekday_charge', 'weekend_charge', 'holiday_charge'
]

DEFAULT_TOOLS = (
    Tool("CHNS", "Chainsaw", "Stihl", Decimal("1.49"),
         weekday_charge=True, weekend_charge=False, holiday_charge=True),
    Tool("LADW", "Ladder", "Werner", Decimal("1.99"),
         weekday_charge=True, weekend_charge=True, holiday_charge=False),
    Tool("JAKD", "Jackhammer", "DeWalt", Decimal("2.99"),
         weekday_charge=True, weekend_charge=False, holiday_charge=False),
    Tool("JAKR", "Jackhammer", "Ridgid", Decimal("2.99"),
         weekday_charge=True, weekend_charge=False, holiday_charge=False),
)


def parse_bool(value: str) -> bool:
    """Parse a boolean from CSV string."""
    return str(value).strip().lower() in ('true', '1', 'yes', 'on')


def get_file_hash(path: Path) -> str:
    """Get SHA256 hash of a file."""
    if not path.exists():
        return ""
    with open(path, 'rb') as f:
        return hashlib.sha256(f.read()).hexdigest()[:12]


class ToolCatalog:
    """
    Immutable tool lookup keyed by case-sensitive tool code.

    When the same code appears more than once the first entry wins.
    """

    def __init__(self, tools: Iterable[Tool], report: Optional[dict] = None):
        entries = {}
        for tool in tools:
            entries.setdefault(tool.code, tool)
        self._tools = MappingProxyType(entries)
        self.report = report or {}

    @property
    def tools(self) -> MappingProxyType:
        """Read-only code → Tool mapping."""
        return self._tools

    def get(self, code: str) -> Optional[Tool]:
        """Look up a tool by code; None when the code is unknown."""
        return self._tools.get(code)

    def codes(self) -> list[str]:
        return list(self._tools)

    def __contains__(self, code: object) -> bool:
        return code in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[Tool]:
        return iter(self._tools.values())

    def __repr__(self) -> str:
        return f"ToolCatalog({', '.join(self._tools)})"

    @classmethod
    def default(cls) -> 'ToolCatalog':
        """Build the built-in four tool catalog."""
        report = {
            "timestamp": datetime.now().isoformat(),
            "status": "success",
            "input_file": None,
            "metrics": {"tool_count": len(DEFAULT_TOOLS)},
            "warnings": [],
            "errors": [],
        }
        return cls(DEFAULT_TOOLS, report=report)

    @classmethod
    def from_csv(cls, path: Path, verbose: bool = False) -> 'ToolCatalog':
        """
        Load a catalog from a CSV file.

        Args:
            path: CSV with the REQUIRED_COLUMNS header
            verbose: Print progress messages

        Returns:
            ToolCatalog with the load report attached as ``.report``

        Raises:
            CatalogError: file missing, empty, or missing required columns
        """
        path = Path(path)
        report = {
            "timestamp": datetime.now().isoformat(),
            "status": "pending",
            "input_file": {"path": str(path), "hash": get_file_hash(path)},
            "metrics": {},
            "warnings": [],
            "errors": [],
        }

        if not path.exists():
            raise CatalogError(f"Tool catalog not found at {path}.")

        try:
            df = pd.read_csv(path, dtype=str).fillna('')
        except pd.errors.EmptyDataError:
            raise CatalogError(f"Tool catalog {path} is empty.")

        # Strip all strings and headers
        df.columns = [c.strip() for c in df.columns]
        for col in df.columns:
            df[col] = df[col].astype(str).str.strip()

        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise CatalogError(
                f"Tool catalog {path} is missing columns: {', '.join(missing)}"
            )

        report["metrics"]["initial_row_count"] = len(df)
        df = df[df['code'] != '']

        duplicates = int(df['code'].duplicated().sum())
        report["metrics"]["duplicates_removed"] = duplicates
        if duplicates > 0:
            report["warnings"].append(f"{duplicates} duplicate tool codes ignored (first row kept)")
            df = df.drop_duplicates('code', keep='first')

        tools = []
        skipped = 0
        for row in df.to_dict(orient='records'):
            try:
                daily_charge = Decimal(row['daily_charge'])
            except InvalidOperation:
                daily_charge = None
            if daily_charge is None or not daily_charge.is_finite() or daily_charge < 0:
                skipped += 1
                report["warnings"].append(
                    f"Skipped {row['code']}: invalid daily charge '{row['daily_charge']}'"
                )
                continue

            tools.append(Tool(
                code=row['code'],
                type=row['type'],
                brand=row['brand'],
                daily_charge=daily_charge,
                weekday_charge=parse_bool(row['weekday_charge']),
                weekend_charge=parse_bool(row['weekend_charge']),
                holiday_charge=parse_bool(row['holiday_charge']),
            ))

        report["metrics"]["skipped_rows"] = skipped
        report["metrics"]["tool_count"] = len(tools)
        report["status"] = "success"

        if verbose:
            for warning in report["warnings"]:
                print(f"WARNING: {warning}")
            print(f"Loaded {len(tools)} tools from {path}")

        return cls(tools, report=report)


def load_catalog(settings: Optional[Settings] = None, verbose: bool = False) -> ToolCatalog:
    """Load the configured catalog file, falling back to the built-in tools."""
    settings = settings or get_settings()
    catalog_path = settings.tool_catalog

    if catalog_path and catalog_path.exists():
        return ToolCatalog.from_csv(catalog_path, verbose=verbose)

    if verbose:
        print(f"Tool catalog not found at {catalog_path} - using built-in catalog")
    return ToolCatalog.default()
