"""Sheets API client - sheet listing and row retrieval."""

from urllib.parse import quote

import httpx
from loguru import logger

from sheets_client.base import BaseClient, TokenProvider
from sheets_client.errors import SheetNotFoundError, UpstreamError
from sheets_client.schemas import SheetPropertiesSchema, ValueRangeSchema

SHEETS_API_URL = "https://sheets.googleapis.com/v4/spreadsheets"
SHEET_FIELDS = "sheets.properties(sheetId,title,index,gridProperties(rowCount,columnCount))"


def rows_to_dicts(values: list[list]) -> list[dict]:
    """Map a header row plus data rows to header -> value dicts.

    Blank rows are skipped. Missing trailing cells become absent keys.
    """
    if not values:
        return []

    headers = [str(h).strip() for h in values[0]]
    rows = []
    for raw in values[1:]:
        if all(cell == "" for cell in raw):
            continue
        rows.append({h: cell for h, cell in zip(headers, raw) if h})
    return rows


def _a1_range(title: str) -> str:
    """Quote a sheet title as an A1 range covering the whole sheet."""
    return "'" + title.replace("'", "''") + "'"


class SheetsClient(BaseClient):
    """Client for one spreadsheet's tabs and values.

    Tab titles seen by the last metadata fetch are remembered, so fetching the
    rows of a listed tab costs one request. An unknown title triggers a fresh
    metadata fetch before it is reported missing.
    """

    def __init__(self, spreadsheet_id: str, auth: TokenProvider, base_url: str = SHEETS_API_URL, **kwargs):
        super().__init__(auth, base_url, **kwargs)
        self._spreadsheet_id = spreadsheet_id
        self._titles: set[str] = set()

    async def sheets(self) -> list[SheetPropertiesSchema]:
        """GET /spreadsheets/{id} - every tab, in spreadsheet order."""
        data = await self._get(self._spreadsheet_id, params={"fields": SHEET_FIELDS})
        sheets = [SheetPropertiesSchema.model_validate(s["properties"]) for s in data.get("sheets", [])]
        self._titles = {s.title for s in sheets}
        return sorted(sheets, key=lambda s: s.index)

    async def list_sheets(self) -> list[SheetPropertiesSchema]:
        """Metric tabs only: the tab at position 0 is the dashboard and is skipped."""
        sheets = await self.sheets()
        if sheets:
            logger.debug("Skipping dashboard sheet: {}", sheets[0].title)
        return sheets[1:]

    async def values(self, title: str) -> ValueRangeSchema:
        """GET /spreadsheets/{id}/values/{range} - raw cell values of a tab."""
        data = await self._get(
            f"{self._spreadsheet_id}/values/{quote(_a1_range(title), safe='')}",
            params={
                "valueRenderOption": "UNFORMATTED_VALUE",
                "dateTimeRenderOption": "FORMATTED_STRING",
            },
        )
        return ValueRangeSchema.model_validate(data)

    async def get_rows(self, title: str) -> list[dict]:
        """Rows of one tab as header -> value mappings."""
        if title not in self._titles:
            await self.sheets()
            if title not in self._titles:
                raise SheetNotFoundError(title)

        try:
            value_range = await self.values(title)
        except UpstreamError as e:
            # Sheets answers 400 "Unable to parse range" for a tab deleted since listing
            if isinstance(e.__cause__, httpx.HTTPStatusError) and e.__cause__.response.status_code == 400:
                self._titles.discard(title)
                raise SheetNotFoundError(title) from e
            raise
        rows = rows_to_dicts(value_range.values)
        logger.info("Fetched {} rows from sheet {}", len(rows), title)
        return rows
