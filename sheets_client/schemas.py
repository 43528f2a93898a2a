"""Sheets API response schemas."""

from pydantic import BaseModel, Field


class GridPropertiesSchema(BaseModel):
    """Grid size of a sheet."""

    row_count: int = Field(alias="rowCount", default=0)
    column_count: int = Field(alias="columnCount", default=0)

    class Config:
        populate_by_name = True


class SheetPropertiesSchema(BaseModel):
    """One tab of the spreadsheet.

    The API omits zero-valued fields, so ``sheetId`` and ``index`` default to 0.
    """

    sheet_id: int = Field(alias="sheetId", default=0)
    title: str
    index: int = 0
    grid_properties: GridPropertiesSchema = Field(alias="gridProperties", default_factory=GridPropertiesSchema)

    class Config:
        populate_by_name = True

    @property
    def row_count(self) -> int:
        return self.grid_properties.row_count


class ValueRangeSchema(BaseModel):
    """Cell values of one range, row-major."""

    range: str = ""
    values: list[list[str | int | float | bool]] = []
