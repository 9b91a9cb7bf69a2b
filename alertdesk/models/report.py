"""Reference data models for reports and price symbols."""

from pydantic import BaseModel, Field


class Report(BaseModel):
    """A selectable report, copied by value into report alert configs."""

    id: str = Field(..., description="Catalog report ID")
    name: str = Field(..., description="Report title")
    geography: str = Field(..., description="Region the report covers")
    commodity: str = Field(..., description="Commodity the report covers")
    type: str = Field(..., description="Report category (free text)")

    model_config = {"frozen": True}


class PriceSymbol(BaseModel):
    """A selectable price assessment symbol."""

    symbol: str = Field(..., min_length=1, description="Symbol code")
    name: str = Field(..., description="Display name")
    commodity: str = Field(..., description="Commodity group")

    model_config = {"frozen": True}
