from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional


class InquiryRequest(BaseModel):
    """Fund or stock file request.

    Every field is optional at the schema level; the notifier decides which
    ones are required for the given type so it can report its own messages.
    """
    model_config = ConfigDict(populate_by_name=True)

    type: Optional[str] = None
    fund_name: Optional[str] = Field(None, alias="fundName")
    stock_name: Optional[str] = Field(None, alias="stockName")
    isin: Optional[str] = None
    sedol_or_ticker: Optional[str] = Field(None, alias="sedolOrTicker")

    @field_validator("fund_name", "stock_name", "isin", "sedol_or_ticker", mode="before")
    @classmethod
    def numbers_to_string(cls, v):
        """Identifiers sent as JSON numbers are accepted as their text form"""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v
