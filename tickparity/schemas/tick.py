"""
PURPOSE: Pydantic model for a single market tick.

A tick carries the quote, its terminal digit, and the digit's parity. Ticks
are produced by the feed collaborator and only read by the engine.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from tickparity.config.constants import Parity
from tickparity.utils.validators import is_even_digit, last_digit_of_quote


class Tick(BaseModel):
    """
    PURPOSE: One price update with its derived terminal digit.

    Attributes:
        digit: Terminal digit of the quote (0-9).
        is_even: Whether digit is even.
        quote: Raw price quote.
        timestamp: Epoch seconds reported by the feed.
    """

    model_config = ConfigDict(frozen=True)

    digit: int = Field(ge=0, le=9, description="Terminal digit of the quote")
    is_even: bool = Field(description="Parity flag of the terminal digit")
    quote: float = Field(description="Raw price quote")
    timestamp: int = Field(default=0, description="Epoch seconds")

    @model_validator(mode="after")
    def check_parity(self) -> "Tick":
        """Parity flag must agree with the digit."""
        if self.is_even != is_even_digit(self.digit):
            raise ValueError(
                f"is_even={self.is_even} disagrees with digit {self.digit}"
            )
        return self

    @property
    def parity(self) -> Parity:
        return Parity.of(self.digit)

    @classmethod
    def from_quote(cls, quote: float, epoch: int = 0) -> "Tick":
        """
        PURPOSE: Build a tick from a raw quote, deriving digit and parity.

        Args:
            quote: Price quote as delivered by the feed.
            epoch: Feed timestamp in epoch seconds.

        Returns:
            Tick: Validated tick.
        """
        digit = last_digit_of_quote(quote)
        return cls(digit=digit, is_even=is_even_digit(digit), quote=quote, timestamp=epoch)
