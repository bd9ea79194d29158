"""Space model."""
from __future__ import annotations

import enum
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from sqlalchemy import Boolean, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base

if TYPE_CHECKING:
    from .location import Location


class SpaceType(str, enum.Enum):
    HOTDESK = "hotdesk"
    MEETING_ROOM = "meeting_room"
    PRIVATE_OFFICE = "private_office"


class Space(Base):
    """Bookable workspace unit at a location.

    ``type`` is stored as plain text so new kinds of space can be added without a
    schema migration; ``SpaceType`` lists the kinds the search form offers.
    """

    __tablename__ = "spaces"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    location_id: Mapped[str | None] = mapped_column(ForeignKey("locations.id", ondelete="SET NULL"))
    name: Mapped[str] = mapped_column(String, nullable=False)
    type: Mapped[str] = mapped_column(String, nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    price_per_month: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    image_url: Mapped[str | None] = mapped_column(String)
    amenities: Mapped[Any] = mapped_column(JSONB, default=list, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    location: Mapped["Location | None"] = relationship("Location", back_populates="spaces")
