"""Mod model - catalog entries."""
from typing import Optional
from sqlalchemy import String, Text, Integer, Index
from sqlalchemy.orm import Mapped, mapped_column
from minemods.models.base import Base, CreatedAtMixin


class Mod(Base, CreatedAtMixin):
    __tablename__ = "mods"

    # Column names follow the original camelCase table so existing databases load as-is
    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, default="")
    long_description: Mapped[Optional[str]] = mapped_column("longDescription", Text, nullable=True)
    version: Mapped[str] = mapped_column(Text, default="")
    author: Mapped[str] = mapped_column(Text, default="")
    category: Mapped[str] = mapped_column(Text, default="")
    downloads: Mapped[int] = mapped_column(Integer, default=0, server_default="0", nullable=False)
    image_url: Mapped[Optional[str]] = mapped_column("imageUrl", Text, nullable=True)

    __table_args__ = (
        Index("idx_mods_downloads", "downloads"),
        Index("idx_mods_category", "category"),
    )

    def __repr__(self):
        return f"<Mod {self.id} {self.name!r}>"
