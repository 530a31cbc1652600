from typing import Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class SlotModel(Base):
    __tablename__ = 'parking_slots'

    slot_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    lot_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('parking_lots.lot_id'), nullable=False, index=True
    )
    slot_name: Mapped[str] = mapped_column(String(20), nullable=False)
    slot_type: Mapped[str] = mapped_column(String(20), nullable=False)
    status: Mapped[str] = mapped_column(String(20), default='available', nullable=False)
    fixed_for: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    def __repr__(self):
        return f'<SlotModel(slot_id={self.slot_id}, slot_name={self.slot_name}, status={self.status})>'
