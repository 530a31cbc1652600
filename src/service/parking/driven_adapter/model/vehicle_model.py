from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class VehicleModel(Base):
    __tablename__ = 'vehicles'

    vehicle_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('users.user_id'), nullable=False, index=True
    )
    reg_no: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)
    # Compact storage code: c / b / e
    type: Mapped[str] = mapped_column(String(1), nullable=False)

    def __repr__(self):
        return f'<VehicleModel(vehicle_id={self.vehicle_id}, reg_no={self.reg_no}, type={self.type})>'
