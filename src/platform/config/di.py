"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.parking.driven_adapter.repo.payment_command_repo_impl import (
    PaymentCommandRepoImpl,
)
from src.service.parking.driven_adapter.repo.reservation_query_repo_impl import (
    ReservationQueryRepoImpl,
)
from src.service.parking.driven_adapter.repo.slot_reader_impl import RichSlotReader
from src.service.parking.driven_adapter.repo.user_command_repo_impl import UserCommandRepoImpl
from src.service.parking.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl
from src.service.parking.driven_adapter.repo.vehicle_command_repo_impl import (
    VehicleCommandRepoImpl,
)
from src.service.parking.driven_adapter.repo.vehicle_query_repo_impl import VehicleQueryRepoImpl


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database
    database = providers.Singleton(Database, config=config_service)

    # Transactional unit of work (new one per request)
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork, session_maker=database.provided.session_maker
    )

    # Repositories (stateless - use session_factory per call)
    user_command_repo = providers.Singleton(
        UserCommandRepoImpl, session_factory=database.provided.session
    )
    user_query_repo = providers.Singleton(
        UserQueryRepoImpl, session_factory=database.provided.session
    )
    vehicle_command_repo = providers.Singleton(
        VehicleCommandRepoImpl, session_factory=database.provided.session
    )
    vehicle_query_repo = providers.Singleton(
        VehicleQueryRepoImpl, session_factory=database.provided.session
    )
    reservation_query_repo = providers.Singleton(
        ReservationQueryRepoImpl, session_factory=database.provided.session
    )
    payment_command_repo = providers.Singleton(
        PaymentCommandRepoImpl, session_factory=database.provided.session
    )

    # Slot listing strategy; main.py lifespan overrides it after inspecting the schema
    slot_reader = providers.Singleton(RichSlotReader, session_factory=database.provided.session)


container = Container()
