# app/services/dispatcher_service.py
from app.models.employee import Dispatcher
from app.services.table_service import TableService


class DispatcherService(TableService):
    model = Dispatcher
