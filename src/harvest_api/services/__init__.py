"""Resource services layered on the HarvestClient request pipeline."""

from .base import Service
from .clients import ClientService
from .company import CompanyService
from .estimates import EstimateService
from .expenses import ExpenseService
from .invoices import InvoiceService
from .projects import ProjectService
from .retainers import RetainerService
from .roles import RoleService
from .tasks import TaskService
from .timesheets import TimesheetService
from .users import UserService

__all__ = [
    "Service",
    "ClientService",
    "CompanyService",
    "EstimateService",
    "ExpenseService",
    "InvoiceService",
    "ProjectService",
    "RetainerService",
    "RoleService",
    "TaskService",
    "TimesheetService",
    "UserService",
]
