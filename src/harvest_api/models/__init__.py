"""Resource, request, option and list models for the Harvest v2 API."""

from .base import (
    HarvestModel,
    QueryParam,
    PageLinks,
    Pagination,
    ListOptions,
    DEFAULT_PER_PAGE,
    MAX_PER_PAGE,
    MAX_LOOKUP_PER_PAGE,
)
from .clients import (
    Client,
    ClientList,
    ClientListOptions,
    ClientCreateRequest,
    ClientUpdateRequest,
    ClientContact,
    ClientContactList,
    ClientContactListOptions,
    ClientContactCreateRequest,
    ClientContactUpdateRequest,
)
from .company import Company
from .users import (
    User,
    UserList,
    UserListOptions,
    UserCreateRequest,
    UserUpdateRequest,
)
from .tasks import (
    Task,
    TaskList,
    TaskListOptions,
    TaskCreateRequest,
    TaskUpdateRequest,
)
from .roles import (
    Role,
    RoleList,
    RoleListOptions,
    RoleCreateRequest,
    RoleUpdateRequest,
)
from .projects import (
    Project,
    ProjectList,
    ProjectListOptions,
    ProjectCreateRequest,
    ProjectUpdateRequest,
)
from .assignments import (
    ProjectTaskAssignment,
    ProjectTaskAssignmentList,
    ProjectTaskAssignmentListOptions,
    ProjectTaskAssignmentCreateRequest,
    ProjectTaskAssignmentUpdateRequest,
    ProjectUserAssignment,
    ProjectUserAssignmentList,
    ProjectUserAssignmentListOptions,
    ProjectUserAssignmentCreateRequest,
    ProjectUserAssignmentUpdateRequest,
    UserProjectAssignment,
    UserProjectAssignmentList,
    UserProjectAssignmentListOptions,
)
from .estimates import (
    EstimateEvent,
    EstimateLineItem,
    Estimate,
    EstimateList,
    EstimateListOptions,
    EstimateLineItemRequest,
    EstimateCreateRequest,
    EstimateUpdateRequest,
    EstimateItemCategory,
    EstimateItemCategoryList,
    EstimateItemCategoryListOptions,
    EstimateItemCategoryRequest,
    EstimateMessageRecipient,
    EstimateMessage,
    EstimateMessageList,
    EstimateMessageListOptions,
    EstimateMessageCreateRequest,
)
from .retainers import (
    Retainer,
    RetainerList,
    RetainerListOptions,
)
from .invoices import (
    InvoiceEvent,
    InvoiceLineItem,
    Invoice,
    InvoiceList,
    InvoiceListOptions,
    InvoiceLineItemRequest,
    InvoiceTimeImport,
    InvoiceExpensesImport,
    InvoiceLineItemsImport,
    InvoiceCreateRequest,
    InvoiceUpdateRequest,
    InvoiceItemCategory,
    InvoiceItemCategoryList,
    InvoiceItemCategoryListOptions,
    InvoiceItemCategoryRequest,
    InvoiceMessageRecipient,
    InvoiceMessage,
    InvoiceMessageList,
    InvoiceMessageListOptions,
    InvoiceMessageCreateRequest,
    PaymentGateway,
    InvoicePayment,
    InvoicePaymentList,
    InvoicePaymentListOptions,
    InvoicePaymentCreateRequest,
)
from .expenses import (
    ExpenseCategory,
    ExpenseCategoryList,
    ExpenseCategoryListOptions,
    ExpenseCategoryRequest,
    Receipt,
    Expense,
    ExpenseList,
    ExpenseListOptions,
    ExpenseCreateRequest,
    ExpenseUpdateRequest,
)
from .time_entries import (
    ExternalReference,
    TimeEntry,
    TimeEntryList,
    TimeEntryListOptions,
    TimeEntryCreateViaDuration,
    TimeEntryCreateViaStartEndTime,
    TimeEntryUpdateRequest,
)

__all__ = [
    "HarvestModel",
    "QueryParam",
    "PageLinks",
    "Pagination",
    "ListOptions",
    "DEFAULT_PER_PAGE",
    "MAX_PER_PAGE",
    "MAX_LOOKUP_PER_PAGE",
    "Client",
    "ClientList",
    "ClientListOptions",
    "ClientCreateRequest",
    "ClientUpdateRequest",
    "ClientContact",
    "ClientContactList",
    "ClientContactListOptions",
    "ClientContactCreateRequest",
    "ClientContactUpdateRequest",
    "Company",
    "User",
    "UserList",
    "UserListOptions",
    "UserCreateRequest",
    "UserUpdateRequest",
    "Task",
    "TaskList",
    "TaskListOptions",
    "TaskCreateRequest",
    "TaskUpdateRequest",
    "Role",
    "RoleList",
    "RoleListOptions",
    "RoleCreateRequest",
    "RoleUpdateRequest",
    "Project",
    "ProjectList",
    "ProjectListOptions",
    "ProjectCreateRequest",
    "ProjectUpdateRequest",
    "ProjectTaskAssignment",
    "ProjectTaskAssignmentList",
    "ProjectTaskAssignmentListOptions",
    "ProjectTaskAssignmentCreateRequest",
    "ProjectTaskAssignmentUpdateRequest",
    "ProjectUserAssignment",
    "ProjectUserAssignmentList",
    "ProjectUserAssignmentListOptions",
    "ProjectUserAssignmentCreateRequest",
    "ProjectUserAssignmentUpdateRequest",
    "UserProjectAssignment",
    "UserProjectAssignmentList",
    "UserProjectAssignmentListOptions",
    "EstimateEvent",
    "EstimateLineItem",
    "Estimate",
    "EstimateList",
    "EstimateListOptions",
    "EstimateLineItemRequest",
    "EstimateCreateRequest",
    "EstimateUpdateRequest",
    "EstimateItemCategory",
    "EstimateItemCategoryList",
    "EstimateItemCategoryListOptions",
    "EstimateItemCategoryRequest",
    "EstimateMessageRecipient",
    "EstimateMessage",
    "EstimateMessageList",
    "EstimateMessageListOptions",
    "EstimateMessageCreateRequest",
    "Retainer",
    "RetainerList",
    "RetainerListOptions",
    "InvoiceEvent",
    "InvoiceLineItem",
    "Invoice",
    "InvoiceList",
    "InvoiceListOptions",
    "InvoiceLineItemRequest",
    "InvoiceTimeImport",
    "InvoiceExpensesImport",
    "InvoiceLineItemsImport",
    "InvoiceCreateRequest",
    "InvoiceUpdateRequest",
    "InvoiceItemCategory",
    "InvoiceItemCategoryList",
    "InvoiceItemCategoryListOptions",
    "InvoiceItemCategoryRequest",
    "InvoiceMessageRecipient",
    "InvoiceMessage",
    "InvoiceMessageList",
    "InvoiceMessageListOptions",
    "InvoiceMessageCreateRequest",
    "PaymentGateway",
    "InvoicePayment",
    "InvoicePaymentList",
    "InvoicePaymentListOptions",
    "InvoicePaymentCreateRequest",
    "ExpenseCategory",
    "ExpenseCategoryList",
    "ExpenseCategoryListOptions",
    "ExpenseCategoryRequest",
    "Receipt",
    "Expense",
    "ExpenseList",
    "ExpenseListOptions",
    "ExpenseCreateRequest",
    "ExpenseUpdateRequest",
    "ExternalReference",
    "TimeEntry",
    "TimeEntryList",
    "TimeEntryListOptions",
    "TimeEntryCreateViaDuration",
    "TimeEntryCreateViaStartEndTime",
    "TimeEntryUpdateRequest",
]
