from .service import ServiceBase, ServiceCreate, ServiceUpdate, ServiceResponse
from .modifier import ModifierCreate, ModifierResponse
from .organization import (
    OrganizationCreate,
    OrganizationResponse,
    OrganizationWithServices,
    BookingPage,
)
from .client import ClientContact, ClientCreate, ClientUpdate, ClientResponse
from .estimate import EstimateRequest, EstimateRead, LineItemRead
from .assessment import (
    AssessmentCreate,
    AssessmentStatusUpdate,
    AssessmentResponse,
    CalendarEntry,
)

__all__ = [
    "ServiceBase",
    "ServiceCreate",
    "ServiceUpdate",
    "ServiceResponse",
    "ModifierCreate",
    "ModifierResponse",
    "OrganizationCreate",
    "OrganizationResponse",
    "OrganizationWithServices",
    "BookingPage",
    "ClientContact",
    "ClientCreate",
    "ClientUpdate",
    "ClientResponse",
    "EstimateRequest",
    "EstimateRead",
    "LineItemRead",
    "AssessmentCreate",
    "AssessmentStatusUpdate",
    "AssessmentResponse",
    "CalendarEntry",
]
