from .organization import Organization
from .service import Service, ServiceType
from .modifier import Modifier
from .client import Client
from .assessment import Assessment, AssessmentStatus

__all__ = [
    "Organization",
    "Service",
    "ServiceType",
    "Modifier",
    "Client",
    "Assessment",
    "AssessmentStatus",
]
