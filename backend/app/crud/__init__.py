from .crud_organization import organization
from .crud_service import service
from .crud_modifier import modifier
from . import crud_client
from . import crud_assessment

# Usage: ``crud.service.get_service(...)`` for the class-based helpers,
# ``crud.crud_client.find_by_email(...)`` for the module-level ones.
