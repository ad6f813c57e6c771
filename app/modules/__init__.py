"""Domain modules package."""

from app.modules.identity import models as identity_models  # noqa: F401
from app.modules.members import models as members_models  # noqa: F401
