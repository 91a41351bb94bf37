from app.routes.dashboard import router as dashboard_router
from app.routes.accounts import router as accounts_router
from app.routes.contacts import router as contacts_router
from app.routes.leads import router as leads_router
from app.routes.opportunities import router as opportunities_router

__all__ = [
    'dashboard_router',
    'accounts_router',
    'contacts_router',
    'leads_router',
    'opportunities_router',
]
