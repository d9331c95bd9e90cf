"""API routers."""
from .devices import router as devices_router
from .icloud_profiles import router as icloud_profiles_router
from .social_accounts import router as social_accounts_router
from .proxies import router as proxies_router
from .games import router as games_router
from .categories import router as categories_router
from .content import router as content_router
from .onboarding import router as onboarding_router
from .reports import router as reports_router
from .refund_requests import router as refund_requests_router
from .support_tickets import router as support_tickets_router
from .relationships import router as relationships_router
from .characters import router as characters_router
from .feature_flags import router as feature_flags_router
from .me import router as me_router
from .users import router as users_router
from .profile import router as profile_router

__all__ = [
    "devices_router",
    "icloud_profiles_router",
    "social_accounts_router",
    "proxies_router",
    "games_router",
    "categories_router",
    "content_router",
    "onboarding_router",
    "reports_router",
    "refund_requests_router",
    "support_tickets_router",
    "relationships_router",
    "characters_router",
    "feature_flags_router",
    "me_router",
    "users_router",
    "profile_router",
]
