from .accounts import AccountService
from .messaging import MessagingService
from .social_graph import SocialGraphService

__all__ = ["AccountService", "MessagingService", "SocialGraphService"]
