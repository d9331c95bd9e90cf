"""Database models."""
from .device import Device
from .icloud_profile import ICloudProfile
from .social_account import SocialAccount, SOCIAL_PLATFORMS
from .proxy import Proxy, PROXY_TYPES
from .game import Game, Category
from .content import (
    WouldYouRatherQuestion,
    NeverHaveIEverStatement,
    MostLikelyToQuestion,
    RoleplayScenario,
    Position,
)
from .onboarding import QuizScreen, ConversionScreen, OnboardingComponent
from .moderation import Report, RefundRequest, SupportTicket, Connection, FriendRequest
from .character import AICharacter, CharacterReferenceImage, CharacterGeneratedImage
from .feature_flag import FeatureFlag
from .user_role import UserRole
from .profile import Profile

__all__ = [
    "Device",
    "ICloudProfile",
    "SocialAccount",
    "SOCIAL_PLATFORMS",
    "Proxy",
    "PROXY_TYPES",
    "Game",
    "Category",
    "WouldYouRatherQuestion",
    "NeverHaveIEverStatement",
    "MostLikelyToQuestion",
    "RoleplayScenario",
    "Position",
    "QuizScreen",
    "ConversionScreen",
    "OnboardingComponent",
    "Report",
    "RefundRequest",
    "SupportTicket",
    "Connection",
    "FriendRequest",
    "AICharacter",
    "CharacterReferenceImage",
    "CharacterGeneratedImage",
    "FeatureFlag",
    "UserRole",
    "Profile",
]
