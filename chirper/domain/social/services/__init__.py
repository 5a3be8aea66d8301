"""
Social domain services.

Stateless services that encode social-graph and feed rules.
"""

from .social_graph_service import SocialGraphService
from .timeline_service import TimelineService

__all__ = ["SocialGraphService", "TimelineService"]
