from .content_routes import content_bp
from .social_routes import social_bp
from .registration_routes import registration_bp

__all__ = ['content_bp', 'social_bp', 'registration_bp']
