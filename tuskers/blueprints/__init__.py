from .admin import admin_bp
from .api import content_bp, registration_bp, social_bp
from .auth import auth_bp

__all__ = ['admin_bp', 'auth_bp', 'content_bp', 'registration_bp', 'social_bp']
