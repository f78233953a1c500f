from .api_client import LandingAdminClient

__all__ = ["LandingAdminClient"]
