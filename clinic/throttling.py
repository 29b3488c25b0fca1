"""
Rate limits.  Rates live in ``REST_FRAMEWORK['DEFAULT_THROTTLE_RATES']``.
"""
from rest_framework.throttling import SimpleRateThrottle, UserRateThrottle


class LoginRateThrottle(SimpleRateThrottle):
    """Per client address, whether or not a token was sent."""
    scope = 'login'

    def get_cache_key(self, request, view):
        return self.cache_format % {'scope': self.scope, 'ident': self.get_ident(request)}


class ResourceRateThrottle(UserRateThrottle):
    scope = 'resources'


class SchedulingRateThrottle(UserRateThrottle):
    scope = 'schedulings'
