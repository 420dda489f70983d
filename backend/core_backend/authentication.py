"""
Caller identity for API requests.

Credentials are verified upstream by the identity gateway, which forwards the
caller uid in a request header. This backend trusts that uid as given and uses
it as the partition key for every query.
"""
import logging

from django.conf import settings
from rest_framework.authentication import BaseAuthentication

logger = logging.getLogger(__name__)


class CallerIdentity:
    """Minimal user object carrying the verified uid of the caller."""

    is_authenticated = True
    is_anonymous = False

    def __init__(self, uid: str):
        self.uid = uid

    @property
    def pk(self):
        return self.uid

    def __str__(self):
        return self.uid

    def __eq__(self, other):
        return isinstance(other, CallerIdentity) and other.uid == self.uid

    def __hash__(self):
        return hash(self.uid)


class GatewayIdentityAuthentication(BaseAuthentication):
    """
    Reads the caller uid from the gateway header (``IDENTITY_HEADER``).

    Returns None when the header is missing so that permission classes
    decide whether anonymous access is allowed.
    """

    def authenticate(self, request):
        header_name = getattr(settings, "IDENTITY_HEADER", "X-User-Id")
        uid = (request.headers.get(header_name) or "").strip()
        if not uid:
            return None
        return CallerIdentity(uid), None

    def authenticate_header(self, request):
        return getattr(settings, "IDENTITY_HEADER", "X-User-Id")
