"""KPSPublic identity verification client."""
from .models import VerificationRequest, VerificationResult, VerificationStatus, normalize_name
from .transport import RequestsTransport, Transport
from .verifier import IdentityVerifier, check, verify

__all__ = [
    'IdentityVerifier',
    'RequestsTransport',
    'Transport',
    'VerificationRequest',
    'VerificationResult',
    'VerificationStatus',
    'check',
    'normalize_name',
    'verify',
]
