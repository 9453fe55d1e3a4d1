"""
Service clients for the TCKN package.

Modules:
    kps: NVI KPSPublic SOAP client for TC identity number verification
"""
