from .list import (
    Certification,
    CertificationsResult,
    MovieCertifications,
    TVShowCertifications,
)

__all__ = [
    "Certification",
    "CertificationsResult",
    "MovieCertifications",
    "TVShowCertifications",
]
