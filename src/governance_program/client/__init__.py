"""
governance_program.client

Manager facades, one per governance concept, and the client that bundles them.
"""

from governance_program.client.base import GovernanceProgramBaseClient
from governance_program.client.certifications import CertificationManager
from governance_program.client.classification_levels import GovernanceClassificationLevelManager
from governance_program.client.definitions import GovernanceDefinitionManager
from governance_program.client.domains import GovernanceDomainManager
from governance_program.client.external_references import ExternalReferenceManager
from governance_program.client.licenses import LicenseManager
from governance_program.client.metrics import GovernanceMetricsManager
from governance_program.client.program import GovernanceProgramClient, create_client
from governance_program.client.related_elements import RelatedElementsManager
from governance_program.client.roles import GovernanceRoleManager
from governance_program.client.status_levels import GovernanceStatusLevelManager
from governance_program.client.subject_areas import SubjectAreaManager
from governance_program.client.zones import GovernanceZoneManager

__all__ = [
    "CertificationManager",
    "ExternalReferenceManager",
    "GovernanceClassificationLevelManager",
    "GovernanceDefinitionManager",
    "GovernanceDomainManager",
    "GovernanceMetricsManager",
    "GovernanceProgramBaseClient",
    "GovernanceProgramClient",
    "GovernanceRoleManager",
    "GovernanceStatusLevelManager",
    "GovernanceZoneManager",
    "LicenseManager",
    "RelatedElementsManager",
    "SubjectAreaManager",
    "create_client",
]
