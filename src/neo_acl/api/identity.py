"""Principal descriptors from verified token claims."""

import logging
from typing import Any, Mapping, Optional

from ..authorizers.entities import Identity
from ..config.settings import AclSettings

logger = logging.getLogger(__name__)


def realm_from_issuer(issuer: str) -> str:
    """Keycloak issuers end in /realms/<realm>; the realm is the last segment."""
    return issuer.rstrip("/").split("/")[-1]


def identity_from_claims(
    claims: Optional[Mapping[str, Any]],
    settings: AclSettings,
) -> Optional[Identity]:
    """
    Build the principal descriptor for a request.

    In local mode every request carries the configured static identity.
    Otherwise the claims set by the upstream authentication layer name the
    realm (issuer) and username to look up. Missing claims give no identity,
    which only guarded routes reject.
    """
    if settings.local_mode:
        return Identity.for_static(
            roles=settings.local_roles,
            username=settings.local_username,
            member_id=settings.local_member_id,
        )

    if not claims:
        return None

    issuer = claims.get("iss")
    username = claims.get("preferred_username")
    if not issuer or not username:
        logger.warning("Token claims lack 'iss' or 'preferred_username', no identity built")
        return None

    return Identity.for_external(
        store_ref=realm_from_issuer(issuer),
        username=username,
        member_id=claims.get(settings.member_id_claim),
    )
