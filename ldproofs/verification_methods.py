import logging

from pyld import jsonld

from .exceptions import (
    MissingVerificationMethodReference,
    VerificationMethodNotFound,
    VerificationMethodRevoked,
)
from .schemas import SECURITY_CONTEXT_URL

logger = logging.getLogger(__name__)


def get_verification_method_reference(proof: dict) -> str:
    verification_method = proof.get("verificationMethod")

    if isinstance(verification_method, dict):
        verification_method = verification_method.get("id")

    if not verification_method:
        raise MissingVerificationMethodReference('No "verificationMethod" found in proof')

    return verification_method


def get_verification_method(proof: dict, document_loader) -> dict:
    """
    Loads the key document referenced by a proof, framed with the
    security context so that its properties have predictable names.
    """
    verification_method = get_verification_method_reference(proof)

    result = jsonld.frame(
        verification_method,
        {
            "@context": SECURITY_CONTEXT_URL,
            "@embed": "@always",
            "id": verification_method,
        },
        {
            "documentLoader": document_loader,
            "base": "",
            "expandContext": SECURITY_CONTEXT_URL,
        },
    )

    if not result or result.get("id") != verification_method:
        raise VerificationMethodNotFound(f"Verification method {verification_method} not found")

    if result.get("revoked") is not None:
        logger.warning(f"Verification method {verification_method} has been revoked")
        raise VerificationMethodRevoked(
            f"The verification method {verification_method} has been revoked"
        )

    return result
