import logging
from typing import Optional

from .exceptions import LinkedDataProofException, ProofTypeMismatch
from .resolvers import DocumentLoader
from .results import ProofResult
from .suites import BbsBlsSignature2020, BbsBlsSignatureProof2020, LinkedDataProof

logger = logging.getLogger(__name__)


def split_proof(document: dict):
    try:
        proof = document["proof"]
    except KeyError:
        raise LinkedDataProofException("Document has no proof")

    if isinstance(proof, list):
        if len(proof) != 1:
            raise LinkedDataProofException(f"Expected a single proof, found {len(proof)}")
        proof = proof[0]

    if not isinstance(proof, dict):
        raise LinkedDataProofException("Document proof must be an object")

    return proof, {k: v for k, v in document.items() if k != "proof"}


def sign(document: dict, suite: BbsBlsSignature2020, purpose, document_loader=None) -> dict:
    document_loader = document_loader or DocumentLoader()
    unsigned = {k: v for k, v in document.items() if k != "proof"}
    proof = suite.create_proof(unsigned, purpose, document_loader)
    return {**unsigned, "proof": proof}


def derive(
    document: dict,
    reveal_document: dict,
    suite: Optional[BbsBlsSignatureProof2020] = None,
    document_loader=None,
    nonce: Optional[str] = None,
) -> dict:
    """
    Derives a selective disclosure proof from a document signed with
    BbsBlsSignature2020, revealing what `reveal_document` frames.
    """
    suite = suite or BbsBlsSignatureProof2020()
    document_loader = document_loader or DocumentLoader()
    proof, unsigned = split_proof(document)
    return suite.derive_proof(
        proof=proof,
        document=unsigned,
        reveal_document=reveal_document,
        document_loader=document_loader,
        nonce=nonce,
    )


def verify(
    document: dict,
    purpose,
    suites: Optional[list[LinkedDataProof]] = None,
    document_loader=None,
) -> ProofResult:
    """
    Verifies the proof attached to a document with the suite matching
    its type. Never raises: failures are reported in the result.
    """
    suites = suites or [BbsBlsSignatureProof2020(), BbsBlsSignature2020()]
    document_loader = document_loader or DocumentLoader()

    try:
        proof, unsigned = split_proof(document)
        matching = [suite for suite in suites if suite.type == proof.get("type")]
        if not matching:
            raise ProofTypeMismatch(f"No suite available for proof type {proof.get('type')!r}")
        return matching[0].verify_proof(proof, unsigned, purpose, document_loader)
    except Exception as exc:
        logger.warning(f"Failed to verify document: {exc}")
        return ProofResult(verified=False, error=exc)
