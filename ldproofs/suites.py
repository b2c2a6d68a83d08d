import base64
import binascii
import logging
import secrets
from datetime import datetime, timezone
from typing import Optional

from . import canonicalization
from .exceptions import (
    LinkedDataProofException,
    ProofPurposeError,
    ProofTypeMismatch,
    SignatureDecodeError,
    SignaturePrimitiveError,
    StatementReconciliationError,
)
from .keys import Bls12381G2KeyPair
from .primitives import BaseSignaturePrimitive
from .results import ProofResult
from .settings import app_settings
from .statements import get_reveal_indices, restore_blank_nodes, stabilize_blank_nodes
from .verification_methods import get_verification_method

logger = logging.getLogger(__name__)

DISCLOSURE_FIELDS = ("proof", "nonce", "revealStatements", "totalStatements")


def b64encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def b64decode(value, field_name: str) -> bytes:
    if not isinstance(value, str):
        raise SignatureDecodeError(f'Proof "{field_name}" must be a base64 string')
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise SignatureDecodeError(f'Proof "{field_name}" is not valid base64: {exc}') from exc


def generate_nonce() -> str:
    return b64encode(secrets.token_bytes(app_settings.NONCE_SIZE))


def find_missing_properties(framed, path=""):
    """
    Framing fills properties requested by a frame but absent from the
    source graph with null. Returns the path of each of them.
    """
    missing = []
    if isinstance(framed, dict):
        for key, value in framed.items():
            if key == "@context":
                continue
            child_path = f"{path}.{key}" if path else key
            if value is None:
                missing.append(child_path)
            else:
                missing.extend(find_missing_properties(value, child_path))
    elif isinstance(framed, list):
        for item in framed:
            missing.extend(find_missing_properties(item, path))
    return missing


class LinkedDataProof:
    """
    Contract shared by every proof suite: how a document and its proof
    are turned into statements, and how the key that checks them is found.
    """

    type: Optional[str] = None
    signature_key: Optional[str] = None

    def __init__(
        self,
        key: Optional[Bls12381G2KeyPair] = None,
        primitive: Optional[BaseSignaturePrimitive] = None,
    ):
        self.key = key
        self.primitive = primitive or app_settings.SIGNATURE_PRIMITIVE

    def canonize(self, document, document_loader) -> list[str]:
        return canonicalization.canonize_statements(document, document_loader)

    def create_verify_document_data(self, document: dict, document_loader) -> list[str]:
        document = {k: v for k, v in document.items() if k != "proof"}
        return self.canonize(document, document_loader)

    def create_verify_proof_data(self, proof: dict, document: dict, document_loader) -> list[str]:
        excluded = set(DISCLOSURE_FIELDS)
        if self.signature_key is not None:
            excluded.add(self.signature_key)

        proof = {k: v for k, v in proof.items() if k not in excluded}
        if "@context" not in proof and "@context" in document:
            proof["@context"] = document["@context"]
        return self.canonize(proof, document_loader)

    def create_verify_data(self, proof: dict, document: dict, document_loader) -> list[str]:
        proof_statements = self.create_verify_proof_data(proof, document, document_loader)
        document_statements = self.create_verify_document_data(document, document_loader)
        return proof_statements + document_statements

    def get_verification_method(self, proof: dict, document_loader) -> dict:
        return get_verification_method(proof, document_loader)

    def get_public_key(self, verification_method: dict) -> bytes:
        if self.key is not None:
            return self.key.public_key
        return Bls12381G2KeyPair.from_verification_method(verification_method).public_key

    def validate_purpose(self, proof, document, purpose, verification_method, document_loader):
        purpose_result = purpose.validate(
            proof,
            document=document,
            suite=self,
            verification_method=verification_method,
            document_loader=document_loader,
        )
        if not purpose_result.valid:
            raise purpose_result.error or ProofPurposeError("Invalid proof purpose")
        return purpose_result

    def verify_proof(self, proof: dict, document: dict, purpose, document_loader) -> ProofResult:
        raise NotImplementedError


class BbsBlsSignature2020(LinkedDataProof):
    type = "BbsBlsSignature2020"
    signature_key = "signature"

    def create_proof(
        self,
        document: dict,
        purpose,
        document_loader,
        created: Optional[datetime] = None,
    ) -> dict:
        if self.key is None or self.key.id is None:
            raise LinkedDataProofException("A key pair with an id is required for signing")

        created = created or datetime.now(timezone.utc)
        proof = {
            "type": self.type,
            "created": created.strftime("%Y-%m-%dT%H:%M:%SZ"),
            "verificationMethod": self.key.id,
        }
        proof = purpose.update(proof)

        statements = self.create_verify_data(proof, document, document_loader)
        logger.debug(f"Signing {len(statements)} statements with {self.key}")
        signature = self.primitive.sign(self.key, statements)
        return {**proof, self.signature_key: b64encode(signature)}

    def verify_proof(self, proof, document, purpose, document_loader):
        try:
            signature = b64decode(proof.get(self.signature_key), self.signature_key)
            statements = self.create_verify_data(proof, document, document_loader)

            verification_method = self.get_verification_method(proof, document_loader)
            public_key = self.get_public_key(verification_method)

            if not self.primitive.verify_signature(public_key, statements, signature):
                raise SignaturePrimitiveError("Invalid signature")

            purpose_result = self.validate_purpose(
                proof, document, purpose, verification_method, document_loader
            )
            return ProofResult(verified=True, proof=proof, purpose_result=purpose_result)
        except Exception as exc:
            logger.warning(f"Failed to verify {self.type} proof: {exc}")
            return ProofResult(verified=False, error=exc, proof=proof)


class BbsBlsSignatureProof2020(LinkedDataProof):
    """
    Selective disclosure proofs derived from a BbsBlsSignature2020.

    The derived proof reveals every proof statement and the document
    statements selected by a JSON-LD frame, and is verifiable against
    the issuer's public key without the original signature.
    """

    type = "BbsBlsSignatureProof2020"
    base_suite_class = BbsBlsSignature2020

    @property
    def base_suite(self) -> BbsBlsSignature2020:
        return self.base_suite_class(key=self.key, primitive=self.primitive)

    def assert_compatible_proof_type(self, proof: dict):
        if proof.get("type") != self.base_suite_class.type:
            raise ProofTypeMismatch(
                f"Proof document proof incompatible, expected proof type of "
                f"{self.base_suite_class.type}"
            )

    def get_signature_bytes(self, proof: dict) -> bytes:
        signature_key = self.base_suite_class.signature_key
        return b64decode(proof.get(signature_key), signature_key)

    def get_reveal_document(
        self, document_statements: list[str], reveal_document: dict, document_loader
    ):
        """
        Frames the signed statements with the holder's reveal document.

        Returns the framed document and its canonical statements, still
        carrying the stabilized blank node identifiers.
        """
        stabilized_statements = stabilize_blank_nodes(document_statements)
        expanded = canonicalization.from_statements(stabilized_statements)
        revealed = canonicalization.frame(expanded, reveal_document, document_loader)

        missing = find_missing_properties(revealed)
        if missing:
            raise StatementReconciliationError(
                f"Revealed properties not present in source document: {', '.join(missing)}"
            )

        revealed_statements = self.base_suite.create_verify_document_data(
            revealed, document_loader
        )
        return revealed, stabilized_statements, revealed_statements

    def derive_proof(
        self,
        proof: dict,
        document: dict,
        reveal_document: dict,
        document_loader,
        nonce: Optional[str] = None,
    ) -> dict:
        self.assert_compatible_proof_type(proof)
        signature = self.get_signature_bytes(proof)

        base_suite = self.base_suite
        document_statements = base_suite.create_verify_document_data(document, document_loader)
        proof_statements = base_suite.create_verify_proof_data(proof, document, document_loader)

        revealed, stabilized_statements, revealed_statements = self.get_reveal_document(
            document_statements, reveal_document, document_loader
        )

        reveal_indices = get_reveal_indices(
            stabilized_statements, revealed_statements, len(proof_statements)
        )

        if not nonce:
            nonce = generate_nonce()

        all_statements = proof_statements + document_statements

        if self.key is None:
            verification_method = self.get_verification_method(proof, document_loader)
            public_key = self.get_public_key(verification_method)
        else:
            public_key = self.key.public_key

        logger.debug(
            f"Deriving proof over {len(all_statements)} statements, revealing {reveal_indices}"
        )
        output_proof = self.primitive.create_proof(
            signature=signature,
            public_key=public_key,
            messages=all_statements,
            nonce=nonce.encode("utf-8"),
            revealed=reveal_indices,
        )

        input_proof = {
            k: v for k, v in proof.items() if k not in ("type", self.base_suite_class.signature_key)
        }

        derived_proof = {
            "type": self.type,
            **input_proof,
            "proof": b64encode(output_proof),
            "revealStatements": reveal_indices,
            "totalStatements": len(all_statements),
            "nonce": nonce,
        }
        logger.info(
            f"Derived {self.type} revealing {len(reveal_indices)} of {len(all_statements)} statements"
        )
        return {**revealed, "proof": derived_proof}

    def _get_derived_proof_parameters(self, proof: dict):
        proof_bytes = b64decode(proof.get("proof"), "proof")
        total_statements = proof.get("totalStatements")
        reveal_statements = proof.get("revealStatements")
        nonce = proof.get("nonce")

        if not isinstance(total_statements, int) or isinstance(total_statements, bool):
            raise SignatureDecodeError('Proof "totalStatements" must be an integer')
        if not isinstance(reveal_statements, list) or not all(
            isinstance(index, int) and 0 <= index < total_statements
            for index in reveal_statements
        ):
            raise SignatureDecodeError(
                f'Proof "revealStatements" must be indices lower than {total_statements}'
            )
        if not isinstance(nonce, str):
            raise SignatureDecodeError('Proof "nonce" must be a string')

        return proof_bytes, total_statements, reveal_statements, nonce

    def verify_proof(self, proof, document, purpose, document_loader):
        try:
            if proof.get("type") != self.type:
                raise ProofTypeMismatch(f"Expected proof type of {self.type}")

            proof_bytes, total_statements, reveal_statements, nonce = (
                self._get_derived_proof_parameters(proof)
            )

            base_suite = self.base_suite
            # The issuer signed the proof metadata under the base signature type
            signed_proof = {**proof, "type": self.base_suite_class.type}
            proof_statements = base_suite.create_verify_proof_data(
                signed_proof, document, document_loader
            )
            document_statements = base_suite.create_verify_document_data(
                document, document_loader
            )
            statements_to_verify = proof_statements + restore_blank_nodes(document_statements)

            if len(statements_to_verify) != len(reveal_statements):
                raise SignaturePrimitiveError(
                    f"Proof reveals {len(reveal_statements)} statements, "
                    f"document has {len(statements_to_verify)}"
                )

            verification_method = self.get_verification_method(proof, document_loader)
            public_key = self.get_public_key(verification_method)

            verified = self.primitive.verify_proof(
                proof=proof_bytes,
                public_key=public_key,
                message_count=total_statements,
                messages=statements_to_verify,
                nonce=nonce.encode("utf-8"),
                revealed=reveal_statements,
            )
            if not verified:
                raise SignaturePrimitiveError("Invalid signature proof")

            purpose_result = self.validate_purpose(
                proof, document, purpose, verification_method, document_loader
            )
            logger.info(f"Verified {self.type} for {verification_method['id']}")
            return ProofResult(verified=True, proof=proof, purpose_result=purpose_result)
        except Exception as exc:
            logger.warning(f"Failed to verify {self.type} proof: {exc}")
            return ProofResult(verified=False, error=exc, proof=proof)


SUITES = {suite.type: suite for suite in (BbsBlsSignature2020, BbsBlsSignatureProof2020)}
