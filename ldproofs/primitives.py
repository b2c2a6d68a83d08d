import logging

from .exceptions import SignaturePrimitiveError

logger = logging.getLogger(__name__)


def sort_revealed_messages(messages: list[str], revealed: list[int]) -> list[str]:
    """
    Orders disclosed messages by ascending statement index, the order in
    which a BBS+ proof pairs them with its revealed indices.
    """
    return [message for _, message in sorted(zip(revealed, messages), key=lambda pair: pair[0])]


class BaseSignaturePrimitive:
    """
    Interface to the pairing based BBS+ operations.

    Messages are passed as the list of canonical statements, nonces and
    keys as raw bytes. Implementations report a rejected input through
    SignaturePrimitiveError and an invalid proof by returning False.
    """

    def sign(self, key_pair, messages: list[str]) -> bytes:
        raise NotImplementedError

    def verify_signature(self, public_key: bytes, messages: list[str], signature: bytes) -> bool:
        raise NotImplementedError

    def create_proof(
        self,
        signature: bytes,
        public_key: bytes,
        messages: list[str],
        nonce: bytes,
        revealed: list[int],
    ) -> bytes:
        raise NotImplementedError

    def verify_proof(
        self,
        proof: bytes,
        public_key: bytes,
        message_count: int,
        messages: list[str],
        nonce: bytes,
        revealed: list[int],
    ) -> bool:
        raise NotImplementedError


class UrsaBbsSignaturePrimitive(BaseSignaturePrimitive):
    def sign(self, key_pair, messages):
        from ursa_bbs_signatures import BlsKeyPair, SignRequest, sign

        if key_pair.secret_key is None:
            raise SignaturePrimitiveError("A secret key is required for signing")

        try:
            bls_key_pair = BlsKeyPair(public_key=key_pair.public_key, secret_key=key_pair.secret_key)
            return sign(SignRequest(key_pair=bls_key_pair, messages=messages))
        except Exception as exc:
            raise SignaturePrimitiveError(f"Failed to sign messages: {exc}") from exc

    def verify_signature(self, public_key, messages, signature):
        from ursa_bbs_signatures import BlsKeyPair, VerifyRequest, verify

        try:
            request = VerifyRequest(
                key_pair=BlsKeyPair(public_key=public_key),
                signature=signature,
                messages=messages,
            )
            return verify(request)
        except Exception as exc:
            raise SignaturePrimitiveError(f"Failed to verify signature: {exc}") from exc

    def create_proof(self, signature, public_key, messages, nonce, revealed):
        from ursa_bbs_signatures import (
            BlsKeyPair,
            CreateProofRequest,
            ProofMessage,
            ProofMessageType,
            create_proof,
        )

        revealed_set = set(revealed)
        proof_messages = [
            ProofMessage(
                message=message.encode("utf-8"),
                proof_type=(
                    ProofMessageType.Revealed
                    if index in revealed_set
                    else ProofMessageType.HiddenProofSpecificBlinding
                ),
            )
            for index, message in enumerate(messages)
        ]

        try:
            bls_key_pair = BlsKeyPair(public_key=public_key)
            request = CreateProofRequest(
                public_key=bls_key_pair.get_bbs_key(len(messages)),
                messages=proof_messages,
                signature=signature,
                nonce=nonce,
            )
            return create_proof(request)
        except Exception as exc:
            raise SignaturePrimitiveError(f"Failed to create proof: {exc}") from exc

    def verify_proof(self, proof, public_key, message_count, messages, nonce, revealed):
        from ursa_bbs_signatures import BlsKeyPair, VerifyProofRequest, verify_proof

        messages = sort_revealed_messages(messages, revealed)
        try:
            bls_key_pair = BlsKeyPair(public_key=public_key)
            request = VerifyProofRequest(
                public_key=bls_key_pair.get_bbs_key(message_count),
                proof=proof,
                messages=[message.encode("utf-8") for message in messages],
                nonce=nonce,
            )
            return verify_proof(request)
        except Exception as exc:
            raise SignaturePrimitiveError(f"Failed to verify proof: {exc}") from exc
