import logging
from typing import Optional

import base58

from .exceptions import SignatureDecodeError
from .schemas import SECURITY_CONTEXT_BBS_URL, SECURITY_CONTEXT_URL

logger = logging.getLogger(__name__)


class Bls12381G2KeyPair:
    type = "Bls12381G2Key2020"

    def __init__(
        self,
        public_key: bytes,
        secret_key: Optional[bytes] = None,
        id: Optional[str] = None,
        controller: Optional[str] = None,
    ):
        self.id = id
        self.controller = controller
        self.public_key = public_key
        self.secret_key = secret_key

    @property
    def public_key_base58(self) -> str:
        return base58.b58encode(self.public_key).decode("ascii")

    @classmethod
    def from_verification_method(cls, verification_method: dict) -> "Bls12381G2KeyPair":
        try:
            encoded = verification_method["publicKeyBase58"]
            public_key = base58.b58decode(encoded)
        except KeyError:
            raise SignatureDecodeError("Verification method has no publicKeyBase58")
        except ValueError as exc:
            raise SignatureDecodeError(f"Invalid publicKeyBase58: {exc}") from exc

        return cls(
            public_key=public_key,
            id=verification_method.get("id"),
            controller=verification_method.get("controller"),
        )

    def to_verification_method(self) -> dict:
        return {
            "@context": [SECURITY_CONTEXT_URL, SECURITY_CONTEXT_BBS_URL],
            "id": self.id,
            "type": self.type,
            "controller": self.controller,
            "publicKeyBase58": self.public_key_base58,
        }

    def __str__(self):
        return f"{self.type} {self.id or self.public_key_base58}"
