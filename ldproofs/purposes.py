import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from pyld import jsonld

from .exceptions import ProofPurposeError
from .results import PurposeResult
from .schemas import SECURITY_CONTEXT_URL

logger = logging.getLogger(__name__)


def parse_datetime(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class ProofPurpose:
    """
    Checks that a proof was created for the expected purpose and,
    when a maximum timestamp delta is set, that it is recent enough.
    """

    def __init__(
        self,
        term: str,
        date: Optional[datetime] = None,
        max_timestamp_delta: Optional[timedelta] = None,
    ):
        self.term = term
        self.date = date
        self.max_timestamp_delta = max_timestamp_delta

    def match(self, proof: dict) -> bool:
        return proof.get("proofPurpose") == self.term

    def update(self, proof: dict) -> dict:
        return {**proof, "proofPurpose": self.term}

    def _check_timestamp(self, proof: dict):
        if self.max_timestamp_delta is None:
            return

        created = proof.get("created")
        if not created:
            raise ProofPurposeError('Proof has no "created" timestamp')

        try:
            created_at = parse_datetime(created)
        except ValueError:
            raise ProofPurposeError(f"Invalid proof creation date: {created}")

        now = self.date or datetime.now(timezone.utc)
        if abs(now - created_at) > self.max_timestamp_delta:
            raise ProofPurposeError("The proof's created timestamp is out of range")

    def validate(
        self, proof: dict, document=None, suite=None, verification_method=None, document_loader=None
    ) -> PurposeResult:
        try:
            if not self.match(proof):
                raise ProofPurposeError(
                    f"Proof purpose {proof.get('proofPurpose')!r} does not match {self.term!r}"
                )
            self._check_timestamp(proof)
            return PurposeResult(valid=True)
        except ProofPurposeError as exc:
            return PurposeResult(valid=False, error=exc)


class ControllerProofPurpose(ProofPurpose):
    """
    Additionally requires the controller of the verification method to
    list it under the purpose term, e.g. `assertionMethod`.
    """

    def __init__(self, term: str, controller: Optional[dict] = None, **kw):
        super().__init__(term, **kw)
        self.controller = controller

    def _get_controller(self, verification_method: dict, document_loader) -> dict:
        if self.controller is not None:
            return self.controller

        controller_id = verification_method.get("controller") or verification_method.get("owner")
        if not controller_id:
            raise ProofPurposeError('Verification method has no "controller"')

        if isinstance(controller_id, dict):
            controller_id = controller_id.get("id")

        return jsonld.frame(
            controller_id,
            {
                "@context": SECURITY_CONTEXT_URL,
                "id": controller_id,
                self.term: {"@embed": "@never", "id": verification_method["id"]},
            },
            {
                "documentLoader": document_loader,
                "base": "",
                "expandContext": SECURITY_CONTEXT_URL,
            },
        )

    def validate(
        self, proof: dict, document=None, suite=None, verification_method=None, document_loader=None
    ) -> PurposeResult:
        result = super().validate(
            proof,
            document=document,
            suite=suite,
            verification_method=verification_method,
            document_loader=document_loader,
        )
        if not result.valid:
            return result

        try:
            if verification_method is None:
                raise ProofPurposeError("No verification method to check against the controller")

            controller = self._get_controller(verification_method, document_loader)
            authorized = controller.get(self.term) or []
            if not isinstance(authorized, list):
                authorized = [authorized]

            authorized_ids = [
                method.get("id") if isinstance(method, dict) else method for method in authorized
            ]
            if verification_method["id"] not in authorized_ids:
                raise ProofPurposeError(
                    f"Verification method {verification_method['id']} not authorized "
                    f"by controller for proof purpose {self.term!r}"
                )
            return PurposeResult(valid=True, controller=controller)
        except ProofPurposeError as exc:
            return PurposeResult(valid=False, error=exc)


class AssertionProofPurpose(ControllerProofPurpose):
    def __init__(self, **kw):
        super().__init__("assertionMethod", **kw)
