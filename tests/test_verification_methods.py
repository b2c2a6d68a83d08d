from ldproofs.exceptions import (
    MissingVerificationMethodReference,
    VerificationMethodNotFound,
    VerificationMethodRevoked,
)
from ldproofs.keys import Bls12381G2KeyPair
from ldproofs.verification_methods import (
    get_verification_method,
    get_verification_method_reference,
)

from .base import ISSUER_URI, KEY_ID, KEY_MATERIAL, REVOKED_KEY_ID, BaseTestCase


class VerificationMethodReferenceTestCase(BaseTestCase):
    def test_accepts_identifier(self):
        self.assertEqual(get_verification_method_reference({"verificationMethod": KEY_ID}), KEY_ID)

    def test_accepts_embedded_object(self):
        proof = {"verificationMethod": {"id": KEY_ID, "type": "Bls12381G2Key2020"}}
        self.assertEqual(get_verification_method_reference(proof), KEY_ID)

    def test_missing_reference_fails(self):
        with self.assertRaises(MissingVerificationMethodReference):
            get_verification_method_reference({"type": "BbsBlsSignature2020"})

    def test_embedded_object_without_id_fails(self):
        with self.assertRaises(MissingVerificationMethodReference):
            get_verification_method_reference({"verificationMethod": {"type": "Test"}})


class VerificationMethodResolutionTestCase(BaseTestCase):
    def test_can_resolve_verification_method(self):
        verification_method = get_verification_method(
            {"verificationMethod": KEY_ID}, self.document_loader
        )
        self.assertEqual(verification_method["id"], KEY_ID)
        self.assertEqual(verification_method["controller"], ISSUER_URI)

        key = Bls12381G2KeyPair.from_verification_method(verification_method)
        self.assertEqual(key.public_key, KEY_MATERIAL)
        self.assertIsNone(key.secret_key)

    def test_revoked_verification_method_fails(self):
        with self.assertRaises(VerificationMethodRevoked):
            get_verification_method({"verificationMethod": REVOKED_KEY_ID}, self.document_loader)

    def test_unknown_fragment_is_not_found(self):
        with self.assertRaises(VerificationMethodNotFound):
            get_verification_method(
                {"verificationMethod": f"{KEY_ID}#unknown"}, self.document_loader
            )

    def test_resolved_identifiers_are_absolute(self):
        verification_method = get_verification_method(
            {"verificationMethod": {"id": KEY_ID}}, self.document_loader
        )
        self.assertEqual(verification_method["id"], KEY_ID)
        self.assertTrue(verification_method["controller"].startswith("https://"))
