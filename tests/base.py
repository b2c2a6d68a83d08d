from datetime import datetime, timezone

from django.test import SimpleTestCase, override_settings

from ldproofs.keys import Bls12381G2KeyPair
from ldproofs.purposes import AssertionProofPurpose
from ldproofs.resolvers import DocumentLoader
from ldproofs.schemas import SECURITY_CONTEXT_BBS_URL, SECURITY_CONTEXT_URL
from ldproofs.suites import BbsBlsSignature2020

PEOPLE_CONTEXT_URL = "https://example.org/people/v1"
ISSUER_URI = "https://issuer.example/issuer"
KEY_ID = "https://issuer.example/keys/1"
REVOKED_KEY_ID = "https://issuer.example/keys/revoked"
KEY_MATERIAL = b"issuer-key-material-for-testing!"

PEOPLE_CONTEXT = {
    "@context": {
        "@version": 1.1,
        "schema": "http://schema.org/",
        "Person": "schema:Person",
        "firstName": "schema:firstName",
        "lastName": "schema:lastName",
        "jobTitle": "schema:jobTitle",
        "email": "schema:email",
        "telephone": "schema:telephone",
    }
}

ISSUER_KEY = Bls12381G2KeyPair(
    public_key=KEY_MATERIAL, secret_key=KEY_MATERIAL, id=KEY_ID, controller=ISSUER_URI
)
REVOKED_KEY = Bls12381G2KeyPair(
    public_key=KEY_MATERIAL, secret_key=KEY_MATERIAL, id=REVOKED_KEY_ID, controller=ISSUER_URI
)

ISSUER_DOCUMENT = {
    "@context": SECURITY_CONTEXT_URL,
    "id": ISSUER_URI,
    "assertionMethod": [KEY_ID, REVOKED_KEY_ID],
}

CONSTANT_DOCUMENTS = {
    PEOPLE_CONTEXT_URL: PEOPLE_CONTEXT,
    ISSUER_URI: ISSUER_DOCUMENT,
    KEY_ID: ISSUER_KEY.to_verification_method(),
    REVOKED_KEY_ID: {
        **REVOKED_KEY.to_verification_method(),
        "revoked": "2021-01-01T00:00:00Z",
    },
}

TEST_SETTINGS = {
    "SIGNATURE_PRIMITIVE": "tests.primitives.FakeBbsSignaturePrimitive",
    "DOCUMENT_RESOLVERS": ["ldproofs.resolvers.ConstantDocumentResolver"],
    "CONSTANT_DOCUMENTS": CONSTANT_DOCUMENTS,
}

DOCUMENT_CONTEXT = [SECURITY_CONTEXT_BBS_URL, PEOPLE_CONTEXT_URL]

UNSIGNED_DOCUMENT = {
    "@context": DOCUMENT_CONTEXT,
    "type": "Person",
    "firstName": "Jane",
    "lastName": "Does",
    "jobTitle": "Professor",
    "email": "jane.doe@example.com",
}

# Five document statements and four proof statements
DOCUMENT_STATEMENT_COUNT = 5
PROOF_STATEMENT_COUNT = 4

REVEAL_FIRST_NAME = {
    "@context": DOCUMENT_CONTEXT,
    "type": "Person",
    "@explicit": True,
    "firstName": {},
}

REVEAL_EVERYTHING = {
    "@context": DOCUMENT_CONTEXT,
    "type": "Person",
}

CREATED = datetime(2021, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@override_settings(LINKED_DATA_PROOFS=TEST_SETTINGS)
class BaseTestCase(SimpleTestCase):
    def setUp(self):
        self.document_loader = DocumentLoader()

    def sign_document(self, document=None, key=ISSUER_KEY):
        suite = BbsBlsSignature2020(key=key)
        unsigned = document or UNSIGNED_DOCUMENT
        proof = suite.create_proof(
            unsigned, AssertionProofPurpose(), self.document_loader, created=CREATED
        )
        return {**unsigned, "proof": proof}

