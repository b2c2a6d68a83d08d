import logging
from urllib import parse

from rdflib.namespace import Namespace

logger = logging.getLogger(__name__)

SEC = Namespace("https://w3id.org/security#")
CRED = Namespace("https://www.w3.org/2018/credentials#")

SECURITY_CONTEXT_V1_URL = "https://w3id.org/security/v1"
SECURITY_CONTEXT_V2_URL = "https://w3id.org/security/v2"
SECURITY_CONTEXT_URL = SECURITY_CONTEXT_V2_URL
SECURITY_CONTEXT_BBS_URL = "https://w3id.org/security/bbs/v1"
CREDENTIALS_CONTEXT_V1_URL = "https://www.w3.org/2018/credentials/v1"

SECURITY_PROOF_URL = str(SEC.proof)

SECv1_CONTEXT_DOCUMENT = {
    "@context": {
        "id": "@id",
        "type": "@type",
        "dc": "http://purl.org/dc/terms/",
        "sec": "https://w3id.org/security#",
        "xsd": "http://www.w3.org/2001/XMLSchema#",
        "EcdsaKoblitzSignature2016": "sec:EcdsaKoblitzSignature2016",
        "Ed25519Signature2018": "sec:Ed25519Signature2018",
        "EncryptedMessage": "sec:EncryptedMessage",
        "GraphSignature2012": "sec:GraphSignature2012",
        "LinkedDataSignature2015": "sec:LinkedDataSignature2015",
        "LinkedDataSignature2016": "sec:LinkedDataSignature2016",
        "CryptographicKey": "sec:Key",
        "canonicalizationAlgorithm": "sec:canonicalizationAlgorithm",
        "created": {"@id": "dc:created", "@type": "xsd:dateTime"},
        "creator": {"@id": "dc:creator", "@type": "@id"},
        "digestAlgorithm": "sec:digestAlgorithm",
        "digestValue": "sec:digestValue",
        "domain": "sec:domain",
        "expiration": {"@id": "sec:expiration", "@type": "xsd:dateTime"},
        "expires": {"@id": "sec:expiration", "@type": "xsd:dateTime"},
        "nonce": "sec:nonce",
        "normalizationAlgorithm": "sec:normalizationAlgorithm",
        "owner": {"@id": "sec:owner", "@type": "@id"},
        "publicKey": {"@id": "sec:publicKey", "@type": "@id"},
        "publicKeyBase58": "sec:publicKeyBase58",
        "publicKeyPem": "sec:publicKeyPem",
        "revoked": {"@id": "sec:revoked", "@type": "xsd:dateTime"},
        "signature": "sec:signature",
        "signatureAlgorithm": "sec:signingAlgorithm",
        "signatureValue": "sec:signatureValue",
    }
}

SECv2_CONTEXT_DOCUMENT = {
    "@context": [
        {"@version": 1.1},
        SECURITY_CONTEXT_V1_URL,
        {
            "Bls12381G1Key2020": "sec:Bls12381G1Key2020",
            "Bls12381G2Key2020": "sec:Bls12381G2Key2020",
            "EcdsaSecp256k1Signature2019": "sec:EcdsaSecp256k1Signature2019",
            "Ed25519VerificationKey2018": "sec:Ed25519VerificationKey2018",
            "assertionMethod": {
                "@id": "sec:assertionMethod",
                "@type": "@id",
                "@container": "@set",
            },
            "authentication": {
                "@id": "sec:authenticationMethod",
                "@type": "@id",
                "@container": "@set",
            },
            "capabilityDelegation": {
                "@id": "sec:capabilityDelegationMethod",
                "@type": "@id",
                "@container": "@set",
            },
            "capabilityInvocation": {
                "@id": "sec:capabilityInvocationMethod",
                "@type": "@id",
                "@container": "@set",
            },
            "challenge": "sec:challenge",
            "controller": {"@id": "sec:controller", "@type": "@id"},
            "jws": "sec:jws",
            "keyAgreement": {
                "@id": "sec:keyAgreementMethod",
                "@type": "@id",
                "@container": "@set",
            },
            "proof": {"@id": "sec:proof", "@type": "@id", "@container": "@graph"},
            "proofPurpose": {"@id": "sec:proofPurpose", "@type": "@vocab"},
            "proofValue": "sec:proofValue",
            "verificationMethod": {"@id": "sec:verificationMethod", "@type": "@id"},
        },
    ]
}


def _bbs_proof_context():
    return {
        "@version": 1.1,
        "@protected": True,
        "id": "@id",
        "type": "@type",
        "challenge": "https://w3id.org/security#challenge",
        "created": {
            "@id": "http://purl.org/dc/terms/created",
            "@type": "http://www.w3.org/2001/XMLSchema#dateTime",
        },
        "domain": "https://w3id.org/security#domain",
        "proofValue": "https://w3id.org/security#proofValue",
        "nonce": "https://w3id.org/security#nonce",
        "proofPurpose": {
            "@id": "https://w3id.org/security#proofPurpose",
            "@type": "@vocab",
            "@context": {
                "@version": 1.1,
                "@protected": True,
                "id": "@id",
                "type": "@type",
                "assertionMethod": {
                    "@id": "https://w3id.org/security#assertionMethod",
                    "@type": "@id",
                    "@container": "@set",
                },
                "authentication": {
                    "@id": "https://w3id.org/security#authenticationMethod",
                    "@type": "@id",
                    "@container": "@set",
                },
            },
        },
        "verificationMethod": {
            "@id": "https://w3id.org/security#verificationMethod",
            "@type": "@id",
        },
    }


def _bbs_key_context():
    return {
        "@version": 1.1,
        "@protected": True,
        "id": "@id",
        "type": "@type",
        "controller": {"@id": "https://w3id.org/security#controller", "@type": "@id"},
        "revoked": {
            "@id": "https://w3id.org/security#revoked",
            "@type": "http://www.w3.org/2001/XMLSchema#dateTime",
        },
        "publicKeyBase58": {"@id": "https://w3id.org/security#publicKeyBase58"},
    }


BBSv1_CONTEXT_DOCUMENT = {
    "@context": {
        "@version": 1.1,
        "id": "@id",
        "type": "@type",
        "BbsBlsSignature2020": {
            "@id": str(SEC.BbsBlsSignature2020),
            "@context": _bbs_proof_context(),
        },
        "BbsBlsSignatureProof2020": {
            "@id": str(SEC.BbsBlsSignatureProof2020),
            "@context": _bbs_proof_context(),
        },
        "Bls12381G1Key2020": {
            "@id": str(SEC.Bls12381G1Key2020),
            "@context": _bbs_key_context(),
        },
        "Bls12381G2Key2020": {
            "@id": str(SEC.Bls12381G2Key2020),
            "@context": _bbs_key_context(),
        },
    }
}

CREDENTIALSv1_CONTEXT_DOCUMENT = {
    "@context": {
        "@version": 1.1,
        "@protected": True,
        "id": "@id",
        "type": "@type",
        "VerifiableCredential": {
            "@id": str(CRED.VerifiableCredential),
            "@context": {
                "@version": 1.1,
                "@protected": True,
                "id": "@id",
                "type": "@type",
                "cred": "https://www.w3.org/2018/credentials#",
                "sec": "https://w3id.org/security#",
                "xsd": "http://www.w3.org/2001/XMLSchema#",
                "credentialSchema": {"@id": "cred:credentialSchema", "@type": "@id"},
                "credentialStatus": {"@id": "cred:credentialStatus", "@type": "@id"},
                "credentialSubject": {"@id": "cred:credentialSubject", "@type": "@id"},
                "evidence": {"@id": "cred:evidence", "@type": "@id"},
                "expirationDate": {"@id": "cred:expirationDate", "@type": "xsd:dateTime"},
                "holder": {"@id": "cred:holder", "@type": "@id"},
                "issued": {"@id": "cred:issued", "@type": "xsd:dateTime"},
                "issuer": {"@id": "cred:issuer", "@type": "@id"},
                "issuanceDate": {"@id": "cred:issuanceDate", "@type": "xsd:dateTime"},
                "proof": {"@id": "sec:proof", "@type": "@id", "@container": "@graph"},
                "refreshService": {"@id": "cred:refreshService", "@type": "@id"},
                "termsOfUse": {"@id": "cred:termsOfUse", "@type": "@id"},
                "validFrom": {"@id": "cred:validFrom", "@type": "xsd:dateTime"},
                "validUntil": {"@id": "cred:validUntil", "@type": "xsd:dateTime"},
            },
        },
        "VerifiablePresentation": {
            "@id": str(CRED.VerifiablePresentation),
            "@context": {
                "@version": 1.1,
                "@protected": True,
                "id": "@id",
                "type": "@type",
                "cred": "https://www.w3.org/2018/credentials#",
                "sec": "https://w3id.org/security#",
                "holder": {"@id": "cred:holder", "@type": "@id"},
                "proof": {"@id": "sec:proof", "@type": "@id", "@container": "@graph"},
                "verifiableCredential": {
                    "@id": "cred:verifiableCredential",
                    "@type": "@id",
                    "@container": "@graph",
                },
            },
        },
        "proof": {"@id": SECURITY_PROOF_URL, "@type": "@id", "@container": "@graph"},
    }
}


def _definition(document_url, document):
    return {
        "contentType": "application/ld+json",
        "documentUrl": document_url,
        "contextUrl": None,
        "document": document,
    }


SCHEMA_DEFINITIONS = {
    "w3id.org/security/v1": _definition(SECURITY_CONTEXT_V1_URL, SECv1_CONTEXT_DOCUMENT),
    "w3id.org/security/v2": _definition(SECURITY_CONTEXT_V2_URL, SECv2_CONTEXT_DOCUMENT),
    "w3id.org/security/bbs/v1": _definition(SECURITY_CONTEXT_BBS_URL, BBSv1_CONTEXT_DOCUMENT),
    "www.w3.org/2018/credentials/v1": _definition(
        CREDENTIALS_CONTEXT_V1_URL, CREDENTIALSv1_CONTEXT_DOCUMENT
    ),
}


def get_schema_key(url: str):
    pieces = parse.urlparse(url)
    if pieces.hostname is None:
        return None
    return pieces.hostname + pieces.path.rstrip("/")


def builtin_document_loader(url: str, options={}):
    key = get_schema_key(url)
    if key not in SCHEMA_DEFINITIONS:
        logger.info(f"No bundled json-ld document for {url!r}")
        return None
    return SCHEMA_DEFINITIONS[key]


__all__ = [
    "SEC",
    "CRED",
    "SECURITY_CONTEXT_URL",
    "SECURITY_CONTEXT_BBS_URL",
    "CREDENTIALS_CONTEXT_V1_URL",
]
