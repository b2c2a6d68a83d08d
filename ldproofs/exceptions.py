class LinkedDataProofException(Exception):
    pass


class ProofTypeMismatch(LinkedDataProofException):
    pass


class SignatureDecodeError(LinkedDataProofException):
    pass


class StatementReconciliationError(LinkedDataProofException):
    pass


class MissingVerificationMethodReference(LinkedDataProofException):
    pass


class VerificationMethodNotFound(LinkedDataProofException):
    pass


class VerificationMethodRevoked(LinkedDataProofException):
    pass


class SignaturePrimitiveError(LinkedDataProofException):
    pass


class ProofPurposeError(LinkedDataProofException):
    pass


class DocumentResolutionError(LinkedDataProofException):
    pass
