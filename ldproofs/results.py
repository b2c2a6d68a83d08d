class PurposeResult:
    def __init__(self, valid: bool, error: Exception | None = None, controller: dict | None = None):
        self.valid = valid
        self.error = error
        self.controller = controller

    def __bool__(self):
        return self.valid


class ProofResult:
    """
    Outcome of verifying a single proof. Failures are reported through
    `error` instead of being raised.
    """

    def __init__(
        self,
        verified: bool,
        error: Exception | None = None,
        proof: dict | None = None,
        purpose_result: PurposeResult | None = None,
    ):
        self.verified = verified
        self.error = error
        self.proof = proof
        self.purpose_result = purpose_result

    def __bool__(self):
        return self.verified

    def serialize(self) -> dict:
        data = {"verified": self.verified}
        if self.error is not None:
            data["error"] = str(self.error)
            data["error_type"] = self.error.__class__.__name__
        return data
