from rest_framework import serializers


class JsonObjectField(serializers.JSONField):
    default_error_messages = {"not_an_object": "Expected a JSON object."}

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        if not isinstance(value, dict):
            self.fail("not_an_object")
        return value


class DeriveProofSerializer(serializers.Serializer):
    document = JsonObjectField()
    revealDocument = JsonObjectField()
    nonce = serializers.CharField(required=False, allow_blank=False)

    def validate_document(self, value):
        if "proof" not in value:
            raise serializers.ValidationError("Document has no proof")
        return value


class VerifyProofSerializer(serializers.Serializer):
    document = JsonObjectField()
    proofPurpose = serializers.ChoiceField(
        choices=["assertionMethod", "authentication"], default="assertionMethod"
    )
