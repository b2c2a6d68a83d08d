import logging

from pyld.jsonld import JsonLdError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import LinkedDataProofException
from .proofs import derive, verify
from .purposes import AssertionProofPurpose, ControllerProofPurpose
from .resolvers import DocumentLoader
from .serializers import DeriveProofSerializer, VerifyProofSerializer

logger = logging.getLogger(__name__)


class DeriveProofView(APIView):
    def post(self, request):
        serializer = DeriveProofSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            derived = derive(
                data["document"],
                data["revealDocument"],
                document_loader=DocumentLoader(),
                nonce=data.get("nonce"),
            )
        except (LinkedDataProofException, JsonLdError) as exc:
            logger.info(f"Failed to derive proof: {exc}")
            return Response(
                {"error": str(exc), "error_type": exc.__class__.__name__},
                status=status.HTTP_422_UNPROCESSABLE_ENTITY,
            )
        return Response(derived, status=status.HTTP_201_CREATED)


class VerifyProofView(APIView):
    def get_purpose(self, term):
        if term == "assertionMethod":
            return AssertionProofPurpose()
        return ControllerProofPurpose(term=term)

    def post(self, request):
        serializer = VerifyProofSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        result = verify(
            data["document"],
            purpose=self.get_purpose(data["proofPurpose"]),
            document_loader=DocumentLoader(),
        )
        return Response(result.serialize(), status=status.HTTP_200_OK)
