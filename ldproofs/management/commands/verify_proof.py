import json
import logging

from django.core.management.base import BaseCommand, CommandError

from ldproofs.proofs import verify
from ldproofs.purposes import ControllerProofPurpose, ProofPurpose

from .derive_proof import load_json

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Verifies the linked data proof of a JSON-LD document"

    def add_arguments(self, parser):
        parser.add_argument("document", type=str, help="Path to the JSON-LD document")
        parser.add_argument(
            "--purpose",
            type=str,
            default="assertionMethod",
            help="Expected proof purpose",
        )
        parser.add_argument(
            "--skip-controller-check",
            action="store_true",
            help="Do not check that the controller authorizes the verification method",
        )

    def handle(self, *args, **options):
        document = load_json(options["document"])

        if options["skip_controller_check"]:
            purpose = ProofPurpose(term=options["purpose"])
        else:
            purpose = ControllerProofPurpose(term=options["purpose"])

        result = verify(document, purpose=purpose)
        self.stdout.write(json.dumps(result.serialize(), indent=2))

        if not result.verified:
            raise CommandError("Verification failed")
