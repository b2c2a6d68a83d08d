import json
import logging

from django.core.management.base import BaseCommand, CommandError
from pyld.jsonld import JsonLdError

from ldproofs.exceptions import LinkedDataProofException
from ldproofs.proofs import derive

logger = logging.getLogger(__name__)


def load_json(path):
    try:
        with open(path) as f:
            return json.load(f)
    except (OSError, ValueError) as exc:
        raise CommandError(f"Failed to read {path}: {exc}")


class Command(BaseCommand):
    help = "Derives a selective disclosure proof from a BBS+ signed document"

    def add_arguments(self, parser):
        parser.add_argument("document", type=str, help="Path to the signed JSON-LD document")
        parser.add_argument("reveal_document", type=str, help="Path to the JSON-LD reveal frame")
        parser.add_argument("--nonce", type=str, default=None, help="Nonce to bind the proof to")

    def handle(self, *args, **options):
        document = load_json(options["document"])
        reveal_document = load_json(options["reveal_document"])

        logger.info(f"Deriving proof from {options['document']}")
        try:
            derived = derive(document, reveal_document, nonce=options["nonce"])
        except (LinkedDataProofException, JsonLdError) as exc:
            raise CommandError(str(exc))

        self.stdout.write(json.dumps(derived, indent=2))
