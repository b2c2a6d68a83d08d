import logging
from pathlib import Path

from django.apps import AppConfig
from pyld import jsonld

logger = logging.getLogger(__name__)


class LinkedDataProofsConfig(AppConfig):
    name = "ldproofs"
    verbose_name = "Linked Data Proofs"
    path = str(Path(__file__).parent)

    def ready(self):
        from .resolvers import DocumentLoader

        jsonld.set_document_loader(DocumentLoader())
