import logging

from pyld import jsonld

logger = logging.getLogger(__name__)

CANONICALIZATION_ALGORITHM = "URDNA2015"
NQUADS_FORMAT = "application/n-quads"


def split_statements(nquads: str) -> list[str]:
    return [line for line in nquads.split("\n") if len(line) > 0]


def canonize(document, document_loader) -> str:
    return jsonld.normalize(
        document,
        {
            "algorithm": CANONICALIZATION_ALGORITHM,
            "format": NQUADS_FORMAT,
            "documentLoader": document_loader,
        },
    )


def canonize_statements(document, document_loader) -> list[str]:
    return split_statements(canonize(document, document_loader))


def from_statements(statements: list[str]):
    """Converts canonical statements back into expanded JSON-LD"""
    return jsonld.from_rdf("\n".join(statements), {"format": NQUADS_FORMAT})


def frame(document, template, document_loader):
    return jsonld.frame(document, template, {"documentLoader": document_loader})
