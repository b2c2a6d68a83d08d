import logging

import requests

from .exceptions import DocumentResolutionError
from .schemas import SCHEMA_DEFINITIONS, builtin_document_loader, get_schema_key
from .settings import app_settings

logger = logging.getLogger(__name__)


class BaseDocumentResolver:
    def can_resolve(self, uri):
        raise NotImplementedError

    def resolve(self, uri):
        raise NotImplementedError


class ConstantDocumentResolver(BaseDocumentResolver):
    """
    Serves the bundled JSON-LD contexts and any document registered
    under the CONSTANT_DOCUMENTS setting without touching the network.
    """

    def _get_constant_document(self, uri):
        documents = app_settings.CONSTANT_DOCUMENTS
        if uri in documents:
            return documents[uri]

        # Fragment identifiers are resolved against their base document
        base_uri = uri.split("#", 1)[0]
        return documents.get(base_uri)

    def can_resolve(self, uri):
        if self._get_constant_document(uri) is not None:
            return True
        return get_schema_key(uri) in SCHEMA_DEFINITIONS

    def resolve(self, uri):
        document = self._get_constant_document(uri)
        if document is not None:
            return {
                "contentType": "application/ld+json",
                "documentUrl": uri,
                "contextUrl": None,
                "document": document,
            }
        return builtin_document_loader(uri)


class HttpDocumentResolver(BaseDocumentResolver):
    def can_resolve(self, uri):
        return uri.startswith("http://") or uri.startswith("https://")

    def resolve(self, uri):
        try:
            response = requests.get(
                uri,
                headers={"Accept": "application/ld+json,application/json"},
                allow_redirects=False,
                timeout=app_settings.HTTP_TIMEOUT,
            )
        except requests.RequestException as exc:
            raise DocumentResolutionError(f"Failed to fetch {uri}: {exc}") from exc

        if 300 <= response.status_code < 400:
            location = response.headers.get("Location")
            raise DocumentResolutionError(f"{uri} redirects to {location}")
        elif response.status_code >= 400:
            raise DocumentResolutionError(f"{uri} returned status {response.status_code}")

        try:
            document = response.json()
        except ValueError as exc:
            raise DocumentResolutionError(f"{uri} did not return a json document") from exc

        return {
            "contentType": response.headers.get("Content-Type", "application/ld+json"),
            "documentUrl": uri,
            "contextUrl": None,
            "document": document,
        }


class DocumentLoader:
    """
    pyld compatible document loader that delegates to the
    configured document resolvers, in order.
    """

    def __init__(self, resolvers=None):
        resolver_classes = resolvers or app_settings.DOCUMENT_RESOLVERS
        self.resolvers = [resolver_class() for resolver_class in resolver_classes]

    def __call__(self, url, options=None):
        for resolver in self.resolvers:
            if not resolver.can_resolve(url):
                continue
            logger.debug(f"Resolving {url} with {resolver.__class__.__name__}")
            remote_document = resolver.resolve(url)
            if remote_document is not None:
                return remote_document

        raise DocumentResolutionError(f"Could not resolve {url}")
