import json

import httpretty
from django.test import SimpleTestCase, override_settings

from ldproofs.exceptions import DocumentResolutionError
from ldproofs.resolvers import ConstantDocumentResolver, DocumentLoader, HttpDocumentResolver
from ldproofs.schemas import SECURITY_CONTEXT_BBS_URL, SECURITY_CONTEXT_URL

from .base import KEY_ID, TEST_SETTINGS, BaseTestCase

REMOTE_KEY_URI = "https://remote.example.com/keys/1"


class ConstantDocumentResolverTestCase(BaseTestCase):
    def setUp(self):
        self.resolver = ConstantDocumentResolver()

    def test_can_resolve_bundled_contexts(self):
        self.assertTrue(self.resolver.can_resolve(SECURITY_CONTEXT_URL))
        self.assertTrue(self.resolver.can_resolve(SECURITY_CONTEXT_BBS_URL))

    def test_can_resolve_configured_documents(self):
        remote_document = self.resolver.resolve(KEY_ID)
        self.assertEqual(remote_document["documentUrl"], KEY_ID)
        self.assertEqual(remote_document["document"]["id"], KEY_ID)

    def test_resolves_fragments_with_base_document(self):
        self.assertTrue(self.resolver.can_resolve(f"{KEY_ID}#fragment"))

    def test_can_not_resolve_unknown_uris(self):
        self.assertFalse(self.resolver.can_resolve("https://unknown.example.com/contexts/v1"))


@override_settings(
    LINKED_DATA_PROOFS={**TEST_SETTINGS, "DOCUMENT_RESOLVERS": ["ldproofs.resolvers.HttpDocumentResolver"]}
)
class HttpDocumentResolverTestCase(SimpleTestCase):
    def setUp(self):
        self.resolver = HttpDocumentResolver()

    def test_only_resolves_http_uris(self):
        self.assertTrue(self.resolver.can_resolve(REMOTE_KEY_URI))
        self.assertFalse(self.resolver.can_resolve("did:example:123"))

    @httpretty.activate
    def test_can_fetch_document(self):
        document = {"@context": SECURITY_CONTEXT_URL, "id": REMOTE_KEY_URI}
        httpretty.register_uri(
            httpretty.GET,
            REMOTE_KEY_URI,
            body=json.dumps(document),
            content_type="application/ld+json",
        )
        remote_document = self.resolver.resolve(REMOTE_KEY_URI)
        self.assertEqual(remote_document["document"], document)
        self.assertEqual(remote_document["documentUrl"], REMOTE_KEY_URI)
        self.assertIn("application/ld+json", httpretty.last_request().headers["Accept"])

    @httpretty.activate
    def test_redirects_are_not_followed(self):
        httpretty.register_uri(
            httpretty.GET,
            REMOTE_KEY_URI,
            status=302,
            adding_headers={"Location": "https://elsewhere.example.com/keys/1"},
        )
        with self.assertRaises(DocumentResolutionError):
            self.resolver.resolve(REMOTE_KEY_URI)

    @httpretty.activate
    def test_error_responses_fail(self):
        httpretty.register_uri(httpretty.GET, REMOTE_KEY_URI, status=404, body="Not Found")
        with self.assertRaises(DocumentResolutionError):
            self.resolver.resolve(REMOTE_KEY_URI)

    @httpretty.activate
    def test_non_json_responses_fail(self):
        httpretty.register_uri(httpretty.GET, REMOTE_KEY_URI, body="<html></html>")
        with self.assertRaises(DocumentResolutionError):
            self.resolver.resolve(REMOTE_KEY_URI)


class DocumentLoaderTestCase(BaseTestCase):
    def test_uses_first_resolver_that_can_resolve(self):
        loader = DocumentLoader()
        remote_document = loader(SECURITY_CONTEXT_BBS_URL, {})
        self.assertIn("@context", remote_document["document"])

    def test_fails_when_no_resolver_can_resolve(self):
        loader = DocumentLoader()
        with self.assertRaises(DocumentResolutionError):
            loader("https://unknown.example.com/contexts/v1", {})

    def test_accepts_explicit_resolvers(self):
        loader = DocumentLoader(resolvers=[HttpDocumentResolver])
        self.assertEqual(len(loader.resolvers), 1)
        self.assertIsInstance(loader.resolvers[0], HttpDocumentResolver)
