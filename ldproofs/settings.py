import logging

from django.conf import settings
from django.test.signals import setting_changed
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)

MINIMUM_NONCE_SIZE = 50


class AppSettings:
    class Proofs:
        nonce_size = MINIMUM_NONCE_SIZE
        signature_primitive = "ldproofs.primitives.UrsaBbsSignaturePrimitive"

    class LinkedData:
        document_resolvers = [
            "ldproofs.resolvers.ConstantDocumentResolver",
            "ldproofs.resolvers.HttpDocumentResolver",
        ]
        constant_documents = {}

    class Http:
        timeout = 10

    @property
    def NONCE_SIZE(self):
        return max(self.Proofs.nonce_size, MINIMUM_NONCE_SIZE)

    @property
    def SIGNATURE_PRIMITIVE(self):
        return import_string(self.Proofs.signature_primitive)()

    @property
    def DOCUMENT_RESOLVERS(self):
        return [import_string(s) for s in self.LinkedData.document_resolvers]

    @property
    def CONSTANT_DOCUMENTS(self):
        return self.LinkedData.constant_documents

    @property
    def HTTP_TIMEOUT(self):
        return self.Http.timeout

    def __init__(self):
        self.load()

    def load(self):
        ATTRS = {
            "NONCE_SIZE": (self.Proofs, "nonce_size"),
            "SIGNATURE_PRIMITIVE": (self.Proofs, "signature_primitive"),
            "DOCUMENT_RESOLVERS": (self.LinkedData, "document_resolvers"),
            "CONSTANT_DOCUMENTS": (self.LinkedData, "constant_documents"),
            "HTTP_TIMEOUT": (self.Http, "timeout"),
        }
        DEFAULTS = {
            "NONCE_SIZE": MINIMUM_NONCE_SIZE,
            "SIGNATURE_PRIMITIVE": "ldproofs.primitives.UrsaBbsSignaturePrimitive",
            "DOCUMENT_RESOLVERS": [
                "ldproofs.resolvers.ConstantDocumentResolver",
                "ldproofs.resolvers.HttpDocumentResolver",
            ],
            "CONSTANT_DOCUMENTS": {},
            "HTTP_TIMEOUT": 10,
        }
        user_settings = getattr(settings, "LINKED_DATA_PROOFS", {})

        for setting, (setting_class, attr) in ATTRS.items():
            setattr(setting_class, attr, DEFAULTS[setting])

        for setting, value in user_settings.items():
            logger.debug(f"setting {setting} -> {value}")
            if setting not in ATTRS:
                logger.warning(f"Ignoring {setting} as it is not a setting for linked data proofs")
                continue

            setting_class, attr = ATTRS[setting]
            setattr(setting_class, attr, value)

        if self.Proofs.nonce_size < MINIMUM_NONCE_SIZE:
            logger.warning(
                f"NONCE_SIZE of {self.Proofs.nonce_size} bytes is too small, "
                f"using {MINIMUM_NONCE_SIZE}"
            )


app_settings = AppSettings()


def reload_settings(*args, **kw):
    setting = kw["setting"]
    if setting == "LINKED_DATA_PROOFS":
        app_settings.load()


setting_changed.connect(reload_settings)
