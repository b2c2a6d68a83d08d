SECRET_KEY = "testing-key-11234567890"
ALLOWED_HOSTS = ["testserver"]
DEBUG = True

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "ldproofs",
]

MIDDLEWARE = [
    "django.middleware.common.CommonMiddleware",
]

APPEND_SLASH = False
ROOT_URLCONF = "tests.urls"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
USE_TZ = True
TIME_ZONE = "UTC"

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
}

LINKED_DATA_PROOFS = {
    "SIGNATURE_PRIMITIVE": "tests.primitives.FakeBbsSignaturePrimitive",
    "DOCUMENT_RESOLVERS": ["ldproofs.resolvers.ConstantDocumentResolver"],
}
