"""Translation service implementations.

Importing this package registers every service with TransInterface.

Modules:
- DeeplTranslation: DeepL through the official client library.
- GoogleCloudTranslation: Google Cloud Translation API v2.
- GoogleTranslation: Google Translate free web endpoint through the shared HTTP client.
"""

from core.trans.engines.trans_deepl import DeeplTranslation
from core.trans.engines.trans_google import GoogleTranslation
from core.trans.engines.trans_google_cloud import GoogleCloudTranslation

__all__: list[str] = [
    "DeeplTranslation",
    "GoogleCloudTranslation",
    "GoogleTranslation",
]
