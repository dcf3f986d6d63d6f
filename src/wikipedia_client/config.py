# wikipedia_client/src/wikipedia_client/config.py
"""
Configuration et constantes pour Wikipedia Client
"""

# ---------- Configuration URL ----------
LANGUAGE_URL_MARKER = "{language}"
DEFAULT_PRE_LANGUAGE_URL = "https://"
DEFAULT_LANGUAGE = "en"
DEFAULT_POST_LANGUAGE_URL = ".wikipedia.org/w/api.php"

# ---------- Configuration réseau ----------
API_TIMEOUT = 10
DEFAULT_USER_AGENT = "wikipedia-client/0.1 (python-requests)"

# ---------- Configuration retry/backoff (transport uniquement) ----------
MAX_RETRIES = 1  # une seule tentative: pas de retry par défaut
INITIAL_BACKOFF = 1.0  # seconds
MAX_BACKOFF = 30.0
JITTER = 0.3  # fraction for jitter

# ---------- Limites des requêtes ----------
SEARCH_RESULTS = 10
IMAGES_RESULTS = "max"
MAX_REDIRECTS = 1
MAX_IMAGE_PAGES = None  # None = pas de limite

# ---------- Bornes de validation (geosearch) ----------
LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)
RADIUS_RANGE = (10, 10000)

# ---------- Variables d'environnement ----------
USER_AGENT_ENV_VAR = "WIKIPEDIA_CLIENT_USER_AGENT"
