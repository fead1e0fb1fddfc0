import os

def _canon_prefix(val):
    """
    Normalize API prefix to always be exactly like '/api':
      - defaults to '/api' when unset/empty
      - ensures a single leading slash
      - removes any trailing slash (except for root)
    """
    val = (val or "/api").strip()
    if not val.startswith("/"):
        val = "/" + val
    if len(val) > 1 and val.endswith("/"):
        val = val[:-1]
    return val


def _parse_origins(raw):
    origins = [o.strip() for o in (raw or "").split(",") if o.strip()]
    # Fail fast: wildcard origins combined with credentials is unsafe
    if "*" in origins:
        raise ValueError(
            "ALLOWED_ORIGINS cannot include '*' (wildcard). Specify explicit, trusted origins."
        )
    return origins


API_PREFIX = _canon_prefix(os.getenv("API_PREFIX"))

ALLOWED_ORIGINS = _parse_origins(os.getenv("ALLOWED_ORIGINS"))
ALLOW_CREDENTIALS = os.getenv("ALLOW_CREDENTIALS", "false").lower() == "true"

LOG_LEVEL = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
