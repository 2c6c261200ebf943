"""Default conversion parameters (environment overrides are read once at import)."""
import os

MISSING_ATTRIBUTE_POLICIES = ("error", "null")
EXTRA_ATTRIBUTE_POLICIES = ("ignore", "error")

BRIDGE_CONFIG = {
    "max_depth": int(os.environ.get("TVBRIDGE_MAX_DEPTH", "100")),                  # nesting guard
    "missing_attributes": os.environ.get("TVBRIDGE_MISSING_ATTRIBUTES", "error"),   # "error" | "null"
    "extra_attributes": os.environ.get("TVBRIDGE_EXTRA_ATTRIBUTES", "ignore"),      # "ignore" | "error"
}


def resolve(overrides=None, **kw):
    """Merge *overrides* and keyword settings over ``BRIDGE_CONFIG`` and validate."""
    cfg = dict(BRIDGE_CONFIG)
    cfg.update(overrides or {})
    cfg.update({k: v for k, v in kw.items() if v is not None})
    if int(cfg["max_depth"]) < 1:
        raise ValueError(f"max_depth must be positive, got {cfg['max_depth']!r}")
    cfg["max_depth"] = int(cfg["max_depth"])
    if cfg["missing_attributes"] not in MISSING_ATTRIBUTE_POLICIES:
        raise ValueError(
            f"missing_attributes must be one of {MISSING_ATTRIBUTE_POLICIES}, got {cfg['missing_attributes']!r}"
        )
    if cfg["extra_attributes"] not in EXTRA_ATTRIBUTE_POLICIES:
        raise ValueError(
            f"extra_attributes must be one of {EXTRA_ATTRIBUTE_POLICIES}, got {cfg['extra_attributes']!r}"
        )
    return cfg
