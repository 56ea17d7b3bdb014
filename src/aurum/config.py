"""Accessors for the ``[custom]`` section of ``domain.toml``.

Every setting has a code default so the engine also runs when the config
file (or an environment overlay) leaves a key out.
"""

from protean.utils.globals import current_domain

DEFAULTS = {
    "area_check_delay_seconds": 0.8,
    "checkout_delay_seconds": 2.0,
    "order_id_prefix": "ORD-",
    "service_regions": {"Pune": "411", "Kolhapur": "416"},
}


def setting(key, domain=None):
    domain = domain or current_domain
    custom = domain.config.get("custom") or {}
    value = custom.get(key)
    return DEFAULTS.get(key) if value is None else value


def area_check_delay(domain=None) -> float:
    return float(setting("area_check_delay_seconds", domain))


def checkout_delay(domain=None) -> float:
    return float(setting("checkout_delay_seconds", domain))


def order_id_prefix(domain=None) -> str:
    return str(setting("order_id_prefix", domain))


def service_regions(domain=None) -> dict[str, str]:
    return dict(setting("service_regions", domain))
