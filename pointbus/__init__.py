"""Point subscription registry, subscription criteria and task function keyword parsing."""

__version__ = "0.1.0"

__all__ = [
    "types",
    "subscription_criteria",
    "subscriptions",
    "fn_conf_options",
    "fn_conf_keywd",
]