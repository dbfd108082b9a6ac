import os

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "fees-insecure-secret-key")

DEBUG = os.getenv("DJANGO_DEBUG", "False").lower() in ("true", "1")

INSTALLED_APPS = [
    "fees",
]

USE_TZ = True

BILLING_CONFIG = {
    "SUPPORTED_CURRENCIES": [
        currency.strip().upper()
        for currency in os.getenv("BILLING_SUPPORTED_CURRENCIES", "EUR,USD,GBP").split(",")
        if currency.strip()
    ],
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{asctime} {name} {levelname} (pid: {process}) {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "fees": {
            "level": os.getenv("BILLING_LOG_LEVEL", "INFO"),
        },
    },
}
