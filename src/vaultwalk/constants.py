"""Application-wide constants."""

APP_TITLE = "vaultwalk"

SEPARATOR = "/"

# Deepest path the navigator will descend into.
MAX_DEPTH = 32

DEFAULT_PATH = "secret/"
DEFAULT_TOKEN_FILE = "~/.vault-token"

ADDRESS_ENV_VAR = "VAULT_ADDR"
TOKEN_ENV_VAR = "VAULT_TOKEN"

# Answer that confirms a deletion; anything else keeps the key.
CONFIRM_ANSWER = "yes"

NEW_ENTRY_PLACEHOLDER = "<new key>"

# Full secret path -> value, served by MockStore.
MOCK_DATA: dict[str, str] = {
    "secret/apps/backend/database_url": "postgres://app_user:p@ssw0rd@db.prod.internal:5432/appdb",
    "secret/apps/backend/jwt_secret": "jwt-prod-xYz-7a8b9c0d",
    "secret/apps/backend/redis/url": "redis://:r3d1s_p@ss@cache.prod.internal:6379/0",
    "secret/apps/backend/redis/pool_size": "20",
    "secret/apps/frontend/api_key": "sk-live-4fGhJ8kLmNpQrStUvWxYz",
    "secret/apps/frontend/sentry_dsn": "https://abc123@o987654.ingest.sentry.io/1234567",
    "secret/infra/aws/access_key_id": "AKIAINFRAPROD1234567",
    "secret/infra/aws/secret_access_key": "infra-prod-secret-key-EXAMPLE",
    "secret/infra/datadog_api_key": "dd-prod-api-key-abc123",
    "secret/infra/pagerduty_token": "pd-prod-token-qwerty",
    "secret/shared/slack_webhook_url": "https://hooks.slack.com/services/T00/B00/prod",
    "secret/shared/smtp_password": "SG.prod-aBcDeFgH",
}

HELP_SECTIONS: list[tuple[str, list[tuple[str, str]]]] = [
    (
        "Navigation",
        [
            ("j / down", "Move down"),
            ("k / up", "Move up"),
            ("l / right / enter", "Enter directory"),
            ("h / left / backspace", "Leave directory"),
        ],
    ),
    (
        "Edit",
        [
            ("a", "Add a key in this directory"),
            ("r", "Rename selected key"),
            ("u", "Update selected value"),
            ("d", "Delete selected key"),
            ("escape", "Cancel input"),
        ],
    ),
    (
        "General",
        [
            ("c", "Clear cache and reload"),
            ("p", "Copy path to clipboard"),
            ("y", "Copy secret to clipboard"),
            ("?", "Toggle this help"),
            ("q / ctrl+c", "Quit"),
        ],
    ),
]
