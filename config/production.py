import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "ticketing"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "ticketing_db"),
}

KEYCLOAK_CONFIG = {
    "server_url": os.getenv("KEYCLOAK_URL", "http://keycloak:8080"),
    "realm": os.getenv("KEYCLOAK_REALM", "ticketing"),
    "client_id": os.getenv("KEYCLOAK_CLIENT_ID", "ticketing-app"),
    "master_realm": os.getenv("KEYCLOAK_MASTER_REALM", "master"),
    "master_client": os.getenv("KEYCLOAK_MASTER_CLIENT", "admin-cli"),
    "master_user": os.getenv("KEYCLOAK_MASTER_USER", "admin"),
    "master_password": os.getenv("KEYCLOAK_MASTER_PASSWORD", ""),
    "timeout_seconds": float(os.getenv("KEYCLOAK_TIMEOUT_SECONDS", "5")),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
