import secrets

# Visually ambiguous characters (0/O, 1/l/I) are left out
TEMPORARY_PASSWORD_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz23456789"


def generate_temporary_password(length=10):
    return "".join(secrets.choice(TEMPORARY_PASSWORD_ALPHABET) for _ in range(length))


def generate_registration_token():
    return secrets.token_urlsafe(32)
