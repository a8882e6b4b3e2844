from datetime import datetime, timedelta, timezone
from functools import wraps

import jwt as pyjwt
from flask import abort, current_app, request

ALLOWED_ROLES = {"anon", "service_role"}


def issue_client_token(secret, role="anon", days=3650):
    """Mint the long-lived bearer credential the website ships with."""
    now = datetime.now(timezone.utc)
    return pyjwt.encode(
        {"role": role, "iat": now, "exp": now + timedelta(days=days)},
        secret,
        algorithm="HS256",
    )


# Token validation decorator
def client_token_required(f):
    @wraps(f)
    def decorated(*args, **kwargs):
        # Preflight requests carry no credentials
        if request.method == "OPTIONS":
            return f(*args, **kwargs)

        auth_header = request.headers.get("Authorization")
        if not auth_header:
            abort(401, description="Authorization header is missing")

        try:
            scheme, token = auth_header.split()
        except ValueError:
            abort(401, description="Invalid authorization header format")
        if scheme.lower() != "bearer":
            abort(401, description="Invalid authorization scheme")

        try:
            payload = pyjwt.decode(
                token, current_app.config["CLIENT_JWT_SECRET"], algorithms=["HS256"]
            )
        except pyjwt.ExpiredSignatureError:
            abort(401, description="Token has expired")
        except pyjwt.InvalidTokenError as e:
            abort(401, description=f"Invalid token: {str(e)}")

        if payload.get("role") not in ALLOWED_ROLES:
            abort(403, description="Token role is not allowed")

        return f(*args, **kwargs)
    return decorated
