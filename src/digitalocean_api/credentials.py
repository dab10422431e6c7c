"""API token loading.

Tokens are opaque bearer credentials. They are read once, either from a
file (first line, whitespace stripped) or from an environment variable,
and then passed explicitly to every API call.
"""

import os
from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)

TOKEN_ENV_VAR = "DIGITALOCEAN_TOKEN"


def load_token(
    token_file: str | Path | None = None,
    env_var: str = TOKEN_ENV_VAR,
) -> str:
    """Load a DigitalOcean API token.

    Args:
        token_file: Path to a file whose first line is the token. Takes
            precedence over the environment when given.
        env_var: Environment variable consulted when no file is given.

    Returns:
        The token string.

    Raises:
        FileNotFoundError: If token_file is specified but doesn't exist.
        ValueError: If no non-empty token could be found.
    """
    if token_file:
        token_path = Path(token_file)
        if not token_path.exists():
            msg = f"Token file not found: {token_file}"
            raise FileNotFoundError(msg)
        lines = token_path.read_text().splitlines()
        token = lines[0].strip() if lines else ""
        source = str(token_path)
    else:
        token = os.environ.get(env_var, "").strip()
        source = env_var

    if not token:
        msg = f"No API token found in {source}"
        raise ValueError(msg)

    logger.debug("Loaded API token", source=source)
    return token
