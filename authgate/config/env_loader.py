# authgate/config/env_loader.py
import os
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

# Load the app's .env once, without overriding values already in the environment
load_dotenv(find_dotenv(usecwd=True), override=False)

ENV_DOMAIN = 'AUTH0_DOMAIN'
ENV_CLIENT_ID = 'AUTH0_CLIENT_ID'
ENV_CLIENT_SECRET = 'AUTH0_CLIENT_SECRET'
ENV_SECRET_KEY = 'FLASK_SECRET_KEY'


def environment_defaults(environ: Optional[Mapping] = None) -> dict:
    """
    Build the environment-derived option bag.

    Unset variables come back as None; the resolver keeps the built-in
    default for those.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Dict shaped like the gate options ({'auth0': {...}, 'secret_key': ...})
    """
    if environ is None:
        environ = os.environ

    return {
        'auth0': {
            'domain': environ.get(ENV_DOMAIN),
            'client_id': environ.get(ENV_CLIENT_ID),
            'client_secret': environ.get(ENV_CLIENT_SECRET),
        },
        'secret_key': environ.get(ENV_SECRET_KEY),
    }
